from enum import Enum


class Section(Enum):
    """Sections of a .sct file, valued by their header keyword."""
    INFO = "INFO"
    VOR = "VOR"
    NDB = "NDB"
    FIXES = "FIXES"
    AIRPORT = "AIRPORT"
    RUNWAY = "RUNWAY"
    ARTCC = "ARTCC"
    ARTCC_HIGH = "ARTCC HIGH"
    ARTCC_LOW = "ARTCC LOW"
    SID = "SID"
    STAR = "STAR"
    HIGH_AIRWAY = "HIGH AIRWAY"
    LOW_AIRWAY = "LOW AIRWAY"
    GEO = "GEO"
    REGIONS = "REGIONS"
    LABELS = "LABELS"

    @property
    def is_geo(self) -> bool:
        """True for the eight sections made of titled line segments."""
        return self in GEO_SECTIONS


# Geometry sections and the SectorModel attribute each one fills
GEO_SECTIONS = {
    Section.ARTCC: 'artcc',
    Section.ARTCC_HIGH: 'artcc_high',
    Section.ARTCC_LOW: 'artcc_low',
    Section.SID: 'sid',
    Section.STAR: 'star',
    Section.HIGH_AIRWAY: 'high_airway',
    Section.LOW_AIRWAY: 'low_airway',
    Section.GEO: 'geo',
}


class EseSection(Enum):
    """Sections of an .ese annotation file."""
    POSITIONS = "POSITIONS"
    SIDSSTARS = "SIDSSTARS"
    AIRSPACE = "AIRSPACE"
    RADAR = "RADAR"
    FREETEXT = "FREETEXT"
    GROUND = "GROUND"
