"""
Parser for the .sct sector file format.

A sector file is read in a single pass. Bracketed headers switch the current
section, '#define' lines register colors in any section and every other line
is handed to the handler of the current section. Navaids, fixes and airports
are registered as waypoints as soon as their line is read, so geometry lines
may reference them by name, but only after they have been declared.

Example:
    sector = parse_sct('''
        #define COLOR_APP 13158600
        [VOR]
        AAL 116.700 N057.06.14.158 E009.59.34.108
        [STAR]
        EKYT STAR AAL AAL N057.10.00.000 E010.00.00.000 COLOR_APP
    ''')
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional

from ..exceptions import CoordinateFormatError, UnrecognizedLineError
from ..models.coordinate import Coordinate
from ..models.navaid import Airport, Fix, Ndb, Vor, Waypoint
from ..models.sector import Label, Runway, SectorModel
from .base import (
    SectionedFileParser,
    is_comment,
    numbered_lines,
    parse_section_header,
    split_fields,
    strip_comment,
)
from .geo import GeoAccumulator
from .info import InfoLine, structured_info
from .regions import REGION_NAME_KEYWORD, RegionBuilder
from .registry import ColorTable, WaypointRegistry
from .sections import GEO_SECTIONS, Section

logger = logging.getLogger(__name__)

DEFINE_KEYWORD = '#define'


def _coordinate(lat: str, lon: str, line: int) -> Coordinate:
    try:
        return Coordinate.from_dms(lat, lon).validate()
    except CoordinateFormatError as e:
        raise e.with_line(line)


def _require(parts: List[str], count: int, layout: str, line: int) -> None:
    if len(parts) < count:
        raise UnrecognizedLineError(line, f"Expected '{layout}', got '{' '.join(parts)}'")


class _SectorReader:
    """Mutable state of one parse call."""

    def __init__(self, seed: Optional[Iterable[Waypoint]]):
        self.section: Optional[Section] = None
        self.colors = ColorTable()
        self.waypoints = WaypointRegistry(seed)
        self.info_lines: List[InfoLine] = []
        self.vors: List[Vor] = []
        self.ndbs: List[Ndb] = []
        self.fixes: List[Fix] = []
        self.airports: List[Airport] = []
        self.runways: List[Runway] = []
        self.labels: List[Label] = []
        self.geo: Dict[Section, GeoAccumulator] = {
            section: GeoAccumulator(self.colors, self.waypoints) for section in GEO_SECTIONS
        }
        self.regions = RegionBuilder(self.colors)
        self.handlers: Dict[Section, Callable[[List[str], int, str], None]] = {
            Section.VOR: self._parse_vor,
            Section.NDB: self._parse_ndb,
            Section.FIXES: self._parse_fix,
            Section.AIRPORT: self._parse_airport,
            Section.RUNWAY: self._parse_runway,
            Section.REGIONS: self._parse_region,
            Section.LABELS: self._parse_label,
        }

    def read(self, text: str) -> SectorModel:
        for line_number, line in numbered_lines(text):
            if not line or is_comment(line):
                continue
            if line.startswith('['):
                self.section = parse_section_header(line, line_number, Section)
                logger.debug(f"Line {line_number}: entering section [{self.section.value}]")
            elif line.startswith(DEFINE_KEYWORD):
                self.colors.define_line(line, line_number)
            elif self.section is None:
                raise UnrecognizedLineError(line_number)
            elif self.section == Section.INFO:
                self.info_lines.append((line_number, strip_comment(line)))
            else:
                parts = split_fields(line)
                if not parts:
                    continue
                if self.section.is_geo:
                    self.geo[self.section].add_line(parts, line_number)
                else:
                    self.handlers[self.section](parts, line_number, line)
        return self._assemble()

    def _register(self, waypoint: Waypoint) -> None:
        self.waypoints.register(waypoint)

    def _parse_vor(self, parts: List[str], line: int, text: str) -> None:
        _require(parts, 4, 'id frequency lat lon', line)
        id, frequency, lat, lon = parts[:4]
        vor = Vor(id=id, position=_coordinate(lat, lon, line), frequency=frequency)
        self.vors.append(vor)
        self._register(vor)

    def _parse_ndb(self, parts: List[str], line: int, text: str) -> None:
        _require(parts, 4, 'id frequency lat lon', line)
        id, frequency, lat, lon = parts[:4]
        ndb = Ndb(id=id, position=_coordinate(lat, lon, line), frequency=frequency)
        self.ndbs.append(ndb)
        self._register(ndb)

    def _parse_fix(self, parts: List[str], line: int, text: str) -> None:
        _require(parts, 3, 'id lat lon', line)
        id, lat, lon = parts[:3]
        fix = Fix(id=id, position=_coordinate(lat, lon, line))
        self.fixes.append(fix)
        self._register(fix)

    def _parse_airport(self, parts: List[str], line: int, text: str) -> None:
        _require(parts, 4, 'id frequency lat lon class', line)
        id, frequency, lat, lon = parts[:4]
        airport = Airport(
            id=id,
            position=_coordinate(lat, lon, line),
            frequency=frequency,
            airport_class=parts[4] if len(parts) > 4 else ''
        )
        self.airports.append(airport)
        self._register(airport)

    def _parse_runway(self, parts: List[str], line: int, text: str) -> None:
        _require(parts, 9, 'id oppositeId heading oppositeHeading startLat startLon endLat endLon icao [name]', line)
        id, opposite_id, heading, opposite_heading, start_lat, start_lon, end_lat, end_lon, icao = parts[:9]
        try:
            headings = float(heading), float(opposite_heading)
        except ValueError:
            raise UnrecognizedLineError(line, f"Expected numeric runway headings, got '{heading}' and '{opposite_heading}'")
        self.runways.append(Runway(
            id=id,
            opposite_id=opposite_id,
            heading=headings[0],
            opposite_heading=headings[1],
            start=_coordinate(start_lat, start_lon, line),
            end=_coordinate(end_lat, end_lon, line),
            icao=icao,
            airport_name=' '.join(parts[9:])
        ))

    def _parse_region(self, parts: List[str], line: int, text: str) -> None:
        if text.startswith(REGION_NAME_KEYWORD):
            self.regions.start_region(text, line)
        else:
            self.regions.add_point(parts, line)

    def _parse_label(self, parts: List[str], line: int, text: str) -> None:
        _require(parts, 3, 'text lat lon color', line)
        lat, lon, color = parts[-3:]
        self.labels.append(Label(
            text=' '.join(parts[:-3]),
            position=_coordinate(lat, lon, line),
            color=self.colors.resolve(color, line)
        ))

    def _assemble(self) -> SectorModel:
        geo = {attribute: self.geo[section].groups() for section, attribute in GEO_SECTIONS.items()}
        model = SectorModel(
            info=structured_info(self.info_lines),
            defines=self.colors.freeze(),
            vors=tuple(self.vors),
            ndbs=tuple(self.ndbs),
            fixes=tuple(self.fixes),
            airports=tuple(self.airports),
            runways=tuple(self.runways),
            regions=self.regions.regions(),
            labels=tuple(self.labels),
            **geo
        )
        logger.info(f"Parsed sector file with {sum(model.summary().values())} objects")
        return model


class SectorParser(SectionedFileParser):
    """
    Parser for .sct sector files.

    The parser keeps no state between calls; the optional waypoints given at
    construction seed the registry of every parse, as if they were declared
    at the top of the file, without being added to the output.
    """

    def __init__(self, waypoints: Optional[Iterable[Waypoint]] = None):
        """
        Initialize the parser.

        Args:
            waypoints: Supplementary waypoints, for example from parse_isec
        """
        self.seed = list(waypoints) if waypoints else []

    def parse(self, text: str) -> SectorModel:
        """
        Parse a complete sector file.

        Args:
            text: Decoded file content

        Returns:
            The frozen SectorModel

        Raises:
            SectorFileError: On the first malformed line, no partial model is returned
        """
        return _SectorReader(self.seed).read(text)


def parse_sct(text: str, waypoints: Optional[Iterable[Waypoint]] = None) -> SectorModel:
    """Parse a sector file, optionally seeding the waypoint registry."""
    return SectorParser(waypoints).parse(text)
