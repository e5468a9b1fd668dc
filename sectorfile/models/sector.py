"""
Parsed sector file model.

Everything here is created during a single parse pass and frozen when the
pass completes. Collections are tuples and the color table is a read-only
mapping, so a SectorModel can be handed around without defensive copies.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple, Union

from .color import Color
from .coordinate import Coordinate
from .navaid import Airport, Fix, Ndb, Vor, Waypoint

Endpoint = Union[Coordinate, Waypoint]


def endpoint_position(endpoint: Endpoint) -> Coordinate:
    """Return the coordinate of a segment endpoint, following waypoint references."""
    if isinstance(endpoint, Waypoint):
        return endpoint.position
    return endpoint


@dataclass(frozen=True)
class Segment:
    """A directed line between two endpoints, optionally colored."""

    start: Endpoint
    end: Endpoint
    color: Optional[Color] = None


@dataclass(frozen=True)
class GeoGroup:
    """Segments sharing one title inside a geometry section."""

    id: str
    segments: Tuple[Segment, ...] = ()


@dataclass(frozen=True)
class Polygon:
    color: Color
    points: Tuple[Coordinate, ...] = ()


@dataclass(frozen=True)
class Region:
    """A named set of filled polygons."""

    id: str
    polygons: Tuple[Polygon, ...] = ()


@dataclass(frozen=True)
class Runway:
    """Runway centerline with both end designators."""

    id: str
    opposite_id: str
    heading: float
    opposite_heading: float
    start: Coordinate
    end: Coordinate
    icao: str
    airport_name: str = ''

    @property
    def full_name(self) -> str:
        """Name used by overlay files to select this runway."""
        return f"{self.icao} {self.airport_name} {self.id}-{self.opposite_id}"


@dataclass(frozen=True)
class Label:
    """Text placed at a position, with an optional color."""

    text: str
    position: Coordinate
    color: Optional[Color] = None


@dataclass(frozen=True)
class SectorInfo:
    """
    Positional header block of the [INFO] section.

    A slot is None when its line is missing from the file. The center is
    only set when both the latitude and longitude lines are present.
    """

    sector_filename: Optional[str] = None
    default_callsign: Optional[str] = None
    default_airport: Optional[str] = None
    center: Optional[Coordinate] = None
    nm_per_lat_degree: Optional[Union[int, float]] = None
    nm_per_lon_degree: Optional[Union[int, float]] = None
    magnetic_variation: Optional[Union[int, float]] = None
    sector_scale: Optional[Union[int, float]] = None


@dataclass(frozen=True)
class SectorModel:
    """Root of a parsed sector file."""

    info: SectorInfo = field(default_factory=SectorInfo)
    defines: Mapping[str, Color] = field(default_factory=lambda: MappingProxyType({}))
    vors: Tuple[Vor, ...] = ()
    ndbs: Tuple[Ndb, ...] = ()
    fixes: Tuple[Fix, ...] = ()
    airports: Tuple[Airport, ...] = ()
    runways: Tuple[Runway, ...] = ()
    artcc: Tuple[GeoGroup, ...] = ()
    artcc_high: Tuple[GeoGroup, ...] = ()
    artcc_low: Tuple[GeoGroup, ...] = ()
    sid: Tuple[GeoGroup, ...] = ()
    star: Tuple[GeoGroup, ...] = ()
    high_airway: Tuple[GeoGroup, ...] = ()
    low_airway: Tuple[GeoGroup, ...] = ()
    geo: Tuple[GeoGroup, ...] = ()
    regions: Tuple[Region, ...] = ()
    labels: Tuple[Label, ...] = ()

    def summary(self) -> Dict[str, int]:
        """Count the objects of each collection."""
        return {
            'defines': len(self.defines),
            'vors': len(self.vors),
            'ndbs': len(self.ndbs),
            'fixes': len(self.fixes),
            'airports': len(self.airports),
            'runways': len(self.runways),
            'artcc': len(self.artcc),
            'artcc_high': len(self.artcc_high),
            'artcc_low': len(self.artcc_low),
            'sid': len(self.sid),
            'star': len(self.star),
            'high_airway': len(self.high_airway),
            'low_airway': len(self.low_airway),
            'geo': len(self.geo),
            'regions': len(self.regions),
            'labels': len(self.labels),
        }

    def __str__(self) -> str:
        name = self.info.sector_filename or 'unnamed sector'
        return f"SectorModel({name}, {sum(self.summary().values())} objects)"
