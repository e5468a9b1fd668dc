"""
Data models for the sectorfile library.

This package contains the immutable records produced by the parsers:
coordinates and colors, the navaids that act as waypoints, the sector model
with its geometry groups and regions, and the overlay and annotation models
read from the companion files.
"""

from .coordinate import Coordinate, Projection, is_latitude, is_longitude
from .color import Color
from .navaid import Waypoint, Vor, Ndb, Fix, Airport
from .sector import (
    Segment,
    GeoGroup,
    Polygon,
    Region,
    Runway,
    Label,
    SectorInfo,
    SectorModel,
    endpoint_position,
)
from .overlay import Overlay
from .annotations import AtcPosition, Annotations

__all__ = [
    # Geometry primitives
    'Coordinate',
    'Projection',
    'is_latitude',
    'is_longitude',
    'Color',
    # Waypoints
    'Waypoint',
    'Vor',
    'Ndb',
    'Fix',
    'Airport',
    # Sector model
    'Segment',
    'GeoGroup',
    'Polygon',
    'Region',
    'Runway',
    'Label',
    'SectorInfo',
    'SectorModel',
    'endpoint_position',
    # Companion files
    'Overlay',
    'AtcPosition',
    'Annotations',
]
