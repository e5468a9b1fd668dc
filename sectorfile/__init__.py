"""
Sector file (.sct) parsing library.

This package reads the text files that describe controller radar maps:
navaids, runways, airspace boundaries, procedures, airways, regions and
labels, together with the companion overlay (.asr), annotation (.ese) and
supplementary waypoint files.

The main public API includes:
- parse_sct / SectorParser: Sector file parser producing a SectorModel
- parse_asr, parse_ese, parse_isec: Companion file parsers
- Coordinate: Position with DMS parsing and map projections
- to_geojson: GeoJSON export of a parsed sector
- SectorFileSource: Cached download of published sector files
"""

from .exceptions import (
    SectorFileError,
    UnknownSectionError,
    UnrecognizedLineError,
    CoordinateFormatError,
    UnresolvedWaypointError,
    UndefinedColorError,
    ColorDefineError,
    MalformedRegionError,
)
from .models import Coordinate, Color, Projection, SectorModel
from .parsers import SectorParser, parse_sct, parse_asr, parse_ese, parse_isec
from .export import to_geojson, waypoints_dataframe
from .sources import SectorFileSource

__version__ = '0.1.0'
__all__ = [
    'SectorFileError',
    'UnknownSectionError',
    'UnrecognizedLineError',
    'CoordinateFormatError',
    'UnresolvedWaypointError',
    'UndefinedColorError',
    'ColorDefineError',
    'MalformedRegionError',
    'Coordinate',
    'Color',
    'Projection',
    'SectorModel',
    'SectorParser',
    'parse_sct',
    'parse_asr',
    'parse_ese',
    'parse_isec',
    'to_geojson',
    'waypoints_dataframe',
    'SectorFileSource',
]
