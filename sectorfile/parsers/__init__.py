from .base import SectionedFileParser
from .sections import Section, EseSection, GEO_SECTIONS
from .registry import ColorTable, WaypointRegistry
from .geo import GeoAccumulator
from .regions import RegionBuilder
from .sct import SectorParser, parse_sct
from .asr import AsrParser, parse_asr
from .ese import EseParser, parse_ese
from .isec import parse_isec

__all__ = [
    'SectionedFileParser',
    'Section',
    'EseSection',
    'GEO_SECTIONS',
    'ColorTable',
    'WaypointRegistry',
    'GeoAccumulator',
    'RegionBuilder',
    'SectorParser',
    'parse_sct',
    'AsrParser',
    'parse_asr',
    'EseParser',
    'parse_ese',
    'parse_isec',
]
