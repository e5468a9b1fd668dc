"""
Parser for the .asr display overlay.

Each line is a ':' separated record whose first field names the category
of the object to display. Unknown categories are ignored, an overlay file
carries many display settings that have no counterpart in the sector model.
"""

import logging
from typing import Dict, List, Optional, Tuple

from ..exceptions import CoordinateFormatError
from ..models.coordinate import Coordinate
from ..models.overlay import Overlay
from .base import SectionedFileParser, numbered_lines

logger = logging.getLogger(__name__)

# Overlay key -> Overlay attribute for the plain id lists
LIST_KEYS = {
    'ARTCC boundary': 'artcc',
    'ARTCC high boundary': 'artcc_high',
    'ARTCC low boundary': 'artcc_low',
    'Geo': 'geo',
    'Regions': 'regions',
    'Fixes': 'fixes',
    'VORs': 'vors',
    'NDBs': 'ndbs',
    'Airports': 'airports',
    'SIDs': 'sids',
    'STARs': 'stars',
    'High airways': 'high_airways',
    'Low airways': 'low_airways',
}


class AsrParser(SectionedFileParser):
    """Parser for the object selection of an .asr file."""

    def parse(self, text: str) -> Overlay:
        sector_file = ''
        sector_title = ''
        lists: Dict[str, List[str]] = {attribute: [] for attribute in LIST_KEYS.values()}
        free_text: Dict[str, List[str]] = {}
        runways: Dict[str, List[str]] = {}
        viewport: Optional[Tuple[Coordinate, Coordinate]] = None

        for line_number, line in numbered_lines(text):
            key, *rest = line.split(':')
            if not rest:
                continue
            if key == 'SECTORFILE':
                sector_file = rest[0]
            elif key == 'SECTORTITLE':
                sector_title = rest[0]
            elif key in LIST_KEYS:
                lists[LIST_KEYS[key]].append(rest[0])
            elif key == 'Free Text':
                section, _, label = rest[0].partition('\\')
                free_text.setdefault(section, []).append(label)
            elif key == 'Runways':
                runways.setdefault(rest[0], []).append(rest[1] if len(rest) > 1 else '')
            elif key == 'WINDOWAREA':
                viewport = self._parse_viewport(rest, line_number)
            else:
                logger.debug(f"Line {line_number}: ignoring overlay key '{key}'")

        return Overlay(
            sector_file=sector_file,
            sector_title=sector_title,
            free_text={section: tuple(labels) for section, labels in free_text.items()},
            runways={name: tuple(ends) for name, ends in runways.items()},
            viewport=viewport,
            **{attribute: tuple(ids) for attribute, ids in lists.items()}
        )

    def _parse_viewport(self, values: List[str], line_number: int) -> Tuple[Coordinate, Coordinate]:
        try:
            lat1, lon1, lat2, lon2 = (float(value) for value in values[:4])
        except ValueError:
            raise CoordinateFormatError(f"Invalid WINDOWAREA {':'.join(values)}", line_number)
        return Coordinate.from_decimal(lat1, lon1), Coordinate.from_decimal(lat2, lon2)


def parse_asr(text: str) -> Overlay:
    return AsrParser().parse(text)
