"""
Parser for the .ese annotation file.

Only the [FREETEXT] and [POSITIONS] sections are interpreted. The other
known sections are accepted and skipped. Fields are separated by ':' and
only full-line ';' comments are recognized, since ':' separated text may
legitimately contain ';'.
"""

import logging
from typing import Dict, List, Optional

from ..exceptions import CoordinateFormatError, UnrecognizedLineError
from ..models.annotations import Annotations, AtcPosition
from ..models.coordinate import Coordinate, is_latitude, is_longitude
from ..models.sector import Label
from .base import SectionedFileParser, is_comment, numbered_lines, parse_section_header
from .sections import EseSection

logger = logging.getLogger(__name__)


def _split(line: str) -> List[str]:
    return [part.strip() for part in line.split(':')]


def _optional_int(value: str) -> Optional[int]:
    try:
        return int(value)
    except ValueError:
        return None


class EseParser(SectionedFileParser):
    """Parser for free text labels and controller positions."""

    def parse(self, text: str) -> Annotations:
        """
        Parse a complete .ese file.

        Args:
            text: Decoded file content

        Returns:
            Annotations with free text grouped by section and the ATC positions
        """
        section: Optional[EseSection] = None
        free_text: Dict[str, List[Label]] = {}
        positions: List[AtcPosition] = []
        skipped = 0

        for line_number, line in numbered_lines(text):
            if not line or is_comment(line):
                continue
            if line.startswith('['):
                section = parse_section_header(line, line_number, EseSection)
                logger.debug(f"Line {line_number}: entering section [{section.value}]")
            elif section == EseSection.FREETEXT:
                label_section, label = self._parse_free_text(line, line_number)
                free_text.setdefault(label_section, []).append(label)
            elif section == EseSection.POSITIONS:
                positions.append(self._parse_position(line, line_number))
            elif section is None:
                raise UnrecognizedLineError(line_number)
            else:
                skipped += 1

        if skipped:
            logger.debug(f"Skipped {skipped} lines of uninterpreted .ese sections")

        return Annotations(
            free_text={name: tuple(labels) for name, labels in free_text.items()},
            positions=tuple(positions)
        )

    def _parse_free_text(self, line: str, line_number: int):
        parts = _split(line)
        if len(parts) < 4:
            raise UnrecognizedLineError(line_number, f"Expected 'lat:lon:section:text', got '{line}'")
        lat, lon, section = parts[:3]
        # the text itself may contain ':'
        text = ':'.join(parts[3:])
        if not (is_latitude(lat) and is_longitude(lon)):
            raise CoordinateFormatError(
                f"The input {lat} {lon} is not a valid latitude/longitude position.", line_number
            )
        try:
            position = Coordinate.from_dms(lat, lon).validate()
        except CoordinateFormatError as e:
            raise e.with_line(line_number)
        return section, Label(text=text, position=position, color=None)

    def _parse_position(self, line: str, line_number: int) -> AtcPosition:
        parts = line.split(':')
        if len(parts) < 7:
            raise UnrecognizedLineError(line_number, f"Expected at least 7 ':' separated fields, got {len(parts)}")
        name, radio_callsign, frequency, identifier, middle_letter, prefix, suffix = parts[:7]
        start_range = _optional_int(parts[9]) if len(parts) > 9 else None
        end_range = _optional_int(parts[10]) if len(parts) > 10 else None

        centers = []
        coordinates = parts[11:]
        for i in range(0, len(coordinates) - 1, 2):
            lat, lon = coordinates[i].strip(), coordinates[i + 1].strip()
            if not lat and not lon:
                continue
            try:
                centers.append(Coordinate.from_dms(lat, lon).validate())
            except CoordinateFormatError as e:
                raise e.with_line(line_number)

        return AtcPosition(
            name=name,
            radio_callsign=radio_callsign,
            frequency=frequency,
            identifier=identifier,
            middle_letter=middle_letter,
            prefix=prefix,
            suffix=suffix,
            start_range=start_range,
            end_range=end_range,
            centers=tuple(centers)
        )


def parse_ese(text: str) -> Annotations:
    return EseParser().parse(text)
