import logging
from typing import List

from ..exceptions import CoordinateFormatError
from ..models.coordinate import Coordinate
from ..models.navaid import Waypoint
from .base import is_comment, numbered_lines

logger = logging.getLogger(__name__)


def parse_isec(text: str) -> List[Waypoint]:
    """
    Read a supplementary waypoint list.

    Each line holds an id, a decimal latitude and a decimal longitude
    separated by whitespace; further fields are ignored. Blank lines,
    ';' comments and lines with fewer than three fields are skipped.

    Args:
        text: Decoded file content

    Returns:
        Waypoints in file order, ready to seed a SectorParser
    """
    waypoints = []
    for line_number, line in numbered_lines(text):
        if not line or is_comment(line):
            continue
        parts = line.split()
        if len(parts) < 3:
            continue
        id, lat, lon = parts[:3]
        try:
            position = Coordinate.from_decimal(float(lat), float(lon))
        except ValueError:
            raise CoordinateFormatError(f"Invalid decimal position {lat} {lon} for {id}", line_number)
        waypoints.append(Waypoint(id=id, position=position))

    logger.debug(f"Read {len(waypoints)} supplementary waypoints")
    return waypoints
