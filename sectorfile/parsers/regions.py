import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..exceptions import CoordinateFormatError, MalformedRegionError, UnrecognizedLineError
from ..models.color import Color
from ..models.coordinate import Coordinate, is_latitude, is_longitude
from ..models.sector import Polygon, Region
from .registry import ColorTable

logger = logging.getLogger(__name__)

REGION_NAME_KEYWORD = 'REGIONNAME'


@dataclass
class _PolygonBuilder:
    color: Color
    points: List[Coordinate] = field(default_factory=list)


class RegionBuilder:
    """
    Collects colored polygons under named regions.

    'REGIONNAME <id>' selects the current region. A region name may appear
    several times in a file; later blocks add polygons to the same region.
    A point line that starts with a color name opens a new polygon, a point
    line without one continues the last polygon of the current region.
    """

    def __init__(self, colors: ColorTable):
        self.colors = colors
        self.current_region: Optional[str] = None
        self._regions: Dict[str, List[_PolygonBuilder]] = {}

    def start_region(self, line_text: str, line: int) -> str:
        """Select the region named on a REGIONNAME line, creating it if new."""
        name = line_text[len(REGION_NAME_KEYWORD):].split(';', 1)[0].strip()
        if name in self._regions:
            logger.debug(f"Resuming region {name} on line {line}")
        self._regions.setdefault(name, [])
        self.current_region = name
        return name

    def add_point(self, parts: List[str], line: int) -> None:
        """
        Handle a '[color] lat lon' line.

        Raises:
            MalformedRegionError: If the point has no polygon to belong to
            CoordinateFormatError: If the trailing pair is not a position
        """
        if len(parts) < 2:
            raise UnrecognizedLineError(line, f"Expected a latitude and longitude, got '{' '.join(parts)}'")

        lat, lon = parts[-2:]
        if not is_latitude(lat):
            raise CoordinateFormatError(f"Expected a valid latitude, got {lat}", line)
        if not is_longitude(lon):
            raise CoordinateFormatError(f"Expected a valid longitude, got {lon}", line)
        try:
            point = Coordinate.from_dms(lat, lon).validate()
        except CoordinateFormatError as e:
            raise e.with_line(line)

        if self.current_region is None:
            raise MalformedRegionError(line, 'Region point before any REGIONNAME line')
        polygons = self._regions[self.current_region]

        color_name = ' '.join(parts[:-2])
        if color_name:
            polygons.append(_PolygonBuilder(color=self.colors.resolve(color_name, line)))
        elif not polygons:
            raise MalformedRegionError(line, f"Region {self.current_region} has no polygon started, expected a color")

        polygons[-1].points.append(point)

    def regions(self) -> Tuple[Region, ...]:
        """Frozen regions in the order their names first appeared."""
        return tuple(
            Region(
                id=name,
                polygons=tuple(Polygon(color=p.color, points=tuple(p.points)) for p in polygons)
            )
            for name, polygons in self._regions.items()
        )
