from typing import Dict, List, Tuple

from ..exceptions import CoordinateFormatError, UnrecognizedLineError
from ..models.coordinate import Coordinate, is_latitude, is_longitude
from ..models.sector import Endpoint, GeoGroup, Segment
from .registry import ColorTable, WaypointRegistry


class GeoAccumulator:
    """
    Collects the segments of one geometry section under inherited titles.

    A line may start with a title; lines without one continue the group of
    the last title seen in the same section. Each line ends with four
    endpoint fields (start lat, start lon, end lat, end lon) optionally
    followed by a color name. An endpoint is either a literal lat/lon pair
    or a waypoint id repeated in both of its fields.
    """

    def __init__(self, colors: ColorTable, waypoints: WaypointRegistry):
        self.colors = colors
        self.waypoints = waypoints
        self.current_title = ''
        self._groups: Dict[str, List[Segment]] = {}

    def add_line(self, parts: List[str], line: int) -> Segment:
        """
        Parse the fields of one line and append its segment.

        Args:
            parts: Whitespace separated fields, comment already removed
            line: Line number used in error messages

        Returns:
            The segment that was appended
        """
        last = parts[-1]
        color = None
        if is_longitude(last) or last in self.waypoints:
            trailing = 4
        else:
            color = self.colors.resolve(last, line)
            trailing = 5

        if len(parts) < trailing:
            raise UnrecognizedLineError(line, f"Expected {trailing} trailing fields, got {len(parts)}")

        title = ' '.join(parts[:-trailing])
        start_lat, start_lon, end_lat, end_lon = parts[-trailing:][:4]
        start = self._endpoint(start_lat, start_lon, line)
        end = self._endpoint(end_lat, end_lon, line)

        if title:
            self.current_title = title
        segment = Segment(start=start, end=end, color=color)
        self._groups.setdefault(self.current_title, []).append(segment)
        return segment

    def _endpoint(self, first: str, second: str, line: int) -> Endpoint:
        if is_latitude(first) and is_longitude(second):
            try:
                return Coordinate.from_dms(first, second).validate()
            except CoordinateFormatError as e:
                raise e.with_line(line)
        return self.waypoints.resolve(first, line)

    def groups(self) -> Tuple[GeoGroup, ...]:
        """Frozen groups in the order their titles first appeared."""
        return tuple(
            GeoGroup(id=title, segments=tuple(segments))
            for title, segments in self._groups.items()
        )

    def __len__(self) -> int:
        return len(self._groups)
