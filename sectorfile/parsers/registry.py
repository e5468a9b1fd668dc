"""
Lookup tables filled while a sector file is being read.

Both tables live for one parse call only. Entries become visible to the
lines that follow the line that declared them; nothing is resolved ahead.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional

from ..exceptions import ColorDefineError, UndefinedColorError, UnresolvedWaypointError
from ..models.color import Color
from ..models.navaid import Waypoint

logger = logging.getLogger(__name__)


class ColorTable:
    """Colors registered with #define, looked up case-insensitively."""

    def __init__(self):
        self._colors: Dict[str, Color] = {}

    def define(self, name: str, value: str, line: Optional[int] = None) -> Color:
        """
        Register a color from the raw fields of a #define line.

        A redefinition replaces the previous color.

        Args:
            name: Color name as written in the file
            value: Packed 24-bit value as text
            line: Line number used in error messages

        Returns:
            The registered Color

        Raises:
            ColorDefineError: If the value is not an integer
        """
        try:
            number = int(value)
        except ValueError:
            raise ColorDefineError(f"Color {name} must be defined as a number, got '{value}'.", line)
        color = Color(name, number)
        key = name.lower()
        if key in self._colors:
            logger.debug(f"Color {name} redefined on line {line}")
        self._colors[key] = color
        return color

    def define_line(self, line_text: str, line: Optional[int] = None) -> Color:
        """Register a color from a complete '#define NAME VALUE' line."""
        parts = line_text.split(';', 1)[0].split()
        if len(parts) < 3:
            raise ColorDefineError(f"Expected '#define NAME VALUE', got '{line_text}'.", line)
        return self.define(parts[1], parts[2], line)

    def get(self, name: str) -> Optional[Color]:
        return self._colors.get(name.lower())

    def resolve(self, name: str, line: Optional[int] = None) -> Color:
        """
        Look up a color by name.

        Raises:
            UndefinedColorError: If no color with that name was defined yet
        """
        color = self.get(name)
        if color is None:
            raise UndefinedColorError(name.lower(), line)
        return color

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._colors

    def __len__(self) -> int:
        return len(self._colors)

    def freeze(self) -> Mapping[str, Color]:
        """Read-only snapshot keyed by lower-cased name."""
        return MappingProxyType(dict(self._colors))


class WaypointRegistry:
    """
    Id-keyed registry of every waypoint declared so far.

    The registry can be seeded with waypoints from a supplementary list; those
    behave as if declared at the top of the file. A later declaration with the
    same id replaces the earlier one.
    """

    def __init__(self, seed: Optional[Iterable[Waypoint]] = None):
        self._waypoints: Dict[str, Waypoint] = {}
        if seed:
            for waypoint in seed:
                self._waypoints[waypoint.id] = waypoint
            logger.debug(f"Waypoint registry seeded with {len(self._waypoints)} entries")

    def register(self, waypoint: Waypoint) -> None:
        self._waypoints[waypoint.id] = waypoint

    def get(self, name: str) -> Optional[Waypoint]:
        return self._waypoints.get(name)

    def resolve(self, name: str, line: Optional[int] = None) -> Waypoint:
        """
        Look up a waypoint by id.

        Raises:
            UnresolvedWaypointError: If the id has not been declared yet
        """
        waypoint = self._waypoints.get(name)
        if waypoint is None:
            raise UnresolvedWaypointError(name, line)
        return waypoint

    def __contains__(self, name: str) -> bool:
        return name in self._waypoints

    def __len__(self) -> int:
        return len(self._waypoints)
