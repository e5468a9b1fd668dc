from dataclasses import dataclass

from .coordinate import Coordinate


@dataclass(frozen=True)
class Waypoint:
    """
    A named point that geometry lines can reference instead of coordinates.

    VORs, NDBs, fixes and airports all share this base so they can live in
    one id-keyed registry. Waypoints read from a supplementary list are plain
    Waypoint instances.
    """

    id: str
    position: Coordinate


@dataclass(frozen=True)
class Vor(Waypoint):
    """VOR navaid."""

    frequency: str


@dataclass(frozen=True)
class Ndb(Waypoint):
    """NDB navaid."""

    frequency: str


@dataclass(frozen=True)
class Fix(Waypoint):
    """Named fix."""


@dataclass(frozen=True)
class Airport(Waypoint):
    """Airport reference point with its tower frequency and airspace class."""

    frequency: str
    airport_class: str = ''
