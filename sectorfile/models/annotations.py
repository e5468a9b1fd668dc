from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .coordinate import Coordinate
from .sector import Label


@dataclass(frozen=True)
class AtcPosition:
    """Controller position declared in the [POSITIONS] section of an .ese file."""

    name: str
    radio_callsign: str
    frequency: str
    identifier: str
    middle_letter: str
    prefix: str
    suffix: str
    start_range: Optional[int] = None
    end_range: Optional[int] = None
    centers: Tuple[Coordinate, ...] = ()

    @property
    def callsign(self) -> str:
        """Login callsign such as ENZV_APP."""
        parts = [part for part in (self.prefix, self.middle_letter, self.suffix) if part]
        return '_'.join(parts)


@dataclass(frozen=True)
class Annotations:
    """Free text labels grouped by section and controller positions."""

    free_text: Mapping[str, Tuple[Label, ...]] = field(default_factory=lambda: MappingProxyType({}))
    positions: Tuple[AtcPosition, ...] = ()
