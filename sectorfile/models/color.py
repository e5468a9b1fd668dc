from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Color:
    """A named color registered with a #define directive."""

    name: str
    value: int

    def to_rgb(self) -> Tuple[int, int, int]:
        """
        Split the packed value into three components.

        The low byte comes first and the high part is not masked, matching
        the way sector files pack their colors.
        """
        return (
            self.value & 0xFF,
            (self.value >> 8) & 0xFF,
            self.value >> 16
        )

    def __str__(self) -> str:
        return f"{self.name}={self.value}"
