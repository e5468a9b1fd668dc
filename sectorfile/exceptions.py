"""
Errors raised while reading sector, overlay and annotation files.

Every error carries the 1-based line number of the offending line when it
was raised during a parse. Parsing stops at the first error and no partial
model is returned.
"""

from typing import Optional


class SectorFileError(Exception):
    """Base class for all sector file parsing errors."""

    def __init__(self, message: str, line: Optional[int] = None):
        """
        Initialize the error.

        Args:
            message: Human readable description of the problem
            line: 1-based line number, or None when raised outside a parse
        """
        self.message = message
        self.line = line
        super().__init__(str(self))

    def with_line(self, line: int) -> 'SectorFileError':
        """Attach a line number if the error does not carry one yet."""
        if self.line is None:
            self.line = line
            self.args = (str(self),)
        return self

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"Error on line {self.line}: {self.message}"


class UnknownSectionError(SectorFileError):
    """A bracketed header names a section that does not exist."""

    def __init__(self, name: str, line: Optional[int] = None):
        self.name = name
        super().__init__(f'Unknown section type "{name}"', line)


class UnrecognizedLineError(SectorFileError):
    """A line does not match any shape accepted by the current section."""

    def __init__(self, line: Optional[int] = None, message: str = 'Unsure what this line really means'):
        super().__init__(message, line)


class CoordinateFormatError(SectorFileError):
    """A coordinate string could not be converted to decimal degrees."""


class UnresolvedWaypointError(SectorFileError):
    """A geometry line references a waypoint that has not been declared."""

    def __init__(self, name: str, line: Optional[int] = None):
        self.name = name
        super().__init__(f"The input {name} is neither a latitude or registered navaid.", line)


class UndefinedColorError(SectorFileError):
    """A color name is referenced before any #define for it."""

    def __init__(self, name: str, line: Optional[int] = None):
        self.name = name
        super().__init__(f"The color {name} has not been defined.", line)


class ColorDefineError(SectorFileError):
    """A #define directive is missing its name or has a non-numeric value."""


class MalformedRegionError(SectorFileError):
    """A region point appears before any polygon has been started."""

    def __init__(self, line: Optional[int] = None, message: str = 'Region point without a preceding color line'):
        super().__init__(message, line)
