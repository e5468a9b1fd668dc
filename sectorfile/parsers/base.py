import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Iterator, List, Tuple, Type, TypeVar

from ..exceptions import UnknownSectionError

SectionT = TypeVar('SectionT', bound=Enum)

_FIELD_SPLITTER = re.compile(r'[\t ]+')
_HEADER_PATTERN = re.compile(r'\[(.*)\]')


def strip_comment(line: str) -> str:
    """Remove a trailing ';' comment and surrounding whitespace."""
    return line.split(';', 1)[0].strip()


def split_fields(line: str) -> List[str]:
    """
    Split a data line on runs of spaces and tabs after dropping its comment.

    Returns:
        List of fields, empty for a comment-only line
    """
    stripped = strip_comment(line)
    if not stripped:
        return []
    return _FIELD_SPLITTER.split(stripped)


def numbered_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Yield (1-based line number, trimmed line) pairs."""
    for index, line in enumerate(text.split('\n')):
        yield index + 1, line.strip()


def is_comment(line: str) -> bool:
    return line.startswith(';')


def parse_section_header(line: str, line_number: int, sections: Type[SectionT]) -> SectionT:
    """
    Resolve a bracketed header line to a member of a section enum.

    The bracket content is upper-cased and must equal one of the enum values.

    Raises:
        UnknownSectionError: If the header is not closed or does not name a known section
    """
    match = _HEADER_PATTERN.match(line)
    if match is None:
        raise UnknownSectionError(line[1:].upper(), line_number)
    name = match.group(1).upper()
    try:
        return sections(name)
    except ValueError:
        raise UnknownSectionError(name, line_number)


class SectionedFileParser(ABC):
    """Base interface for the line oriented sector file formats."""

    @abstractmethod
    def parse(self, text: str) -> Any:
        """
        Parse the complete text of a file.

        Args:
            text: File content, already decoded

        Returns:
            The immutable model for the format
        """
        pass
