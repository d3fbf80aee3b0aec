"""Boundary protocol for the text storage a buffer operates over."""

from __future__ import annotations

from typing import Protocol


class TextBody(Protocol):
    """Character sequence with line indexing and splice mutation.

    Indices count characters, lines are zero-based, and a line's length
    includes its terminating newline when it has one. Implementations raise
    ``BoundsError`` or ``LineOutOfRange`` for invalid arguments instead of
    clamping them.
    """

    def length(self) -> int:
        """Return the total number of characters."""
        ...

    def line_count(self) -> int:
        """Return the number of lines (never less than one)."""
        ...

    def line_start(self, line: int) -> int:
        """Return the index of the first character of ``line``."""
        ...

    def line_length(self, line: int) -> int:
        """Return the character count of ``line`` including its newline."""
        ...

    def char_to_line(self, index: int) -> int:
        """Return the line containing ``index`` (``length`` maps to the last line)."""
        ...

    def slice(self, start: int, end: int) -> str:
        """Return the characters in ``[start, end)``."""
        ...

    def splice(self, start: int, end: int, replacement: str) -> None:
        """Replace ``[start, end)`` with ``replacement``."""
        ...


__all__ = ["TextBody"]
