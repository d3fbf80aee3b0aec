"""Default text body: a flat string with a line-start index."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import List

from .errors import BoundsError, LineOutOfRange, RangeOrderError


def _line_starts(text: str) -> List[int]:
    starts = [0]
    index = text.find("\n")
    while index != -1:
        starts.append(index + 1)
        index = text.find("\n", index + 1)
    return starts


@dataclass(slots=True)
class TextDocument:
    """``TextBody`` implementation built on a Python string.

    Lines are split after each ``\\n``, so text ending in a newline has a
    trailing empty line and an empty document has exactly one empty line.
    The line index is rebuilt on every splice; swap in a rope-backed body
    for very large texts.
    """

    _text: str = ""
    _starts: List[int] = field(default_factory=lambda: [0])
    version: int = 0

    @classmethod
    def from_text(cls, text: str) -> "TextDocument":
        return cls(_text=text, _starts=_line_starts(text))

    def __str__(self) -> str:
        return self._text

    def length(self) -> int:
        return len(self._text)

    def line_count(self) -> int:
        return len(self._starts)

    def _check_line(self, line: int) -> None:
        if line < 0 or line >= len(self._starts):
            raise LineOutOfRange(line, len(self._starts))

    def _check_index(self, index: int) -> None:
        if index < 0 or index > len(self._text):
            raise BoundsError(index, len(self._text))

    def line_start(self, line: int) -> int:
        self._check_line(line)
        return self._starts[line]

    def line_length(self, line: int) -> int:
        self._check_line(line)
        if line + 1 < len(self._starts):
            return self._starts[line + 1] - self._starts[line]
        return len(self._text) - self._starts[line]

    def char_to_line(self, index: int) -> int:
        self._check_index(index)
        return bisect_right(self._starts, index) - 1

    def slice(self, start: int, end: int) -> str:
        self._check_index(start)
        self._check_index(end)
        if start > end:
            raise RangeOrderError(start, end)
        return self._text[start:end]

    def splice(self, start: int, end: int, replacement: str) -> None:
        self._check_index(start)
        self._check_index(end)
        if start > end:
            raise RangeOrderError(start, end)
        self._text = self._text[:start] + replacement + self._text[end:]
        self._starts = _line_starts(self._text)
        self.version += 1


__all__ = ["TextDocument"]
