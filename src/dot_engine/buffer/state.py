"""Position and edit records shared by dots and buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

LineCol = Tuple[int, int]  # (line, column)
Bounds = Tuple[int, int]  # (from, to), half-open


@dataclass(frozen=True, slots=True)
class Edit:
    """A committed splice: ``[start, end)`` replaced by ``inserted`` characters.

    ``shift`` maps bounds recorded before the edit onto the text after it.
    Endpoints at or before ``start`` stay put, endpoints at or after ``end``
    move by ``delta``, and endpoints inside the replaced span collapse onto
    the nearest edge of the inserted text.
    """

    start: int
    end: int
    inserted: int

    @property
    def delta(self) -> int:
        return self.inserted - (self.end - self.start)

    def _shift_from(self, index: int) -> int:
        if index <= self.start:
            return index
        if index >= self.end:
            return index + self.delta
        return self.start

    def _shift_to(self, index: int) -> int:
        if index <= self.start:
            return index
        if index >= self.end:
            return index + self.delta
        return self.start + self.inserted

    def shift(self, bounds: Bounds) -> Bounds:
        start, end = bounds
        return (self._shift_from(start), self._shift_to(end))


@dataclass(frozen=True, slots=True)
class BufferView:
    revision: int
    text: str
    dots: Tuple[Bounds, ...]


__all__ = ["LineCol", "Bounds", "Edit", "BufferView"]
