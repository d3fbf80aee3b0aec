"""Symbolic addresses and their resolution against a text body.

An address is one of six frozen records. None of them carries an index
into a particular text state; ``resolve_index`` and ``resolve_coordinates``
turn them into absolute positions against the body they are given, and the
result is only meaningful until that body is next mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .body import TextBody
from .state import LineCol
from .validation import ensure_index, ensure_line


@dataclass(frozen=True, slots=True)
class Index:
    """Absolute character offset."""

    index: int


@dataclass(frozen=True, slots=True)
class Coordinates:
    """Column ``col`` of ``line``; the column is not checked against the line."""

    line: int
    col: int


@dataclass(frozen=True, slots=True)
class LineStart:
    line: int


@dataclass(frozen=True, slots=True)
class LineEnd:
    """One past the last character of ``line``, newline included."""

    line: int


@dataclass(frozen=True, slots=True)
class BufferStart:
    pass


@dataclass(frozen=True, slots=True)
class BufferEnd:
    """Total character count, the exclusive end of the whole body."""


Address = Union[Index, Coordinates, LineStart, LineEnd, BufferStart, BufferEnd]


def resolve_index(addr: Address, body: TextBody) -> int:
    """Return the absolute index ``addr`` names in ``body``.

    ``Index`` values pass through unchecked; consumers bound-check them
    when they use the result.
    """

    if isinstance(addr, Index):
        return addr.index
    if isinstance(addr, Coordinates):
        return body.line_start(ensure_line(body, addr.line)) + addr.col
    if isinstance(addr, LineStart):
        return body.line_start(ensure_line(body, addr.line))
    if isinstance(addr, LineEnd):
        line = ensure_line(body, addr.line)
        return body.line_start(line) + body.line_length(line)
    if isinstance(addr, BufferStart):
        return 0
    if isinstance(addr, BufferEnd):
        return body.length()
    raise TypeError(f"Not an address: {addr!r}")


def resolve_coordinates(addr: Address, body: TextBody) -> LineCol:
    """Return the ``(line, col)`` pair for ``addr``.

    Every variant goes through its index first, so the result always
    satisfies ``line_start(line) + col == resolve_index(addr, body)``.
    """

    index = ensure_index(body, resolve_index(addr, body))
    line = body.char_to_line(index)
    return (line, index - body.line_start(line))


def next_address(addr: Address, body: TextBody) -> Index:
    return Index(ensure_index(body, resolve_index(addr, body) + 1))


def prev_address(addr: Address, body: TextBody) -> Index:
    return Index(ensure_index(body, resolve_index(addr, body) - 1))


__all__ = [
    "Address",
    "Index",
    "Coordinates",
    "LineStart",
    "LineEnd",
    "BufferStart",
    "BufferEnd",
    "resolve_index",
    "resolve_coordinates",
    "next_address",
    "prev_address",
]
