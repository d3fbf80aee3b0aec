"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .body import TextBody
from .errors import BoundsError, LineOutOfRange, RangeOrderError


def ensure_count(n: int) -> int:
    if n < 0:
        raise ValueError(f"Count must be non-negative, got {n}")
    return n


def ensure_index(body: TextBody, index: int) -> int:
    length = body.length()
    if index < 0 or index > length:
        raise BoundsError(index, length)
    return index


def ensure_line(body: TextBody, line: int) -> int:
    line_count = body.line_count()
    if line < 0 or line >= line_count:
        raise LineOutOfRange(line, line_count)
    return line


def ensure_span(body: TextBody, start: int, end: int) -> tuple[int, int]:
    ensure_index(body, start)
    ensure_index(body, end)
    if start > end:
        raise RangeOrderError(start, end)
    return start, end
