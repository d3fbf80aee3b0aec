"""Exception types raised by address resolution, dots, and buffers."""

from __future__ import annotations

from typing import Optional


class DotEngineError(RuntimeError):
    """Base class for every error raised by the engine."""


class LineOutOfRange(DotEngineError, IndexError):
    """Raised when a line number does not name a line of the text body."""

    def __init__(self, line: int, line_count: int) -> None:
        super().__init__(f"Line {line} out of range (line count {line_count})")
        self.line = line
        self.line_count = line_count


class BoundsError(DotEngineError, IndexError):
    """Raised when a resolved or shifted index falls outside ``[0, length]``."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Index {index} out of bounds (length {length})")
        self.index = index
        self.length = length


class RangeOrderError(DotEngineError, ValueError):
    """Raised when explicit dot bounds are given with ``start > end``."""

    def __init__(self, start: int, end: int) -> None:
        super().__init__(f"Range start {start} is after end {end}")
        self.start = start
        self.end = end


class BufferIOError(DotEngineError, OSError):
    """Raised when a byte source cannot be read."""

    def __init__(self, message: str, *, source: Optional[str] = None) -> None:
        super().__init__(message)
        self.source = source


class DecodeError(DotEngineError, ValueError):
    """Raised when loaded bytes are not valid text in the configured encoding."""

    def __init__(
        self, message: str, *, encoding: str, source: Optional[str] = None
    ) -> None:
        super().__init__(message)
        self.encoding = encoding
        self.source = source


__all__ = [
    "DotEngineError",
    "LineOutOfRange",
    "BoundsError",
    "RangeOrderError",
    "BufferIOError",
    "DecodeError",
]
