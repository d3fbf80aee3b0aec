"""Addresses, dots, and the buffer that owns their text."""

from .address import (
    Address,
    BufferEnd,
    BufferStart,
    Coordinates,
    Index,
    LineEnd,
    LineStart,
    next_address,
    prev_address,
    resolve_coordinates,
    resolve_index,
)
from .body import TextBody
from .buffer import Buffer, Transaction
from .document import TextDocument
from .dot import Dot
from .errors import (
    BoundsError,
    BufferIOError,
    DecodeError,
    DotEngineError,
    LineOutOfRange,
    RangeOrderError,
)
from .state import BufferView, Edit, LineCol
from .validation import ensure_count, ensure_index, ensure_line, ensure_span

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
    "TextBody",
    "TextDocument",
    "Buffer",
    "Transaction",
    "Dot",
    "BufferView",
    "Edit",
    "LineCol",
    "DotEngineError",
    "LineOutOfRange",
    "BoundsError",
    "RangeOrderError",
    "BufferIOError",
    "DecodeError",
    "ensure_count",
    "ensure_index",
    "ensure_line",
    "ensure_span",
]
