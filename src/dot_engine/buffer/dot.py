"""Dots: half-open selections over a buffer's text."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from dot_engine.runtime.telemetry import record_event

from .address import (
    Address,
    BufferEnd,
    BufferStart,
    Index,
    resolve_coordinates,
    resolve_index,
)
from .body import TextBody
from .errors import BoundsError
from .state import Bounds, LineCol
from .validation import ensure_count, ensure_index, ensure_span

if TYPE_CHECKING:
    from .buffer import Buffer


def span_between(body: TextBody, left: Address, right: Address) -> Bounds:
    return ensure_span(body, resolve_index(left, body), resolve_index(right, body))


def span_anchor_left(body: TextBody, anchor: Address, width: Address) -> Bounds:
    start = resolve_index(anchor, body)
    return ensure_span(body, start, start + resolve_index(width, body))


def span_anchor_right(body: TextBody, width: Address, anchor: Address) -> Bounds:
    end = resolve_index(anchor, body)
    return ensure_span(body, end - resolve_index(width, body), end)


class Dot:
    """A ``[start, end)`` selection registered with one buffer.

    Endpoints are absolute character indices with ``start <= end``. Every
    operation takes the buffer's lock once, validates against that single
    body state, and only then commits, so a failed call leaves the dot as
    it was. Positioning methods return the dot itself for chaining.
    """

    def __init__(self, buffer: "Buffer", bounds: Optional[Bounds] = None) -> None:
        with buffer.locked() as body:
            if bounds is None:
                bounds = span_between(body, BufferStart(), BufferEnd())
            else:
                bounds = ensure_span(body, *bounds)
            self._bind(buffer, bounds)

    @classmethod
    def _attach(cls, buffer: "Buffer", bounds: Bounds) -> "Dot":
        """Register a dot with bounds already validated inside the buffer's lock."""

        dot = cls.__new__(cls)
        dot._bind(buffer, bounds)
        return dot

    def _bind(self, buffer: "Buffer", bounds: Bounds) -> None:
        self._buffer = buffer
        self._bounds: Bounds = bounds
        buffer._dots.add(self)

    def __repr__(self) -> str:
        start, end = self._bounds
        return f"Dot({start}, {end}, buffer={self._buffer.name!r})"

    @property
    def buffer(self) -> "Buffer":
        return self._buffer

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    @property
    def start(self) -> int:
        return self._bounds[0]

    @property
    def end(self) -> int:
        return self._bounds[1]

    @property
    def width(self) -> int:
        start, end = self._bounds
        return end - start

    @property
    def is_empty(self) -> bool:
        return self.width == 0

    # -- positioning -------------------------------------------------------

    def select(self, left: Address, right: Address) -> "Dot":
        with self._buffer.locked() as body:
            self._bounds = span_between(body, left, right)
        return self

    def anchor_left(self, anchor: Address, width: Address) -> "Dot":
        with self._buffer.locked() as body:
            self._bounds = span_anchor_left(body, anchor, width)
        return self

    def anchor_right(self, width: Address, anchor: Address) -> "Dot":
        with self._buffer.locked() as body:
            self._bounds = span_anchor_right(body, width, anchor)
        return self

    # -- movement ----------------------------------------------------------

    def move_left(self, n: int) -> "Dot":
        ensure_count(n)
        return self._shift("move_left", -n, -n)

    def move_right(self, n: int) -> "Dot":
        ensure_count(n)
        return self._shift("move_right", n, n)

    def extend_left(self, n: int) -> "Dot":
        """Pull the upper edge down by ``n``, swapping if it passes ``start``."""

        ensure_count(n)
        return self._shift("extend_left", 0, -n)

    def extend_right(self, n: int) -> "Dot":
        """Push the lower edge up by ``n``, swapping if it passes ``end``."""

        ensure_count(n)
        return self._shift("extend_right", n, 0)

    def trim_left(self, n: int) -> "Dot":
        ensure_count(n)
        return self._shift("trim_left", 0, n)

    def trim_right(self, n: int) -> "Dot":
        ensure_count(n)
        return self._shift("trim_right", -n, 0)

    def _shift(self, op: str, start_delta: int, end_delta: int) -> "Dot":
        with self._buffer.locked() as body:
            start, end = self._bounds
            new_start, new_end = start + start_delta, end + end_delta
            try:
                ensure_index(body, new_start)
                ensure_index(body, new_end)
            except BoundsError as exc:
                record_event(
                    "dot.bounds",
                    level="debug",
                    data={"op": op, "bounds": (start, end), "index": exc.index},
                )
                raise
            if new_start > new_end:
                new_start, new_end = new_end, new_start
            self._bounds = (new_start, new_end)
        return self

    # -- text access -------------------------------------------------------

    def get(self) -> str:
        return self._buffer.get(self)

    def set(self, text: str) -> "Dot":
        self._buffer.set(self, text)
        return self

    def coordinates(self) -> tuple[LineCol, LineCol]:
        with self._buffer.locked() as body:
            start, end = self._bounds
            return (
                resolve_coordinates(Index(start), body),
                resolve_coordinates(Index(end), body),
            )

    # -- lifecycle ---------------------------------------------------------

    def copy(self) -> "Dot":
        return Dot(self._buffer, self._bounds)

    def detach(self) -> None:
        """Stop receiving position updates from edits made through other dots."""

        self._buffer._untrack(self)


__all__ = ["Dot", "span_between", "span_anchor_left", "span_anchor_right"]
