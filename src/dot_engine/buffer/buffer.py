"""Buffer façade: owns the text body, hands out dots, serialises edits."""

from __future__ import annotations

import threading
import weakref
from contextlib import AbstractContextManager, contextmanager
from os import PathLike
from typing import BinaryIO, ContextManager, Iterator, Optional, Union

from dot_engine.config import EngineConfig
from dot_engine.runtime import telemetry

from .address import Address
from .address import next_address as _next_address
from .address import prev_address as _prev_address
from .address import resolve_coordinates as _resolve_coordinates
from .address import resolve_index as _resolve_index
from .body import TextBody
from .document import TextDocument
from .dot import Dot, span_anchor_left, span_anchor_right, span_between
from .errors import BufferIOError, DecodeError
from .state import BufferView, Edit, LineCol
from .validation import ensure_span

StrPath = Union[str, "PathLike[str]"]


class Buffer:
    """Owns one text body and every dot created over it.

    All access to the body goes through ``locked()``. Each public buffer or
    dot operation enters it exactly once and never nests it. The lock is
    re-entrant only so callers can hold ``locked()`` around several dot
    calls to make them atomic as a group.
    """

    def __init__(
        self,
        *,
        body: Optional[TextBody] = None,
        config: Optional[EngineConfig] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self._body: TextBody = body if body is not None else TextDocument()
        self._lock = threading.RLock()
        self._dots: "weakref.WeakSet[Dot]" = weakref.WeakSet()
        self.revision = 0
        self.last_edit: Optional[Edit] = None

    @property
    def name(self) -> str:
        return self.config.name

    # -- loading -----------------------------------------------------------

    @classmethod
    def from_text(cls, text: str, *, config: Optional[EngineConfig] = None) -> "Buffer":
        return cls(body=TextDocument.from_text(text), config=config)

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        *,
        config: Optional[EngineConfig] = None,
        source: Optional[str] = None,
    ) -> "Buffer":
        config = config or EngineConfig()
        try:
            text = data.decode(config.encoding)
        except UnicodeDecodeError as exc:
            telemetry.record_event(
                "buffer.decode_failed",
                level="warning",
                data={"source": source or "<bytes>", "encoding": config.encoding},
            )
            raise DecodeError(
                f"Cannot decode {source or 'byte source'} as {config.encoding}: {exc}",
                encoding=config.encoding,
                source=source,
            ) from exc
        telemetry.record_event(
            "buffer.load",
            data={"source": source or "<bytes>", "chars": len(text)},
        )
        return cls.from_text(text, config=config)

    @classmethod
    def from_reader(
        cls,
        reader: BinaryIO,
        *,
        config: Optional[EngineConfig] = None,
        source: Optional[str] = None,
    ) -> "Buffer":
        try:
            data = reader.read()
        except OSError as exc:
            raise BufferIOError(
                f"Cannot read {source or 'stream'}: {exc}", source=source
            ) from exc
        if data is None:
            # non-blocking raw streams return None when no data is ready
            raise BufferIOError(
                f"Cannot read {source or 'stream'}: no data available", source=source
            )
        if isinstance(data, str):
            raise TypeError(
                f"{source or 'stream'} is a text stream; open it in binary mode"
            )
        return cls.from_bytes(data, config=config, source=source)

    @classmethod
    def from_file(
        cls, path: StrPath, *, config: Optional[EngineConfig] = None
    ) -> "Buffer":
        source = str(path)
        try:
            with open(path, "rb") as handle:
                data = handle.read()
        except OSError as exc:
            raise BufferIOError(f"Cannot read {source}: {exc}", source=source) from exc
        return cls.from_bytes(data, config=config, source=source)

    # -- locking and dot registry -------------------------------------------

    @contextmanager
    def locked(self) -> Iterator[TextBody]:
        with self._lock:
            yield self._body

    def _untrack(self, dot: Dot) -> None:
        with self._lock:
            self._dots.discard(dot)

    def dots(self) -> tuple[Dot, ...]:
        with self._lock:
            return tuple(self._dots)

    def _owns(self, dot: Dot) -> None:
        if dot.buffer is not self:
            raise ValueError(f"{dot!r} belongs to another buffer")

    # -- dot construction ----------------------------------------------------

    def new_dot(self) -> Dot:
        """Return a dot spanning the whole buffer."""

        return Dot(self)

    def between(self, left: Address, right: Address) -> Dot:
        with self.locked() as body:
            return Dot._attach(self, span_between(body, left, right))

    def anchor_left(self, anchor: Address, width: Address) -> Dot:
        with self.locked() as body:
            return Dot._attach(self, span_anchor_left(body, anchor, width))

    def anchor_right(self, width: Address, anchor: Address) -> Dot:
        with self.locked() as body:
            return Dot._attach(self, span_anchor_right(body, width, anchor))

    # -- queries ---------------------------------------------------------------

    def resolve_index(self, addr: Address) -> int:
        with self.locked() as body:
            return _resolve_index(addr, body)

    def resolve_coordinates(self, addr: Address) -> LineCol:
        with self.locked() as body:
            return _resolve_coordinates(addr, body)

    def next_address(self, addr: Address) -> Address:
        with self.locked() as body:
            return _next_address(addr, body)

    def prev_address(self, addr: Address) -> Address:
        with self.locked() as body:
            return _prev_address(addr, body)

    @property
    def length(self) -> int:
        with self.locked() as body:
            return body.length()

    @property
    def line_count(self) -> int:
        with self.locked() as body:
            return body.line_count()

    def text(self) -> str:
        with self.locked() as body:
            return body.slice(0, body.length())

    def snapshot(self) -> BufferView:
        with self.locked() as body:
            return BufferView(
                revision=self.revision,
                text=body.slice(0, body.length()),
                dots=tuple(sorted(dot.bounds for dot in self._dots)),
            )

    # -- text access -----------------------------------------------------------

    def get(self, dot: Dot) -> str:
        self._owns(dot)
        with self.locked() as body:
            start, end = dot.bounds
            return body.slice(start, end)

    def set(self, dot: Dot, text: str) -> Edit:
        """Replace the text under ``dot`` and make ``dot`` cover the new text.

        Other tracked dots are shifted onto the post-edit text unless the
        buffer's config disables re-anchoring.
        """

        self._owns(dot)
        with self.locked() as body:
            start, end = ensure_span(body, *dot.bounds)
            with Transaction(self, "set") as tx:
                body.splice(start, end, text)
                edit = Edit(start=start, end=end, inserted=len(text))
                dot._bounds = (start, start + len(text))
                if self.config.reanchor:
                    for other in tuple(self._dots):
                        if other is not dot:
                            other._bounds = edit.shift(other._bounds)
                tx.commit(edit)
            return edit


class Transaction(AbstractContextManager["Transaction"]):
    """Telemetry span around a single committed body edit."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[telemetry.SpanHandle]] = None
        self._handle: Optional[telemetry.SpanHandle] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.name, "revision": self.buffer.revision},
        )
        self._handle = self._span_cm.__enter__()
        return self

    def commit(self, edit: Edit) -> None:
        self.buffer.revision += 1
        self.buffer.last_edit = edit
        if self._handle is not None:
            self._handle.add_metadata("range", (edit.start, edit.end))
            self._handle.add_metadata("delta", edit.delta)

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["Buffer", "Transaction"]
