"""Telemetry services for the dot engine, backed by telelog.

The rest of the engine only touches four entry points:

``configure(...)`` -- install an explicit telelog config or a named preset
``get_logger(name)`` -- fetch (and cache) a configured logger
``record_event(name, ...)`` -- emit a structured event at a chosen level
``span(name, ...)`` -- profile a block and optionally track it as a component
"""

from __future__ import annotations

import threading
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

from dot_engine.config import env, env_flag

tl = cast(Any, telelog)

DEFAULT_LOGGER_NAME = env("LOGGER", "dot_engine") or "dot_engine"

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None
_CONTEXT_LOCK = threading.Lock()
_CONTEXT_REFS: Dict[Tuple[int, str], int] = {}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _format_pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _stringify(value)) for key, value in data.items()]


def _log_file(fallback: str) -> str:
    return env("LOG_FILE") or fallback


def _development() -> Any:
    config = tl.Config()
    config.with_min_level("DEBUG")
    config.with_console_output(True)
    config.with_colored_output(True)
    config.with_json_format(False)
    return config


def _production() -> Any:
    config = tl.Config()
    config.with_min_level("INFO")
    config.with_console_output(False)
    config.with_file_output(_log_file("dot_engine.log"))
    config.with_buffering(True)
    return config


def _performance() -> Any:
    config = tl.Config()
    config.with_min_level("DEBUG")
    config.with_console_output(False)
    config.with_json_format(True)
    config.with_file_output(_log_file("dot_engine-performance.log"))
    config.with_buffering(True)
    return config


_PRESETS: Dict[str, Callable[[], Any]] = {
    "development": _development,
    "production": _production,
    "performance": _performance,
}


def _build_default_config() -> Any:
    config = tl.Config()
    config.with_min_level((env("LOG_LEVEL") or "INFO").upper())

    console = not env_flag("DISABLE_CONSOLE", False)
    config.with_console_output(console)
    if console:
        config.with_colored_output(not env_flag("NO_COLOR", False))

    if env_flag("LOG_JSON", False):
        config.with_json_format(True)

    log_file = env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)

    if env_flag("LOG_BUFFERED", False):
        config.with_buffering(True)
        config.with_buffer_size(int(env("LOG_BUFFER_SIZE") or "2048"))

    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active telelog configuration.

    Parameters
    ----------
    config:
        Explicit ``telelog.Config`` to adopt.
    preset:
        One of ``"development"``, ``"production"`` or ``"performance"``.
        Mutually exclusive with ``config``.
    """

    global _ACTIVE_CONFIG
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        try:
            builder = _PRESETS[preset.lower()]
        except KeyError as exc:
            raise ValueError(f"Unknown preset '{preset}'.") from exc
        config = builder()
    elif config is None:
        config = _build_default_config()

    config.with_profiling(True)
    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()


def _ensure_config() -> Any:
    if _ACTIVE_CONFIG is None:
        configure()
    return _ACTIVE_CONFIG


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` bound to the active config."""

    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(
            logger_name, _ensure_config()
        )
    return _LOGGER_CACHE[logger_name]


def _level_method(logger: Any, level: str) -> Tuple[Any, bool]:
    name = str(level).lower()
    with_data = getattr(logger, f"{name}_with", None)
    if with_data is not None:
        return with_data, True
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return plain, False


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    method, accepts_data = _level_method(logger, level)
    if accepts_data:
        method(message, _format_pairs(payload))
    else:
        method(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` attached as key/value pairs."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Yielded by ``span`` so callers can attach results to the span."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def _payload(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        if extra:
            payload.update({key: _stringify(val) for key, val in extra.items()})
        return payload

    def fail(self, reason: str) -> None:
        _emit(self.logger, "error", "span::fail", self._payload({"reason": reason}))


def _push_context(logger: Any, key: str, value: str) -> None:
    with _CONTEXT_LOCK:
        ref = (id(logger), key)
        _CONTEXT_REFS[ref] = _CONTEXT_REFS.get(ref, 0) + 1
        logger.add_context(key, value)


def _pop_context(logger: Any, key: str) -> None:
    # Loggers are shared across threads; a key stays set while any span holds it.
    with _CONTEXT_LOCK:
        ref = (id(logger), key)
        remaining = _CONTEXT_REFS.get(ref, 1) - 1
        if remaining > 0:
            _CONTEXT_REFS[ref] = remaining
            return
        _CONTEXT_REFS.pop(ref, None)
        logger.remove_context(key)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block of work.

    ``component=True`` tracks the block under ``name``; a string tracks it
    under that identifier. ``metadata`` is pushed as logger context for the
    duration of the block and copied onto the handle.
    """

    log = get_logger(logger_name)
    component_name: Optional[str] = None
    if component is True:
        component_name = name
    elif isinstance(component, str):
        component_name = component

    serialized = {key: _stringify(value) for key, value in (metadata or {}).items()}

    with ExitStack() as stack:
        for key, value in serialized.items():
            _push_context(log, key, value)
            stack.callback(_pop_context, log, key)
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        handle = SpanHandle(
            logger=log,
            span_name=name,
            component_name=component_name,
            metadata=dict(serialized),
        )
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
