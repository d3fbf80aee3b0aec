"""Engine configuration sourced from ``DOT_ENGINE_*`` environment variables."""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "DOT_ENGINE_"
DEFAULT_ENCODING = "utf-8"
DEFAULT_BUFFER_NAME = "default"


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    raw = env(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Settings shared by every buffer created with this config.

    ``encoding`` is used when decoding byte sources, ``reanchor`` controls
    whether sibling dots are shifted after an edit, and ``name`` labels the
    buffer in telemetry output.
    """

    encoding: str = DEFAULT_ENCODING
    reanchor: bool = True
    name: str = DEFAULT_BUFFER_NAME

    def __post_init__(self) -> None:
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding '{self.encoding}'") from exc
        if not self.name:
            raise ValueError("Buffer name cannot be empty")

    @classmethod
    def from_env(cls, *, name: Optional[str] = None) -> "EngineConfig":
        return cls(
            encoding=env("ENCODING") or DEFAULT_ENCODING,
            reanchor=env_flag("REANCHOR", True),
            name=name or env("BUFFER_NAME") or DEFAULT_BUFFER_NAME,
        )

    def with_name(self, name: str) -> "EngineConfig":
        return EngineConfig(encoding=self.encoding, reanchor=self.reanchor, name=name)


__all__ = [
    "ENV_PREFIX",
    "EngineConfig",
    "env",
    "env_flag",
]
