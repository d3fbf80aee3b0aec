"""Addressing and selection core for a structural text editor."""

__all__ = [
    "buffer",
    "config",
    "runtime",
]

__version__ = "0.1.0"
