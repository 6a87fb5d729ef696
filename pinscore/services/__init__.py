"""Internal helpers (pure functions, no I/O)."""

from .validation import MAX_PINS, MIN_PINS, validate_pins

__all__ = [
    "MAX_PINS",
    "MIN_PINS",
    "validate_pins",
]
