"""Internal services (pure helpers, no I/O)."""

from .validation import validate_pin_counts

__all__ = [
    "validate_pin_counts",
]
