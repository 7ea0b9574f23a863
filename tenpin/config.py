import logging
import os

logger = logging.getLogger(__name__)

SEQUENTIAL = "sequential"
SLOTTED = "slotted"
THROW_LAYOUTS = (SEQUENTIAL, SLOTTED)
DEFAULT_THROW_LAYOUT = SEQUENTIAL


def _canon_layout(val):
    """
    Normalize the throw layout name:
      - defaults to 'sequential' when unset/empty
      - ignores surrounding whitespace and case
      - falls back to the default (with a warning) for unknown names
    """
    val = (val or "").strip().lower() or DEFAULT_THROW_LAYOUT
    if val not in THROW_LAYOUTS:
        logger.warning(
            "TENPIN_THROW_LAYOUT must be one of %s (got %r); defaulting to %s",
            ", ".join(THROW_LAYOUTS),
            val,
            DEFAULT_THROW_LAYOUT,
        )
        return DEFAULT_THROW_LAYOUT
    return val

THROW_LAYOUT = _canon_layout(os.getenv("TENPIN_THROW_LAYOUT"))
