from typing import Any, List, Sequence, Tuple

from ..exceptions import PIN_COUNT_OUT_OF_RANGE, InvalidPinCombinationError

PINS = 10


def validate_pin_counts(
    throws: Sequence[Any],
    *,
    max_pins: int = PINS,
) -> Tuple[int, ...]:
    """Validate individual throw values and return them as a tuple.

    Rules:
    - ``throws`` must be a sequence (strings and bytes are rejected)
    - Each throw must be an integer (booleans are rejected)
    - Each throw must be between 0 and ``max_pins``

    An empty sequence is valid: nothing has been bowled yet.
    """

    if not isinstance(throws, Sequence) or isinstance(throws, (str, bytes)):
        raise InvalidPinCombinationError(
            "Throws must be provided as a sequence of integers.",
            code=PIN_COUNT_OUT_OF_RANGE,
        )

    normalized: List[int] = []
    for index, raw in enumerate(throws, start=1):
        # Reject booleans explicitly (bool is a subclass of int in Python)
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise InvalidPinCombinationError(
                f"Throw #{index} must be an integer (got {raw!r}).",
                code=PIN_COUNT_OUT_OF_RANGE,
            )
        if not 0 <= raw <= max_pins:
            raise InvalidPinCombinationError(
                f"Throw #{index} must be between 0 and {max_pins} (got {raw}).",
                code=PIN_COUNT_OUT_OF_RANGE,
            )
        normalized.append(raw)

    return tuple(normalized)
