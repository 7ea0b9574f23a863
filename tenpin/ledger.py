"""Raw pin-fall record for a single game."""
from typing import Iterable, List, Optional, Tuple

from .exceptions import THROW_GAP, InvalidPinCombinationError

# 10 frames x 2 throws, plus the tenth frame's fill ball.
MAX_THROWS = 21


class ThrowLedger:
    """Fixed-capacity, random-access record of throws by index.

    Values are stored as given; whether they make a legal game is decided
    by the score calculator, since that depends on the surrounding throws.
    """

    MAX_THROWS = MAX_THROWS

    def __init__(self) -> None:
        self._slots: List[Optional[int]] = [None] * MAX_THROWS

    @classmethod
    def from_throws(cls, values: Iterable[int]) -> "ThrowLedger":
        ledger = cls()
        for index, value in enumerate(values):
            ledger.set_throw(index, value)
        return ledger

    def _check_index(self, index: int) -> None:
        if not 0 <= index < MAX_THROWS:
            raise IndexError(
                f"throw index {index} out of range (0..{MAX_THROWS - 1})"
            )

    def set_throw(self, index: int, pin_count: int) -> None:
        self._check_index(index)
        self._slots[index] = pin_count

    def get_throw(self, index: int) -> Optional[int]:
        """Return the throw at ``index``, or ``None`` if it is not set yet."""
        self._check_index(index)
        return self._slots[index]

    def clear_throw(self, index: int) -> None:
        self._check_index(index)
        self._slots[index] = None

    @property
    def throw_count(self) -> int:
        return sum(1 for value in self._slots if value is not None)

    def __len__(self) -> int:
        return self.throw_count

    def throws(self) -> Tuple[int, ...]:
        """Return the recorded throws in order.

        Raises ``InvalidPinCombinationError`` when a set slot follows an
        unset one, since the game cannot be read past the gap.
        """
        recorded: List[int] = []
        gap_at: Optional[int] = None
        for index, value in enumerate(self._slots):
            if value is None:
                if gap_at is None:
                    gap_at = index
                continue
            if gap_at is not None:
                raise InvalidPinCombinationError(
                    f"Throw #{index + 1} is recorded but throw #{gap_at + 1} is missing.",
                    code=THROW_GAP,
                )
            recorded.append(value)
        return tuple(recorded)

    def __repr__(self) -> str:
        recorded = [value for value in self._slots if value is not None]
        return f"ThrowLedger({recorded!r})"
