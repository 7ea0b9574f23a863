"""Ten-pin bowling scoring engine.

Splits a flat list of throws into frames, checks that every frame could
have been bowled on a real rack, and scores strikes and spares with their
bonus throws. Two ledger layouts are understood:

- ``sequential``: one entry per ball rolled, so a strike takes one entry.
- ``slotted``: two entries per frame for frames 1-9, the entry after a
  strike holding a ``0`` placeholder; frame 10 takes the last three.
"""
import logging
from typing import List, NamedTuple, Optional, Sequence, Tuple, Union

from .. import config
from ..exceptions import (
    BONUS_OVERFLOW,
    EXTRA_THROW,
    FRAME_OVERFLOW,
    ILLEGAL_THIRD_THROW,
    PLACEHOLDER_NOT_EMPTY,
    InvalidPinCombinationError,
)
from ..ledger import ThrowLedger
from ..schemas import FRAMES_PER_GAME, FrameScore, ScoreCard
from ..services.validation import PINS, validate_pin_counts

logger = logging.getLogger(__name__)

Throws = Union[ThrowLedger, Sequence[int]]


class _Frame(NamedTuple):
    number: int
    throws: Tuple[int, ...]
    roll: int  # index of the frame's first ball in the rolls list


def _resolve_layout(name: str) -> str:
    if name not in config.THROW_LAYOUTS:
        raise ValueError(
            f"unknown throw layout {name!r}; expected one of "
            + ", ".join(config.THROW_LAYOUTS)
        )
    return name


def _kind(throws: Tuple[int, ...]) -> Optional[str]:
    if not throws:
        return None
    if throws[0] == PINS:
        return "strike"
    if len(throws) < 2:
        return None
    if throws[0] + throws[1] == PINS:
        return "spare"
    return "open"


def _is_complete(frame: _Frame) -> bool:
    kind = _kind(frame.throws)
    if frame.number < FRAMES_PER_GAME:
        return kind == "strike" or len(frame.throws) == 2
    if kind in ("strike", "spare"):
        return len(frame.throws) == 3
    return len(frame.throws) == 2


def _check_tenth_frame(tenth: Tuple[int, ...]) -> None:
    first = tenth[0]
    if first == PINS:
        # The rack is reset after the strike, and again only if the first
        # fill ball is also a strike.
        if len(tenth) == 3 and tenth[1] != PINS and tenth[1] + tenth[2] > PINS:
            raise InvalidPinCombinationError(
                f"Frame 10: fill balls {tenth[1]} and {tenth[2]} knock down "
                f"more than {PINS} pins.",
                code=BONUS_OVERFLOW,
                frame=FRAMES_PER_GAME,
            )
        return
    if len(tenth) >= 2 and first + tenth[1] > PINS:
        raise InvalidPinCombinationError(
            f"Frame 10: throws {first} and {tenth[1]} knock down more than {PINS} pins.",
            code=FRAME_OVERFLOW,
            frame=FRAMES_PER_GAME,
        )
    if len(tenth) == 3 and first + tenth[1] < PINS:
        raise InvalidPinCombinationError(
            "Frame 10: a third throw is only allowed after a strike or spare.",
            code=ILLEGAL_THIRD_THROW,
            frame=FRAMES_PER_GAME,
        )


def _segment(throws: Tuple[int, ...], layout: str) -> Tuple[List[_Frame], List[int]]:
    """Split ``throws`` into frames, validating each one.

    Returns the frames bowled so far and the balls actually rolled, which
    differ from ``throws`` only by the slotted layout's strike placeholders.
    """
    frames: List[_Frame] = []
    rolls: List[int] = []
    i = 0
    for number in range(1, FRAMES_PER_GAME):
        if i >= len(throws):
            break
        first = throws[i]
        if first == PINS:
            frames.append(_Frame(number, (first,), len(rolls)))
            rolls.append(first)
            i += 1
            if layout == config.SLOTTED and i < len(throws):
                if throws[i] != 0:
                    raise InvalidPinCombinationError(
                        f"Frame {number}: the slot after a strike must be 0 "
                        f"(got {throws[i]}).",
                        code=PLACEHOLDER_NOT_EMPTY,
                        frame=number,
                    )
                i += 1
            continue
        pair = throws[i:i + 2]
        if sum(pair) > PINS:
            raise InvalidPinCombinationError(
                f"Frame {number}: throws {pair[0]} and {pair[1]} knock down "
                f"more than {PINS} pins.",
                code=FRAME_OVERFLOW,
                frame=number,
            )
        frames.append(_Frame(number, pair, len(rolls)))
        rolls.extend(pair)
        i += len(pair)

    if i < len(throws):
        tenth = throws[i:i + 3]
        _check_tenth_frame(tenth)
        frames.append(_Frame(FRAMES_PER_GAME, tenth, len(rolls)))
        rolls.extend(tenth)
        i += len(tenth)

    if i < len(throws):
        raise InvalidPinCombinationError(
            f"Throw #{i + 1} was recorded after the game was over.",
            code=EXTRA_THROW,
        )
    return frames, rolls


def _frame_score(frame: _Frame, rolls: List[int]) -> Optional[int]:
    """Score one frame, or ``None`` while its bonus balls are still to come."""
    if not frame.throws:
        return None
    kind = _kind(frame.throws)
    if frame.number == FRAMES_PER_GAME:
        if kind in ("strike", "spare") and len(frame.throws) < 3:
            return None
        return sum(frame.throws)
    if kind == "strike":
        bonus = rolls[frame.roll + 1:frame.roll + 3]
        return PINS + sum(bonus) if len(bonus) == 2 else None
    if kind == "spare":
        bonus = rolls[frame.roll + 2:frame.roll + 3]
        return PINS + sum(bonus) if bonus else None
    # Open, or a first ball still waiting for its partner.
    return sum(frame.throws)


def _build_card(frames: List[_Frame], rolls: List[int], layout: str) -> ScoreCard:
    scored: List[FrameScore] = []
    running = 0
    stopped = False
    for number in range(1, FRAMES_PER_GAME + 1):
        if number <= len(frames):
            frame = frames[number - 1]
        else:
            frame = _Frame(number, (), len(rolls))
        score = None if stopped else _frame_score(frame, rolls)
        if score is None:
            stopped = True
        else:
            running += score
        scored.append(
            FrameScore(
                frame=number,
                throws=frame.throws,
                kind=_kind(frame.throws),
                score=score,
                cumulative=None if score is None else running,
                complete=_is_complete(frame),
            )
        )
    return ScoreCard(frames=tuple(scored), final_score=running, layout=layout)


class BowlingScoreCalculator:
    """Turns a ledger of throws into a :class:`ScoreCard`.

    The calculator keeps no state between calls and never modifies the
    ledger, so one instance can be shared freely. ``layout`` fixes how
    ledger indices map to frames; when omitted, ``TENPIN_THROW_LAYOUT``
    decides at call time.
    """

    def __init__(self, layout: Optional[str] = None) -> None:
        self.layout = _resolve_layout(layout) if layout is not None else None

    def compute_score_card(
        self, throws: Throws, *, layout: Optional[str] = None
    ) -> ScoreCard:
        layout = _resolve_layout(layout or self.layout or config.THROW_LAYOUT)
        try:
            raw = throws.throws() if isinstance(throws, ThrowLedger) else throws
            values = validate_pin_counts(raw)
            frames, rolls = _segment(values, layout)
        except InvalidPinCombinationError as exc:
            logger.debug(
                "Rejected %s ledger (code=%s, frame=%s): %s",
                layout,
                exc.code,
                exc.frame,
                exc.detail,
            )
            raise
        card = _build_card(frames, rolls, layout)
        logger.debug(
            "Scored %s ledger: %d throws, %d frames scored, final score %d",
            layout,
            len(values),
            sum(1 for f in card.frames if f.score is not None),
            card.final_score,
        )
        return card


_calculator = BowlingScoreCalculator()


def compute_score_card(throws: Throws, *, layout: Optional[str] = None) -> ScoreCard:
    return _calculator.compute_score_card(throws, layout=layout)


def score_game(throws: Throws, *, layout: Optional[str] = None) -> int:
    """Return only the final score of ``throws``."""
    return compute_score_card(throws, layout=layout).final_score
