"""Ten-pin bowling score calculation with legality checks."""

from .exceptions import InvalidPinCombinationError, ScoringError
from .ledger import MAX_THROWS, ThrowLedger
from .schemas import FrameScore, ScoreCard
from .scoring import BowlingScoreCalculator, compute_score_card, score_game

__all__ = [
    "BowlingScoreCalculator",
    "FrameScore",
    "InvalidPinCombinationError",
    "MAX_THROWS",
    "ScoreCard",
    "ScoringError",
    "ThrowLedger",
    "compute_score_card",
    "score_game",
]
