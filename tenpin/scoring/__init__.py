"""Scoring engines."""

from . import bowling
from .bowling import BowlingScoreCalculator, compute_score_card, score_game

__all__ = [
    "bowling",
    "BowlingScoreCalculator",
    "compute_score_card",
    "score_game",
]
