from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

FRAMES_PER_GAME = 10

FrameKind = Literal["strike", "spare", "open"]


class FrameScore(BaseModel):
    frame: int = Field(..., ge=1, le=FRAMES_PER_GAME)
    throws: Tuple[int, ...] = ()
    kind: Optional[FrameKind] = None
    score: Optional[int] = Field(default=None, ge=0, le=30)
    cumulative: Optional[int] = Field(default=None, ge=0, le=300)
    complete: bool = False

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def _cumulative_needs_score(self) -> "FrameScore":
        if (self.score is None) != (self.cumulative is None):
            raise ValueError("score and cumulative must both be set or both be None")
        return self


class ScoreCard(BaseModel):
    """Per-frame scores of one game and their total.

    A frame whose bonus throws have not been bowled yet has no score, and
    neither does any frame after it.
    """

    frames: Tuple[FrameScore, ...]
    final_score: int = Field(..., ge=0, le=300)
    layout: Literal["sequential", "slotted"] = "sequential"

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def _check_frames(self) -> "ScoreCard":
        if len(self.frames) != FRAMES_PER_GAME:
            raise ValueError(f"a score card has exactly {FRAMES_PER_GAME} frames")
        numbers = [f.frame for f in self.frames]
        if numbers != list(range(1, FRAMES_PER_GAME + 1)):
            raise ValueError("frames must be numbered 1..10 in order")
        total = sum(f.score for f in self.frames if f.score is not None)
        if total != self.final_score:
            raise ValueError(
                f"final_score {self.final_score} does not match frame total {total}"
            )
        return self

    @property
    def scores(self) -> Tuple[Optional[int], ...]:
        return tuple(f.score for f in self.frames)

    @property
    def is_complete(self) -> bool:
        return all(f.complete and f.score is not None for f in self.frames)
