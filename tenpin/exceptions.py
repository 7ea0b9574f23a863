from typing import Optional

from pydantic import BaseModel

PIN_COUNT_OUT_OF_RANGE = "pin_count_out_of_range"
FRAME_OVERFLOW = "frame_overflow"
ILLEGAL_THIRD_THROW = "illegal_third_throw"
BONUS_OVERFLOW = "bonus_overflow"
EXTRA_THROW = "extra_throw"
THROW_GAP = "throw_gap"
PLACEHOLDER_NOT_EMPTY = "placeholder_not_empty"


class ProblemDetail(BaseModel):
    """RFC 7807 compliant error response."""

    type: str = "about:blank"
    title: str
    detail: Optional[str] = None
    status: int
    instance: Optional[str] = None
    code: str


class ScoringError(Exception):
    """Base class for scoring exceptions."""

    def __init__(
        self,
        detail: str,
        *,
        code: str,
        title: str = "Invalid bowling game",
        frame: Optional[int] = None,
        status_code: int = 422,
        type_: str = "about:blank",
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.code = code
        self.title = title
        self.frame = frame
        self.status_code = status_code
        self.type = type_

    def to_problem(self, instance: Optional[str] = None) -> ProblemDetail:
        return ProblemDetail(
            type=self.type,
            title=self.title,
            detail=self.detail,
            status=self.status_code,
            instance=instance,
            code=self.code,
        )


class InvalidPinCombinationError(ScoringError):
    """Raised when a throw or frame cannot occur in a legal game.

    ``code`` names the broken rule (``frame_overflow``, ``bonus_overflow``
    and so on); ``frame`` is the 1-based frame it was found in, when known.
    """

    def __init__(
        self,
        detail: str,
        *,
        code: str,
        frame: Optional[int] = None,
    ) -> None:
        super().__init__(
            detail,
            code=code,
            title="Invalid pin combination",
            frame=frame,
        )
