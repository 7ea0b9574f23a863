from tenpin.exceptions import (
    FRAME_OVERFLOW,
    InvalidPinCombinationError,
    ProblemDetail,
    ScoringError,
)


def test_invalid_pin_combination_is_a_scoring_error():
    exc = InvalidPinCombinationError("too many pins", code=FRAME_OVERFLOW, frame=3)
    assert isinstance(exc, ScoringError)
    assert str(exc) == "too many pins"
    assert exc.detail == "too many pins"
    assert exc.code == FRAME_OVERFLOW
    assert exc.frame == 3


def test_to_problem():
    exc = InvalidPinCombinationError("too many pins", code=FRAME_OVERFLOW, frame=3)
    problem = exc.to_problem(instance="/games/1")
    assert isinstance(problem, ProblemDetail)
    assert problem.model_dump() == {
        "type": "about:blank",
        "title": "Invalid pin combination",
        "detail": "too many pins",
        "status": 422,
        "instance": "/games/1",
        "code": FRAME_OVERFLOW,
    }
