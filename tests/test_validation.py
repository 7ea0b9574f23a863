import pytest

from tenpin.exceptions import PIN_COUNT_OUT_OF_RANGE, InvalidPinCombinationError
from tenpin.services.validation import validate_pin_counts


def test_accepts_valid_throws():
    assert validate_pin_counts([0, 10, 5]) == (0, 10, 5)
    assert validate_pin_counts(()) == ()


@pytest.mark.parametrize(
    "throws, msg",
    [
        ([11], "between 0 and 10"),
        ([3, -1], "between 0 and 10"),
        ([True], "integer"),
        ([2.5], "integer"),
        (["7"], "integer"),
        ("55", "sequence"),
        (None, "sequence"),
    ],
    ids=[
        "too-many-pins",
        "negative",
        "boolean",
        "float",
        "string-entry",
        "string",
        "not-a-sequence",
    ],
)
def test_rejects_invalid_throws(throws, msg):
    with pytest.raises(InvalidPinCombinationError) as exc:
        validate_pin_counts(throws)  # type: ignore[arg-type]
    assert msg in str(exc.value)
    assert exc.value.code == PIN_COUNT_OUT_OF_RANGE


def test_reports_position_of_bad_throw():
    with pytest.raises(InvalidPinCombinationError, match="Throw #3"):
        validate_pin_counts([1, 2, 23])
