import pytest

from tenpin.exceptions import THROW_GAP, InvalidPinCombinationError
from tenpin.ledger import MAX_THROWS, ThrowLedger


def test_new_ledger_is_empty():
    ledger = ThrowLedger()
    assert ledger.throw_count == 0
    assert len(ledger) == 0
    assert ledger.throws() == ()
    assert ledger.get_throw(0) is None


def test_max_throws_is_published():
    assert MAX_THROWS == 21
    assert ThrowLedger.MAX_THROWS == MAX_THROWS


def test_set_and_get_throw():
    ledger = ThrowLedger()
    ledger.set_throw(0, 7)
    ledger.set_throw(1, 2)
    assert ledger.get_throw(0) == 7
    assert ledger.get_throw(1) == 2
    assert ledger.throw_count == 2
    assert ledger.throws() == (7, 2)


def test_set_throw_overwrites_in_place():
    ledger = ThrowLedger.from_throws([3, 4])
    ledger.set_throw(1, 6)
    assert ledger.throws() == (3, 6)


def test_pin_counts_are_not_checked_on_set():
    ledger = ThrowLedger()
    ledger.set_throw(0, 16)
    assert ledger.get_throw(0) == 16


@pytest.mark.parametrize("index", [-1, MAX_THROWS, 100], ids=["negative", "capacity", "far"])
def test_index_out_of_range(index):
    ledger = ThrowLedger()
    with pytest.raises(IndexError):
        ledger.set_throw(index, 1)
    with pytest.raises(IndexError):
        ledger.get_throw(index)


def test_from_throws_rejects_more_than_capacity():
    with pytest.raises(IndexError):
        ThrowLedger.from_throws([1] * (MAX_THROWS + 1))


def test_gap_between_throws_is_invalid():
    ledger = ThrowLedger()
    ledger.set_throw(0, 4)
    ledger.set_throw(2, 5)
    assert ledger.throw_count == 2
    with pytest.raises(InvalidPinCombinationError) as exc:
        ledger.throws()
    assert exc.value.code == THROW_GAP
    assert "#2 is missing" in str(exc.value)


def test_clear_throw_reopens_slot():
    ledger = ThrowLedger.from_throws([4, 5, 6])
    ledger.clear_throw(2)
    assert ledger.get_throw(2) is None
    assert ledger.throws() == (4, 5)


def test_repr_lists_recorded_throws():
    assert repr(ThrowLedger.from_throws([10, 3])) == "ThrowLedger([10, 3])"
