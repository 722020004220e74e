import pytest

from da_square.errors import InvalidDivisor, InvalidInput, LayoutError
from da_square.rules.alignment import round_up_by_multiple_of


@pytest.mark.parametrize(
    "cursor, width, want",
    [
        (1, 2, 2),
        (2, 2, 2),
        (0, 2, 0),
        (5, 2, 6),
        (8, 16, 16),
        (33, 1, 33),
        (32, 16, 32),
        (33, 16, 48),
        (13, 4, 16),
    ],
)
def test_round_up_by_multiple_of(cursor, width, want):
    assert round_up_by_multiple_of(cursor, width) == want


def test_zero_width_fails():
    with pytest.raises(InvalidDivisor) as ei:
        round_up_by_multiple_of(10, 0)
    err = ei.value
    assert isinstance(err, LayoutError)
    assert isinstance(err, ZeroDivisionError)
    assert err.code == "invalid_divisor"
    assert err.data == {"cursor": 10}


def test_negative_width_fails():
    # would otherwise round 5 down to 4
    with pytest.raises(InvalidInput) as ei:
        round_up_by_multiple_of(5, -4)
    assert ei.value.data == {"width": -4}


def test_negative_cursor_fails():
    with pytest.raises(InvalidInput) as ei:
        round_up_by_multiple_of(-5, 4)
    assert ei.value.data == {"cursor": -5}


def test_zero_width_checked_before_cursor():
    with pytest.raises(InvalidDivisor):
        round_up_by_multiple_of(-5, 0)
