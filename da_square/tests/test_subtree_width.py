import pytest

from da_square.errors import InvalidDivisor, InvalidInput
from da_square.rules.square_size import blob_min_square_size
from da_square.rules.subtree import subtree_width
from da_square.tests import DEFAULT_MAX_SQUARE_SIZE as MAX_SQ
from da_square.tests import DEFAULT_SUBTREE_ROOT_THRESHOLD as T


@pytest.mark.parametrize(
    "share_count, want",
    [
        (0, 1),
        (1, 1),
        (2, 1),
        (T, 1),
        (T + 1, 2),
        (T - 1, 1),
        (T * 2, 2),
        (T * 2 + 1, 4),
        (T * 3 - 1, 4),
        (T * 4, 4),
        (T * 5, 8),
        (T * MAX_SQ - 1, 128),
    ],
)
def test_subtree_width_default_threshold(share_count, want):
    assert subtree_width(share_count, T) == want


def test_subtree_width_examples():
    assert subtree_width(129, 64) == 4
    assert subtree_width(64, 64) == 1


def test_clamped_to_blob_min_square_size():
    # ceil(5 / 1) = 5 -> 8, but a 5-share blob fits in a 4x4 square
    assert subtree_width(5, 1) == 4
    assert subtree_width(17, 1) == 8
    assert subtree_width(1000, 2) == blob_min_square_size(1000) == 32


def test_zero_threshold_is_an_invalid_divisor():
    with pytest.raises(InvalidDivisor):
        subtree_width(10, 0)


def test_negative_inputs_are_rejected():
    with pytest.raises(InvalidInput):
        subtree_width(10, -64)
    with pytest.raises(InvalidInput):
        subtree_width(-1, 64)
