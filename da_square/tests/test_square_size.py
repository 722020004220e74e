import pytest

from da_square.errors import InvalidInput
from da_square.rules.square_size import blob_min_square_size, share_coords


@pytest.mark.parametrize(
    "share_count, want",
    [(0, 1), (1, 1), (2, 2), (3, 2), (4, 2), (5, 4), (16, 4), (17, 8), (64, 8), (65, 16), (16384, 128), (16385, 256)],
)
def test_blob_min_square_size(share_count, want):
    assert blob_min_square_size(share_count) == want


def test_blob_min_square_size_holds_the_blob():
    for n in range(0, 2000):
        s = blob_min_square_size(n)
        assert s * s >= n
        # half the side would be too small (except for the 1x1 floor)
        assert s == 1 or (s // 2) ** 2 < n


def test_blob_min_square_size_rejects_negative():
    with pytest.raises(InvalidInput):
        blob_min_square_size(-1)


def test_share_coords():
    assert share_coords(0, 4) == (0, 0)
    assert share_coords(3, 4) == (0, 3)
    assert share_coords(4, 4) == (1, 0)
    assert share_coords(258, 128) == (2, 2)
    # rows past the square are not checked
    assert share_coords(40, 4) == (10, 0)


@pytest.mark.parametrize("index, size", [(0, 0), (0, 3), (0, -4), (-1, 4)])
def test_share_coords_rejects_bad_input(index, size):
    with pytest.raises(InvalidInput):
        share_coords(index, size)
