"""
Animica • DA • Square - Size estimation & coordinates

The data square is a row-major grid whose side is always a power of two.
This module answers two questions about it:

  • How large a square does a blob of N shares need at minimum?
  • Where (row, col) does a linear share index land in a square of side S?

Pure layout math; the square itself is never materialized.
"""

from __future__ import annotations

from typing import Tuple

from ..errors import InvalidInput
from ..utils.intmath import as_int, ceil_sqrt, is_power_of_two, round_up_power_of_two


def blob_min_square_size(share_count: int) -> int:
    """
    Smallest power-of-two side `s` such that `s * s >= share_count`.

    A zero share count yields 1.
    """
    share_count = as_int(share_count, "share_count")
    if share_count < 0:
        raise InvalidInput(
            f"share count {share_count} must be non-negative",
            data={"share_count": share_count},
        )
    return round_up_power_of_two(ceil_sqrt(share_count))


def share_coords(index: int, square_size: int) -> Tuple[int, int]:
    """index → (row, col) in a square of side `square_size` (row-major)."""
    index = as_int(index, "index")
    square_size = as_int(square_size, "square_size")
    if not is_power_of_two(square_size):
        raise InvalidInput(
            f"square size {square_size} must be a positive power of two",
            data={"square_size": square_size},
        )
    if index < 0:
        raise InvalidInput(f"negative share index: {index}", data={"index": index})
    return index // square_size, index % square_size


__all__ = ["blob_min_square_size", "share_coords"]
