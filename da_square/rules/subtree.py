"""
Animica • DA • Square - Subtree width

A blob share commitment is a merkle mountain range over the blob's shares.
Each mountain is an aligned subtree of the square's row trees, and the
subtree root threshold caps how many mountains a blob may need. The width
computed here is the leaf count of the largest mountain, which is also the
alignment every blob start index must respect.
"""

from __future__ import annotations

from .square_size import blob_min_square_size
from ..utils.intmath import as_int, ceil_div, round_up_power_of_two


def subtree_width(share_count: int, subtree_root_threshold: int) -> int:
    """
    Maximum number of leaves per subtree in the share commitment of a blob
    spanning `share_count` shares.

    ceil(share_count / threshold), rounded up to a power of two, then clamped
    to the blob's own minimal square size.
    """
    share_count = as_int(share_count, "share_count")
    subtree_root_threshold = as_int(subtree_root_threshold, "subtree_root_threshold")
    s = ceil_div(share_count, subtree_root_threshold)
    s = round_up_power_of_two(s)
    # never wider than a row of the smallest square that could hold the blob
    return min(s, blob_min_square_size(share_count))


__all__ = ["subtree_width"]
