"""
Animica • DA • Square - Share index planner

Assigns start indices to blobs laid out one after another in the data square,
following the blob share commitment rules: every blob starts at a multiple of
its own subtree width, so its commitment can be rebuilt from aligned subtree
roots of the square's row trees.

Placement is strictly sequential (each index depends on where the previous
blob ended) and all-or-nothing: the first failure aborts the whole batch.

Usage
-----
    used, indexes = blob_shares_used_non_interactive_defaults(1, 64, 128, 128, 128)
    # used == 385, indexes == [2, 130, 258]

    plan = plan_blob_placements(1, [128, 128, 128])
    plan.coords(128)  # [(0, 2), (1, 2), (2, 2)]

The planner does not check the result against a maximum square size; callers
building a square are responsible for that.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from ..errors import LayoutError
from ..utils.intmath import as_int
from .alignment import round_up_by_multiple_of
from .square_size import share_coords
from .subtree import subtree_width

log = logging.getLogger(__name__)


# --------------------------------------------------------------------------- #
# Results
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class BlobPlacement:
    """
    Where one blob landed.

    Attributes:
      index:   first share of the blob (multiple of `width`).
      length:  blob length in shares.
      width:   subtree width the index was aligned to.
      padding: shares skipped between the incoming cursor and `index`.
    """

    index: int
    length: int
    width: int
    padding: int

    @property
    def end(self) -> int:
        """Index one past the blob's last share."""
        return self.index + self.length


@dataclass(frozen=True)
class PlacementPlan:
    """Placement of an ordered batch of blobs, starting at `start`."""

    start: int
    shares_used: int
    placements: Tuple[BlobPlacement, ...]

    @property
    def indexes(self) -> Tuple[int, ...]:
        return tuple(p.index for p in self.placements)

    @property
    def end(self) -> int:
        return self.start + self.shares_used

    def as_tuple(self) -> Tuple[int, List[int]]:
        """(shares_used, indexes) in the shape of the batch function."""
        return self.shares_used, list(self.indexes)

    def coords(self, square_size: int) -> List[Tuple[int, int]]:
        """(row, col) of every blob start in a square of side `square_size`."""
        return [share_coords(p.index, square_size) for p in self.placements]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": self.start,
            "sharesUsed": self.shares_used,
            "blobs": [
                {
                    "index": p.index,
                    "length": p.length,
                    "width": p.width,
                    "padding": p.padding,
                }
                for p in self.placements
            ],
        }


# --------------------------------------------------------------------------- #
# Single blob
# --------------------------------------------------------------------------- #

def place_blob(cursor: int, blob_share_len: int, subtree_root_threshold: int) -> BlobPlacement:
    """
    Place one blob at the first index >= `cursor` aligned to its subtree width.

    `cursor` is expected to be the index after the end of the previous blob.
    Errors keep their class; the message and data say which step failed.
    """
    cursor = as_int(cursor, "cursor")
    blob_share_len = as_int(blob_share_len, "blob_share_len")
    try:
        width = subtree_width(blob_share_len, subtree_root_threshold)
    except LayoutError as exc:
        raise exc.wrap(
            f"failed to compute subtree width for blob of {blob_share_len} shares",
            step="subtree_width",
            blob_share_len=blob_share_len,
            subtree_root_threshold=subtree_root_threshold,
        ) from exc
    try:
        index = round_up_by_multiple_of(cursor, width)
    except LayoutError as exc:
        raise exc.wrap(
            f"failed to round up cursor {cursor} by multiple of {width}",
            step="round_up_by_multiple_of",
            cursor=cursor,
            width=width,
        ) from exc
    return BlobPlacement(index=index, length=blob_share_len, width=width, padding=index - cursor)


def next_share_index(cursor: int, blob_share_len: int, subtree_root_threshold: int) -> int:
    """
    Next index in the square that a blob of `blob_share_len` shares may start
    at, given the end of the previous blob (`cursor`).
    """
    return place_blob(cursor, blob_share_len, subtree_root_threshold).index


# --------------------------------------------------------------------------- #
# Batches
# --------------------------------------------------------------------------- #

def _plan(cursor: int, subtree_root_threshold: int, blob_lens: Iterable[int]) -> PlacementPlan:
    start = cursor = as_int(cursor, "cursor")
    placements: List[BlobPlacement] = []
    for i, blob_len in enumerate(blob_lens):
        try:
            placed = place_blob(cursor, blob_len, subtree_root_threshold)
        except LayoutError as exc:
            log.warning(
                "planner: aborting batch at blob %d (cursor=%d len=%r): %s",
                i, cursor, blob_len, exc,
            )
            raise exc.wrap(
                "failed to calculate next share index",
                blob_index=i,
            ) from exc
        log.debug(
            "planner: blob %d len=%d width=%d index=%d padding=%d",
            i, placed.length, placed.width, placed.index, placed.padding,
        )
        placements.append(placed)
        cursor = placed.end
    plan = PlacementPlan(start=start, shares_used=cursor - start, placements=tuple(placements))
    log.debug(
        "planner: placed %d blobs start=%d shares_used=%d",
        len(placements), start, plan.shares_used,
    )
    return plan


def blob_shares_used_non_interactive_defaults(
    cursor: int, subtree_root_threshold: int, *blob_share_lens: int
) -> Tuple[int, List[int]]:
    """
    Number of shares spanned by a run of blobs and the start index of each.

    Starting at `cursor`, every blob is placed with `next_share_index` and the
    cursor advances by the blob length. Returns (final cursor - start,
    indexes). Fails fast on the first error; nothing partial is returned.
    """
    return _plan(cursor, subtree_root_threshold, blob_share_lens).as_tuple()


def plan_blob_placements(
    cursor: int,
    blob_share_lens: Sequence[int],
    *,
    subtree_root_threshold: Optional[int] = None,
) -> PlacementPlan:
    """
    Like `blob_shares_used_non_interactive_defaults` but returns the full
    `PlacementPlan`. The threshold defaults to the configured protocol value.
    """
    if subtree_root_threshold is None:
        from ..config import get_config

        subtree_root_threshold = get_config().subtree_root_threshold
    return _plan(cursor, subtree_root_threshold, blob_share_lens)


__all__ = [
    "BlobPlacement",
    "PlacementPlan",
    "place_blob",
    "next_share_index",
    "blob_shares_used_non_interactive_defaults",
    "plan_blob_placements",
]
