"""
Animica • DA • Square placement rules

Deterministic rules that decide where each blob starts inside the data
square, so that blob share commitments can be built from aligned subtrees.
Every node must compute identical indices for identical inputs.

Submodules (lazy-imported)
--------------------------
square_size   - minimal square side for a share count, (row, col) mapping
subtree       - subtree width of a blob under the subtree root threshold
alignment     - rounding a cursor up to a multiple of a width
planner       - next share index for one blob, batch placement

Power-of-two rounding lives in `da_square.utils.intmath` and is re-exported
here for convenience.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Tuple

from ..version import __version__  # re-export

# Public API surface (attribute name -> (module_path, attr_name))
_EXPORTS: Dict[str, Tuple[str, str]] = {
    # power-of-two math
    "round_up_power_of_two": ("da_square.utils.intmath", "round_up_power_of_two"),
    "round_down_power_of_two": ("da_square.utils.intmath", "round_down_power_of_two"),
    # square size
    "blob_min_square_size": ("da_square.rules.square_size", "blob_min_square_size"),
    "share_coords": ("da_square.rules.square_size", "share_coords"),
    # subtree width
    "subtree_width": ("da_square.rules.subtree", "subtree_width"),
    # alignment
    "round_up_by_multiple_of": ("da_square.rules.alignment", "round_up_by_multiple_of"),
    # planner
    "BlobPlacement": ("da_square.rules.planner", "BlobPlacement"),
    "PlacementPlan": ("da_square.rules.planner", "PlacementPlan"),
    "place_blob": ("da_square.rules.planner", "place_blob"),
    "next_share_index": ("da_square.rules.planner", "next_share_index"),
    "blob_shares_used_non_interactive_defaults": (
        "da_square.rules.planner",
        "blob_shares_used_non_interactive_defaults",
    ),
    "plan_blob_placements": ("da_square.rules.planner", "plan_blob_placements"),
}

__all__ = tuple(sorted(_EXPORTS)) + ("__version__",)


def __getattr__(name: str) -> Any:
    """
    Lazy attribute loader for the public API. Imports the target symbol from the
    corresponding submodule on first access.
    """
    target = _EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module 'da_square.rules' has no attribute {name!r}")
    mod_path, attr_name = target
    module = __import__(mod_path, fromlist=[attr_name])
    value = getattr(module, attr_name)
    globals()[name] = value  # cache
    return value


if TYPE_CHECKING:
    from ..utils.intmath import round_down_power_of_two, round_up_power_of_two
    from .alignment import round_up_by_multiple_of
    from .planner import (BlobPlacement, PlacementPlan,
                          blob_shares_used_non_interactive_defaults,
                          next_share_index, place_blob, plan_blob_placements)
    from .square_size import blob_min_square_size, share_coords
    from .subtree import subtree_width
