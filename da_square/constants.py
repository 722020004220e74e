"""
Animica DA square constants.

Protocol-level defaults for share placement inside the data square. These
values are intentionally lightweight (no imports beyond typing) and safe to
import from anywhere.

Note: runtime overrides live in `da_square.config`. The placement functions
never read these directly; callers pass the threshold explicitly so every
node computes indices from the same protocol value.
"""

from __future__ import annotations

# ------------------------------ commitments ---------------------------------

#: Default upper bound on the leaf count of a single subtree root ("mountain")
#: in a blob share commitment.
SUBTREE_ROOT_THRESHOLD_DEFAULT: int = 64

# -------------------------------- square ------------------------------------

#: Default maximum square side (shares per row). Informational only: the
#: planner does not check plans against it.
MAX_SQUARE_SIZE_DEFAULT: int = 128


__all__ = [
    "SUBTREE_ROOT_THRESHOLD_DEFAULT",
    "MAX_SQUARE_SIZE_DEFAULT",
]
