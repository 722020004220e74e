"""
Animica DA square package.

Public responsibilities:
- Round share counts to powers of two and size the minimal square for a blob.
- Derive each blob's subtree width under the subtree root threshold.
- Assign blob start indices in the square per the blob share commitment rules.

This package keeps a small import surface at module import time; the rule
functions are re-exported lazily from `da_square.rules`.
"""

from __future__ import annotations

from typing import Any

from .errors import InvalidDivisor, InvalidInput, LayoutError
from .version import __version__, get_version

__all__ = [
    "__version__",
    "get_version",
    "LayoutError",
    "InvalidDivisor",
    "InvalidInput",
    "round_up_power_of_two",
    "round_down_power_of_two",
    "blob_min_square_size",
    "subtree_width",
    "round_up_by_multiple_of",
    "next_share_index",
    "blob_shares_used_non_interactive_defaults",
    "plan_blob_placements",
]


def __getattr__(name: str) -> Any:
    if name in __all__:
        from . import rules

        value = getattr(rules, name)
        globals()[name] = value
        return value
    raise AttributeError(f"module 'da_square' has no attribute {name!r}")
