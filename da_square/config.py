"""
DA square configuration.

This module defines the configuration surface for share placement:
- Subtree root threshold (protocol constant shared by every node)
- Maximum square size (informational; used as a default for coordinates)

All fields have defaults and can be overridden via environment variables.
Nothing here imports heavy dependencies.

Environment variables (all optional):

  ANIMICA_DA_SUBTREE_ROOT_THRESHOLD=64
  ANIMICA_DA_MAX_SQUARE_SIZE=128        # must be a power of two

Integers may be given in decimal or 0x-prefixed hex.
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from functools import lru_cache
from typing import Dict, List

from .constants import MAX_SQUARE_SIZE_DEFAULT, SUBTREE_ROOT_THRESHOLD_DEFAULT

# ------------------------------- helpers ------------------------------------


def _getenv(key: str, default: str | None = None) -> str | None:
    v = os.environ.get(key)
    return v if v is not None and v.strip() != "" else default


def _getenv_int(key: str, default: int) -> int:
    v = _getenv(key)
    if v is None:
        return default
    base = 10
    vv = v.strip().lower()
    if vv.startswith("0x"):
        base = 16
    try:
        return int(vv, base)
    except ValueError as e:
        raise ValueError(f"Invalid int for {key}: {v!r}") from e


# ------------------------------- config -------------------------------------


@dataclass(frozen=True)
class LayoutConfig:
    """
    Share placement parameters.

    - subtree_root_threshold: max leaves per subtree root in a blob commitment
    - max_square_size: largest square side the network builds (not enforced
      by the planner)
    """
    subtree_root_threshold: int = SUBTREE_ROOT_THRESHOLD_DEFAULT
    max_square_size: int = MAX_SQUARE_SIZE_DEFAULT

    def validate(self) -> None:
        if self.subtree_root_threshold <= 0:
            raise ValueError("subtree_root_threshold must be > 0")
        s = self.max_square_size
        if s <= 0 or s & (s - 1) != 0:
            raise ValueError("max_square_size must be a positive power of two")

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


# ------------------------------- loader -------------------------------------


def _load_from_env() -> LayoutConfig:
    cfg = LayoutConfig(
        subtree_root_threshold=_getenv_int(
            "ANIMICA_DA_SUBTREE_ROOT_THRESHOLD", SUBTREE_ROOT_THRESHOLD_DEFAULT
        ),
        max_square_size=_getenv_int("ANIMICA_DA_MAX_SQUARE_SIZE", MAX_SQUARE_SIZE_DEFAULT),
    )
    cfg.validate()
    return cfg


@lru_cache(maxsize=1)
def get_config() -> LayoutConfig:
    """
    Load and validate configuration (cached). Clear the cache in tests
    via `get_config.cache_clear()` to observe env changes.
    """
    return _load_from_env()


def format_config(cfg: LayoutConfig | None = None) -> str:
    """Pretty-print helper (used by the CLI)."""
    cfg = cfg or get_config()
    lines: List[str] = []
    for k, v in cfg.to_dict().items():
        lines.append(f"layout.{k}: {v}")
    return "\n".join(lines)


__all__ = [
    "LayoutConfig",
    "get_config",
    "format_config",
]
