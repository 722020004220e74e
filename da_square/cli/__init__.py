"""
Animica • DA square CLI tools

    python -m da_square.cli.plan place 1 128 128 128
    python -m da_square.cli.plan width 129 --threshold 64
    python -m da_square.cli.plan config
"""

from __future__ import annotations

import logging
import os
from typing import Optional

__all__ = ["setup_logging"]


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger for CLI runs (env: ANIMICA_LOG_LEVEL)."""
    chosen = (level or os.environ.get("ANIMICA_LOG_LEVEL") or "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, chosen, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
