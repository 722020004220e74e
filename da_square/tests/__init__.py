"""
da_square.tests helpers

- Deterministic Hypothesis profiles (local vs CI).
- Protocol defaults shared by the test modules.
"""

from __future__ import annotations

import os

from hypothesis import settings

from da_square.constants import MAX_SQUARE_SIZE_DEFAULT as DEFAULT_MAX_SQUARE_SIZE
from da_square.constants import SUBTREE_ROOT_THRESHOLD_DEFAULT as DEFAULT_SUBTREE_ROOT_THRESHOLD

# Local: fewer examples for snappy feedback; no global deadline to avoid flakiness on CI
settings.register_profile("local", settings(max_examples=100, deadline=None))
# CI: more coverage
settings.register_profile("ci", settings(max_examples=500, deadline=None))
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE") or ("ci" if os.environ.get("CI") else "local"))

__all__ = ["DEFAULT_SUBTREE_ROOT_THRESHOLD", "DEFAULT_MAX_SQUARE_SIZE"]
