"""
DA square version utilities.

- __version__: base semantic version, overridable via ANIMICA_VERSION.
"""

from __future__ import annotations

import os

# Bump this when making a release of the DA square package.
_BASE_SEMVER = "0.1.0"

__version__ = os.environ.get("ANIMICA_VERSION") or _BASE_SEMVER


def get_version() -> str:
    """Return the DA square package version."""
    return __version__
