"""
Animica • DA square utilities package

Small, reusable helpers used by the placement rules:

  - da_square.utils.intmath : power-of-two rounding, ceil division and
                              exact integer square roots

It uses lazy submodule loading so importing `da_square.utils` is cheap:

    from da_square import utils
    utils.intmath.round_up_power_of_two(11)  # 16

Version is inherited from the parent `da_square` package.
"""
from __future__ import annotations

from importlib import import_module
from typing import Any

from ..version import __version__  # noqa: F401

# Submodules exposed via lazy loading.
_SUBMODULES = ("intmath",)


def __getattr__(name: str) -> Any:
    """
    Lazily import and return one of the known utility submodules.
    """
    if name in _SUBMODULES:
        return import_module(f"{__name__}.{name}")
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    """Advertise lazy members in dir()."""
    return sorted(list(globals().keys()) + list(_SUBMODULES))


__all__ = list(_SUBMODULES)
