"""
Animica DA square errors.

Typed exception hierarchy for the share placement rules, with structured
metadata so block builders and API layers can classify failures without
string-matching.

Usage:

    from da_square.errors import InvalidDivisor

    raise InvalidDivisor("width cannot be 0", data={"cursor": cursor})

All errors expose:
- .code   : stable machine-readable code (snake_case)
- .data   : optional structured payload (dict-like)
- .to_problem() : RFC 7807-compatible dict for JSON responses
- .wrap(context, **data) : same-class copy with extra context, for re-raising
  from multi-step computations (`raise err.wrap("...") from err`)
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional


class LayoutError(Exception):
    """
    Base class for DA square layout errors.

    Subclasses should set `default_code`.
    """
    default_code = "layout_error"
    # problem-detail status reported by to_problem() (CLI --json errors)
    default_status = 400

    def __init__(
        self,
        message: str = "",
        *,
        code: Optional[str] = None,
        data: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.data: Dict[str, Any] = dict(data) if data else {}

    def __str__(self) -> str:  # pragma: no cover - trivial
        if self.message:
            return f"{self.code}: {self.message}"
        return self.code

    def to_problem(self) -> Dict[str, Any]:
        """
        Render as an RFC 7807 "problem detail" object.
        """
        return {
            "type": f"urn:animica:da:{self.code}",
            "title": self.code.replace("_", " ").title(),
            "status": self.default_status,
            "detail": self.message or None,
            "data": self.data or None,
        }

    def wrap(self, context: str, **data: Any) -> "LayoutError":
        """
        Return a new error of the same class whose message is prefixed with
        `context` and whose data is merged with `data` (new keys win).
        """
        merged = dict(self.data)
        merged.update(data)
        msg = f"{context}: {self.message}" if self.message else context
        return type(self)(msg, code=self.code, data=merged)


class InvalidDivisor(LayoutError, ZeroDivisionError):
    """
    A rounding or division step was asked to use a zero width/modulus.
    """
    default_code = "invalid_divisor"


class InvalidInput(LayoutError, ValueError):
    """
    An argument is outside the domain of the operation (e.g. rounding a
    non-positive number down to a power of two).
    """
    default_code = "invalid_input"


__all__ = [
    "LayoutError",
    "InvalidDivisor",
    "InvalidInput",
]
