"""
Animica • DA square utilities - Integer math

Exact integer helpers used by the share placement rules:

  • Power-of-two rounding (up and down)
  • Ceiling division and an exact ceiling square root

Everything here is consensus-relevant: results must be bit-identical on every
node, so no floating point is used anywhere. Python ints are unbounded, so the
same functions cover every fixed integer width (u32, i64, ...) with identical
rounding semantics.
"""
from __future__ import annotations

import math
import operator

from ..errors import InvalidDivisor, InvalidInput


def as_int(x: object, name: str = "value") -> int:
    """Coerce an integer-like value (rejects floats, str, None)."""
    try:
        return operator.index(x)  # type: ignore[arg-type]
    except TypeError:
        raise TypeError(f"{name} must be an integer, got {type(x).__name__}") from None


# -----------------------------------------------------------------------------
# Powers of two
# -----------------------------------------------------------------------------

def is_power_of_two(x: int) -> bool:
    """True iff x is a positive power of two."""
    x = as_int(x)
    return x > 0 and x & (x - 1) == 0


def round_up_power_of_two(x: int) -> int:
    """
    Return the smallest power of two >= x.

    Any x <= 1 (zero and negatives included) rounds to 1.
    """
    x = as_int(x)
    if x <= 1:
        return 1
    return 1 << (x - 1).bit_length()


def round_down_power_of_two(x: int) -> int:
    """
    Return the largest power of two <= x.

    Raises InvalidInput for x <= 0: no power of two lies at or below it.
    """
    x = as_int(x)
    if x <= 0:
        raise InvalidInput(f"input {x} must be positive", data={"input": x})
    rounded_up = round_up_power_of_two(x)
    if rounded_up == x:
        return rounded_up
    return rounded_up // 2


# -----------------------------------------------------------------------------
# Division & roots
# -----------------------------------------------------------------------------

def ceil_div(a: int, b: int) -> int:
    """ceil(a / b) for a >= 0 and b > 0."""
    a = as_int(a, "a")
    b = as_int(b, "b")
    if b == 0:
        raise InvalidDivisor("divisor cannot be 0", data={"dividend": a})
    if b < 0:
        raise InvalidInput(f"divisor {b} must be positive", data={"divisor": b})
    if a < 0:
        raise InvalidInput(f"dividend {a} must be non-negative", data={"dividend": a})
    return -(-a // b)


def ceil_sqrt(n: int) -> int:
    """Smallest integer r with r*r >= n (n >= 0)."""
    n = as_int(n)
    if n < 0:
        raise InvalidInput(f"cannot take the square root of {n}", data={"input": n})
    if n == 0:
        return 0
    return math.isqrt(n - 1) + 1


__all__ = [
    "as_int",
    "is_power_of_two",
    "round_up_power_of_two",
    "round_down_power_of_two",
    "ceil_div",
    "ceil_sqrt",
]
