"""
Animica • DA • Square - Cursor alignment
"""

from __future__ import annotations

from ..errors import InvalidDivisor, InvalidInput
from ..utils.intmath import as_int


def round_up_by_multiple_of(cursor: int, width: int) -> int:
    """
    Round `cursor` up to the next multiple of `width`. A cursor that is
    already a multiple is returned unchanged. For example, cursor 13 with
    width 4 gives 16.

    The cursor must be non-negative and the width positive.
    """
    cursor = as_int(cursor, "cursor")
    width = as_int(width, "width")
    if width == 0:
        raise InvalidDivisor("width cannot be 0", data={"cursor": cursor})
    if width < 0:
        raise InvalidInput(f"width {width} must be positive", data={"width": width})
    if cursor < 0:
        raise InvalidInput(f"cursor {cursor} must be non-negative", data={"cursor": cursor})
    if cursor % width == 0:
        return cursor
    return (cursor // width + 1) * width


__all__ = ["round_up_by_multiple_of"]
