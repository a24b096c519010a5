"""Integer midpoint: overflow-free mean of two N-bit integers, rounded toward a.

The exact result is floor((a + b + (a > b)) / 2). For N-bit operands the
numerator spans [2*MIN, 2*MAX + 1], which needs N+2 bits. Two evaluation
strategies are used:

  widened: compute in a type with at least N+2 bits (Python int, or the
           next numpy width) then narrow. The narrowed value always fits.
  split:   for 64-bit numpy scalars nothing native is wider, so each operand
           is split into its high bits (a >> 1) and its low bit (a & 1).
           a + b + c == 2*(ah + bh) + (al + bl + c), and the low part is at
           most 3, so the result is ah + bh + ((al + bl + c) >> 1). No
           partial sum leaves the operand type.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from .widths import INT64, WIDENED_DTYPES, IntType, int_type_of


def midpoint_int_split(a: Any, b: Any) -> Any:
    """Midpoint without a wider intermediate type.

    Works on Python ints and on numpy integer scalars of one dtype; the
    result has the operands' type.
    """
    one = type(a)(1)
    carry = type(a)(1 if a > b else 0)
    low = (a & one) + (b & one) + carry
    return (a >> one) + (b >> one) + (low >> one)


def _midpoint_widened(a: int, b: int) -> int:
    """Midpoint over unbounded Python ints."""
    return (a + b + (a > b)) >> 1


def _midpoint_numpy(a: np.integer, b: np.integer) -> np.integer:
    """Midpoint of two numpy integer scalars of the same dtype."""
    dtype = a.dtype
    wide = WIDENED_DTYPES.get(dtype)
    if wide is None:
        return midpoint_int_split(a, b)
    wa = a.astype(wide)
    wb = b.astype(wide)
    total = wa + wb + wide.type(a > b)
    return (total >> wide.type(1)).astype(dtype)


def midpoint_int(a: Any, b: Any, itype: IntType | None = None) -> Any:
    """Midpoint of two integers of the same fixed-width type.

    Rounds toward `a` when a + b is odd: up if a > b, down if a < b.
    Never overflows, including for (MIN, MAX) and (MAX, MIN).

    Args:
        a: First operand (Python int or numpy integer scalar).
        b: Second operand, same type as `a`.
        itype: Width of Python int operands (default INT64). For numpy
            scalars it is taken from the dtype and, if given, must match.

    Returns:
        The midpoint, of the same type as the operands.

    Raises:
        TypeError: Operands are booleans, of different types, or the
            given `itype` disagrees with the numpy dtype.
        OverflowError: A Python int operand is outside `itype`'s range.
    """
    if isinstance(a, (bool, np.bool_)) or isinstance(b, (bool, np.bool_)):
        raise TypeError("Boolean values have no midpoint")
    if type(a) is not type(b):
        raise TypeError(
            f"Operands must have the same type, got {type(a).__name__} and {type(b).__name__}"
        )

    if isinstance(a, np.integer):
        actual = int_type_of(a)
        if itype is not None and itype != actual:
            raise TypeError(f"Operand dtype {a.dtype} does not match {itype.name}")
        return _midpoint_numpy(a, b)

    if not isinstance(a, int):
        raise TypeError(f"Not an integer: {type(a).__name__}")

    itype = INT64 if itype is None else itype
    itype.check(a)
    itype.check(b)
    return _midpoint_widened(a, b)
