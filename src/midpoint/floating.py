"""Floating-point midpoint that avoids spurious overflow to infinity.

If t = a + b is finite, t * 0.5 is the correctly rounded midpoint: the sum
is rounded once and halving a finite value is exact unless the result is
subnormal, where the spacing is constant and halving is still correctly
rounded.

If t is infinite there are two cases. Either a or b is itself infinite, and
the result is infinite or NaN whichever way it is computed, or both are
finite with the same sign (finite values of opposite sign cannot sum past
the largest finite value). Then a * 0.5 + b * 0.5 stays in range. It rounds
twice, but only when one operand is so small relative to the other that it
barely affects the sum.

NaN operands propagate through the arithmetic without special handling.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from .formats import BINARY64, FloatFormat


def _midpoint_native(a: float, b: float) -> float:
    """Midpoint of two Python floats (binary64)."""
    t = a + b
    if math.isfinite(t):
        return t * 0.5
    return a * 0.5 + b * 0.5


def _midpoint_emulated(a: float, b: float, fmt: FloatFormat) -> float:
    """Midpoint of two values of `fmt`, rounding every step to `fmt`."""
    rnd = fmt.round
    t = rnd(a + b)
    if math.isfinite(t):
        return rnd(t * 0.5)
    return rnd(rnd(a * 0.5) + rnd(b * 0.5))


def _midpoint_numpy(a: np.floating, b: np.floating) -> np.floating:
    """Midpoint of two numpy float scalars, computed in their dtype."""
    half = a.dtype.type(0.5)
    with np.errstate(over="ignore", invalid="ignore", under="ignore"):
        t = a + b
        if np.isfinite(t):
            return t * half
        return a * half + b * half


def midpoint_float(a: Any, b: Any, fmt: FloatFormat | None = None) -> Any:
    """Midpoint of two floating-point values of the same type.

    Never raises or warns for in-domain operands; overflow, infinities and
    NaN produce the IEEE special values the arithmetic dictates.

    Args:
        a: First operand (Python float or numpy floating scalar).
        b: Second operand, same type as `a`.
        fmt: Format the Python float operands belong to (default BINARY64).
            Narrower formats are emulated by rounding each step. Not
            accepted for numpy scalars, whose dtype is the format.

    Raises:
        TypeError: Operands of different or non-floating types, or `fmt`
            given with numpy scalars.
        ValueError: A Python float operand is not representable in `fmt`.
    """
    if type(a) is not type(b):
        raise TypeError(
            f"Operands must have the same type, got {type(a).__name__} and {type(b).__name__}"
        )

    if isinstance(a, np.floating):
        if fmt is not None:
            raise TypeError(f"Format is implied by dtype {a.dtype}; do not pass fmt")
        return _midpoint_numpy(a, b)

    if not isinstance(a, float):
        raise TypeError(f"Not a float: {type(a).__name__}")

    if fmt is None or fmt == BINARY64:
        return _midpoint_native(a, b)

    for value in (a, b):
        if not fmt.contains(value):
            raise ValueError(f"{value!r} is not representable in {fmt.name}")
    return _midpoint_emulated(a, b, fmt)
