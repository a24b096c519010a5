"""Generic midpoint: picks the overload from the operands' value category."""

from __future__ import annotations

from typing import Any

import numpy as np

from .floating import midpoint_float
from .integer import midpoint_int
from .memory.address import midpoint_pointer
from .memory.span import Pointer

INTEGRAL = "integral"
FLOATING = "floating"
ADDRESS = "address"


def value_category(value: object) -> str:
    """Classify a value as integral, floating or address.

    Raises:
        TypeError: For booleans and any type without a midpoint
            (complex, Decimal, Fraction, ...).
    """
    if isinstance(value, (bool, np.bool_)):
        raise TypeError("Boolean values have no midpoint")
    if isinstance(value, Pointer):
        return ADDRESS
    if isinstance(value, (int, np.integer)):
        return INTEGRAL
    if isinstance(value, (float, np.floating)):
        return FLOATING
    raise TypeError(f"No midpoint for values of type {type(value).__name__}")


def midpoint(a: Any, b: Any) -> Any:
    """Midpoint of two values of the same type.

    Integers round toward `a` on odd sums and never overflow their width
    (Python ints are taken as int64). Floats avoid overflow to infinity.
    Pointers must share a span; their distance is halved toward zero.

    Raises:
        TypeError: Operands of different types, booleans, or unsupported
            types.
        OverflowError: A Python int operand does not fit in int64.
    """
    if type(a) is not type(b):
        raise TypeError(
            f"Operands must have the same type, got {type(a).__name__} and {type(b).__name__}"
        )
    category = value_category(a)
    if category == ADDRESS:
        return midpoint_pointer(a, b)
    elif category == INTEGRAL:
        return midpoint_int(a, b)
    else:
        return midpoint_float(a, b)
