"""Address midpoint: halfway between two positions in one allocation.

The element distance b - a is halved with truncation toward zero and added
to a. For an odd distance this lands one element nearer to a, so the result
rounds toward a. Unlike the integer midpoint this is not biased by which
operand is larger; the two rules are kept distinct.
"""

from __future__ import annotations

from .span import Pointer


def trunc_div2(n: int) -> int:
    """Halve `n`, truncating toward zero (C signed division)."""
    return n // 2 if n >= 0 else -(-n // 2)


def midpoint_pointer(a: Pointer, b: Pointer) -> Pointer:
    """Pointer halfway between `a` and `b`, which must share a span.

    The shared-span precondition is only asserted; it is not checked
    under `python -O`.
    """
    assert a.span is b.span, "midpoint of pointers into different spans"
    return a + trunc_div2(b.index - a.index)


def midpoint_address(a: int, b: int, itemsize: int = 1) -> int:
    """Byte address halfway between element addresses `a` and `b`.

    Both addresses must point at elements of `itemsize` bytes in one
    contiguous block, so that b - a is a whole number of elements.

    Raises:
        ValueError: If `itemsize` is not positive.
    """
    if itemsize <= 0:
        raise ValueError(f"Element size must be positive, got {itemsize}")
    assert (b - a) % itemsize == 0, "addresses are not on a common element grid"
    return a + trunc_div2((b - a) // itemsize) * itemsize
