"""Fixed-width integer types: ranges and numpy dtype mapping."""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class IntType:
    """An N-bit two's-complement integer type (signed or unsigned).

    Python ints are unbounded, so the width only constrains which values
    belong to the type.
    """

    bits: int
    signed: bool

    def __post_init__(self) -> None:
        if self.bits < 8 or self.bits % 8:
            raise TypeError(f"Integer width must be a whole number of bytes >= 8, got {self.bits}")

    @property
    def name(self) -> str:
        return f"{'int' if self.signed else 'uint'}{self.bits}"

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else self.mask

    def contains(self, value: int) -> bool:
        """True if `value` is representable in this type."""
        return self.min <= value <= self.max

    def check(self, value: int) -> int:
        """Return `value` unchanged, or raise OverflowError if out of range."""
        if not self.contains(value):
            raise OverflowError(
                f"{value} out of range for {self.name} [{self.min}, {self.max}]"
            )
        return value


INT8 = IntType(8, True)
INT16 = IntType(16, True)
INT32 = IntType(32, True)
INT64 = IntType(64, True)
UINT8 = IntType(8, False)
UINT16 = IntType(16, False)
UINT32 = IntType(32, False)
UINT64 = IntType(64, False)

INT_TYPES: tuple[IntType, ...] = (INT8, INT16, INT32, INT64, UINT8, UINT16, UINT32, UINT64)

# Smallest numpy dtype holding N+2 bits for each operand dtype. 64-bit
# dtypes have no entry: nothing native is wider.
WIDENED_DTYPES: dict[np.dtype, np.dtype] = {
    np.dtype(np.int8): np.dtype(np.int16),
    np.dtype(np.uint8): np.dtype(np.int16),
    np.dtype(np.int16): np.dtype(np.int32),
    np.dtype(np.uint16): np.dtype(np.int32),
    np.dtype(np.int32): np.dtype(np.int64),
    np.dtype(np.uint32): np.dtype(np.int64),
}


def int_type_of(value: object) -> IntType:
    """Map a numpy integer scalar or dtype to its IntType.

    Raises:
        TypeError: If `value` is not an integer dtype, or is numpy's bool.
    """
    dtype = value if isinstance(value, np.dtype) else np.dtype(type(value))
    if dtype.kind == "b":
        raise TypeError("Boolean values have no midpoint")
    if dtype.kind not in "iu":
        raise TypeError(f"Not an integer dtype: {dtype}")
    return IntType(dtype.itemsize * 8, dtype.kind == "i")
