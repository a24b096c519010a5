"""IEEE 754 binary interchange formats, emulated with struct round-trips."""

import math
import struct
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class FloatFormat:
    """A binary floating-point format: storage width and struct pack code.

    Values are held as Python floats (binary64). `round` narrows a binary64
    value to the nearest value of this format, which is how results of
    arithmetic in the format are obtained: +, -, * of two values of a
    format at most half as precise as binary64 are correctly rounded this way.
    """

    name: str
    code: str
    bits: int
    mantissa_bits: int

    @property
    def exponent_bits(self) -> int:
        return self.bits - self.mantissa_bits - 1

    @property
    def max(self) -> float:
        """Largest finite value."""
        bias = (1 << (self.exponent_bits - 1)) - 1
        return math.ldexp(2.0 - math.ldexp(1.0, -self.mantissa_bits), bias)

    @property
    def min_subnormal(self) -> float:
        bias = (1 << (self.exponent_bits - 1)) - 1
        return math.ldexp(1.0, 1 - bias - self.mantissa_bits)

    def round(self, value: float) -> float:
        """Round a binary64 value to this format.

        Values beyond the format's range become a signed infinity, as the
        hardware would produce; struct reports that case as OverflowError.
        """
        try:
            return struct.unpack(f"<{self.code}", struct.pack(f"<{self.code}", value))[0]
        except OverflowError:
            return math.copysign(math.inf, value)

    def contains(self, value: float) -> bool:
        """True if `value` is exactly representable (NaN and inf always are)."""
        if math.isnan(value):
            return True
        return self.round(value) == value


BINARY16 = FloatFormat("binary16", "e", 16, 10)
BINARY32 = FloatFormat("binary32", "f", 32, 23)
BINARY64 = FloatFormat("binary64", "d", 64, 52)

_NUMPY_FORMATS: dict[np.dtype, FloatFormat] = {
    np.dtype(np.float16): BINARY16,
    np.dtype(np.float32): BINARY32,
    np.dtype(np.float64): BINARY64,
}


def float_format_of(value: object) -> FloatFormat:
    """Map a Python float, numpy float scalar or dtype to its format.

    Raises:
        TypeError: If `value` is not a float of a supported format
            (numpy longdouble has no struct code).
    """
    if type(value) is float:
        return BINARY64
    dtype = value if isinstance(value, np.dtype) else np.dtype(type(value))
    fmt = _NUMPY_FORMATS.get(dtype)
    if fmt is None:
        raise TypeError(f"No binary interchange format for {dtype}")
    return fmt
