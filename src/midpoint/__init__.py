"""Overflow-free midpoint of two integers, floats or pointers."""

from .dispatch import midpoint, value_category
from .floating import midpoint_float
from .formats import BINARY16, BINARY32, BINARY64, FloatFormat, float_format_of
from .integer import midpoint_int, midpoint_int_split
from .memory import Pointer, Span, midpoint_address, midpoint_pointer, trunc_div2
from .widths import (
    INT8,
    INT16,
    INT32,
    INT64,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    IntType,
    int_type_of,
)

__all__ = [
    "BINARY16",
    "BINARY32",
    "BINARY64",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "FloatFormat",
    "IntType",
    "Pointer",
    "Span",
    "float_format_of",
    "int_type_of",
    "midpoint",
    "midpoint_address",
    "midpoint_float",
    "midpoint_int",
    "midpoint_int_split",
    "midpoint_pointer",
    "trunc_div2",
    "value_category",
]
