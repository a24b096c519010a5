"""Allocations, pointers into them, and the address midpoint."""

from .address import midpoint_address, midpoint_pointer, trunc_div2
from .span import Pointer, Span

__all__ = ["Pointer", "Span", "midpoint_address", "midpoint_pointer", "trunc_div2"]
