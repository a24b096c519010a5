"""Shared fixtures for midpoint tests."""

import math
from fractions import Fraction

import pytest

from midpoint.memory.span import Span

BASE = 0x80000000


@pytest.fixture
def make_span():
    """Factory fixture: returns a function that creates a fresh Span at BASE."""
    def _make(count: int = 64, itemsize: int = 1) -> Span:
        return Span(BASE, count, itemsize)
    return _make


@pytest.fixture
def reference_midpoint():
    """Exact integer midpoint rounded toward a, computed with Fractions."""
    def _ref(a: int, b: int) -> int:
        mean = Fraction(a + b, 2)
        return math.ceil(mean) if a > b else math.floor(mean)
    return _ref
