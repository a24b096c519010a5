"""Span: a contiguous allocation of fixed-size elements, and pointers into it."""

from __future__ import annotations

from dataclasses import dataclass


class Span:
    """Block of `count` elements, each `itemsize` bytes, at byte address `base`.

    Only the extent is recorded; no storage is held. Valid pointer
    positions are 0..count inclusive; position `count` is one past the end.
    """

    def __init__(self, base: int, count: int, itemsize: int = 1) -> None:
        if count < 0:
            raise ValueError(f"Element count must be non-negative, got {count}")
        if itemsize <= 0:
            raise ValueError(f"Element size must be positive, got {itemsize}")
        self.base = base
        self.count = count
        self.itemsize = itemsize

    def __len__(self) -> int:
        return self.count

    def __repr__(self) -> str:
        return f"Span(base=0x{self.base:08X}, count={self.count}, itemsize={self.itemsize})"

    def address_of(self, index: int) -> int:
        """Byte address of element `index`."""
        return self.base + index * self.itemsize

    def pointer(self, index: int = 0) -> Pointer:
        """Pointer to element `index` (0..count inclusive)."""
        return Pointer(self, index)

    def begin(self) -> Pointer:
        return Pointer(self, 0)

    def end(self) -> Pointer:
        """One-past-the-end pointer."""
        return Pointer(self, self.count)


@dataclass(frozen=True, eq=False)
class Pointer:
    """Position of an element within a Span.

    A pointer can only be built for positions 0..len(span), so two pointers
    of one span always satisfy the same-allocation precondition.
    """

    span: Span
    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index <= self.span.count:
            raise IndexError(
                f"Pointer index {self.index} outside [0, {self.span.count}] of {self.span!r}"
            )

    @property
    def address(self) -> int:
        return self.span.address_of(self.index)

    def _same_span(self, other: Pointer) -> None:
        if other.span is not self.span:
            raise ValueError("Pointers refer to different spans")

    def __add__(self, offset: int) -> Pointer:
        if not isinstance(offset, int):
            return NotImplemented
        return Pointer(self.span, self.index + offset)

    __radd__ = __add__

    def __sub__(self, other: Pointer | int) -> Pointer | int:
        if isinstance(other, Pointer):
            self._same_span(other)
            return self.index - other.index
        if isinstance(other, int):
            return Pointer(self.span, self.index - other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pointer):
            return NotImplemented
        return self.span is other.span and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self.span), self.index))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Pointer):
            return NotImplemented
        self._same_span(other)
        return self.index < other.index

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Pointer):
            return NotImplemented
        self._same_span(other)
        return self.index <= other.index

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Pointer):
            return NotImplemented
        self._same_span(other)
        return self.index > other.index

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Pointer):
            return NotImplemented
        self._same_span(other)
        return self.index >= other.index

    def __repr__(self) -> str:
        return f"Pointer(0x{self.address:08X}, index={self.index})"
