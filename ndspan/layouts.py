"""Row-major and column-major mappings from multidimensional indices to offsets."""

from __future__ import annotations

import math
import operator
from collections.abc import Iterable

from ndspan.extents import Extents

__all__ = ["LayoutLeft", "LayoutRight"]


def _check_extents(extents: Extents) -> Extents:
    if not isinstance(extents, Extents):
        raise TypeError(f"expected Extents, got {type(extents).__name__}")
    return extents


def _checked_dim(extents: Extents, r: int) -> int:
    r = operator.index(r)
    if not 0 <= r < extents.rank():
        raise IndexError(f"dimension {r} out of range")
    return r


def _left_stride(extents: Extents, r: int) -> int:
    r = _checked_dim(extents, r)
    return math.prod(extents.extent(i) for i in range(r))


def _right_stride(extents: Extents, r: int) -> int:
    r = _checked_dim(extents, r)
    return math.prod(extents.extent(i) for i in range(r + 1, extents.rank()))


def _offset(extents: Extents, stride, args: tuple) -> int:
    rank = extents.rank()
    if len(args) != rank:
        raise TypeError(f"expected {rank} index(es), got {len(args)}")
    return sum(operator.index(index) * stride(extents, r) for r, index in enumerate(args))


class LayoutLeft:
    """Column-major mapping: the first index varies fastest."""

    __slots__ = ("_extents",)

    def __init__(self, extents: Extents) -> None:
        self._extents = _check_extents(extents)

    def extents(self) -> Extents:
        """The shape this mapping covers."""
        return self._extents

    def __call__(self, *args: int) -> int:
        """Offset of the element at the given indices (one per dimension, not range-checked)."""
        return _offset(self._extents, _left_stride, args)

    def required_span_size(self) -> int:
        """Number of codomain elements needed to hold every mapped index."""
        return math.prod(self._extents)

    def stride(self, r: int) -> int:
        """Distance in the codomain between neighbouring indices along dimension ``r``."""
        return _left_stride(self._extents, r)

    def is_unique(self) -> bool:
        """Every index maps to a distinct offset."""
        return True

    def is_contiguous(self) -> bool:
        """The offsets cover a gap-free range."""
        return True

    def is_strided(self) -> bool:
        """Offsets grow by a fixed stride along each dimension."""
        return True

    @classmethod
    def is_always_unique(cls) -> bool:
        """Every mapping of this layout is unique."""
        return True

    @classmethod
    def is_always_contiguous(cls) -> bool:
        """Every mapping of this layout is contiguous."""
        return True

    @classmethod
    def is_always_strided(cls) -> bool:
        """Every mapping of this layout is strided."""
        return True

    def convert(self, static_extents: Iterable[int]) -> LayoutLeft:
        """Return the same mapping with its extents described by another static pattern."""
        return LayoutLeft(self._extents.convert(static_extents))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LayoutLeft):
            return NotImplemented
        return self._extents == other._extents

    def __hash__(self) -> int:
        return hash(("LayoutLeft", self._extents))

    def __repr__(self) -> str:
        return f"LayoutLeft({self._extents!r})"


class LayoutRight:
    """Row-major mapping: the last index varies fastest."""

    __slots__ = ("_extents",)

    def __init__(self, extents: Extents) -> None:
        self._extents = _check_extents(extents)

    def extents(self) -> Extents:
        """The shape this mapping covers."""
        return self._extents

    def __call__(self, *args: int) -> int:
        """Offset of the element at the given indices (one per dimension, not range-checked)."""
        return _offset(self._extents, _right_stride, args)

    def required_span_size(self) -> int:
        """Number of codomain elements needed to hold every mapped index."""
        return math.prod(self._extents)

    def stride(self, r: int) -> int:
        """Distance in the codomain between neighbouring indices along dimension ``r``."""
        return _right_stride(self._extents, r)

    def is_unique(self) -> bool:
        """Every index maps to a distinct offset."""
        return True

    def is_contiguous(self) -> bool:
        """The offsets cover a gap-free range."""
        return True

    def is_strided(self) -> bool:
        """Offsets grow by a fixed stride along each dimension."""
        return True

    @classmethod
    def is_always_unique(cls) -> bool:
        """Every mapping of this layout is unique."""
        return True

    @classmethod
    def is_always_contiguous(cls) -> bool:
        """Every mapping of this layout is contiguous."""
        return True

    @classmethod
    def is_always_strided(cls) -> bool:
        """Every mapping of this layout is strided."""
        return True

    def convert(self, static_extents: Iterable[int]) -> LayoutRight:
        """Return the same mapping with its extents described by another static pattern."""
        return LayoutRight(self._extents.convert(static_extents))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LayoutRight):
            return NotImplemented
        return self._extents == other._extents

    def __hash__(self) -> int:
        return hash(("LayoutRight", self._extents))

    def __repr__(self) -> str:
        return f"LayoutRight({self._extents!r})"