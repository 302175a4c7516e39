"""Multidimensional extents: per-dimension sizes that are either static or dynamic."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator, Sequence

from ndspan.static_sizes import DYNAMIC_EXTENT, PartiallyStaticSizes

__all__ = ["ALL", "AllType", "DYNAMIC_EXTENT", "Extents", "is_compatible"]


class AllType:
    """Slice specifier that selects a whole dimension."""

    __slots__ = ()
    _instance: AllType | None = None

    def __new__(cls) -> AllType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ALL"


ALL = AllType()
"""The single instance of :class:`AllType`."""


def is_compatible(static_a: Iterable[int], static_b: Iterable[int]) -> bool:
    """Whether two static patterns have equal rank and agree where both are static."""
    a = tuple(operator.index(v) for v in static_a)
    b = tuple(operator.index(v) for v in static_b)
    if len(a) != len(b):
        return False
    return all(
        x == DYNAMIC_EXTENT or y == DYNAMIC_EXTENT or x == y for x, y in zip(a, b)
    )


class Extents:
    """The shape of a multidimensional index space.

    ``static_extents`` gives one entry per dimension, ``DYNAMIC_EXTENT`` marking
    dimensions whose size is supplied at construction.  The remaining arguments
    are either exactly one value per dynamic dimension, or a single compatible
    :class:`Extents` to convert from.
    """

    __slots__ = ("_sizes",)

    def __init__(self, static_extents: Iterable[int], *args: int | Extents) -> None:
        static = tuple(static_extents)
        if len(args) == 1 and isinstance(args[0], Extents):
            other = args[0]
            if not is_compatible(other.static_extents(), static):
                raise TypeError(
                    f"extents {list(other.static_extents())} are not compatible "
                    f"with {list(static)}"
                )
            self._sizes = PartiallyStaticSizes.from_all_sizes(static, tuple(other))
            return
        pattern = PartiallyStaticSizes(static, [0] * sum(
            1 for s in static if operator.index(s) == DYNAMIC_EXTENT
        ))
        if len(args) != pattern.size_dynamic():
            raise TypeError(
                f"expected {pattern.size_dynamic()} dynamic extent(s), got {len(args)}"
            )
        self._sizes = PartiallyStaticSizes(static, args)

    @classmethod
    def from_dynamic(
        cls, static_extents: Iterable[int], dynamic_extents: Sequence[int]
    ) -> Extents:
        """Build from a sequence holding one value per dynamic dimension."""
        return cls(static_extents, *dynamic_extents)

    def rank(self) -> int:
        """Number of dimensions."""
        return self._sizes.size()

    def rank_dynamic(self) -> int:
        """Number of dynamic dimensions."""
        return self._sizes.size_dynamic()

    def static_extent(self, n: int) -> int:
        """Static size of dimension ``n``, or ``DYNAMIC_EXTENT`` if it is dynamic."""
        return self._sizes.get_static(n, DYNAMIC_EXTENT)

    def extent(self, n: int) -> int:
        """Actual size of dimension ``n``."""
        return self._sizes.get(n)

    def static_extents(self) -> tuple[int, ...]:
        """The static pattern of all dimensions."""
        return self._sizes.static_values()

    def is_convertible_to(self, static_extents: Iterable[int]) -> bool:
        """Whether this shape's static pattern may convert to ``static_extents``."""
        return is_compatible(self.static_extents(), static_extents)

    def convert(self, static_extents: Iterable[int]) -> Extents:
        """Return the same shape described by another static pattern.

        Raises TypeError if the patterns are incompatible and ValueError if a
        run-time size contradicts a static size of the target.
        """
        static = tuple(operator.index(v) for v in static_extents)
        if not self.is_convertible_to(static):
            raise TypeError(
                f"extents {list(self.static_extents())} cannot convert to {list(static)}"
            )
        for dim, (target, actual) in enumerate(zip(static, self)):
            if target != DYNAMIC_EXTENT and target != actual:
                raise ValueError(
                    f"dimension {dim} has size {actual}, target requires {target}"
                )
        return Extents(static, self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Extents):
            return NotImplemented
        return self.rank() == other.rank() and tuple(self) == tuple(other)

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __iter__(self) -> Iterator[int]:
        return iter(self._sizes)

    def __len__(self) -> int:
        return self.rank()

    def __repr__(self) -> str:
        dynamic = ", ".join(str(v) for v in self._sizes.dynamic_values())
        prefix = f"{type(self).__name__}({list(self.static_extents())!r}"
        return f"{prefix}, {dynamic})" if dynamic else f"{prefix})"