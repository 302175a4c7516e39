"""Sequences of sizes where some entries are fixed up front and the rest are given at run time."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator, Sequence

DYNAMIC_EXTENT = -1
"""Marker for an entry whose value is only known at run time."""


def _normalize_static(static_values: Iterable[int]) -> tuple[int, ...]:
    result = []
    for value in static_values:
        value = operator.index(value)
        if value < 0 and value != DYNAMIC_EXTENT:
            raise ValueError(f"static size must be non-negative or DYNAMIC_EXTENT, got {value}")
        result.append(value)
    return tuple(result)


class PartiallyStaticSizes:
    """A fixed-length list of sizes, each either static or dynamic.

    Static entries are part of the object's shape description and never change;
    dynamic entries hold values supplied at construction and may be updated.
    """

    __slots__ = ("_static", "_values")

    def __init__(self, static_values: Iterable[int], dynamic_values: Iterable[int] = ()) -> None:
        self._static = _normalize_static(static_values)
        dynamic = [operator.index(v) for v in dynamic_values]
        expected = sum(1 for s in self._static if s == DYNAMIC_EXTENT)
        if len(dynamic) != expected:
            raise ValueError(
                f"expected {expected} dynamic value(s), got {len(dynamic)}"
            )
        supplied = iter(dynamic)
        self._values = [
            next(supplied) if s == DYNAMIC_EXTENT else s for s in self._static
        ]

    @classmethod
    def from_all_sizes(
        cls, static_values: Iterable[int], sizes: Iterable[int]
    ) -> PartiallyStaticSizes:
        """Build from one value per entry; values given for static entries are ignored."""
        static = _normalize_static(static_values)
        all_sizes = [operator.index(v) for v in sizes]
        if len(all_sizes) != len(static):
            raise ValueError(
                f"expected {len(static)} size(s), got {len(all_sizes)}"
            )
        dynamic = [v for s, v in zip(static, all_sizes) if s == DYNAMIC_EXTENT]
        return cls(static, dynamic)

    def convert(self, static_values: Iterable[int]) -> PartiallyStaticSizes:
        """Return the same sizes under another static pattern of equal length.

        Dynamic entries of the new pattern take this object's current values;
        static entries of the new pattern keep their static value.
        """
        static = _normalize_static(static_values)
        if len(static) != len(self._static):
            raise ValueError(
                f"cannot convert {len(self._static)} size(s) to {len(static)}"
            )
        return type(self).from_all_sizes(static, self._values)

    def get(self, n: int) -> int:
        """Return the value of entry ``n``."""
        n = operator.index(n)
        if not 0 <= n < len(self._values):
            raise IndexError(f"size index {n} out of range")
        return self._values[n]

    def get_static(self, n: int, default: int = DYNAMIC_EXTENT) -> int:
        """Return the static value of entry ``n``, or ``default`` if it is dynamic."""
        n = operator.index(n)
        if not 0 <= n < len(self._static):
            raise IndexError(f"size index {n} out of range")
        value = self._static[n]
        return default if value == DYNAMIC_EXTENT else value

    def set(self, n: int, value: int) -> None:
        """Set entry ``n``; setting a static entry leaves it unchanged."""
        n = operator.index(n)
        value = operator.index(value)
        if not 0 <= n < len(self._static):
            raise IndexError(f"size index {n} out of range")
        if self._static[n] == DYNAMIC_EXTENT:
            self._values[n] = value

    def size(self) -> int:
        """Number of entries."""
        return len(self._static)

    def size_dynamic(self) -> int:
        """Number of dynamic entries."""
        return sum(1 for s in self._static if s == DYNAMIC_EXTENT)

    def static_values(self) -> tuple[int, ...]:
        """The static pattern, with DYNAMIC_EXTENT at dynamic entries."""
        return self._static

    def dynamic_values(self) -> tuple[int, ...]:
        """Current values of the dynamic entries, in order."""
        return tuple(
            v for s, v in zip(self._static, self._values) if s == DYNAMIC_EXTENT
        )

    def __iter__(self) -> Iterator[int]:
        return iter(tuple(self._values))

    def __len__(self) -> int:
        return len(self._static)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PartiallyStaticSizes):
            return NotImplemented
        return self._static == other._static and self._values == other._values

    def __hash__(self) -> int:
        return hash((self._static, tuple(self._values)))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({list(self._static)!r}, "
            f"{list(self.dynamic_values())!r})"
        )


def as_sizes(static_values: Sequence[int], *dynamic_values: int) -> PartiallyStaticSizes:
    """Shorthand for ``PartiallyStaticSizes(static_values, dynamic_values)``."""
    return PartiallyStaticSizes(static_values, dynamic_values)