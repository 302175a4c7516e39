"""A multidimensional view over a flat buffer."""

from __future__ import annotations

import math
import operator
from collections.abc import Iterable, Sequence
from typing import Any

from ndspan.accessor import AccessorBasic, ElementPointer
from ndspan.extents import Extents
from ndspan.layouts import LayoutRight

__all__ = ["MdSpan"]


def _as_pointer(data: Any) -> ElementPointer | None:
    if data is None or isinstance(data, ElementPointer):
        return data
    return ElementPointer(data)


class MdSpan:
    """A non-owning view that maps multidimensional indices onto a buffer.

    ``mapping`` turns indices into offsets (a layout instance such as
    :class:`LayoutRight`), and ``accessor`` reads and writes elements at those
    offsets.  ``data`` may be an :class:`ElementPointer`, a mutable sequence
    or ``None`` for a view with no storage.
    """

    __slots__ = ("_data", "_mapping", "_accessor")

    def __init__(self, data: Any, mapping: Any, accessor: AccessorBasic | None = None) -> None:
        self._data = _as_pointer(data)
        self._mapping = mapping
        self._accessor = AccessorBasic() if accessor is None else accessor

    @classmethod
    def from_extents(
        cls,
        data: Any,
        static_extents: Iterable[int],
        *args: Any,
        layout: type = LayoutRight,
    ) -> MdSpan:
        """Build a view from a static pattern and its dynamic extents.

        ``args`` holds one value per dynamic dimension, or a single sequence of
        them, or a single compatible :class:`Extents`.
        """
        if len(args) == 1 and isinstance(args[0], Sequence):
            extents = Extents.from_dynamic(static_extents, args[0])
        else:
            extents = Extents(static_extents, *args)
        return cls(data, layout(extents))

    def _offset(self, indices: Sequence[Any]) -> int:
        extents = self._mapping.extents()
        rank = extents.rank()
        if len(indices) != rank:
            raise TypeError(f"expected {rank} index(es), got {len(indices)}")
        checked = []
        for dim, index in enumerate(indices):
            index = operator.index(index)
            if not 0 <= index < extents.extent(dim):
                raise IndexError(
                    f"index {index} out of range for dimension {dim} "
                    f"of extent {extents.extent(dim)}"
                )
            checked.append(index)
        return self._mapping(*checked)

    def _pointer(self) -> ElementPointer:
        if self._data is None:
            raise ValueError("view has no data")
        return self._data

    @staticmethod
    def _unpack(args: tuple[Any, ...]) -> Sequence[Any]:
        if len(args) == 1 and isinstance(args[0], Sequence):
            return args[0]
        return args

    def __call__(self, *args: Any) -> Any:
        """Element at the given indices, one per dimension, or a single sequence of them."""
        offset = self._offset(self._unpack(args))
        return self._accessor.access(self._pointer(), offset)

    def __getitem__(self, index: Any) -> Any:
        indices = index if isinstance(index, tuple) else (index,)
        return self._accessor.access(self._pointer(), self._offset(indices))

    def __setitem__(self, index: Any, value: Any) -> None:
        indices = index if isinstance(index, tuple) else (index,)
        self._accessor.store(self._pointer(), self._offset(indices), value)

    def rank(self) -> int:
        """Number of dimensions."""
        return self.extents().rank()

    def rank_dynamic(self) -> int:
        """Number of dynamic dimensions."""
        return self.extents().rank_dynamic()

    def static_extent(self, r: int) -> int:
        """Static size of dimension ``r``, or DYNAMIC_EXTENT."""
        return self.extents().static_extent(r)

    def extents(self) -> Extents:
        """The shape of the view."""
        return self._mapping.extents()

    def extent(self, r: int) -> int:
        """Size of dimension ``r``."""
        return self.extents().extent(r)

    def size(self) -> int:
        """Number of elements in the index space."""
        return math.prod(self.extents())

    def unique_size(self) -> int:
        """Number of distinct elements the view refers to."""
        if self._mapping.is_unique():
            return self.size()
        return self._mapping.required_span_size()

    def data(self) -> ElementPointer | None:
        """The pointer the view starts from."""
        return self._data

    def mapping(self) -> Any:
        """The index-to-offset mapping."""
        return self._mapping

    def accessor(self) -> AccessorBasic:
        """The element accessor."""
        return self._accessor

    def is_unique(self) -> bool:
        return self._mapping.is_unique()

    def is_contiguous(self) -> bool:
        return self._mapping.is_contiguous()

    def is_strided(self) -> bool:
        return self._mapping.is_strided()

    def stride(self, r: int) -> int:
        """Offset distance between neighbours along dimension ``r``."""
        return self._mapping.stride(r)

    def is_always_unique(self) -> bool:
        return type(self._mapping).is_always_unique()

    def is_always_contiguous(self) -> bool:
        return type(self._mapping).is_always_contiguous()

    def is_always_strided(self) -> bool:
        return type(self._mapping).is_always_strided()

    def converted(self, static_extents: Iterable[int]) -> MdSpan:
        """The same view with its extents described by another static pattern."""
        return type(self)(self._data, self._mapping.convert(static_extents), self._accessor)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r}, {self._mapping!r})"