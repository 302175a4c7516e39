"""Element access through a pointer-like handle into a mutable buffer."""

from __future__ import annotations

import operator
from collections.abc import MutableSequence
from dataclasses import dataclass
from typing import Any

__all__ = ["AccessorBasic", "ElementPointer"]


@dataclass(frozen=True, eq=False)
class ElementPointer:
    """A position inside a mutable sequence, usable like a pointer.

    Adding an integer moves the position; indexing reads or writes the element
    at ``offset + i`` of the underlying buffer.
    """

    buffer: MutableSequence[Any]
    offset: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "offset", operator.index(self.offset))

    def _position(self, i: int) -> int:
        position = self.offset + operator.index(i)
        if not 0 <= position < len(self.buffer):
            raise IndexError(
                f"position {position} outside buffer of length {len(self.buffer)}"
            )
        return position

    def __add__(self, i: int) -> ElementPointer:
        return ElementPointer(self.buffer, self.offset + operator.index(i))

    def __getitem__(self, i: int) -> Any:
        return self.buffer[self._position(i)]

    def __setitem__(self, i: int, value: Any) -> None:
        self.buffer[self._position(i)] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ElementPointer):
            return NotImplemented
        return self.buffer is other.buffer and self.offset == other.offset

    def __hash__(self) -> int:
        return hash((id(self.buffer), self.offset))

    def __repr__(self) -> str:
        return f"ElementPointer(<buffer of {len(self.buffer)}>, offset={self.offset})"


@dataclass(frozen=True)
class AccessorBasic:
    """Plain accessor: offsets move the pointer, access reads the element there."""

    def offset(self, pointer: ElementPointer, i: int) -> ElementPointer:
        """Return ``pointer`` moved forward by ``i`` elements."""
        return pointer + i

    def access(self, pointer: ElementPointer, i: int) -> Any:
        """Read the element ``i`` positions past ``pointer``."""
        return pointer[i]

    def store(self, pointer: ElementPointer, i: int, value: Any) -> None:
        """Write ``value`` to the element ``i`` positions past ``pointer``."""
        pointer[i] = value

    def decay(self, pointer: ElementPointer) -> ElementPointer:
        """Return the plain pointer behind ``pointer``."""
        return pointer