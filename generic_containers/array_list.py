"""Growable array list backed by a fixed-size buffer.

The buffer is a plain Python list used as raw storage: only the first
``count`` slots are live and the remaining slots hold ``None``.  When an
append finds the buffer full, a new buffer of twice the size is allocated
and the live items are copied over.  Capacity never shrinks.

Iterators walk a snapshot of the live items taken when the iterator is
created; mutating the list while iterating is the caller's responsibility.
"""
from __future__ import annotations

from typing import Generic, Iterator, List, Optional, TypeVar

from . import observability
from .config import get_settings
from .exceptions import ContainerIndexError, InvalidArgumentError

T = TypeVar("T")


class BoundedArrayList(Generic[T]):
    """A dynamic array with doubling growth.

    Operations: add, remove, remove_at, contains, indexed get/set, len, iter.
    Time: Amortized O(1) append, O(n) remove and contains.
    """
    __slots__ = ("_data", "_count")

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is None:
            capacity = get_settings().default_capacity
        if capacity < 1:
            raise InvalidArgumentError(f"capacity must be positive, got {capacity}")
        self._data: List[Optional[T]] = [None] * capacity
        self._count: int = 0

    @property
    def capacity(self) -> int:
        return len(self._data)

    def _grow(self) -> None:
        old = self._data
        new_cap = 2 * len(old)
        self._data = old + [None] * (new_cap - len(old))
        observability.inc_array_growth(len(old), new_cap)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._count:
            raise ContainerIndexError(index, self._count)

    def add(self, item: T) -> None:
        if self._count == len(self._data):
            self._grow()
        self._data[self._count] = item
        self._count += 1

    def remove(self, item: T) -> bool:
        """Remove the first live element equal to ``item``.

        Returns ``True`` when an element was removed and ``False`` when no
        equal element exists.
        """
        for idx in range(self._count):
            if self._data[idx] == item:
                self.remove_at(idx)
                return True
        return False

    def remove_at(self, index: int) -> T:
        """Remove and return the element at ``index``, shifting later ones left."""
        self._check_index(index)
        item = self._data[index]
        for i in range(index, self._count - 1):
            self._data[i] = self._data[i + 1]
        self._count -= 1
        self._data[self._count] = None
        return item  # type: ignore[return-value]

    def contains(self, item: T) -> bool:
        for idx in range(self._count):
            if self._data[idx] == item:
                return True
        return False

    def __contains__(self, item: object) -> bool:
        return self.contains(item)  # type: ignore[arg-type]

    def __getitem__(self, index: int) -> T:
        self._check_index(index)
        return self._data[index]  # type: ignore[return-value]

    def __setitem__(self, index: int, item: T) -> None:
        self._check_index(index)
        self._data[index] = item

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        return iter(self._data[: self._count])  # type: ignore[arg-type]

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"BoundedArrayList({self._data[: self._count]!r})"
