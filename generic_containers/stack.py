from __future__ import annotations

from typing import Generic, Optional, TypeVar

from . import observability
from .array_list import BoundedArrayList
from .exceptions import EmptyCollectionError

T = TypeVar("T")


class Stack(Generic[T]):
    """A LIFO stack on top of :class:`BoundedArrayList`.

    Operations: push, pop, peek, is_empty, len.
    Time: Amortized O(1).
    """
    __slots__ = ("_items",)

    def __init__(self, capacity: Optional[int] = None) -> None:
        self._items: BoundedArrayList[T] = BoundedArrayList(capacity)

    def _top_index(self) -> int:
        if not len(self._items):
            observability.inc_empty_collection("stack")
            raise EmptyCollectionError("stack")
        return len(self._items) - 1

    def push(self, value: T) -> None:
        self._items.add(value)

    def pop(self) -> T:
        return self._items.remove_at(self._top_index())

    def peek(self) -> T:
        return self._items[self._top_index()]

    def is_empty(self) -> bool:
        return not len(self._items)

    def __len__(self) -> int:
        return len(self._items)
