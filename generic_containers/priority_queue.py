"""Priority queue returning the entry with the *lowest* priority value first.

Despite the name, a smaller number wins: an entry enqueued with priority 1
is dequeued before one with priority 5.  Entries are stored unordered and
every ``dequeue``/``peek`` scans them, so ties resolve to the entry that was
enqueued first.
"""
from __future__ import annotations

from typing import Generic, List, Tuple, TypeVar

from . import observability
from .exceptions import EmptyCollectionError

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Unordered bag of ``(priority, value)`` pairs with min-first removal."""

    def __init__(self) -> None:
        self._items: List[Tuple[int, T]] = []

    def enqueue(self, item: T, priority: int) -> None:
        self._items.append((priority, item))

    def _min_index(self) -> int:
        if not self._items:
            observability.inc_empty_collection("priority queue")
            raise EmptyCollectionError("priority queue")
        # min() keeps the first of equal keys
        return min(range(len(self._items)), key=lambda i: self._items[i][0])

    def dequeue(self) -> T:
        """Remove and return the value with the smallest priority."""
        return self._items.pop(self._min_index())[1]

    def peek(self) -> T:
        """Return the value :meth:`dequeue` would remove, leaving it queued."""
        return self._items[self._min_index()][1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"PriorityQueue({self._items!r})"
