"""A repository that keeps its elements in ascending order.

Elements are kept in a plain list and every insertion goes through
``bisect.insort`` so the list is sorted after each ``add``.  Duplicates are
allowed; equal elements keep their insertion order.
"""
from __future__ import annotations

from bisect import bisect_left, insort
from typing import Generic, Iterable, Iterator, List, Tuple, TypeVar

from . import observability
from .exceptions import ElementNotFoundError, EmptyCollectionError

T = TypeVar("T")


class SortedRepository(Generic[T]):
    """Maintain elements sorted under their natural ordering."""

    def __init__(self, iterable: Iterable[T] | None = None) -> None:
        self._items: List[T] = sorted(iterable) if iterable is not None else []

    def add(self, value: T) -> None:
        """Insert ``value`` into the repository keeping it ordered."""
        insort(self._items, value)

    def get_all(self) -> Tuple[T, ...]:
        """Return an immutable ascending snapshot of all elements."""
        return tuple(self._items)

    def find_max(self) -> T:
        """Return the largest element or raise ``EmptyCollectionError``."""
        if not self._items:
            observability.inc_empty_collection("sorted repository")
            raise EmptyCollectionError("sorted repository")
        return self._items[-1]

    def remove(self, value: T) -> None:
        """Remove first occurrence of ``value`` or raise ``ElementNotFoundError``."""
        idx = bisect_left(self._items, value)
        if idx == len(self._items) or self._items[idx] != value:
            raise ElementNotFoundError(f"{value!r} not in repository")
        self._items.pop(idx)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.get_all())

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"SortedRepository({self._items!r})"
