from __future__ import annotations

from typing import Generic, List, Tuple, TypeVar

T = TypeVar("T")


class Repository(Generic[T]):
    """Insertion-ordered collection with a read-only view of its contents."""

    def __init__(self) -> None:
        self._values: List[T] = []

    def add(self, value: T) -> None:
        self._values.append(value)

    def remove(self, value: T) -> bool:
        """Drop the first element equal to ``value``; missing values are ignored."""
        if value not in self._values:
            return False
        self._values.remove(value)
        return True

    def get_all(self) -> Tuple[T, ...]:
        return tuple(self._values)

    def __len__(self) -> int:
        return len(self._values)
