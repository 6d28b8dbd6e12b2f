"""Generic container types: array list, priority queue, sorted repository."""
from .array_list import BoundedArrayList
from .exceptions import (
    ContainerError,
    ContainerIndexError,
    ElementNotFoundError,
    EmptyCollectionError,
    InvalidArgumentError,
)
from .priority_queue import PriorityQueue
from .repository import Repository
from .sorted_repository import SortedRepository
from .stack import Stack

__all__ = [
    "BoundedArrayList",
    "ContainerError",
    "ContainerIndexError",
    "ElementNotFoundError",
    "EmptyCollectionError",
    "InvalidArgumentError",
    "PriorityQueue",
    "Repository",
    "SortedRepository",
    "Stack",
]
