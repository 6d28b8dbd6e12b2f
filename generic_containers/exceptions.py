"""Errors raised by the container types."""


class ContainerError(Exception):
    """Base exception for container operations."""
    pass


class EmptyCollectionError(ContainerError, LookupError):
    """Raised when reading from a container that holds no elements."""

    def __init__(self, container: str):
        self.container = container
        super().__init__(f"{container} is empty")


class ContainerIndexError(ContainerError, IndexError):
    """Raised on access outside the live range ``[0, count)``."""

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(f"index {index} out of range for size {count}")


class InvalidArgumentError(ContainerError, ValueError):
    pass


class ElementNotFoundError(ContainerError, ValueError):
    pass
