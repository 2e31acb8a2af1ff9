"""Exceptions raised by the rich collections."""


class CollectionError(Exception):
    """Base class for collection errors."""


class IndexOutOfRangeError(CollectionError, IndexError):
    """Raised by positional access outside ``[0, size)``.

    Subclasses ``IndexError`` so plain ``except IndexError`` still catches it.
    """

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Index: {index}, Size: {size}")
