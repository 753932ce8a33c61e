"""
Custom exceptions for the data structures.
"""


class InvalidElementError(ValueError):
    """
    Raised when None is passed where a search tree expects an element.

    The tree is left unchanged.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation}() does not accept None as an element")


class ListIndexOutOfRangeError(IndexError):
    """
    Raised when a list position falls outside the valid range.
    """

    def __init__(self, index: int, size: int):
        """
        Initialize index error.

        Args:
            index: The rejected position.
            size: Size of the list at the time of the call.
        """
        self.index = index
        self.size = size
        super().__init__(f"Index {index} out of range for size {size}")


class EmptyListError(LookupError):
    """Raised when the first or last element of an empty list is requested."""
