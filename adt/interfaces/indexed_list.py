"""
IndexedList abstract base class for ordered, index-addressable sequences.
"""

from abc import abstractmethod
from collections.abc import Iterator
from typing import Any

from adt.interfaces.collection import Collection


class IndexedList(Collection):
    """
    Abstract base class for growable sequences addressed by position.

    Indices run from 0 to size() - 1. Negative indices are out of range.

    Implementations:
    - ArrayList: backed by a slot array with doubling growth
    """

    @abstractmethod
    def add(self, element: Any) -> None:
        """
        Append an element to the end of the list.

        Time complexity: amortized O(1)
        """
        pass

    @abstractmethod
    def insert(self, index: int, element: Any) -> None:
        """
        Insert an element at a position, shifting later elements right.

        Args:
            index: Target position, 0 <= index <= size().
            element: The element to insert.

        Time complexity: O(N)
        """
        pass

    @abstractmethod
    def get(self, index: int) -> Any:
        """
        Retrieve the element at a position.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def set(self, index: int, element: Any) -> None:
        """
        Replace the element at a position.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def remove(self, index: int) -> Any:
        """
        Remove the element at a position, shifting later elements left.

        Returns:
            The removed element.

        Time complexity: O(N)
        """
        pass

    @abstractmethod
    def get_first(self) -> Any:
        pass

    @abstractmethod
    def get_last(self) -> Any:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Return an iterator over the elements in index order."""
        pass

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def __setitem__(self, index: int, element: Any) -> None:
        self.set(index, element)
