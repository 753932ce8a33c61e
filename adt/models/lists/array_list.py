"""
ArrayList implementation of IndexedList.

Elements live in a fixed-length slot array that is copied into an array of
twice the length whenever it fills up, giving amortized O(1) appends.
"""

import logging
from collections.abc import Iterator
from typing import Any

from adt.interfaces.indexed_list import IndexedList
from adt.models.exceptions import EmptyListError, ListIndexOutOfRangeError

logger = logging.getLogger(__name__)


class ArrayList(IndexedList):
    """
    Resizable array-backed list.

    Slots at positions >= size() are always None.
    """

    # Default length of the backing slot array
    DEFAULT_CAPACITY = 5

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY) -> None:
        """
        Initialize an empty list.

        Args:
            initial_capacity: Length of the initial slot array.
        """
        if initial_capacity <= 0:
            raise ValueError(
                f"initial_capacity must be positive, got {initial_capacity}"
            )

        self._elements: list[Any] = [None] * initial_capacity
        self._size: int = 0

    @classmethod
    def of(cls, *elements: Any) -> "ArrayList":
        """Create a list holding elements in the given order."""
        array_list = cls(max(len(elements), 1))
        for element in elements:
            array_list.add(element)
        return array_list

    @property
    def capacity(self) -> int:
        return len(self._elements)

    def add(self, element: Any) -> None:
        self._expand_if_needed()

        self._elements[self._size] = element
        self._size += 1

    def insert(self, index: int, element: Any) -> None:
        if not 0 <= index <= self._size:
            raise ListIndexOutOfRangeError(index, self._size)

        self._expand_if_needed()

        # Shift tail one slot to the right
        self._elements[index + 1 : self._size + 1] = self._elements[index : self._size]
        self._elements[index] = element
        self._size += 1

    def get(self, index: int) -> Any:
        self._check_index(index)
        return self._elements[index]

    def set(self, index: int, element: Any) -> None:
        self._check_index(index)
        self._elements[index] = element

    def remove(self, index: int) -> Any:
        self._check_index(index)

        element = self._elements[index]
        self._elements[index : self._size - 1] = self._elements[index + 1 : self._size]
        self._size -= 1
        self._elements[self._size] = None
        return element

    def get_first(self) -> Any:
        """Return the first element. O(1)"""
        if self.is_empty():
            raise EmptyListError("get_first() called on an empty list")
        return self._elements[0]

    def get_last(self) -> Any:
        """Return the last element. O(1)"""
        if self.is_empty():
            raise EmptyListError("get_last() called on an empty list")
        return self._elements[self._size - 1]

    def contains(self, element: Any) -> bool:
        """Linear scan over the stored elements. O(N)"""
        for index in range(self._size):
            if self._elements[index] == element:
                return True
        return False

    def size(self) -> int:
        return self._size

    def clear(self) -> None:
        self._elements = [None] * self.DEFAULT_CAPACITY
        self._size = 0

    def __iter__(self) -> Iterator[Any]:
        for index in range(self._size):
            yield self._elements[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise ListIndexOutOfRangeError(index, self._size)

    def _expand_if_needed(self) -> None:
        """Double the slot array when every slot is taken."""
        if self._size < len(self._elements):
            return

        new_capacity = len(self._elements) * 2
        logger.debug(f"Growing ArrayList capacity {len(self._elements)} -> {new_capacity}")
        self._elements = self._elements + [None] * (new_capacity - len(self._elements))
