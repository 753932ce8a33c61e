"""
SearchTree abstract base class for ordered sets of distinct elements.
"""

from abc import abstractmethod
from collections.abc import Callable, Iterator
from typing import Any, Protocol, TypeVar

from adt.interfaces.collection import Collection


class Comparable(Protocol):
    """Element type with a total order expressed through ``<``."""

    def __lt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=Comparable)


class SearchTree(Collection):
    """
    Abstract base class for search trees of totally ordered elements.

    Two elements are the same key when neither compares less than the
    other. ``None`` is never a valid element.

    Implementations:
    - BinarySearchTree: unbalanced, depth may degrade to O(N)
    """

    @abstractmethod
    def insert(self, element: T) -> bool:
        """
        Insert an element unless an equal one is already stored.

        Args:
            element: The element to insert.

        Returns:
            True if the element was inserted, False if it was a duplicate.

        Raises:
            InvalidElementError: If element is None.
        """
        pass

    @abstractmethod
    def depth(self) -> int:
        """
        Return the number of edges on the longest root-to-leaf path.

        Returns:
            0 for an empty or single-node tree.
        """
        pass

    @abstractmethod
    def in_order_traversal(self, visit: Callable[[T], Any]) -> None:
        """
        Call visit once per stored element in ascending order.

        Args:
            visit: Callback receiving each element.
        """
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Return an iterator over the elements in ascending order."""
        pass
