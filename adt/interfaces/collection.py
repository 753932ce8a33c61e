"""
Collection protocol shared by every container in the package.
"""

from abc import ABC, abstractmethod
from typing import Any


class Collection(ABC):
    """
    Minimal capability surface of a finite container.

    Implementations must support:
    - size() and len()
    - is_empty()
    - contains() and the ``in`` operator
    """

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of stored elements.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def contains(self, element: Any) -> bool:
        """
        Check if an element is stored in the container.

        Args:
            element: The element to look for.

        Returns:
            True if the element is present, False otherwise.
        """
        pass

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, element: Any) -> bool:
        return self.contains(element)
