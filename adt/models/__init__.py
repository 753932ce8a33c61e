"""
Concrete data structure implementations.
"""

from adt.models.lists import ArrayList
from adt.models.trees import BinarySearchTree

__all__ = [
    "ArrayList",
    "BinarySearchTree",
]
