"""
Classic abstract data types implemented from scratch.

This package provides:
- BinarySearchTree - unbalanced BST of distinct, totally ordered elements
- ArrayList - resizable, index-addressable sequence backed by a slot array
"""

from adt.models.lists import ArrayList
from adt.models.trees import BinarySearchTree

__all__ = ["ArrayList", "BinarySearchTree"]
