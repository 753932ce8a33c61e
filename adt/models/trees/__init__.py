"""
Search tree implementations.
"""

from adt.models.trees.binary_search_tree import BinarySearchTree

__all__ = ["BinarySearchTree"]
