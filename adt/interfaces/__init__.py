"""
Abstract base classes and protocols for the data structures.
"""

from adt.interfaces.collection import Collection
from adt.interfaces.indexed_list import IndexedList
from adt.interfaces.search_tree import Comparable, SearchTree

__all__ = ["Collection", "Comparable", "IndexedList", "SearchTree"]
