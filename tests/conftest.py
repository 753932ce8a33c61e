"""
Shared pytest fixtures for data structure tests.
"""

import pytest

from adt.models.lists import ArrayList
from adt.models.trees import BinarySearchTree


@pytest.fixture
def empty_tree():
    """Provide a fresh empty BinarySearchTree."""
    return BinarySearchTree()


@pytest.fixture
def sample_values():
    """Provide values that build a tree with both left and right branches."""
    return [8, 3, 10, 1, 6, 14, 4, 7, 13]


@pytest.fixture
def sample_tree(sample_values):
    """Provide a tree built from sample_values."""
    return BinarySearchTree.of(*sample_values)


@pytest.fixture
def array_list():
    """Provide a fresh ArrayList with default capacity."""
    return ArrayList()


@pytest.fixture
def filled_list():
    """Provide an ArrayList holding five letters."""
    return ArrayList.of("a", "b", "c", "d", "e")
