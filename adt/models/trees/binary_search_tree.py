"""
Binary Search Tree implementation for sets of distinct ordered elements.

The tree is never rebalanced, so inserting sorted input builds a chain whose
depth grows linearly. All walks use an explicit cursor or stack rather than
recursion, so such chains do not hit the interpreter's recursion limit.
"""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Generic

from adt.interfaces.search_tree import SearchTree, T
from adt.models.exceptions import InvalidElementError

logger = logging.getLogger(__name__)


@dataclass
class Node(Generic[T]):
    """Node in the Binary Search Tree. Owned by its parent only."""

    value: T
    left: "Node[T] | None" = None
    right: "Node[T] | None" = None


class BinarySearchTree(SearchTree, Generic[T]):
    """
    Unbalanced Binary Search Tree implementation of SearchTree.

    Properties maintained:
    1. Every value in a left subtree is less than its parent's value
    2. Every value in a right subtree is greater than its parent's value
    3. No two nodes hold equal values
    4. size() equals the number of nodes reachable from the root
    """

    def __init__(self) -> None:
        self._root: Node[T] | None = None
        self._size: int = 0

    @classmethod
    def of(cls, *elements: T) -> "BinarySearchTree[T]":
        """
        Build a tree by inserting elements one at a time, in order.

        Duplicates are dropped the same way insert() drops them.
        """
        tree = cls()
        for element in elements:
            tree.insert(element)
        return tree

    def insert(self, element: T) -> bool:
        """Insert element unless an equal one exists. O(depth)"""
        if element is None:
            raise InvalidElementError("insert")

        if self._root is None:
            self._root = Node(value=element)
            self._size = 1
            return True

        current = self._root
        while True:
            if element < current.value:
                if current.left is None:
                    current.left = Node(value=element)
                    break
                current = current.left
            elif current.value < element:
                if current.right is None:
                    current.right = Node(value=element)
                    break
                current = current.right
            else:
                logger.debug(f"Rejected duplicate element {element!r}")
                return False

        self._size += 1
        return True

    def contains(self, element: T) -> bool:
        """Check if an equal element is stored. O(depth)"""
        if element is None:
            raise InvalidElementError("contains")
        return self._find_node(element) is not None

    def size(self) -> int:
        return self._size

    def depth(self) -> int:
        """
        Return the longest root-to-leaf path length in edges.

        Computed as the root's height in nodes minus one, with an absent
        subtree having height 0.
        """
        if self._root is None:
            return 0

        root_height = 0
        stack: list[tuple[Node[T], int]] = [(self._root, 1)]
        while stack:
            node, height = stack.pop()
            root_height = max(root_height, height)
            if node.left is not None:
                stack.append((node.left, height + 1))
            if node.right is not None:
                stack.append((node.right, height + 1))

        return root_height - 1

    def in_order_traversal(self, visit: Callable[[T], Any]) -> None:
        for value in self:
            visit(value)

    def __iter__(self) -> Iterator[T]:
        return _InOrderIterator(self._root)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _find_node(self, element: T) -> Node[T] | None:
        """Find node holding a value equal to element."""
        current = self._root
        while current is not None:
            if element < current.value:
                current = current.left
            elif current.value < element:
                current = current.right
            else:
                return current
        return None


class _InOrderIterator(Iterator[T]):
    """Iterator yielding tree values in ascending order."""

    def __init__(self, root: Node[T] | None) -> None:
        self._stack: list[Node[T]] = []
        self._push_left_path(root)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()

        # Right subtree comes after the node itself
        self._push_left_path(node.right)

        return node.value

    def _push_left_path(self, node: Node[T] | None) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left
