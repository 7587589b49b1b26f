"""Unbalanced binary search tree"""

from __future__ import annotations
from typing import Iterable, Iterator, Optional

from bst_algorithms.base import (
    AbstractOrderedSet,
    Edge,
    Node,
    T,
    debug_log,
)
from bst_algorithms.invariants import InvariantError
from bst_algorithms.iterator import ReversedTreeIterator, TreeIterator


class BinaryTree(AbstractOrderedSet[T]):
    """
    A binary search tree owning a single root edge.

    For every node, all values in its left subtree compare less than the
    node's value and all values in its right subtree compare greater.
    Duplicates are never stored: inserting a value that is already present
    is a no-op.

    Attributes:
        root (Edge): The root slot. Empty for the empty tree.
    """
    __slots__ = ("root", "_size", "_version")

    def __init__(self, values: Iterable[T] = ()):
        self.root: Edge[T] = Edge()
        self._size = 0
        # bumped on every structural mutation, checked by iterators
        self._version = 0
        for value in values:
            self.insert(value)

    def is_empty(self) -> bool:
        return self.root.is_empty()

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __contains__(self, value: T) -> bool:
        return self.find(value) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinaryTree):
            return NotImplemented
        return self.root == other.root

    __hash__ = None

    def __str__(self):
        return "Empty BinaryTree" if self.is_empty() else f"BinaryTree(root={self.root.node}, size={self._size})"

    __repr__ = __str__

    # Public API
    def insert(self, value: T) -> bool:
        """
        Insert a value into the tree (O(height)).

        Descends left while the value is smaller and right while it is
        larger, and attaches a new leaf at the first empty edge. If an equal
        value is met on the way, the tree is left untouched.

        Args:
            value: The value to insert.

        Returns:
            bool: True if a node was attached, False if the value was already present.
        """
        edge = self.find_edge(value)
        if not edge.is_empty():
            debug_log("insert(%r): already present", value)
            return False
        edge.node = Node(value)
        self._size += 1
        self._version += 1
        return True

    def delete(self, value: T) -> bool:
        """
        Remove a value from the tree (O(height)).

        A leaf is simply detached and a node with one child is replaced by
        that child's subtree. A node with two children is replaced by its
        in-order predecessor (the rightmost node of its left subtree); the
        predecessor's own left subtree takes its old place.

        Args:
            value: The value to remove.

        Returns:
            bool: True if the value was removed, False if it was absent.
        """
        edge = self.find_edge(value)
        if edge.is_empty():
            debug_log("delete(%r): not present", value)
            return False

        node = edge.take()
        left, right = Edge(node.left.take()), Edge(node.right.take())

        if left.is_empty():
            edge.replace(right)
        elif right.is_empty():
            edge.replace(left)
        else:
            replacement = self._detach_predecessor(left)
            debug_log("delete(%r): relinking predecessor %r", value, replacement.value)
            replacement.left = left
            replacement.right = right
            edge.node = replacement

        self._size -= 1
        self._version += 1
        return True

    def find(self, value: T) -> Optional[Node[T]]:
        """
        Searches for the node holding *value*.

        Args:
            value: The value to search for.

        Returns:
            Optional[Node]: The matching node, or None if the value is absent.
        """
        return self.find_edge(value).node

    def find_edge(self, value: T) -> Edge[T]:
        """
        Return the edge where *value* is stored, or the empty edge where it
        would be attached.

        Raises:
            InvariantError: If the descent meets an empty edge while still
                having to go down. A well-formed tree never does.
        """
        current = self.root
        while True:
            node = current.node
            if node is None:
                return current
            if value < node.value:
                current = node.left
            elif node.value < value:
                current = node.right
            else:
                return current
            if current is None:
                raise InvariantError(f"Unexpected missing edge below {node!r} while finding {value!r}")

    def min(self) -> Optional[T]:
        """Smallest value in the tree, or None if empty."""
        node = self._extreme(leftmost=True)
        return None if node is None else node.value

    def max(self) -> Optional[T]:
        """Largest value in the tree, or None if empty."""
        node = self._extreme(leftmost=False)
        return None if node is None else node.value

    def height(self) -> int:
        """
        Number of nodes on the longest root-to-leaf path (0 when empty).
        Computed iteratively so degenerate trees do not hit the recursion limit.
        """
        height = 0
        level = [self.root.node] if self.root.node is not None else []
        while level:
            height += 1
            level = [
                child.node
                for node in level
                for child in (node.left, node.right)
                if child.node is not None
            ]
        return height

    # Iteration
    def __iter__(self) -> TreeIterator[T]:
        return TreeIterator(self)

    def __reversed__(self) -> ReversedTreeIterator[T]:
        return ReversedTreeIterator(TreeIterator(self))

    def iter_nodes(self) -> Iterator[Node[T]]:
        """Ascending iterator over nodes instead of values."""
        return TreeIterator(self, nodes=True)

    def print_structure(self) -> str:
        from bst_algorithms.display import print_pretty
        return print_pretty(self)

    # Private Methods
    def _extreme(self, leftmost: bool) -> Optional[Node[T]]:
        node = self.root.node
        if node is None:
            return None
        while True:
            child = node.left if leftmost else node.right
            if child.node is None:
                return node
            node = child.node

    @staticmethod
    def _detach_predecessor(left: Edge[T]) -> Node[T]:
        """
        Detach the rightmost node of the subtree held by *left*.

        The detached node's left subtree is promoted into its old slot, so
        the remaining subtree stays a valid search tree. The returned node
        has two empty edges.
        """
        current = left
        while not current.node.right.is_empty():
            current = current.node.right

        predecessor = current.take()
        current.replace(predecessor.left)
        return predecessor
