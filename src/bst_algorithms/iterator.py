"""Lazy bidirectional in-order traversal of a BinaryTree."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Dict, Generic, List, Optional, Union

from bst_algorithms.base import Edge, Node, T
from bst_algorithms.invariants import InvariantError

if TYPE_CHECKING:
    from bst_algorithms.binary_tree import BinaryTree

_UNSET = object()


class TraversalOrder(Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"


class TreeIterator(Generic[T]):
    """
    In-order iterator over a BinaryTree driven by explicit path stacks.

    ``next()`` yields values in ascending order, ``next_back()`` in
    descending order. Each end builds its own stack lazily on its first
    call, by descending from the root and pushing every edge visited,
    always going left (ascending) or right (descending). Advancing pops
    the top edge, yields its node, then descends the same way into the
    node's subtree on the opposite side.

    When both ends are driven, the iterator remembers the last value handed
    out by each end and stops as soon as the two cursors would cross, so
    every value is produced exactly once across both ends.

    The iterator never mutates the tree. Advancing after the tree has been
    mutated raises RuntimeError.
    """
    __slots__ = ("_tree", "_version", "_nodes", "_paths", "_last", "_exhausted")

    def __init__(self, tree: BinaryTree[T], nodes: bool = False):
        self._tree = tree
        self._version = tree._version
        self._nodes = nodes
        self._paths: Dict[TraversalOrder, Optional[List[Edge[T]]]] = {
            TraversalOrder.INCREASING: None,
            TraversalOrder.DECREASING: None,
        }
        self._last: Dict[TraversalOrder, object] = {
            TraversalOrder.INCREASING: _UNSET,
            TraversalOrder.DECREASING: _UNSET,
        }
        self._exhausted = False

    def __iter__(self):
        return self

    def __next__(self) -> Union[T, Node[T]]:
        return self._advance(TraversalOrder.INCREASING)

    def next_back(self, default=_UNSET) -> Union[T, Node[T]]:
        """
        Yield the next value from the high end.

        Raises StopIteration when exhausted, unless *default* is given.
        """
        try:
            return self._advance(TraversalOrder.DECREASING)
        except StopIteration:
            if default is _UNSET:
                raise
            return default

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    # Private Methods
    @staticmethod
    def _populate_path(path: List[Edge[T]], edge: Edge[T], order: TraversalOrder) -> None:
        while edge.node is not None:
            path.append(edge)
            edge = edge.node.left if order is TraversalOrder.INCREASING else edge.node.right

    def _advance(self, order: TraversalOrder) -> Union[T, Node[T]]:
        if self._tree._version != self._version:
            raise RuntimeError("BinaryTree mutated during iteration")
        if self._exhausted:
            raise StopIteration

        path = self._paths[order]
        if path is None:
            path = self._paths[order] = []
            self._populate_path(path, self._tree.root, order)

        if not path:
            self._exhausted = True
            raise StopIteration

        edge = path.pop()
        node = edge.node
        if node is None:
            raise InvariantError("Edge in iterator path is empty")

        if self._crosses(order, node.value):
            self._exhausted = True
            raise StopIteration

        if order is TraversalOrder.INCREASING:
            self._populate_path(path, node.right, order)
        else:
            self._populate_path(path, node.left, order)

        self._last[order] = node.value
        return node if self._nodes else node.value

    def _crosses(self, order: TraversalOrder, value: T) -> bool:
        if order is TraversalOrder.INCREASING:
            bound = self._last[TraversalOrder.DECREASING]
            return bound is not _UNSET and not value < bound
        bound = self._last[TraversalOrder.INCREASING]
        return bound is not _UNSET and not bound < value


class ReversedTreeIterator(Generic[T]):
    """Adapter exposing the descending end of a TreeIterator as ``__next__``."""
    __slots__ = ("_inner",)

    def __init__(self, inner: TreeIterator[T]):
        self._inner = inner

    def __iter__(self):
        return self

    def __next__(self) -> Union[T, Node[T]]:
        return self._inner.next_back()

    def next_back(self, default=_UNSET) -> Union[T, Node[T]]:
        if default is _UNSET:
            return next(self._inner)
        return next(self._inner, default)

    def __reversed__(self) -> TreeIterator[T]:
        return self._inner

    @property
    def exhausted(self) -> bool:
        return self._inner.exhausted
