from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, Protocol, TypeVar
import logging

from bst_algorithms.logging_config import get_logger

# Get logger for this module
logger = get_logger("BinaryTree")


class Comparable(Protocol):
    """Anything with a strict less-than. Trees additionally rely on ``==``."""

    def __lt__(self, other: Any) -> bool: ...


T = TypeVar("T", bound=Comparable)


class Node(Generic[T]):
    """A tree node holding one value and exclusively owning two child edges."""
    __slots__ = ("value", "left", "right")

    def __init__(self, value: T, left: Optional["Edge[T]"] = None, right: Optional["Edge[T]"] = None):
        self.value = value
        self.left: Edge[T] = left if left is not None else Edge()
        self.right: Edge[T] = right if right is not None else Edge()

    def is_leaf(self) -> bool:
        return self.left.is_empty() and self.right.is_empty()

    def child_count(self) -> int:
        return (not self.left.is_empty()) + (not self.right.is_empty())

    def __repr__(self) -> str:
        return f"Node(value={self.value!r})"


class Edge(Generic[T]):
    """
    An ownership slot that is either empty or holds exactly one Node.

    Structural mutation of a tree happens on edges only: insert attaches a
    node to an empty edge, delete detaches or replaces the node held here.
    """
    __slots__ = ("node",)

    def __init__(self, node: Optional[Node[T]] = None):
        self.node: Optional[Node[T]] = node

    def is_empty(self) -> bool:
        return self.node is None

    def take(self) -> Optional[Node[T]]:
        """Detach and return the held node, leaving this edge empty."""
        node, self.node = self.node, None
        return node

    def replace(self, other: "Edge[T]") -> None:
        """Move the subtree held by *other* into this edge, emptying *other*."""
        self.node = other.take()

    def __bool__(self) -> bool:
        return self.node is not None

    def __eq__(self, other: object) -> bool:
        """Structural equality of the subtrees held by both edges."""
        if not isinstance(other, Edge):
            return NotImplemented
        pending = [(self, other)]
        while pending:
            a, b = pending.pop()
            if a.node is None or b.node is None:
                if a.node is not b.node:
                    return False
                continue
            if a.node.value != b.node.value:
                return False
            pending.append((a.node.left, b.node.left))
            pending.append((a.node.right, b.node.right))
        return True

    __hash__ = None

    def __repr__(self) -> str:
        return "Edge(empty)" if self.node is None else f"Edge({self.node!r})"


class AbstractOrderedSet(ABC, Generic[T]):
    """
    Abstract base class for an ordered set of mutually comparable values.
    """

    @abstractmethod
    def insert(self, value: T) -> bool:
        """
        Insert a value into the set.

        Parameters:
            value: The value to be inserted.

        Returns:
            bool: True if the value was added, False if it was already present.
        """
        pass

    @abstractmethod
    def delete(self, value: T) -> bool:
        """
        Delete a value from the set.

        Parameters:
            value: The value to be deleted.

        Returns:
            bool: True if the value was removed, False if it was absent.
        """
        pass

    @abstractmethod
    def find(self, value: T) -> Optional[Node[T]]:
        """
        Retrieve the node holding the given value.

        Parameters:
            value: The value to look up.

        Returns:
            Optional[Node]: The matching node, or None if the value is absent.
        """
        pass


def debug_log(message, *args, **kwargs):
    """Log a debug message only if debug logging is enabled"""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(message, *args, **kwargs)
