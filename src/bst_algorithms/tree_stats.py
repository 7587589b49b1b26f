"""Statistics and invariant checking for binary search trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from bst_algorithms.logging_config import get_logger

if TYPE_CHECKING:
    from bst_algorithms.binary_tree import BinaryTree

logger = get_logger(__name__)

_UNBOUNDED = object()


@dataclass
class Stats:
    """Aggregated statistics for a binary search tree."""

    node_count: int
    leaf_count: int
    height: int
    least_item: Any | None
    greatest_item: Any | None
    is_search_tree: bool
    size_consistent: bool


def tree_stats_(t: BinaryTree) -> Stats:
    """
    Returns aggregated statistics for a binary search tree in **O(n)** time.

    The search-tree check carries the open interval every node's value must
    fall into, so a value that is only out of order with respect to a
    distant ancestor is still caught. Uses an explicit stack.
    """
    if t is None or t.is_empty():
        return Stats(
            node_count=0,
            leaf_count=0,
            height=0,
            least_item=None,
            greatest_item=None,
            is_search_tree=True,
            size_consistent=t is None or len(t) == 0,
        )

    node_count = 0
    leaf_count = 0
    height = 0
    is_search_tree = True

    # (node, depth, lower bound, upper bound)
    stack = [(t.root.node, 1, _UNBOUNDED, _UNBOUNDED)]
    while stack:
        node, depth, lower, upper = stack.pop()
        node_count += 1
        height = max(height, depth)
        value = node.value

        if lower is not _UNBOUNDED and not lower < value:
            is_search_tree = False
        if upper is not _UNBOUNDED and not value < upper:
            is_search_tree = False

        if node.is_leaf():
            leaf_count += 1
        if node.right.node is not None:
            stack.append((node.right.node, depth + 1, value, upper))
        if node.left.node is not None:
            stack.append((node.left.node, depth + 1, lower, value))

    stats = Stats(
        node_count=node_count,
        leaf_count=leaf_count,
        height=height,
        least_item=t.min(),
        greatest_item=t.max(),
        is_search_tree=is_search_tree,
        size_consistent=node_count == len(t),
    )
    logger.debug("tree_stats_: %s", stats)
    return stats
