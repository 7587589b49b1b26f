"""Shared invariant-checking utilities.

This module provides tree invariant validation that can be used by both
the stats scripts and the test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bst_algorithms.logging_config import get_logger

logger = get_logger(__name__)

if TYPE_CHECKING:
    from bst_algorithms.binary_tree import BinaryTree
    from bst_algorithms.tree_stats import Stats

TREE_FLAGS = (
    "is_search_tree",
    "size_consistent",
)


class InvariantError(AssertionError):
    """Raised when a binary search tree invariant is violated."""


def assert_tree_invariants_raise(
    t: BinaryTree,
    stats: Stats,
) -> None:
    """Check all invariants, raising :class:`InvariantError` on the first failure."""
    for flag in TREE_FLAGS:
        if not getattr(stats, flag):
            raise InvariantError(f"Invariant failed: {flag} is False")

    if not t.is_empty():
        if stats.node_count <= 0:
            raise InvariantError(f"Invariant failed: node_count={stats.node_count} ≤ 0 for non-empty tree")
        if stats.height <= 0:
            raise InvariantError(f"Invariant failed: height={stats.height} ≤ 0 for non-empty tree")
        if stats.leaf_count <= 0:
            raise InvariantError(f"Invariant failed: leaf_count={stats.leaf_count} ≤ 0 for non-empty tree")
        if stats.least_item is None:
            raise InvariantError("Invariant failed: least_item is None for non-empty tree")
        if stats.greatest_item is None:
            raise InvariantError("Invariant failed: greatest_item is None for non-empty tree")
    elif stats.node_count != 0:
        raise InvariantError(f"Invariant failed: node_count={stats.node_count} for empty tree")


def check_search_tree(
    tree: BinaryTree,
    expected_values: list | None = None,
) -> tuple[list, bool, bool]:
    """Traverse the tree in order and validate the values.

    Returns
    -------
    (values, presence_ok, order_ok)
    """
    values = list(tree)

    order_ok = all(a < b for a, b in zip(values, values[1:]))

    presence_ok = True
    if expected_values is not None:
        presence_ok = len(values) == len(expected_values) and sorted(expected_values) == values

    if not order_ok:
        logger.error("In-order values are not strictly ascending: %r", values)

    return values, presence_ok, order_ok
