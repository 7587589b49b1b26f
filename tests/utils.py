"""Utility functions for testing BinaryTree invariants."""

from typing import Optional

from bst_algorithms.binary_tree import BinaryTree
from bst_algorithms.invariants import TREE_FLAGS
from bst_algorithms.tree_stats import Stats


def assert_tree_invariants_tc(tc, t: BinaryTree, stats: Stats, err_msg: Optional[str] = "") -> None:
    """TestCase version: use inside unittest.TestCase methods."""
    for flag in TREE_FLAGS:
        tc.assertTrue(
            getattr(stats, flag),
            f"Invariant failed: {flag} is False \n\n{err_msg}"
        )

    if not t.is_empty():
        tc.assertGreater(
            stats.node_count, 0,
            f"Invariant failed: node_count={stats.node_count} ≤ 0 for non-empty tree\n\n{err_msg}"
        )
        tc.assertGreater(
            stats.height, 0,
            f"Invariant failed: height={stats.height} ≤ 0 for non-empty tree\n\n{err_msg}"
        )
        tc.assertGreater(
            stats.leaf_count, 0,
            f"Invariant failed: leaf_count={stats.leaf_count} ≤ 0 for non-empty tree\n\n{err_msg}"
        )
        tc.assertIsNotNone(
            stats.least_item,
            f"Invariant failed: least_item is None for non-empty tree\n\n{err_msg}"
        )
        tc.assertIsNotNone(
            stats.greatest_item,
            f"Invariant failed: greatest_item is None for non-empty tree\n\n{err_msg}"
        )
        tc.assertEqual(
            t.height(), stats.height,
            f"Invariant failed: height()={t.height()} ≠ stats.height={stats.height}\n\n{err_msg}"
        )
