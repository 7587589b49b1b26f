"""
bst_algorithms — In-place comparison sorts and an unbalanced binary search tree.

Quick-start imports::

    from bst_algorithms import BinaryTree, merge_sort
"""

# Shared primitives
from bst_algorithms.base import Edge, Node

# Binary search tree
from bst_algorithms.binary_tree import BinaryTree
from bst_algorithms.display import print_pretty
from bst_algorithms.invariants import (
    InvariantError,
    assert_tree_invariants_raise,
    check_search_tree,
)
from bst_algorithms.iterator import ReversedTreeIterator, TraversalOrder, TreeIterator
from bst_algorithms.logging_config import get_logger, setup_logging

# Sorts
from bst_algorithms.sorting import (
    SORTS,
    heap_sort,
    insertion_sort,
    merge_sort,
    selection_sort,
)

# Stats & invariants
from bst_algorithms.tree_stats import Stats, tree_stats_

__all__ = [
    # Binary search tree
    "BinaryTree",
    # Primitives
    "Edge",
    "InvariantError",
    "Node",
    "ReversedTreeIterator",
    # Sorts
    "SORTS",
    # Stats & invariants
    "Stats",
    "TraversalOrder",
    "TreeIterator",
    "assert_tree_invariants_raise",
    "check_search_tree",
    "get_logger",
    "heap_sort",
    "insertion_sort",
    "merge_sort",
    "print_pretty",
    "selection_sort",
    "setup_logging",
    "tree_stats_",
]
