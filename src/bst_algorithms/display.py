"""Pretty-printing and display utilities for binary search trees."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    from bst_algorithms.binary_tree import BinaryTree


def print_pretty(tree: Optional[BinaryTree]) -> str:
    """
    Renders a binary search tree so:
      • Lines go from the root (depth 1) down to the deepest level.
      • Every value sits in its own column, columns ordered left→right by
        in-order position, so a node's left subtree is always drawn to
        its left and its right subtree to its right.
      • All columns have the same width.
    """
    from bst_algorithms.binary_tree import BinaryTree

    if tree is None:
        return f"{type(tree).__name__}: None"

    if not isinstance(tree, BinaryTree):
        raise TypeError(f"print_pretty() expects BinaryTree, got {type(tree).__name__}")

    if tree.is_empty():
        return f"{type(tree).__name__}: Empty"

    # 1) In-order pass: collect (depth, column, text) and track max length
    cells: List[Tuple[int, int, str]] = []
    max_len = 0
    max_depth = 0
    stack = []
    node, depth = tree.root.node, 0
    while stack or node is not None:
        while node is not None:
            depth += 1
            stack.append((node, depth))
            node = node.left.node
        node, depth = stack.pop()
        text = str(node.value)
        cells.append((depth, len(cells), text))
        max_len = max(max_len, len(text))
        max_depth = max(max_depth, depth)
        node = node.right.node

    # 2) Second pass: lay the texts out on a fixed-width grid
    col_width = max_len + 1
    rows = [[" " * col_width] * len(cells) for _ in range(max_depth)]
    for depth, column, text in cells:
        rows[depth - 1][column] = text.rjust(col_width)

    return "\n".join("".join(row).rstrip() for row in rows)
