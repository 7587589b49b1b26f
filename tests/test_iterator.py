"""Tests for the bidirectional in-order TreeIterator"""

import random
import unittest

from bst_algorithms.base import Node
from bst_algorithms.binary_tree import BinaryTree
from bst_algorithms.invariants import InvariantError
from bst_algorithms.iterator import ReversedTreeIterator, TraversalOrder, TreeIterator
from tests.test_base import BaseTreeTestCase, make_edge, reference_tree

ASCENDING = [4, 5, 6, 7, 10, 11, 12, 14, 15, 16]


class TestSingleDirection(BaseTreeTestCase):

    def setUp(self):
        super().setUp()
        self.tree = reference_tree()

    def test_forward(self):
        self.assertEqual(list(self.tree), ASCENDING)

    def test_backward(self):
        self.assertEqual(list(reversed(self.tree)), ASCENDING[::-1])

    def test_backward_via_next_back(self):
        it = iter(self.tree)
        values = []
        while True:
            value = it.next_back(None)
            if value is None:
                break
            values.append(value)
        self.assertEqual(values, ASCENDING[::-1])

    def test_nodes_mode(self):
        nodes = list(self.tree.iter_nodes())
        self.assertTrue(all(isinstance(n, Node) for n in nodes))
        self.assertEqual([n.value for n in nodes], ASCENDING)
        self.assertIs(nodes[4], self.tree.root.node)

    def test_lazy_path_construction(self):
        it = iter(self.tree)
        self.assertIsNone(it._paths[TraversalOrder.INCREASING])
        self.assertEqual(next(it), 4)
        # path holds 10 and 5 only; 4 had no right subtree
        path = it._paths[TraversalOrder.INCREASING]
        self.assertEqual([edge.node.value for edge in path], [10, 5])
        self.assertIsNone(it._paths[TraversalOrder.DECREASING])

    def test_stack_never_holds_whole_tree(self):
        it = iter(self.tree)
        longest = 0
        for _ in it:
            longest = max(longest, len(it._paths[TraversalOrder.INCREASING]))
        self.assertLessEqual(longest, self.tree.height())

    def test_exhaustion_is_idempotent(self):
        it = iter(self.tree)
        self.assertEqual(list(it), ASCENDING)
        self.assertTrue(it.exhausted)
        for _ in range(3):
            with self.assertRaises(StopIteration):
                next(it)
            with self.assertRaises(StopIteration):
                it.next_back()
        self.assertEqual(it.next_back("done"), "done")

    def test_independent_iterators(self):
        a, b = iter(self.tree), iter(self.tree)
        self.assertEqual(next(a), 4)
        self.assertEqual(next(a), 5)
        self.assertEqual(next(b), 4)

    def test_reversed_adapter(self):
        rev = reversed(self.tree)
        self.assertIsInstance(rev, ReversedTreeIterator)
        self.assertIs(iter(rev), rev)
        self.assertEqual(next(rev), 16)
        # the adapter's own back end is the ascending end
        self.assertEqual(rev.next_back(), 4)
        self.assertIsInstance(reversed(rev), TreeIterator)

    def test_reversed_adapter_reports_exhaustion(self):
        rev = reversed(self.tree)
        values = []
        while not rev.exhausted:
            try:
                values.append(next(rev))
            except StopIteration:
                break
        self.assertEqual(values, ASCENDING[::-1])
        self.assertTrue(rev.exhausted)
        self.assertTrue(reversed(rev).exhausted)

    def test_zip_forward_and_backward(self):
        pairs = list(zip(iter(self.tree), reversed(self.tree)))
        self.assertEqual(pairs, list(zip(ASCENDING, ASCENDING[::-1])))


class TestEmptyTree(BaseTreeTestCase):

    def test_empty_forward(self):
        self.assertEqual(list(self.tree), [])

    def test_empty_backward(self):
        self.assertEqual(list(reversed(self.tree)), [])

    def test_empty_next_back(self):
        it = iter(self.tree)
        with self.assertRaises(StopIteration):
            it.next_back()
        self.assertTrue(it.exhausted)


class TestBothEnds(BaseTreeTestCase):
    """Driving one iterator from both ends stops once the cursors cross."""

    def setUp(self):
        super().setUp()
        self.tree = reference_tree()

    def test_alternating_yields_each_value_once(self):
        it = iter(self.tree)
        front, back = [], []
        while True:
            try:
                front.append(next(it))
                back.append(it.next_back())
            except StopIteration:
                break
        self.assertEqual(front, [4, 5, 6, 7, 10])
        self.assertEqual(back, [16, 15, 14, 12, 11])
        self.assertTrue(it.exhausted)

    def test_odd_sized_tree_meets_in_middle(self):
        self.tree = BinaryTree([2, 1, 3])
        it = iter(self.tree)
        self.assertEqual(next(it), 1)
        self.assertEqual(it.next_back(), 3)
        self.assertEqual(next(it), 2)
        with self.assertRaises(StopIteration):
            it.next_back()
        with self.assertRaises(StopIteration):
            next(it)

    def test_back_first_then_front(self):
        it = iter(self.tree)
        self.assertEqual([it.next_back() for _ in range(3)], [16, 15, 14])
        self.assertEqual(list(it), [4, 5, 6, 7, 10, 11, 12])

    def test_single_value(self):
        self.tree = BinaryTree([1])
        it = iter(self.tree)
        self.assertEqual(it.next_back(), 1)
        self.assertEqual(list(it), [])

    def test_random_interleavings(self):
        rng = random.Random(99)
        for _ in range(50):
            values = rng.sample(range(500), rng.randint(0, 60))
            self.tree = BinaryTree(values)
            it = iter(self.tree)
            front, back = [], []
            while not it.exhausted:
                try:
                    if rng.random() < 0.5:
                        front.append(next(it))
                    else:
                        back.append(it.next_back())
                except StopIteration:
                    break
            self.assertEqual(front + back[::-1], sorted(values))


class TestMutationDuringIteration(BaseTreeTestCase):

    def setUp(self):
        super().setUp()
        self.tree = reference_tree()

    def test_insert_invalidates(self):
        it = iter(self.tree)
        next(it)
        self.tree.insert(100)
        with self.assertRaises(RuntimeError):
            next(it)

    def test_delete_invalidates(self):
        it = reversed(self.tree)
        next(it)
        self.tree.delete(4)
        with self.assertRaises(RuntimeError):
            next(it)

    def test_noop_mutations_do_not_invalidate(self):
        it = iter(self.tree)
        next(it)
        self.tree.insert(10)
        self.tree.delete(999)
        self.assertEqual(next(it), 5)

    def test_malformed_path_raises_invariant_error(self):
        it = iter(self.tree)
        next(it)
        it._paths[TraversalOrder.INCREASING][-1].node = None
        with self.assertRaises(InvariantError):
            next(it)
        self.tree = None


class TestLargeTrees(BaseTreeTestCase):

    def test_degenerate_tree_has_no_recursion_limit(self):
        self.tree = BinaryTree(range(3000, 0, -1))
        self.assertEqual(next(iter(self.tree)), 1)
        self.assertEqual(list(reversed(self.tree))[:3], [3000, 2999, 2998])

    def test_hand_built_shape(self):
        self.tree.root = make_edge(2, make_edge(1), make_edge(3))
        self.tree._size = 3
        self.assertEqual(list(self.tree), [1, 2, 3])


if __name__ == "__main__":
    unittest.main()
