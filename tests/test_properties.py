"""Property-based tests for sorts and BinaryTree"""

import unittest

from hypothesis import given, settings, strategies as st

from bst_algorithms.binary_tree import BinaryTree
from bst_algorithms.invariants import assert_tree_invariants_raise
from bst_algorithms.sorting import SORTS
from bst_algorithms.tree_stats import tree_stats_

# (is_insert, value)
operations = st.lists(st.tuples(st.booleans(), st.integers(-50, 50)), max_size=120)


class TestSortProperties(unittest.TestCase):

    @given(st.lists(st.integers()), st.sampled_from(sorted(SORTS)))
    def test_sorted_permutation(self, xs, name):
        items = list(xs)
        SORTS[name](items)
        self.assertEqual(items, sorted(xs))

    @given(st.lists(st.text(max_size=4), max_size=40), st.sampled_from(sorted(SORTS)))
    def test_sorted_permutation_of_strings(self, xs, name):
        items = list(xs)
        SORTS[name](items)
        self.assertEqual(items, sorted(xs))


class TestTreeProperties(unittest.TestCase):

    @given(st.lists(st.integers()))
    def test_in_order_is_sorted_set(self, xs):
        tree = BinaryTree(xs)
        self.assertEqual(list(tree), sorted(set(xs)))
        self.assertEqual(list(reversed(tree)), sorted(set(xs), reverse=True))

    @given(st.lists(st.integers(-20, 20)), st.integers(-20, 20))
    def test_duplicate_insert_is_idempotent(self, xs, x):
        tree = BinaryTree(xs)
        tree.insert(x)
        before = list(tree)
        tree.insert(x)
        self.assertEqual(list(tree), before)

    @settings(max_examples=200)
    @given(operations)
    def test_operations_match_set_model(self, ops):
        tree = BinaryTree()
        model = set()
        for is_insert, value in ops:
            if is_insert:
                tree.insert(value)
                model.add(value)
            else:
                tree.delete(value)
                model.discard(value)
        assert_tree_invariants_raise(tree, tree_stats_(tree))
        self.assertEqual(list(tree), sorted(model))
        self.assertEqual(list(reversed(tree)), sorted(model, reverse=True))
        for value in range(-50, 51):
            node = tree.find(value)
            if value in model:
                self.assertIsNotNone(node)
                self.assertEqual(node.value, value)
            else:
                self.assertIsNone(node)

    @given(st.lists(st.integers(), unique=True, min_size=1), st.data())
    def test_delete_removes_exactly_one_value(self, xs, data):
        tree = BinaryTree(xs)
        victim = data.draw(st.sampled_from(xs))
        tree.delete(victim)
        self.assertEqual(list(tree), sorted(x for x in xs if x != victim))

    @given(st.lists(st.integers()), st.lists(st.booleans()))
    def test_both_ends_yield_each_value_once(self, xs, directions):
        tree = BinaryTree(xs)
        it = iter(tree)
        front, back = [], []
        for forward in directions + [True] * (len(xs) + 1):
            try:
                if forward:
                    front.append(next(it))
                else:
                    back.append(it.next_back())
            except StopIteration:
                break
        self.assertEqual(front + back[::-1], sorted(set(xs)))


if __name__ == "__main__":
    unittest.main()
