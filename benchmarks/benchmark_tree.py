"""
ASV benchmarks for BinaryTree operations.

Covers batch construction, find() with a configurable hit ratio, deletion
and full traversal from both ends. The 'sequential' distribution builds a
degenerate tree, which is the worst case for an unbalanced search tree.
"""

import gc

from bst_algorithms.binary_tree import BinaryTree
from benchmarks.benchmark_utils import DISTRIBUTIONS, BaseBenchmark, BenchmarkUtils


class TreeBatchInsertBenchmarks(BaseBenchmark):
    """Benchmarks for tree construction via sequential inserts."""

    params = [
        [100, 1000, 5000],
        ['uniform', 'sequential'],
    ]
    param_names = ['size', 'distribution']

    min_run_count = 5

    def setup(self, size, distribution):
        super().setup(size, distribution)
        self.keys = BenchmarkUtils.generate_deterministic_keys(
            size=size,
            seed=42 + size + DISTRIBUTIONS.index(distribution),
            distribution=distribution,
        )
        gc.collect()
        gc.disable()

    def time_insert_batch_construction(self, size, distribution):
        tree = BinaryTree()
        for key in self.keys:
            tree.insert(key)


class TreeFindBenchmarks(BaseBenchmark):
    """Benchmarks for BinaryTree.find()."""

    params = [
        [100, 1000, 10000],
        [0.0, 1.0],
    ]
    param_names = ['size', 'hit_ratio']

    # Class-level cache of built trees
    _tree_cache = {}

    def setup(self, size, hit_ratio):
        super().setup(size, hit_ratio)
        if size not in self._tree_cache:
            keys = BenchmarkUtils.generate_deterministic_keys(size=size)
            self._tree_cache[size] = (BinaryTree(keys), keys)
        self.tree, keys = self._tree_cache[size]
        self.lookup_keys = BenchmarkUtils.create_lookup_keys(keys, hit_ratio=hit_ratio)
        gc.collect()
        gc.disable()

    def time_find(self, size, hit_ratio):
        find = self.tree.find
        for key in self.lookup_keys:
            find(key)


class TreeDeleteBenchmarks(BaseBenchmark):
    """Benchmarks for deleting every key of a freshly built tree."""

    params = [[100, 1000, 5000]]
    param_names = ['size']

    # a tree is consumed per sample
    number = 1
    repeat = 10

    def setup(self, size):
        super().setup(size)
        self.keys = BenchmarkUtils.generate_deterministic_keys(size=size)
        self.tree = BinaryTree(self.keys)
        gc.collect()
        gc.disable()

    def time_delete_all(self, size):
        delete = self.tree.delete
        for key in self.keys:
            delete(key)


class TreeTraversalBenchmarks(BaseBenchmark):
    """Benchmarks for in-order traversal in both directions."""

    params = [[1000, 10000]]
    param_names = ['size']

    def setup(self, size):
        super().setup(size)
        self.tree = BinaryTree(BenchmarkUtils.generate_deterministic_keys(size=size))
        gc.collect()
        gc.disable()

    def time_iterate_forward(self, size):
        for _ in self.tree:
            pass

    def time_iterate_backward(self, size):
        for _ in reversed(self.tree):
            pass

    def peakmem_tree(self, size):
        BinaryTree(range(size))
