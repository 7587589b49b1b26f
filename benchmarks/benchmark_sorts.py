"""
ASV benchmarks for the in-place sorting routines.

Each routine is timed on a fresh copy of deterministic input, so every
sample sorts the same unsorted data.
"""

import gc

from bst_algorithms.sorting import SORTS
from benchmarks.benchmark_utils import DISTRIBUTIONS, BaseBenchmark, BenchmarkUtils


class SortBenchmarks(BaseBenchmark):
    """Benchmarks for the four comparison sorts."""

    params = [
        list(SORTS),
        [100, 1000],
        ['uniform', 'sequential', 'reversed', 'equal'],
    ]
    param_names = ['sort', 'size', 'distribution']

    min_run_count = 5

    def setup(self, sort, size, distribution):
        super().setup(sort, size, distribution)
        self.sort = SORTS[sort]
        self.keys = BenchmarkUtils.generate_deterministic_keys(
            size=size,
            seed=42 + size + DISTRIBUTIONS.index(distribution),
            distribution=distribution,
        )
        gc.collect()
        gc.disable()

    def time_sort(self, sort, size, distribution):
        """Benchmark sorting a fresh copy of the input."""
        self.sort(list(self.keys))


class MergeSortScalingBenchmarks(BaseBenchmark):
    """The O(n log n) sorts on inputs too large for the quadratic ones."""

    params = [
        ['merge_sort', 'heap_sort'],
        [10_000, 100_000],
    ]
    param_names = ['sort', 'size']

    def setup(self, sort, size):
        super().setup(sort, size)
        self.sort = SORTS[sort]
        self.keys = BenchmarkUtils.generate_deterministic_keys(size=size)
        gc.collect()
        gc.disable()

    def time_sort(self, sort, size):
        self.sort(list(self.keys))
