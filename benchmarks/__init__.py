"""
Benchmarks package for the sorting routines and BinaryTree.

This package contains ASV benchmarks for:
- the four in-place sorts on random and adversarial inputs
- BinaryTree construction, lookup, deletion and traversal

plus a command-line timing sweep (``run_sort_timings``).
"""

from .benchmark_utils import BaseBenchmark, BenchmarkUtils

__all__ = ["BaseBenchmark", "BenchmarkUtils"]
