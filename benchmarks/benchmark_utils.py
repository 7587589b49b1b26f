"""
Benchmarking utilities for the sorting routines and BinaryTree.

This module provides common utilities and base classes for ASV benchmarking
that work with ASV's built-in timing and stabilization mechanisms.

Reproducibility:
    All random data generation uses deterministic seeds by default.
    The default seed can be overridden via the BENCHMARK_SEED environment variable.

Logging:
    Benchmarks should be run with logging at INFO level or higher to avoid
    performance contamination from verbose debug output.
"""

import gc
import logging
import os
import random
from typing import List, Tuple

import numpy as np

# Default seed for deterministic benchmarking - can be overridden via environment variable
DEFAULT_BENCHMARK_SEED = int(os.environ.get('BENCHMARK_SEED', '42'))

DISTRIBUTIONS = ('uniform', 'sequential', 'reversed', 'equal', 'few_unique')

_logger = logging.getLogger(__name__)


class BenchmarkUtils:
    """Utility class for benchmarking operations.

    Provides methods for generating deterministic test data and performing
    common benchmark setup operations while ensuring reproducibility.
    """

    @staticmethod
    def check_logging_level():
        """
        Raise if DEBUG or lower (more verbose) logging is enabled for the
        library, as this contaminates timings with I/O overhead.
        """
        lib_logger = logging.getLogger("bst_algorithms")
        effective_level = lib_logger.getEffectiveLevel()
        if effective_level <= logging.DEBUG:
            raise ValueError(
                f"Logging level is set to {logging.getLevelName(effective_level)}. "
                "Benchmarks require logging to be at INFO level or higher to avoid "
                "performance contamination from verbose debug output."
            )

    @staticmethod
    def generate_deterministic_keys(size: int,
                                    seed: int = None,
                                    key_range: Tuple[int, int] = (1, 1000000),
                                    distribution: str = 'uniform') -> List[int]:
        """
        Generate deterministic keys for benchmarking.

        Args:
            size: Number of keys to generate
            seed: Random seed for reproducibility. If None, uses DEFAULT_BENCHMARK_SEED.
            key_range: Range of key values (min, max)
            distribution: One of DISTRIBUTIONS. 'uniform' draws distinct keys,
                'sequential' / 'reversed' are the adversarial orders for
                insertion into an unbalanced tree, 'equal' repeats one key and
                'few_unique' draws from ten keys.

        Returns:
            List of deterministic keys
        """
        if seed is None:
            seed = DEFAULT_BENCHMARK_SEED

        rng = np.random.default_rng(seed)
        min_key, max_key = key_range

        if distribution == 'uniform':
            if max_key - min_key + 1 < size:
                raise ValueError("Not enough unique keys available to generate desired size")
            return rng.choice(np.arange(min_key, max_key + 1), size=size, replace=False).tolist()
        elif distribution == 'sequential':
            return list(range(min_key, min_key + size))
        elif distribution == 'reversed':
            return list(range(min_key + size - 1, min_key - 1, -1))
        elif distribution == 'equal':
            return [min_key] * size
        elif distribution == 'few_unique':
            return rng.integers(min_key, min_key + 10, size=size).tolist()
        else:
            raise ValueError(f"Unknown distribution: {distribution}")

    @staticmethod
    def create_lookup_keys(insert_keys: List[int],
                           hit_ratio: float = 0.8,
                           seed: int = None,
                           num_lookups: int = 1000) -> List[int]:
        """
        Create keys for lookup operations with specified hit ratio.

        Misses are drawn from above the largest inserted key, so they are
        guaranteed absent.
        """
        if seed is None:
            seed = DEFAULT_BENCHMARK_SEED
        rng = random.Random(seed)

        num_hits = int(num_lookups * hit_ratio) if insert_keys else 0
        num_misses = num_lookups - num_hits

        hit_keys = rng.choices(insert_keys, k=num_hits) if num_hits else []
        ceiling = max(insert_keys) if insert_keys else 0
        miss_keys = [ceiling + rng.randint(1, 1000000) for _ in range(num_misses)]

        lookup_keys = hit_keys + miss_keys
        rng.shuffle(lookup_keys)
        return lookup_keys


class BaseBenchmark:
    """Base class for ASV benchmarks.

    Ensures that:
    - Garbage collection is disabled during timed sections
    - Logging level is appropriate for benchmarking
    """

    params = []
    param_names = []

    warmup_time = 0.1
    sample_time = 0.4

    def setup(self, *params):
        """Setup method called before each benchmark.

        Subclasses should:
        1. Call super().setup(*params) first
        2. Prepare test data
        3. Call gc.collect() then gc.disable()
        """
        BenchmarkUtils.check_logging_level()

    def teardown(self, *params):
        """Re-enables garbage collection after measurement completes."""
        if not gc.isenabled():
            gc.enable()
