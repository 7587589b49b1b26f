#!/usr/bin/env python3
"""
Time every sorting routine over a sweep of input sizes.

For each size, a shuffled permutation of ``0..n`` is sorted by every
routine (each on its own copy) and wall-clock milliseconds are recorded.
Results are logged as a table of mean and variance per routine and size.
"""

import argparse
import logging
import time
from typing import Callable, Dict, List, MutableSequence, Tuple

import numpy as np
from tqdm import tqdm

from bst_algorithms.logging_config import setup_logging
from bst_algorithms.sorting import SORTS
from benchmarks.config import BenchmarkConfig, BenchmarkMetadata, get_git_commit_hash

logger = logging.getLogger(__name__)


def library_log_level(name: str) -> int:
    """Level for the bst_algorithms loggers; per-call debug_log output is never wanted in timed runs."""
    return max(getattr(logging, name), logging.INFO)


def time_sort(fun: Callable[[MutableSequence[int]], None], numbers: List[int]) -> float:
    """Sort a copy of *numbers* and return the elapsed time in milliseconds."""
    work = list(numbers)
    start = time.perf_counter_ns()
    fun(work)
    elapsed = (time.perf_counter_ns() - start) / 1000.0 / 1000.0
    if any(b < a for a, b in zip(work, work[1:])):
        raise AssertionError(f"{fun.__name__} produced unsorted output")
    return elapsed


def generate_samples(
    fun: Callable[[MutableSequence[int]], None],
    sizes: List[int],
    repetitions: int,
    rng: np.random.Generator,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Returns (sizes, times) arrays of shape (len(sizes), repetitions); each
    entry times one sort of a freshly shuffled permutation.
    """
    sort_sizes = np.zeros((len(sizes), repetitions))
    sort_times = np.zeros((len(sizes), repetitions))

    for i, size in enumerate(tqdm(sizes, desc=fun.__name__, leave=False)):
        for rep in range(repetitions):
            numbers = rng.permutation(size).tolist()
            sort_sizes[i, rep] = size
            sort_times[i, rep] = time_sort(fun, numbers)

    return sort_sizes, sort_times


def run(config: BenchmarkConfig) -> Dict[str, np.ndarray]:
    rng = np.random.default_rng(config.seed)
    results: Dict[str, np.ndarray] = {}

    for name in tqdm(config.sorts, desc="Sorts"):
        _, times = generate_samples(SORTS[name], config.sizes, config.repetitions, rng)
        results[name] = times

    header = f"{'Sort':<16}{'n':>10}{'Avg(ms)':>14}{'Var(ms²)':>14}"
    sep = "-" * len(header)
    logger.info(header)
    logger.info(sep)
    for name, times in results.items():
        for size, row in zip(config.sizes, times):
            logger.info(f"{name:<16}{size:>10}{row.mean():14.3f}{row.var():14.3f}")
    logger.info(sep)

    return results


def main():
    config = BenchmarkConfig.from_env()

    parser = argparse.ArgumentParser(description="Time the in-place sorting routines.")
    parser.add_argument("--sizes", type=int, nargs="+", default=config.sizes, help="Input sizes to sort.")
    parser.add_argument(
        "--sorts", nargs="+", choices=list(SORTS), default=config.sorts, help="Routines to time."
    )
    parser.add_argument("--repetitions", type=int, default=config.repetitions, help="Samples per size.")
    parser.add_argument("--seed", type=int, default=config.seed, help="Random seed for reproducibility.")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=config.log_level,
        help="Set the logging level (default: INFO; library loggers are capped at INFO)",
    )
    args = parser.parse_args()

    config.sizes = args.sizes
    config.sorts = args.sorts
    config.repetitions = args.repetitions
    config.seed = args.seed
    config.log_level = args.log_level

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(message)s",
        force=True,
    )
    setup_logging(level=library_log_level(args.log_level))

    logger.info("\n%s", BenchmarkMetadata(get_git_commit_hash(), config))
    run(config)


if __name__ == "__main__":
    main()
