"""Statistics for randomly built binary search trees."""

import argparse
import logging
import math
import os
import time
from datetime import datetime
from statistics import mean

import numpy as np

from bst_algorithms.binary_tree import BinaryTree
from bst_algorithms.invariants import assert_tree_invariants_raise
from bst_algorithms.logging_config import setup_logging
from bst_algorithms.tree_stats import tree_stats_

logger = logging.getLogger(__name__)


def create_tree(keys) -> BinaryTree:
    """Build a tree by inserting each key in order."""
    tree = BinaryTree()
    tree_insert = tree.insert
    for key in keys:
        tree_insert(key)
    return tree


def random_tree_of_size(n: int, rng: np.random.Generator) -> BinaryTree:
    """Insert a uniformly random permutation of ``n`` distinct keys."""
    space = 1 << 24
    if space <= n:
        raise ValueError(f"Key-space too small! Required: {n}, Available: {space}")
    keys = rng.choice(space, size=n, replace=False)
    return create_tree(int(k) for k in keys)


def repeated_experiment(size: int, repetitions: int, rng: np.random.Generator) -> None:
    """
    Repeatedly builds random trees with ``size`` keys, aggregates shape
    statistics and timings, and logs them next to the perfect height.
    """
    t_all_0 = time.perf_counter()

    results = []
    times_build = []
    times_stats = []

    for _ in range(repetitions):
        t0 = time.perf_counter()
        tree = random_tree_of_size(size, rng)
        times_build.append(time.perf_counter() - t0)

        t0 = time.perf_counter()
        stats = tree_stats_(tree)
        times_stats.append(time.perf_counter() - t0)

        assert_tree_invariants_raise(tree, stats)
        results.append(stats)

    # Perfect height: ceil( log2(size + 1) )
    perfect_height = math.ceil(math.log2(size + 1)) if size > 0 else 0

    avg_height = mean(s.height for s in results)
    avg_leaf_count = mean(s.leaf_count for s in results)
    avg_height_amp = mean(s.height / perfect_height for s in results) if perfect_height else 0
    avg_build_time = mean(times_build)
    avg_stats_time = mean(times_stats)

    var_height = mean((s.height - avg_height) ** 2 for s in results)
    var_leaf_count = mean((s.leaf_count - avg_leaf_count) ** 2 for s in results)
    var_height_amp = (
        mean((s.height / perfect_height - avg_height_amp) ** 2 for s in results) if perfect_height else 0
    )
    var_build_time = mean((t - avg_build_time) ** 2 for t in times_build)
    var_stats_time = mean((t - avg_stats_time) ** 2 for t in times_stats)

    rows = [
        ("Node count", size, None),
        ("Leaf count", avg_leaf_count, var_leaf_count),
        ("Height", avg_height, var_height),
        ("Perfect height", perfect_height, None),
        ("Height amplification", avg_height_amp, var_height_amp),
    ]

    header = f"{'Metric':<22} {'Avg':>15} {'(Var)':>15}"
    sep_line = "-" * len(header)

    logger.info(f"n = {size}; {repetitions} repetitions")
    logger.info(header)
    logger.info(sep_line)
    for name, avg, var in rows:
        if var is None:
            logger.info(f"{name:<22} {avg:>15}")
        else:
            var_str = f"({var:.2f})"
            logger.info(f"{name:<22} {avg:15.2f} {var_str:>15}")

    header = f"{'Metric':<22}{'Avg(s)':>13}{'Var(s)':>13}{'Total(s)':>13}"
    sep = "-" * len(header)
    logger.info("")
    logger.info("Performance summary:")
    logger.info(header)
    logger.info(sep)
    for name, avg, var, total in (
        ("Build time (s)", avg_build_time, var_build_time, sum(times_build)),
        ("Stats time (s)", avg_stats_time, var_stats_time, sum(times_stats)),
    ):
        logger.info(f"{name:<22}{avg:13.6f}{var:13.6f}{total:13.6f}")
    logger.info(sep)
    logger.info("Execution time: %.3f seconds", time.perf_counter() - t_all_0)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run statistics experiments for random binary search trees.")
    parser.add_argument(
        "--sizes", type=int, nargs="+", default=[10, 100, 1000, 10_000], help="List of tree sizes to test."
    )
    parser.add_argument("--repetitions", type=int, default=20, help="Number of repetitions for each experiment.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Set the logging level (default: INFO)",
    )
    args = parser.parse_args()

    rng = np.random.default_rng(args.seed)

    log_dir = os.path.join(os.getcwd(), "stats/logs/binary_tree_logs")
    os.makedirs(log_dir, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = os.path.join(log_dir, f"run_{ts}.log")

    log_level = getattr(logging, args.log_level)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(log_path, mode="w"),
            logging.StreamHandler(),
        ],
        force=True,
    )
    # Also apply the chosen level to the library logger
    setup_logging(level=log_level)

    for n in args.sizes:
        repeated_experiment(n, args.repetitions, rng)
