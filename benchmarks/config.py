"""Benchmark configuration and metadata management."""

import os
import subprocess
from dataclasses import dataclass
from typing import Optional


@dataclass
class BenchmarkConfig:
    """Configuration for benchmark runs."""

    # Reproducibility
    seed: int = 42

    # Benchmark parameters
    sizes: list[int] = None
    sorts: list[str] = None
    distribution: str = "uniform"
    repetitions: int = 5

    # Logging
    log_level: str = "INFO"

    def __post_init__(self):
        if self.sizes is None:
            self.sizes = [100, 500, 1000, 2000]
        if self.sorts is None:
            self.sorts = ["selection_sort", "insertion_sort", "merge_sort", "heap_sort"]

    @classmethod
    def from_env(cls) -> "BenchmarkConfig":
        """Create config from environment variables."""
        return cls(
            seed=int(os.environ.get("BENCHMARK_SEED", "42")),
            distribution=os.environ.get("BENCHMARK_DISTRIBUTION", "uniform"),
            log_level=os.environ.get("BENCHMARK_LOG_LEVEL", "INFO"),
        )


def get_git_commit_hash() -> Optional[str]:
    """Get the current git commit hash."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            capture_output=True,
            text=True,
            check=True,
            cwd=os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        )
        return result.stdout.strip()
    except (subprocess.CalledProcessError, FileNotFoundError):
        return None


@dataclass
class BenchmarkMetadata:
    """Metadata about a benchmark run."""

    commit_hash: Optional[str]
    config: BenchmarkConfig

    def __str__(self) -> str:
        lines = [
            f"Commit: {self.commit_hash or 'unknown'}",
            f"Seed: {self.config.seed}",
            f"Sizes: {', '.join(str(s) for s in self.config.sizes)}",
            f"Sorts: {', '.join(self.config.sorts)}",
            f"Distribution: {self.config.distribution}",
            f"Repetitions: {self.config.repetitions}",
        ]
        return "\n".join(lines)
