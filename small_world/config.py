"""Run configuration for the small-world analysis."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_INPUT_PATH = Path("facebook_combined.txt")
DEFAULT_SAMPLE_COUNT = 1000
DEFAULT_MAX_DEPTH = 6
DEFAULT_SEED = 12345
SMALL_WORLD_THRESHOLD = 6.0


@dataclass(frozen=True)
class AnalysisConfig:
    """
    Parameters of one analysis run.

    Attributes:
        input_path: Edge-list file to load.
        sample_count: Number of random pairs (and random roots) drawn per pass.
        max_depth: Hop bound used for the reachability pass.
        seed: Seed for the shared random source; None leaves it unseeded.
        small_world_threshold: Largest average separation that still counts
            as a small world.
    """

    input_path: Path = DEFAULT_INPUT_PATH
    sample_count: int = DEFAULT_SAMPLE_COUNT
    max_depth: int = DEFAULT_MAX_DEPTH
    seed: int | None = DEFAULT_SEED
    small_world_threshold: float = SMALL_WORLD_THRESHOLD

    def __post_init__(self):
        if self.sample_count <= 0:
            raise ValueError(f"sample_count must be positive, got {self.sample_count}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
        # accept plain strings for the path
        object.__setattr__(self, "input_path", Path(self.input_path))
