"""
Sampler/Aggregator: random BFS sampling reduced to scalar statistics.

Shortest-path sampling draws node pairs uniformly with replacement and keeps
only connected pairs; pairs that land in different components are dropped,
which biases the estimate toward connected pairs. Reachability sampling draws
single roots and keeps every count.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from small_world.bfs import reachable_within, shortest_path
from small_world.clustering import average_clustering
from small_world.config import SMALL_WORLD_THRESHOLD, AnalysisConfig
from small_world.exceptions import EmptySampleError
from small_world.graph_store import GraphStore


@dataclass(frozen=True)
class PathLengthStats:
    """Summary of the sampled shortest-path lengths."""

    mean: float
    median: int
    std_dev: float
    count: int


@dataclass(frozen=True)
class AnalysisResult:
    """
    Everything one run of analyze() measured.

    Attributes:
        path_stats: Mean/median/std-dev of the connected sampled pairs.
        path_lengths: The sampled lengths themselves, in draw order.
        dropped_pairs: Sampled pairs skipped because they were disconnected.
        reach_counts: Nodes reachable within max_depth from each sampled root.
        reach_percentage: Average reach as a percentage of the node count.
        average_clustering: Network average of the local clustering coefficient.
        node_count: Number of nodes in the analyzed graph.
        max_depth: Hop bound used for the reachability pass.
        small_world_threshold: Average separation at or below which the
            network counts as a small world.
    """

    path_stats: PathLengthStats
    path_lengths: tuple[int, ...]
    dropped_pairs: int
    reach_counts: tuple[int, ...]
    reach_percentage: float
    average_clustering: float
    node_count: int
    max_depth: int
    small_world_threshold: float = SMALL_WORLD_THRESHOLD

    @property
    def supports_small_world(self) -> bool:
        return supports_small_world(self.path_stats.mean, self.small_world_threshold)


def _population(store: GraphStore) -> list[int]:
    nodes = store.node_indices()
    if not nodes:
        raise EmptySampleError("graph has no nodes to sample from")
    return nodes


def sample_shortest_paths(store: GraphStore, sample_count: int, rng: random.Random) -> list[int]:
    """
    Shortest-path lengths between random node pairs.

    Args:
        store: Graph to sample.
        sample_count: Number of (start, end) pairs to draw, with replacement.
        rng: Random source; the start of each pair is drawn before its end.

    Returns:
        Lengths of the pairs that turned out to be connected. The list is
        shorter than sample_count whenever a pair was disconnected.

    Raises:
        EmptySampleError: If the graph has no nodes.
    """
    nodes = _population(store)
    lengths = []
    for _ in range(sample_count):
        start = rng.choice(nodes)
        end = rng.choice(nodes)
        length = shortest_path(store, start, end)
        if length is not None:
            lengths.append(length)
    return lengths


def sample_reachability(
    store: GraphStore, sample_count: int, max_depth: int, rng: random.Random
) -> list[int]:
    """Reach counts within max_depth hops from sample_count random roots."""
    nodes = _population(store)
    return [reachable_within(store, rng.choice(nodes), max_depth) for _ in range(sample_count)]


def summarize_path_lengths(lengths: list[int]) -> PathLengthStats:
    """
    Reduce sampled path lengths to mean, median and standard deviation.

    The median of an even-sized sample is the two middle values averaged
    with integer (truncating) division, so it stays a path length. The
    standard deviation is the population one (divides by N).

    Args:
        lengths: Sampled shortest-path lengths.

    Returns:
        PathLengthStats for the sample.

    Raises:
        EmptySampleError: If lengths is empty, e.g. every sampled pair was
            disconnected.
    """
    if not lengths:
        raise EmptySampleError("no connected node pairs were sampled; path statistics are undefined")

    n = len(lengths)
    mean = sum(lengths) / n

    ordered = sorted(lengths)
    middle = n // 2
    if n % 2 == 0:
        median = (ordered[middle - 1] + ordered[middle]) // 2
    else:
        median = ordered[middle]

    variance = sum((value - mean) ** 2 for value in ordered) / n
    return PathLengthStats(mean=mean, median=median, std_dev=math.sqrt(variance), count=n)


def reachability_percentage(reach_counts: list[int], node_count: int) -> float:
    """Average reach count as a percentage of all nodes in the graph."""
    if not reach_counts or node_count <= 0:
        raise EmptySampleError("no reachability samples to average")
    average_reach = sum(reach_counts) / len(reach_counts)
    return average_reach / node_count * 100


def supports_small_world(mean: float, threshold: float = SMALL_WORLD_THRESHOLD) -> bool:
    return mean <= threshold


def analyze(store: GraphStore, config: AnalysisConfig, verbose: bool = False) -> AnalysisResult:
    """
    Run both sampling passes and the clustering analysis over one graph.

    A single random source seeded from config.seed drives the shortest-path
    pass and then the reachability pass, so a fixed seed reproduces the
    whole result.

    Args:
        store: Graph to analyze.
        config: Sample count, depth bound, seed and small-world threshold.
        verbose: Print sampling summaries to the console.

    Returns:
        Immutable AnalysisResult.

    Raises:
        EmptySampleError: If the graph is empty or no sampled pair was
            connected.
    """
    rng = random.Random(config.seed)

    lengths = sample_shortest_paths(store, config.sample_count, rng)
    dropped = config.sample_count - len(lengths)
    if verbose:
        print(f"[sampler] Shortest paths: {len(lengths)} connected pair(s), "
              f"{dropped} disconnected pair(s) dropped")
    path_stats = summarize_path_lengths(lengths)

    reach_counts = sample_reachability(store, config.sample_count, config.max_depth, rng)
    if verbose:
        print(f"[sampler] Reachability: {len(reach_counts)} root(s) within {config.max_depth} step(s)")

    return AnalysisResult(
        path_stats=path_stats,
        path_lengths=tuple(lengths),
        dropped_pairs=dropped,
        reach_counts=tuple(reach_counts),
        reach_percentage=reachability_percentage(reach_counts, store.node_count()),
        average_clustering=average_clustering(store),
        node_count=store.node_count(),
        max_depth=config.max_depth,
        small_world_threshold=config.small_world_threshold,
    )
