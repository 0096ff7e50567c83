"""Small-world statistics for social networks loaded from edge-list files."""

from small_world.config import AnalysisConfig
from small_world.exceptions import EmptySampleError, ParseError, SmallWorldError
from small_world.graph_store import GraphStore, build_graph, load_graph
from small_world.bfs import reachable_within, shortest_path
from small_world.clustering import average_clustering, clustering_coefficients, local_clustering
from small_world.sampler import (
    AnalysisResult,
    PathLengthStats,
    analyze,
    reachability_percentage,
    sample_reachability,
    sample_shortest_paths,
    summarize_path_lengths,
    supports_small_world,
)

__version__ = "0.1.0"

__all__ = [
    "AnalysisConfig",
    "AnalysisResult",
    "EmptySampleError",
    "GraphStore",
    "ParseError",
    "PathLengthStats",
    "SmallWorldError",
    "analyze",
    "average_clustering",
    "build_graph",
    "clustering_coefficients",
    "load_graph",
    "local_clustering",
    "reachability_percentage",
    "reachable_within",
    "sample_reachability",
    "sample_shortest_paths",
    "shortest_path",
    "summarize_path_lengths",
    "supports_small_world",
]
