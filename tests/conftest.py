"""
Pytest fixtures for the small-world analysis tests.

Provides shared fixtures for:
- Small hand-made graphs (path, triangle, disconnected components)
- A random networkx graph used as an oracle for BFS and clustering
- Edge-list files written to tmp_path for the loader and the CLI
"""

import random

import matplotlib
import networkx as nx
import pytest

matplotlib.use("Agg")

from small_world.graph_store import build_graph  # noqa: E402


PATH_EDGES = ["1 2", "2 3", "3 4"]
# components of sizes 3 and 2
DISCONNECTED_EDGES = ["10 11", "11 12", "20 21"]
TRIANGLE_EDGES = ["1 2", "2 3", "3 1"]


@pytest.fixture
def path_graph():
    """4-node path 1-2-3-4."""
    return build_graph(PATH_EDGES)


@pytest.fixture
def disconnected_graph():
    return build_graph(DISCONNECTED_EDGES)


@pytest.fixture
def triangle_graph():
    return build_graph(TRIANGLE_EDGES)


@pytest.fixture
def random_edges():
    """Edge list of a connected-ish random graph with non-sequential node IDs."""
    graph = nx.gnm_random_graph(40, 90, seed=7)
    offset = 1000
    return [f"{u * 3 + offset} {v * 3 + offset}" for u, v in graph.edges()]


@pytest.fixture
def random_graph(random_edges):
    return build_graph(random_edges)


@pytest.fixture
def rng():
    return random.Random(12345)


@pytest.fixture
def write_edge_list(tmp_path):
    """Write lines to an edge-list file under tmp_path and return its path."""

    def _write(lines, name="edges.txt"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
