"""
Graph Store: the undirected social graph built once from an edge list.

External node IDs (arbitrary non-negative integers from the input file) are
mapped to dense internal indices in first-seen order. The underlying
networkx MultiGraph is labelled by those internal indices, so repeated pairs
in the input become parallel edges instead of being merged.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

import networkx as nx

from small_world.exceptions import ParseError


class GraphStore:
    """
    Read-only view over a graph built by build_graph().

    Attributes:
        graph: MultiGraph whose nodes are internal indices 0..n-1.
    """

    def __init__(self, graph: nx.MultiGraph, node_ids: dict[int, int]):
        self.graph = graph
        self._index_of = dict(node_ids)
        self._external_ids = [0] * len(node_ids)
        for external_id, index in node_ids.items():
            self._external_ids[index] = external_id

    def node_count(self) -> int:
        return self.graph.number_of_nodes()

    def edge_count(self) -> int:
        """Number of edges, parallel edges included."""
        return self.graph.number_of_edges()

    def node_indices(self) -> list[int]:
        return list(range(len(self._external_ids)))

    def neighbors(self, index: int) -> Iterator[int]:
        """Yield every node adjacent to index (each neighbor once, in no particular order)."""
        return iter(self.graph[index])

    def index_of(self, external_id: int) -> int:
        """Internal index of an external node ID. Raises KeyError if unknown."""
        return self._index_of[external_id]

    def external_id(self, index: int) -> int:
        return self._external_ids[index]

    def __len__(self) -> int:
        return self.node_count()

    def __repr__(self) -> str:
        return f"GraphStore(nodes={self.node_count()}, edges={self.edge_count()})"


def _parse_node_id(token: str, line_number: int, line: str) -> int:
    if not (token.isascii() and token.isdigit()):
        raise ParseError(line_number, line, f"{token!r} is not a non-negative integer")
    return int(token)


def parse_edge(line: str, line_number: int) -> tuple[int, int] | None:
    """
    Parse one edge-list line into a pair of external node IDs.

    Args:
        line: Raw line from the input; tokens beyond the second are ignored.
        line_number: 1-based position of the line, used in error messages.

    Returns:
        (source_id, target_id), or None for a blank line.

    Raises:
        ParseError: If the line has fewer than two tokens or either of the
            first two tokens is not a non-negative integer.
    """
    line = line.rstrip("\r\n")
    tokens = line.split()
    if not tokens:
        return None
    if len(tokens) < 2:
        raise ParseError(line_number, line, "expected two node IDs")
    return _parse_node_id(tokens[0], line_number, line), _parse_node_id(tokens[1], line_number, line)


def build_graph(lines: Iterable[str]) -> GraphStore:
    """
    Build the Graph Store from edge-list lines.

    Each line contributes one unit-weight undirected edge. The first time a
    node ID is seen it gets the next sequential internal index, starting at 0.
    There is no edge-existence check, so duplicate pairs add parallel edges.

    Args:
        lines: Iterable of "<int> <int>" strings, e.g. an open text file.

    Returns:
        The populated GraphStore.

    Raises:
        ParseError: On the first malformed line; no partial graph is returned.
    """
    graph = nx.MultiGraph()
    node_ids: dict[int, int] = {}

    for line_number, line in enumerate(lines, start=1):
        edge = parse_edge(line, line_number)
        if edge is None:
            continue

        endpoints = []
        for external_id in edge:
            index = node_ids.get(external_id)
            if index is None:
                index = len(node_ids)
                node_ids[external_id] = index
                graph.add_node(index)
            endpoints.append(index)

        graph.add_edge(endpoints[0], endpoints[1], weight=1)

    return GraphStore(graph, node_ids)


def load_graph(path: str | Path, verbose: bool = False) -> GraphStore:
    """
    Read an edge-list file and build the Graph Store from it.

    Raises:
        FileNotFoundError, PermissionError, OSError: If the file can't be read.
        ParseError: If any line is malformed.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as handle:
        store = build_graph(handle)

    if verbose:
        print(f"[graph_store] Loaded {path}")
        print(f"[graph_store] Nodes: {store.node_count()} | Edges: {store.edge_count()}")

    return store
