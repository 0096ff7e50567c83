"""Clustering Analyzer: local and network-average clustering coefficients."""

from __future__ import annotations

from small_world.graph_store import GraphStore


def _neighbor_set(store: GraphStore, node: int) -> set[int]:
    # parallel edges collapse to one neighbor, self-loops are not neighbors
    return set(store.neighbors(node)) - {node}


def _coefficient(neighbors: set[int], neighbors_of) -> float:
    k = len(neighbors)
    if k < 2:
        return 0.0

    # every linked pair is seen once from each end
    links = sum(len(neighbors & neighbors_of(neighbor)) for neighbor in neighbors) // 2
    return links / (k * (k - 1) / 2)


def local_clustering(store: GraphStore, node: int) -> float:
    """
    Fraction of a node's neighbor pairs that are directly linked.

    Neighbors are deduplicated before counting, so parallel edges in the
    input neither inflate k nor count a linked pair twice.

    Args:
        store: Graph to analyze.
        node: Internal index of the node.

    Returns:
        links / (k * (k - 1) / 2), or 0.0 when the node has fewer than two
        distinct neighbors.
    """
    return _coefficient(_neighbor_set(store, node), lambda n: _neighbor_set(store, n))


def clustering_coefficients(store: GraphStore) -> dict[int, float]:
    """Local clustering coefficient of every node, keyed by internal index."""
    neighbor_sets = {node: _neighbor_set(store, node) for node in store.node_indices()}
    return {
        node: _coefficient(neighbors, neighbor_sets.__getitem__)
        for node, neighbors in neighbor_sets.items()
    }


def average_clustering(store: GraphStore) -> float:
    """
    Arithmetic mean of the local clustering coefficients over all nodes.

    Nodes with fewer than two neighbors stay in the denominator with a
    coefficient of 0. An empty graph averages to 0.0.
    """
    coefficients = clustering_coefficients(store)
    if not coefficients:
        return 0.0
    return sum(coefficients.values()) / len(coefficients)
