"""Tests for local and average clustering coefficients."""

import networkx as nx
import pytest

from small_world.clustering import average_clustering, clustering_coefficients, local_clustering
from small_world.graph_store import build_graph


def test_triangle_is_fully_clustered(triangle_graph):
    assert clustering_coefficients(triangle_graph) == {0: 1.0, 1: 1.0, 2: 1.0}
    assert average_clustering(triangle_graph) == 1.0


def test_path_has_no_clustering(path_graph):
    assert all(c == 0.0 for c in clustering_coefficients(path_graph).values())
    assert average_clustering(path_graph) == 0.0


def test_fewer_than_two_neighbors_is_zero():
    store = build_graph(["1 2"])
    assert local_clustering(store, 0) == 0.0
    assert local_clustering(store, 1) == 0.0


def test_low_degree_nodes_stay_in_average():
    # triangle 1-2-3 plus a pendant node 4 on 3
    store = build_graph(["1 2", "2 3", "3 1", "3 4"])
    coefficients = clustering_coefficients(store)
    assert coefficients[store.index_of(1)] == 1.0
    assert coefficients[store.index_of(3)] == pytest.approx(1 / 3)
    assert coefficients[store.index_of(4)] == 0.0
    assert average_clustering(store) == pytest.approx((1 + 1 + 1 / 3 + 0) / 4)


def test_parallel_edges_are_deduplicated():
    store = build_graph(["1 2", "1 2", "2 3", "3 2", "1 3", "1 3", "3 1"])
    assert clustering_coefficients(store) == {0: 1.0, 1: 1.0, 2: 1.0}


def test_parallel_edges_do_not_inflate_degree():
    # node 1 has two distinct neighbors despite four edges
    store = build_graph(["1 2", "1 2", "1 3", "1 3"])
    assert local_clustering(store, store.index_of(1)) == 0.0


def test_self_loops_ignored():
    store = build_graph(["1 1", "1 2", "1 3", "2 3", "2 2"])
    assert local_clustering(store, store.index_of(1)) == 1.0
    assert local_clustering(store, store.index_of(2)) == 1.0


def test_coefficients_in_unit_interval(random_graph):
    for value in clustering_coefficients(random_graph).values():
        assert 0.0 <= value <= 1.0


def test_matches_networkx(random_graph):
    expected = nx.clustering(nx.Graph(random_graph.graph))
    ours = clustering_coefficients(random_graph)
    for node, value in expected.items():
        assert ours[node] == pytest.approx(value)
    assert average_clustering(random_graph) == pytest.approx(nx.average_clustering(nx.Graph(random_graph.graph)))


def test_local_matches_batch(random_graph):
    batch = clustering_coefficients(random_graph)
    for node in random_graph.node_indices():
        assert local_clustering(random_graph, node) == batch[node]


def test_empty_graph():
    assert average_clustering(build_graph([])) == 0.0
