"""Tests for the BFS shortest-path and bounded reachability traversals."""

import networkx as nx
import pytest

from small_world.bfs import reachable_within, shortest_path
from small_world.graph_store import build_graph


def test_path_graph_scenario(path_graph):
    start, end = path_graph.index_of(1), path_graph.index_of(4)
    assert shortest_path(path_graph, start, end) == 3
    assert reachable_within(path_graph, start, 6) == 4


def test_self_distance_is_zero(random_graph):
    for node in random_graph.node_indices():
        assert shortest_path(random_graph, node, node) == 0


def test_disconnected_pair_is_none(disconnected_graph):
    a = disconnected_graph.index_of(10)
    b = disconnected_graph.index_of(21)
    assert shortest_path(disconnected_graph, a, b) is None
    assert shortest_path(disconnected_graph, b, a) is None


def test_symmetry(random_graph):
    nodes = random_graph.node_indices()
    for a in nodes[:10]:
        for b in nodes:
            assert shortest_path(random_graph, a, b) == shortest_path(random_graph, b, a)


def test_matches_networkx(random_graph):
    for source in random_graph.node_indices()[:10]:
        expected = nx.single_source_shortest_path_length(random_graph.graph, source)
        for target in random_graph.node_indices():
            assert shortest_path(random_graph, source, target) == expected.get(target)


def test_parallel_edges_and_self_loops_do_not_change_distances():
    store = build_graph(["1 1", "1 2", "2 1", "2 3", "3 3", "3 4", "3 4"])
    assert shortest_path(store, store.index_of(1), store.index_of(4)) == 3
    assert reachable_within(store, store.index_of(1), 2) == 3


@pytest.mark.parametrize("max_depth, expected", [(0, 1), (1, 2), (2, 3), (3, 4), (6, 4)])
def test_reachable_within_path(path_graph, max_depth, expected):
    assert reachable_within(path_graph, path_graph.index_of(1), max_depth) == expected


def test_reachable_from_middle(path_graph):
    assert reachable_within(path_graph, path_graph.index_of(2), 1) == 3


def test_reachability_stays_in_component(disconnected_graph):
    assert reachable_within(disconnected_graph, disconnected_graph.index_of(11), 6) == 3
    assert reachable_within(disconnected_graph, disconnected_graph.index_of(20), 6) == 2


def test_reachability_monotone_and_at_least_one(random_graph):
    for node in random_graph.node_indices()[:10]:
        counts = [reachable_within(random_graph, node, depth) for depth in range(8)]
        assert counts[0] == 1
        assert counts == sorted(counts)


def test_reachability_matches_networkx(random_graph):
    for node in random_graph.node_indices()[:10]:
        for depth in (1, 2, 3):
            expected = nx.single_source_shortest_path_length(random_graph.graph, node, cutoff=depth)
            assert reachable_within(random_graph, node, depth) == len(expected)


def test_negative_depth_rejected(path_graph):
    with pytest.raises(ValueError):
        reachable_within(path_graph, 0, -1)


def test_store_not_mutated(random_graph):
    before = (random_graph.node_count(), random_graph.edge_count())
    shortest_path(random_graph, 0, random_graph.node_count() - 1)
    reachable_within(random_graph, 0, 6)
    assert (random_graph.node_count(), random_graph.edge_count()) == before
