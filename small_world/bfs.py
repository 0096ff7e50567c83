"""
BFS Engine: unweighted traversals over a GraphStore.

Both traversals are level-order BFS with a FIFO frontier and a visited list
sized to the node count. Every call allocates its own bookkeeping, so calls
are independent of each other and never modify the store.
"""

from __future__ import annotations

from collections import deque

from small_world.graph_store import GraphStore


def shortest_path(store: GraphStore, start: int, end: int) -> int | None:
    """
    Hop count of the shortest path between two nodes.

    The search stops the first time `end` is dequeued; since edges are
    unweighted and the frontier is level-ordered that distance is minimal.

    Args:
        store: Graph to search.
        start: Internal index of the source node.
        end: Internal index of the destination node.

    Returns:
        Number of edges on a shortest path, 0 when start == end, or None if
        end is not reachable from start.
    """
    visited = [False] * store.node_count()
    distances = {start: 0}
    queue = deque([start])
    visited[start] = True

    while queue:
        node = queue.popleft()
        distance = distances[node]
        if node == end:
            return distance

        for neighbor in store.neighbors(node):
            if not visited[neighbor]:
                visited[neighbor] = True
                distances[neighbor] = distance + 1
                queue.append(neighbor)

    return None


def reachable_within(store: GraphStore, start: int, max_depth: int) -> int:
    """
    Count the nodes whose hop distance from start is at most max_depth.

    Frontier entries carry their own depth, so no separate distance record
    is kept. The start node itself (depth 0) is always included, so the
    result is at least 1.

    Args:
        store: Graph to search.
        start: Internal index of the root node.
        max_depth: Largest hop distance that still counts as reachable.

    Returns:
        Number of nodes within max_depth hops of start.

    Raises:
        ValueError: If max_depth is negative.
    """
    if max_depth < 0:
        raise ValueError(f"max_depth must be non-negative, got {max_depth}")

    visited = [False] * store.node_count()
    queue = deque([(start, 0)])
    visited[start] = True
    count = 0

    while queue:
        node, depth = queue.popleft()
        count += 1
        # neighbors would sit at depth + 1, past the bound
        if depth == max_depth:
            continue

        for neighbor in store.neighbors(node):
            if not visited[neighbor]:
                visited[neighbor] = True
                queue.append((neighbor, depth + 1))

    return count
