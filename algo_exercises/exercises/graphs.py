"""Defines the single-source shortest path exercise."""

import heapq
import math

from collections.abc import Sequence

# Adjacency list: graph[u] holds (v, weight) pairs for every edge u -> v.
Graph = Sequence[Sequence[tuple[int, float]]]


def dijkstra(graph: Graph, start: int) -> list[float]:
    """Computes shortest path distances from start to every node.

    Nodes are popped from a min-heap keyed by tentative distance. A popped
    entry whose distance is larger than the recorded one is stale and is
    skipped.

    Args:
        graph: Adjacency list with non-negative edge weights. Nodes are the
            indices 0..len(graph)-1.
        start: The source node.

    Returns:
        A list where position v holds the distance from start to v, or
        math.inf if v is unreachable.

    Raises:
        ValueError: If start is not a node of the graph, or if an edge has a
            negative weight or points outside the graph.
    """
    num_nodes = len(graph)
    if not 0 <= start < num_nodes:
        raise ValueError(
            f"Start node {start} is not in a graph of {num_nodes} nodes.")
    for u, edges in enumerate(graph):
        for v, weight in edges:
            if weight < 0:
                raise ValueError(
                    f"Edge {u} -> {v} has negative weight {weight}.")
            if not 0 <= v < num_nodes:
                raise ValueError(
                    f"Edge {u} -> {v} points outside the graph.")

    distances: list[float] = [math.inf] * num_nodes
    distances[start] = 0
    heap: list[tuple[float, int]] = [(0, start)]

    while heap:
        cost, u = heapq.heappop(heap)
        if cost > distances[u]:
            continue

        for v, weight in graph[u]:
            candidate = distances[u] + weight
            if candidate < distances[v]:
                distances[v] = candidate
                heapq.heappush(heap, (candidate, v))

    return distances
