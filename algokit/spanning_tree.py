"""Minimum spanning tree weight by Kruskal's and Prim's algorithms.

Graphs are undirected weighted adjacency lists: ``adjacency[u]`` holds
``(neighbour, weight)`` pairs and every edge appears in both directions.
"""

from __future__ import annotations

import heapq
from collections.abc import Sequence

from algokit.disjoint_set import DisjointSet

__all__ = ["kruskal", "prim"]

WeightedAdjacency = Sequence[Sequence[tuple[int, int]]]


def kruskal(adjacency: WeightedAdjacency) -> int:
    """Return the total weight of a minimum spanning forest."""
    edges = sorted(
        (weight, node, neighbour)
        for node, neighbours in enumerate(adjacency)
        for neighbour, weight in neighbours
    )
    components = DisjointSet(len(adjacency))
    total = 0
    for weight, u, v in edges:
        if not components.connected(u, v):
            total += weight
            components.union_by_size(u, v)
    return total


def prim(adjacency: WeightedAdjacency) -> int:
    """Return the weight of a minimum spanning tree of the component of vertex 0."""
    if not adjacency:
        return 0
    visited = [False] * len(adjacency)
    heap = [(0, 0)]
    total = 0
    while heap:
        weight, node = heapq.heappop(heap)
        if visited[node]:
            continue
        visited[node] = True
        total += weight
        for neighbour, edge_weight in adjacency[node]:
            if not visited[neighbour]:
                heapq.heappush(heap, (edge_weight, neighbour))
    return total