"""Single-source and all-pairs shortest path algorithms.

Weighted adjacency lists hold ``(neighbour, weight)`` pairs: ``adjacency[u]``
lists the edges leaving ``u``. Edge lists hold ``(u, v, weight)`` triples.
"""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence

from algokit.graph_traversal import topo_sort_dfs

__all__ = [
    "NegativeCycleError",
    "bellman_ford",
    "dijkstra_heap",
    "dijkstra_set",
    "floyd_warshall",
    "dag_shortest_path",
    "unweighted_shortest_path",
]

NO_EDGE = -1

WeightedAdjacency = Sequence[Sequence[tuple[int, int]]]


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


def _check_source(vertex_count: int, source: int) -> None:
    if not 0 <= source < vertex_count:
        raise IndexError(f"source {source} out of range 0..{vertex_count - 1}")


def _check_non_negative(adjacency: WeightedAdjacency) -> None:
    for node, neighbours in enumerate(adjacency):
        for neighbour, weight in neighbours:
            if weight < 0:
                raise ValueError(
                    f"negative edge {node} -> {neighbour} ({weight}) is not allowed"
                )


def bellman_ford(
    vertex_count: int, edges: Iterable[Sequence[int]], source: int
) -> list[float]:
    """Return distances from ``source``; unreachable vertices get ``math.inf``.

    Raises NegativeCycleError if a negative cycle is reachable from ``source``.
    """
    _check_source(vertex_count, source)
    edge_list = [(u, v, weight) for u, v, weight in edges]
    dist: list[float] = [math.inf] * vertex_count
    dist[source] = 0
    for _ in range(vertex_count - 1):
        for u, v, weight in edge_list:
            if dist[u] != math.inf and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    for u, v, weight in edge_list:
        if dist[u] != math.inf and dist[u] + weight < dist[v]:
            raise NegativeCycleError("graph contains a negative-weight cycle")
    return dist


def dijkstra_heap(adjacency: WeightedAdjacency, source: int) -> list[float]:
    """Return distances from ``source`` using a binary heap.

    Weights must be non-negative; unreachable vertices get ``math.inf``.
    """
    _check_source(len(adjacency), source)
    _check_non_negative(adjacency)
    dist: list[float] = [math.inf] * len(adjacency)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        distance, node = heapq.heappop(heap)
        if distance > dist[node]:
            continue
        for neighbour, weight in adjacency[node]:
            candidate = distance + weight
            if candidate < dist[neighbour]:
                dist[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return dist


def dijkstra_set(adjacency: WeightedAdjacency, source: int) -> list[float]:
    """Return distances from ``source``, keeping one pending entry per vertex.

    Weights must be non-negative; unreachable vertices get ``math.inf``.
    """
    _check_source(len(adjacency), source)
    _check_non_negative(adjacency)
    dist: list[float] = [math.inf] * len(adjacency)
    dist[source] = 0
    pending = {(0, source)}
    while pending:
        entry = min(pending)
        pending.remove(entry)
        distance, node = entry
        for neighbour, weight in adjacency[node]:
            candidate = distance + weight
            if candidate < dist[neighbour]:
                if dist[neighbour] != math.inf:
                    pending.discard((dist[neighbour], neighbour))
                dist[neighbour] = candidate
                pending.add((candidate, neighbour))
    return dist


def floyd_warshall(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return all-pairs shortest distances for a square weight matrix.

    An entry of -1 means there is no edge, and -1 in the result means the
    target cannot be reached. Off-diagonal weights are taken as given and
    diagonal entries other than -1 become 0. The input is left unchanged.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    dist: list[list[float]] = [
        [
            math.inf if cell == NO_EDGE else (0 if i == j else cell)
            for j, cell in enumerate(row)
        ]
        for i, row in enumerate(matrix)
    ]
    for k, through in enumerate(dist):
        for row in dist:
            via = row[k]
            if via == math.inf:
                continue
            for j, cost in enumerate(through):
                if via + cost < row[j]:
                    row[j] = via + cost
    return [[NO_EDGE if cell == math.inf else cell for cell in row] for row in dist]


def dag_shortest_path(
    vertex_count: int, edges: Iterable[Sequence[int]]
) -> list[int]:
    """Return distances from vertex 0 in a weighted directed acyclic graph.

    Relaxes edges in topological order; unreachable vertices get -1.
    """
    if vertex_count == 0:
        return []
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for u, v, weight in edges:
        adjacency[u].append((v, weight))
    order = topo_sort_dfs([[v for v, _ in neighbours] for neighbours in adjacency])
    dist: list[float] = [math.inf] * vertex_count
    dist[0] = 0
    for node in order:
        if dist[node] == math.inf:
            continue
        for neighbour, weight in adjacency[node]:
            if dist[node] + weight < dist[neighbour]:
                dist[neighbour] = dist[node] + weight
    return [NO_EDGE if d == math.inf else d for d in dist]


def unweighted_shortest_path(
    vertex_count: int, edges: Iterable[Sequence[int]], source: int
) -> list[int]:
    """Return edge counts from ``source`` in an undirected graph; -1 if unreachable.

    Only the first two fields of each edge are used.
    """
    _check_source(vertex_count, source)
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v, *_ in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    dist: list[float] = [math.inf] * vertex_count
    dist[source] = 0
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbour in adjacency[node]:
            if dist[node] + 1 < dist[neighbour]:
                dist[neighbour] = dist[node] + 1
                queue.append(neighbour)
    return [NO_EDGE if d == math.inf else d for d in dist]