"""Traversals, bipartiteness, cycle detection and topological sorting.

A graph is given as an adjacency list: ``adjacency[v]`` holds the neighbours
of vertex ``v``, and vertices are numbered ``0 .. len(adjacency) - 1``.
Undirected graphs list every edge in both directions.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

__all__ = [
    "bfs_order",
    "dfs_order",
    "is_bipartite_bfs",
    "is_bipartite_dfs",
    "has_cycle_undirected_bfs",
    "has_cycle_undirected_dfs",
    "has_cycle_directed_dfs",
    "has_cycle_directed_kahn",
    "topo_sort_dfs",
    "topo_sort_kahn",
    "is_topological_order",
    "matrix_to_list",
]

Adjacency = Sequence[Sequence[int]]


def bfs_order(adjacency: Adjacency) -> list[int]:
    """Return the breadth-first visiting order of the vertices reachable from 0."""
    if not adjacency:
        return []
    seen = [False] * len(adjacency)
    seen[0] = True
    queue = deque([0])
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            if not seen[neighbour]:
                seen[neighbour] = True
                queue.append(neighbour)
    return order


def dfs_order(adjacency: Adjacency) -> list[int]:
    """Return the depth-first visiting order of the vertices reachable from 0."""
    if not adjacency:
        return []
    seen = [False] * len(adjacency)
    seen[0] = True
    order = [0]
    stack = [iter(adjacency[0])]
    while stack:
        for neighbour in stack[-1]:
            if not seen[neighbour]:
                seen[neighbour] = True
                order.append(neighbour)
                stack.append(iter(adjacency[neighbour]))
                break
        else:
            stack.pop()
    return order


def is_bipartite_bfs(adjacency: Adjacency) -> bool:
    """Return True if the undirected graph can be two-coloured (BFS colouring)."""
    colour = [-1] * len(adjacency)
    for start in range(len(adjacency)):
        if colour[start] != -1:
            continue
        colour[start] = 0
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbour in adjacency[node]:
                if colour[neighbour] == -1:
                    colour[neighbour] = 1 - colour[node]
                    queue.append(neighbour)
                elif colour[neighbour] == colour[node]:
                    return False
    return True


def is_bipartite_dfs(adjacency: Adjacency) -> bool:
    """Return True if the undirected graph can be two-coloured (DFS colouring)."""
    colour = [-1] * len(adjacency)
    for start in range(len(adjacency)):
        if colour[start] != -1:
            continue
        colour[start] = 0
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if colour[neighbour] == -1:
                    colour[neighbour] = 1 - colour[node]
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
                if colour[neighbour] == colour[node]:
                    return False
            else:
                stack.pop()
    return True


def has_cycle_undirected_bfs(adjacency: Adjacency) -> bool:
    """Return True if the undirected graph has a cycle, found by BFS."""
    seen = [False] * len(adjacency)
    for start in range(len(adjacency)):
        if seen[start]:
            continue
        seen[start] = True
        queue = deque([(start, -1)])
        while queue:
            node, parent = queue.popleft()
            for neighbour in adjacency[node]:
                if not seen[neighbour]:
                    seen[neighbour] = True
                    queue.append((neighbour, node))
                elif neighbour != parent:
                    return True
    return False


def has_cycle_undirected_dfs(adjacency: Adjacency) -> bool:
    """Return True if the undirected graph has a cycle, found by DFS."""
    seen = [False] * len(adjacency)
    for start in range(len(adjacency)):
        if seen[start]:
            continue
        seen[start] = True
        stack = [(start, -1, iter(adjacency[start]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if not seen[neighbour]:
                    seen[neighbour] = True
                    stack.append((neighbour, node, iter(adjacency[neighbour])))
                    break
                if neighbour != parent:
                    return True
            else:
                stack.pop()
    return False


def has_cycle_directed_dfs(adjacency: Adjacency) -> bool:
    """Return True if the directed graph has a cycle, tracking the current DFS path."""
    seen = [False] * len(adjacency)
    on_path = [False] * len(adjacency)
    for start in range(len(adjacency)):
        if seen[start]:
            continue
        seen[start] = on_path[start] = True
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if not seen[neighbour]:
                    seen[neighbour] = on_path[neighbour] = True
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
                if on_path[neighbour]:
                    return True
            else:
                on_path[node] = False
                stack.pop()
    return False


def has_cycle_directed_kahn(adjacency: Adjacency) -> bool:
    """Return True if Kahn's algorithm cannot order every vertex."""
    return len(topo_sort_kahn(adjacency)) != len(adjacency)


def topo_sort_dfs(adjacency: Adjacency) -> list[int]:
    """Return a topological order of a DAG: reversed DFS finishing order."""
    seen = [False] * len(adjacency)
    finished: list[int] = []
    for start in range(len(adjacency)):
        if seen[start]:
            continue
        seen[start] = True
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if not seen[neighbour]:
                    seen[neighbour] = True
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                finished.append(node)
                stack.pop()
    finished.reverse()
    return finished


def topo_sort_kahn(adjacency: Adjacency) -> list[int]:
    """Return Kahn's ordering; it omits every vertex on or behind a cycle."""
    indegree = [0] * len(adjacency)
    for neighbours in adjacency:
        for neighbour in neighbours:
            indegree[neighbour] += 1
    queue = deque(v for v, degree in enumerate(indegree) if degree == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            indegree[neighbour] -= 1
            if indegree[neighbour] == 0:
                queue.append(neighbour)
    return order


def is_topological_order(adjacency: Adjacency, order: Sequence[int]) -> bool:
    """Return True if ``order`` lists every vertex once and respects every edge."""
    if sorted(order) != list(range(len(adjacency))):
        return False
    position = {vertex: index for index, vertex in enumerate(order)}
    return all(
        position[node] <= position[neighbour]
        for node, neighbours in enumerate(adjacency)
        for neighbour in neighbours
    )


def matrix_to_list(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Build an adjacency list from a 0/1 matrix.

    Every off-diagonal entry equal to 1 adds the edge in both directions, so a
    symmetric matrix yields each neighbour twice.
    """
    adjacency: list[list[int]] = [[] for _ in matrix]
    for i, row in enumerate(matrix):
        for j, cell in enumerate(row):
            if cell == 1 and i != j:
                adjacency[i].append(j)
                adjacency[j].append(i)
    return adjacency