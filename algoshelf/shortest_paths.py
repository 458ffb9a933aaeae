"""Single-source and all-pairs shortest paths over weighted directed graphs."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable

Weight = int | float


def _validated(
    vertex_count: int, edges: Iterable[tuple[int, int, Weight]]
) -> list[tuple[int, int, Weight]]:
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    checked = []
    for source, target, weight in edges:
        for vertex in (source, target):
            if not 0 <= vertex < vertex_count:
                raise IndexError(f"vertex {vertex} is out of range")
        checked.append((source, target, weight))
    return checked


def dijkstra(
    vertex_count: int, edges: Iterable[tuple[int, int, Weight]], source: int
) -> list[Weight]:
    """Distances from ``source`` to every vertex; ``math.inf`` where unreachable.

    Edges are directed ``(source, target, weight)`` triples with
    non-negative weights.
    """
    checked = _validated(vertex_count, edges)
    if not 0 <= source < vertex_count:
        raise IndexError(f"vertex {source} is out of range")
    adjacency: list[list[tuple[int, Weight]]] = [[] for _ in range(vertex_count)]
    for start, target, weight in checked:
        if weight < 0:
            raise ValueError("edge weights must not be negative")
        adjacency[start].append((target, weight))

    distances: list[Weight] = [math.inf] * vertex_count
    distances[source] = 0
    done = [False] * vertex_count
    heap: list[tuple[Weight, int]] = [(0, source)]
    while heap:
        _, vertex = heapq.heappop(heap)
        if done[vertex]:
            continue
        done[vertex] = True
        for target, weight in adjacency[vertex]:
            candidate = distances[vertex] + weight
            if candidate < distances[target]:
                distances[target] = candidate
                heapq.heappush(heap, (candidate, target))
    return distances


def all_pairs_shortest_paths(
    vertex_count: int, edges: Iterable[tuple[int, int, Weight]]
) -> list[list[Weight]]:
    """Matrix of shortest distances between every pair of vertices.

    Missing paths are ``math.inf``. A repeated edge keeps the weight given
    last, and a self-loop replaces the zero distance of its vertex.
    """
    checked = _validated(vertex_count, edges)
    distances: list[list[Weight]] = [
        [0 if row == column else math.inf for column in range(vertex_count)]
        for row in range(vertex_count)
    ]
    for source, target, weight in checked:
        distances[source][target] = weight

    for k in range(vertex_count):
        through_k = distances[k]
        for row in distances:
            to_k = row[k]
            if to_k == math.inf:
                continue
            for column, onward in enumerate(through_k):
                candidate = to_k + onward
                if candidate < row[column]:
                    row[column] = candidate
    return distances