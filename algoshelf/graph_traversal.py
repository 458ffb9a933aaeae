"""Adjacency-list graphs with breadth-first, depth-first and SCC traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator


def _postorder_from(
    adjacency: list[list[int]], start: int, visited: set[int]
) -> list[int]:
    """Vertices reachable from ``start`` in depth-first finishing order."""
    order: list[int] = []
    visited.add(start)
    stack = [(start, iter(adjacency[start]))]
    while stack:
        vertex, pending = stack[-1]
        for neighbour in pending:
            if neighbour not in visited:
                visited.add(neighbour)
                stack.append((neighbour, iter(adjacency[neighbour])))
                break
        else:
            stack.pop()
            order.append(vertex)
    return order


class Graph:
    """Graph over the vertices ``0 .. vertex_count - 1`` stored as adjacency lists."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} is out of range")

    def add_edge(self, source: int, target: int) -> None:
        """Add a directed edge, placed after the existing neighbours of ``source``."""
        self._check(source)
        self._check(target)
        self._adjacency[source].append(target)

    def add_undirected_edge(self, u: int, v: int, prepend: bool = False) -> None:
        """Add an edge in both directions, at the front of the lists if ``prepend``."""
        self._check(u)
        self._check(v)
        if prepend:
            self._adjacency[u].insert(0, v)
            self._adjacency[v].insert(0, u)
        else:
            self._adjacency[u].append(v)
            self._adjacency[v].append(u)

    def neighbours(self, vertex: int) -> list[int]:
        """The neighbours of ``vertex`` in adjacency order."""
        self._check(vertex)
        return list(self._adjacency[vertex])

    def _bfs_steps(self, start: int) -> Iterator[tuple[tuple[int, ...], int]]:
        self._check(start)
        visited = {start}
        queue = deque([start])
        while queue:
            snapshot = tuple(queue)
            vertex = queue.popleft()
            yield snapshot, vertex
            for neighbour in self._adjacency[vertex]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)

    def bfs(self, start: int) -> list[int]:
        """Vertices reachable from ``start`` in breadth-first order."""
        return [vertex for _, vertex in self._bfs_steps(start)]

    def bfs_trace(self, start: int) -> list[tuple[tuple[int, ...], int]]:
        """Each breadth-first step as the queue contents and the vertex dequeued."""
        return list(self._bfs_steps(start))

    def dfs(self, start: int) -> list[int]:
        """Vertices reachable from ``start`` in depth-first preorder."""
        self._check(start)
        order = [start]
        visited = {start}
        stack = [iter(self._adjacency[start])]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self._adjacency[neighbour]))
                    break
            else:
                stack.pop()
        return order


def strongly_connected_components(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Strongly connected components of a directed graph (Kosaraju).

    Each component lists its vertices in the finishing order of the
    search over the reversed graph.
    """
    graph = Graph(vertex_count)
    for source, target in edges:
        graph.add_edge(source, target)
    adjacency = graph._adjacency

    visited: set[int] = set()
    finished: list[int] = []
    for vertex in range(vertex_count):
        if vertex not in visited:
            finished.extend(_postorder_from(adjacency, vertex, visited))

    transposed: list[list[int]] = [[] for _ in range(vertex_count)]
    for source, targets in enumerate(adjacency):
        for target in targets:
            transposed[target].append(source)

    visited = set()
    components: list[list[int]] = []
    for vertex in reversed(finished):
        if vertex not in visited:
            components.append(_postorder_from(transposed, vertex, visited))
    return components