"""Minimum spanning trees by Boruvka's algorithm over a union-find forest."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge."""

    source: int
    target: int
    weight: int | float


class DisjointSet:
    """Union-find with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, item: int) -> int:
        """Representative of the set holding ``item``."""
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            following = self._parent[item]
            self._parent[item] = root
            item = following
        return root

    def union(self, x: int, y: int) -> int:
        """Merge the sets of ``x`` and ``y`` and return the new representative.

        With equal ranks the representative of ``x`` becomes the root.
        """
        x_root = self.find(x)
        y_root = self.find(y)
        if x_root == y_root:
            return x_root
        if self._rank[x_root] < self._rank[y_root]:
            self._parent[x_root] = y_root
            return y_root
        if self._rank[x_root] > self._rank[y_root]:
            self._parent[y_root] = x_root
            return x_root
        self._parent[y_root] = x_root
        self._rank[x_root] += 1
        return x_root


@dataclass
class SpanningTree:
    """Edges of a spanning tree in the order they were chosen."""

    edges: list[Edge] = field(default_factory=list)

    @property
    def weight(self) -> int | float:
        return sum(edge.weight for edge in self.edges)


def boruvka_mst(
    vertex_count: int, edges: Iterable[Edge | tuple[int, int, int | float]]
) -> SpanningTree:
    """Minimum spanning tree of a connected undirected graph.

    Edges may be ``Edge`` objects or ``(source, target, weight)`` triples.
    Raises ``ValueError`` when the graph is not connected.
    """
    edge_list = [edge if isinstance(edge, Edge) else Edge(*edge) for edge in edges]
    for edge in edge_list:
        for vertex in (edge.source, edge.target):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} is out of range")

    components = DisjointSet(vertex_count)
    trees = vertex_count
    chosen: list[Edge] = []
    while trees > 1:
        cheapest: dict[int, int] = {}
        for index, edge in enumerate(edge_list):
            first = components.find(edge.source)
            second = components.find(edge.target)
            if first == second:
                continue
            for root in (first, second):
                best = cheapest.get(root)
                if best is None or edge_list[best].weight > edge.weight:
                    cheapest[root] = index
        if not cheapest:
            raise ValueError("graph is not connected")
        for root in sorted(cheapest):
            edge = edge_list[cheapest[root]]
            first = components.find(edge.source)
            second = components.find(edge.target)
            if first == second:
                continue
            chosen.append(edge)
            components.union(first, second)
            trees -= 1
    return SpanningTree(chosen)