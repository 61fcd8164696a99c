"""Single-source and all-pairs shortest paths."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence


class WeightedGraph:
    """An undirected graph with non-negative edge weights on vertices 1 .. vertex_count."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertex_count = vertex_count
        self._adjacency: list[list[tuple[int, float]]] = [[] for _ in range(vertex_count + 1)]

    def _check(self, vertex: int) -> None:
        if not 1 <= vertex <= self.vertex_count:
            raise IndexError(f"vertex {vertex} is out of range")

    def add_edge(self, u: int, v: int, weight: float) -> None:
        """Connect u and v in both directions with the given weight."""
        self._check(u)
        self._check(v)
        if weight < 0:
            raise ValueError("edge weights must not be negative")
        self._adjacency[u].append((v, weight))
        self._adjacency[v].append((u, weight))

    def dijkstra(self, source: int) -> dict[int, float]:
        """Shortest distance from source to every vertex; math.inf if unreachable."""
        self._check(source)
        distances = dijkstra(self._adjacency, source)
        return {vertex: distances[vertex] for vertex in range(1, self.vertex_count + 1)}


def dijkstra(graph: Sequence[Sequence[tuple[int, float]]], source: int) -> list[float]:
    """Shortest distances from source over lists of (neighbour, weight) pairs.

    Vertices are numbered from 0; unreachable vertices get math.inf.
    Raises ValueError on a negative weight.
    """
    n = len(graph)
    if not 0 <= source < n:
        raise IndexError(f"vertex {source} is out of range")
    distances = [math.inf] * n
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        distance, vertex = heapq.heappop(heap)
        if distances[vertex] < math.inf:
            continue
        distances[vertex] = distance
        for neighbour, weight in graph[vertex]:
            if not 0 <= neighbour < n:
                raise IndexError(f"vertex {vertex} has out-of-range neighbour {neighbour}")
            if weight < 0:
                raise ValueError("edge weights must not be negative")
            if distances[neighbour] == math.inf:
                heapq.heappush(heap, (distance + weight, neighbour))
    return distances


class Floyd:
    """All-pairs shortest paths on a weight matrix over vertices 1 .. n.

    Missing edges start at math.inf.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("vertex count must not be negative")
        self.n = n
        self._weights = [[math.inf] * n for _ in range(n)]

    def _check(self, row: int, col: int) -> None:
        if not (1 <= row <= self.n and 1 <= col <= self.n):
            raise IndexError(f"({row}, {col}) is out of range")

    def set(self, row: int, col: int, weight: float) -> None:
        """Set the weight of the directed edge row -> col."""
        self._check(row, col)
        self._weights[row - 1][col - 1] = weight

    def get(self, row: int, col: int) -> float:
        """Current weight or distance from row to col."""
        self._check(row, col)
        return self._weights[row - 1][col - 1]

    def execute(self) -> None:
        """Replace the weights by shortest distances; each vertex is 0 from itself."""
        w = self._weights
        for i in range(self.n):
            w[i][i] = 0
        for k in range(self.n):
            through = w[k]
            for i in range(self.n):
                to_k = w[i][k]
                if to_k == math.inf:
                    continue
                row = w[i]
                for j in range(self.n):
                    candidate = to_k + through[j]
                    if candidate < row[j]:
                        row[j] = candidate


def floyd_warshall(vertex_count: int, edges: Iterable[tuple[int, int, float]]) -> list[list[float]]:
    """Distance matrix for directed edges (u, v, weight) on vertices 0 .. vertex_count-1.

    A later edge between the same ordered pair replaces an earlier one.
    Unreachable pairs are math.inf.
    """
    solver = Floyd(vertex_count)
    for u, v, weight in edges:
        solver.set(u + 1, v + 1, weight)
    solver.execute()
    return [
        [solver.get(i, j) for j in range(1, vertex_count + 1)]
        for i in range(1, vertex_count + 1)
    ]