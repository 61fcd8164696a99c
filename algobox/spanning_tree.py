"""Minimum spanning trees with Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
from collections.abc import Iterable

from algobox.range_query import DisjointSet

Edge = tuple[int, int, float]


def kruskal(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    """Minimum spanning forest of vertices 0 .. vertex_count-1.

    ``edges`` holds (u, v, weight) triples. Edges are considered in order of
    (weight, u, v); the chosen edges are returned in that order.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    candidates = []
    for u, v, weight in edges:
        for vertex in (u, v):
            if not 0 <= vertex < vertex_count:
                raise IndexError(f"vertex {vertex} is out of range")
        candidates.append((weight, u, v))
    sets = DisjointSet(vertex_count)
    tree: list[Edge] = []
    for weight, u, v in sorted(candidates):
        if sets.union(u, v):
            tree.append((u, v, weight))
    return tree


def prim(vertex_count: int, edges: Iterable[Edge]) -> tuple[float, dict[int, float]]:
    """Minimum spanning tree of vertices 1 .. vertex_count, grown from vertex 1.

    ``edges`` holds undirected (u, v, weight) triples. Returns the total
    cost and, for each vertex, the weight of the edge that joined it to the
    tree (0 for vertex 1). Raises ValueError if the graph is not connected.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    adjacency: dict[int, list[tuple[int, float]]] = {
        vertex: [] for vertex in range(1, vertex_count + 1)
    }
    for u, v, weight in edges:
        for vertex in (u, v):
            if vertex not in adjacency:
                raise IndexError(f"vertex {vertex} is out of range")
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))
    if vertex_count == 0:
        return 0, {}

    best: dict[int, float] = {1: 0}
    chosen: dict[int, float] = {}
    heap: list[tuple[float, int]] = [(0, 1)]
    cost: float = 0
    while heap and len(chosen) < vertex_count:
        weight, vertex = heapq.heappop(heap)
        if vertex in chosen:
            continue
        chosen[vertex] = weight
        cost += weight
        for other, edge_weight in adjacency[vertex]:
            if other in chosen:
                continue
            if other not in best or edge_weight < best[other]:
                best[other] = edge_weight
                heapq.heappush(heap, (edge_weight, other))
    if len(chosen) < vertex_count:
        raise ValueError("graph is not connected")
    return cost, chosen