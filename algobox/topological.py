"""Topological ordering of directed graphs with Kahn's algorithm."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Union

Adjacency = Union[Mapping[int, Iterable[int]], Sequence[Iterable[int]]]


class CycleError(ValueError):
    """Raised when a graph that must be acyclic contains a cycle."""


def _in_degrees(vertices: range, neighbours: Callable[[int], list[int]]) -> dict[int, int]:
    degrees = {vertex: 0 for vertex in vertices}
    for vertex in vertices:
        for other in neighbours(vertex):
            if other not in degrees:
                raise IndexError(f"vertex {vertex} has out-of-range neighbour {other}")
            degrees[other] += 1
    return degrees


def _kahn_fifo(vertices: range, neighbours: Callable[[int], list[int]]) -> list[int]:
    degrees = _in_degrees(vertices, neighbours)
    queue = deque(vertex for vertex in vertices if degrees[vertex] == 0)
    order: list[int] = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for other in neighbours(vertex):
            degrees[other] -= 1
            if degrees[other] == 0:
                queue.append(other)
    return order


def kahn_order(graph: Sequence[Iterable[int]]) -> list[int]:
    """Topological order of vertices 0 .. len(graph)-1, ties broken first in, first out.

    Raises CycleError if the graph has a cycle.
    """
    adjacency = [list(neighbours) for neighbours in graph]
    order = _kahn_fifo(range(len(adjacency)), adjacency.__getitem__)
    if len(order) != len(adjacency):
        raise CycleError("there is a cycle")
    return order


def has_cycle(graph: Sequence[Iterable[int]]) -> bool:
    """True if the directed graph on vertices 0 .. len(graph)-1 has a cycle."""
    try:
        kahn_order(graph)
    except CycleError:
        return True
    return False


def _one_based(adjacency: Adjacency, vertex_count: int) -> Callable[[int], list[int]]:
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    if isinstance(adjacency, Mapping):
        lists = {vertex: list(adjacency.get(vertex, ())) for vertex in range(1, vertex_count + 1)}
    else:
        rows = list(adjacency)
        if len(rows) != vertex_count + 1:
            raise ValueError("a sequence adjacency needs vertex_count + 1 rows, row 0 unused")
        lists = {vertex: list(rows[vertex]) for vertex in range(1, vertex_count + 1)}
    return lists.__getitem__


def topological_sort(adjacency: Adjacency, vertex_count: int) -> list[int]:
    """Kahn order of vertices 1 .. vertex_count, ties broken first in, first out.

    ``adjacency`` maps each vertex to its successors, either as a mapping or
    as a sequence whose row 0 is unused. Vertices on or behind a cycle never
    reach in-degree zero and are left out of the result.
    """
    neighbours = _one_based(adjacency, vertex_count)
    return _kahn_fifo(range(1, vertex_count + 1), neighbours)


def topological_sort_min_heap(adjacency: Adjacency, vertex_count: int) -> list[int]:
    """Lexicographically smallest topological order of vertices 1 .. vertex_count.

    Takes the same input as topological_sort; vertices that cannot be
    ordered because of a cycle are left out.
    """
    neighbours = _one_based(adjacency, vertex_count)
    vertices = range(1, vertex_count + 1)
    degrees = _in_degrees(vertices, neighbours)
    heap = [vertex for vertex in vertices if degrees[vertex] == 0]
    heapq.heapify(heap)
    order: list[int] = []
    while heap:
        vertex = heapq.heappop(heap)
        order.append(vertex)
        for other in neighbours(vertex):
            degrees[other] -= 1
            if degrees[other] == 0:
                heapq.heappush(heap, other)
    return order