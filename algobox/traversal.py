"""Breadth-first and depth-first traversals, reachability and transitive closure."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

Graph = Sequence[Sequence[int]]


def _validated(graph: Graph) -> list[list[int]]:
    adjacency = [list(neighbours) for neighbours in graph]
    for vertex, neighbours in enumerate(adjacency):
        for other in neighbours:
            if not 0 <= other < len(adjacency):
                raise IndexError(f"vertex {vertex} has out-of-range neighbour {other}")
    return adjacency


def _check_vertex(adjacency: Sequence[Sequence[int]], vertex: int) -> None:
    if not 0 <= vertex < len(adjacency):
        raise IndexError(f"vertex {vertex} is out of range")


def _bfs(adjacency: list[list[int]], start: int, visited: list[bool]) -> Iterator[int]:
    visited[start] = True
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        yield vertex
        for other in adjacency[vertex]:
            if not visited[other]:
                visited[other] = True
                queue.append(other)


def _dfs_recursive(adjacency: list[list[int]], start: int, visited: list[bool]) -> Iterator[int]:
    visited[start] = True
    yield start
    pending = [iter(adjacency[start])]
    while pending:
        for other in pending[-1]:
            if not visited[other]:
                visited[other] = True
                yield other
                pending.append(iter(adjacency[other]))
                break
        else:
            pending.pop()


def _dfs_stack(adjacency: list[list[int]], start: int, visited: list[bool]) -> Iterator[int]:
    visited[start] = True
    stack = [start]
    while stack:
        vertex = stack.pop()
        yield vertex
        for other in adjacency[vertex]:
            if not visited[other]:
                visited[other] = True
                stack.append(other)


def _all_components(graph: Graph, walk) -> list[int]:
    adjacency = _validated(graph)
    visited = [False] * len(adjacency)
    order: list[int] = []
    for vertex in range(len(adjacency)):
        if not visited[vertex]:
            order.extend(walk(adjacency, vertex, visited))
    return order


class UndirectedGraph:
    """An undirected graph on vertices 0 .. vertex_count-1.

    Each new edge is placed at the front of both endpoints' neighbour lists,
    so traversals meet the most recently added neighbours first.
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def neighbours(self, vertex: int) -> list[int]:
        """Neighbours of vertex, most recently added first."""
        _check_vertex(self._adjacency, vertex)
        return list(self._adjacency[vertex])

    def add_edge(self, src: int, dest: int) -> None:
        """Connect src and dest in both directions."""
        _check_vertex(self._adjacency, src)
        _check_vertex(self._adjacency, dest)
        self._adjacency[src].insert(0, dest)
        self._adjacency[dest].insert(0, src)

    def bfs(self, start: int) -> list[int]:
        """Vertices in the order a breadth-first search from start visits them."""
        return bfs_order(self._adjacency, start)


def bfs_order(graph: Graph, start: int) -> list[int]:
    """Breadth-first visiting order from start over adjacency lists."""
    adjacency = _validated(graph)
    _check_vertex(adjacency, start)
    return list(_bfs(adjacency, start, [False] * len(adjacency)))


def bfs_all(graph: Graph) -> list[int]:
    """Breadth-first order covering every component, lowest start vertex first."""
    return _all_components(graph, _bfs)


def dfs_all_recursive(graph: Graph) -> list[int]:
    """Depth-first preorder covering every component, lowest start vertex first."""
    return _all_components(graph, _dfs_recursive)


def dfs_all_stack(graph: Graph) -> list[int]:
    """Stack-driven traversal covering every component.

    Vertices are marked when pushed, and all unvisited neighbours of a
    popped vertex are pushed in list order, so the last one is taken next.
    """
    return _all_components(graph, _dfs_stack)


def count_reachable(graph: Graph, start: int) -> int:
    """Number of vertices reachable from start, start included."""
    return len(bfs_order(graph, start))


def transitive_closure(graph: Graph) -> list[list[bool]]:
    """Reachability matrix: entry [i][j] is True if j can be reached from i.

    Every vertex reaches itself.
    """
    adjacency = _validated(graph)
    closure = []
    for source in range(len(adjacency)):
        row = [False] * len(adjacency)
        deque(_dfs_recursive(adjacency, source, row), maxlen=0)
        closure.append(row)
    return closure