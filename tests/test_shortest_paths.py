import math

import pytest

from algobox.shortest_paths import Floyd, WeightedGraph, dijkstra, floyd_warshall

EDGES = [(1, 2, 4), (1, 3, 7), (2, 3, 1), (2, 4, 6), (3, 4, 2), (4, 5, 3), (1, 5, 20)]


def build_graph(vertex_count: int = 6) -> WeightedGraph:
    graph = WeightedGraph(vertex_count)
    for u, v, w in EDGES:
        graph.add_edge(u, v, w)
    return graph


def adjacency_zero_based(vertex_count: int = 6) -> list[list[tuple[int, int]]]:
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for u, v, w in EDGES:
        adjacency[u - 1].append((v - 1, w))
        adjacency[v - 1].append((u - 1, w))
    return adjacency


def test_triangle_example():
    graph = WeightedGraph(3)
    graph.add_edge(1, 2, 4)
    graph.add_edge(2, 3, 1)
    graph.add_edge(1, 3, 7)
    assert graph.dijkstra(1)[3] == 5


def test_source_distance_is_zero_and_isolated_is_inf():
    distances = build_graph().dijkstra(1)
    assert distances[1] == 0
    assert distances[6] == math.inf


def test_single_edge_distance_is_its_weight():
    graph = WeightedGraph(2)
    graph.add_edge(1, 2, 9)
    assert graph.dijkstra(2) == {1: 9, 2: 0}


def test_distances_respect_every_edge():
    distances = build_graph().dijkstra(1)
    for u, v, w in EDGES:
        assert distances[v] <= distances[u] + w
        assert distances[u] <= distances[v] + w


def test_undirected_distances_are_symmetric():
    graph = build_graph()
    for a in range(1, 6):
        from_a = graph.dijkstra(a)
        for b in range(1, 6):
            assert from_a[b] == graph.dijkstra(b)[a]


def test_function_matches_method():
    graph = build_graph()
    adjacency = adjacency_zero_based()
    for source in range(1, 7):
        method = graph.dijkstra(source)
        function = dijkstra(adjacency, source - 1)
        assert [method[v] for v in range(1, 7)] == function


def test_floyd_warshall_matches_dijkstra():
    directed = [(u - 1, v - 1, w) for u, v, w in EDGES] + [(v - 1, u - 1, w) for u, v, w in EDGES]
    matrix = floyd_warshall(6, directed)
    adjacency = adjacency_zero_based()
    for source in range(6):
        assert matrix[source] == dijkstra(adjacency, source)


def test_floyd_class_chain():
    solver = Floyd(3)
    solver.set(1, 2, 2)
    solver.set(2, 3, 3)
    solver.execute()
    assert solver.get(1, 3) == 5
    assert solver.get(3, 1) == math.inf
    assert solver.get(2, 2) == 0


def test_floyd_warshall_later_edge_replaces_earlier():
    matrix = floyd_warshall(2, [(0, 1, 5), (0, 1, 2)])
    assert matrix[0][1] == 2
    assert matrix[1][0] == math.inf


def test_floyd_warshall_is_directed():
    matrix = floyd_warshall(3, [(0, 1, 1), (1, 2, 1)])
    assert matrix[2][0] == math.inf
    assert matrix[0][2] == matrix[0][1] + matrix[1][2]


def test_floyd_rejects_out_of_range():
    with pytest.raises(IndexError):
        Floyd(2).set(0, 1, 1)
    with pytest.raises(IndexError):
        Floyd(2).get(1, 3)


def test_weighted_graph_rejects_bad_input():
    graph = WeightedGraph(2)
    with pytest.raises(IndexError):
        graph.add_edge(0, 1, 1)
    with pytest.raises(ValueError):
        graph.add_edge(1, 2, -1)
    with pytest.raises(IndexError):
        graph.dijkstra(3)


def test_dijkstra_function_rejects_bad_input():
    with pytest.raises(IndexError):
        dijkstra([[]], 1)
    with pytest.raises(ValueError):
        dijkstra([[(1, -2)], []], 0)
    with pytest.raises(IndexError):
        dijkstra([[(4, 1)]], 0)