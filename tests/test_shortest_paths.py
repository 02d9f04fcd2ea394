import math

import pytest

from dsakit.graph import Graph
from dsakit.shortest_paths import (
    NegativeCycleError,
    bellman_ford,
    dijkstra,
    floyd_warshall,
)

INF = math.inf

SAMPLE_MATRIX = [
    [0, 3, INF, 7],
    [8, 0, 3, INF],
    [5, INF, 0, 1],
    [2, INF, INF, 0],
]


def _matrix_edges(matrix):
    return [
        (i, j, w)
        for i, row in enumerate(matrix)
        for j, w in enumerate(row)
        if i != j and w != INF
    ]


def test_floyd_warshall_rows_match_bellman_ford():
    result = floyd_warshall(SAMPLE_MATRIX)
    edges = _matrix_edges(SAMPLE_MATRIX)
    for source in range(4):
        assert result[source] == bellman_ford(4, edges, source)


def test_floyd_warshall_keeps_zero_diagonal_and_triangle_inequality():
    result = floyd_warshall(SAMPLE_MATRIX)
    assert [result[i][i] for i in range(4)] == [0, 0, 0, 0]
    for i in range(4):
        for j in range(4):
            assert result[i][j] <= SAMPLE_MATRIX[i][j]
            for k in range(4):
                assert result[i][j] <= result[i][k] + result[k][j]


def test_floyd_warshall_leaves_input_unchanged():
    original = [row[:] for row in SAMPLE_MATRIX]
    floyd_warshall(SAMPLE_MATRIX)
    assert SAMPLE_MATRIX == original


def test_floyd_warshall_rejects_non_square():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1], [1]])


def test_bellman_ford_single_edge_and_unreachable():
    assert bellman_ford(3, [(0, 1, 4)]) == [0, 4, INF]


def test_bellman_ford_handles_negative_edge_without_cycle():
    edges = [(0, 1, 5), (1, 2, -3), (0, 2, 4)]
    distances = bellman_ford(3, edges)
    assert distances[0] == 0
    assert distances[2] == distances[1] - 3
    matrix = [[0, 5, 4], [INF, 0, -3], [INF, INF, 0]]
    assert floyd_warshall(matrix)[0] == distances


def test_bellman_ford_detects_negative_cycle():
    with pytest.raises(NegativeCycleError):
        bellman_ford(3, [(0, 1, 1), (1, 2, -2), (2, 1, 1)])


def test_bellman_ford_ignores_unreachable_negative_cycle():
    assert bellman_ford(3, [(1, 2, -2), (2, 1, 1)]) == [0, INF, INF]


def test_bellman_ford_rejects_bad_vertices():
    with pytest.raises(ValueError):
        bellman_ford(2, [(0, 5, 1)])
    with pytest.raises(ValueError):
        bellman_ford(2, [], source=2)


def _undirected_sample():
    g = Graph()
    for u, v, w in [(1, 3, 4), (2, 3, 1), (3, 4, 2), (1, 4, 7)]:
        g.add_edge(u, v, w)
    return g


def test_dijkstra_matches_bellman_ford_on_undirected_graph():
    triples = [(1, 3, 4), (2, 3, 1), (3, 4, 2), (1, 4, 7)]
    edges = [e for u, v, w in triples for e in ((u, v, w), (v, u, w))]
    expected = bellman_ford(5, edges, 1)
    result = dijkstra(_undirected_sample(), 1)
    assert set(result) == {1, 2, 3, 4}
    for node, dist in result.items():
        assert dist == expected[node]


def test_dijkstra_source_distance_and_unreachable():
    g = Graph()
    g.add_edge("a", "b", 2, bidirectional=False)
    g.add_edge("c", "d", 1)
    result = dijkstra(g, "a")
    assert result == {"a": 0, "b": 2, "c": INF, "d": INF}


def test_dijkstra_prefers_cheaper_longer_route():
    g = Graph()
    g.add_edge("s", "t", 10)
    g.add_edge("s", "m", 1)
    g.add_edge("m", "t", 2)
    result = dijkstra(g, "s")
    assert result["t"] == result["m"] + 2
    assert result["t"] < 10