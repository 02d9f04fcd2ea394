"""Minimum spanning trees by Kruskal's and Prim's methods."""

import heapq
from collections.abc import Iterable, Sequence
from typing import NamedTuple

from dsakit.disjoint_set import UnionFind


class Edge(NamedTuple):
    """An undirected weighted edge."""

    src: int
    dest: int
    weight: float


def _edges(vertex_count: int, edges: Iterable[Iterable]) -> list[Edge]:
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    result = [Edge(*edge) for edge in edges]
    for edge in result:
        if not (0 <= edge.src < vertex_count and 0 <= edge.dest < vertex_count):
            raise ValueError(f"edge ({edge.src}, {edge.dest}) has a vertex out of range")
    return result


def _kruskal(vertex_count: int, edges: Iterable[Iterable]) -> list[Edge]:
    forest = UnionFind(vertex_count)
    chosen = []
    for edge in sorted(_edges(vertex_count, edges), key=lambda e: e.weight):
        if not forest.same_set(edge.src, edge.dest):
            forest.union(edge.src, edge.dest)
            chosen.append(edge)
    return chosen


def kruskal_mst(vertex_count: int, edges: Iterable[Iterable]) -> list[Edge]:
    """Return the edges of a minimum spanning tree, cheapest first.

    Each edge is reported with its smaller endpoint as ``src``. Raises
    ValueError if the graph is not connected.
    """
    chosen = _kruskal(vertex_count, edges)
    if vertex_count > 0 and len(chosen) != vertex_count - 1:
        raise ValueError("graph is not connected")
    return [
        Edge(min(e.src, e.dest), max(e.src, e.dest), e.weight) for e in chosen
    ]


def kruskal_mst_weight(vertex_count: int, edges: Iterable[Iterable]) -> float:
    """Return the total weight of a minimum spanning forest."""
    return sum(edge.weight for edge in _kruskal(vertex_count, edges))


def prim_mst(matrix: Sequence[Sequence[float]]) -> list[Edge]:
    """Return a minimum spanning tree of a graph given as a weight matrix.

    A zero entry means there is no edge. The tree is grown from vertex 0 and
    reported as one ``Edge(parent, vertex, weight)`` for each vertex from 1
    upwards. Raises ValueError if the graph is not connected.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("weight matrix must be square")
    if size == 0:
        return []

    inf = float("inf")
    distance = [inf] * size
    parent = [-1] * size
    in_tree = [False] * size
    distance[0] = 0
    for _ in range(size):
        candidates = [v for v in range(size) if not in_tree[v] and distance[v] < inf]
        if not candidates:
            raise ValueError("graph is not connected")
        u = min(candidates, key=distance.__getitem__)
        in_tree[u] = True
        for v, weight in enumerate(matrix[u]):
            if weight and not in_tree[v] and weight < distance[v]:
                distance[v] = weight
                parent[v] = u
    return [Edge(parent[v], v, matrix[v][parent[v]]) for v in range(1, size)]


def prim_mst_weight(vertex_count: int, edges: Iterable[Iterable]) -> float:
    """Return the weight of a minimum spanning tree of vertex 0's component."""
    edge_list = _edges(vertex_count, edges)
    if vertex_count == 0:
        return 0
    adjacency: list[list[tuple[int, float]]] = [[] for _ in range(vertex_count)]
    for src, dest, weight in edge_list:
        adjacency[src].append((dest, weight))
        adjacency[dest].append((src, weight))

    visited = [False] * vertex_count
    total = 0
    queue: list[tuple[float, int]] = [(0, 0)]
    while queue:
        weight, node = heapq.heappop(queue)
        if visited[node]:
            continue
        visited[node] = True
        total += weight
        for neighbour, cost in adjacency[node]:
            if not visited[neighbour]:
                heapq.heappush(queue, (cost, neighbour))
    return total