"""Single-source and all-pairs shortest paths."""

import heapq
import itertools
import math
from collections.abc import Hashable, Iterable, Sequence

from dsakit.graph import Graph


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle is reachable from the source."""


def bellman_ford(
    vertex_count: int, edges: Iterable[tuple[int, int, float]], source: int = 0
) -> list[float]:
    """Return the shortest distance from ``source`` to every vertex.

    ``edges`` holds directed ``(src, dst, weight)`` triples over vertices
    ``0 .. vertex_count - 1``. Unreachable vertices get ``math.inf``.
    Raises NegativeCycleError if a negative cycle can be reached.
    """
    edge_list = list(edges)
    if not 0 <= source < vertex_count:
        raise ValueError("source vertex is out of range")
    for src, dst, _ in edge_list:
        if not (0 <= src < vertex_count and 0 <= dst < vertex_count):
            raise ValueError(f"edge ({src}, {dst}) has a vertex out of range")

    distance = [math.inf] * vertex_count
    distance[source] = 0

    def relax() -> bool:
        changed = False
        for src, dst, weight in edge_list:
            if distance[src] != math.inf and distance[src] + weight < distance[dst]:
                distance[dst] = distance[src] + weight
                changed = True
        return changed

    for _ in range(vertex_count - 1):
        if not relax():
            return distance

    if any(
        distance[src] != math.inf and distance[src] + weight < distance[dst]
        for src, dst, weight in edge_list
    ):
        raise NegativeCycleError("graph has a negative-weight cycle")
    return distance


def dijkstra(graph: Graph, source: Hashable) -> dict[Hashable, float]:
    """Return the shortest distance from ``source`` to every node of ``graph``.

    Edge weights must not be negative. Unreachable nodes get ``math.inf``.
    """
    distance: dict[Hashable, float] = {node: math.inf for node in graph.nodes()}
    distance[source] = 0
    tie = itertools.count()
    heap = [(0, next(tie), source)]
    while heap:
        dist, _, node = heapq.heappop(heap)
        if dist > distance[node]:
            continue
        for neighbour, weight in graph.neighbours(node):
            candidate = dist + weight
            if candidate < distance[neighbour]:
                distance[neighbour] = candidate
                heapq.heappush(heap, (candidate, next(tie), neighbour))
    return distance


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return all-pairs shortest distances for a weight matrix.

    ``matrix[i][j]`` is the weight of the edge from ``i`` to ``j``, or
    ``math.inf`` where there is none. The input is left unchanged.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("weight matrix must be square")
    dist = [list(row) for row in matrix]
    for k in range(size):
        through = dist[k]
        for row in dist:
            via = row[k]
            for j in range(size):
                if row[j] > via + through[j]:
                    row[j] = via + through[j]
    return dist