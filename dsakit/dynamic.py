"""Dynamic programming and exhaustive search over small inputs."""

from collections.abc import Sequence
from itertools import pairwise, permutations


def knapsack_01(profits: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Return the best total profit of items whose weights fit in ``capacity``.

    Each item is taken whole or not at all. A non-positive capacity or an
    empty item list gives 0.
    """
    if len(profits) != len(weights):
        raise ValueError("profits and weights must have the same length")
    if any(w < 0 for w in weights):
        raise ValueError("weights must not be negative")
    if capacity <= 0 or not profits:
        return 0

    row = [profits[0] if weights[0] <= c else 0 for c in range(capacity + 1)]
    for profit, weight in zip(profits[1:], weights[1:]):
        previous = row
        row = [0]
        for c in range(1, capacity + 1):
            take = profit + previous[c - weight] if weight <= c else 0
            row.append(max(take, previous[c]))
    return row[capacity]


def travelling_salesman(graph: Sequence[Sequence[int]], source: int = 0) -> int:
    """Return the cheapest tour that starts and ends at ``source``.

    Every ordering of the other vertices is tried, so this suits only small
    graphs.
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("cost matrix must be square")
    if not 0 <= source < size:
        raise ValueError("source vertex is out of range")

    others = [v for v in range(size) if v != source]
    return min(
        sum(graph[a][b] for a, b in pairwise((source, *order, source)))
        for order in permutations(others)
    )