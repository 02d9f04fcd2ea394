"""Maximum flow by the Ford-Fulkerson method with breadth-first search."""

import math
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class FlowResult:
    """The maximum flow value and the augmenting paths that made it up."""

    value: float
    paths: list[list[int]] = field(default_factory=list)


def _augmenting_path(
    residual: list[list[float]], source: int, sink: int
) -> Optional[tuple[float, dict[int, int]]]:
    parent: dict[int, int] = {source: source}
    queue = deque([(source, math.inf)])
    while queue:
        node, capacity = queue.popleft()
        for dest, room in enumerate(residual[node]):
            if dest != node and dest not in parent and room != 0:
                parent[dest] = node
                bottleneck = min(capacity, room)
                if dest == sink:
                    return bottleneck, parent
                queue.append((dest, bottleneck))
    return None


def max_flow(capacity: Sequence[Sequence[float]], source: int, sink: int) -> FlowResult:
    """Return the maximum flow from ``source`` to ``sink``.

    ``capacity[u][v]`` is the capacity of the edge from ``u`` to ``v``.
    Neighbours are explored in index order. The input is left unchanged.
    """
    size = len(capacity)
    if any(len(row) != size for row in capacity):
        raise ValueError("capacity matrix must be square")
    if not (0 <= source < size and 0 <= sink < size):
        raise ValueError("source or sink is out of range")

    residual = [list(row) for row in capacity]
    result = FlowResult(0)
    while (found := _augmenting_path(residual, source, sink)) is not None:
        bottleneck, parent = found
        result.value += bottleneck
        path = [sink]
        node = sink
        while node != source:
            prev = parent[node]
            residual[node][prev] += bottleneck
            residual[prev][node] -= bottleneck
            path.append(prev)
            node = prev
        result.paths.append(path[::-1])
    return result