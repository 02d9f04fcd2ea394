"""Adjacency-list graphs with breadth-first and depth-first traversal."""

from collections import deque
from collections.abc import Hashable, Iterator
from typing import Any


class Graph:
    """A graph kept as an adjacency list of ``(neighbour, weight)`` pairs.

    Nodes are any hashable values. Neighbours are kept in the order their
    edges were added, and traversals follow that order.
    """

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, list[tuple[Hashable, Any]]] = {}

    def add_edge(
        self, u: Hashable, v: Hashable, weight: Any = 1, bidirectional: bool = True
    ) -> None:
        """Add an edge from ``u`` to ``v``, and back again if ``bidirectional``.

        Both endpoints become nodes of the graph either way.
        """
        self._adjacency.setdefault(u, []).append((v, weight))
        back = self._adjacency.setdefault(v, [])
        if bidirectional:
            back.append((u, weight))

    def neighbours(self, node: Hashable) -> list[tuple[Hashable, Any]]:
        """Return the ``(neighbour, weight)`` pairs leaving ``node``.

        A node the graph does not know has no neighbours.
        """
        return list(self._adjacency.get(node, ()))

    def nodes(self) -> list[Hashable]:
        """Return the nodes in the order they first appeared."""
        return list(self._adjacency)

    def _targets(self, node: Hashable) -> Iterator[Hashable]:
        return (target for target, _ in self._adjacency.get(node, ()))

    def bfs(self, source: Hashable) -> list[Hashable]:
        """Return the nodes reachable from ``source`` in breadth-first order."""
        order = []
        seen = {source}
        queue = deque([source])
        while queue:
            node = queue.popleft()
            order.append(node)
            for target in self._targets(node):
                if target not in seen:
                    seen.add(target)
                    queue.append(target)
        return order

    def dfs(self, source: Hashable) -> list[Hashable]:
        """Return the nodes reachable from ``source`` in depth-first order."""
        order = [source]
        seen = {source}
        stack = [self._targets(source)]
        while stack:
            for target in stack[-1]:
                if target not in seen:
                    seen.add(target)
                    order.append(target)
                    stack.append(self._targets(target))
                    break
            else:
                stack.pop()
        return order