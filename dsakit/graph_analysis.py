"""Articulation points and greedy vertex colouring."""

from collections.abc import Iterable, Mapping, Sequence
from typing import Union

Adjacency = Union[Mapping[int, Iterable[int]], Sequence[Iterable[int]]]


def articulation_points(vertex_count: int, adjacency: Adjacency) -> list[int]:
    """Return, in ascending order, the vertices whose removal splits the graph.

    ``adjacency`` maps each vertex to its neighbours, as a mapping or a
    sequence indexed by vertex; vertices missing from a mapping have none.
    """
    if isinstance(adjacency, Mapping):
        def neighbours(u: int) -> Iterable[int]:
            return adjacency.get(u, ())
    else:
        def neighbours(u: int) -> Iterable[int]:
            return adjacency[u] if u < len(adjacency) else ()

    disc = [-1] * vertex_count
    low = [-1] * vertex_count
    parent = [-1] * vertex_count
    points = [False] * vertex_count
    clock = 0

    def visit(u: int) -> None:
        nonlocal clock
        disc[u] = low[u] = clock
        clock += 1
        children = 0
        for v in neighbours(u):
            if disc[v] == -1:
                children += 1
                parent[v] = u
                visit(v)
                low[u] = min(low[u], low[v])
                if parent[u] == -1 and children > 1:
                    points[u] = True
                if parent[u] != -1 and low[v] >= disc[u]:
                    points[u] = True
            elif v != parent[u]:
                low[u] = min(low[u], disc[v])

    for vertex in range(vertex_count):
        if disc[vertex] == -1:
            visit(vertex)
    return [v for v, is_point in enumerate(points) if is_point]


def greedy_coloring(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> tuple[int, list[int]]:
    """Colour vertices in index order with the smallest colour no neighbour has.

    Returns the number of colours used and each vertex's colour.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for x, y in edges:
        if not (0 <= x < vertex_count and 0 <= y < vertex_count):
            raise ValueError(f"edge ({x}, {y}) has a vertex out of range")
        adjacency[x].append(y)
        adjacency[y].append(x)

    colours = [-1] * vertex_count
    for vertex in range(vertex_count):
        taken = {colours[n] for n in adjacency[vertex] if colours[n] != -1}
        colour = 0
        while colour in taken:
            colour += 1
        colours[vertex] = colour
    used = max(colours) + 1 if colours else 0
    return used, colours