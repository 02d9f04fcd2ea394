"""Backtracking searches: Hamiltonian cycles, N queens and maze paths."""

from collections.abc import Iterator, Sequence
from typing import Optional

Grid = list[list[int]]


def _check_square(adjacency: Sequence[Sequence[int]]) -> int:
    size = len(adjacency)
    if any(len(row) != size for row in adjacency):
        raise ValueError("adjacency matrix must be square")
    return size


def hamiltonian_cycles(
    adjacency: Sequence[Sequence[int]], start: int = 0
) -> list[list[int]]:
    """Return every Hamiltonian cycle through ``start``, in depth-first order.

    Each cycle is a list of vertex indices that begins and ends with
    ``start``. Both directions of an undirected cycle are reported.
    """
    size = _check_square(adjacency)
    if not 0 <= start < size:
        raise ValueError("start vertex is out of range")

    path = [start]
    visited = {start}

    def extend(vertex: int) -> Iterator[list[int]]:
        if len(path) == size:
            if adjacency[vertex][start]:
                yield [*path, start]
            return
        for neighbour, linked in enumerate(adjacency[vertex]):
            if linked and neighbour not in visited:
                visited.add(neighbour)
                path.append(neighbour)
                yield from extend(neighbour)
                path.pop()
                visited.discard(neighbour)

    return list(extend(start))


def solve_n_queens(n: int) -> Optional[Grid]:
    """Place ``n`` non-attacking queens on an ``n`` by ``n`` board.

    Columns are filled left to right, trying rows top to bottom; the first
    placement found is returned as rows of 0s and 1s, or None if none exists.
    """
    if n < 0:
        raise ValueError("board size must not be negative")

    board = [[0] * n for _ in range(n)]
    rows: set[int] = set()
    falling: set[int] = set()
    rising: set[int] = set()

    def place(col: int) -> bool:
        if col >= n:
            return True
        for row in range(n):
            if row in rows or row - col in falling or row + col in rising:
                continue
            board[row][col] = 1
            rows.add(row)
            falling.add(row - col)
            rising.add(row + col)
            if place(col + 1):
                return True
            board[row][col] = 0
            rows.discard(row)
            falling.discard(row - col)
            rising.discard(row + col)
        return False

    return board if place(0) else None


def rat_in_maze_paths(maze: Sequence[str]) -> list[Grid]:
    """Return every path from the top-left to the bottom-right cell of ``maze``.

    The rat moves only right or down and cannot enter cells marked ``'X'``.
    Each path is a grid with 1 on the cells it visits, right moves tried
    before down moves. The destination cell itself is not checked for a block.
    """
    if not maze or not maze[0]:
        raise ValueError("maze must have at least one cell")
    width = len(maze[0])
    if any(len(row) != width for row in maze):
        raise ValueError("maze rows must all have the same length")

    last_row, last_col = len(maze) - 1, width - 1
    solution = [[0] * width for _ in maze]

    def walk(i: int, j: int) -> Iterator[Grid]:
        if (i, j) == (last_row, last_col):
            solution[i][j] = 1
            yield [row[:] for row in solution]
            return
        if i > last_row or j > last_col:
            return
        if maze[i][j] == "X":
            return
        solution[i][j] = 1
        yield from walk(i, j + 1)
        yield from walk(i + 1, j)
        solution[i][j] = 0

    return list(walk(0, 0))