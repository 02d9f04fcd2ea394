import pytest

from dsakit.backtracking import hamiltonian_cycles, rat_in_maze_paths, solve_n_queens

SOURCE_GRAPH = [
    [0, 1, 0, 0, 0, 0, 0, 1],
    [1, 0, 1, 0, 0, 0, 0, 0],
    [0, 1, 0, 1, 0, 0, 0, 1],
    [0, 0, 1, 0, 1, 0, 1, 0],
    [0, 0, 0, 1, 0, 1, 0, 0],
    [0, 0, 0, 0, 1, 0, 1, 0],
    [0, 0, 0, 1, 0, 1, 0, 1],
    [1, 0, 1, 0, 0, 0, 1, 0],
]

SOURCE_MAZE = ["0000", "000X", "000X", "0X00"]


def test_hamiltonian_cycles_are_valid():
    cycles = hamiltonian_cycles(SOURCE_GRAPH, 0)
    assert len(cycles) > 0
    for cycle in cycles:
        assert cycle[0] == 0 and cycle[-1] == 0
        assert sorted(cycle[:-1]) == list(range(8))
        for a, b in zip(cycle, cycle[1:]):
            assert SOURCE_GRAPH[a][b] == 1


def test_hamiltonian_cycles_come_in_both_directions():
    cycles = hamiltonian_cycles(SOURCE_GRAPH, 0)
    assert len(cycles) == len({tuple(c) for c in cycles})
    for cycle in cycles:
        assert list(reversed(cycle)) in cycles


def test_hamiltonian_triangle():
    triangle = [[0, 1, 1], [1, 0, 1], [1, 1, 0]]
    assert hamiltonian_cycles(triangle, 0) == [[0, 1, 2, 0], [0, 2, 1, 0]]


def test_hamiltonian_path_graph_has_no_cycle():
    path = [[0, 1, 0], [1, 0, 1], [0, 1, 0]]
    assert hamiltonian_cycles(path, 0) == []


def test_hamiltonian_rejects_bad_input():
    with pytest.raises(ValueError):
        hamiltonian_cycles([[0, 1], [1]], 0)
    with pytest.raises(ValueError):
        hamiltonian_cycles(SOURCE_GRAPH, 8)


def _assert_valid_queens(board, n):
    queens = [(r, c) for r in range(n) for c in range(n) if board[r][c]]
    assert len(queens) == n
    assert len({r for r, _ in queens}) == n
    assert len({c for _, c in queens}) == n
    assert len({r - c for r, c in queens}) == n
    assert len({r + c for r, c in queens}) == n


@pytest.mark.parametrize("n", [1, 4, 5, 6, 8])
def test_queens_solution_is_valid(n):
    board = solve_n_queens(n)
    assert len(board) == n
    _assert_valid_queens(board, n)


def test_queens_four_first_solution():
    assert solve_n_queens(4) == [
        [0, 0, 1, 0],
        [1, 0, 0, 0],
        [0, 0, 0, 1],
        [0, 1, 0, 0],
    ]


@pytest.mark.parametrize("n", [2, 3])
def test_queens_unsolvable(n):
    assert solve_n_queens(n) is None


def test_queens_negative_size():
    with pytest.raises(ValueError):
        solve_n_queens(-1)


def test_rat_paths_are_valid():
    paths = rat_in_maze_paths(SOURCE_MAZE)
    assert len(paths) > 0
    for grid in paths:
        cells = [(r, c) for r in range(4) for c in range(4) if grid[r][c]]
        assert grid[0][0] == 1 and grid[3][3] == 1
        assert len(cells) == 7
        for r, c in cells:
            assert SOURCE_MAZE[r][c] != "X"
    assert len({tuple(map(tuple, g)) for g in paths}) == len(paths)


def test_rat_open_two_by_two_tries_right_first():
    assert rat_in_maze_paths(["00", "00"]) == [[[1, 1], [0, 1]], [[1, 0], [1, 1]]]


def test_rat_blocked_maze():
    assert rat_in_maze_paths(["0X", "X0"]) == []


def test_rat_rejects_ragged_maze():
    with pytest.raises(ValueError):
        rat_in_maze_paths(["000", "00"])
    with pytest.raises(ValueError):
        rat_in_maze_paths([])