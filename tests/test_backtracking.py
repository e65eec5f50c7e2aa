import copy
import itertools
import math

import pytest

from dsakit.backtracking import (
    all_permutations,
    all_subsets,
    change_array,
    find_paths,
    find_paths_in_place,
    grid_ways,
    is_safe_digit,
    is_safe_queen,
    n_queens,
    solve_sudoku,
)

SAMPLE_MAZE = [
    [1, 0, 0, 0],
    [1, 1, 0, 1],
    [1, 1, 0, 0],
    [0, 1, 1, 1],
]

SAMPLE_SUDOKU = [
    [0, 0, 8, 0, 0, 0, 0, 0, 0],
    [4, 9, 0, 1, 5, 7, 0, 0, 2],
    [0, 0, 3, 0, 0, 4, 1, 9, 0],
    [1, 8, 5, 0, 6, 0, 0, 2, 0],
    [0, 0, 0, 0, 2, 0, 0, 6, 0],
    [9, 6, 0, 4, 0, 5, 3, 0, 0],
    [0, 3, 0, 0, 7, 2, 0, 0, 4],
    [0, 4, 9, 0, 3, 0, 0, 5, 7],
    [8, 2, 7, 0, 0, 9, 0, 1, 3],
]


def _follow(maze, path):
    r = c = 0
    cells = [(0, 0)]
    deltas = {"D": (1, 0), "U": (-1, 0), "L": (0, -1), "R": (0, 1)}
    for step in path:
        dr, dc = deltas[step]
        r, c = r + dr, c + dc
        cells.append((r, c))
    return cells


@pytest.mark.parametrize("n", [0, 1, 5])
def test_change_array(n):
    deepest, final = change_array(n)
    assert deepest == list(range(1, n + 1))
    assert final == [v - 2 for v in deepest]


def test_change_array_negative():
    with pytest.raises(ValueError):
        change_array(-1)


def test_all_subsets_abc():
    result = list(all_subsets("abc"))
    assert len(result) == 2 ** 3
    assert result[0] == ""
    assert result[-1] == "abc"
    expected = {
        "".join(combo)
        for k in range(4)
        for combo in itertools.combinations("abc", k)
    }
    assert set(result) == expected


def test_all_permutations_abc():
    result = list(all_permutations("abc"))
    assert result == ["".join(p) for p in itertools.permutations("abc")]


def test_all_permutations_empty():
    assert list(all_permutations("")) == [""]


def test_is_safe_queen():
    board = [list("...."), list(".Q.."), list("...."), list("....")]
    assert is_safe_queen(board, 2, 0) is False  # diagonal
    assert is_safe_queen(board, 2, 1) is False  # column
    assert is_safe_queen(board, 2, 2) is False  # diagonal
    assert is_safe_queen(board, 2, 3) is True
    assert is_safe_queen(board, 1, 3) is False  # same row, to the left


@pytest.mark.parametrize("n", [1, 4, 5, 6])
def test_n_queens_solutions_are_valid(n):
    solutions = n_queens(n)
    assert solutions
    for board in solutions:
        cols = [line.index("Q") for line in board]
        assert all(line.count("Q") == 1 for line in board)
        assert len(set(cols)) == n
        assert len({r + c for r, c in enumerate(cols)}) == n
        assert len({r - c for r, c in enumerate(cols)}) == n
    assert len({tuple(b) for b in solutions}) == len(solutions)


def test_n_queens_four_count():
    assert len(n_queens(4)) == 2


@pytest.mark.parametrize("n", [2, 3])
def test_n_queens_no_solution(n):
    assert n_queens(n) == []


@pytest.mark.parametrize("n,m", [(1, 1), (3, 3), (2, 5), (4, 6)])
def test_grid_ways(n, m):
    assert grid_ways(n, m) == math.comb(n + m - 2, n - 1)


def test_is_safe_digit():
    assert is_safe_digit(SAMPLE_SUDOKU, 0, 0, 8) is False  # row
    assert is_safe_digit(SAMPLE_SUDOKU, 0, 0, 4) is False  # column
    assert is_safe_digit(SAMPLE_SUDOKU, 0, 1, 3) is False  # box
    assert is_safe_digit(SAMPLE_SUDOKU, 0, 0, 2) is True


def test_solve_sudoku_sample():
    original = copy.deepcopy(SAMPLE_SUDOKU)
    solved = solve_sudoku(SAMPLE_SUDOKU)
    assert SAMPLE_SUDOKU == original
    assert solved is not None
    digits = set(range(1, 10))
    for row in solved:
        assert set(row) == digits
    for col in range(9):
        assert {solved[r][col] for r in range(9)} == digits
    for br in range(0, 9, 3):
        for bc in range(0, 9, 3):
            box = {solved[r][c] for r in range(br, br + 3) for c in range(bc, bc + 3)}
            assert box == digits
    for r in range(9):
        for c in range(9):
            if original[r][c]:
                assert solved[r][c] == original[r][c]


def test_solve_sudoku_unsolvable():
    grid = [[0] * 9 for _ in range(9)]
    grid[0] = [0, 1, 2, 3, 4, 5, 6, 7, 8]
    grid[1][0] = 9
    assert solve_sudoku(grid) is None


def test_solve_sudoku_bad_shape():
    with pytest.raises(ValueError):
        solve_sudoku([[0] * 9] * 8)


def test_find_paths_sample():
    assert find_paths(SAMPLE_MAZE) == ["DDRDRR", "DRDDRR"]


def test_find_paths_are_valid_walks():
    maze = [[1, 1, 1], [1, 1, 1], [1, 1, 1]]
    paths = find_paths(maze)
    assert len(set(paths)) == len(paths)
    for path in paths:
        cells = _follow(maze, path)
        assert cells[-1] == (2, 2)
        assert len(set(cells)) == len(cells)
        assert all(0 <= r < 3 and 0 <= c < 3 for r, c in cells)


def test_find_paths_blocked_start():
    maze = [[0, 1], [1, 1]]
    assert find_paths(maze) == []


def test_find_paths_single_cell():
    assert find_paths([[1]]) == [""]


def test_find_paths_non_square():
    with pytest.raises(ValueError):
        find_paths([[1, 1], [1]])


def test_find_paths_in_place_matches_and_restores():
    maze = copy.deepcopy(SAMPLE_MAZE)
    assert find_paths_in_place(maze) == find_paths(SAMPLE_MAZE)
    assert maze == SAMPLE_MAZE


def test_find_paths_in_place_open_grid():
    maze = [[1] * 3 for _ in range(3)]
    assert find_paths_in_place(maze) == find_paths([[1] * 3 for _ in range(3)])
    assert maze == [[1] * 3 for _ in range(3)]