"""Backtracking exercises: subsets, permutations, N-queens, grid walks, sudoku, mazes."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence, Sequence
from functools import lru_cache

QUEEN = "Q"
EMPTY = "."

_MOVES = (("D", 1, 0), ("U", -1, 0), ("L", 0, -1), ("R", 0, 1))


def change_array(n: int) -> tuple[list[int], list[int]]:
    """Fill an array recursively, then change every slot while backtracking.

    Going down, slot ``i`` is set to ``i + 1``; coming back up, each slot is
    reduced by 2. Returns the array as seen at the deepest call and the array
    after every call has returned.
    """
    if n < 0:
        raise ValueError("size must not be negative")
    values = [0] * n
    deepest: list[int] = []

    def fill(i: int) -> None:
        if i == n:
            deepest.extend(values)
            return
        values[i] = i + 1
        fill(i + 1)
        values[i] -= 2

    fill(0)
    return deepest, values


def all_subsets(text: str) -> Iterator[str]:
    """Yield every subsequence of ``text``, excluding each character before including it."""

    def walk(i: int, chosen: str) -> Iterator[str]:
        if i == len(text):
            yield chosen
            return
        yield from walk(i + 1, chosen)
        yield from walk(i + 1, chosen + text[i])

    yield from walk(0, "")


def all_permutations(text: str) -> Iterator[str]:
    """Yield every arrangement of the characters of ``text``, picking each position in turn."""

    def walk(rest: str, built: str) -> Iterator[str]:
        if not rest:
            yield built
            return
        for i, ch in enumerate(rest):
            yield from walk(rest[:i] + rest[i + 1 :], built + ch)

    yield from walk(text, "")


def is_safe_queen(board: Sequence[Sequence[str]], row: int, col: int) -> bool:
    """Return whether a queen at ``(row, col)`` is attacked by one placed earlier.

    Checks the cells to its left in the same row, the cells above it in the
    same column, and both upward diagonals.
    """
    n = len(board)
    if any(board[row][j] == QUEEN for j in range(col)):
        return False
    if any(board[i][col] == QUEEN for i in range(row)):
        return False
    i, j = row - 1, col - 1
    while i >= 0 and j >= 0:
        if board[i][j] == QUEEN:
            return False
        i -= 1
        j -= 1
    i, j = row - 1, col + 1
    while i >= 0 and j < n:
        if board[i][j] == QUEEN:
            return False
        i -= 1
        j += 1
    return True


def n_queens(n: int) -> list[list[str]]:
    """Every placement of ``n`` non-attacking queens, one queen per row.

    Each solution is a list of row strings using ``Q`` and ``.``.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    board = [[EMPTY] * n for _ in range(n)]
    solutions: list[list[str]] = []

    def place(row: int) -> None:
        if row == n:
            solutions.append(["".join(line) for line in board])
            return
        for col in range(n):
            if is_safe_queen(board, row, col):
                board[row][col] = QUEEN
                place(row + 1)
                board[row][col] = EMPTY

    place(0)
    return solutions


def grid_ways(n: int, m: int) -> int:
    """Number of right/down paths from the top-left to the bottom-right of an ``n`` x ``m`` grid."""

    @lru_cache(maxsize=None)
    def ways(i: int, j: int) -> int:
        if i == n - 1 and j == m - 1:
            return 1
        if i >= n or j >= m:
            return 0
        return ways(i, j + 1) + ways(i + 1, j)

    return ways(0, 0)


def is_safe_digit(grid: Sequence[Sequence[int]], row: int, col: int, value: int) -> bool:
    """Return whether ``value`` is absent from the row, column and 3x3 box of ``(row, col)``."""
    if any(grid[i][col] == value for i in range(9)):
        return False
    if value in grid[row]:
        return False
    sr, sc = (row // 3) * 3, (col // 3) * 3
    return all(
        grid[i][j] != value for i in range(sr, sr + 3) for j in range(sc, sc + 3)
    )


def solve_sudoku(grid: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Solve a 9x9 sudoku where 0 marks a blank; return the filled grid or ``None``.

    The given grid is left unchanged.
    """
    if len(grid) != 9 or any(len(line) != 9 for line in grid):
        raise ValueError("sudoku grid must be 9 x 9")
    work = [list(line) for line in grid]

    def solve(row: int, col: int) -> bool:
        if row == 9:
            return True
        next_row, next_col = (row + 1, 0) if col == 8 else (row, col + 1)
        if work[row][col] != 0:
            return solve(next_row, next_col)
        for digit in range(1, 10):
            if is_safe_digit(work, row, col, digit):
                work[row][col] = digit
                if solve(next_row, next_col):
                    return True
                work[row][col] = 0
        return False

    return work if solve(0, 0) else None


def _check_square(maze: Sequence[Sequence[int]]) -> int:
    n = len(maze)
    if any(len(line) != n for line in maze):
        raise ValueError("maze must be square")
    return n


def find_paths(maze: Sequence[Sequence[int]]) -> list[str]:
    """All paths from the top-left to the bottom-right through open (non-zero) cells.

    Moves are tried in the order down, up, left, right and no cell is visited
    twice on one path.
    """
    n = _check_square(maze)
    visited = [[False] * n for _ in range(n)]
    paths: list[str] = []

    def walk(r: int, c: int, path: str) -> None:
        if not (0 <= r < n and 0 <= c < n) or maze[r][c] == 0 or visited[r][c]:
            return
        if r == n - 1 and c == n - 1:
            paths.append(path)
            return
        visited[r][c] = True
        for step, dr, dc in _MOVES:
            walk(r + dr, c + dc, path + step)
        visited[r][c] = False

    walk(0, 0, "")
    return paths


def find_paths_in_place(maze: MutableSequence[MutableSequence[int]]) -> list[str]:
    """Same paths as :func:`find_paths`, marking visited cells in the maze itself.

    Cells on the way are set to -1 and reset to 1 when the search leaves them.
    """
    n = _check_square(maze)
    paths: list[str] = []

    def walk(r: int, c: int, path: str) -> None:
        if not (0 <= r < n and 0 <= c < n) or maze[r][c] in (0, -1):
            return
        if r == n - 1 and c == n - 1:
            paths.append(path)
            return
        maze[r][c] = -1
        for step, dr, dc in _MOVES:
            walk(r + dr, c + dc, path + step)
        maze[r][c] = 1

    walk(0, 0, "")
    return paths