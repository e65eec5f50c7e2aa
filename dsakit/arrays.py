"""Two-dimensional array walks and the trapping-rain-water problem."""

from __future__ import annotations

from collections.abc import Sequence


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of a rectangular matrix in clockwise spiral order."""
    if not matrix:
        return []
    result: list[int] = []
    srow, scol = 0, 0
    erow, ecol = len(matrix) - 1, len(matrix[0]) - 1
    while srow <= erow and scol <= ecol:
        result.extend(matrix[srow][j] for j in range(scol, ecol + 1))
        result.extend(matrix[i][ecol] for i in range(srow + 1, erow + 1))
        if erow > srow:
            result.extend(matrix[erow][j] for j in range(ecol - 1, scol - 1, -1))
        if ecol > scol:
            result.extend(matrix[i][scol] for i in range(erow - 1, srow, -1))
        srow += 1
        scol += 1
        erow -= 1
        ecol -= 1
    return result


def staircase_search(matrix: Sequence[Sequence[int]], key: int) -> tuple[int, int] | None:
    """Find ``key`` in a row- and column-sorted matrix.

    Starts at the top-right corner and returns the ``(row, column)`` where the
    key was found, or ``None`` if it is absent.
    """
    if not matrix:
        return None
    rows = len(matrix)
    i, j = 0, len(matrix[0]) - 1
    while i < rows and j >= 0:
        value = matrix[i][j]
        if value == key:
            return i, j
        if value > key:
            j -= 1
        else:
            i += 1
    return None


def diagonal_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Sum the primary and secondary diagonals of a square matrix.

    The centre element of an odd-sized matrix is counted once.
    """
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("diagonal_sum needs a square matrix")
    total = 0
    for i, row in enumerate(matrix):
        total += row[i]
        if n - 1 - i != i:
            total += row[n - 1 - i]
    return total


def _is_sorted(values: Sequence[int], descending: bool = False) -> bool:
    pairs = zip(values, values[1:])
    if descending:
        return all(a >= b for a, b in pairs)
    return all(a <= b for a, b in pairs)


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map ``height`` can hold."""
    n = len(height)
    if n in (1, 2):
        return 0
    if _is_sorted(height) or _is_sorted(height, descending=True):
        return 0
    if n == 3:
        return max(min(height[0], height[2]) - height[1], 0)

    left_max = [height[0]]
    for prev in height[:-1]:
        left_max.append(max(left_max[-1], prev))

    right_max = [height[-1]]
    for nxt in reversed(height[1:]):
        right_max.append(max(right_max[-1], nxt))
    right_max.reverse()

    return sum(
        max(min(left, right) - h, 0)
        for left, right, h in zip(left_max, right_max, height)
    )