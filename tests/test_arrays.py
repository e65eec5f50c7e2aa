import pytest

from dsakit.arrays import diagonal_sum, spiral_order, staircase_search, trap

SQUARE = [
    [1, 2, 3, 4],
    [5, 6, 7, 8],
    [9, 10, 11, 12],
    [13, 14, 15, 16],
]

STAIRCASE = [
    [10, 20, 30, 40],
    [15, 25, 35, 45],
    [27, 29, 37, 48],
    [32, 33, 39, 50],
]


def test_spiral_square_matches_documented_order():
    assert spiral_order(SQUARE) == [1, 2, 3, 4, 8, 12, 16, 15, 14, 13, 9, 5, 6, 7, 11, 10]


@pytest.mark.parametrize(
    "matrix",
    [
        [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]],
        [[1], [2], [3]],
        [[1, 2, 3]],
        [[7]],
    ],
)
def test_spiral_visits_every_element_once(matrix):
    result = spiral_order(matrix)
    flat = [x for row in matrix for x in row]
    assert sorted(result) == sorted(flat)
    assert result[: len(matrix[0])] == list(matrix[0])


def test_spiral_empty():
    assert spiral_order([]) == []


def test_staircase_search_found():
    position = staircase_search(STAIRCASE, 33)
    assert position is not None
    i, j = position
    assert STAIRCASE[i][j] == 33


@pytest.mark.parametrize("key", [10, 20, 37, 50, 27])
def test_staircase_search_finds_each_present_key(key):
    i, j = staircase_search(STAIRCASE, key)
    assert STAIRCASE[i][j] == key


@pytest.mark.parametrize("key", [100, 5, 26])
def test_staircase_search_missing(key):
    assert staircase_search(STAIRCASE, key) is None


def test_diagonal_sum_square():
    assert diagonal_sum(SQUARE) == 68


def test_diagonal_sum_odd_counts_centre_once():
    matrix = [[1, 0, 1], [0, 5, 0], [1, 0, 1]]
    assert diagonal_sum(matrix) == sum(x for row in matrix for x in row)


def test_diagonal_sum_rejects_non_square():
    with pytest.raises(ValueError):
        diagonal_sum([[1, 2, 3], [4, 5, 6]])


def test_trap_example():
    assert trap([4, 2, 0, 6, 3, 2, 5]) == 11


def test_trap_three_bars():
    assert trap([5, 2, 7]) == 3


@pytest.mark.parametrize("height", [[1, 2, 3, 4], [4, 3, 2, 1], [3], [3, 1], []])
def test_trap_no_water(height):
    assert trap(height) == 0


def test_trap_is_mirror_symmetric():
    height = [0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]
    assert trap(height) == trap(list(reversed(height)))