import copy

import pytest

from algoshelf.matrices import (
    rotate,
    search_matrix,
    set_zeroes,
    solve_n_queens,
    spiral_order,
)


def test_rotate_three_by_three():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    rotate(matrix)
    assert matrix == [[7, 4, 1], [8, 5, 2], [9, 6, 3]]


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_four_rotations_restore(n):
    original = [[r * n + c for c in range(n)] for r in range(n)]
    matrix = copy.deepcopy(original)
    for _ in range(4):
        rotate(matrix)
    assert matrix == original


def test_rotate_moves_first_row_to_last_column():
    original = [[r * 4 + c for c in range(4)] for r in range(4)]
    matrix = copy.deepcopy(original)
    rotate(matrix)
    assert [row[-1] for row in matrix] == original[0]


def test_spiral_three_by_three():
    assert spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == [1, 2, 3, 6, 9, 8, 7, 4, 5]


@pytest.mark.parametrize("rows, cols", [(1, 1), (1, 4), (4, 1), (3, 4), (4, 3), (5, 5)])
def test_spiral_visits_every_cell_once(rows, cols):
    matrix = [[r * cols + c for c in range(cols)] for r in range(rows)]
    result = spiral_order(matrix)
    assert sorted(result) == list(range(rows * cols))
    assert result[:cols] == matrix[0]


def test_spiral_single_column():
    assert spiral_order([[1], [2], [3]]) == [1, 2, 3]


def test_spiral_empty():
    assert spiral_order([]) == []


@pytest.mark.parametrize(
    "matrix",
    [
        [[1, 1, 1], [1, 0, 1], [1, 1, 1]],
        [[0, 1, 2, 0], [3, 4, 5, 2], [1, 3, 1, 5]],
        [[1, 2], [3, 4]],
        [[5, 0]],
    ],
)
def test_set_zeroes_invariant(matrix):
    original = copy.deepcopy(matrix)
    set_zeroes(matrix)
    zero_rows = {i for i, row in enumerate(original) if 0 in row}
    zero_cols = {j for row in original for j, v in enumerate(row) if v == 0}
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if i in zero_rows or j in zero_cols:
                assert value == 0
            else:
                assert value == original[i][j]


SORTED_GRID = [
    [1, 4, 7, 11, 15],
    [2, 5, 8, 12, 19],
    [3, 6, 9, 16, 22],
    [10, 13, 14, 17, 24],
    [18, 21, 23, 26, 30],
]


def test_search_matrix_finds_all():
    for row in SORTED_GRID:
        for value in row:
            assert search_matrix(SORTED_GRID, value) is True


@pytest.mark.parametrize("target", [0, 20, 25, 31])
def test_search_matrix_missing(target):
    assert search_matrix(SORTED_GRID, target) is False


def test_search_matrix_empty():
    assert search_matrix([], 1) is False


def _is_valid_board(board):
    n = len(board)
    positions = [(r, row.index("Q")) for r, row in enumerate(board)]
    cols = {c for _, c in positions}
    diag = {r - c for r, c in positions}
    anti = {r + c for r, c in positions}
    return (
        all(row.count("Q") == 1 and len(row) == n for row in board)
        and len(cols) == len(diag) == len(anti) == n
    )


@pytest.mark.parametrize("n", [1, 4, 5, 6])
def test_n_queens_solutions_are_valid_and_distinct(n):
    solutions = solve_n_queens(n)
    assert all(_is_valid_board(board) for board in solutions)
    assert len({tuple(board) for board in solutions}) == len(solutions)


def test_n_queens_four_has_two_solutions():
    assert len(solve_n_queens(4)) == 2


def test_n_queens_one():
    assert solve_n_queens(1) == [["Q"]]


@pytest.mark.parametrize("n", [2, 3])
def test_n_queens_impossible(n):
    assert solve_n_queens(n) == []


def test_n_queens_solutions_in_lexicographic_column_order():
    solutions = solve_n_queens(6)
    keys = [[row.index("Q") for row in board] for board in solutions]
    assert keys == sorted(keys)