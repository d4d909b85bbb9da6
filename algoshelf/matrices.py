"""Algorithms over square and rectangular grids."""

from __future__ import annotations

from collections.abc import Sequence


def rotate(matrix: list[list[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    n = len(matrix)
    for i in range(n):
        for j in range(i + 1, n):
            matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]
    for row in matrix:
        row.reverse()


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Items of a matrix in clockwise spiral order from the top left."""
    if not matrix or not matrix[0]:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    result: list[int] = []
    while top <= bottom and left <= right:
        result.extend(matrix[top][left:right + 1])
        top += 1
        result.extend(matrix[row][right] for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][col] for col in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
            left += 1
    return result


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    if not matrix or not matrix[0]:
        return
    rows, cols = len(matrix), len(matrix[0])
    first_row = any(value == 0 for value in matrix[0])
    first_col = any(row[0] == 0 for row in matrix)
    for i in range(1, rows):
        for j in range(1, cols):
            if matrix[i][j] == 0:
                matrix[i][0] = 0
                matrix[0][j] = 0
    for i in range(1, rows):
        for j in range(1, cols):
            if matrix[i][0] == 0 or matrix[0][j] == 0:
                matrix[i][j] = 0
    if first_row:
        matrix[0][:] = [0] * cols
    if first_col:
        for row in matrix:
            row[0] = 0


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Whether ``target`` is in a matrix sorted along rows and columns."""
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value > target:
            col -= 1
        else:
            row += 1
    return False


def solve_n_queens(n: int) -> list[list[str]]:
    """Every placement of ``n`` non-attacking queens, as rows of 'Q' and '.'."""
    solutions: list[list[str]] = []
    columns: list[int] = []
    used_cols: set[int] = set()
    used_diag: set[int] = set()
    used_anti: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            solutions.append(["." * c + "Q" + "." * (n - c - 1) for c in columns])
            return
        for col in range(n):
            if col in used_cols or row - col in used_diag or row + col in used_anti:
                continue
            columns.append(col)
            used_cols.add(col)
            used_diag.add(row - col)
            used_anti.add(row + col)
            place(row + 1)
            columns.pop()
            used_cols.discard(col)
            used_diag.discard(row - col)
            used_anti.discard(row + col)

    place(0)
    return solutions