"""Matrix multiplication and traversal."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def _shape(matrix: Matrix) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return rows, cols


def matrix_multiply(a: Matrix, b: Matrix) -> list[list[int]]:
    """Product of ``a`` and ``b``; their inner dimensions must agree."""
    rows_a, cols_a = _shape(a)
    rows_b, cols_b = _shape(b)
    if cols_a != rows_b:
        raise ValueError(
            f"cannot multiply {rows_a}x{cols_a} by {rows_b}x{cols_b} matrix"
        )
    columns = list(zip(*b))
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns]
        if columns
        else [0] * cols_b
        for row in a
    ]


def format_matrix(matrix: Matrix) -> str:
    """One line per row, each value right-aligned in two places."""
    _shape(matrix)
    return "\n".join(" ".join(f"{value:2d}" for value in row) for row in matrix)


def zigzag(matrix: Matrix) -> list[int]:
    """Values row by row, running every second row right to left."""
    _shape(matrix)
    values: list[int] = []
    for index, row in enumerate(matrix):
        values.extend(reversed(row) if index % 2 else row)
    return values


def diagonals(matrix: Matrix) -> tuple[list[int], list[int]]:
    """The main and the anti-diagonal of a square matrix."""
    rows, cols = _shape(matrix)
    if rows != cols:
        raise ValueError("it is not square matrix")
    main = [matrix[i][i] for i in range(rows)]
    anti = [matrix[i][cols - i - 1] for i in range(rows)]
    return main, anti