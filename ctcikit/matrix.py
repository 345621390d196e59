"""In-place matrix puzzles: rotation and zero propagation."""

from __future__ import annotations

__all__ = ["rotate_matrix", "set_zeros", "zero_matrix"]


def rotate_matrix(matrix: list[list[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise in place.

    Raises ValueError if the matrix is empty or not square.
    """
    size = len(matrix)
    if size == 0 or any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    matrix[:] = [list(row) for row in zip(*reversed(matrix))]


def set_zeros(matrix: list[list[int]], row: int, column: int) -> None:
    """Set every cell of ``row`` and of ``column`` to zero, in place."""
    matrix[row] = [0 for _ in matrix[row]]
    for line in matrix:
        line[column] = 0


def zero_matrix(matrix: list[list[int]]) -> None:
    """Zero the row and column of every cell that holds zero, in place."""
    zeros = [
        (r, c)
        for r, line in enumerate(matrix)
        for c, value in enumerate(line)
        if value == 0
    ]
    for row, column in zeros:
        set_zeros(matrix, row, column)