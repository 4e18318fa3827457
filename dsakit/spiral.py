"""Square matrices filled in spiral order."""

from __future__ import annotations


def generate_matrix(n: int) -> list[list[int]]:
    """Return an n x n matrix holding 1..n*n in clockwise spiral order."""
    if n < 0:
        raise ValueError("size must not be negative")
    matrix = [[0] * n for _ in range(n)]
    values = iter(range(1, n * n + 1))
    top, bottom, left, right = 0, n - 1, 0, n - 1
    while top <= bottom and left <= right:
        for col in range(left, right + 1):
            matrix[top][col] = next(values)
        top += 1
        for row in range(top, bottom + 1):
            matrix[row][right] = next(values)
        right -= 1
        if top <= bottom:
            for col in range(right, left - 1, -1):
                matrix[bottom][col] = next(values)
            bottom -= 1
        if left <= right:
            for row in range(bottom, top - 1, -1):
                matrix[row][left] = next(values)
            left += 1
    return matrix