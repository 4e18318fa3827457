"""Validity check for partially filled 9 x 9 sudoku boards."""

from __future__ import annotations

from collections.abc import Sequence

EMPTY = "."


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Return True if no filled digit repeats in any row, column or 3 x 3 box."""
    seen: set[tuple[str, int, str]] = set()
    for i, row in enumerate(board[:9]):
        for j, cell in enumerate(row[:9]):
            if cell == EMPTY:
                continue
            keys = (
                ("row", i, cell),
                ("col", j, cell),
                ("box", (i // 3) * 3 + j // 3, cell),
            )
            if any(key in seen for key in keys):
                return False
            seen.update(keys)
    return True