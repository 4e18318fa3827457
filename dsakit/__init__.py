"""Classic algorithm routines: dynamic programming, searching, matrices and Sudoku checks."""

__version__ = "0.1.0"
__all__ = ["coins", "knapsack", "lis", "searching", "kth", "spiral", "sudoku"]