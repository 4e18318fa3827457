# dsakit

Small, dependency-free implementations of well-known algorithm problems.

## Installation

```
pip install .
```

## Library usage

```python
from dsakit.coins import coin_change
from dsakit.knapsack import knapsack
from dsakit.lis import longest_increasing_subsequence
from dsakit.searching import (
    find_first, find_last, search_range, find_peak_element, search_rotated,
)
from dsakit.kth import kth_largest
from dsakit.spiral import generate_matrix
from dsakit.sudoku import is_valid_sudoku

coin_change([1, 2, 5], 11)                           # 3  (5 + 5 + 1); -1 if impossible
knapsack(4, [4, 5, 1], [1, 2, 3])                    # 3  (each item at most once)
longest_increasing_subsequence([10, 9, 2, 5, 3, 7, 101, 18])  # 4
find_first([5, 7, 7, 8, 8, 10], 8)                   # 3; -1 when absent
find_last([5, 7, 7, 8, 8, 10], 8)                    # 4; -1 when absent
search_range([5, 7, 7, 8, 8, 10], 8)                 # (3, 4); (-1, -1) when absent
find_peak_element([1, 2, 3, 1])                      # 2
search_rotated([4, 5, 6, 7, 0, 1, 2], 0)             # 4; -1 when absent
kth_largest([3, 2, 1, 5, 6, 4], 2)                   # 5
generate_matrix(3)                                   # [[1, 2, 3], [8, 9, 4], [7, 6, 5]]
is_valid_sudoku(board)                               # True / False; "." marks empty cells
```

Notes on inputs:

- `coin_change` raises `ValueError` for a negative amount or a non-positive coin.
- `knapsack` raises `ValueError` for a negative capacity, a negative weight,
  or weights and values of different lengths.
- `find_first`, `find_last` and `search_range` expect `nums` sorted ascending.
- `find_peak_element` raises `ValueError` on an empty sequence.
- `kth_largest` counts duplicates separately and raises `ValueError` unless
  `1 <= k <= len(nums)`.
- `generate_matrix` raises `ValueError` for a negative size; `generate_matrix(0)` is `[]`.
- `is_valid_sudoku` checks only filled cells of the first 9 rows and columns for
  repeats in rows, columns and 3 x 3 boxes; it does not check that the board is solvable.

## Command line

`dsakit-knapsack` solves 0/1 knapsack instances read from standard input.
The first line gives the number of test cases; each case is three lines:

1. the capacity,
2. the item values,
3. the item weights.

The best total value for each case is printed on its own line.

```
$ printf '1\n4\n1 2 3\n4 5 1\n' | dsakit-knapsack
3
```

The other routines are available only as library functions; there is no
command for them.

## Running the tests

```
pip install .[test]
pytest
```