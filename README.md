# arrayalgos

A small collection of well-known array and matrix algorithms, written in plain
Python with only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is included

| Module | Contents |
| --- | --- |
| `arrayalgos.repeat_missing` | `find_repeating_missing(arr)` counts occurrences and returns `(repeating, missing)` for a list whose values should be `1..len(arr)`; either value is `-1` if not found. `find_repeating_missing_math(arr)` derives the same pair from the sums of the values and of their squares, and raises `ValueError` when the sums equal those of `1..n`. |
| `arrayalgos.duplicate` | `find_duplicate(nums)`: the duplicate in a list of n + 1 values from `1..n`, found with Floyd's cycle detection. Raises `ValueError` on an empty list. |
| `arrayalgos.subarray` | `kadane(nums)` returns a `MaxSubarray` with `total`, `start` and `end` (inclusive); among runs of equal sum the first one found is kept. `MaxSubarray.elements(nums)` returns the run itself. `max_suffix_sum(nums)` returns the largest sum of `nums[i:]` over all `i`. Both raise `ValueError` on an empty list. |
| `arrayalgos.intervals` | `merge_intervals(intervals)`: sorts `(start, end)` pairs and merges overlapping ones; intervals that touch at an end point are merged too. |
| `arrayalgos.merge_sorted` | `merge_sorted_arrays(first, second)`: merges two sorted lists in place, leaving the smallest `len(first)` values in `first` and the rest in `second`. |
| `arrayalgos.permutation` | `next_permutation(nums)`: rearranges a list in place into its next lexicographic permutation; the last one wraps around to ascending order. |
| `arrayalgos.pascal` | `pascal_triangle(n)`: the first `n` rows of Pascal's triangle; raises `ValueError` for negative `n`. |
| `arrayalgos.colors` | `sort_colors(nums)`: one-pass in-place sort of 0s, 1s and 2s (any other value is treated as 2). |
| `arrayalgos.stock` | `max_profit(prices)`: best profit from one buy and one later sell, or 0; raises `ValueError` on an empty list. |
| `arrayalgos.matrix` | `rotate_image` (90° clockwise, in place; `ValueError` if not square), `binary_search`, three searches of a sorted matrix (`search_matrix_linear`, `search_matrix_rows`, `search_matrix`), and three in-place ways to zero every row and column that holds a zero (`set_matrix_zero_copy`, `set_matrix_zero_marks`, `set_matrix_zero`). |

## Examples

```python
from arrayalgos.duplicate import find_duplicate
from arrayalgos.stock import max_profit
from arrayalgos.colors import sort_colors

find_duplicate([1, 3, 4, 2, 2])        # 2
max_profit([7, 1, 5, 3, 6, 4])         # 5 (buy at 1, sell at 6)

colors = [0, 2, 1, 2, 0, 1]
sort_colors(colors)
colors                                 # [0, 0, 1, 1, 2, 2]
```

The maximum-sum subarray and where it lies:

```python
from arrayalgos.subarray import kadane

nums = [-2, 1, -3, 4, -1, 2, 1, -5, 4]
best = kadane(nums)
best.total            # 6
best.start, best.end  # (3, 6)
best.elements(nums)   # [4, -1, 2, 1]
```

Rows of Pascal's triangle:

```python
from arrayalgos.pascal import pascal_triangle

for row in pascal_triangle(5):
    print(*row)
# 1
# 1 1
# 1 2 1
# 1 3 3 1
# 1 4 6 4 1
```

Searching a matrix whose rows are sorted and whose every row starts after the
previous one ends:

```python
from arrayalgos.matrix import search_matrix

grid = [[1, 3, 5, 7], [10, 11, 16, 20], [23, 30, 34, 60]]
search_matrix(grid, 3)    # True
search_matrix(grid, 13)   # False
```

## Command line

Installing the package provides an `arrayalgos` command with these
subcommands:

| Command | Does |
| --- | --- |
| `arrayalgos repeat-missing N...` | prints the repeating and the missing number; `--math` uses the sums method |
| `arrayalgos max-subarray N...` | prints the maximum subarray sum and the subarray; `--suffix` prints only the best suffix sum |
| `arrayalgos merge-intervals START END ...` | merges intervals given as start/end pairs |
| `arrayalgos pascal ROWS` | prints that many rows of Pascal's triangle |
| `arrayalgos stock PRICE...` | prints the best profit from one buy and one sell |

For example:

```
$ arrayalgos merge-intervals 1 3 2 6 8 10 15 18
Merged Intervals: [1, 6] [8, 10] [15, 18]
$ arrayalgos stock 7 1 5 3 6 4
Maximum profit that can be achieved: 5
```

Put `--` before a list that starts with a negative number. An input the
algorithm rejects is reported as `error: ...` with exit status 1; an odd
number of bounds to `merge-intervals` is a usage error.

See all options with:

```
arrayalgos --help
```

## Limits

The command line covers only the five subcommands above. Finding a duplicate,
merging sorted lists, next permutation, sorting colours and the matrix
functions are available from Python only.