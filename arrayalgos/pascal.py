"""Rows of Pascal's triangle."""

from itertools import pairwise


def pascal_triangle(n: int) -> list[list[int]]:
    """Return the first ``n`` rows of Pascal's triangle."""
    if n < 0:
        raise ValueError("number of rows must not be negative")
    rows: list[list[int]] = []
    for i in range(n):
        if i == 0:
            rows.append([1])
        else:
            rows.append([1, *(a + b for a, b in pairwise(rows[-1])), 1])
    return rows