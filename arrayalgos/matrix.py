"""Rotation, search and zeroing on rectangular integer matrices."""

from bisect import bisect_left
from collections.abc import Sequence
from typing import MutableSequence


def _require_square(matrix: Sequence[Sequence[int]]) -> None:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")


def rotate_image(matrix: MutableSequence[MutableSequence[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise in place.

    The matrix is transposed and then every row is reversed.
    """
    _require_square(matrix)
    rotated = [list(reversed(column)) for column in zip(*matrix)]
    for row, new_row in zip(matrix, rotated):
        row[:] = new_row


def binary_search(nums: Sequence[int], target: int) -> bool:
    """Return whether ``target`` occurs in the ascending sequence ``nums``."""
    index = bisect_left(nums, target)
    return index < len(nums) and nums[index] == target


def _is_empty(matrix: Sequence[Sequence[int]]) -> bool:
    return not matrix or not matrix[0]


def search_matrix_linear(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Search a row-wise sorted matrix by scanning.

    The first row whose last value is not below ``target`` is the only
    one that is scanned.
    """
    if _is_empty(matrix):
        return False
    candidate = next((row for row in matrix if target <= row[-1]), None)
    if candidate is None:
        return False
    return target in candidate


def search_matrix_rows(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Search a sorted matrix by picking the row whose range holds ``target``.

    The chosen row is then searched with a binary search.
    """
    if _is_empty(matrix):
        return False
    candidate = next(
        (row for row in matrix if row[0] <= target <= row[-1]), None
    )
    return candidate is not None and binary_search(candidate, target)


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Search a sorted matrix with one binary search over all its cells.

    The matrix is read row after row as a single ascending sequence.
    """
    if _is_empty(matrix):
        return False
    width = len(matrix[0])
    low, high = 0, len(matrix) * width - 1
    while low <= high:
        mid = (low + high) // 2
        row, col = divmod(mid, width)
        value = matrix[row][col]
        if value == target:
            return True
        if value <= target:
            low = mid + 1
        else:
            high = mid - 1
    return False


def set_matrix_zero_copy(matrix: MutableSequence[MutableSequence[int]]) -> None:
    """Zero every row and column holding a zero, working on a copy.

    The zeroes are applied to a copy so that newly written zeroes never
    spread further; the copy then replaces the contents of ``matrix``.
    """
    if _is_empty(matrix):
        return
    snapshot = [list(row) for row in matrix]
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if value == 0:
                snapshot[i] = [0] * len(row)
                for other in snapshot:
                    other[j] = 0
    for row, new_row in zip(matrix, snapshot):
        row[:] = new_row


def set_matrix_zero_marks(matrix: MutableSequence[MutableSequence[int]]) -> None:
    """Zero every row and column holding a zero, using row and column marks."""
    if _is_empty(matrix):
        return
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        for j in range(len(row)):
            if i in zero_rows or j in zero_cols:
                row[j] = 0


def set_matrix_zero(matrix: MutableSequence[MutableSequence[int]]) -> None:
    """Zero every row and column holding a zero, with no extra storage.

    The first row and column serve as markers for the rest of the matrix.
    """
    if _is_empty(matrix):
        return
    header = matrix[0]
    first_row_zero = 0 in header
    first_col_zero = any(row[0] == 0 for row in matrix)

    for row in matrix[1:]:
        for j in range(1, len(row)):
            if row[j] == 0:
                row[0] = 0
                header[j] = 0

    for row in matrix[1:]:
        for j in range(1, len(row)):
            if row[0] == 0 or header[j] == 0:
                row[j] = 0

    if first_row_zero:
        header[:] = [0] * len(header)
    if first_col_zero:
        for row in matrix:
            row[0] = 0