"""Find the repeated and the missing value in a list of 1..n."""

from collections import Counter
from collections.abc import Sequence

_NOT_FOUND = -1


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def find_repeating_missing(arr: Sequence[int]) -> tuple[int, int]:
    """Return ``(repeating, missing)`` by counting occurrences.

    The values are expected in ``1..len(arr)``; either result is -1 when
    no such number is found.
    """
    counts = Counter(arr)
    repeating = missing = _NOT_FOUND
    for num in range(1, len(arr) + 1):
        if num not in counts:
            missing = num
        elif counts[num] == 2:
            repeating = num
        if repeating != _NOT_FOUND and missing != _NOT_FOUND:
            break
    return repeating, missing


def find_repeating_missing_math(arr: Sequence[int]) -> tuple[int, int]:
    """Return ``(repeating, missing)`` from the sums of values and squares.

    Raises ValueError when the sums match those of ``1..n``, as then no
    single repeated/missing pair can be derived.
    """
    n = len(arr)
    sum_diff = n * (n + 1) // 2 - sum(arr)
    square_diff = n * (n + 1) * (2 * n + 1) // 6 - sum(x * x for x in arr)
    if sum_diff == 0:
        raise ValueError("the list has no repeating and missing pair")
    pair_sum = _trunc_div(square_diff, sum_diff)
    missing = _trunc_div(pair_sum + sum_diff, 2)
    repeating = _trunc_div(pair_sum - sum_diff, 2)
    return repeating, missing