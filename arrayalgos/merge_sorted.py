"""Merge two sorted lists without extra storage."""

from typing import MutableSequence


def merge_sorted_arrays(first: MutableSequence, second: MutableSequence) -> None:
    """Merge two sorted lists in place.

    Afterwards ``first`` holds the smallest ``len(first)`` values and
    ``second`` the rest, both in ascending order.
    """
    left = len(first) - 1
    right = 0
    while left >= 0 and right < len(second) and first[left] > second[right]:
        first[left], second[right] = second[right], first[left]
        left -= 1
        right += 1
    first[:] = sorted(first)
    second[:] = sorted(second)