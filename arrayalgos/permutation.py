"""Lexicographic successor of a permutation."""

from typing import MutableSequence


def next_permutation(nums: MutableSequence) -> None:
    """Rearrange ``nums`` in place into its next lexicographic permutation.

    The last permutation wraps around to the first (ascending order).
    """
    pivot = next(
        (i - 1 for i in range(len(nums) - 1, 0, -1) if nums[i] > nums[i - 1]),
        -1,
    )
    if pivot != -1:
        swap = next(
            j for j in range(len(nums) - 1, pivot, -1) if nums[j] > nums[pivot]
        )
        nums[pivot], nums[swap] = nums[swap], nums[pivot]
    nums[pivot + 1 :] = nums[pivot + 1 :][::-1]