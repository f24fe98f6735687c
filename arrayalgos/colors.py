"""Dutch national flag sort of 0, 1 and 2 values."""

from typing import MutableSequence


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in a single pass.

    Any value other than 0 or 1 is treated as 2.
    """
    low = mid = 0
    high = len(nums) - 1
    while mid <= high:
        value = nums[mid]
        if value == 1:
            mid += 1
        elif value == 0:
            nums[mid], nums[low] = nums[low], nums[mid]
            low += 1
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1