"""Maximum sums over contiguous parts of a list."""

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import accumulate


@dataclass(frozen=True)
class MaxSubarray:
    """The best contiguous run: its sum and inclusive bounds."""

    total: int
    start: int
    end: int

    def elements(self, nums: Sequence[int]) -> list[int]:
        """Return the run taken from ``nums``."""
        return list(nums[self.start : self.end + 1])


def max_suffix_sum(nums: Sequence[int]) -> int:
    """Return the largest sum of ``nums[i:]`` over all start positions."""
    if not nums:
        raise ValueError("max_suffix_sum() requires a non-empty sequence")
    return max(accumulate(reversed(nums)))


def kadane(nums: Sequence[int]) -> MaxSubarray:
    """Return the maximum-sum contiguous run of ``nums``.

    Among runs of equal sum, the first one reached is kept.
    """
    if not nums:
        raise ValueError("kadane() requires a non-empty sequence")

    best: MaxSubarray | None = None
    current = 0
    start = 0
    for index, value in enumerate(nums):
        if current == 0:
            start = index
        current += value
        if best is None or current > best.total:
            best = MaxSubarray(current, start, index)
        if current < 0:
            current = 0
    assert best is not None
    return best