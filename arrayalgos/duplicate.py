"""Find the duplicated value with Floyd's cycle detection."""

from collections.abc import Sequence


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the duplicated value of ``nums``.

    ``nums`` holds n + 1 values, each in ``1..n``. The list is treated as a
    linked list (index -> value) and the cycle entrance is the duplicate.
    """
    if not nums:
        raise ValueError("find_duplicate() requires a non-empty sequence")

    slow = nums[nums[0]]
    fast = nums[nums[nums[0]]]
    while slow != fast:
        slow = nums[slow]
        fast = nums[nums[fast]]

    slow = nums[0]
    while slow != fast:
        slow = nums[slow]
        fast = nums[fast]
    return fast