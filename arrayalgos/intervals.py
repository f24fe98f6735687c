"""Merging of overlapping closed intervals."""

from collections.abc import Iterable


def merge_intervals(intervals: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Return the intervals merged into sorted, non-overlapping ones.

    Intervals that touch at an end point are merged.
    """
    merged: list[tuple[int, int]] = []
    for start, end in sorted(intervals):
        if not merged or merged[-1][1] < start:
            merged.append((start, end))
        else:
            last_start, last_end = merged[-1]
            merged[-1] = (last_start, max(last_end, end))
    return merged