"""Length of the longest strictly increasing subsequence."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable


def longest_increasing_subsequence(nums: Iterable[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in nums:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)