"""The k-th largest element of a sequence."""

from __future__ import annotations

import heapq
from collections.abc import Sequence


def kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the k-th largest element, counting duplicates separately."""
    if not 1 <= k <= len(nums):
        raise ValueError("k must be between 1 and the number of elements")
    return heapq.nlargest(k, nums)[-1]