"""Binary searches over sorted, rotated and unimodal sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence


def find_first(nums: Sequence[int], target: int) -> int:
    """Return the first index of ``target`` in sorted ``nums``, or -1."""
    index = bisect_left(nums, target)
    if index < len(nums) and nums[index] == target:
        return index
    return -1


def find_last(nums: Sequence[int], target: int) -> int:
    """Return the last index of ``target`` in sorted ``nums``, or -1."""
    index = bisect_right(nums, target) - 1
    if index >= 0 and nums[index] == target:
        return index
    return -1


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first and last index of ``target`` in sorted ``nums``.

    Both are -1 when the target is absent.
    """
    first = find_first(nums, target)
    if first == -1:
        return (-1, -1)
    return (first, find_last(nums, target))


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of an element strictly greater than its neighbours.

    Positions outside the sequence count as minus infinity.
    """
    if not nums:
        raise ValueError("cannot find a peak in an empty sequence")
    low, high = 0, len(nums) - 1
    while low < high:
        mid = (low + high) // 2
        if nums[mid] < nums[mid + 1]:
            low = mid + 1
        else:
            high = mid
    return low


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted sequence, or -1."""
    start, end = 0, len(nums) - 1
    while start <= end:
        mid = (start + end) // 2
        if nums[mid] == target:
            return mid
        if nums[start] <= nums[mid]:
            if nums[start] <= target < nums[mid]:
                end = mid - 1
            else:
                start = mid + 1
        elif nums[mid] < target <= nums[end]:
            start = mid + 1
        else:
            end = mid - 1
    return -1