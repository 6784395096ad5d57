"""Exercises solved with hash maps and sets."""

from collections import Counter
from collections.abc import Iterable, Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return indices ``[i, j]`` with ``i < j`` and ``nums[i] + nums[j] == target``.

    Returns an empty list when no such pair exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return [seen[complement], index]
        seen[value] = index
    return []


def intersection(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Return the distinct values present in both inputs, in ascending order."""
    return sorted(set(nums1) & set(nums2))


def subarray_sum(nums: Iterable[int], k: int) -> int:
    """Count the contiguous non-empty subarrays whose elements sum to ``k``."""
    prefix_counts: Counter[int] = Counter({0: 1})
    running = 0
    count = 0
    for value in nums:
        running += value
        count += prefix_counts[running - k]
        prefix_counts[running] += 1
    return count