"""In-place and scanning exercises on integer lists."""

from collections import Counter
from heapq import merge as _heap_merge
from itertools import groupby


def remove_duplicates(nums: list[int]) -> int:
    """Compact the distinct values of sorted ``nums`` to its front, in place.

    Returns the number ``k`` of distinct values. ``nums[:k]`` then holds them
    in their original order, and the elements after index ``k`` are left as
    they were.
    """
    distinct = [value for value, _ in groupby(nums)]
    nums[: len(distinct)] = distinct
    return len(distinct)


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` steps, in place.

    ``k`` is reduced modulo the length of the list. An empty list has no
    rotation and raises ValueError.
    """
    if not nums:
        raise ValueError("cannot rotate an empty list")
    split = len(nums) - k % len(nums)
    nums[:] = nums[split:] + nums[:split]


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end of ``nums`` in place, keeping the other values in order."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def merge(nums1: list[int], m: int, nums2: list[int], n: int) -> None:
    """Merge sorted ``nums2[:n]`` into sorted ``nums1[:m]``, filling ``nums1[:m + n]``.

    ``nums1`` must have room for ``m + n`` values; anything it holds past
    that point is left alone.
    """
    if m < 0 or n < 0:
        raise ValueError("m and n must be non-negative")
    if len(nums1) < m + n:
        raise ValueError(f"nums1 has length {len(nums1)}, needs room for {m + n} values")
    if len(nums2) < n:
        raise ValueError(f"nums2 has length {len(nums2)}, fewer than n={n}")
    nums1[: m + n] = list(_heap_merge(nums1[:m], nums2[:n]))


def missing_number(nums: list[int]) -> int:
    """Return the one value of ``0..len(nums)`` that is absent from ``nums``."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def check_sorted_rotated(nums: list[int]) -> bool:
    """Return True if ``nums`` is a non-decreasing list rotated by some amount."""
    successors = nums[1:] + nums[:1]
    descents = sum(1 for current, following in zip(nums, successors) if current > following)
    return descents <= 1


def find_max_consecutive_ones(nums: list[int]) -> int:
    """Return the length of the longest run of 1s in ``nums``."""
    return max(
        (sum(1 for _ in run) for value, run in groupby(nums) if value == 1),
        default=0,
    )


def sort_colors_counting(nums: list[int]) -> None:
    """Sort a list of colours 0, 1 and 2 in place by counting them.

    Any value other than 0 or 1 is counted as a 2.
    """
    counts = Counter(nums)
    zeros, ones = counts[0], counts[1]
    nums[:] = [0] * zeros + [1] * ones + [2] * (len(nums) - zeros - ones)


def sort_colors(nums: list[int]) -> None:
    """Sort a list of colours 0, 1 and 2 in place in a single Dutch-flag pass.

    Values other than 0 and 1 are kept and gathered at the end.
    """
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        colour = nums[mid]
        if colour == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif colour == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1