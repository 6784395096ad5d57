"""Maximum-sum contiguous subarray, by brute force and by Kadane's algorithm."""

from collections.abc import Sequence
from itertools import accumulate
from typing import NamedTuple


class Span(NamedTuple):
    """A best subarray: its sum and the inclusive indices where it starts and ends."""

    total: int
    start: int
    end: int


def _require_values(nums: Sequence[int]) -> None:
    if not nums:
        raise ValueError("maximum subarray of an empty sequence is undefined")


def max_subarray_brute(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray, trying every start."""
    _require_values(nums)
    return max(max(accumulate(nums[start:])) for start in range(len(nums)))


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray in linear time."""
    return max_subarray_span(nums).total


def max_subarray_span(nums: Sequence[int]) -> Span:
    """Return the largest subarray sum with its inclusive start and end indices.

    Of several subarrays with the same best sum, the one that ends first wins.
    """
    _require_values(nums)
    best: Span | None = None
    running = 0
    candidate_start = 0
    for index, value in enumerate(nums):
        if running == 0:
            candidate_start = index
        running += value
        if best is None or running > best.total:
            best = Span(running, candidate_start, index)
        if running < 0:
            running = 0
    assert best is not None
    return best