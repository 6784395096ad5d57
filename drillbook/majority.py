"""Finding the value that fills more than half of a list."""

from collections import Counter
from collections.abc import Sequence


def majority_element_counting(nums: Sequence[int]) -> int:
    """Return the value occurring more than ``len(nums) // 2`` times, or 0 if none does."""
    threshold = len(nums) // 2
    return next(
        (value for value, count in Counter(nums).items() if count > threshold),
        0,
    )


def majority_element(nums: Sequence[int]) -> int:
    """Return the majority value by Boyer-Moore voting.

    The result is only meaningful when a majority value exists; it is not
    verified. An empty input raises ValueError.
    """
    if not nums:
        raise ValueError("majority of an empty sequence is undefined")
    count = 0
    candidate = nums[0]
    for value in nums:
        if count == 0:
            candidate = value
            count = 1
        elif value != candidate:
            count -= 1
        else:
            count += 1
    return candidate