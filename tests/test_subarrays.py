import pytest
from hypothesis import given
from hypothesis import strategies as st

from drillbook.subarrays import max_subarray, max_subarray_brute, max_subarray_span

values = st.lists(st.integers(min_value=-100, max_value=100), min_size=1, max_size=30)


@given(values)
def test_kadane_matches_brute_force(nums):
    assert max_subarray(nums) == max_subarray_brute(nums)


@given(values)
def test_span_indices_give_its_total(nums):
    span = max_subarray_span(nums)
    assert 0 <= span.start <= span.end < len(nums)
    assert sum(nums[span.start : span.end + 1]) == span.total == max_subarray(nums)


@given(values)
def test_no_subarray_beats_the_best(nums):
    best = max_subarray_brute(nums)
    for start in range(len(nums)):
        for end in range(start + 1, len(nums) + 1):
            assert sum(nums[start:end]) <= best


def test_all_negative_picks_largest_single_value():
    nums = [-1, -4, -5]
    assert max_subarray(nums) == -1
    assert max_subarray_span(nums) == (-1, 0, 0)


@given(st.lists(st.integers(min_value=0, max_value=100), min_size=1, max_size=30))
def test_non_negative_input_sums_everything(nums):
    assert max_subarray(nums) == sum(nums)
    assert max_subarray_brute(nums) == sum(nums)


@pytest.mark.parametrize("func", [max_subarray_brute, max_subarray, max_subarray_span])
def test_empty_input_raises(func):
    with pytest.raises(ValueError):
        func([])