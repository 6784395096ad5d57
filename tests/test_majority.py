import pytest
from hypothesis import given
from hypothesis import strategies as st

from drillbook.majority import majority_element, majority_element_counting


@st.composite
def with_majority(draw):
    major = draw(st.integers(min_value=-20, max_value=20))
    others = draw(st.lists(st.integers(min_value=-20, max_value=20), max_size=15))
    extra = draw(st.integers(min_value=1, max_value=5))
    nums = [major] * (len(others) + extra) + others
    return major, draw(st.permutations(nums))


@given(with_majority())
def test_voting_finds_majority(case):
    major, nums = case
    assert majority_element(nums) == major


@given(with_majority())
def test_counting_finds_majority(case):
    major, nums = case
    assert majority_element_counting(nums) == major


def test_counting_returns_zero_without_majority():
    assert majority_element_counting([1, 2, 3]) == 0


def test_counting_empty_returns_zero():
    assert majority_element_counting([]) == 0


def test_single_element():
    assert majority_element([7]) == 7
    assert majority_element_counting([7]) == 7


def test_voting_empty_raises():
    with pytest.raises(ValueError):
        majority_element([])