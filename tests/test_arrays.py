import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.arrays import max_subarray_sum, power


def _all_slice_sums(nums):
    return [
        sum(nums[start:stop])
        for start in range(len(nums))
        for stop in range(start + 1, len(nums) + 1)
    ]


@given(st.lists(st.integers(min_value=-1000, max_value=1000), min_size=1, max_size=30))
def test_kadane_matches_exhaustive_search(nums):
    assert max_subarray_sum(nums) == max(_all_slice_sums(nums))


def test_kadane_classic_example():
    assert max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


@given(st.lists(st.integers(max_value=-1, min_value=-1000), min_size=1, max_size=20))
def test_kadane_all_negative_picks_largest(nums):
    assert max_subarray_sum(nums) == max(nums)


def test_kadane_accepts_iterators():
    assert max_subarray_sum(iter([3, -1, 2])) == max(_all_slice_sums([3, -1, 2]))


def test_kadane_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_power_source_example():
    assert power(2, 3) == 8


@given(st.integers(min_value=-50, max_value=50), st.integers(min_value=0, max_value=60))
def test_power_matches_builtin(x, n):
    assert power(x, n) == x**n


def test_power_zero_exponent():
    assert power(7, 0) == 1


def test_power_negative_exponent_raises():
    with pytest.raises(ValueError):
        power(2, -1)