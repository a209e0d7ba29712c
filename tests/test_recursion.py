from collections import Counter
from itertools import combinations, permutations

from hypothesis import given
from hypothesis import strategies as st

from algokit.recursion import (
    count_subsequences_with_sum,
    first_subsequence_with_sum,
    permute_unique,
    subsequences,
    subsequences_with_sum,
    subsets,
)

small_lists = st.lists(st.integers(min_value=-5, max_value=5), max_size=7)


def _combinations(items):
    return sorted(
        list(combo) for r in range(len(items) + 1) for combo in combinations(items, r)
    )


@given(small_lists)
def test_subsets_are_all_combinations(nums):
    result = subsets(nums)
    assert len(result) == 2 ** len(nums)
    assert sorted(result) == _combinations(nums)


def test_subsets_order_follows_bitmask():
    result = subsets([4, 5, 6])
    assert result[0] == []
    assert result[-1] == [4, 5, 6]
    assert result[1] == [4]


@given(small_lists)
def test_subsequences_match_subsets(items):
    assert sorted(subsequences(items)) == sorted(subsets(items))


def test_subsequences_take_before_skip():
    assert list(subsequences([1, 2])) == [[1, 2], [1], [2], []]


@given(st.lists(st.integers(min_value=0, max_value=3), max_size=6))
def test_permute_unique_is_distinct_permutations(nums):
    result = permute_unique(nums)
    as_tuples = [tuple(p) for p in result]
    assert len(as_tuples) == len(set(as_tuples))
    assert set(as_tuples) == set(permutations(nums))


def test_permute_unique_leaves_input_untouched():
    nums = [3, 1, 2]
    permute_unique(nums)
    assert nums == [3, 1, 2]


@given(small_lists, st.integers(min_value=-10, max_value=10))
def test_sum_filter_is_exact(items, k):
    found = list(subsequences_with_sum(items, k))
    assert all(sum(seq) == k for seq in found)
    expected = Counter(tuple(s) for s in subsequences(items) if sum(s) == k)
    assert Counter(tuple(s) for s in found) == expected


@given(small_lists, st.integers(min_value=-10, max_value=10))
def test_count_matches_enumeration(items, k):
    assert count_subsequences_with_sum(items, k) == len(list(subsequences_with_sum(items, k)))


@given(small_lists, st.integers(min_value=-10, max_value=10))
def test_first_is_head_of_enumeration(items, k):
    found = list(subsequences_with_sum(items, k))
    assert first_subsequence_with_sum(items, k) == (found[0] if found else None)


def test_sum_example():
    assert list(subsequences_with_sum([1, 2, 1], 2)) == [[1, 1], [2]]


def test_first_none_when_impossible():
    assert first_subsequence_with_sum([1, 2], 100) is None