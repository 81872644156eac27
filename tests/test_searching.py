from bisect import bisect_right

import pytest
from hypothesis import given
from hypothesis import strategies as st

from structkit.searching import binary_search, search_insert_position

SORTED = sorted([31, 47, 25, 16, 4, 35, 38])
WITH_DUPLICATES = [3, 4, 4, 4, 5, 6, 8, 9]


@pytest.mark.parametrize("target", [35, 4, 47])
def test_binary_search_finds_present_values(target):
    index = binary_search(SORTED, target)
    assert SORTED[index] == target


def test_binary_search_missing_value():
    assert binary_search(SORTED, 5) == -1


def test_binary_search_empty():
    assert binary_search([], 1) == -1


def test_binary_search_first_and_last():
    assert binary_search(SORTED, SORTED[0]) == 0
    assert binary_search(SORTED, SORTED[-1]) == len(SORTED) - 1


@given(st.lists(st.integers(-100, 100)).map(sorted), st.integers(-100, 100))
def test_binary_search_invariant(nums, target):
    index = binary_search(nums, target)
    if target in nums:
        assert nums[index] == target
    else:
        assert index == -1


@pytest.mark.parametrize("target", [4, 7, 0, 10])
def test_insert_position_partitions(target):
    pos = search_insert_position(WITH_DUPLICATES, target)
    assert all(v <= target for v in WITH_DUPLICATES[:pos])
    assert all(v > target for v in WITH_DUPLICATES[pos:])


def test_insert_position_bounds():
    assert search_insert_position(WITH_DUPLICATES, 0) == 0
    assert search_insert_position(WITH_DUPLICATES, 10) == len(WITH_DUPLICATES)


def test_insert_position_after_duplicates():
    pos = search_insert_position(WITH_DUPLICATES, 4)
    assert WITH_DUPLICATES[pos - 1] == 4
    assert WITH_DUPLICATES[pos] > 4


def test_insert_position_empty():
    assert search_insert_position([], 3) == 0


@given(st.lists(st.integers(-100, 100)).map(sorted), st.integers(-120, 120))
def test_insert_position_matches_bisect_right(nums, target):
    assert search_insert_position(nums, target) == bisect_right(nums, target)