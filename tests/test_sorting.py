from hypothesis import given
from hypothesis import strategies as st

from structkit.sorting import (
    bubble_sort,
    bubble_sort_early_exit,
    insertion_sort,
    quick_sort,
    selection_sort,
)

SAMPLE = [7, 21, 12, 5, 32, 45, 17, 87, 2, 9]
QUICK_SAMPLE = [31, 47, 25, 16, 4, 35, 38]


def test_sorts_source_sample():
    expected = [2, 5, 7, 9, 12, 17, 21, 32, 45, 87]
    assert bubble_sort(SAMPLE) == expected
    assert bubble_sort_early_exit(SAMPLE) == expected
    assert insertion_sort(SAMPLE) == expected
    assert quick_sort(SAMPLE) == expected
    assert selection_sort(SAMPLE) == expected


def test_sorts_quick_sample():
    expected = [4, 16, 25, 31, 35, 38, 47]
    assert bubble_sort(QUICK_SAMPLE) == expected
    assert bubble_sort_early_exit(QUICK_SAMPLE) == expected
    assert insertion_sort(QUICK_SAMPLE) == expected
    assert quick_sort(QUICK_SAMPLE) == expected
    assert selection_sort(QUICK_SAMPLE) == expected


def test_empty_input():
    assert bubble_sort([]) == []
    assert bubble_sort_early_exit([]) == []
    assert insertion_sort([]) == []
    assert quick_sort([]) == []
    assert selection_sort([]) == []


def test_single_element():
    assert bubble_sort([42]) == [42]
    assert bubble_sort_early_exit([42]) == [42]
    assert insertion_sort([42]) == [42]
    assert quick_sort([42]) == [42]
    assert selection_sort([42]) == [42]


def test_input_left_untouched():
    data = list(SAMPLE)
    bubble_sort(data)
    bubble_sort_early_exit(data)
    insertion_sort(data)
    quick_sort(data)
    selection_sort(data)
    assert data == SAMPLE


def test_accepts_any_iterable():
    assert bubble_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert bubble_sort_early_exit(iter((3, 1, 2))) == [1, 2, 3]
    assert insertion_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert quick_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert selection_sort(iter((3, 1, 2))) == [1, 2, 3]


def test_duplicates_and_negatives():
    data = [5, -1, 5, 0, -1, 3, 3]
    expected = [-1, -1, 0, 3, 3, 5, 5]
    assert bubble_sort(data) == expected
    assert bubble_sort_early_exit(data) == expected
    assert insertion_sort(data) == expected
    assert quick_sort(data) == expected
    assert selection_sort(data) == expected


def test_already_sorted_and_reversed():
    data = list(range(20))
    backwards = list(reversed(data))
    assert bubble_sort(data) == data
    assert bubble_sort(backwards) == data
    assert bubble_sort_early_exit(data) == data
    assert bubble_sort_early_exit(backwards) == data
    assert insertion_sort(data) == data
    assert insertion_sort(backwards) == data
    assert quick_sort(data) == data
    assert quick_sort(backwards) == data
    assert selection_sort(data) == data
    assert selection_sort(backwards) == data


def test_strings():
    data = ["pear", "apple", "fig", "banana"]
    expected = ["apple", "banana", "fig", "pear"]
    assert bubble_sort(data) == expected
    assert bubble_sort_early_exit(data) == expected
    assert insertion_sort(data) == expected
    assert quick_sort(data) == expected
    assert selection_sort(data) == expected


@given(st.lists(st.integers(min_value=-1000, max_value=1000)))
def test_matches_builtin_sorted(data):
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert bubble_sort_early_exit(data) == expected
    assert insertion_sort(data) == expected
    assert quick_sort(data) == expected
    assert selection_sort(data) == expected


def test_quick_sort_large_input_does_not_recurse_too_deeply():
    data = list(range(5000, 0, -1))
    assert quick_sort(data) == list(range(1, 5001))


def test_insertion_sort_is_stable():
    data = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]

    class Key:
        def __init__(self, pair):
            self.pair = pair

        def __lt__(self, other):
            return self.pair[0] < other.pair[0]

    result = [k.pair for k in insertion_sort(Key(p) for p in data)]
    assert result == [(1, "b"), (1, "d"), (2, "a"), (2, "c")]