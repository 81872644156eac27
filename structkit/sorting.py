"""Classic comparison sorts over sequences of mutually comparable items.

Each function leaves its argument untouched and returns a new sorted list
in ascending order.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable
from typing import Any

__all__ = [
    "bubble_sort",
    "bubble_sort_early_exit",
    "insertion_sort",
    "quick_sort",
    "selection_sort",
]


def bubble_sort(nums: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, bubbling the largest remaining item to the end each pass."""
    items = list(nums)
    for end in range(len(items), 0, -1):
        for i in range(1, end):
            if items[i - 1] > items[i]:
                items[i - 1], items[i] = items[i], items[i - 1]
    return items


def bubble_sort_early_exit(nums: Iterable[Any]) -> list[Any]:
    """Return a sorted copy; stop as soon as a pass makes no swap."""
    items = list(nums)
    for end in range(len(items), 0, -1):
        swapped = False
        for i in range(1, end):
            if items[i - 1] > items[i]:
                items[i - 1], items[i] = items[i], items[i - 1]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(nums: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, placing each item after its equals by binary search.

    Equal items keep their original relative order.
    """
    items: list[Any] = []
    for value in nums:
        items.insert(bisect_right(items, value), value)
    return items


def selection_sort(nums: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, moving the smallest remaining item forward each step."""
    items = list(nums)
    count = len(items)
    for pos in range(count):
        min_pos = pos
        for candidate in range(pos + 1, count):
            if items[candidate] < items[min_pos]:
                min_pos = candidate
        if min_pos != pos:
            items[pos], items[min_pos] = items[min_pos], items[pos]
    return items


def _partition(items: list[Any], begin: int, end: int) -> int:
    """Partition around ``items[begin]`` by filling holes from both ends."""
    pivot = items[begin]
    while begin < end:
        while begin < end:
            if items[end] >= pivot:
                end -= 1
            else:
                items[begin] = items[end]
                begin += 1
                break
        while begin < end:
            if items[begin] > pivot:
                items[end] = items[begin]
                end -= 1
                break
            begin += 1
    items[begin] = pivot
    return begin


def quick_sort(nums: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using quicksort with the first item of a range as pivot."""
    items = list(nums)
    pending = [(0, len(items) - 1)]
    while pending:
        begin, end = pending.pop()
        if begin >= end:
            continue
        mid = _partition(items, begin, end)
        pending.append((begin, mid - 1))
        pending.append((mid + 1, end))
    return items