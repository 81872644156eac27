"""Binary searches over ascending sorted sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = ["binary_search", "search_insert_position"]


def binary_search(nums: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in sorted ``nums``, or -1 if it is absent."""
    begin = 0
    end = len(nums) - 1
    while begin <= end:
        mid = (begin + end) >> 1
        value = nums[mid]
        if value > target:
            end = mid - 1
        elif value < target:
            begin = mid + 1
        else:
            return mid
    return -1


def search_insert_position(nums: Sequence[Any], target: Any) -> int:
    """Return the index at which ``target`` would be inserted after any equal items.

    Every item before the returned index is ``<= target`` and every item
    from it on is ``> target``.
    """
    left = 0
    right = len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] <= target:
            left = mid + 1
        else:
            right = mid - 1
    return left