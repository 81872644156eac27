"""Binary heap ordered by a three-way comparison function."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Optional

Compare = Callable[[Any, Any], int]


def _natural_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class BinaryHeap:
    """A heap whose top is the smallest element according to ``compare``.

    ``compare(a, b)`` returns a negative number, zero or a positive number
    when ``a`` sorts before, equal to or after ``b``.
    """

    def __init__(self, compare: Optional[Compare] = None) -> None:
        self._compare: Compare = compare if compare is not None else _natural_compare
        self._data: list[Any] = []

    def _float_up(self, index: int) -> None:
        data = self._data
        value = data[index]
        while index > 0:
            parent = (index - 1) >> 1
            if self._compare(value, data[parent]) > 0:
                break
            data[index] = data[parent]
            index = parent
        data[index] = value

    def _sink_down(self, index: int) -> None:
        data = self._data
        size = len(data)
        value = data[index]
        half = size >> 1
        while index < half:
            child = (index << 1) + 1
            right = child + 1
            if right < size and self._compare(data[right], data[child]) < 0:
                child = right
            if self._compare(value, data[child]) < 0:
                break
            data[index] = data[child]
            index = child
        data[index] = value

    def push(self, data: Any) -> None:
        """Add ``data`` to the heap."""
        self._data.append(data)
        self._float_up(len(self._data) - 1)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._data:
            raise IndexError("pop from empty heap")
        top = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._sink_down(0)
        return top

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if not self._data:
            raise IndexError("peek at empty heap")
        return self._data[0]

    def is_empty(self) -> bool:
        """Return True when the heap holds no elements."""
        return not self._data

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._data)})"