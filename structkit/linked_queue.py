"""FIFO queue backed by a doubly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from structkit.double_linked_list import DoubleLinkedList


class LinkedQueue:
    """A first-in, first-out queue: push at the rear, pop from the front."""

    def __init__(self, iterable: Optional[Iterable[Any]] = None) -> None:
        self._items = DoubleLinkedList(iterable)

    def push(self, data: Any) -> None:
        """Add ``data`` at the rear of the queue."""
        self._items.push_back(data)

    def pop(self) -> Any:
        """Remove and return the element at the front of the queue."""
        if not self._items:
            raise IndexError("pop from empty queue")
        return self._items.pop_front()

    def front(self) -> Any:
        """Return the element at the front without removing it."""
        if not self._items:
            raise IndexError("front of empty queue")
        return self._items.first()

    def rear(self) -> Any:
        """Return the element at the rear without removing it."""
        if not self._items:
            raise IndexError("rear of empty queue")
        return self._items.last()

    def is_empty(self) -> bool:
        """Return True when the queue holds no elements."""
        return len(self._items) == 0

    def clear(self) -> None:
        """Remove all elements."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"