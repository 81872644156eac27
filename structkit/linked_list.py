"""Singly linked list with a sentinel head and a tail reference."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional

Compare = Callable[[Any, Any], int]


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any = None, next: Optional["_Node"] = None) -> None:
        self.data = data
        self.next = next


class LinkedList:
    """A singly linked list supporting positional insert and delete."""

    def __init__(self, iterable: Optional[Iterable[Any]] = None) -> None:
        self._head = _Node()
        self._tail = self._head
        self._size = 0
        if iterable is not None:
            for item in iterable:
                self.push_back(item)

    def _node_before(self, pos: int) -> _Node:
        node = self._head
        for _ in range(pos):
            node = node.next
        return node

    def insert(self, pos: int, data: Any) -> None:
        """Insert ``data`` so that it ends up at index ``pos``."""
        if pos < 0 or pos > self._size:
            raise IndexError(f"insert position {pos} out of range 0..{self._size}")
        if pos == self._size:
            node = _Node(data)
            self._tail.next = node
            self._tail = node
        else:
            prev = self._node_before(pos)
            prev.next = _Node(data, prev.next)
        self._size += 1

    def push_front(self, data: Any) -> None:
        """Insert ``data`` at the front."""
        self.insert(0, data)

    def push_back(self, data: Any) -> None:
        """Append ``data`` at the end."""
        self.insert(self._size, data)

    def delete_at(self, pos: int) -> Any:
        """Remove the element at ``pos`` and return it."""
        if pos < 0 or pos > self._size - 1:
            raise IndexError(f"delete position {pos} out of range")
        prev = self._node_before(pos)
        removed = prev.next
        prev.next = removed.next
        if removed is self._tail:
            self._tail = prev
        self._size -= 1
        return removed.data

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        return self.delete_at(0)

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        return self.delete_at(self._size - 1)

    def remove_all(self, data: Any, compare: Optional[Compare] = None) -> int:
        """Remove every element equal to ``data``; return how many were removed.

        ``compare(data, element)`` returning 0 means equal; without it ``==`` is used.
        """
        if compare is None:
            matches = lambda item: data == item  # noqa: E731
        else:
            matches = lambda item: compare(data, item) == 0  # noqa: E731

        removed = 0
        prev = self._head
        while prev.next is not None:
            current = prev.next
            if matches(current.data):
                prev.next = current.next
                if current is self._tail:
                    self._tail = prev
                self._size -= 1
                removed += 1
            else:
                prev = current
        return removed

    def clear(self) -> None:
        """Remove all elements."""
        self._head.next = None
        self._tail = self._head
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"