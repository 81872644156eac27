"""Doubly linked list with a sentinel head and a tail reference."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional

Compare = Callable[[Any, Any], int]


class _Node:
    __slots__ = ("data", "prev", "next")

    def __init__(
        self,
        data: Any = None,
        prev: Optional["_Node"] = None,
        next: Optional["_Node"] = None,
    ) -> None:
        self.data = data
        self.prev = prev
        self.next = next


class DoubleLinkedList:
    """A doubly linked list supporting positional access in both directions."""

    def __init__(self, iterable: Optional[Iterable[Any]] = None) -> None:
        self._head = _Node()
        self._tail = self._head
        self._size = 0
        if iterable is not None:
            for item in iterable:
                self.push_back(item)

    def _node_at(self, pos: int) -> _Node:
        """Return the node at index ``pos``; index -1 is the sentinel head."""
        if pos == self._size - 1:
            return self._tail
        node = self._head
        for _ in range(pos + 1):
            node = node.next
        return node

    def _unlink(self, node: _Node) -> None:
        prev = node.prev
        prev.next = node.next
        if node is self._tail:
            self._tail = prev
        else:
            node.next.prev = prev
        node.prev = node.next = None
        self._size -= 1

    def insert(self, pos: int, data: Any) -> None:
        """Insert ``data`` so that it ends up at index ``pos``."""
        if pos < 0 or pos > self._size:
            raise IndexError(f"insert position {pos} out of range 0..{self._size}")
        prev = self._tail if pos == self._size else self._node_at(pos - 1)
        node = _Node(data, prev, prev.next)
        if prev is self._tail:
            self._tail = node
        else:
            prev.next.prev = node
        prev.next = node
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
        node = self._node_at(pos)
        data = node.data
        self._unlink(node)
        return data

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
        node = self._head.next
        while node is not None:
            following = node.next
            if matches(node.data):
                self._unlink(node)
                removed += 1
            node = following
        return removed

    def get(self, pos: int) -> Any:
        """Return the element at index ``pos``."""
        if pos < 0 or pos > self._size - 1:
            raise IndexError(f"position {pos} out of range")
        return self._node_at(pos).data

    def first(self) -> Any:
        """Return the first element."""
        return self.get(0)

    def last(self) -> Any:
        """Return the last element."""
        return self.get(self._size - 1)

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

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not self._head:
            yield node.data
            node = node.prev

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"