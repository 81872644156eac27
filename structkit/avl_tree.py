"""Self-balancing (AVL) binary search tree ordered by a comparison function."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Optional

from structkit.avl_node import AVLNode
from structkit.linked_queue import LinkedQueue

Compare = Callable[[Any, Any], int]
Formatter = Callable[[Any], str]

_INDENT = 4


def _natural_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class AVLTree:
    """An AVL tree of unique elements.

    ``compare(a, b)`` returns a negative number, zero or a positive number
    when ``a`` sorts before, equal to or after ``b``. Without it the
    elements' own ordering is used.
    """

    def __init__(self, compare: Optional[Compare] = None) -> None:
        self._compare: Compare = compare if compare is not None else _natural_compare
        self._root: Optional[AVLNode] = None
        self._size = 0

    # ------------------------------------------------------------------
    # rotations and rebalancing

    def _after_rotate(
        self, grand: AVLNode, parent: AVLNode, child: Optional[AVLNode]
    ) -> None:
        parent.parent = grand.parent
        if grand.is_left_child():
            grand.parent.left = parent
        elif grand.is_right_child():
            grand.parent.right = parent
        else:
            self._root = parent
        grand.parent = parent
        if child is not None:
            child.parent = grand
        grand.update_height()
        parent.update_height()

    def _rotate_left(self, grand: AVLNode) -> None:
        parent = grand.right
        child = parent.left
        grand.right = child
        parent.left = grand
        self._after_rotate(grand, parent, child)

    def _rotate_right(self, grand: AVLNode) -> None:
        parent = grand.left
        child = parent.right
        grand.left = child
        parent.right = grand
        self._after_rotate(grand, parent, child)

    def _rebalance(self, node: AVLNode) -> None:
        parent = node.taller_child()
        child = parent.taller_child()
        if parent.is_left_child():
            if child is not None and child.is_left_child():
                self._rotate_right(node)
            else:
                self._rotate_left(parent)
                self._rotate_right(node)
        else:
            if child is not None and child.is_left_child():
                self._rotate_right(parent)
                self._rotate_left(node)
            else:
                self._rotate_left(node)

    def _after_insert(self, node: AVLNode) -> None:
        node = node.parent
        while node is not None:
            if node.is_balanced():
                node.update_height()
            else:
                self._rebalance(node)
                break
            node = node.parent

    def _after_remove(self, node: AVLNode) -> None:
        node = node.parent
        while node is not None:
            if node.is_balanced():
                node.update_height()
            else:
                self._rebalance(node)
            node = node.parent

    # ------------------------------------------------------------------
    # lookup, insert and remove

    def _find(self, data: Any) -> Optional[AVLNode]:
        node = self._root
        while node is not None:
            cmp = self._compare(data, node.data)
            if cmp < 0:
                node = node.left
            elif cmp > 0:
                node = node.right
            else:
                return node
        return None

    def insert(self, data: Any) -> bool:
        """Add ``data``; return False if an equal element is already present."""
        if self._root is None:
            self._root = AVLNode(data)
            self._size += 1
            return True

        node = self._root
        parent = node
        cmp = 0
        while node is not None:
            parent = node
            cmp = self._compare(data, node.data)
            if cmp < 0:
                node = node.left
            elif cmp > 0:
                node = node.right
            else:
                return False

        new_node = AVLNode(data, parent=parent)
        if cmp < 0:
            parent.left = new_node
        else:
            parent.right = new_node
        self._after_insert(new_node)
        self._size += 1
        return True

    def remove(self, data: Any) -> bool:
        """Remove the element equal to ``data``; return False if there is none."""
        node = self._find(data)
        if node is None:
            return False

        if node.has_two_children():
            pred = node.predecessor()
            node.data = pred.data
            node = pred

        child = node.left if node.left is not None else node.right
        if child is not None:
            child.parent = node.parent
            if node.parent is None:
                self._root = child
            elif node.is_left_child():
                node.parent.left = child
            else:
                node.parent.right = child
            self._after_remove(node)
        elif node.parent is None:
            self._root = None
        else:
            if node.is_left_child():
                node.parent.left = None
            else:
                node.parent.right = None
            self._after_remove(node)

        node.parent = node.left = node.right = None
        self._size -= 1
        return True

    def __contains__(self, data: Any) -> bool:
        return self._find(data) is not None

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        """Return the number of levels in the tree; 0 when it is empty."""
        if self._root is None:
            return 0
        levels = 0
        queue = LinkedQueue([self._root])
        level_size = 1
        while not queue.is_empty():
            node = queue.pop()
            level_size -= 1
            if node.left is not None:
                queue.push(node.left)
            if node.right is not None:
                queue.push(node.right)
            if level_size == 0:
                levels += 1
                level_size = len(queue)
        return levels

    # ------------------------------------------------------------------
    # traversals

    def preorder(self) -> Iterator[Any]:
        """Yield elements root first, then the left and right subtrees."""

        def walk(node: Optional[AVLNode]) -> Iterator[Any]:
            if node is None:
                return
            yield node.data
            yield from walk(node.left)
            yield from walk(node.right)

        return walk(self._root)

    def inorder(self) -> Iterator[Any]:
        """Yield elements in sorted order."""

        def walk(node: Optional[AVLNode]) -> Iterator[Any]:
            if node is None:
                return
            yield from walk(node.left)
            yield node.data
            yield from walk(node.right)

        return walk(self._root)

    def postorder(self) -> Iterator[Any]:
        """Yield elements with both subtrees before their root."""

        def walk(node: Optional[AVLNode]) -> Iterator[Any]:
            if node is None:
                return
            yield from walk(node.left)
            yield from walk(node.right)
            yield node.data

        return walk(self._root)

    def level_order(self) -> Iterator[Any]:
        """Yield elements level by level, left to right."""
        if self._root is None:
            return
        queue = LinkedQueue([self._root])
        while not queue.is_empty():
            node = queue.pop()
            yield node.data
            if node.left is not None:
                queue.push(node.left)
            if node.right is not None:
                queue.push(node.right)

    def render(self, formatter: Optional[Formatter] = None) -> str:
        """Draw the tree sideways: right subtree above, each level indented."""
        fmt = formatter if formatter is not None else str
        lines: list[str] = []

        def walk(node: Optional[AVLNode], level: int) -> None:
            if node is None:
                return
            walk(node.right, level + 1)
            lines.append(" " * (level * _INDENT) + fmt(node.data))
            walk(node.left, level + 1)

        walk(self._root, 0)
        return "\n".join(lines)

    def clear(self) -> None:
        """Remove all elements."""
        self._root = None
        self._size = 0

    def __iter__(self) -> Iterator[Any]:
        return self.inorder()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.inorder())!r})"