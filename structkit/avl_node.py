"""Node of a self-balancing binary search tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class AVLNode:
    """A tree node that carries its data, links to its relatives and its height.

    A new node is a leaf, so its height starts at 1.
    """

    data: Any
    parent: Optional["AVLNode"] = field(default=None, repr=False)
    left: Optional["AVLNode"] = field(default=None, repr=False)
    right: Optional["AVLNode"] = field(default=None, repr=False)
    height: int = 1

    @property
    def _left_height(self) -> int:
        return self.left.height if self.left is not None else 0

    @property
    def _right_height(self) -> int:
        return self.right.height if self.right is not None else 0

    def has_two_children(self) -> bool:
        """Return True when the node has both a left and a right child."""
        return self.left is not None and self.right is not None

    def has_one_child(self) -> bool:
        """Return True when the node has exactly one child."""
        return (self.left is None) != (self.right is None)

    def is_leaf(self) -> bool:
        """Return True when the node has no children."""
        return self.left is None and self.right is None

    def is_left_child(self) -> bool:
        """Return True when the node is the left child of its parent."""
        return self.parent is not None and self.parent.left is self

    def is_right_child(self) -> bool:
        """Return True when the node is the right child of its parent."""
        return self.parent is not None and self.parent.right is self

    def balance_factor(self) -> int:
        """Return the left subtree height minus the right subtree height."""
        return self._left_height - self._right_height

    def is_balanced(self) -> bool:
        """Return True when the subtree heights differ by at most one."""
        return abs(self.balance_factor()) <= 1

    def update_height(self) -> int:
        """Recompute the height from the children's heights and return it."""
        self.height = 1 + max(self._left_height, self._right_height)
        return self.height

    def taller_child(self) -> Optional["AVLNode"]:
        """Return the child with the taller subtree.

        On a tie the child on the same side as this node sits under its
        parent is chosen; a root or right child picks its right child.
        """
        left_height = self._left_height
        right_height = self._right_height
        if left_height > right_height:
            return self.left
        if left_height < right_height:
            return self.right
        return self.left if self.is_left_child() else self.right

    def predecessor(self) -> Optional["AVLNode"]:
        """Return the node that comes just before this one in order."""
        if self.left is not None:
            node = self.left
            while node.right is not None:
                node = node.right
            return node
        node = self
        while node.parent is not None and node is node.parent.left:
            node = node.parent
        return node.parent

    def successor(self) -> Optional["AVLNode"]:
        """Return the node that comes just after this one in order."""
        if self.right is not None:
            node = self.right
            while node.left is not None:
                node = node.left
            return node
        node = self
        while node.parent is not None and node is node.parent.right:
            node = node.parent
        return node.parent