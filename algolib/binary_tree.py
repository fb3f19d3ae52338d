"""Binary tree nodes with parent links, and the tree that holds them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class Color(Enum):
    """Node colour used by red-black trees."""

    RED = "red"
    BLACK = "black"

    def flip(self) -> "Color":
        """The other colour."""
        return Color.BLACK if self is Color.RED else Color.RED


@dataclass(eq=False, repr=False)
class Node:
    """A tree node linked to its children and its parent.

    Nodes compare by identity. ``color`` is used by red-black trees and
    ``delta`` (the balance factor) by AVL trees.
    """

    key: Any
    val: Any = None
    left: Optional["Node"] = None
    right: Optional["Node"] = None
    parent: Optional["Node"] = None
    color: Color = Color.RED
    delta: int = 0

    def __repr__(self) -> str:
        return f"Node(key={self.key!r}, val={self.val!r}, color={self.color.value})"

    def children_count(self) -> int:
        """Number of direct children."""
        return (self.left is not None) + (self.right is not None)

    def is_leaf(self) -> bool:
        """Does this node have no children?"""
        return self.left is None and self.right is None

    def is_red(self) -> bool:
        """Is this node coloured red?"""
        return self.color is Color.RED

    def is_left_child(self) -> bool:
        """Is this node the left child of its parent?"""
        return self.parent is not None and self.parent.left is self

    def is_right_child(self) -> bool:
        """Is this node the right child of its parent?"""
        return self.parent is not None and self.parent.right is self

    def sibling(self) -> Optional["Node"]:
        """The other child of this node's parent, if any."""
        if self.parent is None:
            return None
        return self.parent.right if self.parent.left is self else self.parent.left

    def grandparent(self) -> Optional["Node"]:
        """The parent of this node's parent, if any."""
        return None if self.parent is None else self.parent.parent

    def uncle(self) -> Optional["Node"]:
        """The sibling of this node's parent, if any."""
        return None if self.parent is None else self.parent.sibling()

    def set_left(self, node: Optional["Node"]) -> None:
        """Make ``node`` the left child of this node and link it back."""
        self.left = node
        if node is not None:
            node.parent = self

    def set_right(self, node: Optional["Node"]) -> None:
        """Make ``node`` the right child of this node and link it back."""
        self.right = node
        if node is not None:
            node.parent = self

    def replace_with(self, node: Optional["Node"]) -> None:
        """Put ``node`` where this node hangs under its parent.

        If this node has no parent, ``node`` becomes parentless.
        """
        if self.parent is None:
            if node is not None:
                node.parent = None
        elif self.is_left_child():
            self.parent.set_left(node)
        else:
            self.parent.set_right(node)


class Tree:
    """A binary tree given by its root node, with a recorded size."""

    def __init__(self, root: Optional[Node] = None, size: int = 0) -> None:
        self.root = root
        self.size = size

    def __len__(self) -> int:
        return self.size

    def height(self) -> int:
        """Number of nodes on the longest path from the root to a leaf."""
        height = 0
        level = [self.root] if self.root is not None else []
        while level:
            height += 1
            level = [c for n in level for c in (n.left, n.right) if c is not None]
        return height

    def is_empty(self) -> bool:
        """Does the tree have no root?"""
        return self.root is None