"""Red-black tree with bottom-up insertion fix-up.

A red-black tree is a binary search tree whose nodes are red or black, where
the root is black, a red node has no red child, and every path from a node
down to a missing child passes the same number of black nodes. Together these
keep the longest root-to-leaf path at most twice the shortest.
"""

from __future__ import annotations

from typing import Any, Optional

from .binary_tree import Color, Node, Tree
from .bst import insert_node


def _is_red(node: Optional[Node]) -> bool:
    return node is not None and node.is_red()


def rotate_left(root: Optional[Node], x: Node) -> Optional[Node]:
    """Rotate left around ``x`` and return the root of the whole tree.

    ::

            X                  Y
          /   \\              /   \\
         a     Y     =>     X     c
              / \\          / \\
             b   c        a   b

    Raises ValueError if ``x`` has no right child.
    """
    y = x.right
    if y is None:
        raise ValueError("cannot rotate left: node has no right child")
    parent = x.parent
    a, b, c = x.left, y.left, y.right
    x.replace_with(y)
    x.set_left(a)
    x.set_right(b)
    y.set_left(x)
    y.set_right(c)
    return y if parent is None else root


def rotate_right(root: Optional[Node], y: Node) -> Optional[Node]:
    """Rotate right around ``y`` and return the root of the whole tree.

    ::

              Y              X
            /   \\          /   \\
           X     c   =>   a     Y
          / \\                  / \\
         a   b                b   c

    Raises ValueError if ``y`` has no left child.
    """
    x = y.left
    if x is None:
        raise ValueError("cannot rotate right: node has no left child")
    parent = y.parent
    a, b, c = x.left, x.right, y.right
    y.replace_with(x)
    y.set_left(b)
    y.set_right(c)
    x.set_left(a)
    x.set_right(y)
    return x if parent is None else root


def insert_fix(root: Optional[Node], x: Optional[Node]) -> Optional[Node]:
    """Restore the red-black properties after inserting the red node ``x``.

    Returns the new root, which is always coloured black.
    """
    t = root
    while x is not None and _is_red(x.parent):
        parent = x.parent
        grandparent = x.grandparent()
        uncle = x.uncle()
        if _is_red(uncle):
            # red uncle: push the blackness down from the grandparent
            parent.color = Color.BLACK
            grandparent.color = Color.RED
            uncle.color = Color.BLACK
            x = grandparent
        elif parent.is_left_child():
            if x.is_right_child():
                x = parent
                t = rotate_left(t, x)
            x.parent.color = Color.BLACK
            x.grandparent().color = Color.RED
            t = rotate_right(t, x.grandparent())
        else:
            if x.is_left_child():
                x = parent
                t = rotate_right(t, x)
            x.parent.color = Color.BLACK
            x.grandparent().color = Color.RED
            t = rotate_left(t, x.grandparent())
    if t is not None:
        t.color = Color.BLACK
    return t


class RedBlackTree(Tree):
    """Red-black tree mapping keys to values."""

    def insert(self, key: Any, val: Any) -> None:
        """Store ``val`` under ``key``, replacing any old value, and rebalance."""
        node = insert_node(self.root, key, val)
        if node is None:
            return
        root = self.root if self.root is not None else node
        self.root = insert_fix(root, node)
        self.size += 1