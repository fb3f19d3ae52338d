"""Left-leaning red-black tree, seen as an encoding of a 2-3 tree.

A 3-node is two 2-nodes joined by a red link that leans left. Red links
lean left, no node touches two red links, and every path from the root to
a missing child crosses the same number of black links.
"""

from __future__ import annotations

from typing import Any, Optional

from .binary_tree import Color, Node, Tree
from .bst import calc_size, find, find_max, find_min, keys_between


def _is_red(node: Optional[Node]) -> bool:
    return node is not None and node.is_red()


def _left_left_red(node: Optional[Node]) -> bool:
    return node is not None and node.left is not None and _is_red(node.left.left)


def _right_left_red(node: Optional[Node]) -> bool:
    return node is not None and node.right is not None and _is_red(node.right.left)


def _rotate_left(h: Node) -> Node:
    """Make a right-leaning red link lean to the left."""
    x = h.right
    h.set_right(x.left)
    x.set_left(h)
    x.color = h.color
    h.color = Color.RED
    return x


def _rotate_right(h: Node) -> Node:
    """Make a left-leaning red link lean to the right."""
    x = h.left
    h.set_left(x.right)
    x.set_right(h)
    x.color = h.color
    h.color = Color.RED
    return x


def _flip_colors(h: Node) -> None:
    """Flip the colours of a node and its two children."""
    for node in (h, h.left, h.right):
        if node is not None:
            node.color = node.color.flip()


def _balance(h: Node) -> Node:
    """Restore the left-leaning red-black invariants at ``h``."""
    if _is_red(h.right) and not _is_red(h.left):
        h = _rotate_left(h)
    if _is_red(h.left) and _left_left_red(h):
        h = _rotate_right(h)
    if _is_red(h.left) and _is_red(h.right):
        _flip_colors(h)
    return h


def _move_red_left(h: Node) -> Node:
    """With ``h`` red and ``h.left``, ``h.left.left`` black, make ``h.left``
    or one of its children red."""
    _flip_colors(h)
    if _right_left_red(h):
        h.set_right(_rotate_right(h.right))
        h = _rotate_left(h)
        _flip_colors(h)
    return h


def _move_red_right(h: Node) -> Node:
    """With ``h`` red and ``h.right``, ``h.right.left`` black, make ``h.right``
    or one of its children red."""
    _flip_colors(h)
    if _left_left_red(h):
        h = _rotate_right(h)
        _flip_colors(h)
    return h


def _put(h: Optional[Node], key: Any, val: Any) -> Node:
    if h is None:
        return Node(key, val)
    if key < h.key:
        h.set_left(_put(h.left, key, val))
    elif key > h.key:
        h.set_right(_put(h.right, key, val))
    else:
        h.key, h.val = key, val
    return _balance(h)


def _del_min(h: Node) -> Optional[Node]:
    if h.left is None:
        return None
    if not _is_red(h.left) and not _left_left_red(h):
        h = _move_red_left(h)
    h.set_left(_del_min(h.left))
    return _balance(h)


def _del_max(h: Node) -> Optional[Node]:
    if _is_red(h.left):
        h = _rotate_right(h)
    if h.right is None:
        return None
    if not _is_red(h.right) and not _right_left_red(h):
        h = _move_red_right(h)
    h.set_right(_del_max(h.right))
    return _balance(h)


def _delete(h: Node, key: Any) -> Optional[Node]:
    if key < h.key:
        if not _is_red(h.left) and not _left_left_red(h):
            h = _move_red_left(h)
        h.set_left(_delete(h.left, key))
    else:
        if _is_red(h.left):
            h = _rotate_right(h)
        if key == h.key and h.right is None:
            return None
        if not _is_red(h.right) and not _right_left_red(h):
            h = _move_red_right(h)
        if key == h.key:
            smallest = find_min(h.right)
            h.key, h.val = smallest.key, smallest.val
            h.set_right(_del_min(h.right))
        else:
            h.set_right(_delete(h.right, key))
    return _balance(h)


def count_blacks(root: Optional[Node]) -> int:
    """Number of black nodes on the leftmost path from ``root``."""
    black = 0
    x = root
    while x is not None:
        if not x.is_red():
            black += 1
        x = x.left
    return black


def is_balanced(root: Optional[Node]) -> bool:
    """Does every path from the root to a missing child cross the same number
    of black nodes?"""

    def check(h: Optional[Node], black: int) -> bool:
        if h is None:
            return black == 0
        if not h.is_red():
            black -= 1
        return check(h.left, black) and check(h.right, black)

    return check(root, count_blacks(root))


def is_23(root: Optional[Node]) -> bool:
    """Are there no red right links, and never two red links in a row below the root?"""

    def check(x: Optional[Node]) -> bool:
        if x is None:
            return True
        if _is_red(x.right) or (x is not root and x.is_red() and _is_red(x.left)):
            return False
        return check(x.left) and check(x.right)

    return check(root)


class LeftLeaningRedBlackTree(Tree):
    """Left-leaning red-black tree mapping keys to values."""

    def _finish(self, root: Optional[Node]) -> None:
        if root is not None:
            root.color = Color.BLACK
            root.parent = None
        self.root = root

    def _redden_root(self) -> None:
        root = self.root
        if not _is_red(root.left) and not _is_red(root.right):
            root.color = Color.RED

    def insert(self, key: Any, val: Any) -> None:
        """Store ``val`` under ``key``, replacing any old value."""
        self._finish(_put(self.root, key, val))
        self.size = calc_size(self.root)

    def get(self, key: Any) -> Any:
        """Value stored under ``key``, or None."""
        x = find(self.root, key)
        return None if x is None else x.val

    def delete_min(self) -> None:
        """Remove the smallest key; does nothing on an empty tree."""
        if self.root is None:
            return
        self._redden_root()
        self._finish(_del_min(self.root))
        self.size -= 1

    def delete_max(self) -> None:
        """Remove the largest key; does nothing on an empty tree."""
        if self.root is None:
            return
        self._redden_root()
        self._finish(_del_max(self.root))
        self.size -= 1

    def delete(self, key: Any) -> None:
        """Remove ``key`` if present."""
        if not self.contains(key):
            return
        self._redden_root()
        self._finish(_delete(self.root, key))
        self.size -= 1

    def contains(self, key: Any) -> bool:
        """Is ``key`` in the tree?"""
        return find(self.root, key) is not None

    def __contains__(self, key: object) -> bool:
        return self.contains(key)

    def min(self) -> Any:
        """Smallest key, or None for an empty tree."""
        x = find_min(self.root)
        return None if x is None else x.key

    def max(self) -> Any:
        """Largest key, or None for an empty tree."""
        x = find_max(self.root)
        return None if x is None else x.key

    def keys(self) -> list:
        """All keys, in order."""
        if self.is_empty():
            return []
        return keys_between(self.root, self.min(), self.max())