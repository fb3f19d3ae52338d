"""Binary search tree: every key in a left branch is smaller than the node's
key, every key in a right branch is larger."""

from __future__ import annotations

from typing import Any, Optional

from .binary_tree import Node, Tree


def insert_node(root: Optional[Node], key: Any, val: Any) -> Optional[Node]:
    """Insert ``key`` below ``root`` and return the new node.

    If the key is already present its value is replaced and None is returned.
    """
    parent = None
    x = root
    while x is not None:
        parent = x
        if key < x.key:
            x = x.left
        elif key > x.key:
            x = x.right
        else:
            x.key = key
            x.val = val
            return None
    node = Node(key, val)
    if parent is not None:
        if key < parent.key:
            parent.set_left(node)
        else:
            parent.set_right(node)
    return node


def find(node: Optional[Node], key: Any) -> Optional[Node]:
    """Node holding ``key`` in the subtree rooted at ``node``, or None."""
    x = node
    while x is not None:
        if key < x.key:
            x = x.left
        elif key > x.key:
            x = x.right
        else:
            return x
    return None


def find_min(node: Optional[Node]) -> Optional[Node]:
    """Node with the smallest key in the subtree, or None."""
    if node is None:
        return None
    while node.left is not None:
        node = node.left
    return node


def find_max(node: Optional[Node]) -> Optional[Node]:
    """Node with the largest key in the subtree, or None."""
    if node is None:
        return None
    while node.right is not None:
        node = node.right
    return node


def _successor(root: Optional[Node], key: Any) -> Optional[Node]:
    x = find(root, key)
    if x is None:
        return None
    if x.right is not None:
        return find_min(x.right)
    while x.is_right_child():
        x = x.parent
    return x.parent


def _predecessor(root: Optional[Node], key: Any) -> Optional[Node]:
    x = find(root, key)
    if x is None:
        return None
    if x.left is not None:
        return find_max(x.left)
    while x.is_left_child():
        x = x.parent
    return x.parent


def _remove(root: Optional[Node], x: Node) -> Optional[Node]:
    """Cut ``x`` out of the tree rooted at ``root`` and return the new root.

    A node with two children takes the entry of the smallest node of its
    right subtree, which is cut out instead.
    """
    if x.left is not None and x.right is not None:
        smallest = find_min(x.right)
        x.key, x.val = smallest.key, smallest.val
        x = smallest
    child = x.left if x.left is not None else x.right
    parent = x.parent
    if child is not None:
        child.parent = parent
    x.parent = x.left = x.right = None
    if parent is None:
        return child
    if parent.left is x:
        parent.left = child
    else:
        parent.right = child
    return root


def is_bst(node: Optional[Node], lo: Any = None, hi: Any = None) -> bool:
    """Are all keys of the subtree ordered and within ``lo``..``hi``?

    A bound of None means no bound.
    """
    stack = [(node, lo, hi)]
    while stack:
        x, low, high = stack.pop()
        if x is None:
            continue
        if (low is not None and x.key < low) or (high is not None and x.key > high):
            return False
        stack.append((x.left, low, x.key))
        stack.append((x.right, x.key, high))
    return True


def calc_size(node: Optional[Node]) -> int:
    """Number of nodes in the subtree rooted at ``node``."""
    size = 0
    stack = [node]
    while stack:
        x = stack.pop()
        if x is not None:
            size += 1
            stack.append(x.left)
            stack.append(x.right)
    return size


def keys_between(node: Optional[Node], lo: Any, hi: Any) -> list:
    """Keys of the subtree within ``lo``..``hi`` inclusive, in order."""
    result = []
    stack: list[Node] = []
    x = node
    while stack or x is not None:
        while x is not None:
            stack.append(x)
            x = x.left if lo < x.key else None
        x = stack.pop()
        if lo <= x.key <= hi:
            result.append(x.key)
        x = x.right if hi > x.key else None
    return result


class BinarySearchTree(Tree):
    """Unbalanced binary search tree mapping keys to values."""

    def insert(self, key: Any, val: Any) -> None:
        """Store ``val`` under ``key``, replacing any old value."""
        node = insert_node(self.root, key, val)
        if node is not None:
            if self.root is None:
                self.root = node
            self.size += 1

    def delete(self, key: Any) -> None:
        """Remove ``key`` if present."""
        x = find(self.root, key)
        if x is not None:
            self.root = _remove(self.root, x)
            self.size -= 1

    def get(self, key: Any) -> Any:
        """Value stored under ``key``, or None."""
        x = find(self.root, key)
        return None if x is None else x.val

    def min(self) -> Any:
        """Smallest key, or None for an empty tree."""
        x = find_min(self.root)
        return None if x is None else x.key

    def max(self) -> Any:
        """Largest key, or None for an empty tree."""
        x = find_max(self.root)
        return None if x is None else x.key

    def succ(self, key: Any) -> Any:
        """Next larger key after ``key``; None if there is none or ``key`` is absent."""
        x = _successor(self.root, key)
        return None if x is None else x.key

    def pred(self, key: Any) -> Any:
        """Next smaller key before ``key``; None if there is none or ``key`` is absent."""
        x = _predecessor(self.root, key)
        return None if x is None else x.key