"""Traversals of a binary tree, each returning the keys in visiting order.

Every traversal exists in a recursive and an iterative form. Level-order
traversals return one list of keys per level.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Optional

from .binary_tree import Node, Tree


def preorder_iterative(tree: Tree) -> list:
    """Keys in pre-order (node, left, right), using an explicit stack."""
    results = []
    stack: list[Node] = []
    node = tree.root
    while node is not None:
        results.append(node.key)
        stack.extend(child for child in (node.right, node.left) if child is not None)
        node = stack.pop() if stack else None
    return results


def preorder_morris(tree: Tree) -> list:
    """Keys in pre-order using Morris threading: constant extra space.

    The tree is threaded temporarily and restored before returning.
    """
    results = []
    cur = tree.root
    while cur is not None:
        if cur.left is None:
            results.append(cur.key)
            cur = cur.right
            continue
        record = cur.left
        while record.right is not None and record.right is not cur:
            record = record.right
        if record.right is None:
            results.append(cur.key)
            # thread back to cur so the walk can return after the left subtree
            record.right = cur
            cur = cur.left
        else:
            record.right = None
            cur = cur.right
    return results


def preorder_recursive(tree: Tree) -> list:
    """Keys in pre-order (node, left, right)."""
    results: list = []

    def visit(node: Optional[Node]) -> None:
        if node is not None:
            results.append(node.key)
            visit(node.left)
            visit(node.right)

    visit(tree.root)
    return results


def inorder_iterative(tree: Tree) -> list:
    """Keys in in-order (left, node, right), using an explicit stack."""
    results = []
    stack: list[Node] = []
    node = tree.root
    while node is not None or stack:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            results.append(node.key)
            node = node.right
    return results


def inorder_recursive(tree: Tree) -> list:
    """Keys in in-order (left, node, right)."""
    results: list = []

    def visit(node: Optional[Node]) -> None:
        if node is not None:
            visit(node.left)
            results.append(node.key)
            visit(node.right)

    visit(tree.root)
    return results


def postorder_iterative(tree: Tree) -> list:
    """Keys in post-order (left, right, node), using a stack and a visited set."""
    results = []
    stack: list[Node] = []
    visited: set[Node] = set()
    node = tree.root
    while node is not None:
        if node.left is not None and node.left not in visited:
            stack.append(node)
            node = node.left
            continue
        if node.right is not None and node.right not in visited:
            stack.append(node)
            node = node.right
            continue
        results.append(node.key)
        visited.add(node)
        node = stack.pop() if stack else None
    return results


def postorder_recursive(tree: Tree) -> list:
    """Keys in post-order (left, right, node)."""
    results: list = []

    def visit(node: Optional[Node]) -> None:
        if node is not None:
            visit(node.left)
            visit(node.right)
            results.append(node.key)

    visit(tree.root)
    return results


def level_order_iterative(tree: Tree) -> list[list]:
    """Keys level by level, top to bottom, left to right, using a queue."""
    results: list[list] = []
    if tree.root is None:
        return results
    nodes: deque[Node] = deque([tree.root])
    next_level: list[Node] = []
    results.append([])
    while True:
        if nodes:
            node = nodes.popleft()
            results[-1].append(node.key)
            next_level.extend(c for c in (node.left, node.right) if c is not None)
        elif next_level:
            results.append([])
            nodes.extend(next_level)
            next_level = []
        else:
            break
    return results


def level_order_recursive(tree: Tree) -> list[list]:
    """Keys level by level, top to bottom, left to right."""
    results: list[list] = []

    def visit(level: list[Node]) -> None:
        if not level:
            return
        results.append([node.key for node in level])
        visit([c for node in level for c in (node.left, node.right) if c is not None])

    if tree.root is not None:
        visit([tree.root])
    return results


def level_order_bottom_up_iterative(tree: Tree) -> list[list]:
    """Keys level by level, from the deepest level up to the root."""
    return level_order_iterative(tree)[::-1]


def level_order_bottom_up_recursive(tree: Tree) -> list[list]:
    """Keys level by level, from the deepest level up to the root."""
    return level_order_recursive(tree)[::-1]


def _children(node: Node, left_to_right: bool) -> list[Node]:
    pair: tuple[Any, Any] = (node.left, node.right) if left_to_right else (node.right, node.left)
    return [c for c in pair if c is not None]


def zigzag_iterative(tree: Tree) -> list[list]:
    """Keys level by level, gathering each next level in alternating direction."""
    results: list[list] = []
    if tree.root is None:
        return results
    nodes: deque[Node] = deque([tree.root])
    next_level: list[Node] = []
    left_to_right = False
    results.append([])
    while True:
        if nodes:
            node = nodes.popleft()
            results[-1].append(node.key)
            next_level.extend(_children(node, left_to_right))
        elif next_level:
            results.append([])
            nodes.extend(next_level)
            next_level = []
            left_to_right = not left_to_right
        else:
            break
    return results


def zigzag_recursive(tree: Tree) -> list[list]:
    """Keys level by level, gathering each next level in alternating direction."""
    results: list[list] = []

    def visit(level: list[Node], left_to_right: bool) -> None:
        if not level:
            return
        results.append([node.key for node in level])
        visit([c for node in level for c in _children(node, left_to_right)], not left_to_right)

    if tree.root is not None:
        visit([tree.root], False)
    return results