"""Tournament trees: every branch holds the larger key of its two children,
so the root holds the maximum. Popping the root replaces the winning leaf
with a value smaller than every key and replays the matches above it."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from .binary_tree import Node, Tree


class _Minimal:
    """Marker for an emptied slot; smaller than every key."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MINIMAL"


MINIMAL = _Minimal()


def _branch(n1: Node, n2: Node) -> Node:
    node = Node(max(n1.key, n2.key))
    node.set_left(n1)
    node.set_right(n2)
    return node


def build_tournament_tree(data: Iterable[Any]) -> Tree:
    """Tournament tree over ``data``, built bottom-up, pairing neighbours."""
    nodes = [Node(v) for v in data]
    while len(nodes) > 1:
        paired = [_branch(nodes[i], nodes[i + 1]) for i in range(0, len(nodes) - 1, 2)]
        if len(nodes) % 2:
            paired.append(nodes[-1])
        nodes = paired
    return Tree(nodes[0] if nodes else None)


def _replace_max_by_min(node: Node, root_key: Any) -> Node:
    """Mark the path of the winner as emptied; returns the winner's leaf."""
    node.key, node.val = MINIMAL, None
    while not node.is_leaf():
        left = node.left
        node = left if left is not None and left.key == root_key else node.right
        node.key, node.val = MINIMAL, None
    return node


def _setup_new_max(leaf: Node) -> None:
    node = leaf.parent
    while node is not None:
        candidates = [
            c.key for c in (node.left, node.right) if c is not None and c.key is not MINIMAL
        ]
        node.key = max(candidates) if candidates else MINIMAL
        node.val = None
        node = node.parent


def tournament_pop(tree: Tree) -> Optional[Any]:
    """Remove and return the largest remaining key, or None once all are taken."""
    root = tree.root
    if root is None or root.key is MINIMAL:
        return None
    key = root.key
    leaf = _replace_max_by_min(root, key)
    _setup_new_max(leaf)
    return key