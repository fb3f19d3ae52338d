"""Build a binary tree from its level-order listing.

The token ``"#"`` stands for a missing child, as in ``{1,#,2,3}``::

    1
     \\
      2
     /
    3
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

from .binary_tree import Node, Tree

SHARP = "#"


def _parent(i: int) -> int:
    return (i - 1) // 2


def _left(i: int) -> int:
    return 2 * i + 1


def expand_sharp(tokens: Sequence[str]) -> list[str]:
    """Fill in the ``"#"`` children of missing nodes so that each token sits
    at its index in the array form of a binary tree.

    Raises ValueError if a value comes after every node able to hold it.
    """
    results: list[str] = []
    last_real = -1
    for v in tokens:
        if not results or v == SHARP:
            results.append(v)
        else:
            while True:
                parent = _parent(len(results))
                if parent > last_real:
                    raise ValueError(f"token {v!r} has no node to hang under")
                if results[parent] == SHARP:
                    # children of a missing node are missing too
                    results.append(SHARP)
                else:
                    results.append(v)
                    break
        if v != SHARP:
            last_real = len(results) - 1
    return results


def _parse(token: str, key_type: Callable[[str], Any]) -> Optional[Node]:
    if token == SHARP:
        return None
    try:
        return Node(key_type(token))
    except (ValueError, TypeError):
        return None


def build_in_level(tokens: Sequence[str], key_type: Callable[[str], Any] = int) -> Tree:
    """Tree whose level-order listing is ``tokens``.

    Each token is turned into a key by ``key_type``; ``"#"`` and tokens that
    cannot be converted are missing nodes. Raises ValueError if a node would
    hang under a missing one.
    """
    tree = Tree()
    slots: list[Optional[Node]] = []
    for i, token in enumerate(expand_sharp(tokens)):
        node = _parse(token, key_type)
        slots.append(node)
        if node is None:
            continue
        tree.size += 1
        if i == 0:
            tree.root = node
            continue
        p = _parent(i)
        parent = slots[p]
        if parent is None:
            raise ValueError(f"token {token!r} hangs under a missing node")
        if _left(p) == i:
            parent.set_left(node)
        else:
            parent.set_right(node)
    return tree