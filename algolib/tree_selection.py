"""Selection sort improved with a tournament tree that reuses comparisons."""

from __future__ import annotations

from typing import Any, Iterable

from .tournament import build_tournament_tree, tournament_pop


def sort_desc(data: Iterable[Any]) -> list:
    """New list of ``data`` sorted from largest to smallest.

    Building the tree takes O(n); each of the n pops takes O(log n).
    """
    tree = build_tournament_tree(data)
    result = []
    while (key := tournament_pop(tree)) is not None:
        result.append(key)
    return result