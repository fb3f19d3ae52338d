"""Symbol table with string keys backed by a ternary search trie.

Keys are walked byte by byte over their UTF-8 encoding and come back in
byte order. The empty string cannot be a key.
"""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

V = TypeVar("V")

_WILDCARD = ord(".")


class _Node(Generic[V]):
    __slots__ = ("c", "left", "mid", "right", "val")

    def __init__(self, c: int) -> None:
        self.c = c
        self.left: Optional[_Node[V]] = None
        self.mid: Optional[_Node[V]] = None
        self.right: Optional[_Node[V]] = None
        self.val: Optional[V] = None

    def is_empty(self) -> bool:
        return self.val is None and self.left is None and self.mid is None and self.right is None


class TST(Generic[V]):
    """String-keyed symbol table; putting None under a key deletes it."""

    def __init__(self) -> None:
        self._root: Optional[_Node[V]] = None
        self._n = 0

    def __len__(self) -> int:
        return self._n

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def is_empty(self) -> bool:
        """Does the table hold no keys?"""
        return self._n == 0

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def _find(self, key: bytes) -> Optional[_Node[V]]:
        x = self._root
        d = 0
        while x is not None:
            c = key[d]
            if c < x.c:
                x = x.left
            elif c > x.c:
                x = x.right
            elif d < len(key) - 1:
                x = x.mid
                d += 1
            else:
                return x
        return None

    def get(self, key: str) -> Optional[V]:
        """Value stored under ``key``, or None (always None for the empty key)."""
        if not key:
            return None
        x = self._find(key.encode("utf-8"))
        return None if x is None else x.val

    def put(self, key: str, val: Optional[V]) -> None:
        """Store ``val`` under ``key``; None deletes the key.

        Raises ValueError for the empty key.
        """
        k = key.encode("utf-8")
        if not k:
            raise ValueError("key must not be empty")
        present = self.get(key) is not None
        if not present and val is not None:
            self._n += 1
        elif present and val is None:
            self._n -= 1
        self._root = _put(self._root, k, val, 0)

    def keys(self) -> list[str]:
        """All keys, in order."""
        results: list[str] = []
        _collect(self._root, bytearray(), results)
        return results

    def keys_with_prefix(self, prefix: str) -> list[str]:
        """All keys that start with ``prefix``, in order; empty for an empty prefix."""
        results: list[str] = []
        p = prefix.encode("utf-8")
        if not p:
            return results
        x = self._find(p)
        if x is not None:
            if x.val is not None:
                results.append(prefix)
            _collect(x.mid, bytearray(p), results)
        return results

    def longest_prefix_of(self, query: str) -> Optional[str]:
        """Longest key that is a prefix of ``query``, or None."""
        q = query.encode("utf-8")
        length = -1
        x = self._root
        i = 0
        while x is not None and i < len(q):
            c = q[i]
            if c < x.c:
                x = x.left
            elif c > x.c:
                x = x.right
            else:
                i += 1
                if x.val is not None:
                    length = i
                x = x.mid
        return None if length < 0 else q[:length].decode("utf-8")

    def keys_that_match(self, pattern: str) -> list[str]:
        """All keys matching ``pattern``, where ``.`` matches any single byte."""
        results: list[str] = []
        p = pattern.encode("utf-8")
        if p:
            _collect_match(self._root, bytearray(), 0, p, results)
        return results


def _put(x: Optional[_Node], key: bytes, val: object, d: int) -> Optional[_Node]:
    c = key[d]
    if x is None:
        x = _Node(c)
    if c < x.c:
        x.left = _put(x.left, key, val, d)
    elif c > x.c:
        x.right = _put(x.right, key, val, d)
    elif d < len(key) - 1:
        x.mid = _put(x.mid, key, val, d + 1)
    else:
        x.val = val
    # drop nodes that no longer lead to any key
    return None if x.is_empty() else x


def _collect(x: Optional[_Node], prefix: bytearray, results: list[str]) -> None:
    if x is None:
        return
    _collect(x.left, prefix, results)
    prefix.append(x.c)
    if x.val is not None:
        results.append(prefix.decode("utf-8"))
    _collect(x.mid, prefix, results)
    prefix.pop()
    _collect(x.right, prefix, results)


def _collect_match(
    x: Optional[_Node], prefix: bytearray, i: int, pattern: bytes, results: list[str]
) -> None:
    if x is None:
        return
    c = pattern[i]
    wild = c == _WILDCARD
    if wild or c < x.c:
        _collect_match(x.left, prefix, i, pattern, results)
    if wild or c == x.c:
        prefix.append(x.c)
        if i == len(pattern) - 1:
            if x.val is not None:
                results.append(prefix.decode("utf-8"))
        else:
            _collect_match(x.mid, prefix, i + 1, pattern, results)
        prefix.pop()
    if wild or c > x.c:
        _collect_match(x.right, prefix, i, pattern, results)