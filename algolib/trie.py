"""Symbol table with string keys backed by a 256-way trie.

Keys are walked byte by byte over their UTF-8 encoding. Keys come back in
byte order, which for UTF-8 is the same as code point order.
"""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

V = TypeVar("V")

_WILDCARD = ord(".")


class _Node(Generic[V]):
    __slots__ = ("val", "next")

    def __init__(self) -> None:
        self.val: Optional[V] = None
        self.next: dict[int, _Node[V]] = {}


class TrieST(Generic[V]):
    """String-keyed symbol table.

    Values may not be None: putting None under a key deletes that key.
    Besides the usual operations it finds the longest key that is a prefix of
    a query, all keys with a given prefix, and all keys matching a pattern in
    which ``.`` stands for any single byte.
    """

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
        for b in key:
            if x is None:
                return None
            x = x.next.get(b)
        return x

    def get(self, key: str) -> Optional[V]:
        """Value stored under ``key``, or None."""
        x = self._find(key.encode("utf-8"))
        return None if x is None else x.val

    def put(self, key: str, val: Optional[V]) -> None:
        """Store ``val`` under ``key``, replacing any old value; None deletes the key."""
        if val is None:
            self.delete(key)
            return
        if self._root is None:
            self._root = _Node()
        x = self._root
        for b in key.encode("utf-8"):
            child = x.next.get(b)
            if child is None:
                child = x.next[b] = _Node()
            x = child
        if x.val is None:
            self._n += 1
        x.val = val

    def delete(self, key: str) -> None:
        """Remove ``key`` if present, pruning branches left empty."""
        self._root = self._delete(self._root, key.encode("utf-8"), 0)

    def _delete(self, x: Optional[_Node[V]], key: bytes, d: int) -> Optional[_Node[V]]:
        if x is None:
            return None
        if d == len(key):
            if x.val is not None:
                self._n -= 1
                x.val = None
        else:
            b = key[d]
            child = self._delete(x.next.get(b), key, d + 1)
            if child is None:
                x.next.pop(b, None)
            else:
                x.next[b] = child
        if x.val is not None or x.next:
            return x
        return None

    def keys(self) -> list[str]:
        """All keys, in order."""
        return self.keys_with_prefix("")

    def keys_with_prefix(self, prefix: str) -> list[str]:
        """All keys that start with ``prefix``, in order."""
        start = prefix.encode("utf-8")
        results: list[str] = []
        _collect(self._find(start), bytearray(start), results)
        return results

    def keys_that_match(self, pattern: str) -> list[str]:
        """All keys matching ``pattern``, where ``.`` matches any single byte."""
        results: list[str] = []
        _collect_match(self._root, bytearray(), pattern.encode("utf-8"), results)
        return results

    def longest_prefix_of(self, query: str) -> Optional[str]:
        """Longest key that is a prefix of ``query``, or None."""
        q = query.encode("utf-8")
        length = -1
        x = self._root
        d = 0
        while x is not None:
            if x.val is not None:
                length = d
            if d == len(q):
                break
            x = x.next.get(q[d])
            d += 1
        return None if length < 0 else q[:length].decode("utf-8")


def _collect(x: Optional[_Node], prefix: bytearray, results: list[str]) -> None:
    if x is None:
        return
    if x.val is not None:
        results.append(prefix.decode("utf-8"))
    for b in sorted(x.next):
        prefix.append(b)
        _collect(x.next[b], prefix, results)
        prefix.pop()


def _collect_match(
    x: Optional[_Node], prefix: bytearray, pattern: bytes, results: list[str]
) -> None:
    if x is None:
        return
    d = len(prefix)
    if d == len(pattern):
        if x.val is not None:
            results.append(prefix.decode("utf-8"))
        return
    c = pattern[d]
    candidates = sorted(x.next) if c == _WILDCARD else [c]
    for b in candidates:
        prefix.append(b)
        _collect_match(x.next.get(b), prefix, pattern, results)
        prefix.pop()