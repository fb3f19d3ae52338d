"""Substring search: brute force and Knuth-Morris-Pratt.

Positions are byte offsets into the UTF-8 encoding of the text.
"""

from __future__ import annotations

from typing import Optional, Union

StrOrBytes = Union[str, bytes]

_R = 256


def _as_bytes(s: StrOrBytes) -> bytes:
    return s if isinstance(s, bytes) else s.encode("utf-8")


def brute_force_search(pat: StrOrBytes, txt: StrOrBytes) -> Optional[int]:
    """Offset of the first occurrence of ``pat`` in ``txt``, trying every position."""
    pattern, text = _as_bytes(pat), _as_bytes(txt)
    for i in range(len(text) - len(pattern) + 1):
        if text.startswith(pattern, i):
            return i
    return None


def brute_force_search_backup(pat: StrOrBytes, txt: StrOrBytes) -> Optional[int]:
    """Brute force search that backs up in the text after each mismatch."""
    pattern, text = _as_bytes(pat), _as_bytes(txt)
    m, n = len(pattern), len(text)
    i = j = 0
    while i < n and j < m:
        if text[i] == pattern[j]:
            j += 1
        else:
            i -= j
            j = 0
        i += 1
    return i - m if j == m else None


class KMP:
    """Knuth-Morris-Pratt matcher built once from a pattern and reused on many texts."""

    def __init__(self, pat: StrOrBytes) -> None:
        pattern = _as_bytes(pat)
        if not pattern:
            raise ValueError("pattern must not be empty")
        m = len(pattern)
        dfa = [[0] * m for _ in range(_R)]
        dfa[pattern[0]][0] = 1
        restart = 0
        for j in range(1, m):
            for row in dfa:
                row[j] = row[restart]
            dfa[pattern[j]][j] = j + 1
            restart = dfa[pattern[j]][restart]
        self._pattern = pattern
        self._dfa = dfa

    @property
    def pattern(self) -> bytes:
        """The pattern, as bytes."""
        return self._pattern

    def search(self, txt: StrOrBytes) -> Optional[int]:
        """Offset of the first occurrence of the pattern in ``txt``, or None."""
        m = len(self._pattern)
        state = 0
        for i, byte in enumerate(_as_bytes(txt)):
            state = self._dfa[byte][state]
            if state == m:
                return i + 1 - m
        return None