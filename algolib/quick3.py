"""Quicksorts with three-way partitioning, for strings and for any ordered items.

Both functions shuffle the list first and then sort it in place.
"""

from __future__ import annotations

import random
from typing import Any, MutableSequence, Union

from .sorting import insertion_sort_dth

StrOrBytes = Union[str, bytes]

_CUTOFF = 15  # cutoff to insertion sort


def _swap(a: MutableSequence[Any], i: int, j: int) -> None:
    a[i], a[j] = a[j], a[i]


def _byte_at(key: bytes, d: int) -> int:
    return key[d] if d < len(key) else -1


def _string_sort(keys: list[bytes], lo: int, hi: int, d: int) -> None:
    """Three-way string quicksort of ``keys[lo..=hi]`` from the ``d``-th byte."""
    if hi <= lo + _CUTOFF:
        insertion_sort_dth(keys, lo, hi, d)
        return

    lt, gt, i = lo, hi, lo + 1
    v = _byte_at(keys[lo], d)
    while i <= gt:
        t = _byte_at(keys[i], d)
        if t < v:
            _swap(keys, lt, i)
            lt += 1
            i += 1
        elif t > v:
            _swap(keys, i, gt)
            gt -= 1
        else:
            i += 1

    # keys[lo..lt-1] < v = keys[lt..gt] < keys[gt+1..hi]
    _string_sort(keys, lo, lt - 1, d)
    if v >= 0:
        # only the middle part moves on to the next byte
        _string_sort(keys, lt, gt, d + 1)
    _string_sort(keys, gt + 1, hi, d)


def quick3_string_sort(a: MutableSequence[StrOrBytes]) -> None:
    """Sort strings in place by three-way radix quicksort on their UTF-8 bytes."""
    if all(isinstance(s, str) for s in a):
        keys, is_text = [s.encode("utf-8") for s in a], True
    elif all(isinstance(s, bytes) for s in a):
        keys, is_text = list(a), False
    else:
        raise TypeError("items must be all str or all bytes")
    random.shuffle(keys)
    _string_sort(keys, 0, len(keys) - 1, 0)
    a[:] = [k.decode("utf-8") for k in keys] if is_text else keys


def _partition_sort(a: MutableSequence[Any], lo: int, hi: int) -> None:
    """Quicksort ``a[lo:hi]`` with three-way partitioning."""
    while hi - lo > 1:
        lt, gt, i = lo, hi - 1, lo + 1
        v = a[lo]
        while i <= gt:
            if a[i] < v:
                _swap(a, lt, i)
                lt += 1
                i += 1
            elif a[i] > v:
                _swap(a, i, gt)
                gt -= 1
            else:
                i += 1
        # recurse into the smaller side, loop over the larger one
        if lt - lo < hi - (gt + 1):
            _partition_sort(a, lo, lt)
            lo = gt + 1
        else:
            _partition_sort(a, gt + 1, hi)
            hi = lt


def quick3way_sort(a: MutableSequence[Any]) -> None:
    """Sort ``a`` in place in natural order by quicksort with three-way partitioning."""
    random.shuffle(a)
    _partition_sort(a, 0, len(a))