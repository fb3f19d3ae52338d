"""Comparison sorts: bubble, insertion, merge, quick, selection, cocktail and shell.

All functions except :func:`merge_sort` rearrange the given list in place.
"""

from __future__ import annotations

from typing import Any, Iterable, MutableSequence, Union

StrOrBytes = Union[str, bytes]


def _swap(a: MutableSequence[Any], i: int, j: int) -> None:
    a[i], a[j] = a[j], a[i]


def bubble_sort(a: MutableSequence[Any]) -> None:
    """Sort ``a`` in place, stopping early once a pass makes no swap."""
    n = len(a)
    for i in range(n - 1):
        swapped = False
        for j in range(n - 1 - i):
            if a[j] > a[j + 1]:
                _swap(a, j, j + 1)
                swapped = True
        if not swapped:
            break


def insertion_sort(a: MutableSequence[Any]) -> None:
    """Sort ``a`` in place by inserting each item into the sorted prefix."""
    for i in range(1, len(a)):
        j = i
        while j > 0 and a[j] < a[j - 1]:
            _swap(a, j, j - 1)
            j -= 1


def _as_bytes(s: StrOrBytes) -> bytes:
    return s if isinstance(s, bytes) else s.encode("utf-8")


def _less_from(v: StrOrBytes, w: StrOrBytes, d: int) -> bool:
    """Is ``v`` less than ``w`` when compared from the ``d``-th byte on?"""
    vb, wb = _as_bytes(v), _as_bytes(w)
    for x, y in zip(vb[d:], wb[d:]):
        if x != y:
            return x < y
    return len(vb) < len(wb)


def insertion_sort_dth(a: MutableSequence[StrOrBytes], lo: int, hi: int, d: int) -> None:
    """Insertion-sort the strings ``a[lo..=hi]``, comparing from the ``d``-th byte.

    ``lo`` and ``hi`` are both inclusive.
    """
    for i in range(lo + 1, hi + 1):
        j = i
        while j > lo and _less_from(a[j], a[j - 1], d):
            _swap(a, j, j - 1)
            j -= 1


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(a: Iterable[Any]) -> list:
    """Return a new sorted list; the input is left untouched."""
    items = list(a)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _merge_with_workspace(a: MutableSequence[Any], lo: int, mid: int, hi: int, ws: list) -> None:
    il, iu, i = lo, mid, lo
    while il < mid and iu < hi:
        if a[il] < a[iu]:
            ws[i] = a[il]
            il += 1
        else:
            ws[i] = a[iu]
            iu += 1
        i += 1
    # at most one of the two runs still has items left
    rest = list(a[il:mid]) + list(a[iu:hi])
    ws[i:i + len(rest)] = rest
    a[lo:hi] = ws[lo:hi]


def _aux_sort(a: MutableSequence[Any], lo: int, hi: int, ws: list) -> None:
    if hi - lo > 1:
        mid = (lo + hi) // 2
        _aux_sort(a, lo, mid, ws)
        _aux_sort(a, mid, hi, ws)
        _merge_with_workspace(a, lo, mid, hi, ws)


def merge_sort_aux(a: MutableSequence[Any]) -> None:
    """Merge sort in place, using one workspace the size of ``a``."""
    n = len(a)
    if n > 1:
        _aux_sort(a, 0, n, [None] * n)


def _wmerge(xs: MutableSequence[Any], i: int, m: int, j: int, n: int, w: int) -> None:
    """Merge sorted runs ``xs[i:m]`` and ``xs[j:n]`` into the working area at ``w``."""
    while i < m and j < n:
        if xs[i] < xs[j]:
            _swap(xs, w, i)
            i += 1
        else:
            _swap(xs, w, j)
            j += 1
        w += 1
    while i < m:
        _swap(xs, w, i)
        i += 1
        w += 1
    while j < n:
        _swap(xs, w, j)
        j += 1
        w += 1


def _wsort(xs: MutableSequence[Any], lo: int, hi: int, w: int) -> None:
    """Sort ``xs[lo:hi]`` and leave the result in the working area at ``w``."""
    if hi - lo > 1:
        m = (lo + hi) // 2
        _inplace_sort(xs, lo, m)
        _inplace_sort(xs, m, hi)
        _wmerge(xs, lo, m, m, hi, w)
    else:
        while lo < hi:
            _swap(xs, lo, w)
            lo += 1
            w += 1


def _inplace_sort(a: MutableSequence[Any], lo: int, hi: int) -> None:
    if hi - lo <= 1:
        return
    m = (lo + hi) // 2
    w = lo + hi - m
    # the last half ends up holding sorted items
    _wsort(a, lo, m, w)
    while w - lo > 2:
        n = w
        w = lo + (n - lo + 1) // 2
        # the first half of the previous working area now holds sorted items
        _wsort(a, w, n, lo)
        _wmerge(a, lo, lo + n - w, n, hi, w)
    n = w
    while n > lo:
        m = n
        while m < hi and a[m] < a[m - 1]:
            _swap(a, m, m - 1)
            m += 1
        n -= 1


def merge_sort_inplace(a: MutableSequence[Any]) -> None:
    """Merge sort in place without any workspace beyond ``a`` itself."""
    _inplace_sort(a, 0, len(a))


def _partition3(a: MutableSequence[Any], lo: int, hi: int, pivot: Any) -> tuple[int, int]:
    """Three-way partition ``a[lo:hi]``; returns the bounds of the run equal to ``pivot``."""
    lt, i, gt = lo, lo, hi
    while i < gt:
        if a[i] < pivot:
            _swap(a, lt, i)
            lt += 1
            i += 1
        elif a[i] > pivot:
            gt -= 1
            _swap(a, i, gt)
        else:
            i += 1
    return lt, gt


def _select(a: MutableSequence[Any], lo: int, hi: int, k: int) -> None:
    """Rearrange ``a[lo:hi]`` so that ``a[k]`` holds its final sorted value."""
    while hi - lo > 1:
        pivot = sorted((a[lo], a[(lo + hi) // 2], a[hi - 1]))[1]
        lt, gt = _partition3(a, lo, hi, pivot)
        if k < lt:
            hi = lt
        elif k >= gt:
            lo = gt
        else:
            return


def quick_sort(a: MutableSequence[Any]) -> None:
    """Sort in place by repeatedly placing the median and sorting both sides."""
    _quick(a, 0, len(a))


def _quick(a: MutableSequence[Any], lo: int, hi: int) -> None:
    while hi - lo > 1:
        k = lo + (hi - lo) // 2
        _select(a, lo, hi, k)
        _quick(a, lo, k)
        lo = k + 1


def selection_sort(a: MutableSequence[Any]) -> None:
    """Sort in place by moving the smallest remaining item to the front."""
    n = len(a)
    for i in range(n):
        m = min(range(i, n), key=a.__getitem__)
        _swap(a, i, m)


def cocktail_sort(a: MutableSequence[Any]) -> None:
    """Selection sort that places both the minimum and the maximum on each pass."""
    n = len(a)
    for i in range(n // 2):
        lo_idx, hi_idx = i, n - 1 - i
        if a[lo_idx] > a[hi_idx]:
            _swap(a, lo_idx, hi_idx)
        for j in range(i + 1, n - 1 - i):
            if a[lo_idx] > a[j]:
                lo_idx = j
            if a[hi_idx] < a[j]:
                hi_idx = j
        _swap(a, i, lo_idx)
        _swap(a, n - 1 - i, hi_idx)


def shell_sort(a: MutableSequence[Any]) -> None:
    """Diminishing-increment insertion sort with gaps n/2, n/4, ..., 1."""
    n = len(a)
    gap = n
    while gap > 1:
        gap //= 2
        for i in range(gap, n):
            value = a[i]
            j = i
            while j >= gap and value < a[j - gap]:
                a[j] = a[j - gap]
                j -= gap
            a[j] = value