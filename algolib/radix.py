"""Radix string sorts (LSD and MSD) and LSD sort of 32-bit integers.

String sorts order items by the bytes of their UTF-8 encoding. They accept
lists of ``str`` or lists of ``bytes`` and rearrange the list in place.
"""

from __future__ import annotations

from typing import MutableSequence, Union

from .sorting import insertion_sort_dth

StrOrBytes = Union[str, bytes]

_R = 256  # extended ASCII alphabet size
_CUTOFF = 15  # cutoff to insertion sort
_BITS_PER_BYTE = 8
_BYTES_PER_I32 = 4
_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1


def _encode_all(a: MutableSequence[StrOrBytes]) -> tuple[list[bytes], bool]:
    """Byte keys of the items of ``a`` and whether the items are text."""
    if all(isinstance(s, str) for s in a):
        return [s.encode("utf-8") for s in a], True
    if all(isinstance(s, bytes) for s in a):
        return list(a), False
    raise TypeError("items must be all str or all bytes")


def _write_back(a: MutableSequence[StrOrBytes], keys: list[bytes], is_text: bool) -> None:
    a[:] = [k.decode("utf-8") for k in keys] if is_text else keys


def lsd_sort(a: MutableSequence[StrOrBytes], w: int) -> None:
    """Stably sort strings of at least ``w`` bytes, looking at their first ``w`` bytes.

    Raises IndexError if an item is shorter than ``w`` bytes.
    """
    keys, is_text = _encode_all(a)
    n = len(keys)
    for d in reversed(range(w)):
        # key-indexed counting on the d-th byte
        count = [0] * (_R + 1)
        for key in keys:
            count[key[d] + 1] += 1
        for r in range(_R):
            count[r + 1] += count[r]
        aux: list[bytes] = [b""] * n
        for key in keys:
            c = key[d]
            aux[count[c]] = key
            count[c] += 1
        keys = aux
    _write_back(a, keys, is_text)


def lsd_sort_i32(a: MutableSequence[int]) -> None:
    """Sort 32-bit signed integers in place, one byte at a time.

    Raises ValueError if a value does not fit in 32 signed bits.
    """
    for value in a:
        if not _I32_MIN <= value <= _I32_MAX:
            raise ValueError(f"value does not fit in 32 signed bits: {value}")
    mask = _R - 1
    items = list(a)
    n = len(items)
    for d in range(_BYTES_PER_I32):
        shift = _BITS_PER_BYTE * d
        count = [0] * (_R + 1)
        for value in items:
            count[((value >> shift) & mask) + 1] += 1
        for r in range(_R):
            count[r + 1] += count[r]

        # for the most significant byte, 0x80-0xFF comes before 0x00-0x7F
        if d == _BYTES_PER_I32 - 1:
            half = _R // 2
            shift1 = count[_R] - count[half]
            shift2 = count[half]
            for r in range(half):
                count[r] += shift1
            for r in range(half, _R):
                count[r] -= shift2

        aux = [0] * n
        for value in items:
            c = (value >> shift) & mask
            aux[count[c]] = value
            count[c] += 1
        items = aux
    a[:] = items


def _byte_at(key: bytes, d: int) -> int:
    return key[d] if d < len(key) else -1


def _msd(keys: list[bytes], lo: int, hi: int, d: int, aux: list[bytes]) -> None:
    """Sort ``keys[lo..=hi]`` starting at the ``d``-th byte."""
    if hi <= lo + _CUTOFF:
        insertion_sort_dth(keys, lo, hi, d)
        return

    count = [0] * (_R + 2)
    for key in keys[lo:hi + 1]:
        count[_byte_at(key, d) + 2] += 1
    for r in range(_R + 1):
        count[r + 1] += count[r]
    for key in keys[lo:hi + 1]:
        c = _byte_at(key, d)
        aux[count[c + 1]] = key
        count[c + 1] += 1
    keys[lo:hi + 1] = aux[:hi - lo + 1]

    # recursively sort each byte bucket, leaving out keys that have ended
    for r in range(_R):
        left = lo + count[r]
        right = max(lo + count[r + 1] - 1, 0)
        if right > left:
            _msd(keys, left, right, d + 1, aux)


def msd_sort(a: MutableSequence[StrOrBytes]) -> None:
    """Sort strings in place by most-significant-byte-first radix sort."""
    keys, is_text = _encode_all(a)
    n = len(keys)
    if n > 0:
        _msd(keys, 0, n - 1, 0, [b""] * n)
    _write_back(a, keys, is_text)