"""Alphabets mapping characters of a radix-R set to the integers 0..R-1.

Only characters of the basic multilingual plane are supported.
"""

from __future__ import annotations

from typing import Iterable, Optional

_MAX_VALUE = 65535


def _bmp_char(code: int) -> str:
    # lone surrogates cannot be represented and decode to the replacement character
    return "\ufffd" if 0xD800 <= code <= 0xDFFF else chr(code)


class Alphabet:
    """A set of characters, each with a fixed index."""

    def __init__(self, chars: str) -> None:
        inverse: dict[str, int] = {}
        for index, c in enumerate(chars):
            if ord(c) >= _MAX_VALUE:
                raise ValueError(f"Illegal alphabet: character out of range = {c!r}")
            if c in inverse:
                raise ValueError(f"Illegal alphabet: repeated character = {c!r}")
            inverse[c] = index
        self._chars = chars
        self._inverse: Optional[dict[str, int]] = inverse
        self._radix = len(chars)

    @classmethod
    def from_radix(cls, radix: int) -> "Alphabet":
        """Alphabet of the code points 0 through ``radix``, each indexed by its code point."""
        if not 0 <= radix <= _MAX_VALUE:
            raise ValueError(f"radix must be between 0 and {_MAX_VALUE}, got {radix}")
        alphabet = cls.__new__(cls)
        alphabet._chars = "".join(_bmp_char(code) for code in range(radix + 1))
        alphabet._inverse = None
        alphabet._radix = radix
        return alphabet

    @property
    def radix(self) -> int:
        """Number of characters in this alphabet."""
        return self._radix

    def __len__(self) -> int:
        return self._radix

    def __repr__(self) -> str:
        return f"Alphabet(radix={self._radix})"

    def to_index(self, c: str) -> int:
        """Index of ``c``, or -1 if ``c`` is not in this alphabet."""
        if self._inverse is None:
            code = ord(c)
            return code if code <= self._radix else -1
        return self._inverse.get(c, -1)

    def to_indices(self, s: str) -> list[int]:
        """Indices of the characters of ``s`` (-1 for characters not in the alphabet)."""
        return [self.to_index(c) for c in s]

    def to_char(self, i: int) -> Optional[str]:
        """Character at index ``i``, or None if there is none."""
        if 0 <= i < len(self._chars):
            return self._chars[i]
        return None

    def to_chars(self, indices: Iterable[int]) -> str:
        """String of the characters at ``indices``; invalid indices are skipped."""
        return "".join(c for c in map(self.to_char, indices) if c is not None)

    def contains(self, c: str) -> bool:
        """Is ``c`` a character of this alphabet?"""
        return self.to_index(c) >= 0

    def __contains__(self, c: object) -> bool:
        return isinstance(c, str) and len(c) == 1 and self.contains(c)

    def lg_r(self) -> int:
        """Number of bits needed to represent an index of this alphabet."""
        if self._radix < 1:
            raise ValueError("empty alphabet has no binary logarithm")
        return (self._radix - 1).bit_length()


def count(alphabet: Alphabet, s: str) -> list[int]:
    """Frequency of each character of ``alphabet`` in ``s``, indexed like the alphabet."""
    counts = [0] * alphabet.radix
    for index in alphabet.to_indices(s):
        if 0 <= index < alphabet.radix:
            counts[index] += 1
    return counts


BINARY = Alphabet("01")
OCTAL = Alphabet("01234567")
DECIMAL = Alphabet("0123456789")
HEXADECIMAL = Alphabet("0123456789ABCDEF")
DNA = Alphabet("ACGT")
LOWERCASE = Alphabet("abcdefghijklmnopqrstuvwxyz")
UPPERCASE = Alphabet("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
PROTEIN = Alphabet("ACDEFGHIKLMNPQRSTVWY")
BASE64 = Alphabet("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789")
ASCII = Alphabet.from_radix(128)
EXTENDED_ASCII = Alphabet.from_radix(256)
UNICODE16 = Alphabet.from_radix(65535)