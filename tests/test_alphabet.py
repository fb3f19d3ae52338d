import string

import pytest

from algolib.alphabet import (
    ASCII,
    BASE64,
    BINARY,
    DECIMAL,
    DNA,
    EXTENDED_ASCII,
    HEXADECIMAL,
    LOWERCASE,
    OCTAL,
    PROTEIN,
    UPPERCASE,
    Alphabet,
    count,
)

STRING_ALPHABETS = {
    "01": BINARY,
    "01234567": OCTAL,
    "0123456789": DECIMAL,
    "0123456789ABCDEF": HEXADECIMAL,
    "ACGT": DNA,
    string.ascii_lowercase: LOWERCASE,
    string.ascii_uppercase: UPPERCASE,
    "ACDEFGHIKLMNPQRSTVWY": PROTEIN,
}


@pytest.mark.parametrize("chars", list(STRING_ALPHABETS))
def test_radix_is_number_of_chars(chars):
    built = Alphabet(chars)
    assert built.radix == len(chars)
    assert STRING_ALPHABETS[chars].radix == built.radix


@pytest.mark.parametrize("chars", list(STRING_ALPHABETS))
def test_index_char_round_trip(chars):
    alphabet = Alphabet(chars)
    indices = alphabet.to_indices(chars)
    assert indices == list(range(len(chars)))
    assert alphabet.to_chars(indices) == chars
    assert STRING_ALPHABETS[chars].to_indices(chars) == indices


def test_dna_round_trip():
    s = "GATTACA"
    assert DNA.to_chars(DNA.to_indices(s)) == s


def test_missing_char_index():
    assert DNA.to_index("X") == -1
    assert not DNA.contains("X")
    assert "X" not in DNA


def test_contains():
    lower = Alphabet(string.ascii_lowercase)
    assert all(lower.contains(c) for c in string.ascii_lowercase)
    assert not any(lower.contains(c) for c in string.ascii_uppercase)
    assert all(c in LOWERCASE for c in string.ascii_lowercase)
    assert not any(c in LOWERCASE for c in string.ascii_uppercase)


def test_repeated_character_rejected():
    with pytest.raises(ValueError):
        Alphabet("ABCA")


def test_non_bmp_character_rejected():
    with pytest.raises(ValueError):
        Alphabet("A\U0001F600")


def test_to_char_out_of_range():
    assert DNA.to_char(DNA.radix) is None
    assert DNA.to_char(-1) is None


def test_to_chars_skips_invalid():
    assert DNA.to_chars([0, 99, 1, -5]) == DNA.to_chars([0, 1])


@pytest.mark.parametrize(
    "alphabet", [BINARY, OCTAL, DECIMAL, HEXADECIMAL, DNA, LOWERCASE, BASE64, ASCII, EXTENDED_ASCII]
)
def test_lg_r_is_minimal_bit_count(alphabet):
    bits = alphabet.lg_r()
    assert 2 ** bits >= alphabet.radix
    assert 2 ** (bits - 1) < alphabet.radix


def test_lg_r_empty_alphabet():
    with pytest.raises(ValueError):
        Alphabet("").lg_r()


def test_radix_alphabet_indexes_by_code_point():
    assert EXTENDED_ASCII.radix == 256
    assert EXTENDED_ASCII.to_index(chr(200)) == ord(chr(200))
    assert EXTENDED_ASCII.to_char(ord("A")) == "A"
    assert EXTENDED_ASCII.to_index(chr(300)) == -1


def test_radix_alphabet_round_trip():
    s = "Hello, world!"
    assert ASCII.to_chars(ASCII.to_indices(s)) == s


@pytest.mark.parametrize("radix", [-1, 65536])
def test_from_radix_out_of_range(radix):
    with pytest.raises(ValueError):
        Alphabet.from_radix(radix)


def test_count_matches_occurrences():
    s = "GATTACAXXG"
    counts = count(DNA, s)
    assert len(counts) == DNA.radix
    for c in "ACGT":
        assert counts[DNA.to_index(c)] == s.count(c)
    assert sum(counts) == len(s) - s.count("X")


def test_count_radix_alphabet():
    s = "abcabc" + chr(1000)
    counts = count(EXTENDED_ASCII, s)
    assert counts[ord("a")] == s.count("a")
    assert sum(counts) == len(s) - 1