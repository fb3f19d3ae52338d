import pytest

from algolib.trie import TrieST

WORDS = "she sells sea shells by the sea shore".split()


@pytest.fixture
def trie():
    t = TrieST()
    for i, w in enumerate(WORDS):
        t.put(w, i)
    return t


def test_len_counts_distinct_keys(trie):
    assert len(trie) == len(set(WORDS))
    assert not trie.is_empty()


def test_empty_table():
    t = TrieST()
    assert t.is_empty()
    assert len(t) == 0
    assert t.keys() == []
    assert t.get("a") is None
    assert t.longest_prefix_of("abc") is None


def test_get_returns_latest_value(trie):
    expected = {w: i for i, w in enumerate(WORDS)}
    for w, i in expected.items():
        assert trie.get(w) == i
    assert trie.get("shell") is None
    assert trie.get("zzz") is None


def test_contains(trie):
    assert "shells" in trie
    assert "sh" not in trie
    assert 42 not in trie


def test_keys_are_sorted(trie):
    assert trie.keys() == sorted(set(WORDS))
    assert list(trie) == sorted(set(WORDS))


def test_keys_with_prefix(trie):
    assert trie.keys_with_prefix("sh") == ["she", "shells", "shore"]
    assert trie.keys_with_prefix("x") == []


def test_keys_that_match(trie):
    assert trie.keys_that_match(".he") == ["she", "the"]
    assert trie.keys_that_match("s..") == ["sea", "she"]
    assert trie.keys_that_match("....") == []


def test_longest_prefix_of(trie):
    assert trie.longest_prefix_of("shellsort") == "shells"
    assert trie.longest_prefix_of("shell") == "she"
    assert trie.longest_prefix_of("quicksort") is None


def test_delete(trie):
    trie.delete("shells")
    assert trie.get("shells") is None
    assert len(trie) == len(set(WORDS)) - 1
    assert trie.get("she") == WORDS.index("she")
    trie.delete("absent")
    assert len(trie) == len(set(WORDS)) - 1


def test_put_none_deletes(trie):
    trie.put("sea", None)
    assert "sea" not in trie
    assert "sea" not in trie.keys()


def test_delete_everything_empties(trie):
    for w in set(WORDS):
        trie.delete(w)
    assert trie.is_empty()
    assert trie.keys() == []
    assert trie.keys_with_prefix("s") == []


def test_empty_key():
    t = TrieST()
    t.put("", "root")
    t.put("a", "leaf")
    assert t.get("") == "root"
    assert t.keys() == ["", "a"]
    assert t.longest_prefix_of("b") == ""


def test_non_ascii_keys_sorted():
    t = TrieST()
    words = ["é", "e", "z", "ée"]
    for w in words:
        t.put(w, w)
    assert t.keys() == sorted(words)
    assert t.longest_prefix_of("éex") == "ée"