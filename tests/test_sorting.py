import random

import pytest

from algolib.sorting import (
    bubble_sort,
    cocktail_sort,
    insertion_sort,
    insertion_sort_dth,
    merge_sort,
    merge_sort_aux,
    merge_sort_inplace,
    quick_sort,
    selection_sort,
    shell_sort,
)

DATA_LEN = 1000


def gen_random_data(n):
    data = list(range(n))
    random.Random(7).shuffle(data)
    return data


def gen_asc_data(n):
    return list(range(n))


def gen_desc_data(n):
    return list(range(n))[::-1]


def gen_eq_data(n):
    return [100] * n


DATASETS = {
    "small": [1, 2, 4, 8, 9, 9, 13, 17, 22],
    "random": gen_random_data(DATA_LEN),
    "asc": gen_asc_data(DATA_LEN),
    "desc": gen_desc_data(DATA_LEN),
    "eq": gen_eq_data(DATA_LEN),
    "dups": [random.Random(3).randrange(10) for _ in range(300)],
    "empty": [],
    "one": [5],
    "two": [2, 1],
}

NAMES = list(DATASETS)


@pytest.mark.parametrize("name", NAMES)
def test_bubble_sort(name):
    data = list(DATASETS[name])
    assert bubble_sort(data) is None
    assert data == sorted(DATASETS[name])


@pytest.mark.parametrize("name", NAMES)
def test_insertion_sort(name):
    data = list(DATASETS[name])
    assert insertion_sort(data) is None
    assert data == sorted(DATASETS[name])


@pytest.mark.parametrize("name", NAMES)
def test_merge_sort_aux(name):
    data = list(DATASETS[name])
    assert merge_sort_aux(data) is None
    assert data == sorted(DATASETS[name])


@pytest.mark.parametrize("name", NAMES)
def test_merge_sort_inplace(name):
    data = list(DATASETS[name])
    assert merge_sort_inplace(data) is None
    assert data == sorted(DATASETS[name])


@pytest.mark.parametrize("name", NAMES)
def test_quick_sort(name):
    data = list(DATASETS[name])
    assert quick_sort(data) is None
    assert data == sorted(DATASETS[name])


@pytest.mark.parametrize("name", NAMES)
def test_selection_sort(name):
    data = list(DATASETS[name])
    assert selection_sort(data) is None
    assert data == sorted(DATASETS[name])


@pytest.mark.parametrize("name", NAMES)
def test_cocktail_sort(name):
    data = list(DATASETS[name])
    assert cocktail_sort(data) is None
    assert data == sorted(DATASETS[name])


@pytest.mark.parametrize("name", NAMES)
def test_shell_sort(name):
    data = list(DATASETS[name])
    assert shell_sort(data) is None
    assert data == sorted(DATASETS[name])


@pytest.mark.parametrize("name", NAMES)
def test_merge_sort_returns_new_list(name):
    original = list(DATASETS[name])
    copy = list(original)
    result = merge_sort(original)
    assert result == sorted(copy)
    assert original == copy


def test_merge_sort_accepts_iterables():
    assert merge_sort(iter([3, 1, 2])) == [1, 2, 3]


WORDS = ["she", "sells", "sea", "shells", "by", "the", "sea", "shore"]


def test_sorts_strings():
    expected = sorted(WORDS)

    words = list(WORDS)
    bubble_sort(words)
    assert words == expected

    words = list(WORDS)
    insertion_sort(words)
    assert words == expected

    words = list(WORDS)
    merge_sort_aux(words)
    assert words == expected

    words = list(WORDS)
    merge_sort_inplace(words)
    assert words == expected

    words = list(WORDS)
    quick_sort(words)
    assert words == expected

    words = list(WORDS)
    selection_sort(words)
    assert words == expected

    words = list(WORDS)
    cocktail_sort(words)
    assert words == expected

    words = list(WORDS)
    shell_sort(words)
    assert words == expected

    assert merge_sort(WORDS) == expected


def test_insertion_sort_dth_shorter_first():
    a = ["aaaa", "aaa"]
    insertion_sort_dth(a, 0, 1, 0)
    assert a == ["aaa", "aaaa"]
    a = ["aaaa", "aaa"]
    insertion_sort_dth(a, 0, 1, 1)
    assert a == ["aaa", "aaaa"]


def test_insertion_sort_dth_from_offset():
    a = ["abaa", "aaa"]
    insertion_sort_dth(a, 0, 1, 1)
    assert a == ["aaa", "abaa"]


def test_insertion_sort_dth_only_touches_range():
    a = ["zz", "dd", "cc", "bb", "aa"]
    insertion_sort_dth(a, 1, 3, 0)
    assert a == ["zz", "bb", "cc", "dd", "aa"]


def test_insertion_sort_dth_ignores_prefix_before_d():
    # the first byte differs but is skipped
    a = ["zb", "aa", "yc"]
    insertion_sort_dth(a, 0, 2, 1)
    assert [w[1] for w in a] == ["a", "b", "c"]


def test_insertion_sort_dth_bytes():
    a = [b"cab", b"abc", b"bca"]
    insertion_sort_dth(a, 0, 2, 0)
    assert a == sorted([b"cab", b"abc", b"bca"])