import random

import pytest

from algolib.binary_tree import Node
from algolib.bst import (
    BinarySearchTree,
    calc_size,
    find,
    find_max,
    find_min,
    insert_node,
    is_bst,
    keys_between,
)

KEYS = [100, 150, 50, 125, 114, 107, 7, 60, 200, 1]


@pytest.fixture
def tree():
    t = BinarySearchTree()
    for k in KEYS:
        t.insert(k, str(k))
    return t


def test_insert_and_get(tree):
    for k in KEYS:
        assert tree.get(k) == str(k)
    assert tree.get(999) is None
    assert len(tree) == len(KEYS)
    assert calc_size(tree.root) == len(KEYS)
    assert is_bst(tree.root)


def test_insert_existing_updates_value(tree):
    tree.insert(125, "new")
    assert tree.get(125) == "new"
    assert len(tree) == len(KEYS)
    assert calc_size(tree.root) == len(KEYS)


def test_insert_node_returns_none_for_duplicate():
    root = insert_node(None, 5, "a")
    assert root.key == 5 and root.val == "a"
    child = insert_node(root, 3, "b")
    assert child.parent is root and root.left is child
    assert insert_node(root, 3, "c") is None
    assert child.val == "c"


def test_min_max(tree):
    assert tree.min() == min(KEYS)
    assert tree.max() == max(KEYS)
    assert find_min(tree.root).key == min(KEYS)
    assert find_max(tree.root).key == max(KEYS)


def test_empty_tree_queries():
    t = BinarySearchTree()
    assert t.min() is None
    assert t.max() is None
    assert t.get(1) is None
    assert t.succ(1) is None
    assert find(None, 1) is None
    assert calc_size(None) == 0
    assert is_bst(None)


def test_successor_chain(tree):
    ordered = sorted(KEYS)
    for a, b in zip(ordered, ordered[1:]):
        assert tree.succ(a) == b
        assert tree.pred(b) == a
    assert tree.succ(ordered[-1]) is None
    assert tree.pred(ordered[0]) is None


def test_succ_pred_of_absent_key(tree):
    assert tree.succ(101) is None
    assert tree.pred(101) is None


def test_delete_in_random_order_keeps_invariants():
    rng = random.Random(7)
    keys = rng.sample(range(1000), 200)
    t = BinarySearchTree()
    for k in keys:
        t.insert(k, k)
    rng.shuffle(keys)
    remaining = set(keys)
    for k in keys:
        t.delete(k)
        remaining.discard(k)
        assert t.get(k) is None
        assert is_bst(t.root)
        assert calc_size(t.root) == len(remaining) == len(t)
        if t.root is not None:
            assert t.root.parent is None
    assert t.is_empty()


def test_delete_node_with_two_children(tree):
    tree.delete(100)
    assert tree.get(100) is None
    assert is_bst(tree.root)
    assert keys_between(tree.root, min(KEYS), max(KEYS)) == sorted(k for k in KEYS if k != 100)


def test_delete_absent_key_changes_nothing(tree):
    tree.delete(12345)
    assert len(tree) == len(KEYS)
    assert keys_between(tree.root, min(KEYS), max(KEYS)) == sorted(KEYS)


def test_keys_between(tree):
    assert keys_between(tree.root, min(KEYS), max(KEYS)) == sorted(KEYS)
    assert keys_between(tree.root, 50, 125) == [k for k in sorted(KEYS) if 50 <= k <= 125]
    assert keys_between(tree.root, 101, 106) == []
    assert keys_between(None, 0, 10) == []


def test_is_bst_detects_misplaced_key():
    root = Node(5)
    root.set_left(Node(10))
    assert not is_bst(root)
    root.left.key = 3
    assert is_bst(root)
    assert not is_bst(root, 4, None)


def test_long_sorted_insert():
    n = 4000
    t = BinarySearchTree()
    for k in range(n):
        t.insert(k, k)
    assert calc_size(t.root) == n
    assert t.max() == n - 1
    assert is_bst(t.root)
    assert t.height() == n