from algolib.binary_tree import Tree
from algolib.tournament import build_tournament_tree, tournament_pop
from algolib.traverse import inorder_recursive, preorder_recursive

DATA = [7, 6, 15, 16, 8, 4, 13, 3, 5, 10, 9, 1, 12, 2, 11, 14]


def test_build_tree():
    tree = build_tournament_tree(DATA)
    assert preorder_recursive(tree) == [
        16, 16, 16, 7, 7, 6, 16, 15, 16, 13, 8, 8, 4, 13, 13, 3, 14, 10, 10, 5, 10, 9, 9, 1,
        14, 12, 12, 2, 14, 11, 14,
    ]
    assert inorder_recursive(tree) == [
        7, 7, 6, 16, 15, 16, 16, 16, 8, 8, 4, 13, 13, 13, 3, 16, 5, 10, 10, 10, 9, 9, 1, 14,
        12, 12, 2, 14, 11, 14, 14,
    ]


def test_pop():
    tree = build_tournament_tree(DATA)
    for v in sorted(DATA, reverse=True):
        assert tournament_pop(tree) == v
    assert tournament_pop(tree) is None


def test_pop_odd_count_and_duplicates():
    data = [5, 3, 9, 3, 1, 9, 7]
    tree = build_tournament_tree(data)
    popped = []
    while (v := tournament_pop(tree)) is not None:
        popped.append(v)
    assert popped == sorted(data, reverse=True)


def test_root_holds_maximum():
    tree = build_tournament_tree(DATA)
    assert tree.root.key == max(DATA)


def test_empty():
    tree = build_tournament_tree([])
    assert tree.is_empty()
    assert tournament_pop(tree) is None
    assert tournament_pop(Tree()) is None


def test_single():
    tree = build_tournament_tree([42])
    assert tournament_pop(tree) == 42
    assert tournament_pop(tree) is None