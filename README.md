# algolib

Classic algorithms and data structures in plain Python, with no runtime
dependencies: comparison sorts, radix string sorts, substring search,
string-keyed symbol tables and binary search trees.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Sorting (`algolib.sorting`)

All of these rearrange a list in place, except `merge_sort`, which takes any
iterable and returns a new sorted list:

- `bubble_sort(a)`: stops early once a pass makes no swap.
- `insertion_sort(a)`
- `insertion_sort_dth(a, lo, hi, d)`: sorts the strings `a[lo]` through
  `a[hi]` (both inclusive), comparing their UTF-8 bytes from the `d`-th byte on.
- `merge_sort(a)`
- `merge_sort_aux(a)`: merge sort with one workspace the size of `a`.
- `merge_sort_inplace(a)`: merge sort with no workspace beyond `a` itself.
- `quick_sort(a)`
- `selection_sort(a)`
- `cocktail_sort(a)`: selection sort placing both the minimum and the maximum
  on each pass.
- `shell_sort(a)`: gaps n/2, n/4, ..., 1.

```python
from algolib.sorting import shell_sort

data = [5, 3, 9, 1]
shell_sort(data)
assert data == [1, 3, 5, 9]
```

## String sorting

String sorts order items by the bytes of their UTF-8 encoding. They accept a
list of `str` or a list of `bytes` (not a mix, which raises `TypeError`) and
rearrange it in place.

- `algolib.radix`
  - `lsd_sort(a, w)`: stable sort on the first `w` bytes of each item; an item
    shorter than `w` bytes raises `IndexError`.
  - `lsd_sort_i32(a)`: sorts signed 32-bit integers; a value out of that range
    raises `ValueError`.
  - `msd_sort(a)`: sorts strings of any length.
- `algolib.quick3`
  - `quick3_string_sort(a)`: three-way radix quicksort of strings.
  - `quick3way_sort(a)`: quicksort with three-way partitioning for any
    comparable items.

  Both shuffle the list before sorting.

## Alphabets and searching

- `algolib.alphabet.Alphabet` maps characters to indices and back.
  - `Alphabet("ACGT")` builds one from a string of distinct characters; a
    repeated character raises `ValueError`.
  - `Alphabet.from_radix(radix)` builds one over the code points `0` through
    `radix`.
  - Methods: `to_index` (-1 for characters not in the alphabet), `to_indices`,
    `to_char` (None for an invalid index), `to_chars`, `contains`, `lg_r`, and
    the `radix` property.
  - Ready-made alphabets: `BINARY`, `OCTAL`, `DECIMAL`, `HEXADECIMAL`, `DNA`,
    `LOWERCASE`, `UPPERCASE`, `PROTEIN`, `BASE64`, `ASCII`, `EXTENDED_ASCII`,
    `UNICODE16`.
  - `count(alphabet, s)` counts how often each character of the alphabet occurs
    in `s`.
- `algolib.search` finds a substring and returns its byte offset in the UTF-8
  encoding of the text, or None:
  - `KMP(pattern).search(text)` uses a Knuth-Morris-Pratt automaton built once
    from the pattern. An empty pattern raises `ValueError`.
  - `brute_force_search(pat, txt)` and `brute_force_search_backup(pat, txt)`
    are the simple searches.
- `algolib.palindrome.is_palindrome(word)` tells whether `word` reads the same
  both ways.

```python
from algolib.search import KMP

assert KMP("AAB").search("AAAAB") == 2
```

## Symbol tables keyed by strings

- `algolib.trie.TrieST` is a 256-way trie.
- `algolib.tst.TST` is a ternary search tree. The empty string cannot be a
  key: `put` raises `ValueError` for it.

Both walk keys byte by byte over their UTF-8 encoding and support `put`,
`get`, `in`, `len`, `is_empty`, iteration, `keys`, `keys_with_prefix`,
`keys_that_match` and `longest_prefix_of`. Keys come back in byte order. In
`keys_that_match`, `.` matches any single byte. Putting None under a key
deletes it; `TrieST` also has `delete`.

```python
from algolib.trie import TrieST

st = TrieST()
st.put("she", 0)
st.put("shells", 1)
assert st.longest_prefix_of("shell") == "she"
```

## Binary trees

- `algolib.binary_tree` provides `Node` (with parent links and helpers such as
  `sibling`, `uncle`, `set_left`, `set_right`, `replace_with`), `Tree` (root,
  `size`, `height`, `is_empty`) and `Color`.
- `algolib.bst.BinarySearchTree` is an unbalanced search tree with `insert`,
  `delete`, `get`, `min`, `max`, `succ` and `pred`. The module also has the
  node-level helpers `insert_node`, `find`, `find_min`, `find_max`, `is_bst`,
  `calc_size` and `keys_between`.
- `algolib.redblack.RedBlackTree` is a red-black tree with bottom-up insert
  fix-up; `insert_fix`, `rotate_left` and `rotate_right` are available on
  their own.
- `algolib.llrb.LeftLeaningRedBlackTree` is a left-leaning red-black tree with
  `insert`, `get`, `contains`, `min`, `max`, `keys`, `delete`, `delete_min`
  and `delete_max`. `is_balanced`, `is_23` and `count_blacks` check its
  invariants.
- `algolib.level_builder.build_in_level(tokens, key_type)` builds a tree from
  level-order tokens, where `"#"` marks an empty child; `expand_sharp(tokens)`
  gives the array form with the missing children filled in.
- `algolib.traverse` returns the keys of a tree in pre-order, in-order,
  post-order, level order, bottom-up level order and zigzag order, each in an
  iterative and a recursive version, plus a Morris pre-order walk.
- `algolib.tournament` has `build_tournament_tree(data)` and
  `tournament_pop(tree)`, which removes and returns the largest remaining key.
- `algolib.tree_selection.sort_desc(data)` uses a tournament tree to return
  the items sorted from largest to smallest.

```python
from algolib.level_builder import build_in_level
from algolib.traverse import inorder_recursive

tree = build_in_level(["1", "#", "2", "3"], int)
assert inorder_recursive(tree) == [1, 3, 2]
```

## What it does not do

- `RedBlackTree` supports insertion only; for deletion use
  `LeftLeaningRedBlackTree` or `BinarySearchTree`.
- All structures live in memory; nothing is saved to disk.
- There is no command-line program; the package is used as a library.