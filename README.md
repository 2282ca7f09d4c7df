# edados

A collection of classic data structures and small algorithm exercises,
written in plain Python with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `edados.linked_list` | `LinkedList`, a singly linked list with `append`, `is_empty`, `in`, `len` and iteration |
| `edados.stack` | `Stack`, a LIFO stack with `push`, `pop` (raises `IndexError` when empty) and `peek` (returns `None` when empty) |
| `edados.shunting_yard` | `shunting_yard`, infix to reverse Polish notation for integer expressions with `+ - * /` and parentheses |
| `edados.sorting` | `quicksort`, `partition`, `shuffle`, `random_vector`, `unique_random_vector`, `sorted_vector`, `format_vector` |
| `edados.bst` | `BinarySearchTree` with `insert`, `search`, `remove`, `items` and `format` |
| `edados.avl` | `AVLTree`, balanced on insertion, with `get`, `items`, a text picture (`format`) and Graphviz output (`to_dot`, `write_dot`) |
| `edados.rbtree` | `RedBlackTree`, a left-leaning red-black tree with `insert`, `search`, `height` and `format` |
| `edados.hashtable` | `OpenAddressingTable`, integer keys with linear probing; doubles when more than half full, halves when under a fifth |
| `edados.slot_list` | `SlotList`, a key/value list that marks removed positions free and reuses them |
| `edados.chained_table` | `ChainedTable`, a hash table with one `SlotList` per bucket |
| `edados.primes` | `create_prime_file` and `PrimeList`, binary tables of little-endian 4-byte primes with `next_prime` |
| `edados.problems` | `k_largest`, `are_anagrams`, `most_frequent`, `remove_duplicates`, `dedup`, `count_occurrences`, `two_sum`, `two_sum_bruteforce`, `union`, `intersection`, `difference`, `symmetric_difference` |
| `edados.anagrams` | `WordList`, a word list indexed by lower-cased sorted letters for anagram lookup |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from edados.linked_list import LinkedList
from edados.avl import AVLTree
from edados.hashtable import OpenAddressingTable
from edados.shunting_yard import shunting_yard
from edados.problems import union, two_sum

lst = LinkedList([1, 2, 3])
lst.append(4)
print(3 in lst, len(lst))          # True 4

tree = AVLTree()
for key in (10, 5, 15, 3, 0, -1):
    tree.insert(key, key * 10)
print(tree.format())
tree.write_dot("tree.dot")

table = OpenAddressingTable(4)
table.insert(10, 5)
table.insert(11, 7)
print(table.get(10), 11 in table, len(table))   # 5 True 2

print(shunting_yard("(2+1) - 2 * 3"))   # "2 1 + 2 3 * - "

print(union([1, 4, 2, 3, 1, 1, 5], [1, 7, 0, 2]))   # [1, 4, 2, 3, 5, 7, 0]
print(two_sum([2, -1, 5, 8, 7, 4], 12))             # (5, 7)
```

`shunting_yard` ignores blanks and any character that is neither a digit
nor an operator, and raises `ValueError` on a `)` without a matching `(`.

## Command-line tools

Convert an infix arithmetic expression to reverse Polish notation. With no
arguments, each line read from standard input is converted:

```
edados-rpn "(2+1) - 2 * 3"
```

List the anagrams of a word found in a word list (one word per line).
The list is `br.txt` in the current directory unless `-d`/`--dictionary`
names another file:

```
edados-anagrams amor
edados-anagrams -d words.txt amor
```

## What it does not do

- `AVLTree` and `RedBlackTree` support insertion and lookup only; neither
  has a removal operation. `BinarySearchTree` does support `remove`.
- There is no trie.
- Nothing is stored on disk except what `AVLTree.write_dot` and
  `create_prime_file` write when asked; no prime table ships with the
  package, so `PrimeList.load` needs a file you provide.