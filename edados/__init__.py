"""Classic data structures and algorithm exercises: lists, stacks, trees, hash tables, sorting and small problems."""

__version__ = "0.1.0"

__all__ = [
    "anagrams",
    "avl",
    "bst",
    "chained_table",
    "hashtable",
    "linked_list",
    "primes",
    "problems",
    "rbtree",
    "shunting_yard",
    "slot_list",
    "sorting",
    "stack",
]