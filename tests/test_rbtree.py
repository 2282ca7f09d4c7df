import math
import random

from edados.rbtree import Color, RBNode, RedBlackTree


def _black_height(node: RBNode | None) -> int:
    """Check left-leaning red-black invariants and return the black height."""
    if node is None:
        return 1
    assert not (node.right is not None and node.right.color is Color.RED)
    if node.color is Color.RED:
        assert node.left is None or node.left.color is Color.BLACK
    if node.left is not None:
        assert node.left.key < node.key
    if node.right is not None:
        assert node.right.key > node.key
    left = _black_height(node.left)
    right = _black_height(node.right)
    assert left == right
    return left + (1 if node.color is Color.BLACK else 0)


def _assert_valid(tree: RedBlackTree) -> None:
    if tree.root is not None:
        assert tree.root.color is Color.BLACK
    _black_height(tree.root)
    assert tree.height() <= 2 * math.log2(len(tree) + 1)


def test_letters():
    tree = RedBlackTree()
    letters = "UTFPR"
    for letter in letters:
        tree.insert(ord(letter), 0)
        _assert_valid(tree)
    assert len(tree) == 5
    for letter in letters:
        assert tree.search(ord(letter)).key == ord(letter)


def test_random_keys():
    rng = random.Random(0)
    n = 200
    tree = RedBlackTree()
    keys = [rng.randrange(n * 10) for _ in range(n)]
    for x in keys:
        tree.insert(x, x)
    _assert_valid(tree)
    assert len(tree) == len(set(keys))


def test_sequential_keys():
    tree = RedBlackTree()
    for i in range(200):
        tree.insert(i, i)
    _assert_valid(tree)
    assert len(tree) == 200
    assert tree.search(150).value == 150


def test_update_value():
    tree = RedBlackTree()
    tree.insert(7, 1)
    tree.insert(7, 2)
    assert len(tree) == 1
    assert tree.search(7).value == 2


def test_search_missing():
    tree = RedBlackTree()
    tree.insert(1, 1)
    assert tree.search(2) is None


def test_empty_tree():
    tree = RedBlackTree()
    assert tree.height() == 0
    assert tree.format() == "(r) NONE\n"


def test_format_single_node():
    tree = RedBlackTree()
    tree.insert(5, 0)
    assert tree.format() == "(r) (5, 0) [P]\n--> (e) NONE\n--> (d) NONE\n"