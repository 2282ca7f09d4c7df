import pytest

from edados.avl import AVLNode, AVLTree


def _check(node: AVLNode | None) -> int:
    """Verify AVL invariants and return the subtree's height."""
    if node is None:
        return 0
    hl = _check(node.left)
    hr = _check(node.right)
    if node.left is not None:
        assert node.left.key < node.key
    if node.right is not None:
        assert node.right.key > node.key
    assert node.balance == hl - hr
    assert abs(node.balance) <= 1
    return 1 + max(hl, hr)


SEQUENCES = [
    [10, 5, 15, 3, 0, -1],
    [7, 6, 5, 4, 3, 2, 1],
    [10, 5, 15, 30, 40, 45],
    [1, 2, 3, 4, 5, 6, 7],
    [13, 10, 15, 5, 11, 16, 4, 6, 7],
    [13, 10, 15, 7, 11, 16, 4, 9, 8],
    [40, 20, 70, 53, 84, 50],
]


@pytest.mark.parametrize("keys", SEQUENCES)
def test_invariants_hold_after_each_insert(keys):
    tree = AVLTree()
    for count, key in enumerate(keys, start=1):
        tree.insert(key, key)
        _check(tree.root)
        assert len(tree) == count
    assert [k for k, _ in tree.items()] == sorted(keys)


def test_right_left_case_example():
    tree = AVLTree()
    for key, value in [(40, 40), (20, 20), (70, 70), (53, 53), (84, 84), (50, 60)]:
        tree.insert(key, value)
    assert tree.root.key == 53
    assert tree.get(50) == 60
    _check(tree.root)


def test_update_keeps_size():
    tree = AVLTree()
    tree.insert(1, "a")
    tree.insert(1, "b")
    assert len(tree) == 1
    assert tree.get(1) == "b"


def test_get_missing_and_contains():
    tree = AVLTree()
    for key in [5, 3, 8]:
        tree.insert(key, key * 2)
    assert tree.get(42) is None
    assert 3 in tree
    assert 42 not in tree
    assert dict(tree.items()) == {3: 6, 5: 10, 8: 16}


def test_many_sorted_inserts_stay_logarithmic():
    tree = AVLTree()
    for key in range(1000):
        tree.insert(key, key)
    height = _check(tree.root)
    assert height <= 15
    assert len(tree) == 1000


def test_format_three_nodes():
    tree = AVLTree()
    for key in [1, 2, 3]:
        tree.insert(key, key)
    assert tree.format() == "(r) 2 [0]\n (e) 1 [0]\n (d) 3 [0]\n"


def test_format_empty():
    assert AVLTree().format() == ""


def test_to_dot_single_node():
    tree = AVLTree()
    tree.insert(5, 5)
    assert tree.to_dot() == 'digraph G {\n1 [label="5\n(0)"];\n}\n'


def test_to_dot_edges_and_write(tmp_path):
    tree = AVLTree()
    for key in [1, 2, 3]:
        tree.insert(key, key)
    dot = tree.to_dot()
    assert dot.startswith("digraph G {\n")
    assert dot.endswith("}\n")
    assert '3 -> 1 [label="esq"];' in dot
    assert '3 -> 2 [label="dir"];' in dot
    path = tmp_path / "tree.dot"
    tree.write_dot(path)
    assert path.read_text(encoding="utf-8") == dot