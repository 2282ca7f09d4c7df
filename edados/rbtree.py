"""Left-leaning red-black tree mapping keys to values."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


class Color(enum.Enum):
    RED = "V"
    BLACK = "P"


@dataclass(eq=False)
class RBNode:
    """A node of a red-black tree; a new node starts red."""

    key: Any
    value: Any
    color: Color = Color.RED
    left: RBNode | None = None
    right: RBNode | None = None


def _is_red(node: RBNode | None) -> bool:
    return node is not None and node.color is Color.RED


def _rotate_left(h: RBNode) -> RBNode:
    x = h.right
    assert x is not None
    h.right = x.left
    x.left = h
    x.color = h.color
    h.color = Color.RED
    return x


def _rotate_right(h: RBNode) -> RBNode:
    x = h.left
    assert x is not None
    h.left = x.right
    x.right = h
    x.color = h.color
    h.color = Color.RED
    return x


def _flip_colors(h: RBNode) -> None:
    assert h.left is not None and h.right is not None
    h.color = Color.RED
    h.left.color = Color.BLACK
    h.right.color = Color.BLACK


class RedBlackTree:
    """Map stored in a left-leaning red-black tree."""

    def __init__(self) -> None:
        self.root: RBNode | None = None
        self._size = 0

    def insert(self, key: Any, value: Any) -> None:
        """Insert ``key`` with ``value``; an existing key has its value replaced."""
        self.root = self._insert(self.root, key, value)
        self.root.color = Color.BLACK

    def _insert(self, node: RBNode | None, key: Any, value: Any) -> RBNode:
        if node is None:
            self._size += 1
            return RBNode(key, value)
        if key < node.key:
            node.left = self._insert(node.left, key, value)
        elif key > node.key:
            node.right = self._insert(node.right, key, value)
        else:
            node.value = value

        if not _is_red(node.left) and _is_red(node.right):
            node = _rotate_left(node)
        if _is_red(node.left) and _is_red(node.left.left):
            node = _rotate_right(node)
        if _is_red(node.left) and _is_red(node.right):
            _flip_colors(node)
        return node

    def search(self, key: Any) -> RBNode | None:
        """Return the node holding ``key``, or None when absent."""
        node = self.root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    def height(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""

        def walk(node: RBNode | None) -> int:
            if node is None:
                return 0
            return 1 + max(walk(node.left), walk(node.right))

        return walk(self.root)

    def __len__(self) -> int:
        return self._size

    def format(self) -> str:
        """Return an indented text picture of the tree with node colours."""
        lines: list[str] = []

        def walk(node: RBNode | None, level: int, side: str) -> None:
            prefix = "--> " * level
            if node is None:
                lines.append(f"{prefix}({side}) NONE")
                return
            lines.append(f"{prefix}({side}) ({node.key}, {node.value}) [{node.color.value}]")
            walk(node.left, level + 1, "e")
            walk(node.right, level + 1, "d")

        walk(self.root, 0, "r")
        return "".join(f"{line}\n" for line in lines)