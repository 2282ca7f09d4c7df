"""Unbalanced binary search tree mapping keys to values."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A binary tree node holding a key, a value and two children."""

    key: Any
    value: Any
    left: Node | None = None
    right: Node | None = None


class BinarySearchTree:
    """Map stored in a plain binary search tree."""

    def __init__(self) -> None:
        self.root: Node | None = None

    def search(self, key: Any) -> Node | None:
        """Return the node holding ``key``, or None when absent."""
        node = self.root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    def insert(self, key: Any, value: Any) -> None:
        """Insert ``key`` with ``value``; an existing key has its value replaced."""
        if self.root is None:
            self.root = Node(key, value)
            return
        node = self.root
        while True:
            if key == node.key:
                node.value = value
                return
            if key < node.key:
                if node.left is None:
                    node.left = Node(key, value)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = Node(key, value)
                    return
                node = node.right

    def remove(self, key: Any) -> None:
        """Remove ``key``; the tree is left unchanged when it is absent."""
        parent: Node | None = None
        node = self.root
        while node is not None and node.key != key:
            parent = node
            node = node.left if key < node.key else node.right
        if node is None:
            return

        if node.left is not None and node.right is not None:
            succ_parent = node
            succ = node.right
            while succ.left is not None:
                succ_parent = succ
                succ = succ.left
            node.key, node.value = succ.key, succ.value
            parent, node = succ_parent, succ

        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in key order."""
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key, node.value
            node = node.right

    def format(self) -> str:
        """Return an indented text picture of the tree."""
        lines: list[str] = []

        def walk(node: Node | None, level: int, side: str) -> None:
            prefix = "--> " * level
            if node is None:
                lines.append(f"{prefix}({side}) NONE")
                return
            lines.append(f"{prefix}({side}) ({node.key}, {node.value})")
            walk(node.left, level + 1, "e")
            walk(node.right, level + 1, "d")

        walk(self.root, 0, "r")
        return "".join(f"{line}\n" for line in lines)