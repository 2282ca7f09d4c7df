"""AVL tree keyed by comparable keys, balanced on insertion."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class AVLNode:
    """A node of an AVL tree; ``balance`` is left height minus right height."""

    key: Any
    value: Any
    balance: int = 0
    left: AVLNode | None = None
    right: AVLNode | None = None


def _rotate_right(p: AVLNode) -> AVLNode:
    u = p.left
    assert u is not None
    p.left = u.right
    u.right = p
    return u


def _rotate_left(p: AVLNode) -> AVLNode:
    z = p.right
    assert z is not None
    p.right = z.left
    z.left = p
    return z


def _fix_left(p: AVLNode) -> AVLNode:
    """Rebalance a subtree whose left side became two levels taller."""
    u = p.left
    assert u is not None
    if u.balance == 1:
        logger.debug("Caso E, RotDir(p)")
        root = _rotate_right(p)
        p.balance = 0
    else:
        logger.debug("Caso E D, RotEsq(u), RotDir(p)")
        v = u.right
        assert v is not None
        p.left = _rotate_left(u)
        root = _rotate_right(p)
        if v.balance == -1:
            u.balance, p.balance = 1, 0
        elif v.balance == 0:
            u.balance, p.balance = 0, 0
        else:
            u.balance, p.balance = 0, -1
    root.balance = 0
    return root


def _fix_right(p: AVLNode) -> AVLNode:
    """Rebalance a subtree whose right side became two levels taller."""
    z = p.right
    assert z is not None
    if z.balance == -1:
        logger.debug("Caso D, RotEsq(p)")
        root = _rotate_left(p)
        p.balance = 0
    else:
        logger.debug("Caso D E, RotDir(z), RotEsq(p)")
        y = z.left
        assert y is not None
        p.right = _rotate_right(z)
        root = _rotate_left(p)
        if y.balance == -1:
            z.balance, p.balance = 0, 1
        elif y.balance == 0:
            z.balance, p.balance = 0, 0
        else:
            z.balance, p.balance = -1, 0
    root.balance = 0
    return root


class AVLTree:
    """Map from keys to values stored in an AVL tree."""

    def __init__(self) -> None:
        self.root: AVLNode | None = None
        self._size = 0

    def insert(self, key: Any, value: Any) -> None:
        """Insert ``key`` with ``value``; an existing key has its value replaced."""
        self.root, _ = self._insert(self.root, key, value)

    def _insert(self, node: AVLNode | None, key: Any, value: Any) -> tuple[AVLNode, bool]:
        if node is None:
            self._size += 1
            return AVLNode(key, value), True
        if key == node.key:
            node.value = value
            return node, False
        if key < node.key:
            node.left, grew = self._insert(node.left, key, value)
            if not grew:
                return node, False
            if node.balance == -1:
                node.balance = 0
                return node, False
            if node.balance == 0:
                node.balance = 1
                return node, True
            return _fix_left(node), False
        node.right, grew = self._insert(node.right, key, value)
        if not grew:
            return node, False
        if node.balance == 1:
            node.balance = 0
            return node, False
        if node.balance == 0:
            node.balance = -1
            return node, True
        return _fix_right(node), False

    def _find(self, key: Any) -> AVLNode | None:
        node = self.root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    def get(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None when absent."""
        node = self._find(key)
        return None if node is None else node.value

    def __contains__(self, key: object) -> bool:
        return self._find(key) is not None

    def __len__(self) -> int:
        return self._size

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in key order."""
        stack: list[AVLNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key, node.value
            node = node.right

    def format(self) -> str:
        """Return an indented text picture of the tree with balance factors."""
        lines: list[str] = []

        def walk(node: AVLNode | None, level: int, side: str) -> None:
            if node is None:
                return
            lines.append(f"{' ' * level}({side}) {node.key} [{node.balance}]")
            walk(node.left, level + 1, "e")
            walk(node.right, level + 1, "d")

        walk(self.root, 0, "r")
        return "".join(f"{line}\n" for line in lines)

    def to_dot(self) -> str:
        """Return a Graphviz description of the tree."""
        lines = ["digraph G {"]
        next_id = 1

        def walk(node: AVLNode | None) -> int:
            nonlocal next_id
            if node is None:
                return 0
            left = walk(node.left)
            right = walk(node.right)
            me = next_id
            next_id += 1
            lines.append(f'{me} [label="{node.key}\n({node.balance})"];')
            if left:
                lines.append(f'{me} -> {left} [label="esq"];')
            if right:
                lines.append(f'{me} -> {right} [label="dir"];')
            return me

        walk(self.root)
        lines.append("}")
        return "".join(f"{line}\n" for line in lines)

    def write_dot(self, path: str | Path) -> None:
        """Write the Graphviz description of the tree to ``path``."""
        Path(path).write_text(self.to_dot(), encoding="utf-8")