"""A singly linked list that keeps references to its first and last nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _Node | None = None


class LinkedList:
    """Singly linked list with constant-time append at the end."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._first: _Node | None = None
        self._last: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = _Node(value)
        if self._last is None:
            self._first = node
        else:
            self._last.next = node
        self._last = node
        self._size += 1

    def is_empty(self) -> bool:
        """Return True when the list holds no elements."""
        return self._size == 0

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._first
        while node is not None:
            yield node.value
            node = node.next

    def __str__(self) -> str:
        return "".join(f"{value}, " for value in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"