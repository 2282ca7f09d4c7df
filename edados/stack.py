"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Any


class Stack:
    """LIFO stack of arbitrary items."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Put ``item`` on top of the stack."""
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it, or None when empty."""
        return self._items[-1] if self._items else None

    def is_empty(self) -> bool:
        """Return True when the stack holds no items."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        if not self._items:
            return "Pilha vazia!"
        return "".join(f"{item} " for item in self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"