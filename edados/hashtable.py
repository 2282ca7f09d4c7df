"""Hash table with open addressing and linear probing that resizes itself."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


class State(enum.IntEnum):
    """State of a slot in an open addressing table."""

    FREE = 0
    OCCUPIED = 1
    DELETED = 2


@dataclass
class Entry:
    """One slot of the table: a key, its value and the slot's state."""

    key: int = 0
    value: Any = 0
    state: State = State.FREE


class OpenAddressingTable:
    """Map from integer keys to values using linear probing.

    The table doubles when more than half of it is occupied before an
    insertion, and halves when fewer than a fifth of its slots remain in use
    after a removal.
    """

    def __init__(self, m: int) -> None:
        if m < 1:
            raise ValueError("table size must be at least 1")
        self.slots: list[Entry] = [Entry() for _ in range(m)]
        self._n = 0

    def hash(self, key: int, k: int = 0) -> int:
        """Return the ``k``-th probe position of ``key``."""
        m = len(self.slots)
        return (key % m + k) % m

    def _resize(self, new_m: int) -> None:
        new_m = max(new_m, 1)
        old = self.slots
        self.slots = [Entry() for _ in range(new_m)]
        self._n = 0
        for entry in old:
            if entry.state is State.OCCUPIED:
                self.insert(entry.key, entry.value)

    def insert(self, key: int, value: Any) -> int:
        """Store ``value`` under ``key`` and return the slot it occupies.

        An existing key has its value replaced.
        """
        position = self.find(key)
        if position is None:
            if self._n > len(self.slots) // 2:
                self._resize(len(self.slots) * 2)
            if self._n == len(self.slots):
                raise RuntimeError("hash table is full")
            k = 0
            position = self.hash(key, k)
            while self.slots[position].state is State.OCCUPIED:
                k += 1
                position = self.hash(key, k)
            entry = self.slots[position]
            entry.key = key
            entry.state = State.OCCUPIED
            self._n += 1
        self.slots[position].value = value
        return position

    def find(self, key: int) -> int | None:
        """Return the slot holding ``key``, or None when it is absent."""
        for k in range(len(self.slots)):
            position = self.hash(key, k)
            entry = self.slots[position]
            if entry.state is State.FREE:
                return None
            if entry.state is State.OCCUPIED and entry.key == key:
                return position
        return None

    def remove(self, key: int) -> None:
        """Remove ``key``; nothing happens when it is absent."""
        position = self.find(key)
        if position is None:
            return
        self.slots[position].state = State.DELETED
        self._n -= 1
        if self._n < len(self.slots) // 5:
            self._resize(len(self.slots) // 2)

    def get(self, key: int, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default``."""
        position = self.find(key)
        return default if position is None else self.slots[position].value

    def keys(self) -> list[int]:
        """Return the stored keys in slot order."""
        return [entry.key for entry in self.slots if entry.state is State.OCCUPIED]

    def items(self) -> list[tuple[int, Any]]:
        """Return the stored ``(key, value)`` pairs in slot order."""
        return [
            (entry.key, entry.value)
            for entry in self.slots
            if entry.state is State.OCCUPIED
        ]

    def format(self) -> str:
        """Return a text listing of every slot of the table."""
        lines = [f"M={len(self.slots)}, N={self._n}"]
        lines.extend(
            f"{i}: ({entry.key} -> {entry.value}) [{int(entry.state)}]"
            for i, entry in enumerate(self.slots)
        )
        return "".join(f"{line}\n" for line in lines)

    def __len__(self) -> int:
        return self._n

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.find(key) is not None

    def __repr__(self) -> str:
        return f"OpenAddressingTable({dict(self.items())!r})"