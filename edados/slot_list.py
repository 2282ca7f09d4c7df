"""A list of key-value slots that reuses freed positions."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Slot:
    """A position of the list: a key, its value and whether it is in use."""

    key: Any
    value: Any
    occupied: bool = True


class SlotList:
    """Keyed list where removed positions are marked free and filled again later."""

    def __init__(self, alloc_step: int = 10) -> None:
        if alloc_step < 1:
            raise ValueError("alloc_step must be at least 1")
        self.alloc_step = alloc_step
        self.capacity = alloc_step
        self.slots: list[Slot] = []
        self._size = 0

    def insert(self, key: Any, value: Any) -> int:
        """Store ``value`` under ``key`` and return its position.

        An existing key keeps its position; otherwise the first free position
        is used, or a new one at the end.
        """
        free: int | None = None
        position = len(self.slots)
        for i, slot in enumerate(self.slots):
            if slot.occupied and slot.key == key:
                free = None
                self._size -= 1
                position = i
                break
            if not slot.occupied and free is None:
                free = i
        if free is not None:
            position = free

        if position == len(self.slots):
            self.slots.append(Slot(key, value))
            if position >= self.capacity:
                self.capacity += self.alloc_step
        else:
            self.slots[position] = Slot(key, value)
        self._size += 1
        return position

    def remove(self, key: Any) -> int | None:
        """Free the position of ``key`` and return it, or None when absent."""
        position = self.find(key)
        if position is not None:
            self.slots[position].occupied = False
            self._size -= 1
        return position

    def find(self, key: Any) -> int | None:
        """Return the position holding ``key``, or None when absent."""
        for i, slot in enumerate(self.slots):
            if slot.occupied and slot.key == key:
                return i
        return None

    def slot(self, pos: int | None) -> Slot | None:
        """Return the occupied slot at ``pos``, or None if the position is invalid."""
        if pos is None or not 0 <= pos < len(self.slots):
            return None
        found = self.slots[pos]
        return found if found.occupied else None

    def format(self, debug: bool = False) -> str:
        """Return a text listing; with ``debug`` free positions and flags are shown."""
        lines = [f"TAM: {self._size}, MAX: {len(self.slots)}"]
        for slot in self.slots:
            if slot.occupied or debug:
                line = f"{slot.key} -> {slot.value}"
                if debug:
                    line += f" ({int(slot.occupied)})"
                lines.append(line)
        return "".join(f"{line}\n" for line in lines)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Slot]:
        return (slot for slot in self.slots if slot.occupied)

    def __repr__(self) -> str:
        pairs = [(slot.key, slot.value) for slot in self]
        return f"SlotList({pairs!r})"