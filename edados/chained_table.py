"""Hash table whose buckets are slot lists."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Any

from edados.slot_list import Slot, SlotList


class ChainedTable:
    """Map from integer keys to values with one slot list per bucket."""

    def __init__(self, m: int, alloc_step: int = 10) -> None:
        if m < 1:
            raise ValueError("table size must be at least 1")
        self.buckets: list[SlotList] = [SlotList(alloc_step) for _ in range(m)]
        self._n = 0

    def hash(self, key: int) -> int:
        """Return the bucket index of ``key``."""
        return key % len(self.buckets)

    def insert(self, key: int, value: Any) -> None:
        """Store ``value`` under ``key``; an existing key has its value replaced."""
        bucket = self.buckets[self.hash(key)]
        before = len(bucket)
        bucket.insert(key, value)
        self._n += len(bucket) - before

    def remove(self, key: int) -> None:
        """Remove ``key``; nothing happens when it is absent."""
        if self.buckets[self.hash(key)].remove(key) is not None:
            self._n -= 1

    def find(self, key: int) -> Slot | None:
        """Return the slot holding ``key``, or None when absent."""
        bucket = self.buckets[self.hash(key)]
        return bucket.slot(bucket.find(key))

    def keys(self) -> list[int]:
        """Return every stored key, bucket by bucket."""
        return [slot.key for bucket in self.buckets for slot in bucket]

    def format(self) -> str:
        """Return a text listing of every bucket."""
        parts = [f"M={len(self.buckets)}, N={self._n}\n"]
        for i, bucket in enumerate(self.buckets):
            parts.append(f"[{i}]\n")
            parts.append(bucket.format())
        return "".join(parts)

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        return f"ChainedTable(m={len(self.buckets)}, n={self._n})"


def main(argv: Sequence[str] | None = None) -> int:
    """Fill a table with random keys and print it with its keys."""
    import random

    args = sys.argv[1:] if argv is None else list(argv)
    n = int(args[0]) if args else 10
    m = int(args[1]) if len(args) > 1 else max(n >> 1, 1)
    rng = random.Random(0)
    table = ChainedTable(m, 10)
    for _ in range(n):
        key = rng.randrange(max(n * 10, 1))
        table.insert(key, key + rng.randrange(10))
    print(table.format(), end="")
    print(" ".join(str(key) for key in table.keys()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())