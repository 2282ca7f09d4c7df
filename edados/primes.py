"""Sorted prime lists stored as binary files of 4-byte integers."""

from __future__ import annotations

import struct
from bisect import bisect_right
from collections.abc import Iterable
from itertools import pairwise
from pathlib import Path

_INT_SIZE = 4


def create_prime_file(txt_path: str | Path, output_path: str | Path, n_primes: int) -> int:
    """Convert a text file with one prime per line into a binary file.

    At most ``n_primes`` primes are kept. Returns the number of primes written.
    """
    if n_primes < 0:
        raise ValueError("n_primes must not be negative")
    primes: list[int] = []
    with open(txt_path, encoding="ascii") as source:
        for line in source:
            if len(primes) == n_primes:
                break
            text = line.strip()
            if text:
                primes.append(int(text))
    Path(output_path).write_bytes(struct.pack(f"<{len(primes)}i", *primes))
    return len(primes)


class PrimeList:
    """An ascending list of primes that answers next-prime queries by binary search."""

    def __init__(self, primes: Iterable[int]) -> None:
        self.primes = list(primes)
        if any(a >= b for a, b in pairwise(self.primes)):
            raise ValueError("primes must be strictly increasing")

    @classmethod
    def load(cls, path: str | Path, n_primes: int) -> PrimeList:
        """Read up to ``n_primes`` little-endian 4-byte integers from ``path``."""
        if n_primes < 0:
            raise ValueError("n_primes must not be negative")
        data = Path(path).read_bytes()
        count = min(n_primes, len(data) // _INT_SIZE)
        return cls(struct.unpack_from(f"<{count}i", data))

    def next_prime(self, n: int) -> int:
        """Return the smallest prime of the list greater than ``n``."""
        index = bisect_right(self.primes, n)
        if index == len(self.primes):
            raise ValueError(f"no prime after {n} in the list")
        return self.primes[index]

    def __len__(self) -> int:
        return len(self.primes)

    def __repr__(self) -> str:
        return f"PrimeList(<{len(self.primes)} primes>)"