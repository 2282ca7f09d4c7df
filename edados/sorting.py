"""Quicksort, random vector generation and shuffling helpers."""

from __future__ import annotations

import random
from collections.abc import Iterable, MutableSequence


def partition(values: MutableSequence, p: int, r: int) -> int:
    """Partition ``values[p:r+1]`` around ``values[r]`` and return the pivot's index."""
    pivot = values[r]
    i = p - 1
    for j in range(p, r):
        if values[j] <= pivot:
            i += 1
            values[i], values[j] = values[j], values[i]
    values[i + 1], values[r] = values[r], values[i + 1]
    return i + 1


def _quicksort(values: MutableSequence, left: int, right: int) -> None:
    while left < right:
        q = partition(values, left, right)
        # Recurse on the smaller side to bound the recursion depth.
        if q - left < right - q:
            _quicksort(values, left, q - 1)
            left = q + 1
        else:
            _quicksort(values, q + 1, right)
            right = q - 1


def quicksort(values: MutableSequence) -> None:
    """Sort ``values`` in place."""
    _quicksort(values, 0, len(values) - 1)


def random_vector(n: int, maximum: int, seed: int) -> list[int]:
    """Return ``n`` pseudo-random integers in ``[0, maximum]`` drawn from ``seed``."""
    if n < 0:
        raise ValueError("n must not be negative")
    if maximum < 0:
        raise ValueError("maximum must not be negative")
    rng = random.Random(seed)
    return [rng.randint(0, maximum) for _ in range(n)]


def unique_random_vector(n: int, seed: int) -> list[int]:
    """Return a pseudo-random permutation of ``0 .. n-1`` drawn from ``seed``."""
    if n < 0:
        raise ValueError("n must not be negative")
    values = sorted_vector(n)
    random.Random(seed).shuffle(values)
    return values


def sorted_vector(n: int) -> list[int]:
    """Return ``[0, 1, ..., n-1]``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return list(range(n))


def shuffle(
    values: MutableSequence,
    start: int,
    end: int,
    rng: random.Random | None = None,
) -> None:
    """Shuffle ``values`` in place, leaving positions up to ``start`` untouched.

    Positions ``start+1 .. end-1`` are permuted among themselves.
    """
    generator = rng if rng is not None else random.Random()
    for i in range(end - 1, start, -1):
        j = generator.randrange(i + 1)
        if j <= start:
            j = start + 1
        values[i], values[j] = values[j], values[i]


def format_vector(values: Iterable) -> str:
    """Return the values separated by single spaces."""
    return " ".join(str(value) for value in values)