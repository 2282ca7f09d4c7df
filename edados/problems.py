"""Small problems on integer vectors solved with sorting and hashing."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable
from itertools import chain, combinations
from typing import Any

from edados.sorting import quicksort


def k_largest(values: Iterable[int], k: int) -> int:
    """Return the ``k``-th largest element; ``k=1`` gives the maximum.

    The values are expected to have no repetitions.
    """
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError(f"k must be between 1 and {len(items)}")
    quicksort(items)
    return items[len(items) - k]


def are_anagrams(s: str, t: str) -> bool:
    """Return True if ``s`` and ``t`` hold the same characters the same number of times."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def most_frequent(values: Iterable[Hashable]) -> Any:
    """Return the most frequent element, the first one met on a tie.

    Returns None when every element has the same frequency, the empty case included.
    """
    items = list(values)
    counts = Counter(items)
    if len(set(counts.values())) <= 1:
        return None
    best = max(counts.values())
    return next(item for item in items if counts[item] == best)


def remove_duplicates(values: Iterable[int]) -> list[int]:
    """Return the distinct values in ascending order."""
    items = list(values)
    quicksort(items)
    result: list[int] = []
    for item in items:
        if not result or result[-1] != item:
            result.append(item)
    return result


def dedup(values: Iterable[Hashable]) -> list[Any]:
    """Return the distinct values in the order they first appear."""
    return list(dict.fromkeys(values))


def count_occurrences(values: Iterable[Hashable]) -> Counter:
    """Return how many times each value occurs, in order of first appearance."""
    return Counter(values)


def two_sum(values: Iterable[int], x: int) -> tuple[int, int] | None:
    """Return two elements at different positions whose sum is ``x``, or None."""
    seen: set[int] = set()
    for value in values:
        if x - value in seen:
            return x - value, value
        seen.add(value)
    return None


def two_sum_bruteforce(values: Iterable[int], x: int) -> bool:
    """Return True if two elements at different positions add up to ``x``."""
    return any(a + b == x for a, b in combinations(list(values), 2))


def union(a: Iterable[Hashable], b: Iterable[Hashable]) -> list[Any]:
    """Return the elements of ``a`` or ``b`` without repetitions."""
    return list(dict.fromkeys(chain(a, b)))


def intersection(a: Iterable[Hashable], b: Iterable[Hashable]) -> list[Any]:
    """Return the elements in both ``a`` and ``b`` without repetitions."""
    in_b = set(b)
    return [item for item in dict.fromkeys(a) if item in in_b]


def difference(a: Iterable[Hashable], b: Iterable[Hashable]) -> list[Any]:
    """Return the elements of ``a`` that are not in ``b``, without repetitions."""
    in_b = set(b)
    return [item for item in dict.fromkeys(a) if item not in in_b]


def symmetric_difference(a: Iterable[Hashable], b: Iterable[Hashable]) -> list[Any]:
    """Return the elements in exactly one of ``a`` and ``b``, without repetitions."""
    first, second = list(a), list(b)
    return difference(first, second) + difference(second, first)