"""Anagram lookup in a word list sorted by each word's sorted letters."""

from __future__ import annotations

import argparse
import sys
from bisect import bisect_left
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import takewhile
from operator import attrgetter
from pathlib import Path

MAX_WORD_LENGTH = 50

_by_key = attrgetter("key")


def count_lines(path: str | Path) -> int:
    """Return the number of lines in the text file at ``path``."""
    with open(path, encoding="utf-8") as source:
        return sum(1 for _ in source)


def sort_word(word: str) -> str:
    """Return the characters of ``word`` in ascending order."""
    return "".join(sorted(word))


@dataclass(frozen=True)
class Word:
    """A dictionary word together with its lower-cased, letter-sorted key."""

    key: str
    original: str


def _make_word(text: str) -> Word:
    if len(text) > MAX_WORD_LENGTH:
        raise ValueError(f"word longer than {MAX_WORD_LENGTH} characters: {text[:20]}...")
    return Word(sort_word(text.lower()), text)


class WordList:
    """A list of words searchable by anagram key."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self.words = [_make_word(word) for word in words]
        self._sorted = False

    @classmethod
    def load(cls, path: str | Path) -> WordList:
        """Read one word per line from ``path``, skipping blank lines."""
        with open(path, encoding="utf-8") as source:
            return cls(line.rstrip("\r\n") for line in source if line.strip())

    def sort_by_key(self) -> None:
        """Order the words by key, keeping the file order among equal keys."""
        self.words.sort(key=_by_key)
        self._sorted = True

    def find(self, key: str) -> int | None:
        """Return the first position whose word has ``key``, or None."""
        if not self._sorted:
            self.sort_by_key()
        index = bisect_left(self.words, key, key=_by_key)
        if index < len(self.words) and self.words[index].key == key:
            return index
        return None

    def anagrams(self, word: str) -> list[str]:
        """Return every listed word made of the same letters as ``word``, ignoring case."""
        key = sort_word(word.lower())
        start = self.find(key)
        if start is None:
            return []
        matches = takewhile(lambda entry: entry.key == key, self.words[start:])
        return [entry.original for entry in matches]

    def __len__(self) -> int:
        return len(self.words)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the anagrams of a word found in a dictionary file."""
    parser = argparse.ArgumentParser(
        prog="anagramas", description="List the anagrams of a word."
    )
    parser.add_argument("word")
    parser.add_argument("-d", "--dictionary", default="br.txt")
    args = parser.parse_args(argv)
    try:
        words = WordList.load(args.dictionary)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for anagram in words.anagrams(args.word):
        print(anagram)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())