"""
Candidate Set and Alphabet

Single home of case normalization and the allowed-character test. Everything
that compares guesses, secrets or candidates goes through ``normalize``.
"""

import string
from collections.abc import Sequence
from typing import Iterable, Iterator, List, Union

DEFAULT_ALLOWED_CHARACTERS = string.ascii_lowercase + string.digits + "- "


def normalize(text: str) -> str:
    """Canonical case for secrets, guesses and candidates."""
    return text.lower()


class Alphabet:
    """Allowed-character predicate (case-insensitive, one character at a time)."""

    def __init__(self, characters: str = DEFAULT_ALLOWED_CHARACTERS):
        if not characters:
            raise ValueError("Alphabet cannot be empty")
        self.characters = frozenset(normalize(characters))

    def allows(self, ch) -> bool:
        return isinstance(ch, str) and len(ch) == 1 and normalize(ch) in self.characters

    def is_composed_of(self, text: str) -> bool:
        return all(self.allows(ch) for ch in text)

    def __repr__(self):
        return f"Alphabet({''.join(sorted(self.characters))!r})"


class CandidateSet(Sequence):
    """
    Ordered, immutable, duplicate-free list of allowed secrets and guesses.

    Entries are normalized on construction; membership tests normalize the
    probe, so lookups are case-insensitive everywhere.
    """

    def __init__(self, words: Iterable[str], alphabet: Alphabet = None):
        self.alphabet = alphabet or Alphabet()

        items: List[str] = []
        seen = set()
        for index, word in enumerate(words):
            if not isinstance(word, str) or not word:
                raise ValueError(f"Candidate at index {index} must be a non-empty string")
            normalized = normalize(word)
            if not self.alphabet.is_composed_of(normalized):
                raise ValueError(f"Candidate at index {index} '{word}' contains disallowed characters")
            if normalized not in seen:
                seen.add(normalized)
                items.append(normalized)

        if not items:
            raise ValueError("Candidate set cannot be empty")

        self._items = tuple(items)
        self._lookup = frozenset(items)

    @classmethod
    def coerce(cls, candidates: Union["CandidateSet", Iterable[str]], alphabet: Alphabet = None) -> "CandidateSet":
        """Returns ``candidates`` unchanged if already a CandidateSet."""
        if isinstance(candidates, CandidateSet):
            return candidates
        return cls(candidates, alphabet)

    def __contains__(self, word) -> bool:
        return isinstance(word, str) and normalize(word) in self._lookup

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __repr__(self):
        return f"CandidateSet({list(self._items)!r})"
