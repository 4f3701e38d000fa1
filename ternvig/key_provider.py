"""Rotating keyword source for an autokey cipher."""

from __future__ import annotations

import string
from typing import List

_LETTERS = frozenset(string.ascii_letters)


def _check_letter(character: str) -> None:
    if len(character) != 1 or character not in _LETTERS:
        raise ValueError(f"expected a single ASCII letter, got {character!r}")


class KeyProvider:
    """Holds an upper-case keyword and a position within it.

    Each pushed character replaces the keyword character at the current
    position, after which the position advances and wraps around.
    """

    __slots__ = ("_keyword", "_index")

    def __init__(self, keyword: str) -> None:
        self._keyword: List[str] = []
        self._index = 0
        self.initialize(keyword)

    def initialize(self, keyword: str) -> None:
        """Install (or reinstall) ``keyword`` and rewind to its first character."""
        if not keyword:
            raise ValueError("keyword must not be empty")
        for character in keyword:
            _check_letter(character)
        self._keyword = list(keyword.upper())
        self._index = 0

    @property
    def current(self) -> str:
        """The keyword character at the current position."""
        return self._keyword[self._index]

    def push(self, character: str) -> KeyProvider:
        """Replace the current keyword character and advance to the next one."""
        _check_letter(character)
        self._keyword[self._index] = character.upper()
        self._index = (self._index + 1) % len(self._keyword)
        return self

    def __len__(self) -> int:
        return len(self._keyword)

    def __repr__(self) -> str:
        return f"KeyProvider({''.join(self._keyword)!r}, index={self._index})"