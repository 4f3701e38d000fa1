"""Autokey Vigenère scrambler over the 26 upper-case Latin letters."""

from __future__ import annotations

import string
from typing import Tuple

from ternvig.key_provider import KeyProvider

ALPHABET_SIZE = 26

_LETTERS = frozenset(string.ascii_letters)


def _build_table() -> Tuple[str, ...]:
    # Row 0 starts at 'B', row 25 starts at 'A'; each row wraps after 'Z'.
    return tuple(
        "".join(
            chr(ord("A") + (row + 1 + column) % ALPHABET_SIZE)
            for column in range(ALPHABET_SIZE)
        )
        for row in range(ALPHABET_SIZE)
    )


_TABLE = _build_table()


def _is_letter(character: str) -> bool:
    if len(character) != 1:
        raise ValueError(f"expected a single character, got {character!r}")
    return character in _LETTERS


class Vigenere:
    """Encodes and decodes characters, feeding each plaintext letter back into the key."""

    __slots__ = ("_keyword", "_provider")

    def __init__(self, keyword: str) -> None:
        self._keyword = keyword
        self._provider = KeyProvider(keyword)

    def current_keyword(self) -> str:
        """The keyword as it now stands, read from the current position onward."""
        characters = []
        for _ in range(len(self._keyword)):
            characters.append(self._provider.current)
            self._provider.push(self._provider.current)
        return "".join(characters)

    def reset(self) -> None:
        """Restore the original keyword."""
        self._provider.initialize(self._keyword)

    def _row(self) -> str:
        return _TABLE[ord(self._provider.current) - ord("A")]

    def encode(self, character: str) -> str:
        """Encode one character; non-letters pass through unchanged."""
        if not _is_letter(character):
            return character
        encoded = self._row()[ord(character.upper()) - ord("A")]
        self._provider.push(character)
        return encoded.lower() if character.islower() else encoded

    def decode(self, character: str) -> str:
        """Decode one character; non-letters pass through unchanged."""
        if not _is_letter(character):
            return character
        decoded = chr(self._row().index(character.upper()) + ord("A"))
        self._provider.push(decoded)
        return decoded.lower() if character.islower() else decoded