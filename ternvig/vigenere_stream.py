"""Read a file one character at a time through a Vigenère cipher."""

from __future__ import annotations

import os
from typing import BinaryIO, Callable, Iterator, Optional, Union

from ternvig.vigenere import Vigenere

Cipher = Callable[[Vigenere, str], str]
PathLike = Union[str, "os.PathLike[str]"]


def encode_cipher(provider: Vigenere, character: str) -> str:
    """Cipher that encodes with ``provider``."""
    return provider.encode(character)


def decode_cipher(provider: Vigenere, character: str) -> str:
    """Cipher that decodes with ``provider``."""
    return provider.decode(character)


class VigenereReader:
    """A binary file reader that passes every byte through a cipher."""

    def __init__(
        self, cipher: Cipher, keyword: str, path: Optional[PathLike] = None
    ) -> None:
        self._cipher = cipher
        self._provider = Vigenere(keyword)
        self._file: Optional[BinaryIO] = None
        self._eof = False
        if path is not None:
            self.open(path)

    def open(self, path: PathLike) -> None:
        """Open ``path`` for reading; raises ``OSError`` if it cannot be opened."""
        self.close()
        self._file = open(path, "rb")
        self._eof = False

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def reset(self) -> None:
        """Restore the keyword and rewind to the start of the file."""
        self._provider.reset()
        if self._file is not None:
            self._file.seek(0)
        self._eof = False

    def good(self) -> bool:
        return self._file is not None and not self._eof

    def is_open(self) -> bool:
        return self._file is not None

    def eof(self) -> bool:
        return self._eof

    def read_char(self) -> str:
        """Return the next ciphered character, or ``""`` at end of file."""
        data = self._file.read(1) if self._file is not None else b""
        if not data:
            self._eof = True
            return ""
        return self._cipher(self._provider, data.decode("latin-1"))

    def __iter__(self) -> Iterator[str]:
        """Rewind, then yield every ciphered character of the file."""
        self.reset()
        while True:
            character = self.read_char()
            if self._eof:
                return
            yield character

    def __enter__(self) -> VigenereReader:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()