"""Command that exercises the key provider, the Vigenère scrambler and the file reader."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from ternvig.key_provider import KeyProvider
from ternvig.vigenere import Vigenere
from ternvig.vigenere_stream import VigenereReader, decode_cipher, encode_cipher

DEFAULT_KEYWORD = "Relations"
DEFAULT_MESSAGE = "To be, or not to be: that is the question:"
_DEFAULT_FILES = {"3": "sample_3.txt", "4": "sample_4.txt"}


def _upper_letters(text: str) -> str:
    return "".join(c.upper() if c.isascii() and c.isalpha() else c for c in text)


def _run_key_provider(keyword: str, message: str) -> int:
    print(f'Testing KeyProvider with "{keyword}" and "{message}"')
    provider = KeyProvider(keyword)
    key_line = []
    for character in message:
        if character.isascii() and character.isalpha():
            key_line.append(provider.current)
            provider.push(character)
        else:
            key_line.append(" ")
    print("".join(key_line))
    print(_upper_letters(message))
    print("Completed")
    return 0


def _run_scrambler(keyword: str, message: str) -> int:
    scrambler = Vigenere(keyword)
    print(f'Encoding "{message}" using "{scrambler.current_keyword()}"')
    print(_upper_letters(message))
    encoded = "".join(scrambler.encode(c) for c in message)
    print(encoded)
    print("Completed")

    scrambler.reset()
    print(f'Decoding "{encoded}" using "{scrambler.current_keyword()}"')
    print(_upper_letters(encoded))
    print("".join(scrambler.decode(c) for c in encoded))
    print("Completed")
    return 0


def _open_reader(cipher, keyword: str, path: str) -> Optional[VigenereReader]:
    try:
        return VigenereReader(cipher, keyword, path)
    except OSError:
        print(f"Cannot open input file: {path}", file=sys.stderr)
        return None


def _run_reader(keyword: str, path: str) -> int:
    reader = _open_reader(decode_cipher, keyword, path)
    if reader is None:
        return 2
    with reader:
        print(f'Decoding "{path}" using "{keyword}".')
        while True:
            character = reader.read_char()
            if reader.eof():
                break
            sys.stdout.write(character)
    print("Completed.")
    return 0


def _run_iterator(keyword: str, path: str) -> int:
    reader = _open_reader(encode_cipher, keyword, path)
    if reader is None:
        return 2
    with reader:
        print(f'Forward Iterator Decoding "{path}" using "{keyword}".')
        for character in reader:
            sys.stdout.write(character)
    print("Completed.")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one demonstration and return its exit status."""
    parser = argparse.ArgumentParser(description="Exercise the Vigenère cipher.")
    parser.add_argument("problem", choices=["1", "2", "3", "4"])
    parser.add_argument("--keyword", default=DEFAULT_KEYWORD)
    parser.add_argument("--message", default=DEFAULT_MESSAGE)
    parser.add_argument("--file", dest="path", default=None)
    args = parser.parse_args(argv)

    if args.problem == "1":
        return _run_key_provider(args.keyword, args.message)
    if args.problem == "2":
        return _run_scrambler(args.keyword, args.message)
    path = args.path or _DEFAULT_FILES[args.problem]
    if args.problem == "3":
        return _run_reader(args.keyword, path)
    return _run_iterator(args.keyword, path)


if __name__ == "__main__":
    sys.exit(main())