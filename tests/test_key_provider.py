import pytest

from ternvig.key_provider import KeyProvider


def test_current_is_uppercased_first_character():
    provider = KeyProvider("relations")
    assert provider.current == "relations"[0].upper()


def test_push_advances_to_next_character():
    provider = KeyProvider("ab")
    provider.push("x")
    assert provider.current == "ab"[1].upper()


def test_push_wraps_and_replaces_characters():
    provider = KeyProvider("ab")
    provider.push("x").push("y")
    assert provider.current == "x".upper()
    provider.push("q")
    assert provider.current == "y".upper()


def test_push_returns_provider_for_chaining():
    provider = KeyProvider("key")
    assert provider.push("z") is provider


def test_full_cycle_of_pushes_replaces_whole_keyword():
    provider = KeyProvider("abc")
    for character in "xyz":
        provider.push(character)
    seen = []
    for _ in range(3):
        seen.append(provider.current)
        provider.push(provider.current)
    assert "".join(seen) == "xyz".upper()


def test_initialize_resets_keyword_and_index():
    provider = KeyProvider("abc")
    provider.push("q").push("r")
    provider.initialize("Hello")
    assert provider.current == "H"
    assert len(provider) == len("Hello")


def test_length_matches_keyword():
    assert len(KeyProvider("Relations")) == len("Relations")


@pytest.mark.parametrize("keyword", ["", "ab1", "two words"])
def test_invalid_keyword_is_rejected(keyword):
    with pytest.raises(ValueError):
        KeyProvider(keyword)


@pytest.mark.parametrize("character", ["1", " ", "ab", ""])
def test_push_rejects_non_letters(character):
    provider = KeyProvider("abc")
    with pytest.raises(ValueError):
        provider.push(character)
    assert provider.current == "A"