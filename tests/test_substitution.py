import pytest

from cipherlab.core.exceptions import InvalidAlphabetError
from cipherlab.transforms.alphabet import DEFAULT_ALPHABET
from cipherlab.transforms.substitution import (
    atbash_cipher,
    build_cipher_alphabet,
    caesar_cipher,
    keyword_cipher,
    shifted_alphabet,
)
from cipherlab.transforms.vigenere import vigenere_cipher

ROUND_TRIP_ALPHABETS = [DEFAULT_ALPHABET, "ABCDEFG", "0123456789", "FEDCBA"]
ROUND_TRIP_KEYWORDS = ["", "SECRET", "FACE", "2024", "CAB"]


def _sample_text(alphabet: str) -> str:
    """Every alphabet symbol, reversed, a repeat, and some non-alphabet characters."""
    return f"{alphabet} {alphabet[::-1]}, {alphabet[0] * 3}?! ~"


# --- Keyword ---------------------------------------------------------------

def test_build_cipher_alphabet_secret():
    assert build_cipher_alphabet("SECRET") == "SECRTABDFGHIJKLMNOPQUVWXYZ"


@pytest.mark.parametrize("keyword", ["", "123", "!! ??"])
def test_build_cipher_alphabet_without_usable_letters(keyword):
    """Keywords with no alphabet characters leave the alphabet unchanged."""
    assert build_cipher_alphabet(keyword) == DEFAULT_ALPHABET


@pytest.mark.parametrize("keyword", ["SECRET", "zebra", "Kids Code Club", "AAAA"])
def test_cipher_alphabet_is_permutation(keyword):
    cipher_alphabet = build_cipher_alphabet(keyword)
    assert sorted(cipher_alphabet) == sorted(DEFAULT_ALPHABET)


def test_keyword_cipher_hello_world():
    assert keyword_cipher("HELLO WORLD", "SECRET") == "DTIIL WLOIR"
    assert keyword_cipher("DTIIL WLOIR", "SECRET", decrypt=True) == "HELLO WORLD"


def test_keyword_cipher_uppercases_and_keeps_punctuation():
    assert keyword_cipher("hello, world!", "secret") == "DTIIL, WLOIR!"


def test_keyword_cipher_custom_alphabet():
    assert keyword_cipher("ABC", "CAB", alphabet="ABC") == "CAB"
    assert keyword_cipher("CAB", "CAB", decrypt=True, alphabet="ABC") == "ABC"


def test_keyword_cipher_rejects_invalid_alphabet():
    with pytest.raises(InvalidAlphabetError):
        keyword_cipher("HI", "KEY", alphabet="AAB")


# --- Caesar ----------------------------------------------------------------

def test_caesar_shift_three():
    assert caesar_cipher("HELLO WORLD", 3) == "KHOOR ZRUOG"
    assert caesar_cipher("KHOOR ZRUOG", 3, decrypt=True) == "HELLO WORLD"


def test_caesar_wraps_around():
    assert caesar_cipher("XYZ", 3) == "ABC"


def test_caesar_normalises_negative_and_large_shifts():
    assert caesar_cipher("HELLO", -1) == caesar_cipher("HELLO", 25)
    assert caesar_cipher("HELLO", 29) == caesar_cipher("HELLO", 3)


def test_shifted_alphabet():
    assert shifted_alphabet(1, "ABCD") == "BCDA"
    assert shifted_alphabet(4, "ABCD") == "ABCD"


# --- Atbash ----------------------------------------------------------------

def test_atbash_hello():
    assert atbash_cipher("HELLO") == "SVOOL"


def test_atbash_is_self_inverse():
    message = "MEET ME AT THE PARK, 3PM!"
    assert atbash_cipher(atbash_cipher(message)) == message


# --- Custom alphabets ------------------------------------------------------

@pytest.mark.parametrize("alphabet", ROUND_TRIP_ALPHABETS)
@pytest.mark.parametrize("keyword", ROUND_TRIP_KEYWORDS)
def test_keyword_cipher_round_trip(alphabet, keyword):
    text = _sample_text(alphabet)
    encrypted = keyword_cipher(text, keyword, alphabet=alphabet)
    assert keyword_cipher(encrypted, keyword, decrypt=True, alphabet=alphabet) == text


@pytest.mark.parametrize("alphabet", ROUND_TRIP_ALPHABETS)
@pytest.mark.parametrize("keyword", ROUND_TRIP_KEYWORDS)
def test_vigenere_round_trip(alphabet, keyword):
    text = _sample_text(alphabet)
    encrypted = vigenere_cipher(text, keyword, alphabet=alphabet)
    assert vigenere_cipher(encrypted, keyword, decrypt=True, alphabet=alphabet) == text


@pytest.mark.parametrize("alphabet", ROUND_TRIP_ALPHABETS)
@pytest.mark.parametrize("shift", [0, 1, 5, -2, 27])
def test_caesar_round_trip(alphabet, shift):
    text = _sample_text(alphabet)
    encrypted = caesar_cipher(text, shift, alphabet=alphabet)
    assert caesar_cipher(encrypted, shift, decrypt=True, alphabet=alphabet) == text


@pytest.mark.parametrize("alphabet", ROUND_TRIP_ALPHABETS)
def test_empty_keyword_is_identity(alphabet):
    text = _sample_text(alphabet)
    assert keyword_cipher(text, "", alphabet=alphabet) == text


@pytest.mark.parametrize(
    "transform",
    [
        lambda text: keyword_cipher(text, "FACE", alphabet="ABCDEFG"),
        lambda text: caesar_cipher(text, 3, alphabet="ABCDEFG"),
        lambda text: atbash_cipher(text, alphabet="ABCDEFG"),
        lambda text: vigenere_cipher(text, "BAD", alphabet="ABCDEFG"),
    ],
    ids=["keyword", "caesar", "atbash", "vigenere"],
)
def test_non_alphabet_characters_keep_their_position(transform):
    text = "HELLO, BAD CAFE! 42"
    output = transform(text)

    assert len(output) == len(text)
    for original, produced in zip(text, output):
        if original in "ABCDEFG":
            assert produced in "ABCDEFG"
        else:
            assert produced == original


def test_lowercase_alphabet_is_rejected():
    with pytest.raises(InvalidAlphabetError, match="uppercase"):
        keyword_cipher("hello world", "secret", alphabet="abcdefghijklmnopqrstuvwxyz")
