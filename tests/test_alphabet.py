import pytest

from cipherlab.core.exceptions import (
    CipherLabError,
    IndexOutOfBoundsError,
    InvalidAlphabetError,
    NotInAlphabetError,
)
from cipherlab.transforms.alphabet import (
    DEFAULT_ALPHABET,
    char_at,
    find_index,
    index_of,
    lookup_char,
    validate_alphabet,
)


def test_index_and_char_round_trip_default_alphabet():
    """Every letter maps to its position and back."""
    for i, letter in enumerate(DEFAULT_ALPHABET):
        assert index_of(letter) == i
        assert char_at(i) == letter


def test_index_of_missing_character_message():
    with pytest.raises(NotInAlphabetError) as excinfo:
        index_of("Z", "ABC")
    assert str(excinfo.value) == 'Character "Z" not found in alphabet "ABC".'
    assert isinstance(excinfo.value, LookupError)
    assert isinstance(excinfo.value, CipherLabError)


@pytest.mark.parametrize("index", [3, -1, 100])
def test_char_at_out_of_bounds(index):
    with pytest.raises(IndexOutOfBoundsError) as excinfo:
        char_at(index, "ABC")
    assert str(excinfo.value) == (
        f'Number {index} is out of bounds for alphabet "ABC" (length 3).'
    )
    assert isinstance(excinfo.value, IndexError)


def test_lookups_are_case_sensitive():
    assert find_index("a") is None
    with pytest.raises(NotInAlphabetError):
        index_of("a")


def test_option_style_lookups_return_none():
    assert find_index("?", "ABC") is None
    assert find_index("", "ABC") is None
    assert lookup_char(5, "ABC") is None
    assert lookup_char(-1, "ABC") is None
    assert find_index("C", "ABC") == 2
    assert lookup_char(0, "ABC") == "A"


def test_custom_numeric_alphabet():
    assert index_of("7", "0123456789") == 7
    assert char_at(0, "0123456789") == "0"


def test_validate_alphabet_rejects_empty_and_duplicates():
    with pytest.raises(InvalidAlphabetError):
        validate_alphabet("")
    with pytest.raises(InvalidAlphabetError, match="duplicate"):
        validate_alphabet("ABCA")
    assert validate_alphabet("XYZ") == "XYZ"


@pytest.mark.parametrize("alphabet", ["abcdefghijklmnopqrstuvwxyz", "aA", "ABc", "ß"])
def test_validate_alphabet_rejects_non_uppercase(alphabet):
    with pytest.raises(InvalidAlphabetError, match="uppercase"):
        validate_alphabet(alphabet)


@pytest.mark.parametrize("alphabet", ["0123456789", "ABC!?", "FEDCBA"])
def test_validate_alphabet_accepts_case_free_symbols(alphabet):
    assert validate_alphabet(alphabet) == alphabet
