"""Rail Fence, Pigpen and Morse."""

import pytest

from cipherlab.transforms.morse import (
    MORSE_CODE_MAPPING,
    morse_code,
    morse_decode,
    morse_encode,
)
from cipherlab.transforms.pigpen import (
    PIGPEN_MAPPING,
    pigpen_cipher,
    pigpen_decrypt,
    pigpen_encrypt,
)
from cipherlab.transforms.railfence import rail_fence_cipher, rail_pattern


# --- Rail Fence ------------------------------------------------------------

def test_rail_fence_classic_example():
    assert rail_fence_cipher("WEAREDISCOVERED", 3) == "WECRERDSOEEAIVD"
    assert rail_fence_cipher("WECRERDSOEEAIVD", 3, decrypt=True) == "WEAREDISCOVERED"


@pytest.mark.parametrize("rails", [2, 3, 4, 5, 8])
def test_rail_fence_round_trip_with_spaces(rails):
    message = "MEET ME AT THE PARK"
    encrypted = rail_fence_cipher(message, rails)
    assert sorted(encrypted) == sorted(message)
    assert rail_fence_cipher(encrypted, rails, decrypt=True) == message


@pytest.mark.parametrize("rails", [0, 1, 5, 9])
def test_rail_fence_degenerate_rail_counts(rails):
    assert rail_fence_cipher("hello", rails) == "HELLO"


def test_rail_pattern_zigzag():
    assert rail_pattern(7, 3) == [0, 1, 2, 1, 0, 1, 2]
    assert rail_pattern(4, 1) == [0, 0, 0, 0]


# --- Pigpen ----------------------------------------------------------------

def test_pigpen_mapping_covers_alphabet():
    assert len(PIGPEN_MAPPING) == 26
    assert len(set(PIGPEN_MAPPING.values())) == 26


def test_pigpen_hello():
    assert pigpen_encrypt("HELLO") == "┬ ┼ └. └. ├."
    assert pigpen_decrypt("┬ ┼ └. └. ├.") == "HELLO"


def test_pigpen_space_becomes_three_spaces():
    assert pigpen_encrypt("HI YOU") == "┬ ┌   <. ├. <"
    assert pigpen_decrypt("┬ ┌   <. ├. <") == "HIYOU"


def test_pigpen_unknown_tokens_are_scanned():
    assert pigpen_decrypt("┘-┴-└.") == "A-B-L"


def test_pigpen_cipher_dispatch():
    assert pigpen_cipher(pigpen_cipher("secret"), decrypt=True) == "SECRET"


# --- Morse -----------------------------------------------------------------

def test_morse_hello_world():
    code = ".... . .-.. .-.. --- / .-- --- .-. .-.. -.."
    assert morse_encode("Hello World") == code
    assert morse_decode(code) == "HELLO WORLD"


def test_morse_digits_and_punctuation():
    assert morse_encode("SOS 1!") == "... --- ... / .---- -.-.--"
    assert morse_code("... --- ... / .---- -.-.--", decode=True) == "SOS 1!"


def test_morse_unknown_characters_pass_through():
    assert morse_encode("A#") == ".- #"
    assert morse_decode(".- ........") == "A........"


def test_morse_mapping_space_is_slash():
    assert MORSE_CODE_MAPPING[" "] == "/"
