"""
CipherLab Transforms
====================

Pure encode/decode functions for the classical ciphers taught in the
Kids Code Club.
"""

from cipherlab.transforms.alphabet import (
    DEFAULT_ALPHABET,
    char_at,
    find_index,
    index_of,
    lookup_char,
    validate_alphabet,
)
from cipherlab.transforms.morse import MORSE_CODE_MAPPING, morse_code
from cipherlab.transforms.pigpen import PIGPEN_MAPPING, pigpen_cipher
from cipherlab.transforms.railfence import rail_fence_cipher
from cipherlab.transforms.substitution import (
    atbash_cipher,
    build_cipher_alphabet,
    caesar_cipher,
    keyword_cipher,
)
from cipherlab.transforms.vigenere import vigenere_cipher

__all__ = [
    "DEFAULT_ALPHABET",
    "MORSE_CODE_MAPPING",
    "PIGPEN_MAPPING",
    "atbash_cipher",
    "build_cipher_alphabet",
    "caesar_cipher",
    "char_at",
    "find_index",
    "index_of",
    "keyword_cipher",
    "lookup_char",
    "morse_code",
    "pigpen_cipher",
    "rail_fence_cipher",
    "validate_alphabet",
    "vigenere_cipher",
]
