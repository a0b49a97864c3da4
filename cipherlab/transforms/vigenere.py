"""
Vigenère Transform
==================

Polyalphabetic shift cipher: the n-th alphabet character of the message
is shifted by the index of the n-th keyword character (cycling). The key
position advances only on characters that belong to the alphabet, so
punctuation and spaces are passed through without consuming the key.
"""

from __future__ import annotations

from cipherlab.transforms.alphabet import (
    DEFAULT_ALPHABET,
    find_index,
    validate_alphabet,
)


def clean_keyword(keyword: str, alphabet: str = DEFAULT_ALPHABET) -> str:
    """Uppercase *keyword* and drop characters outside *alphabet*."""
    return "".join(c for c in keyword.upper() if c in alphabet)


def vigenere_cipher(
    text: str,
    keyword: str,
    decrypt: bool = False,
    alphabet: str = DEFAULT_ALPHABET,
) -> str:
    """Encrypt or decrypt *text* with the Vigenère cipher.

    If no keyword character survives :func:`clean_keyword`, *text* is
    returned unchanged.

    Example::

        >>> vigenere_cipher("HELLO", "KEY")
        'RIJVS'
        >>> vigenere_cipher("RIJVS", "KEY", decrypt=True)
        'HELLO'
    """
    validate_alphabet(alphabet)
    key = clean_keyword(keyword, alphabet)
    if not key:
        return text

    n = len(alphabet)
    shifts = [alphabet.index(c) for c in key]
    out: list[str] = []
    position = 0
    for char in text.upper():
        idx = find_index(char, alphabet)
        if idx is None:
            out.append(char)
            continue
        shift = shifts[position % len(shifts)]
        if decrypt:
            shift = -shift
        out.append(alphabet[(idx + shift) % n])
        position += 1
    return "".join(out)
