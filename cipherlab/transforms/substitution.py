"""
Monoalphabetic Substitution Transforms
=======================================

Caesar, Atbash and Keyword ciphers. Each one builds a *target* alphabet
that is a permutation of the plain alphabet and maps
``alphabet[i] -> target[i]`` (or the inverse when decrypting).

Input text is uppercased first. Characters that are not in the alphabet
are passed through unchanged and keep their position.
"""

from __future__ import annotations

from cipherlab.transforms.alphabet import (
    DEFAULT_ALPHABET,
    find_index,
    lookup_char,
    validate_alphabet,
)


def substitute(text: str, source: str, target: str) -> str:
    """Replace every ``source[i]`` in *text* with ``target[i]``.

    *source* and *target* must have equal length. Characters absent
    from *source* are copied through.
    """
    out: list[str] = []
    for char in text:
        idx = find_index(char, source)
        if idx is None:
            out.append(char)
            continue
        mapped = lookup_char(idx, target)
        out.append(mapped if mapped is not None else char)
    return "".join(out)


# ===================================================================== #
#  Keyword
# ===================================================================== #


def build_cipher_alphabet(keyword: str, alphabet: str = DEFAULT_ALPHABET) -> str:
    """Derive the keyword cipher alphabet.

    The unique uppercased keyword characters that belong to *alphabet*
    (in keyword order) are followed by the remaining alphabet characters
    in alphabet order::

        >>> build_cipher_alphabet("SECRET")
        'SECRTABDFGHIJKLMNOPQUVWXYZ'

    The result is always a permutation of *alphabet*; an empty keyword
    yields the alphabet itself.
    """
    validate_alphabet(alphabet)
    head: list[str] = []
    for char in keyword.upper():
        if char in alphabet and char not in head:
            head.append(char)
    tail = [c for c in alphabet if c not in head]
    return "".join(head) + "".join(tail)


def keyword_cipher(
    text: str,
    keyword: str,
    decrypt: bool = False,
    alphabet: str = DEFAULT_ALPHABET,
) -> str:
    """Encrypt or decrypt *text* with a keyword substitution cipher.

    Example::

        >>> keyword_cipher("HELLO WORLD", "SECRET")
        'DTIIL WLOIR'
        >>> keyword_cipher("DTIIL WLOIR", "SECRET", decrypt=True)
        'HELLO WORLD'
    """
    cipher_alphabet = build_cipher_alphabet(keyword, alphabet)
    if decrypt:
        return substitute(text.upper(), cipher_alphabet, alphabet)
    return substitute(text.upper(), alphabet, cipher_alphabet)


# ===================================================================== #
#  Caesar / Atbash
# ===================================================================== #


def shifted_alphabet(shift: int, alphabet: str = DEFAULT_ALPHABET) -> str:
    """Rotate *alphabet* left by *shift* positions (modulo its length)."""
    validate_alphabet(alphabet)
    n = shift % len(alphabet)
    return alphabet[n:] + alphabet[:n]


def caesar_cipher(
    text: str,
    shift: int,
    decrypt: bool = False,
    alphabet: str = DEFAULT_ALPHABET,
) -> str:
    """Shift every alphabet character of *text* by *shift* positions.

    Negative and oversized shifts are normalised modulo the alphabet
    length, so ``caesar_cipher(t, -1) == caesar_cipher(t, 25)``.
    """
    effective = -shift if decrypt else shift
    return substitute(text.upper(), alphabet, shifted_alphabet(effective, alphabet))


def atbash_cipher(text: str, alphabet: str = DEFAULT_ALPHABET) -> str:
    """Mirror every alphabet character (``A <-> Z``, ``B <-> Y``, ...).

    Atbash is its own inverse, so there is no ``decrypt`` flag.
    """
    validate_alphabet(alphabet)
    return substitute(text.upper(), alphabet, alphabet[::-1])
