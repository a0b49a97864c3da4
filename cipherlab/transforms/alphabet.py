"""
Alphabet Mapping Primitives
============================

Index <-> character mapping over an ordered alphabet of unique symbols.
This is the index space every substitution transform works in.

Two flavours are provided:

- :func:`index_of` / :func:`char_at` raise on invalid input.
- :func:`find_index` / :func:`lookup_char` return ``None`` instead and are
  what the transforms use, so a character outside the alphabet is simply
  passed through.

Lookups are case-sensitive; transforms uppercase their input first.
"""

from __future__ import annotations

from collections import Counter
from typing import Optional

from cipherlab.core.exceptions import (
    IndexOutOfBoundsError,
    InvalidAlphabetError,
    NotInAlphabetError,
)

DEFAULT_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def validate_alphabet(alphabet: str) -> str:
    """Return *alphabet* unchanged if it is non-empty with unique symbols.

    Transforms uppercase their text before lookup, so an alphabet that
    changes under ``str.upper`` (``"abc"``, ``"ß"``) could never match
    anything and is rejected.

    Raises:
        InvalidAlphabetError: If the alphabet is empty, is not uppercase
            or has duplicates.
    """
    if not alphabet:
        raise InvalidAlphabetError("Alphabet must not be empty.")
    if alphabet != alphabet.upper():
        raise InvalidAlphabetError(
            f'Alphabet "{alphabet}" must be uppercase (text is uppercased before lookup).'
        )
    if len(set(alphabet)) != len(alphabet):
        dupes = sorted(c for c, n in Counter(alphabet).items() if n > 1)
        raise InvalidAlphabetError(
            f'Alphabet "{alphabet}" contains duplicate characters: {"".join(dupes)}'
        )
    return alphabet


def index_of(char: str, alphabet: str = DEFAULT_ALPHABET) -> int:
    """Return the position of *char* in *alphabet*.

    Raises:
        NotInAlphabetError: If *char* is not in the alphabet.
    """
    idx = find_index(char, alphabet)
    if idx is None:
        raise NotInAlphabetError(char, alphabet)
    return idx


def char_at(index: int, alphabet: str = DEFAULT_ALPHABET) -> str:
    """Return the character at *index* in *alphabet*.

    Raises:
        IndexOutOfBoundsError: If ``index < 0`` or ``index >= len(alphabet)``.
    """
    char = lookup_char(index, alphabet)
    if char is None:
        raise IndexOutOfBoundsError(index, alphabet)
    return char


def find_index(char: str, alphabet: str = DEFAULT_ALPHABET) -> Optional[int]:
    """Return the position of *char* in *alphabet*, or ``None``."""
    if len(char) != 1:
        return None
    idx = alphabet.find(char)
    return idx if idx >= 0 else None


def lookup_char(index: int, alphabet: str = DEFAULT_ALPHABET) -> Optional[str]:
    """Return the character at *index*, or ``None`` when out of bounds."""
    if 0 <= index < len(alphabet):
        return alphabet[index]
    return None
