"""
CipherLab Exceptions
=====================

Exception hierarchy for the cipher transforms. Only the low-level
alphabet primitives raise :class:`NotInAlphabetError` and
:class:`IndexOutOfBoundsError`; the transforms built on top use the
Option-style lookups and never let them reach the caller.
"""

from __future__ import annotations


class CipherLabError(Exception):
    """Base class for all CipherLab errors."""


class NotInAlphabetError(CipherLabError, LookupError):
    """A character is not a member of the alphabet."""

    def __init__(self, char: str, alphabet: str) -> None:
        self.char = char
        self.alphabet = alphabet
        super().__init__(f'Character "{char}" not found in alphabet "{alphabet}".')


class IndexOutOfBoundsError(CipherLabError, IndexError):
    """An index falls outside ``[0, len(alphabet))``."""

    def __init__(self, index: int, alphabet: str) -> None:
        self.index = index
        self.alphabet = alphabet
        super().__init__(
            f'Number {index} is out of bounds for alphabet "{alphabet}" '
            f"(length {len(alphabet)})."
        )


class InvalidAlphabetError(CipherLabError, ValueError):
    """The alphabet is empty or contains duplicate characters."""


class UnknownCipherError(CipherLabError, ValueError):
    """The requested cipher name is not supported by the engine."""


class InvalidKeyError(CipherLabError, ValueError):
    """A cipher key is missing or malformed (e.g. a non-numeric shift)."""
