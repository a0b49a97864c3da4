"""
CipherLab Core Module
======================

Contains the data models and exception hierarchy for the CipherLab
toolkit. The engine lives in :mod:`cipherlab.core.engine`.
"""

from cipherlab.core.exceptions import (
    CipherLabError,
    IndexOutOfBoundsError,
    InvalidAlphabetError,
    InvalidKeyError,
    NotInAlphabetError,
    UnknownCipherError,
)
from cipherlab.core.models import (
    BruteForceResult,
    CipherName,
    CrackAttempt,
    CrackVerdict,
    FetchOutcome,
    KasiskiResult,
    KeyLengthCandidate,
    KeywordCrackResult,
    RailFenceAttempt,
    ShiftAttempt,
    TextScore,
    VigenereAnalysis,
)

__all__ = [
    "BruteForceResult",
    "CipherLabError",
    "CipherName",
    "CrackAttempt",
    "CrackVerdict",
    "FetchOutcome",
    "IndexOutOfBoundsError",
    "InvalidAlphabetError",
    "InvalidKeyError",
    "KasiskiResult",
    "KeyLengthCandidate",
    "KeywordCrackResult",
    "NotInAlphabetError",
    "RailFenceAttempt",
    "ShiftAttempt",
    "TextScore",
    "UnknownCipherError",
    "VigenereAnalysis",
]
