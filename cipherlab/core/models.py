"""
CipherLab Core Data Models
===========================

Pydantic models for the CipherLab transforms and cryptanalysis engine.
These models represent crack attempts, score breakdowns, key-length
estimates and the outcome of the remote word-list fetch.

All models are serialisable to JSON and are consumed by both the CLI
output layer and the JSON report writer.

References:
    - Friedman, W. F. (1922). The Index of Coincidence and Its
      Applications in Cryptanalysis. Riverbank Publication No. 22.
    - Kasiski, F. W. (1863). Die Geheimschriften und die Dechiffrirkunst.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class CipherName(str, enum.Enum):
    """Ciphers supported by :meth:`CipherLabEngine.transform`."""

    CAESAR = "caesar"
    VIGENERE = "vigenere"
    KEYWORD = "keyword"
    ATBASH = "atbash"
    RAILFENCE = "railfence"
    PIGPEN = "pigpen"
    MORSE = "morse"


class CrackVerdict(str, enum.Enum):
    """Outcome classification of a crack run, derived from the best score."""

    CONFIDENT = "confident_crack"
    TENTATIVE = "tentative_crack"
    NO_SOLUTION = "no_solution_found"


# ===================================================================== #
#  Scoring
# ===================================================================== #


class TextScore(BaseModel):
    """Breakdown of the English-likelihood score of a piece of text.

    Attributes:
        common_words: Points from exact common-word matches and word lengths.
        letter_frequency: Points from fit against English letter frequencies.
        bigrams: Points from common bigram occurrences.
        trigrams: Points from common trigram occurrences.
        vowel_ratio: Points from the vowel/letter ratio band.
        total: Sum of all components rounded half-up to an integer.
    """

    common_words: float = 0.0
    letter_frequency: float = 0.0
    bigrams: float = 0.0
    trigrams: float = 0.0
    vowel_ratio: float = 0.0
    total: int = 0


# ===================================================================== #
#  Crack Attempts
# ===================================================================== #


class CrackAttempt(BaseModel):
    """A single keyword tried during a dictionary attack.

    Attributes:
        keyword: Normalised candidate keyword.
        result: Text obtained by decrypting under *keyword*.
        score: English-likelihood score of *result*.
    """

    model_config = ConfigDict(frozen=True)

    keyword: str
    result: str
    score: int


class ShiftAttempt(BaseModel):
    """One Caesar shift tried during a brute-force run."""

    model_config = ConfigDict(frozen=True)

    shift: int
    result: str
    score: int


class RailFenceAttempt(BaseModel):
    """One rail count tried during a brute-force run."""

    model_config = ConfigDict(frozen=True)

    rails: int
    result: str
    score: int


class KeywordCrackResult(BaseModel):
    """Ranked outcome of a keyword dictionary attack.

    Attributes:
        ciphertext: The ciphertext that was attacked.
        verdict: Classification derived from the best score.
        attempts: Top-N attempts, best first.
        candidates_tried: Number of distinct keywords tried.
        wordlist_source: ``"remote"`` or ``"offline"`` (or ``"static"``
            when a fixed list was injected).
    """

    ciphertext: str
    verdict: CrackVerdict = CrackVerdict.NO_SOLUTION
    attempts: list[CrackAttempt] = Field(default_factory=list)
    candidates_tried: int = 0
    wordlist_source: str = "static"

    @property
    def best(self) -> Optional[CrackAttempt]:
        """Highest-scoring attempt, or ``None`` when nothing was tried."""
        return self.attempts[0] if self.attempts else None


class BruteForceResult(BaseModel):
    """Ranked outcome of a Caesar or Rail Fence brute-force run."""

    ciphertext: str
    cipher: CipherName
    verdict: CrackVerdict = CrackVerdict.NO_SOLUTION
    shifts: list[ShiftAttempt] = Field(default_factory=list)
    rails: list[RailFenceAttempt] = Field(default_factory=list)


# ===================================================================== #
#  Vigenère Support
# ===================================================================== #


class KeyLengthCandidate(BaseModel):
    """Average column Index of Coincidence for a candidate key length.

    Attributes:
        key_length: Candidate Vigenère key length.
        ioc: Average IoC of the key-length columns.
        normalized: ``ioc`` divided by the English IoC (~0.067).
    """

    key_length: int
    ioc: float
    normalized: float


class KasiskiResult(BaseModel):
    """Outcome of a Kasiski examination.

    Attributes:
        repeated: Repeated n-grams mapped to their positions.
        distances: Distances between repeated n-gram occurrences.
        factor_counts: Factor histogram as ``(factor, count)`` pairs, most
            common first.
    """

    repeated: dict[str, list[int]] = Field(default_factory=dict)
    distances: list[int] = Field(default_factory=list)
    factor_counts: list[tuple[int, int]] = Field(default_factory=list)

    @property
    def likely_lengths(self) -> list[int]:
        """Candidate key lengths ordered by vote count."""
        return [factor for factor, _ in self.factor_counts]


class VigenereAnalysis(BaseModel):
    """Combined Vigenère key-length analysis of a ciphertext."""

    ciphertext: str
    letter_count: int = 0
    ioc: float = 0.0
    kasiski: KasiskiResult = Field(default_factory=KasiskiResult)
    key_lengths: list[KeyLengthCandidate] = Field(default_factory=list)
    guessed_key: str = ""
    decrypted_preview: str = ""


# ===================================================================== #
#  Word List
# ===================================================================== #


class FetchOutcome(BaseModel):
    """Result of the one-shot remote word-list fetch.

    Either ``ok`` with the fetched ``words``, or not ``ok`` with an
    ``error`` description. Never raised, always returned.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    words: list[str] = Field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def success(cls, words: list[str]) -> FetchOutcome:
        return cls(ok=True, words=words)

    @classmethod
    def failure(cls, error: str) -> FetchOutcome:
        return cls(ok=False, error=error)
