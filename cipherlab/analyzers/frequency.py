"""
Frequency Analyzer
===================

Letter-level frequency analysis for classical ciphertexts: letter
distribution, Index of Coincidence (IC), Kasiski examination and a
column-IC key-length search for the Vigenère cipher.

The Vigenère analysis pipeline:
1. Extract the alphabet letters of the ciphertext
2. Index of Coincidence of the whole text
3. Kasiski examination (repeated trigram distances -> factor votes)
4. Average column IC for each candidate key length
5. Per-column key guess assuming the most frequent letter is ``E``

Interpreting the IC of letter-only text:
    - IC ~ 0.067 : English plaintext, or any monoalphabetic substitution
    - IC ~ 0.038 : Random letters (1/26), long-key polyalphabetic

References:
    - Friedman, W. F. (1922). The Index of Coincidence and Its
      Applications in Cryptanalysis. Riverbank Publication No. 22.
    - Kasiski, F. W. (1863). Die Geheimschriften und die Dechiffrirkunst.
    - Sinkov, A. (1966). Elementary Cryptanalysis: A Mathematical
      Approach. Mathematical Association of America.
"""

from __future__ import annotations

import math
from collections import Counter

from cipherlab.core.models import KasiskiResult, KeyLengthCandidate, VigenereAnalysis
from cipherlab.transforms.alphabet import DEFAULT_ALPHABET
from cipherlab.transforms.vigenere import vigenere_cipher

# Index of Coincidence for English letter text
IC_ENGLISH: float = 0.067

# IC for uniformly random letters over 26 symbols
IC_RANDOM_26: float = 1.0 / 26.0

# Below this many letters the column IC is meaningless
MIN_LETTERS_FOR_KEY_LENGTH: int = 20

KASISKI_MIN_FACTOR: int = 2
KASISKI_MAX_FACTOR: int = 20


def _letters(text: str, alphabet: str) -> str:
    return "".join(c for c in text.upper() if c in alphabet)


def letter_frequencies(
    text: str, alphabet: str = DEFAULT_ALPHABET
) -> dict[str, float]:
    """Return the percentage of each alphabet letter among the letters of *text*.

    Every alphabet letter is present in the result; text without letters
    maps every letter to ``0.0``.
    """
    letters = _letters(text, alphabet)
    if not letters:
        return {c: 0.0 for c in alphabet}
    counts = Counter(letters)
    total = len(letters)
    return {c: counts.get(c, 0) / total * 100.0 for c in alphabet}


def index_of_coincidence(text: str, alphabet: str = DEFAULT_ALPHABET) -> float:
    """Compute the Index of Coincidence of the letters in *text*.

    The IC is the probability that two letters drawn without replacement
    are equal:

        IC = sum_i f_i * (f_i - 1) / (N * (N - 1))

    Returns ``0.0`` for fewer than two letters.
    """
    letters = _letters(text, alphabet)
    n = len(letters)
    if n < 2:
        return 0.0
    counts = Counter(letters)
    numerator = sum(f * (f - 1) for f in counts.values())
    return numerator / (n * (n - 1))


def kasiski_examination(
    text: str, alphabet: str = DEFAULT_ALPHABET, ngram: int = 3
) -> KasiskiResult:
    """Perform Kasiski examination to find likely key lengths.

    Finds repeated n-grams among the letters of *text*, collects the
    distances between every pair of occurrences and votes for each
    factor of each distance in the practical key-length range 2..20.

    Args:
        text: Ciphertext to examine.
        alphabet: Letters that take part in the examination.
        ngram: Length of the repeated sequences to look for.

    Returns:
        KasiskiResult with factors ordered by vote count, then by size.
    """
    letters = _letters(text, alphabet)
    if ngram < 1 or len(letters) < ngram * 2:
        return KasiskiResult()

    positions: dict[str, list[int]] = {}
    for i in range(len(letters) - ngram + 1):
        positions.setdefault(letters[i : i + ngram], []).append(i)

    repeated = {gram: pos for gram, pos in positions.items() if len(pos) > 1}

    distances: list[int] = []
    for pos in repeated.values():
        for i in range(len(pos)):
            for j in range(i + 1, len(pos)):
                distances.append(pos[j] - pos[i])

    factor_counts: Counter[int] = Counter()
    for dist in distances:
        for f in _find_factors(dist):
            if KASISKI_MIN_FACTOR <= f <= KASISKI_MAX_FACTOR:
                factor_counts[f] += 1

    ranked = sorted(factor_counts.items(), key=lambda item: (-item[1], item[0]))
    return KasiskiResult(
        repeated=repeated,
        distances=distances,
        factor_counts=ranked,
    )


def estimate_key_lengths(
    text: str, alphabet: str = DEFAULT_ALPHABET, max_length: int = 10
) -> list[KeyLengthCandidate]:
    """Rank candidate Vigenère key lengths by average column IC.

    For each length ``L`` in ``1..min(max_length, letters // 2)`` the
    letters are split into ``L`` interleaved columns; when ``L`` is the
    key length each column is a Caesar cipher and its IC approaches the
    English value.

    Returns:
        Candidates sorted by IC descending (shorter length first on ties),
        or ``[]`` for fewer than 20 letters.
    """
    letters = _letters(text, alphabet)
    if len(letters) < MIN_LETTERS_FOR_KEY_LENGTH:
        return []

    candidates: list[KeyLengthCandidate] = []
    for length in range(1, min(max_length, len(letters) // 2) + 1):
        columns = [letters[i::length] for i in range(length)]
        ics = [index_of_coincidence(col, alphabet) for col in columns if len(col) > 1]
        avg = sum(ics) / len(ics) if ics else 0.0
        candidates.append(
            KeyLengthCandidate(
                key_length=length,
                ioc=avg,
                normalized=avg / IC_ENGLISH,
            )
        )

    return sorted(candidates, key=lambda c: c.ioc, reverse=True)


def guess_vigenere_key(
    text: str, key_length: int, alphabet: str = DEFAULT_ALPHABET
) -> str:
    """Guess a Vigenère key of *key_length* by per-column frequency.

    Each column is assumed to encrypt its most frequent letter from
    plaintext ``E`` (or from ``alphabet[0]`` when ``E`` is not in the
    alphabet). Ties go to the earlier alphabet letter.
    """
    if key_length < 1:
        return ""
    letters = _letters(text, alphabet)
    reference = alphabet.index("E") if "E" in alphabet else 0
    n = len(alphabet)

    key: list[str] = []
    for i in range(key_length):
        column = letters[i::key_length]
        if not column:
            key.append(alphabet[0])
            continue
        counts = Counter(column)
        top = max(alphabet, key=lambda c: counts.get(c, 0))
        key.append(alphabet[(alphabet.index(top) - reference) % n])
    return "".join(key)


class FrequencyAnalyzer:
    """Runs the complete Vigenère key-length analysis on a ciphertext.

    Usage::

        analyzer = FrequencyAnalyzer()
        result = analyzer.analyze(ciphertext)
        print(f"IC: {result.ioc:.4f}")
        print(f"Best key length: {result.key_lengths[0].key_length}")
    """

    PREVIEW_LENGTH: int = 80

    def __init__(self, alphabet: str = DEFAULT_ALPHABET, max_key_length: int = 10) -> None:
        self.alphabet = alphabet
        self.max_key_length = max_key_length

    def analyze(self, ciphertext: str) -> VigenereAnalysis:
        letters = _letters(ciphertext, self.alphabet)
        key_lengths = estimate_key_lengths(
            ciphertext, self.alphabet, self.max_key_length
        )

        guessed_key = ""
        preview = ""
        if key_lengths:
            guessed_key = guess_vigenere_key(
                ciphertext, key_lengths[0].key_length, self.alphabet
            )
            preview = vigenere_cipher(
                ciphertext, guessed_key, decrypt=True, alphabet=self.alphabet
            )[: self.PREVIEW_LENGTH]

        return VigenereAnalysis(
            ciphertext=ciphertext,
            letter_count=len(letters),
            ioc=index_of_coincidence(ciphertext, self.alphabet),
            kasiski=kasiski_examination(ciphertext, self.alphabet),
            key_lengths=key_lengths,
            guessed_key=guessed_key,
            decrypted_preview=preview,
        )


def _find_factors(n: int) -> list[int]:
    """Find all factors of a positive integer.

    Args:
        n: Positive integer.

    Returns:
        Sorted list of factors.
    """
    if n <= 0:
        return []

    factors: set[int] = set()
    for i in range(1, int(math.isqrt(n)) + 1):
        if n % i == 0:
            factors.add(i)
            factors.add(n // i)

    return sorted(factors)
