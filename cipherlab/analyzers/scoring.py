"""
English Likelihood Scoring
===========================

Composite heuristic that rates how much a candidate plaintext looks like
English. Used to rank the results of dictionary and brute-force attacks.

The score is the sum of five components:

1. Common words -- +15 for every whitespace token found in
   :data:`COMMON_WORDS`, +3 for every token of length 3 to 8.
2. Letter frequency fit -- for each letter A-Z,
   ``max(0, 5 - |observed% - expected%|)``.
3. Bigrams -- +4 per occurrence of a :data:`COMMON_BIGRAMS` member in the
   whitespace-stripped text.
4. Trigrams -- +6 per occurrence of a :data:`COMMON_TRIGRAMS` member.
5. Vowel ratio -- +10 when the vowel share of letters is in [0.35, 0.45],
   +5 when it is in [0.25, 0.55].

The total is rounded half-up to an integer. It is not normalised by text
length, so short texts that contain one common word can score high.

References:
    - Lewand, R. E. (2000). Cryptological Mathematics. MAA.
    - Sinkov, A. (1966). Elementary Cryptanalysis: A Mathematical
      Approach. Mathematical Association of America.
"""

from __future__ import annotations

import math
import re
from collections import Counter

from cipherlab.core.models import TextScore

# Expected letter frequencies in English text, in percent.
ENGLISH_LETTER_FREQUENCIES: dict[str, float] = {
    "E": 12.7, "T": 9.1, "A": 8.2, "O": 7.5, "I": 7.0, "N": 6.7,
    "S": 6.3, "H": 6.1, "R": 6.0, "D": 4.3, "L": 4.0, "C": 2.8,
    "U": 2.8, "M": 2.4, "W": 2.4, "F": 2.2, "G": 2.0, "Y": 2.0,
    "P": 1.9, "B": 1.3, "V": 1.0, "K": 0.8, "J": 0.15, "X": 0.15,
    "Q": 0.10, "Z": 0.07,
}

COMMON_WORDS: frozenset[str] = frozenset({
    "THE", "AND", "FOR", "ARE", "BUT", "NOT", "YOU", "ALL", "ANY", "CAN",
    "HER", "WAS", "ONE", "OUR", "OUT", "DAY", "GET", "HAS", "HIM", "HIS",
    "HOW", "MAN", "NEW", "NOW", "OLD", "SEE", "TWO", "WAY", "WHO", "BOY",
    "DID", "ITS", "LET", "PUT", "SAY", "SHE", "TOO", "USE", "THAT", "WITH",
    "HAVE", "THIS", "WILL", "YOUR", "FROM", "THEY", "KNOW", "WANT", "BEEN",
    "GOOD", "MUCH", "SOME", "TIME", "VERY", "WHEN", "COME", "HERE", "JUST",
    "LIKE", "LONG", "MAKE", "MANY", "MORE", "ONLY", "OVER", "SUCH", "TAKE",
    "THAN", "THEM", "WELL", "WERE", "WHAT", "MEET", "FIND", "KEEP", "BACK",
    "THERE", "THEIR", "WOULD", "ABOUT", "WHICH", "COULD", "OTHER", "AFTER",
    "FIRST", "NEVER", "THESE", "THINK", "WHERE", "BEING", "EVERY", "GREAT",
    "HELLO", "WORLD", "SECRET", "MESSAGE", "CODE", "CIPHER", "ATTACK",
    "DAWN", "NOON", "MIDNIGHT", "TREASURE", "HIDDEN", "FRIEND", "SCHOOL",
    "TODAY", "TOMORROW", "PLEASE", "THANK", "IS", "IT", "IN", "ON", "AT",
    "TO", "OF", "BE", "WE", "HE", "ME", "MY", "SO", "NO", "GO", "DO", "UP",
    "AN", "AS", "BY", "IF", "OR", "US", "AM", "I", "A",
})

COMMON_BIGRAMS: frozenset[str] = frozenset({
    "TH", "HE", "IN", "ER", "AN", "RE", "ON", "AT", "EN", "ND",
    "TI", "ES", "OR", "TE", "OF", "ED", "IS", "IT", "AL", "AR",
})

COMMON_TRIGRAMS: frozenset[str] = frozenset({
    "THE", "AND", "ING", "HER", "HAT", "HIS", "THA", "ERE", "FOR", "ENT",
    "ION", "TER", "WAS", "YOU", "ITH", "VER", "ALL", "WIT", "THI", "TIO",
})

VOWELS: frozenset[str] = frozenset("AEIOU")

_WHITESPACE = re.compile(r"\s+")


class EnglishScorer:
    """Scores text by how closely it resembles English.

    The weights are tuning constants carried over unchanged from the
    classroom tool; a higher score only means "more English-like".

    Usage::

        scorer = EnglishScorer()
        scorer.score("HELLO WORLD")          # -> 104
        scorer.breakdown("HELLO WORLD").bigrams
    """

    COMMON_WORD_BONUS: float = 15.0
    WORD_LENGTH_BONUS: float = 3.0
    WORD_LENGTH_RANGE: tuple[int, int] = (3, 8)
    FREQUENCY_TOLERANCE: float = 5.0
    BIGRAM_BONUS: float = 4.0
    TRIGRAM_BONUS: float = 6.0
    VOWEL_IDEAL_BAND: tuple[float, float] = (0.35, 0.45)
    VOWEL_IDEAL_BONUS: float = 10.0
    VOWEL_ACCEPTABLE_BAND: tuple[float, float] = (0.25, 0.55)
    VOWEL_ACCEPTABLE_BONUS: float = 5.0

    def score(self, text: str) -> int:
        """Return the rounded composite score of *text*."""
        return self.breakdown(text).total

    def breakdown(self, text: str) -> TextScore:
        """Return every component of the score of *text*."""
        upper = text.upper()
        letters = [c for c in upper if c in ENGLISH_LETTER_FREQUENCIES]
        stripped = _WHITESPACE.sub("", upper)

        words = self._word_score(upper)
        frequency = self._frequency_score(letters)
        bigrams = self._ngram_count(stripped, 2, COMMON_BIGRAMS) * self.BIGRAM_BONUS
        trigrams = self._ngram_count(stripped, 3, COMMON_TRIGRAMS) * self.TRIGRAM_BONUS
        vowels = self._vowel_score(letters)

        total = words + frequency + bigrams + trigrams + vowels
        return TextScore(
            common_words=words,
            letter_frequency=frequency,
            bigrams=bigrams,
            trigrams=trigrams,
            vowel_ratio=vowels,
            total=_round_half_up(total),
        )

    # ------------------------------------------------------------------ #
    #  Components
    # ------------------------------------------------------------------ #

    def _word_score(self, upper: str) -> float:
        low, high = self.WORD_LENGTH_RANGE
        points = 0.0
        for token in upper.split():
            if token in COMMON_WORDS:
                points += self.COMMON_WORD_BONUS
            if low <= len(token) <= high:
                points += self.WORD_LENGTH_BONUS
        return points

    def _frequency_score(self, letters: list[str]) -> float:
        if not letters:
            return 0.0
        counts = Counter(letters)
        total = len(letters)
        points = 0.0
        for letter, expected in ENGLISH_LETTER_FREQUENCIES.items():
            observed = counts.get(letter, 0) / total * 100.0
            points += max(0.0, self.FREQUENCY_TOLERANCE - abs(observed - expected))
        return points

    @staticmethod
    def _ngram_count(text: str, size: int, table: frozenset[str]) -> int:
        return sum(
            1 for i in range(len(text) - size + 1) if text[i : i + size] in table
        )

    def _vowel_score(self, letters: list[str]) -> float:
        if not letters:
            return 0.0
        ratio = sum(1 for c in letters if c in VOWELS) / len(letters)
        low, high = self.VOWEL_IDEAL_BAND
        if low <= ratio <= high:
            return self.VOWEL_IDEAL_BONUS
        low, high = self.VOWEL_ACCEPTABLE_BAND
        if low <= ratio <= high:
            return self.VOWEL_ACCEPTABLE_BONUS
        return 0.0


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


_DEFAULT_SCORER = EnglishScorer()


def score_text(text: str) -> int:
    """Score *text* with the default :class:`EnglishScorer`."""
    return _DEFAULT_SCORER.score(text)
