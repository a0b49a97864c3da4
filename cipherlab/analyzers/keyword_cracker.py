"""
Keyword Cipher Dictionary Attack
=================================

Attacks a keyword substitution cipher by trying every candidate keyword,
decrypting the ciphertext with it and ranking the results by their
English-likelihood score.

The attack pipeline:
1. Normalise candidates (strip, uppercase, drop empties, deduplicate)
2. Decrypt the ciphertext under each candidate
3. Score each decryption with :class:`EnglishScorer`
4. Sort by score descending; ties keep candidate order
5. Classify the best score as a confident, tentative or failed crack

Keywords that reduce to the same cipher alphabet (``SECRET`` and
``SECRETS``) decrypt identically and therefore tie; the one listed first
wins.

References:
    - Singh, S. (1999). The Code Book. Fourth Estate. Chapter 1.
    - Sinkov, A. (1966). Elementary Cryptanalysis: A Mathematical
      Approach. Mathematical Association of America.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Optional, Sequence, Union

from cipherlab.analyzers.scoring import EnglishScorer
from cipherlab.core.models import CrackAttempt, CrackVerdict
from cipherlab.transforms.alphabet import DEFAULT_ALPHABET, validate_alphabet
from cipherlab.transforms.substitution import keyword_cipher
from cipherlab.wordlists.sources import CandidateKeywordSource, merge_keywords

Candidates = Union[CandidateKeywordSource, Iterable[str]]


class KeywordCracker:
    """Dictionary attack on keyword substitution ciphers.

    Usage::

        cracker = KeywordCracker()
        attempts = cracker.crack("DTIIL WLOIR", ["CODE", "SECRET"])
        attempts[0].keyword            # 'SECRET'
        cracker.classify(attempts)     # CrackVerdict.CONFIDENT

    Args:
        alphabet:            Plain alphabet shared by every candidate.
        scorer:              Scorer used to rank decryptions.
        confident_threshold: Best score strictly above this is a confident crack.
        tentative_threshold: Best score strictly above this is a tentative crack.
        max_workers:         Thread-pool size; ``1`` runs sequentially.
        chunk_size:          Candidates per pool task.
    """

    def __init__(
        self,
        alphabet: str = DEFAULT_ALPHABET,
        *,
        scorer: Optional[EnglishScorer] = None,
        confident_threshold: int = 50,
        tentative_threshold: int = 30,
        max_workers: int = 1,
        chunk_size: int = 64,
    ) -> None:
        validate_alphabet(alphabet)
        self.alphabet = alphabet
        self.scorer = scorer or EnglishScorer()
        self.confident_threshold = confident_threshold
        self.tentative_threshold = tentative_threshold
        self.max_workers = max(1, max_workers)
        self.chunk_size = max(1, chunk_size)

    @staticmethod
    def normalize_candidates(candidates: Candidates) -> list[str]:
        """Flatten *candidates* into an ordered, deduplicated keyword list."""
        if isinstance(candidates, CandidateKeywordSource):
            candidates = candidates.keywords()
        elif isinstance(candidates, str):
            candidates = [candidates]
        return merge_keywords(candidates)

    def crack(self, ciphertext: str, candidates: Candidates) -> list[CrackAttempt]:
        """Try every candidate and return all attempts, best first.

        Empty or whitespace-only ciphertext yields an empty list.
        """
        if not ciphertext.strip():
            return []

        keywords = self.normalize_candidates(candidates)
        if self.max_workers > 1 and len(keywords) > self.chunk_size:
            chunks = [
                keywords[i : i + self.chunk_size]
                for i in range(0, len(keywords), self.chunk_size)
            ]
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                attempts = [
                    attempt
                    for chunk_attempts in pool.map(
                        lambda chunk: self._try_keywords(ciphertext, chunk), chunks
                    )
                    for attempt in chunk_attempts
                ]
        else:
            attempts = self._try_keywords(ciphertext, keywords)

        # sorted() is stable, so equal scores keep candidate order
        return sorted(attempts, key=lambda a: a.score, reverse=True)

    def classify(self, attempts: Sequence[CrackAttempt]) -> CrackVerdict:
        """Classify a ranked attempt list by its best score."""
        if not attempts:
            return CrackVerdict.NO_SOLUTION
        return self.verdict_for(max(a.score for a in attempts))

    def verdict_for(self, best_score: int) -> CrackVerdict:
        """Map a single best score onto a :class:`CrackVerdict`."""
        if best_score > self.confident_threshold:
            return CrackVerdict.CONFIDENT
        if best_score > self.tentative_threshold:
            return CrackVerdict.TENTATIVE
        return CrackVerdict.NO_SOLUTION

    def _try_keywords(
        self, ciphertext: str, keywords: Sequence[str]
    ) -> list[CrackAttempt]:
        attempts: list[CrackAttempt] = []
        for keyword in keywords:
            result = keyword_cipher(
                ciphertext, keyword, decrypt=True, alphabet=self.alphabet
            )
            attempts.append(
                CrackAttempt(
                    keyword=keyword,
                    result=result,
                    score=self.scorer.score(result),
                )
            )
        return attempts


def crack_keyword_cipher(
    ciphertext: str,
    candidates: Candidates,
    alphabet: str = DEFAULT_ALPHABET,
) -> list[CrackAttempt]:
    """Run a sequential :class:`KeywordCracker` with default thresholds."""
    return KeywordCracker(alphabet).crack(ciphertext, candidates)
