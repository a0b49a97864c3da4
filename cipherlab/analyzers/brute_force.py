"""
Brute-Force Helpers
====================

Exhaustive attacks for ciphers with a tiny key space: every Caesar shift
and every rail count in a small range is tried and the decryptions are
ranked with :class:`EnglishScorer`.
"""

from __future__ import annotations

from typing import Optional

from cipherlab.analyzers.scoring import EnglishScorer
from cipherlab.core.models import RailFenceAttempt, ShiftAttempt
from cipherlab.transforms.alphabet import DEFAULT_ALPHABET, validate_alphabet
from cipherlab.transforms.railfence import rail_fence_cipher
from cipherlab.transforms.substitution import caesar_cipher


def caesar_shifts(
    ciphertext: str,
    alphabet: str = DEFAULT_ALPHABET,
    scorer: Optional[EnglishScorer] = None,
) -> list[ShiftAttempt]:
    """Decrypt with every shift ``1..len(alphabet) - 1``, best first.

    Equal scores keep ascending shift order.
    """
    validate_alphabet(alphabet)
    scorer = scorer or EnglishScorer()
    attempts = []
    for shift in range(1, len(alphabet)):
        result = caesar_cipher(ciphertext, shift, decrypt=True, alphabet=alphabet)
        attempts.append(ShiftAttempt(shift=shift, result=result, score=scorer.score(result)))
    return sorted(attempts, key=lambda a: a.score, reverse=True)


def rail_fence_attempts(
    ciphertext: str,
    min_rails: int = 2,
    max_rails: int = 8,
    scorer: Optional[EnglishScorer] = None,
) -> list[RailFenceAttempt]:
    """Decrypt with every rail count in ``[min_rails, max_rails]``, best first."""
    scorer = scorer or EnglishScorer()
    attempts = []
    for rails in range(max(2, min_rails), max_rails + 1):
        result = rail_fence_cipher(ciphertext, rails, decrypt=True)
        attempts.append(
            RailFenceAttempt(rails=rails, result=result, score=scorer.score(result))
        )
    return sorted(attempts, key=lambda a: a.score, reverse=True)
