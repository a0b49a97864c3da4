"""
CipherLab Analyzers
====================

Cryptanalysis modules: English scoring, the keyword dictionary attack,
brute-force helpers and Vigenère frequency analysis.
"""

from cipherlab.analyzers.brute_force import caesar_shifts, rail_fence_attempts
from cipherlab.analyzers.frequency import (
    FrequencyAnalyzer,
    estimate_key_lengths,
    guess_vigenere_key,
    index_of_coincidence,
    kasiski_examination,
    letter_frequencies,
)
from cipherlab.analyzers.keyword_cracker import KeywordCracker, crack_keyword_cipher
from cipherlab.analyzers.scoring import EnglishScorer, score_text

__all__ = [
    "EnglishScorer",
    "FrequencyAnalyzer",
    "KeywordCracker",
    "caesar_shifts",
    "crack_keyword_cipher",
    "estimate_key_lengths",
    "guess_vigenere_key",
    "index_of_coincidence",
    "kasiski_examination",
    "letter_frequencies",
    "rail_fence_attempts",
    "score_text",
]
