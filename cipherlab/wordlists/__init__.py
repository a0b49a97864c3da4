"""
CipherLab Word Lists
=====================

Candidate keywords for the keyword-cipher dictionary attack.
"""

from cipherlab.wordlists.keywords import BUILTIN_KEYWORDS, OFFLINE_KEYWORDS
from cipherlab.wordlists.sources import (
    DEFAULT_WORDLIST_URL,
    CandidateKeywordSource,
    RemoteKeywordSource,
    StaticKeywordSource,
    merge_keywords,
    offline_source,
    parse_word_payload,
)

__all__ = [
    "BUILTIN_KEYWORDS",
    "DEFAULT_WORDLIST_URL",
    "OFFLINE_KEYWORDS",
    "CandidateKeywordSource",
    "RemoteKeywordSource",
    "StaticKeywordSource",
    "merge_keywords",
    "offline_source",
    "parse_word_payload",
]
