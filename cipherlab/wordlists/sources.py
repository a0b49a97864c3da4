"""
Candidate Keyword Sources
==========================

Where the keyword cracker gets the words it tries.

A source is anything with a ``keywords()`` method returning an ordered,
deduplicated list of uppercase candidates. Two implementations ship:

- :class:`StaticKeywordSource` -- a fixed list, used by tests and by the
  ``--wordlist`` CLI option.
- :class:`RemoteKeywordSource` -- the built-in list plus up to 50 words
  from a Datamuse-compatible word-list API. The fetch is a single GET
  with a short timeout and no retries. Until it has succeeded (pending,
  timed out, non-2xx, bad payload) the offline list is used instead, so
  cracking never waits on the network.

References:
    - Datamuse API. https://www.datamuse.com/api/
"""

from __future__ import annotations

import asyncio
import re
from typing import Any, Iterable, Optional, Protocol, runtime_checkable

from labcore.logger import LabLogger
from labcore.network import LabHTTP, LabHTTPError

from cipherlab.core.models import FetchOutcome
from cipherlab.wordlists.keywords import BUILTIN_KEYWORDS, OFFLINE_KEYWORDS

DEFAULT_WORDLIST_URL = "https://api.datamuse.com/words?ml=secret&max=50"

_WORD_PATTERN = re.compile(r"^[A-Z]+(?: [A-Z]+)*$")


@runtime_checkable
class CandidateKeywordSource(Protocol):
    """Anything that can supply candidate keywords."""

    def keywords(self) -> list[str]:
        ...


def merge_keywords(*lists: Iterable[str]) -> list[str]:
    """Uppercase, strip and deduplicate keywords, keeping first occurrence.

    Example::

        >>> merge_keywords(["secret", "Code"], ["CODE", " spy "])
        ['SECRET', 'CODE', 'SPY']
    """
    seen: set[str] = set()
    merged: list[str] = []
    for words in lists:
        for word in words:
            normalised = word.strip().upper()
            if normalised and normalised not in seen:
                seen.add(normalised)
                merged.append(normalised)
    return merged


def parse_word_payload(payload: Any, max_words: int = 50) -> list[str]:
    """Extract up to *max_words* uppercase words from a word-list response.

    The payload must be a JSON array of objects with a string ``word``
    field. Entries that are not purely alphabetic (single spaces between
    words allowed) are skipped.

    Raises:
        ValueError: If the payload is not a list.
    """
    if not isinstance(payload, list):
        raise ValueError(
            f"Expected a JSON array of words, got {type(payload).__name__}"
        )
    words: list[str] = []
    for item in payload:
        if len(words) >= max_words:
            break
        if not isinstance(item, dict):
            continue
        word = item.get("word")
        if not isinstance(word, str):
            continue
        word = word.strip().upper()
        if _WORD_PATTERN.match(word) and word not in words:
            words.append(word)
    return words


class StaticKeywordSource:
    """A fixed, deterministic candidate list."""

    def __init__(self, words: Iterable[str], label: str = "static") -> None:
        self._words = merge_keywords(words)
        self._label = label

    def keywords(self) -> list[str]:
        return list(self._words)

    @property
    def label(self) -> str:
        return self._label

    def __len__(self) -> int:
        return len(self._words)


class RemoteKeywordSource:
    """Built-in keywords extended with a one-shot remote word list.

    The remote outcome is cached for the lifetime of the source, so the
    network is contacted at most once per session.

    Usage::

        source = RemoteKeywordSource()
        source.start()                 # inside a running event loop
        words = source.keywords()      # offline list until the fetch lands
        await source.refresh()         # or wait (bounded by the timeout)

    Args:
        url:       Word-list endpoint returning ``[{"word": ...}, ...]``.
        timeout:   Overall fetch timeout in seconds.
        max_words: Maximum number of remote words to keep.
        builtin:   Keywords that are always included.
        fallback:  Keywords used while the remote list is unavailable.
        http:      Optional pre-built client (its lifecycle stays with the caller).
    """

    def __init__(
        self,
        url: str = DEFAULT_WORDLIST_URL,
        *,
        timeout: float = 3.0,
        max_words: int = 50,
        builtin: Iterable[str] = BUILTIN_KEYWORDS,
        fallback: Iterable[str] = OFFLINE_KEYWORDS,
        http: Optional[LabHTTP] = None,
        logger: Optional[LabLogger] = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.max_words = max_words
        self._builtin = merge_keywords(builtin)
        self._fallback = merge_keywords(fallback)
        self._http = http
        self._logger = logger or LabLogger("wordlists")
        self._outcome: Optional[FetchOutcome] = None
        self._task: Optional[asyncio.Task[FetchOutcome]] = None

    # ------------------------------------------------------------------ #
    #  State
    # ------------------------------------------------------------------ #

    @property
    def outcome(self) -> Optional[FetchOutcome]:
        """The fetch outcome, or ``None`` while nothing has completed."""
        return self._outcome

    @property
    def label(self) -> str:
        """``"remote"`` once the fetch has succeeded, else ``"offline"``."""
        if self._outcome is not None and self._outcome.ok:
            return "remote"
        return "offline"

    def keywords(self) -> list[str]:
        """Return the candidates available right now, without blocking."""
        if self._outcome is not None and self._outcome.ok:
            return merge_keywords(self._builtin, self._outcome.words)
        return merge_keywords(self._builtin, self._fallback)

    # ------------------------------------------------------------------ #
    #  Fetching
    # ------------------------------------------------------------------ #

    def start(self) -> asyncio.Task[FetchOutcome]:
        """Schedule the fetch on the running loop (idempotent)."""
        if self._task is None:
            self._task = asyncio.get_running_loop().create_task(self.fetch())
        return self._task

    async def refresh(self) -> FetchOutcome:
        """Wait for the fetch to finish, starting it if necessary."""
        if self._outcome is not None:
            return self._outcome
        return await self.start()

    async def fetch(self) -> FetchOutcome:
        """Perform the GET and record the outcome. Never raises."""
        if self._outcome is not None:
            return self._outcome

        owns_http = self._http is None
        http = self._http or LabHTTP(timeout=self.timeout)
        try:
            payload = await asyncio.wait_for(
                http.fetch_json(self.url), timeout=self.timeout
            )
            words = parse_word_payload(payload, self.max_words)
        except asyncio.TimeoutError:
            outcome = FetchOutcome.failure(
                f"Timed out after {self.timeout:.1f}s fetching {self.url}"
            )
        except (LabHTTPError, ValueError) as exc:
            outcome = FetchOutcome.failure(str(exc))
        else:
            outcome = FetchOutcome.success(words)
        finally:
            if owns_http:
                await http.close()

        if outcome.ok:
            self._logger.info(
                "Fetched %d remote keywords from %s", len(outcome.words), self.url
            )
        else:
            self._logger.warning(
                "Remote word list unavailable, using offline list: %s",
                outcome.error,
            )
        self._outcome = outcome
        return outcome


def offline_source() -> StaticKeywordSource:
    """Built-in plus offline keywords, without touching the network."""
    return StaticKeywordSource((*BUILTIN_KEYWORDS, *OFFLINE_KEYWORDS), label="offline")
