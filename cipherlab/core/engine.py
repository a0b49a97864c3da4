"""
CipherLab Engine
=================

Central orchestrator for the CipherLab toolkit. The CipherLabEngine class
coordinates the cipher transforms and the cryptanalysis modules and
returns unified LabResult envelopes with the domain model serialised
into ``metadata``.

Architecture follows the Facade pattern (Gamma et al., 1994), providing
a simplified interface over the individual transform and analyzer
subsystems.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
      Addison-Wesley.
    - Singh, S. (1999). The Code Book. Fourth Estate.
"""

from __future__ import annotations

from typing import Callable, Optional, Union

from labcore.config import LabConfig
from labcore.logger import LabLogger
from labcore.models import LabResult

from cipherlab.analyzers.brute_force import caesar_shifts, rail_fence_attempts
from cipherlab.analyzers.frequency import FrequencyAnalyzer
from cipherlab.analyzers.keyword_cracker import KeywordCracker
from cipherlab.analyzers.scoring import EnglishScorer
from cipherlab.core.exceptions import (
    CipherLabError,
    InvalidKeyError,
    UnknownCipherError,
)
from cipherlab.core.models import (
    BruteForceResult,
    CipherName,
    KeywordCrackResult,
)
from cipherlab.transforms.alphabet import validate_alphabet
from cipherlab.transforms.morse import morse_code
from cipherlab.transforms.pigpen import pigpen_cipher
from cipherlab.transforms.railfence import rail_fence_cipher
from cipherlab.transforms.substitution import (
    atbash_cipher,
    caesar_cipher,
    keyword_cipher,
)
from cipherlab.transforms.vigenere import vigenere_cipher
from cipherlab.wordlists.sources import (
    CandidateKeywordSource,
    RemoteKeywordSource,
    offline_source,
)

Key = Union[str, int, None]


class CipherLabEngine:
    """Orchestrates every CipherLab transform and attack.

    Usage::

        engine = CipherLabEngine()
        engine.transform("keyword", "HELLO WORLD", key="SECRET")
        result = await engine.crack_keyword("DTIIL WLOIR")
        result = await engine.crack_caesar("KHOOR ZRUOG")
        result = await engine.analyze_vigenere(ciphertext)

    Attributes:
        config: CipherLab configuration instance.
        logger: Logger for the engine.
        keyword_source: Where the keyword cracker gets its candidates.
    """

    def __init__(
        self,
        config: Optional[LabConfig] = None,
        *,
        keyword_source: Optional[CandidateKeywordSource] = None,
        logger: Optional[LabLogger] = None,
    ) -> None:
        self.config = config or LabConfig()
        settings = self.config.cipherlab
        self.alphabet = validate_alphabet(settings.alphabet)
        self.logger = logger or LabLogger.from_config("engine", self.config)

        self.scorer = EnglishScorer()
        self.cracker = KeywordCracker(
            self.alphabet,
            scorer=self.scorer,
            confident_threshold=settings.confident_threshold,
            tentative_threshold=settings.tentative_threshold,
            max_workers=self.config.global_settings.max_workers,
            chunk_size=settings.chunk_size,
        )
        self._frequency_analyzer = FrequencyAnalyzer(
            self.alphabet, max_key_length=settings.max_key_length
        )
        self.keyword_source = keyword_source or self._default_source()

    def _default_source(self) -> CandidateKeywordSource:
        settings = self.config.cipherlab
        if not settings.enable_remote_wordlist:
            return offline_source()
        return RemoteKeywordSource(
            settings.wordlist_url,
            timeout=settings.wordlist_timeout,
            max_words=settings.max_remote_words,
            logger=LabLogger.from_config("wordlists", self.config),
        )

    # ------------------------------------------------------------------ #
    #  Transforms
    # ------------------------------------------------------------------ #

    def transform(
        self,
        cipher: Union[CipherName, str],
        text: str,
        key: Key = None,
        decrypt: bool = False,
    ) -> str:
        """Encrypt or decrypt *text* with the named cipher.

        Caesar takes an integer shift and Rail Fence an integer rail
        count; Keyword and Vigenère take a keyword. Atbash, Pigpen and
        Morse ignore *key*.

        Raises:
            UnknownCipherError: If *cipher* is not a supported cipher.
            InvalidKeyError: If a required key is missing or malformed.
        """
        try:
            name = CipherName(str(getattr(cipher, "value", cipher)).lower())
        except ValueError as exc:
            raise UnknownCipherError(
                f"Unknown cipher {cipher!r}; choose one of: "
                + ", ".join(c.value for c in CipherName)
            ) from exc

        handlers: dict[CipherName, Callable[[], str]] = {
            CipherName.CAESAR: lambda: caesar_cipher(
                text, self._int_key(name, key), decrypt, self.alphabet
            ),
            CipherName.KEYWORD: lambda: keyword_cipher(
                text, self._text_key(name, key), decrypt, self.alphabet
            ),
            CipherName.VIGENERE: lambda: vigenere_cipher(
                text, self._text_key(name, key), decrypt, self.alphabet
            ),
            CipherName.ATBASH: lambda: atbash_cipher(text, self.alphabet),
            CipherName.RAILFENCE: lambda: rail_fence_cipher(
                text, self._int_key(name, key), decrypt
            ),
            CipherName.PIGPEN: lambda: pigpen_cipher(text, decrypt),
            CipherName.MORSE: lambda: morse_code(text, decrypt),
        }
        self.logger.debug(
            "%s %s (%d chars)", "Decrypting" if decrypt else "Encrypting",
            name.value, len(text),
        )
        return handlers[name]()

    @staticmethod
    def _int_key(cipher: CipherName, key: Key) -> int:
        if key is None or (isinstance(key, str) and not key.strip()):
            raise InvalidKeyError(f"The {cipher.value} cipher needs a numeric key.")
        try:
            return int(key)
        except (TypeError, ValueError) as exc:
            raise InvalidKeyError(
                f"The {cipher.value} cipher needs a numeric key, got {key!r}."
            ) from exc

    @staticmethod
    def _text_key(cipher: CipherName, key: Key) -> str:
        if key is None or not str(key).strip():
            raise InvalidKeyError(f"The {cipher.value} cipher needs a keyword.")
        return str(key)

    # ------------------------------------------------------------------ #
    #  Keyword Dictionary Attack
    # ------------------------------------------------------------------ #

    async def crack_keyword(
        self, ciphertext: str, wait_for_remote: bool = False
    ) -> LabResult:
        """Run the keyword dictionary attack against *ciphertext*.

        With a remote word list, ``wait_for_remote`` awaits the fetch
        (bounded by its timeout) before cracking. Otherwise no request is
        made and the candidates available right now are used: the remote
        words from an earlier fetch, or the offline list.

        Returns:
            LabResult whose metadata is a :class:`KeywordCrackResult`
            holding the top-N attempts.
        """
        result = LabResult(tool_name="crack-keyword", target=ciphertext)
        source = self.keyword_source

        if wait_for_remote and isinstance(source, RemoteKeywordSource):
            await source.refresh()

        keywords = self.cracker.normalize_candidates(source)
        label = getattr(source, "label", "static")
        self.logger.info(
            "Starting keyword crack with %d %s candidates", len(keywords), label
        )

        try:
            with self.logger.timed("keyword crack"):
                attempts = self.cracker.crack(ciphertext, keywords)
        except CipherLabError as exc:
            self.logger.error(f"Keyword crack failed: {exc}")
            raise

        verdict = self.cracker.classify(attempts)
        crack = KeywordCrackResult(
            ciphertext=ciphertext,
            verdict=verdict,
            attempts=attempts[: self.config.cipherlab.top_n],
            candidates_tried=len(keywords) if attempts else 0,
            wordlist_source=label,
        )
        result.metadata = crack.model_dump(mode="json")

        if crack.best is None:
            summary = "Nothing to crack: the ciphertext is empty"
        else:
            summary = (
                f"Best keyword {crack.best.keyword} (score {crack.best.score}) "
                f"-- {verdict.value.replace('_', ' ')}"
            )
        return result.finalize(summary)

    # ------------------------------------------------------------------ #
    #  Brute Force
    # ------------------------------------------------------------------ #

    async def crack_caesar(self, ciphertext: str) -> LabResult:
        """Try every Caesar shift and rank the decryptions."""
        result = LabResult(tool_name="crack-caesar", target=ciphertext)
        self.logger.info("Starting Caesar brute force")

        attempts = caesar_shifts(ciphertext, self.alphabet, self.scorer)
        best_score = attempts[0].score if attempts else 0
        brute = BruteForceResult(
            ciphertext=ciphertext,
            cipher=CipherName.CAESAR,
            verdict=self.cracker.verdict_for(best_score),
            shifts=attempts[: self.config.cipherlab.top_n],
        )
        result.metadata = brute.model_dump(mode="json")

        if attempts:
            summary = (
                f"Best shift {attempts[0].shift} (score {attempts[0].score}) "
                f"-- {brute.verdict.value.replace('_', ' ')}"
            )
        else:
            summary = "Alphabet too small to brute force"
        return result.finalize(summary)

    async def crack_rail_fence(self, ciphertext: str) -> LabResult:
        """Try every rail count in the configured range and rank the results."""
        settings = self.config.cipherlab
        result = LabResult(tool_name="crack-railfence", target=ciphertext)
        self.logger.info(
            "Starting Rail Fence brute force (%d-%d rails)",
            settings.rail_min, settings.rail_max,
        )

        attempts = rail_fence_attempts(
            ciphertext, settings.rail_min, settings.rail_max, self.scorer
        )
        best_score = attempts[0].score if attempts else 0
        brute = BruteForceResult(
            ciphertext=ciphertext,
            cipher=CipherName.RAILFENCE,
            verdict=self.cracker.verdict_for(best_score),
            rails=attempts[: settings.top_n],
        )
        result.metadata = brute.model_dump(mode="json")

        if attempts:
            summary = (
                f"Best rail count {attempts[0].rails} (score {attempts[0].score}) "
                f"-- {brute.verdict.value.replace('_', ' ')}"
            )
        else:
            summary = "Empty rail range"
        return result.finalize(summary)

    # ------------------------------------------------------------------ #
    #  Vigenère Analysis
    # ------------------------------------------------------------------ #

    async def analyze_vigenere(self, ciphertext: str) -> LabResult:
        """Estimate the Vigenère key length and guess the key."""
        result = LabResult(tool_name="vigenere-keylength", target=ciphertext)
        self.logger.info("Starting Vigenère key-length analysis")

        analysis = self._frequency_analyzer.analyze(ciphertext)
        result.metadata = analysis.model_dump(mode="json")

        if analysis.key_lengths:
            best = analysis.key_lengths[0]
            summary = (
                f"Most likely key length {best.key_length} "
                f"(IoC {best.ioc:.4f}), guessed key {analysis.guessed_key}"
            )
        else:
            summary = (
                f"Not enough letters for key-length analysis "
                f"({analysis.letter_count} found, 20 needed)"
            )
        return result.finalize(summary)
