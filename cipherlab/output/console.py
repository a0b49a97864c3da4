"""
CipherLab Console Output
=========================

Rich-based console output formatters for CipherLab results: ranked
crack tables, a colour-coded verdict panel and the Vigenère key-length
analysis.

Uses the labcore console infrastructure for consistent styling.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from labcore.console import LabConsole
from labcore.models import LabResult
from cipherlab.core.models import (
    BruteForceResult,
    CrackVerdict,
    KeywordCrackResult,
    VigenereAnalysis,
)


# ===================================================================== #
#  Colour Maps
# ===================================================================== #

_VERDICT_COLOURS: dict[CrackVerdict, str] = {
    CrackVerdict.CONFIDENT: "bold bright_green",
    CrackVerdict.TENTATIVE: "bold yellow",
    CrackVerdict.NO_SOLUTION: "bold red",
}

_VERDICT_LABELS: dict[CrackVerdict, str] = {
    CrackVerdict.CONFIDENT: "Cracked it!",
    CrackVerdict.TENTATIVE: "Possible crack -- check the text",
    CrackVerdict.NO_SOLUTION: "No convincing solution found",
}


class CipherLabConsoleOutput:
    """Console output formatters for CipherLab results.

    Usage::

        console = LabConsole()
        output = CipherLabConsoleOutput(console)
        output.display_result(lab_result)
    """

    def __init__(self, console: Optional[LabConsole] = None) -> None:
        self.console = console or LabConsole()
        self._rich = self.console.rich

    def display_result(self, result: LabResult) -> None:
        """Dispatch a :class:`LabResult` to the matching display method."""
        if result.tool_name == "crack-keyword":
            self.display_keyword_crack(KeywordCrackResult.model_validate(result.metadata))
        elif result.tool_name in ("crack-caesar", "crack-railfence"):
            self.display_brute_force(BruteForceResult.model_validate(result.metadata))
        elif result.tool_name == "vigenere-keylength":
            self.display_vigenere(VigenereAnalysis.model_validate(result.metadata))
        if result.summary:
            self.console.info(result.summary)
        if result.duration_seconds is not None:
            self._rich.print(f"[lab.dim]Completed in {result.duration_seconds:.3f}s[/lab.dim]")

    # ------------------------------------------------------------------ #
    #  Transform Display
    # ------------------------------------------------------------------ #

    def display_transform(self, cipher: str, decrypt: bool, source: str, output: str) -> None:
        """Show the input and output of a single transform."""
        action = "Decrypted" if decrypt else "Encrypted"
        text = Text()
        text.append("Input:  ", style="bold")
        text.append(f"{source}\n")
        text.append("Output: ", style="bold")
        text.append(output, style="bold bright_green")
        self._rich.print(
            Panel(text, title=f"{action} with {cipher.title()}", border_style="cyan")
        )

    # ------------------------------------------------------------------ #
    #  Crack Displays
    # ------------------------------------------------------------------ #

    def display_keyword_crack(self, crack: KeywordCrackResult) -> None:
        """Render the ranked keyword attempts and the verdict panel."""
        self.console.section("Keyword Cipher Crack")

        tbl = self._ranked_table(
            "Top Keyword Guesses",
            "Keyword",
            [(a.keyword, a.result, a.score) for a in crack.attempts],
        )
        tbl.caption = (
            f"{crack.candidates_tried} candidates tried "
            f"({crack.wordlist_source} word list)"
        )
        self._rich.print(tbl)
        self._verdict_panel(
            crack.verdict,
            crack.best.result if crack.best else "",
            f"Keyword: {crack.best.keyword}" if crack.best else "",
        )

    def display_brute_force(self, brute: BruteForceResult) -> None:
        """Render a Caesar or Rail Fence brute-force ranking."""
        if brute.shifts:
            self.console.section("Caesar Brute Force")
            rows = [(a.shift, a.result, a.score) for a in brute.shifts]
            tbl = self._ranked_table("Top Shifts", "Shift", rows)
            best_label = f"Shift: {brute.shifts[0].shift}"
            best_text = brute.shifts[0].result
        else:
            self.console.section("Rail Fence Brute Force")
            rows = [(a.rails, a.result, a.score) for a in brute.rails]
            tbl = self._ranked_table("Top Rail Counts", "Rails", rows)
            best_label = f"Rails: {brute.rails[0].rails}" if brute.rails else ""
            best_text = brute.rails[0].result if brute.rails else ""

        self._rich.print(tbl)
        self._verdict_panel(brute.verdict, best_text, best_label)

    # ------------------------------------------------------------------ #
    #  Vigenère Display
    # ------------------------------------------------------------------ #

    def display_vigenere(self, analysis: VigenereAnalysis) -> None:
        """Render the key-length table, Kasiski factors and the key guess."""
        self.console.section("Vigenère Key-Length Analysis")

        overview = Text()
        overview.append("Letters: ", style="bold")
        overview.append(f"{analysis.letter_count}\n")
        overview.append("Index of Coincidence: ", style="bold")
        overview.append(f"{analysis.ioc:.4f}")
        overview.append("  (English ~0.067, random ~0.038)", style="dim")
        self._rich.print(Panel(overview, title="Overview", border_style="cyan"))

        if analysis.key_lengths:
            tbl = Table(
                title="Key Length Candidates (column IoC)",
                border_style="bright_cyan",
                header_style="bold bright_magenta",
                show_lines=False,
            )
            tbl.add_column("Length", justify="right", style="bold")
            tbl.add_column("Avg IoC", justify="right")
            tbl.add_column("vs English", justify="right")
            for candidate in analysis.key_lengths:
                style = "bright_green" if candidate.normalized >= 0.9 else ""
                tbl.add_row(
                    str(candidate.key_length),
                    f"{candidate.ioc:.4f}",
                    f"{candidate.normalized:.2f}",
                    style=style,
                )
            self._rich.print(tbl)
        else:
            self.console.warning("Need at least 20 letters to estimate the key length.")

        factors = analysis.kasiski.factor_counts[:8]
        if factors:
            self.console.table(
                "Kasiski Factor Votes",
                ["Factor", "Votes"],
                [(factor, votes) for factor, votes in factors],
            )

        if analysis.guessed_key:
            text = Text()
            text.append("Guessed key: ", style="bold")
            text.append(analysis.guessed_key, style="bold bright_green")
            text.append("\nPreview: ", style="bold")
            text.append(analysis.decrypted_preview)
            self._rich.print(Panel(text, title="Key Guess", border_style="bright_cyan"))

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _ranked_table(title: str, key_label: str, rows: list[tuple]) -> Table:
        tbl = Table(
            title=title,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("#", justify="right", style="dim")
        tbl.add_column(key_label, style="bold")
        tbl.add_column("Decrypted Text", overflow="fold")
        tbl.add_column("Score", justify="right")
        for rank, (key, text, score) in enumerate(rows, start=1):
            tbl.add_row(
                str(rank), Text(str(key)), Text(text), str(score),
                style="bright_green" if rank == 1 else "",
            )
        return tbl

    def _verdict_panel(self, verdict: CrackVerdict, best_text: str, key_label: str) -> None:
        colour = _VERDICT_COLOURS[verdict]
        text = Text()
        text.append(_VERDICT_LABELS[verdict], style=colour)
        if key_label:
            text.append(f"\n{key_label}", style="bold")
        if best_text and verdict != CrackVerdict.NO_SOLUTION:
            text.append(f"\n{best_text}")
        self._rich.print(Panel(text, title="Verdict", border_style=colour.split()[-1]))
