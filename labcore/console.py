"""
CipherLab Console Interface
============================

Thin presentation layer over :class:`rich.console.Console` used by the
CLI: the start-up banner, section rules, one-line status messages,
tables and a spinner for the slower attacks.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Optional, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_LAB_THEME = Theme(
    {
        "lab.banner": "bold bright_cyan",
        "lab.section": "bold bright_magenta",
        "lab.success": "bold green",
        "lab.warning": "bold yellow",
        "lab.error": "bold red",
        "lab.info": "bold bright_blue",
        "lab.dim": "dim white",
        "lab.highlight": "bold bright_white",
    }
)

_BANNER_ART = r"""
   ___ _      _             _         _
  / __(_)_ __| |_  ___ _ _| |   __ _| |__
 | (__| | '_ \ ' \/ -_) '_| |__/ _` | '_ \
  \___|_| .__/_||_\___|_| |____\__,_|_.__/
        |_|"""

_TAGLINE = "Kids Code Club -- Classical Cipher Lab"

# style, icon, label
_MESSAGE_KINDS: dict[str, tuple[str, str, str]] = {
    "success": ("lab.success", "✔", "SUCCESS"),
    "warning": ("lab.warning", "⚠", "WARNING"),
    "error": ("lab.error", "✘", "ERROR"),
    "info": ("lab.info", "ℹ", "INFO"),
}


class LabConsole:
    """Console used by every CipherLab command.

    With ``quiet=True`` nothing is printed, which is how ``--quiet`` and
    JSON output keep stdout clean.

    Usage::

        con = LabConsole()
        con.banner("1.0.0")
        con.section("Keyword Cipher Crack")
        con.success("Message cracked!")
    """

    def __init__(self, *, quiet: bool = False) -> None:
        self._console = Console(theme=_LAB_THEME, quiet=quiet, highlight=False)

    @property
    def rich(self) -> Console:
        """The wrapped Rich console, for renderables this class has no helper for."""
        return self._console

    def banner(self, version: str = "1.0.0") -> None:
        art = Text(_BANNER_ART, style="lab.banner")
        art.append(f"\n\n{_TAGLINE}", style="lab.highlight")
        art.append(f"\nVersion: {version}", style="lab.dim")
        self._console.print(
            Panel(Align.center(art), border_style="bright_cyan", padding=(0, 2))
        )

    def section(self, title: str) -> None:
        self._console.rule(f"  {title}  ", style="lab.section")
        self._console.print()

    def _message(self, kind: str, message: str) -> None:
        style, icon, label = _MESSAGE_KINDS[kind]
        self._console.print(f"[{style}][{icon}] {label}:[/{style}] {message}")

    def success(self, message: str) -> None:
        self._message("success", message)

    def warning(self, message: str) -> None:
        self._message("warning", message)

    def error(self, message: str) -> None:
        self._message("error", message)

    def info(self, message: str) -> None:
        self._message("info", message)

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: Optional[str] = None,
        styles: Optional[Sequence[str]] = None,
    ) -> None:
        """Print a table; cells are converted with ``str()``.

        *styles* gives a Rich style per column and may be shorter than
        *columns*.
        """
        table = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        column_styles = list(styles or ())
        for idx, name in enumerate(columns):
            table.add_column(name, style=column_styles[idx] if idx < len(column_styles) else "")
        for row in rows:
            table.add_row(*(str(cell) for cell in row))
        self._console.print(table)

    @contextmanager
    def status(self, message: str = "Working...") -> Iterator[Any]:
        """Show a spinner while the block runs."""
        with self._console.status(
            f"[lab.info]{message}[/lab.info]", spinner="dots", spinner_style="bright_cyan"
        ) as status:
            yield status
