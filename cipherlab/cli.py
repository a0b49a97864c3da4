"""
CipherLab CLI
==============

Click-based command-line interface for CipherLab. Provides subcommands
for encrypting and decrypting with the classical ciphers, the keyword
dictionary attack, Caesar and Rail Fence brute force, and Vigenère
key-length analysis.

Usage::

    python -m cipherlab encrypt "HELLO WORLD" --cipher keyword --key SECRET
    python -m cipherlab decrypt "RIJVS" --cipher vigenere --key KEY
    python -m cipherlab crack-keyword "DTIIL WLOIR" --offline
    python -m cipherlab crack-caesar "KHOOR ZRUOG"
    python -m cipherlab crack-railfence "WECRERDSOEEAIVD"
    python -m cipherlab vigenere-keylength "LXFOPVEFRNHR..."

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import asyncio
from contextlib import nullcontext
from pathlib import Path
from typing import Optional, Union

import click
from rich.markup import escape

from labcore.config import LabConfig
from labcore.console import LabConsole
from labcore.models import LabResult

from cipherlab import __version__
from cipherlab.core.engine import CipherLabEngine
from cipherlab.core.exceptions import CipherLabError
from cipherlab.core.models import CipherName
from cipherlab.output.console import CipherLabConsoleOutput
from cipherlab.output.report import CipherLabReportGenerator
from cipherlab.wordlists.sources import StaticKeywordSource, offline_source


# ===================================================================== #
#  Async Runner Helper
# ===================================================================== #

def _run_async(coro):
    """Run an async coroutine from synchronous Click handlers."""
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        loop = None

    if loop and loop.is_running():
        # Already in an async context (shouldn't happen from CLI)
        import concurrent.futures
        with concurrent.futures.ThreadPoolExecutor() as pool:
            future = pool.submit(asyncio.run, coro)
            return future.result()
    else:
        return asyncio.run(coro)


def _fail(ctx: click.Context, exc: Union[Exception, str]) -> None:
    """Report *exc* to the user and exit with status 1."""
    console: Optional[LabConsole] = ctx.obj.get("console")
    if console is not None and not ctx.obj.get("quiet"):
        console.error(escape(str(exc)))
    else:
        click.echo(f"Error: {exc}", err=True)
    ctx.exit(1)


def _load_wordlist(path: str) -> list[str]:
    """Read one keyword per line, skipping blanks and ``#`` comments."""
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    return [line for line in lines if line.strip() and not line.lstrip().startswith("#")]


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to CipherLab configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path (for JSON output).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner, tables and log messages.",
)
@click.option(
    "--alphabet", "-a",
    default=None,
    help="Override the cipher alphabet (default A-Z).",
)
@click.version_option(__version__, prog_name="cipherlab")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    output_file: Optional[str],
    quiet: bool,
    alphabet: Optional[str],
) -> None:
    """CipherLab -- Kids Code Club Classical Cipher Lab.

    Encrypt and decrypt secret messages, then try to crack them.
    """
    ctx.ensure_object(dict)

    lab_config = LabConfig.load(config) if config else LabConfig()
    if alphabet:
        lab_config.cipherlab.alphabet = alphabet
    if quiet:
        lab_config.global_settings.log_level = "ERROR"

    console = LabConsole(quiet=quiet)
    ctx.obj["config"] = lab_config
    ctx.obj["output_format"] = output
    ctx.obj["output_file"] = output_file
    ctx.obj["quiet"] = quiet
    ctx.obj["console"] = console

    try:
        ctx.obj["engine"] = CipherLabEngine(lab_config)
    except CipherLabError as exc:
        _fail(ctx, exc)
    ctx.obj["display"] = CipherLabConsoleOutput(console)
    ctx.obj["reporter"] = CipherLabReportGenerator()

    if not quiet and output == "console":
        console.banner(version=__version__)


def _handle_output(ctx: click.Context, result: LabResult) -> None:
    """Handle output based on the selected format.

    Args:
        ctx: Click context containing configuration.
        result: LabResult to output.
    """
    output_file = ctx.obj["output_file"]
    reporter: CipherLabReportGenerator = ctx.obj["reporter"]
    console: LabConsole = ctx.obj["console"]

    if ctx.obj["output_format"] == "json":
        if output_file:
            path = reporter.generate_json(result, Path(output_file))
            console.success(f"JSON report saved to: {path}")
        else:
            click.echo(reporter.to_json(result))
    else:
        display: CipherLabConsoleOutput = ctx.obj["display"]
        display.display_result(result)


# ===================================================================== #
#  Transforms
# ===================================================================== #

_CIPHER_CHOICE = click.Choice([c.value for c in CipherName], case_sensitive=False)


def _transform(
    ctx: click.Context, cipher: str, text: str, key: Optional[str], decrypt: bool
) -> None:
    engine: CipherLabEngine = ctx.obj["engine"]
    try:
        output = engine.transform(cipher, text, key=key, decrypt=decrypt)
    except CipherLabError as exc:
        _fail(ctx, exc)
        return

    if ctx.obj["output_format"] == "json":
        result = LabResult(
            tool_name="decrypt" if decrypt else "encrypt",
            target=text,
            metadata={
                "cipher": cipher.lower(),
                "key": key,
                "decrypt": decrypt,
                "output": output,
            },
        ).finalize(output)
        _handle_output(ctx, result)
    elif ctx.obj["quiet"]:
        click.echo(output)
    else:
        display: CipherLabConsoleOutput = ctx.obj["display"]
        display.display_transform(cipher, decrypt, text, output)


@cli.command()
@click.argument("text")
@click.option("--cipher", "-C", type=_CIPHER_CHOICE, required=True, help="Cipher to use.")
@click.option("--key", "-k", default=None, help="Shift, rail count or keyword.")
@click.pass_context
def encrypt(ctx: click.Context, text: str, cipher: str, key: Optional[str]) -> None:
    """Encrypt TEXT with the chosen cipher."""
    _transform(ctx, cipher, text, key, decrypt=False)


@cli.command()
@click.argument("text")
@click.option("--cipher", "-C", type=_CIPHER_CHOICE, required=True, help="Cipher to use.")
@click.option("--key", "-k", default=None, help="Shift, rail count or keyword.")
@click.pass_context
def decrypt(ctx: click.Context, text: str, cipher: str, key: Optional[str]) -> None:
    """Decrypt TEXT with the chosen cipher."""
    _transform(ctx, cipher, text, key, decrypt=True)


# ===================================================================== #
#  Attacks
# ===================================================================== #

@cli.command("crack-keyword")
@click.argument("ciphertext")
@click.option(
    "--offline",
    is_flag=True,
    default=False,
    help="Never contact the remote word list.",
)
@click.option(
    "--wait",
    is_flag=True,
    default=False,
    help=(
        "Fetch the remote word list first (up to the configured timeout). "
        "Without it the built-in and offline lists are used."
    ),
)
@click.option(
    "--wordlist", "-w",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="File with one candidate keyword per line (replaces the built-in lists).",
)
@click.pass_context
def crack_keyword(
    ctx: click.Context,
    ciphertext: str,
    offline: bool,
    wait: bool,
    wordlist: Optional[str],
) -> None:
    """Crack a keyword cipher with a dictionary attack.

    Every candidate keyword is tried and the decryptions are ranked by
    how much they look like English.
    """
    engine: CipherLabEngine = ctx.obj["engine"]
    console: LabConsole = ctx.obj["console"]

    if wordlist:
        try:
            words = _load_wordlist(wordlist)
        except (OSError, UnicodeDecodeError) as exc:
            _fail(ctx, f"Cannot read word list {wordlist}: {exc}")
            return
        engine.keyword_source = StaticKeywordSource(words, label="file")
    elif offline:
        engine.keyword_source = offline_source()

    status = (
        console.status("Trying keywords...")
        if ctx.obj["output_format"] == "console"
        else nullcontext()
    )
    try:
        with status:
            result = _run_async(engine.crack_keyword(ciphertext, wait_for_remote=wait))
    except CipherLabError as exc:
        _fail(ctx, exc)
        return
    _handle_output(ctx, result)


@cli.command("crack-caesar")
@click.argument("ciphertext")
@click.pass_context
def crack_caesar(ctx: click.Context, ciphertext: str) -> None:
    """Try every Caesar shift and rank the results."""
    engine: CipherLabEngine = ctx.obj["engine"]
    result = _run_async(engine.crack_caesar(ciphertext))
    _handle_output(ctx, result)


@cli.command("crack-railfence")
@click.argument("ciphertext")
@click.option("--min-rails", type=click.IntRange(min=2), default=None, help="Fewest rails to try.")
@click.option("--max-rails", type=click.IntRange(min=2), default=None, help="Most rails to try.")
@click.pass_context
def crack_railfence(
    ctx: click.Context,
    ciphertext: str,
    min_rails: Optional[int],
    max_rails: Optional[int],
) -> None:
    """Try every rail count in a range and rank the results."""
    engine: CipherLabEngine = ctx.obj["engine"]
    settings = engine.config.cipherlab
    if min_rails is not None:
        settings.rail_min = min_rails
    if max_rails is not None:
        settings.rail_max = max_rails
    result = _run_async(engine.crack_rail_fence(ciphertext))
    _handle_output(ctx, result)


@cli.command("vigenere-keylength")
@click.argument("ciphertext")
@click.pass_context
def vigenere_keylength(ctx: click.Context, ciphertext: str) -> None:
    """Estimate the key length of a Vigenère ciphertext and guess the key.

    Uses the column Index of Coincidence and Kasiski examination.
    At least 20 letters are needed.
    """
    engine: CipherLabEngine = ctx.obj["engine"]
    result = _run_async(engine.analyze_vigenere(ciphertext))
    _handle_output(ctx, result)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the CipherLab CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
