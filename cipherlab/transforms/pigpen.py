"""
Pigpen Cipher
=============

Replaces each letter with the outline of its cell in one of four grids:

- ``A``-``I``: tic-tac-toe grid
- ``J``-``R``: tic-tac-toe grid with a dot
- ``S``-``V``: X grid
- ``W``-``Z``: X grid with a dot

Symbols are rendered with box-drawing characters; the dot is a trailing
``"."``. Encrypted output is space separated, one token per input
character.
"""

from __future__ import annotations

_GRID = ("┘", "┴", "└", "┤", "┼", "├", "┐", "┬", "┌")
_X_GRID = ("V", ">", "<", "^")

PIGPEN_MAPPING: dict[str, str] = {}
for _i, _symbol in enumerate(_GRID):
    PIGPEN_MAPPING[chr(ord("A") + _i)] = _symbol
    PIGPEN_MAPPING[chr(ord("J") + _i)] = _symbol + "."
for _i, _symbol in enumerate(_X_GRID):
    PIGPEN_MAPPING[chr(ord("S") + _i)] = _symbol
    PIGPEN_MAPPING[chr(ord("W") + _i)] = _symbol + "."

REVERSE_PIGPEN_MAPPING: dict[str, str] = {v: k for k, v in PIGPEN_MAPPING.items()}

# Longest symbols first so "└." is not read as "└" followed by "."
_SYMBOLS_BY_LENGTH = sorted(REVERSE_PIGPEN_MAPPING, key=len, reverse=True)


def pigpen_encrypt(text: str) -> str:
    """Turn *text* into space-separated pigpen symbols.

    Characters without a symbol are emitted as-is, so a space in the
    message shows up as three spaces in the output::

        >>> pigpen_encrypt("HI YOU")
        '┬ ┌   <. ├. <'
    """
    return " ".join(PIGPEN_MAPPING.get(char, char) for char in text.upper())


def pigpen_decrypt(text: str) -> str:
    """Turn space-separated pigpen symbols back into letters.

    Unknown tokens are scanned for embedded symbols; anything that is not
    a symbol is kept. Word spacing is not recoverable.
    """
    out: list[str] = []
    for token in text.split(" "):
        if not token:
            continue
        letter = REVERSE_PIGPEN_MAPPING.get(token)
        if letter is not None:
            out.append(letter)
        else:
            out.append(_decode_run(token))
    return "".join(out)


def pigpen_cipher(text: str, decrypt: bool = False) -> str:
    """Dispatch to :func:`pigpen_encrypt` or :func:`pigpen_decrypt`."""
    return pigpen_decrypt(text) if decrypt else pigpen_encrypt(text)


def _decode_run(token: str) -> str:
    pos = 0
    out: list[str] = []
    while pos < len(token):
        for symbol in _SYMBOLS_BY_LENGTH:
            if token.startswith(symbol, pos):
                out.append(REVERSE_PIGPEN_MAPPING[symbol])
                pos += len(symbol)
                break
        else:
            out.append(token[pos])
            pos += 1
    return "".join(out)
