"""
Morse Code
==========

International Morse code table lookup. Letters are separated by a single
space and words by ``"/"``.
"""

from __future__ import annotations

MORSE_CODE_MAPPING: dict[str, str] = {
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".",
    "F": "..-.", "G": "--.", "H": "....", "I": "..", "J": ".---",
    "K": "-.-", "L": ".-..", "M": "--", "N": "-.", "O": "---",
    "P": ".--.", "Q": "--.-", "R": ".-.", "S": "...", "T": "-",
    "U": "..-", "V": "...-", "W": ".--", "X": "-..-", "Y": "-.--",
    "Z": "--..",
    "0": "-----", "1": ".----", "2": "..---", "3": "...--", "4": "....-",
    "5": ".....", "6": "-....", "7": "--...", "8": "---..", "9": "----.",
    ".": ".-.-.-", ",": "--..--", "?": "..--..", "!": "-.-.--",
    "'": ".----.", "/": "-..-.", "(": "-.--.", ")": "-.--.-",
    "&": ".-...", ":": "---...", ";": "-.-.-.", "=": "-...-",
    "+": ".-.-.", "-": "-....-", "\"": ".-..-.", "@": ".--.-.",
    " ": "/",
}

REVERSE_MORSE_MAPPING: dict[str, str] = {
    code: char for char, code in MORSE_CODE_MAPPING.items() if char != " "
}


def morse_encode(text: str) -> str:
    """Encode *text* as Morse code.

    Characters without a Morse code are passed through verbatim::

        >>> morse_encode("SOS")
        '... --- ...'
        >>> morse_encode("HI YOU")
        '.... .. / -.-- --- ..-'
    """
    return " ".join(MORSE_CODE_MAPPING.get(char, char) for char in text.upper())


def morse_decode(text: str) -> str:
    """Decode Morse code back to text.

    ``"/"`` becomes a space; unknown patterns are kept as-is.
    """
    out: list[str] = []
    for token in text.split():
        if token == "/":
            out.append(" ")
        else:
            out.append(REVERSE_MORSE_MAPPING.get(token, token))
    return "".join(out)


def morse_code(text: str, decode: bool = False) -> str:
    """Dispatch to :func:`morse_encode` or :func:`morse_decode`."""
    return morse_decode(text) if decode else morse_encode(text)
