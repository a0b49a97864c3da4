"""
Built-in candidate keywords for the keyword-cipher dictionary attack.

``BUILTIN_KEYWORDS`` is always tried. ``OFFLINE_KEYWORDS`` is added when
the remote word list is unavailable.
"""

from __future__ import annotations

BUILTIN_KEYWORDS: tuple[str, ...] = (
    "SECRET", "CIPHER", "CODE", "KEYWORD", "PASSWORD", "HIDDEN", "MYSTERY",
    "PUZZLE", "ENIGMA", "SPY", "AGENT", "DETECTIVE", "TREASURE", "PIRATE",
    "DRAGON", "WIZARD", "MAGIC", "CASTLE", "KNIGHT", "PRINCESS", "ROBOT",
    "ROCKET", "PLANET", "GALAXY", "SPACE", "STAR", "MOON", "SUN", "OCEAN",
    "FOREST", "JUNGLE", "TIGER", "LION", "ELEPHANT", "MONKEY", "PENGUIN",
    "DOLPHIN", "UNICORN", "RAINBOW", "THUNDER", "LIGHTNING", "WINTER",
    "SUMMER", "AUTUMN", "SPRING", "FRIEND", "FAMILY", "SCHOOL", "TEACHER",
    "STUDENT", "COMPUTER", "KEYBOARD", "PYTHON", "JAVASCRIPT", "CODING",
    "CLUB", "KIDS", "PLAYGROUND", "FOOTBALL", "SOCCER", "BASEBALL",
    "BASKETBALL", "CHOCOLATE", "COOKIE", "PIZZA", "BANANA", "APPLE",
    "ORANGE", "CAESAR", "VIGENERE", "ATBASH", "MORSE", "PIGPEN", "ZEBRA",
    "QUEEN", "KING", "CROWN", "SHIELD", "SWORD", "ADVENTURE", "EXPLORER",
    "JOURNEY", "MAP", "COMPASS", "ISLAND", "VOLCANO", "DINOSAUR", "FOSSIL",
    "SECRET CODE", "HIDDEN TREASURE", "SECRET AGENT", "TOP SECRET",
    "KIDS CODE CLUB",
)

OFFLINE_KEYWORDS: tuple[str, ...] = (
    "ALPHA", "BRAVO", "CHARLIE", "DELTA", "ECHO", "FOXTROT", "GOLF", "HOTEL",
    "INDIA", "JULIET", "KILO", "LIMA", "MIKE", "NOVEMBER", "OSCAR", "PAPA",
    "QUEBEC", "ROMEO", "SIERRA", "TANGO", "UNIFORM", "VICTOR", "WHISKEY",
    "XRAY", "YANKEE", "ZULU", "CONFIDENTIAL", "CLASSIFIED", "COVERT",
    "CRYPTIC", "DECODE", "ENCODE", "MISSION", "SIGNAL", "STEALTH", "VAULT",
    "CLUE", "RIDDLE", "LOCK", "KEY",
)
