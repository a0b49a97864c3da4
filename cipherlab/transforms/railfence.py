"""
Rail Fence Transposition
========================

Writes the message in a zigzag across ``rails`` rows and reads it off
row by row. Every character (spaces and punctuation included) takes
part in the zigzag, so decryption restores the text exactly.
"""

from __future__ import annotations


def rail_pattern(length: int, rails: int) -> list[int]:
    """Return the rail index visited by each of *length* positions.

    Example::

        >>> rail_pattern(7, 3)
        [0, 1, 2, 1, 0, 1, 2]
    """
    if rails < 2:
        return [0] * length
    pattern: list[int] = []
    rail, step = 0, 1
    for _ in range(length):
        pattern.append(rail)
        if rail == 0:
            step = 1
        elif rail == rails - 1:
            step = -1
        rail += step
    return pattern


def rail_fence_cipher(text: str, rails: int, decrypt: bool = False) -> str:
    """Encrypt or decrypt the uppercased *text* with *rails* rows.

    With fewer than two rails, or at least as many rails as characters,
    the zigzag is a no-op and the uppercased text is returned.

    Example::

        >>> rail_fence_cipher("WEAREDISCOVERED", 3)
        'WECRERDSOEEAIVD'
    """
    message = text.upper()
    if rails < 2 or rails >= len(message):
        return message

    pattern = rail_pattern(len(message), rails)
    order = sorted(range(len(message)), key=lambda i: (pattern[i], i))

    if not decrypt:
        return "".join(message[i] for i in order)

    out = [""] * len(message)
    for source_pos, target_pos in enumerate(order):
        out[target_pos] = message[source_pos]
    return "".join(out)
