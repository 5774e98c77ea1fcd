"""A plain Caesar substitution cipher over a caller supplied alphabet.

Has no ties to the RSA machinery, kept around for side-by-side demonstrations.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from collections.abc import Sequence

LATIN_ALPHABET: tuple[str, ...] = tuple("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
DANISH_ALPHABET: tuple[str, ...] = LATIN_ALPHABET + ("Æ", "Ø", "Å")


def caesar_shift(message: str, shift: int, alphabet: Sequence[str] = LATIN_ALPHABET) -> str:
    """Performs a Caesar shift on a given string.

    Spaces are dropped, every other symbol is replaced by the one `shift` positions later in `alphabet`.

    Args:
        message: The string to encrypt.
        shift: The shift value. Negative values shift backwards, so they decrypt.
        alphabet: The ordered symbols to shift over.

    Returns:
        The shifted string.

    Raises:
        ValueError: If the message holds a symbol missing from the alphabet.
    """
    if not alphabet:
        raise ValueError("Alphabet must not be empty.")
    positions = {sym: pos for pos, sym in enumerate(alphabet)}
    result = []
    for sym in message:
        if sym == " ":
            continue
        if sym not in positions:
            raise ValueError(f"Symbol {sym!r} is not part of the alphabet.")
        result.append(alphabet[(positions[sym] + shift) % len(alphabet)])
    return "".join(result)
