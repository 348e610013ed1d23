"""Toggle lookup for Toggler.

Finds the word that follows a given word in its toggle group and carries
the input's casing style over to it.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum, auto


class CasingStyle(Enum):
    LOWER = auto()
    UPPER = auto()
    CAPITALIZED = auto()
    VERBATIM = auto()


def capitalize(word: str) -> str:
    """Uppercase the first character and leave the rest untouched.

    Unlike str.capitalize(), the remainder is not lowercased.
    """
    return word[:1].upper() + word[1:]


def detect_casing(word: str, entry: str) -> CasingStyle:
    """Infer how `word` is cased relative to the stored `entry`.

    Lowercase is checked first so single-character words come back lowercase.
    """
    if word == entry.lower():
        return CasingStyle.LOWER
    if word == entry.upper():
        return CasingStyle.UPPER
    if word == capitalize(entry):
        return CasingStyle.CAPITALIZED
    return CasingStyle.VERBATIM


def apply_casing(style: CasingStyle, word: str) -> str:
    if style is CasingStyle.LOWER:
        return word.lower()
    if style is CasingStyle.UPPER:
        return word.upper()
    if style is CasingStyle.CAPITALIZED:
        return capitalize(word)
    return word


def resolve(word: str, configuration: Sequence[Sequence[str]]) -> str | None:
    """Return the next toggle for `word`, or None if no group contains it.

    Args:
        word: The word to toggle, in whatever casing the user typed it.
        configuration: Ordered toggle groups. The first group containing the
            word (case-insensitively) wins.

    Returns:
        The successor entry with the input's casing applied, or None.
    """
    needle = word.lower()
    for group in configuration:
        for index, entry in enumerate(group):
            if entry.lower() != needle:
                continue
            successor = group[(index + 1) % len(group)]
            return apply_casing(detect_casing(word, entry), successor)
    return None
