"""
Leet-speak and homoglyph substitution.

Produces alternate readings of a lowercase message where look-alike
characters have been swapped for the Latin letter they imitate, so that
"b4d" can be scanned as "bad". Every substitution is one character for one
character, which keeps offsets valid across all variants of a message.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, Sequence

logger = logging.getLogger(__name__)

# ── Unambiguous substitutions ────────────────────────────────────────────────
_COMMON: dict[str, str] = {
    "0": "o",
    "3": "e",
    "4": "a",
    "5": "s",
    "6": "g",
    "7": "t",
    "8": "b",
    "9": "g",
    "@": "a",
    "$": "s",
    "!": "i",
    "+": "t",
    "(": "c",
    "€": "e",
    "£": "l",
    "¢": "c",
    # Cyrillic / Greek homoglyphs survive NFD untouched
    "а": "a",
    "в": "b",
    "е": "e",
    "к": "k",
    "м": "m",
    "н": "h",
    "о": "o",
    "р": "p",
    "с": "c",
    "т": "t",
    "у": "y",
    "х": "x",
    "і": "i",
    "α": "a",
    "β": "b",
    "ε": "e",
    "ι": "i",
    "κ": "k",
    "ο": "o",
    "ρ": "p",
    "τ": "t",
    "υ": "u",
    "χ": "x",
}

# ── Ambiguous characters get one reading per table ───────────────────────────
_TABLES = tuple(
    MappingProxyType(str.maketrans({**_COMMON, **extra}))
    for extra in (
        {"1": "i", "|": "l"},
        {"1": "l", "|": "i"},
    )
)


class CharacterSubstitutor:
    """Generates de-obfuscated variants of lowercase text."""

    def __init__(self, tables: Sequence[Mapping[int, str]] = _TABLES) -> None:
        self._tables = tables

    def convert_text(self, text: str) -> list[str]:
        """
        Apply every substitution table to *text*.

        Returns the distinct variants that differ from *text*, in table
        order. Empty if nothing in *text* can be substituted.
        """
        variants: list[str] = []
        for table in self._tables:
            converted = text.translate(table)
            if converted != text and converted not in variants:
                variants.append(converted)

        if variants:
            logger.debug("Generated %d substitution variant(s)", len(variants))
        return variants
