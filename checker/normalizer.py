"""Text normalization shared by every matching strategy."""

from __future__ import annotations

import unicodedata


def strip_diacritics(text: str) -> str:
    """Decompose *text* (NFD) and drop the combining marks. Case is kept."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_text(text: str) -> str:
    """Canonical lowercase form without diacritics, the basis for matching."""
    return strip_diacritics(text).lower()
