"""
Banned-word list loading.

Words come from settings first, then from a plain text file with one word per
line (blank lines and ``#`` comments are ignored). The result is lowercase,
deduplicated and keeps first-seen order.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)


def load_banned_words(path: Path, extra: Iterable[str] = ()) -> list[str]:
    """Return the ordered, distinct banned words from *extra* and *path*."""
    words: dict[str, None] = {}
    for word in extra:
        word = word.strip().lower()
        if word:
            words[word] = None

    if not path.exists():
        logger.info("No banned word file found at %s — using configured words only.", path)
        return list(words)

    with open(path, encoding="utf-8") as f:
        for line in f:
            word = line.strip().lower()
            if word and not word.startswith("#"):
                words[word] = None
    logger.info("Loaded %d banned words (file: %s).", len(words), path)
    return list(words)
