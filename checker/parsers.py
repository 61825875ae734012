"""
Banned-word scanners.

Two complementary strategies:
  - NaiveMessageParser   : literal substring search
  - ComplexMessageParser : tolerant regex that survives repeated letters and
                           separators slipped between letters ("b.a.d", "b a d")

Both append ``Context`` values to a caller-owned list and never deduplicate.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from checker.models import Context

logger = logging.getLogger(__name__)

DEFAULT_CONTEXT_RADIUS = 20
DEFAULT_MAX_INTERLEAVED = 1


def context_bounds(text: str, start: int, end: int, radius: int) -> tuple[int, int]:
    """
    Widen ``[start, end)`` to the enclosing whitespace-delimited token.

    Grows at most *radius* characters on either side and never past the
    text boundaries.
    """
    left = start
    limit = max(0, start - radius)
    while left > limit and not text[left - 1].isspace():
        left -= 1

    right = end
    limit = min(len(text), end + radius)
    while right < limit and not text[right].isspace():
        right += 1

    return left, right


def _make_context(
    banned_word: str,
    original_text: str,
    converted_text: str,
    start: int,
    end: int,
    radius: int,
) -> Context:
    left, right = context_bounds(converted_text, start, end, radius)
    return Context(
        banned_word=banned_word,
        original_context=original_text[left:right],
        converted_context=converted_text[left:right],
    )


class NaiveMessageParser:
    """Finds exact occurrences of each banned word."""

    def __init__(self, context_radius: int = DEFAULT_CONTEXT_RADIUS) -> None:
        self.context_radius = context_radius
        self._matches: list[tuple[str, int, int]] = []

    def check_for_banned_words(
        self, text: str, banned_words: Iterable[str]
    ) -> NaiveMessageParser:
        """Record every (word, start, end) occurrence, overlaps included."""
        self._matches = []
        for word in banned_words:
            if not word:
                continue
            idx = text.find(word)
            while idx != -1:
                self._matches.append((word, idx, idx + len(word)))
                idx = text.find(word, idx + 1)
        return self

    def get_context_of_banned_word(
        self, original_text: str, converted_text: str, sink: list[Context]
    ) -> None:
        for word, start, end in self._matches:
            sink.append(
                _make_context(
                    word, original_text, converted_text, start, end, self.context_radius
                )
            )


class ComplexMessageParser:
    """
    Finds banned words whose letters were padded or split apart.

    Each letter may repeat and up to ``max_interleaved`` non-letter
    characters may sit between consecutive letters. Repeats are lazy so a
    match stops at the first complete spelling instead of borrowing letters
    from the next word ("glass shelf" yields "ass", not "ass s").
    """

    def __init__(
        self,
        max_interleaved: int = DEFAULT_MAX_INTERLEAVED,
        context_radius: int = DEFAULT_CONTEXT_RADIUS,
    ) -> None:
        self.max_interleaved = max_interleaved
        self.context_radius = context_radius
        self._patterns: list[tuple[str, re.Pattern[str]]] = []

    def process_banned_words(self, banned_words: Iterable[str]) -> ComplexMessageParser:
        """Compile one tolerant matcher per banned word."""
        gap = f"[^a-z]{{0,{self.max_interleaved}}}"
        self._patterns = []
        for word in banned_words:
            if not word:
                continue
            body = gap.join(f"{re.escape(ch)}+?" for ch in word)
            self._patterns.append((word, re.compile(body)))
        logger.debug("Compiled %d tolerant matcher(s)", len(self._patterns))
        return self

    def get_context_of_banned_word(
        self, original_text: str, converted_text: str, sink: list[Context]
    ) -> None:
        for word, pattern in self._patterns:
            for match in pattern.finditer(converted_text):
                sink.append(
                    _make_context(
                        word,
                        original_text,
                        converted_text,
                        match.start(),
                        match.end(),
                        self.context_radius,
                    )
                )
