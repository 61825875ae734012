"""
Value objects passed through the message checking pipeline.

All of them are immutable and created fresh for every check.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Context:
    """
    A window of text around a candidate banned-word occurrence.

    ``original_context`` is what the user actually typed (diacritics removed);
    ``converted_context`` is the same span taken from the variant that matched.
    """

    banned_word: str
    original_context: str
    converted_context: str


@dataclass(frozen=True)
class SpellingCandidate:
    """A ranked suggestion returned by a spelling oracle."""

    word: str
    score: int = 0


@dataclass(frozen=True)
class MessageCheckerResult:
    is_flagged: bool
    contexts: tuple[Context, ...] = field(default_factory=tuple)

    @property
    def flagged_words(self) -> list[str]:
        """Distinct banned words that survived adjudication, in order."""
        return list(dict.fromkeys(c.banned_word for c in self.contexts))
