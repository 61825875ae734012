"""
Entry point of the banned-word detection pipeline.

  normalize → build variants → naive + tolerant scan → collect contexts
  → deduplicate → adjudicate concurrently → verdict
"""

from __future__ import annotations

import logging
from typing import Sequence

from checker.adjudicator import DEFAULT_MAX_SUGGESTIONS, Adjudicator, gather_or_cancel
from checker.models import Context, MessageCheckerResult
from checker.normalizer import normalize_text, strip_diacritics
from checker.oracle import SpellingOracle
from checker.parsers import (
    DEFAULT_CONTEXT_RADIUS,
    DEFAULT_MAX_INTERLEAVED,
    ComplexMessageParser,
    NaiveMessageParser,
)
from checker.substitutor import CharacterSubstitutor

logger = logging.getLogger(__name__)


class MessageChecker:
    """
    Checks messages for banned words, disguised or not.

    Holds no per-message state, so one instance can serve any number of
    concurrent checks.
    """

    def __init__(
        self,
        oracle: SpellingOracle,
        *,
        max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
        max_interleaved: int = DEFAULT_MAX_INTERLEAVED,
        context_radius: int = DEFAULT_CONTEXT_RADIUS,
        substitutor: CharacterSubstitutor | None = None,
    ) -> None:
        self._adjudicator = Adjudicator(oracle, max_suggestions=max_suggestions)
        self._substitutor = substitutor or CharacterSubstitutor()
        self.max_interleaved = max_interleaved
        self.context_radius = context_radius

    async def check_message(
        self, content: str, banned_words: Sequence[str]
    ) -> MessageCheckerResult:
        """
        Check *content* against *banned_words*.

        Raises ``OracleUnavailable`` if any spelling lookup fails; no partial
        result is returned in that case.
        """
        if not content or not banned_words:
            return MessageCheckerResult(is_flagged=False)

        contexts = self.collect_contexts(content, banned_words)
        if not contexts:
            return MessageCheckerResult(is_flagged=False)

        logger.debug("Adjudicating %d candidate context(s)", len(contexts))
        results = await gather_or_cancel(
            self._adjudicator.check_context(context) for context in contexts
        )
        flagged = tuple(result for result in results if result is not None)
        return MessageCheckerResult(is_flagged=bool(flagged), contexts=flagged)

    def collect_contexts(self, content: str, banned_words: Sequence[str]) -> list[Context]:
        """Scan every variant of *content*; deduplicated, in discovery order."""
        original = strip_diacritics(content)
        lowered = normalize_text(content)
        variants = [lowered, *self._substitutor.convert_text(lowered)]

        naive_parser = NaiveMessageParser(self.context_radius)
        complex_parser = ComplexMessageParser(
            self.max_interleaved, self.context_radius
        ).process_banned_words(banned_words)

        found: list[Context] = []
        for variant in variants:
            naive_parser.check_for_banned_words(
                variant, banned_words
            ).get_context_of_banned_word(original, variant, found)
            complex_parser.get_context_of_banned_word(original, variant, found)

        return list(dict.fromkeys(found))
