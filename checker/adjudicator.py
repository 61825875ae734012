"""
Decides whether a candidate occurrence is a real banned word.

A banned word hiding inside a legitimate word ("ass" in "assassin") is
suppressed when the spelling oracle explains the surrounding text as a real
word. Contexts broken up by separators get a second chance: their pieces
are glued back together and checked once more.
"""

from __future__ import annotations

import asyncio
import logging
import re
from typing import Awaitable, Iterable, TypeVar

from checker.models import Context
from checker.oracle import SpellingOracle

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_SUGGESTIONS = 3

# Grammatically valid one-letter words
LEGAL_ONE_LETTER_WORDS: frozenset[str] = frozenset("aiuom")

_WORD_ONLY = re.compile(r"[a-z']+")


async def gather_or_cancel(aws: Iterable[Awaitable[T]]) -> list[T]:
    """
    Run *aws* concurrently and return their results in order.

    On the first failure the remaining tasks are cancelled and awaited
    before the exception propagates, so no query outlives the call.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


class Adjudicator:
    def __init__(
        self,
        oracle: SpellingOracle,
        *,
        max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
        legal_one_letter_words: frozenset[str] = LEGAL_ONE_LETTER_WORDS,
    ) -> None:
        self._oracle = oracle
        self.max_suggestions = max_suggestions
        self.legal_one_letter_words = legal_one_letter_words

    async def check_context(self, context: Context) -> Context | None:
        """Return *context* if it holds a banned word, ``None`` if it is innocent."""
        banned_word = context.banned_word
        converted = context.converted_context

        if _WORD_ONLY.fullmatch(converted):
            is_bad = await self.check_word(converted, banned_word)
            return context if is_bad else None

        words = _WORD_ONLY.findall(converted)
        if not words:
            is_bad = await self.check_word(converted, banned_word)
            return context if is_bad else None

        is_legit = all(
            len(word) > 1 or word in self.legal_one_letter_words for word in words
        )
        results = await gather_or_cancel(
            self.check_word(word, banned_word) for word in dict.fromkeys(words)
        )
        if any(results):
            is_legit = False

        if not is_legit:
            return context

        # A lone sub-word was already answered above
        if len(words) == 1:
            return None

        # Second chance: catch word breaks used to dodge the split above
        joined = "".join(words)
        if await self.check_word(joined, banned_word):
            logger.debug("Second chance flagged %r as %r", converted, banned_word)
            return context
        return None

    async def check_word(self, candidate: str, banned_word: str) -> bool:
        """
        Check a single *candidate* token against *banned_word*.

        True when the candidate is the banned word, is unknown to the oracle,
        or cannot be explained by one of the top suggestions. Typos will be
        flagged too.
        """
        if candidate == banned_word:
            return True

        suggestions = await self._oracle.query(candidate)
        if not suggestions:
            return True

        explained = False
        for suggestion in suggestions[: self.max_suggestions]:
            if suggestion.word == banned_word:
                return True
            if suggestion.word in candidate:
                explained = True

        return not explained
