"""
Spelling oracle used to tell real banned words from innocent look-alikes.

The checker only depends on the ``SpellingOracle`` protocol. ``DatamuseOracle``
is the production adapter backed by the Datamuse "spelled like" endpoint:

  GET {base_url}/words?sp=<word>&max=<n>  → [{"word": ..., "score": ...}, ...]
"""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

import aiohttp

from checker.models import SpellingCandidate

logger = logging.getLogger(__name__)

DATAMUSE_URL = "https://api.datamuse.com"


class OracleUnavailable(Exception):
    """The spelling oracle failed or timed out for a query."""

    def __init__(self, word: str, reason: str) -> None:
        super().__init__(f"Spelling lookup for {word!r} failed: {reason}")
        self.word = word
        self.reason = reason


class SpellingOracle(Protocol):
    async def query(self, word: str) -> list[SpellingCandidate]:
        """Return legitimate-word suggestions for *word*, best first."""
        ...


class DatamuseOracle:
    """
    Datamuse-backed spelling oracle.

    Pass a long-lived ``aiohttp.ClientSession`` to reuse connections across
    queries; without one, every query opens and closes its own session.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        *,
        base_url: str = DATAMUSE_URL,
        timeout: float = 5.0,
        max_results: int = 10,
    ) -> None:
        self._session = session
        self._url = base_url.rstrip("/") + "/words"
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._max_results = max_results

    async def query(self, word: str) -> list[SpellingCandidate]:
        logger.debug("Querying Datamuse for %r", word)
        try:
            if self._session is not None:
                payload = await self._fetch(self._session, word)
            else:
                async with aiohttp.ClientSession() as session:
                    payload = await self._fetch(session, word)
        except asyncio.TimeoutError as e:
            raise OracleUnavailable(word, "request timed out") from e
        except aiohttp.ClientError as e:
            raise OracleUnavailable(word, str(e) or type(e).__name__) from e
        except ValueError as e:
            raise OracleUnavailable(word, "invalid JSON response") from e

        if not isinstance(payload, list):
            raise OracleUnavailable(word, "unexpected response payload")

        candidates: list[SpellingCandidate] = []
        for entry in payload:
            if not isinstance(entry, dict) or "word" not in entry:
                raise OracleUnavailable(word, "unexpected response payload")
            candidates.append(
                SpellingCandidate(word=str(entry["word"]), score=entry.get("score", 0))
            )
        return candidates

    async def _fetch(self, session: aiohttp.ClientSession, word: str) -> object:
        async with session.get(
            self._url,
            params={"sp": word, "max": str(self._max_results)},
            timeout=self._timeout,
        ) as resp:
            if resp.status != 200:
                raise OracleUnavailable(word, f"HTTP {resp.status}")
            return await resp.json(content_type=None)
