"""
Shared test fixtures.

Settings are read from the environment, so the required variables are set
before any project module is imported.
"""

import os
import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

os.environ.setdefault("DISCORD_TOKEN", "test-token")
os.environ.setdefault("REPORT_CHANNEL_ID", "424242")
os.environ.setdefault("CHECK_TIMEOUT", "2")

from checker.message_checker import MessageChecker  # noqa: E402
from checker.models import SpellingCandidate  # noqa: E402
from checker.oracle import OracleUnavailable  # noqa: E402


class StubOracle:
    """
    Deterministic spelling oracle.

    Answers from a word → suggestions mapping (unknown words get no
    suggestions) and records every query it receives.
    """

    def __init__(self, answers=None, failing=()):
        self.answers = {
            word: [SpellingCandidate(word=s) for s in suggestions]
            for word, suggestions in (answers or {}).items()
        }
        self.failing = set(failing)
        self.calls = []

    async def query(self, word):
        self.calls.append(word)
        if word in self.failing:
            raise OracleUnavailable(word, "stubbed failure")
        return list(self.answers.get(word, []))


@pytest.fixture
def make_oracle():
    """Factory for StubOracle instances."""
    return StubOracle


@pytest.fixture
def oracle():
    """An oracle that knows no words."""
    return StubOracle()


@pytest.fixture
def make_checker():
    """Build a MessageChecker around a given oracle."""
    def _make(oracle, **kwargs):
        return MessageChecker(oracle, **kwargs)
    return _make
