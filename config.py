"""
Secure configuration management using pydantic-settings.

All secrets and config are loaded from environment variables / .env file.
The application will fail fast at startup if any required variable is missing.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_PROJECT_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Application settings — loaded from .env and validated at startup."""

    model_config = SettingsConfigDict(
        env_file=str(_PROJECT_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Discord ──────────────────────────────────────────────────────────
    discord_token: str = Field(..., description="Discord bot token")
    report_channel_id: int = Field(
        0, description="Channel ID for flagged-message reports (0 to disable)"
    )

    # ── Banned words ─────────────────────────────────────────────────────
    banned_words: list[str] = Field(
        default_factory=list,
        description="Banned words (JSON list), merged ahead of the file",
    )
    banned_words_file: Path = Field(
        _PROJECT_DIR / "banned_words.txt",
        description="File with one banned word per line",
    )

    # ── Message checker ──────────────────────────────────────────────────
    datamuse_url: str = Field(
        "https://api.datamuse.com", description="Base URL of the Datamuse API"
    )
    oracle_timeout: float = Field(5.0, description="Per-query spelling lookup timeout (s)")
    check_timeout: float = Field(15.0, description="Deadline for checking one message (s)")
    max_suggestions: int = Field(3, description="Top spelling suggestions consulted")
    max_interleaved: int = Field(
        1, description="Separators tolerated between letters of a banned word"
    )
    context_radius: int = Field(
        20, description="Max characters of context taken on each side of a match"
    )

    # ── Bot Behaviour ────────────────────────────────────────────────────
    command_prefix: str = Field("!", description="Legacy command prefix")
    log_level: str = Field("INFO", description="Logging level")

    # ── Validators ───────────────────────────────────────────────────────
    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return v

    @field_validator("oracle_timeout", "check_timeout")
    @classmethod
    def _validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Timeouts must be positive")
        return v

    @field_validator("max_suggestions")
    @classmethod
    def _validate_max_suggestions(cls, v: int) -> int:
        if v < 1:
            raise ValueError("MAX_SUGGESTIONS must be at least 1")
        return v

    @field_validator("max_interleaved", "context_radius")
    @classmethod
    def _validate_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Value must not be negative")
        return v

    @field_validator("banned_words")
    @classmethod
    def _normalize_banned_words(cls, v: list[str]) -> list[str]:
        words = (w.strip().lower() for w in v)
        return list(dict.fromkeys(w for w in words if w))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached, validated application settings."""
    return Settings()  # type: ignore[call-arg]


def configure_logging(level: str = "INFO") -> None:
    """Set up structured logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)-25s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # Silence noisy libraries
    logging.getLogger("discord").setLevel(logging.WARNING)
    logging.getLogger("discord.http").setLevel(logging.WARNING)
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
