"""
Discord Moderation Bot — Main Entrypoint

Initializes the bot, builds the message checker, loads all cogs,
and connects to Discord.
"""

from __future__ import annotations

import logging
import sys

import aiohttp
import discord
from discord.ext import commands

from checker.message_checker import MessageChecker
from checker.oracle import DatamuseOracle
from config import configure_logging, get_settings
from utils.banned_words import load_banned_words

# ── Load settings and configure logging at module level ──────────────────────
settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

# ── Cogs to load ─────────────────────────────────────────────────────────────
EXTENSIONS: list[str] = [
    "cogs.automod",
]


class ModBot(commands.Bot):
    """
    Custom bot subclass with async lifecycle management.

    Owns the HTTP session used for spelling lookups, the message checker
    and the banned word list shared by the cogs.
    """

    def __init__(self) -> None:
        intents = discord.Intents.default()
        intents.message_content = True  # Message content intent required

        super().__init__(
            command_prefix=settings.command_prefix,
            intents=intents,
            help_command=None,
            activity=discord.Activity(
                type=discord.ActivityType.watching,
                name="your language 🛡️",
            ),
        )
        self.http_session: aiohttp.ClientSession | None = None
        self.message_checker: MessageChecker | None = None
        self.banned_words: list[str] = []

    async def setup_hook(self) -> None:
        """Called when the bot is starting up (before on_ready)."""
        self.banned_words = load_banned_words(
            settings.banned_words_file, settings.banned_words
        )
        if not self.banned_words:
            logger.warning("Banned word list is empty — no message will be flagged.")

        self.http_session = aiohttp.ClientSession()
        oracle = DatamuseOracle(
            self.http_session,
            base_url=settings.datamuse_url,
            timeout=settings.oracle_timeout,
        )
        self.message_checker = MessageChecker(
            oracle,
            max_suggestions=settings.max_suggestions,
            max_interleaved=settings.max_interleaved,
            context_radius=settings.context_radius,
        )

        # Load cogs
        for ext in EXTENSIONS:
            try:
                await self.load_extension(ext)
                logger.info("Loaded extension: %s", ext)
            except Exception as e:
                logger.error("Failed to load extension %s: %s", ext, e, exc_info=True)
                sys.exit(1)

    async def on_ready(self) -> None:
        """Called when the bot is fully connected and ready."""
        logger.info("─" * 50)
        logger.info("Bot is READY!")
        logger.info("Logged in as: %s (ID: %d)", self.user, self.user.id)
        logger.info("Banned words: %d", len(self.banned_words))
        logger.info("Cogs loaded: %s", ", ".join(self.cogs.keys()))
        logger.info("─" * 50)

    async def close(self) -> None:
        """Graceful shutdown: release the HTTP session."""
        logger.info("Shutting down...")
        if self.http_session:
            await self.http_session.close()
        await super().close()
        logger.info("Shutdown complete.")


def main() -> None:
    """Entry point — creates and runs the bot."""
    bot = ModBot()

    try:
        bot.run(settings.discord_token, log_handler=None)
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt.")
    except Exception as e:
        logger.critical("Fatal error: %s", e, exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
