"""
AutoMod Cog — Automatic message scanning for banned words.

Runs every guild message through the message checker.
On detection → sends a plain-text report to the report channel.
If the check cannot complete, the report says so instead of clearing the message.
"""

from __future__ import annotations

import asyncio
import logging

import discord
from discord.ext import commands

from checker.message_checker import MessageChecker
from checker.models import MessageCheckerResult
from checker.oracle import OracleUnavailable
from config import get_settings

logger = logging.getLogger(__name__)
_settings = get_settings()

_MAX_REPORT_LENGTH = 2000


class AutoModCog(commands.Cog, name="AutoMod"):

    def __init__(
        self,
        bot: commands.Bot,
        checker: MessageChecker,
        banned_words: list[str],
    ) -> None:
        self.bot = bot
        self.checker = checker
        self.banned_words = banned_words

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message) -> None:
        """Scan every message for banned words."""
        if message.author.bot or message.guild is None:
            return

        content = message.content
        if not content:
            return

        try:
            result = await asyncio.wait_for(
                self.checker.check_message(content, self.banned_words),
                timeout=_settings.check_timeout,
            )
        except (OracleUnavailable, asyncio.TimeoutError) as e:
            logger.error(
                "Could not check message %d from %s: %s",
                message.id, message.author, e, exc_info=True,
            )
            await self._send_report(
                f"⚠️ **Unverified message** — {message.author.mention} in "
                f"<#{message.channel.id}>\nSpelling lookup unavailable, please review "
                f"manually: {message.jump_url}"
            )
            return

        if result.is_flagged:
            await self._flag_message(message=message, result=result)

    async def _flag_message(
        self,
        *,
        message: discord.Message,
        result: MessageCheckerResult,
    ) -> None:
        """Report a flagged message with every context that survived adjudication."""
        logger.info(
            "Flagged message %d from %s (%d): %s",
            message.id, message.author, message.author.id,
            ", ".join(result.flagged_words),
        )

        lines = [
            f"🚨 **Banned word detected** — {message.author.mention} in "
            f"<#{message.channel.id}>",
            message.jump_url,
        ]
        for context in result.contexts:
            lines.append(f"• `{context.banned_word}` in “{context.original_context}”")

        await self._send_report("\n".join(lines)[:_MAX_REPORT_LENGTH])

    async def _send_report(self, text: str) -> None:
        if not _settings.report_channel_id:
            return

        channel = self.bot.get_channel(_settings.report_channel_id)
        if channel is None or not isinstance(channel, discord.TextChannel):
            logger.error("Report channel %d not found!", _settings.report_channel_id)
            return

        try:
            await channel.send(text)
        except discord.Forbidden:
            logger.warning(
                "Cannot send report to channel %d — missing permissions.",
                _settings.report_channel_id,
            )


async def setup(bot: commands.Bot) -> None:
    await bot.add_cog(AutoModCog(bot, bot.message_checker, bot.banned_words))
