"""
Ferris Discord Bot - Main Bot Class
===================================

Discord client that counts keyword mentions, announces new
longest-silence records and posts a periodic leaderboard.

Features:
- Whole-word keyword detection (default "rust")
- Per-member mention counts
- Longest gap between mentions, announced when beaten
- Leaderboard in #random every few days

Author: حَـــــنَّـــــا
"""

from datetime import datetime, timezone
from typing import Optional

import discord
from discord.ext import commands

from src.core.config import Config, get_config
from src.core.logger import logger
from src.services.announcer import DiscordAnnouncer
from src.tracking.engine import MentionEngine
from src.utils.duration import format_duration


# =============================================================================
# FerrisBot Class
# =============================================================================

class FerrisBot(commands.Bot):
    """
    Main Discord bot class.

    DESIGN: Central orchestrator that:
    - Owns the mention engine (all tracking state lives there)
    - Owns the announcer used by the message cog
    - Loads event cogs in setup_hook
    - Registers its own identity with the engine in on_ready

    All tracking state is memory-resident; a restart resets counts,
    the record and the report timer.
    """

    # =========================================================================
    # Initialization
    # =========================================================================

    def __init__(self, config: Optional[Config] = None) -> None:
        """Initialize the bot with message-content intents and a fresh engine."""
        self.config = config or get_config()

        intents = discord.Intents.default()
        intents.guilds = True
        intents.guild_messages = True
        intents.message_content = True

        super().__init__(
            command_prefix=commands.when_mentioned,
            intents=intents,
            help_command=None,
        )

        self.start_time: datetime = datetime.now(timezone.utc)

        self.mention_engine: Optional[MentionEngine] = MentionEngine.create(
            keyword=self.config.keyword,
            report_interval=self.config.report_interval,
            leaderboard_size=self.config.leaderboard_size,
            started_at=self.start_time,
        )
        self.announcer = DiscordAnnouncer(
            bot=self,
            keyword=self.mention_engine.keyword_label,
            report_channel_name=self.config.report_channel_name,
            color=self.config.embed_color,
            footer_text=self.config.footer_text,
        )

        self._ready_initialized: bool = False

        logger.info("Bot Instance Created")

    # =========================================================================
    # Setup Hook
    # =========================================================================

    async def setup_hook(self) -> None:
        """Load event cogs before on_ready."""
        from src.events import EVENT_COGS
        for cog in EVENT_COGS:
            try:
                await self.load_extension(cog)
                logger.debug(f"Event Cog Loaded: {cog.split('.')[-1]}")
            except commands.ExtensionError as e:
                logger.error("Failed to Load Event Cog", [("Cog", cog), ("Error", str(e))])
                raise

    # =========================================================================
    # On Ready
    # =========================================================================

    async def on_ready(self) -> None:
        """Register the bot identity with the engine once connected."""
        if not self.user:
            return

        self.mention_engine.on_ready(self.user.id)

        if self._ready_initialized:
            logger.info("Bot Reconnected (skipping re-initialization)")
            return
        self._ready_initialized = True

        if self.config.error_webhook_url:
            logger.set_webhook(self.config.error_webhook_url)

        logger.info(f"{self.user.name} is connected and running.")
        logger.tree("BOT ONLINE", [
            ("Name", self.user.name),
            ("ID", str(self.user.id)),
            ("Guilds", str(len(self.guilds))),
            ("Keyword", self.mention_engine.keyword_label),
            ("Next Report", f"after {format_duration(int(self.config.report_interval.total_seconds()))}"),
        ], emoji="🚀")


__all__ = ["FerrisBot"]
