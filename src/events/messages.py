"""
Ferris Discord Bot - Message Events
===================================

Gateway adapter: turns discord.Message objects into MessageReceived
events for the mention engine and dispatches the resulting
announcements.

Author: حَـــــنَّـــــا
"""

from typing import TYPE_CHECKING, List

import discord
from discord.ext import commands

from src.core.logger import logger
from src.tracking.errors import TrackerStateError
from src.tracking.ports import AnnouncementSink
from src.tracking.models import (
    Announcement,
    ChannelContext,
    LeaderboardAnnouncement,
    MessageReceived,
    RecordAnnouncement,
)
from src.utils.async_utils import create_safe_task

if TYPE_CHECKING:
    from src.bot import FerrisBot


def to_message_received(message: discord.Message) -> MessageReceived:
    """Map a discord.py message onto the engine's inbound event."""
    return MessageReceived(
        author_id=message.author.id,
        author_name=message.author.name,
        text=message.content or "",
        context=ChannelContext(
            channel_id=message.channel.id,
            guild_id=message.guild.id if message.guild else None,
        ),
        sent_at=message.created_at,
    )


class MessageEvents(commands.Cog):
    """Message event handlers."""

    def __init__(self, bot: "FerrisBot") -> None:
        self.bot = bot

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message) -> None:
        """
        Feed every message to the mention engine.

        DESIGN:
            The engine call is synchronous and holds no lock across an
            await. Announcements are sent in background tasks so a slow
            or failing send never delays the next message.
        """
        engine = self.bot.mention_engine
        if engine is None:
            raise TrackerStateError("Message received before the mention engine was built")

        if self.bot.user is not None and message.author.id == self.bot.user.id:
            return

        announcements = engine.on_message(to_message_received(message))
        self.dispatch(announcements)

    def dispatch(self, announcements: List[Announcement]) -> None:
        """Hand announcements to the announcer, fire-and-forget."""
        announcer: AnnouncementSink = self.bot.announcer
        for announcement in announcements:
            if isinstance(announcement, LeaderboardAnnouncement):
                create_safe_task(announcer.send_leaderboard(announcement), "Leaderboard Announcement")
            elif isinstance(announcement, RecordAnnouncement):
                create_safe_task(announcer.send_record(announcement), "Record Announcement")
            else:
                logger.warning("Unknown Announcement Skipped", [("Type", type(announcement).__name__)])


async def setup(bot: "FerrisBot") -> None:
    """Load the MessageEvents cog."""
    await bot.add_cog(MessageEvents(bot))
    logger.tree("Message Events Loaded", [
        ("Events", "on_message"),
        ("Keyword", bot.mention_engine.keyword_label if bot.mention_engine else "-"),
    ], emoji="💬")
