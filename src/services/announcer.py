"""
Ferris Discord Bot - Announcement Service
=========================================

Renders mention announcements as embeds and sends them to Discord.

DESIGN:
    The mention engine has already committed its state when an
    announcement reaches this service. Every failure here (missing guild,
    missing report channel, missing permissions, HTTP errors) is logged
    and the announcement is dropped: no retry, no queue, nothing posted
    in-channel.

Author: حَـــــنَّـــــا
"""

from typing import TYPE_CHECKING, Hashable, List, Optional, Tuple

import discord

from src.core.logger import logger
from src.tracking.models import LeaderboardAnnouncement, RecordAnnouncement

if TYPE_CHECKING:
    from src.bot import FerrisBot


# =============================================================================
# Embed Builders
# =============================================================================

def build_record_embed(
    announcement: RecordAnnouncement,
    keyword: str,
    color: int,
    footer_text: str,
) -> discord.Embed:
    """Embed announcing a new longest-silence record."""
    embed = discord.Embed(
        title=f"🦀 Did somebody say {keyword}? 🦀",
        description=(
            f"You lasted {announcement.formatted_text} without mentioning {keyword}, "
            "that's a new record on this server!"
        ),
        color=color,
    )
    embed.set_footer(text=footer_text)
    return embed


def format_leaderboard(entries: List[Tuple[Hashable, int]], keyword: str) -> str:
    """
    Leaderboard body text.

    Example:
        👋 Hello everyone!

        It's time to check who has mentioned Rust the most on the server. Here are the results:

        12 x <@123>
        7 x <@456>

        Congratulations to the winners! 🎉
    """
    lines = [
        "👋 Hello everyone!\n",
        f"It's time to check who has mentioned {keyword} the most on the server. Here are the results:\n",
    ]
    lines.extend(f"{count} x <@{author_id}>" for author_id, count in entries)
    lines.append("\nCongratulations to the winners! 🎉")
    return "\n".join(lines)


def build_leaderboard_embed(
    announcement: LeaderboardAnnouncement,
    keyword: str,
    color: int,
    footer_text: str,
) -> discord.Embed:
    """Embed with the ranked leaderboard."""
    entries = announcement.ranked_entries[: announcement.limit]
    embed = discord.Embed(
        title=f"🦀 {keyword} Report 🦀",
        description=format_leaderboard(entries, keyword),
        color=color,
    )
    embed.set_footer(text=footer_text)
    return embed


# =============================================================================
# Announcer
# =============================================================================

class DiscordAnnouncer:
    """
    AnnouncementSink backed by a discord.py client.

    Attributes:
        bot: Client used to resolve channels and guilds.
        keyword: Keyword label shown in embeds (e.g. "Rust").
        report_channel_name: Name of the channel receiving leaderboards.
    """

    def __init__(
        self,
        bot: "FerrisBot",
        keyword: str,
        report_channel_name: str,
        color: int,
        footer_text: str,
    ) -> None:
        self.bot = bot
        self.keyword = keyword
        self.report_channel_name = report_channel_name
        self.color = color
        self.footer_text = footer_text

    # =========================================================================
    # Channel Resolution
    # =========================================================================

    def _find_report_channel(self, guild_id: Optional[int]) -> Optional[discord.abc.Messageable]:
        if guild_id is None:
            return None
        guild = self.bot.get_guild(guild_id)
        if guild is None:
            return None
        return discord.utils.get(guild.text_channels, name=self.report_channel_name)

    # =========================================================================
    # Delivery
    # =========================================================================

    async def send_record(self, announcement: RecordAnnouncement) -> None:
        """Post a new-record embed in the channel where the record was broken."""
        context = announcement.context
        channel = self.bot.get_channel(context.channel_id)
        if channel is None:
            # Uncached channel: send by id, Discord resolves it
            channel = self.bot.get_partial_messageable(context.channel_id, guild_id=context.guild_id)
            logger.debug("Record Channel Not Cached", [("Channel", str(context.channel_id))])

        embed = build_record_embed(announcement, self.keyword, self.color, self.footer_text)
        await self._send(channel, embed, "Record")

    async def send_leaderboard(self, announcement: LeaderboardAnnouncement) -> None:
        """Post the leaderboard in the guild's report channel, if it has one."""
        channel = self._find_report_channel(announcement.context.guild_id)
        if channel is None:
            logger.warning("Leaderboard Dropped", [
                ("Reason", f"No #{self.report_channel_name} channel"),
                ("Guild", str(announcement.context.guild_id)),
            ])
            return

        embed = build_leaderboard_embed(announcement, self.keyword, self.color, self.footer_text)
        await self._send(channel, embed, "Leaderboard")

    async def _send(self, channel: discord.abc.Messageable, embed: discord.Embed, kind: str) -> None:
        try:
            await channel.send(embed=embed)
        except discord.Forbidden:
            logger.error(f"{kind} Announcement Failed", [
                ("Channel", str(getattr(channel, "id", channel))),
                ("Reason", "Missing permissions"),
            ])
            return
        except discord.HTTPException as e:
            logger.error(f"{kind} Announcement Failed", [
                ("Channel", str(getattr(channel, "id", channel))),
                ("Status", str(e.status)),
                ("Error", str(e)[:200]),
            ])
            return

        logger.success(f"{kind} Announcement Sent")


__all__ = [
    "DiscordAnnouncer",
    "build_leaderboard_embed",
    "build_record_embed",
    "format_leaderboard",
]
