"""
Ferris Discord Bot - Test Fixtures
==================================

Shared fixtures for all tests.
"""

import os
import sys
import tempfile
import pytest
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import MagicMock, AsyncMock

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Keep test runs from writing into the real logs/ folder
os.environ.setdefault("FERRIS_LOGS_DIR", tempfile.mkdtemp(prefix="ferris-logs-"))


# =============================================================================
# Time Fixtures
# =============================================================================

T0 = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def t0():
    """Fixed reference instant for timeline tests."""
    return T0


@pytest.fixture
def at(t0):
    """Build an instant `seconds` after t0."""
    def _at(seconds: float) -> datetime:
        return t0 + timedelta(seconds=seconds)
    return _at


# =============================================================================
# Engine Fixtures
# =============================================================================

@pytest.fixture
def engine(t0):
    """Fresh mention engine tracking "rust" with a 60 second report interval."""
    from src.tracking.engine import MentionEngine
    return MentionEngine.create(
        keyword="rust",
        report_interval=timedelta(seconds=60),
        leaderboard_size=10,
        started_at=t0,
    )


@pytest.fixture
def channel_context():
    from src.tracking.models import ChannelContext
    return ChannelContext(channel_id=555666777, guild_id=987654321)


@pytest.fixture
def make_message(channel_context, at):
    """Build a MessageReceived from an author, text and offset in seconds."""
    from src.tracking.models import MessageReceived

    def _make(author_id, text, seconds, author_name=""):
        return MessageReceived(
            author_id=author_id,
            text=text,
            context=channel_context,
            sent_at=at(seconds),
            author_name=author_name,
        )
    return _make


# =============================================================================
# Mock Discord Objects
# =============================================================================

@pytest.fixture
def mock_discord_text_channel():
    """Create a mock Discord text channel named like the report channel."""
    channel = MagicMock()
    channel.id = 555666777
    channel.name = "random"
    channel.send = AsyncMock(return_value=MagicMock(id=111222333))
    return channel


@pytest.fixture
def mock_discord_guild(mock_discord_text_channel):
    """Create a mock Discord guild with a #general and a #random channel."""
    general = MagicMock()
    general.id = 111000111
    general.name = "general"
    general.send = AsyncMock()

    guild = MagicMock()
    guild.id = 987654321
    guild.name = "Test Server"
    guild.text_channels = [general, mock_discord_text_channel]
    return guild


@pytest.fixture
def mock_bot(mock_discord_text_channel, mock_discord_guild):
    """Create a mock bot that resolves the fixture channel and guild."""
    bot = MagicMock()
    bot.user = MagicMock()
    bot.user.id = 999888777
    bot.get_channel = MagicMock(return_value=mock_discord_text_channel)
    bot.get_guild = MagicMock(return_value=mock_discord_guild)
    return bot


@pytest.fixture
def mock_discord_message(t0):
    """Create a mock Discord message mentioning the keyword."""
    message = MagicMock()
    message.id = 111222333
    message.content = "I love Rust!"
    message.author = MagicMock()
    message.author.id = 123456789
    message.author.name = "testuser"
    message.channel = MagicMock()
    message.channel.id = 555666777
    message.guild = MagicMock()
    message.guild.id = 987654321
    message.created_at = t0
    return message


@pytest.fixture
def forbidden_error():
    """A real discord.Forbidden built from a fake HTTP response."""
    import discord
    return discord.Forbidden(MagicMock(status=403, reason="Forbidden"), "Missing Access")


@pytest.fixture
def http_error():
    """A real discord.HTTPException built from a fake HTTP response."""
    import discord
    return discord.HTTPException(MagicMock(status=500, reason="Internal Server Error"), "Server error")
