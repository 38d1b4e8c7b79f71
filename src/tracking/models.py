"""
Ferris Discord Bot - Tracking Models
====================================

Plain value types exchanged between the Discord adapter and the
mention engine. Nothing here references discord.py, so the engine can be
driven by tests or another gateway.

Author: حَـــــنَّـــــا
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Hashable, List, Optional, Tuple, Union


LeaderboardEntry = Tuple[Hashable, int]
"""(author identity, mention count) pair, as ranked by the counter."""


# =============================================================================
# Inbound
# =============================================================================

@dataclass(frozen=True)
class ChannelContext:
    """Where a message was posted. guild_id is None for direct messages."""

    channel_id: int
    guild_id: Optional[int] = None


@dataclass(frozen=True)
class MessageReceived:
    """One observed chat message, already stripped of gateway types."""

    author_id: Hashable
    text: str
    context: ChannelContext
    sent_at: datetime
    author_name: str = ""


@dataclass(frozen=True)
class MentionEvent:
    """A message that passed the keyword matcher."""

    author_id: Hashable
    observed_at: datetime
    context: ChannelContext


# =============================================================================
# Record Outcomes
# =============================================================================

@dataclass(frozen=True)
class RecordOutcome:
    """Base class for the result of RecordTracker.observe()."""

    @property
    def is_record(self) -> bool:
        return False


@dataclass(frozen=True)
class NoPriorMention(RecordOutcome):
    """First mention of the process lifetime; sets a zero baseline."""


@dataclass(frozen=True)
class RecordBroken(RecordOutcome):
    """The gap since the previous mention is strictly the longest seen."""

    new_gap: timedelta

    @property
    def is_record(self) -> bool:
        return True


@dataclass(frozen=True)
class RecordNotBroken(RecordOutcome):
    """The gap did not exceed the current record."""

    gap: timedelta


# =============================================================================
# Outbound
# =============================================================================

@dataclass(frozen=True)
class ReportPayload:
    """Top-N snapshot produced when a leaderboard report is due."""

    entries: List[LeaderboardEntry]
    generated_at: datetime
    limit: int


@dataclass(frozen=True)
class RecordAnnouncement:
    """Sent to the channel of the message that broke the record."""

    gap_duration: timedelta
    formatted_text: str
    context: ChannelContext


@dataclass(frozen=True)
class LeaderboardAnnouncement:
    """Sent to the guild's report channel when a report is due."""

    ranked_entries: List[LeaderboardEntry]
    context: ChannelContext
    limit: int = 10
    generated_at: Optional[datetime] = field(default=None, compare=False)


Announcement = Union[RecordAnnouncement, LeaderboardAnnouncement]


# =============================================================================
# Module Export
# =============================================================================

__all__ = [
    "Announcement",
    "ChannelContext",
    "LeaderboardAnnouncement",
    "LeaderboardEntry",
    "MentionEvent",
    "MessageReceived",
    "NoPriorMention",
    "RecordAnnouncement",
    "RecordBroken",
    "RecordNotBroken",
    "RecordOutcome",
    "ReportPayload",
]
