"""
Ferris Discord Bot - Tracking Package
=====================================

In-memory mention tracking: keyword matching, per-author counts, the
longest-silence record and the periodic leaderboard.

DESIGN:
    Nothing in this package imports discord.py. The messages cog converts
    discord.Message objects into MessageReceived values and delivers the
    announcements the engine returns.

    Structure:
    - matcher.py: KeywordMatcher
    - counter.py: MentionCounter
    - record.py: RecordTracker
    - scheduler.py: ReportScheduler
    - engine.py: MentionEngine (event sink wiring the above together)
    - models.py: events, outcomes and announcements
    - ports.py: EventSink / AnnouncementSink protocols

Author: حَـــــنَّـــــا
"""

from .counter import MentionCounter
from .engine import MentionEngine
from .errors import TrackerStateError
from .matcher import KeywordMatcher
from .models import (
    Announcement,
    ChannelContext,
    LeaderboardAnnouncement,
    MentionEvent,
    MessageReceived,
    NoPriorMention,
    RecordAnnouncement,
    RecordBroken,
    RecordNotBroken,
    RecordOutcome,
    ReportPayload,
)
from .ports import AnnouncementSink, EventSink
from .record import RecordTracker
from .scheduler import ReportScheduler


__all__ = [
    "Announcement",
    "AnnouncementSink",
    "ChannelContext",
    "EventSink",
    "KeywordMatcher",
    "LeaderboardAnnouncement",
    "MentionCounter",
    "MentionEngine",
    "MentionEvent",
    "MessageReceived",
    "NoPriorMention",
    "RecordAnnouncement",
    "RecordBroken",
    "RecordNotBroken",
    "RecordOutcome",
    "RecordTracker",
    "ReportPayload",
    "ReportScheduler",
    "TrackerStateError",
]
