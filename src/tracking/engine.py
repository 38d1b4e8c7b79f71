"""
Ferris Discord Bot - Mention Engine
===================================

Coordinates the matcher, counter, record tracker and report scheduler for
every inbound message.

DESIGN:
    Control flow per message:
    1. Messages from the bot itself -> ignored
    2. Keyword matcher -> non-matches ignored, no state touched
    3. Mention counter -> always incremented
    4. Report scheduler -> leaderboard announcement if the interval elapsed
    5. Record tracker -> record announcement if the gap is a new record

    Each state container has its own lock; the engine holds no lock of
    its own and never needs two containers to change atomically. All of
    this is synchronous with no awaits, so it runs directly inside the
    asyncio task that received the message. The returned announcements
    are delivered by the caller; a failed delivery never rolls back the
    state changes made here.

Author: حَـــــنَّـــــا
"""

from datetime import datetime, timedelta
from typing import Hashable, List, Optional

from src.core.logger import logger
from src.tracking.counter import MentionCounter
from src.tracking.errors import TrackerStateError
from src.tracking.matcher import KeywordMatcher
from src.tracking.models import (
    Announcement,
    LeaderboardAnnouncement,
    MentionEvent,
    MessageReceived,
    RecordAnnouncement,
    RecordBroken,
)
from src.tracking.record import RecordTracker
from src.tracking.scheduler import ReportScheduler
from src.utils.duration import format_gap


class MentionEngine:
    """
    Event sink that turns chat messages into mention statistics.

    Attributes:
        matcher: Keyword matcher deciding what counts as a mention.
        counter: Per-author mention counts.
        tracker: Longest-silence record.
        scheduler: Leaderboard report gate.
    """

    def __init__(
        self,
        matcher: KeywordMatcher,
        counter: MentionCounter,
        tracker: RecordTracker,
        scheduler: ReportScheduler,
    ) -> None:
        missing = [
            name for name, value in (
                ("matcher", matcher),
                ("counter", counter),
                ("tracker", tracker),
                ("scheduler", scheduler),
            )
            if value is None
        ]
        if missing:
            raise TrackerStateError(f"Mention engine missing shared state: {', '.join(missing)}")

        self.matcher = matcher
        self.counter = counter
        self.tracker = tracker
        self.scheduler = scheduler
        self.self_identity: Optional[Hashable] = None

    @classmethod
    def create(
        cls,
        keyword: str,
        report_interval: timedelta,
        leaderboard_size: int = 10,
        started_at: Optional[datetime] = None,
    ) -> "MentionEngine":
        """Build an engine with fresh, empty state."""
        return cls(
            matcher=KeywordMatcher(keyword),
            counter=MentionCounter(),
            tracker=RecordTracker(),
            scheduler=ReportScheduler(report_interval, leaderboard_size, started_at),
        )

    # =========================================================================
    # Event Sink
    # =========================================================================

    def on_ready(self, self_identity: Hashable) -> None:
        """Remember the bot's own identity so its messages are skipped."""
        self.self_identity = self_identity

    def on_message(self, event: MessageReceived) -> List[Announcement]:
        """
        Process one inbound message.

        Args:
            event: The received message.

        Returns:
            Zero, one or two announcements to deliver.
        """
        if self.self_identity is not None and event.author_id == self.self_identity:
            return []

        if not self.matcher.matches(event.text):
            return []

        return self.record_mention(
            MentionEvent(
                author_id=event.author_id,
                observed_at=event.sent_at,
                context=event.context,
            ),
            author_name=event.author_name or str(event.author_id),
        )

    # =========================================================================
    # Mention Handling
    # =========================================================================

    def record_mention(self, mention: MentionEvent, author_name: str = "") -> List[Announcement]:
        """Apply a qualifying mention to all state containers."""
        announcements: List[Announcement] = []
        keyword = self.keyword_label

        count = self.counter.record_mention(mention.author_id)
        logger.info(f"{author_name or mention.author_id} mentioned {keyword} {count} times so far.")

        report = self.scheduler.maybe_report(mention.observed_at, self.counter.top_n)
        if report is not None:
            logger.tree(f"{keyword} Report Due", [
                ("Entries", str(len(report.entries))),
                ("Guild", str(mention.context.guild_id)),
            ], emoji="📊")
            announcements.append(
                LeaderboardAnnouncement(
                    ranked_entries=report.entries,
                    context=mention.context,
                    limit=report.limit,
                    generated_at=report.generated_at,
                )
            )

        previous_best = self.tracker.best_gap
        outcome = self.tracker.observe(mention.observed_at)
        logger.debug(f"Record check: {type(outcome).__name__}", [
            ("Previous Record", str(previous_best)),
            ("Outcome", repr(outcome)),
        ])

        if isinstance(outcome, RecordBroken):
            formatted = format_gap(outcome.new_gap)
            logger.tree("New Record", [
                ("Gap", formatted),
                ("Channel", str(mention.context.channel_id)),
            ], emoji="🦀")
            announcements.append(
                RecordAnnouncement(
                    gap_duration=outcome.new_gap,
                    formatted_text=formatted,
                    context=mention.context,
                )
            )

        return announcements

    @property
    def keyword_label(self) -> str:
        """Keyword as shown to users, e.g. "Rust"."""
        return self.matcher.keyword.capitalize()


__all__ = ["MentionEngine"]
