"""
Tests for src/tracking/engine.py

End-to-end message handling: matching, counting, leaderboard reports
and record announcements.
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta

import pytest

from src.tracking.counter import MentionCounter
from src.tracking.engine import MentionEngine
from src.tracking.errors import TrackerStateError
from src.tracking.matcher import KeywordMatcher
from src.tracking.models import (
    LeaderboardAnnouncement,
    MentionEvent,
    RecordAnnouncement,
)
from src.tracking.record import RecordTracker


# =============================================================================
# Construction
# =============================================================================

class TestMentionEngineInit:
    """Missing shared state is a programming error."""

    def test_missing_container_raises(self):
        with pytest.raises(TrackerStateError) as exc:
            MentionEngine(KeywordMatcher("rust"), MentionCounter(), RecordTracker(), None)
        assert "scheduler" in str(exc.value)

    def test_keyword_label(self, engine):
        assert engine.keyword_label == "Rust"


# =============================================================================
# Filtering
# =============================================================================

class TestMentionEngineFiltering:
    """Messages that must not touch any state."""

    def test_non_matching_message(self, engine, make_message):
        assert engine.on_message(make_message("A", "hello world", 0)) == []
        assert engine.counter.total() == 0
        assert engine.tracker.last_mention_at is None

    def test_substring_message(self, engine, make_message):
        assert engine.on_message(make_message("A", "trusted source", 0)) == []
        assert engine.counter.total() == 0

    def test_own_messages_ignored(self, engine, make_message):
        engine.on_ready("BOT")
        assert engine.on_message(make_message("BOT", "rust rust", 0)) == []
        assert engine.counter.get("BOT") == 0

    def test_other_authors_counted_after_ready(self, engine, make_message):
        engine.on_ready("BOT")
        engine.on_message(make_message("A", "rust", 0))
        assert engine.counter.get("A") == 1


# =============================================================================
# Counting and Records
# =============================================================================

class TestMentionEngineRecords:
    """Record announcements along a timeline."""

    def test_first_mention_produces_nothing(self, engine, make_message):
        assert engine.on_message(make_message("A", "I love Rust!", 0)) == []
        assert engine.counter.get("A") == 1

    def test_second_mention_breaks_record(self, engine, make_message, channel_context):
        engine.on_message(make_message("A", "rust", 0))
        announcements = engine.on_message(make_message("B", "rust", 30))
        assert announcements == [
            RecordAnnouncement(
                gap_duration=timedelta(seconds=30),
                formatted_text="30 seconds",
                context=channel_context,
            )
        ]

    def test_shorter_gap_no_announcement(self, engine, make_message):
        engine.on_message(make_message("A", "rust", 0))
        engine.on_message(make_message("A", "rust", 30))
        assert engine.on_message(make_message("A", "rust", 40)) == []
        assert engine.counter.get("A") == 3

    def test_out_of_order_delivery(self, engine, make_message):
        engine.on_message(make_message("A", "rust", 50))
        announcements = engine.on_message(make_message("B", "rust", 20))
        assert announcements == []
        assert engine.counter.total() == 2
        assert engine.tracker.best_gap == timedelta(0)

    def test_arrival_order_serialises_with_sent_at_gaps(self, engine, make_message, at):
        assert engine.on_message(make_message("A", "rust", 0)) == []

        second = engine.on_message(make_message("B", "rust", 10))
        assert [a.gap_duration for a in second] == [timedelta(seconds=10)]

        # Arrives last with an earlier timestamp
        assert engine.on_message(make_message("C", "rust", 5)) == []
        assert engine.tracker.best_gap == timedelta(seconds=10)
        assert engine.tracker.last_mention_at == at(5)
        assert engine.counter.total() == 3

    def test_record_mention_direct(self, engine, at, channel_context):
        engine.record_mention(MentionEvent("A", at(0), channel_context))
        announcements = engine.record_mention(MentionEvent("A", at(125), channel_context))
        assert announcements[0].formatted_text == "2 minute(s) and 5 second(s)"


# =============================================================================
# Leaderboard Reports
# =============================================================================

class TestMentionEngineReports:
    """Leaderboard reports triggered by mentions."""

    def test_report_after_interval(self, engine, make_message, channel_context):
        engine.on_message(make_message("A", "rust", 0))
        engine.on_message(make_message("B", "rust", 30))
        announcements = engine.on_message(make_message("A", "rust", 90))

        leaderboards = [a for a in announcements if isinstance(a, LeaderboardAnnouncement)]
        assert leaderboards == [
            LeaderboardAnnouncement(
                ranked_entries=[("A", 2), ("B", 1)],
                context=channel_context,
                limit=10,
            )
        ]
        # Gap 60s beats the 30s record as well
        records = [a for a in announcements if isinstance(a, RecordAnnouncement)]
        assert records[0].gap_duration == timedelta(seconds=60)
        # Leaderboard comes first
        assert isinstance(announcements[0], LeaderboardAnnouncement)

    def test_report_includes_triggering_mention(self, engine, make_message):
        announcements = engine.on_message(make_message("A", "rust", 61))
        leaderboard = announcements[0]
        assert isinstance(leaderboard, LeaderboardAnnouncement)
        assert leaderboard.ranked_entries == [("A", 1)]

    def test_no_second_report_within_interval(self, engine, make_message):
        engine.on_message(make_message("A", "rust", 90))
        announcements = engine.on_message(make_message("B", "rust", 100))
        assert not any(isinstance(a, LeaderboardAnnouncement) for a in announcements)

    def test_non_mentions_never_trigger_report(self, engine, make_message, t0):
        assert engine.on_message(make_message("A", "hello", 500)) == []
        assert engine.scheduler.last_report_at == t0

    def test_report_size_respected(self, t0, make_message):
        engine = MentionEngine.create("rust", timedelta(seconds=60), leaderboard_size=2, started_at=t0)
        for author in ["A", "B", "C"]:
            engine.on_message(make_message(author, "rust", 0))
        announcements = engine.on_message(make_message("C", "rust", 60))
        leaderboard = announcements[0]
        assert leaderboard.ranked_entries == [("C", 2), ("A", 1)]
        assert leaderboard.limit == 2


# =============================================================================
# Concurrency
# =============================================================================

class TestMentionEngineConcurrency:
    """Concurrent handlers must not lose mentions or duplicate reports."""

    @pytest.mark.asyncio
    async def test_interleaved_tasks(self, engine, make_message):
        async def handle(author, seconds):
            await asyncio.sleep(0)
            return engine.on_message(make_message(author, "rust", seconds))

        results = await asyncio.gather(*[
            handle(f"user{i % 5}", 60) for i in range(50)
        ])

        assert engine.counter.total() == 50
        leaderboards = [
            a for batch in results for a in batch
            if isinstance(a, LeaderboardAnnouncement)
        ]
        assert len(leaderboards) == 1

    def test_threads_single_report_per_interval(self, engine, make_message):
        messages = [make_message(f"user{i % 7}", "rust", 90) for i in range(400)]

        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(engine.on_message, messages))

        assert engine.counter.total() == 400
        assert sum(
            isinstance(a, LeaderboardAnnouncement) for batch in results for a in batch
        ) == 1
        # Identical timestamps: only zero gaps, never a record
        assert not any(
            isinstance(a, RecordAnnouncement) for batch in results for a in batch
        )
