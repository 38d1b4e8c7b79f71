"""
Ferris Discord Bot - Report Scheduler
=====================================

Decides when the periodic leaderboard report is due.

DESIGN:
    Reports are triggered by mentions, not by a timer: the first
    qualifying mention after the interval has elapsed produces the
    report, and quiet periods produce nothing. The elapsed check and the
    advance of last_report_at happen under one lock, so among concurrent
    mentions at the interval boundary exactly one receives the payload.

Author: حَـــــنَّـــــا
"""

import threading
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional

from src.tracking.models import LeaderboardEntry, ReportPayload

SnapshotProvider = Callable[[int], List[LeaderboardEntry]]


class ReportScheduler:
    """
    Interval gate for leaderboard reports.

    Attributes:
        interval: Minimum time between two reports.
        limit: Number of leaderboard entries per report.
    """

    def __init__(
        self,
        interval: timedelta,
        limit: int = 10,
        started_at: Optional[datetime] = None,
    ) -> None:
        if interval <= timedelta(0):
            raise ValueError("Report interval must be positive")
        self.interval = interval
        self.limit = limit
        self._last_report_at: datetime = started_at or datetime.now(timezone.utc)
        self._lock = threading.Lock()

    @property
    def last_report_at(self) -> datetime:
        with self._lock:
            return self._last_report_at

    def next_report_due(self) -> datetime:
        """Earliest instant at which a mention can trigger the next report."""
        with self._lock:
            return self._last_report_at + self.interval

    def maybe_report(
        self,
        now: datetime,
        snapshot_provider: SnapshotProvider,
    ) -> Optional[ReportPayload]:
        """
        Claim the report for this interval if it is due.

        Args:
            now: Instant of the qualifying mention.
            snapshot_provider: Returns the top-N leaderboard, usually
                MentionCounter.top_n.

        Returns:
            ReportPayload for the single caller that claimed the report,
            None for everyone else.
        """
        with self._lock:
            if now - self._last_report_at < self.interval:
                return None
            self._last_report_at = now

        return ReportPayload(
            entries=snapshot_provider(self.limit),
            generated_at=now,
            limit=self.limit,
        )


__all__ = ["ReportScheduler", "SnapshotProvider"]
