"""
Ferris Discord Bot - Record Tracker
===================================

Tracks the longest silence between two consecutive keyword mentions.

DESIGN:
    The tracker keeps two values: when the keyword was last mentioned and
    the longest gap seen so far. The very first mention only sets a zero
    baseline, which makes the second mention (with any positive gap) the
    first record.

    observe() runs its read-compute-write sequence under a single lock.
    Calls are therefore applied in arrival order; the timestamps passed in
    only determine gap lengths. A timestamp older than the last mention
    (out-of-order delivery) yields a zero gap and can never set a record.

Author: حَـــــنَّـــــا
"""

import threading
from datetime import datetime, timedelta
from typing import Optional

from src.tracking.models import (
    NoPriorMention,
    RecordBroken,
    RecordNotBroken,
    RecordOutcome,
)

ZERO_GAP = timedelta(0)


class RecordTracker:
    """Longest-gap record holder, safe for concurrent callers."""

    def __init__(self) -> None:
        self._last_mention_at: Optional[datetime] = None
        self._best_gap: Optional[timedelta] = None
        self._lock = threading.Lock()

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def last_mention_at(self) -> Optional[datetime]:
        with self._lock:
            return self._last_mention_at

    @property
    def best_gap(self) -> Optional[timedelta]:
        with self._lock:
            return self._best_gap

    # =========================================================================
    # Observation
    # =========================================================================

    def observe(self, now: datetime) -> RecordOutcome:
        """
        Register a qualifying mention at `now`.

        Args:
            now: Instant of the mention.

        Returns:
            NoPriorMention for the first mention, RecordBroken when the gap
            is strictly longer than the record, RecordNotBroken otherwise.
        """
        with self._lock:
            previous = self._last_mention_at
            self._last_mention_at = now

            if previous is None:
                self._best_gap = ZERO_GAP
                return NoPriorMention()

            gap = max(now - previous, ZERO_GAP)

            # Equal gaps do not count as a new record
            if self._best_gap is None or gap > self._best_gap:
                self._best_gap = gap
                return RecordBroken(new_gap=gap)

            return RecordNotBroken(gap=gap)


__all__ = ["RecordTracker", "ZERO_GAP"]
