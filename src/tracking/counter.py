"""
Ferris Discord Bot - Mention Counter
====================================

Per-author mention counts held in memory for the process lifetime.

Author: حَـــــنَّـــــا
"""

import threading
from typing import Dict, Hashable, List

from src.tracking.models import LeaderboardEntry


class MentionCounter:
    """
    Thread-safe mapping of author identity to mention count.

    DESIGN:
        One lock guards the table. Increments return the value written by
        that same call, so two concurrent mentions by one author always
        observe distinct counts. Leaderboard queries copy the table under
        the lock and sort the copy afterwards.

        Ties in top_n() keep the order in which authors first mentioned
        the keyword (dict insertion order + stable sort).
    """

    def __init__(self) -> None:
        self._counts: Dict[Hashable, int] = {}
        self._lock = threading.Lock()

    def record_mention(self, author: Hashable) -> int:
        """Increment the count for author and return the new value."""
        with self._lock:
            count = self._counts.get(author, 0) + 1
            self._counts[author] = count
            return count

    def get(self, author: Hashable) -> int:
        with self._lock:
            return self._counts.get(author, 0)

    def total(self) -> int:
        """Sum of all recorded mentions."""
        with self._lock:
            return sum(self._counts.values())

    def snapshot(self) -> Dict[Hashable, int]:
        """Point-in-time copy of the whole table."""
        with self._lock:
            return dict(self._counts)

    def top_n(self, n: int) -> List[LeaderboardEntry]:
        """
        Return the n authors with the most mentions.

        Args:
            n: Maximum number of entries.

        Returns:
            (author, count) pairs, highest count first.
        """
        if n <= 0:
            return []
        items = list(self.snapshot().items())
        items.sort(key=lambda item: item[1], reverse=True)
        return items[:n]

    def __len__(self) -> int:
        with self._lock:
            return len(self._counts)


__all__ = ["MentionCounter"]
