"""
Ferris Discord Bot - Tracking Ports
===================================

Protocols at the seams between the mention engine and the chat gateway.

DESIGN:
    EventSink is what a gateway adapter feeds: one method per inbound
    event type. AnnouncementSink is what the engine's results are handed
    to for rendering and delivery. Delivery is fire-and-forget; a sink
    reports failures through logging and never raises back into the
    engine.

Author: حَـــــنَّـــــا
"""

from typing import Hashable, List, Protocol, runtime_checkable

from src.tracking.models import (
    Announcement,
    LeaderboardAnnouncement,
    MessageReceived,
    RecordAnnouncement,
)


@runtime_checkable
class EventSink(Protocol):
    """Inbound events consumed by the mention engine."""

    def on_ready(self, self_identity: Hashable) -> None:
        ...

    def on_message(self, event: MessageReceived) -> List[Announcement]:
        ...


@runtime_checkable
class AnnouncementSink(Protocol):
    """Outbound delivery of announcements to the chat surface."""

    async def send_record(self, announcement: RecordAnnouncement) -> None:
        ...

    async def send_leaderboard(self, announcement: LeaderboardAnnouncement) -> None:
        ...


__all__ = ["AnnouncementSink", "EventSink"]
