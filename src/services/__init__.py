"""
Ferris Discord Bot - Services Package
=====================================

Services that talk to Discord on behalf of the mention engine.

Author: حَـــــنَّـــــا
"""

from .announcer import DiscordAnnouncer


__all__ = [
    "DiscordAnnouncer",
]
