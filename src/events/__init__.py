"""
Ferris Discord Bot - Events Package
===================================

Event handler Cogs for the Ferris Discord bot.

DESIGN:
    Each event file contains a Cog class with @commands.Cog.listener
    decorators. Cogs are loaded dynamically by the bot using
    load_extension().

    Event routing:
    - messages.py: Message create -> mention engine -> announcements

Author: حَـــــنَّـــــا
"""

# =============================================================================
# Event Cog Registry
# =============================================================================

EVENT_COGS = [
    "src.events.messages",
]
"""
List of event cog module paths for dynamic loading.

DESIGN:
    Bot iterates this list and calls load_extension() for each.
    Add new event cogs here to have them loaded automatically.
"""


# =============================================================================
# Module Export
# =============================================================================

__all__ = [
    "EVENT_COGS",
]
