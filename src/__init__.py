"""
Ferris Discord Bot - Source Package
===================================

Keyword mention tracker for Discord, organized in a modular layout.

Package Structure:
- bot.py: Main Discord bot class
- core/: Configuration and logging
- events/: Gateway event cogs
- services/: Announcement delivery
- tracking/: Mention engine (matcher, counter, record, leaderboard)
- utils/: Helper functions and utilities

Author: حَـــــنَّـــــا
Version: v1.0.0
"""
