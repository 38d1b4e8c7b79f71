"""
Ferris Discord Bot - Utils Package
==================================

Stateless helpers used across the codebase.

Available Utilities:
    Duration: Parsing config durations, formatting record gaps
    Async: Background tasks with error logging
    Error Handler: Categorized error logging for fatal failures

Author: حَـــــنَّـــــا
"""

from .duration import format_duration, format_gap, parse_duration, parse_duration_timedelta


__all__ = [
    "format_duration",
    "format_gap",
    "parse_duration",
    "parse_duration_timedelta",
]
