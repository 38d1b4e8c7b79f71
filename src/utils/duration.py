"""
Unified Duration Utilities
==========================

Parsing and formatting of durations for configuration, logs and
announcements.

Usage:
    from src.utils.duration import parse_duration, format_duration, format_gap

    # Parse a config value to seconds
    seconds = parse_duration("5d")  # 432000

    # Compact form for log lines
    display = format_duration(131400)  # "1d 12h 30m"

    # Record announcement wording
    text = format_gap(timedelta(hours=2, minutes=5))  # "2 hour(s) and 5 minute(s)"

Author: حَـــــنَّـــــا
"""

import re
from datetime import timedelta
from typing import Optional


# =============================================================================
# Time Constants
# =============================================================================

SECONDS_PER_YEAR = 31536000
SECONDS_PER_MONTH = 2592000  # 30 days
SECONDS_PER_WEEK = 604800
SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60

TIME_MULTIPLIERS = {
    "y": SECONDS_PER_YEAR,
    "mo": SECONDS_PER_MONTH,
    "w": SECONDS_PER_WEEK,
    "d": SECONDS_PER_DAY,
    "h": SECONDS_PER_HOUR,
    "m": SECONDS_PER_MINUTE,
    "s": 1,
}

# Full word aliases mapping to short forms
TIME_UNIT_ALIASES = {
    "year": "y", "years": "y", "yr": "y", "yrs": "y",
    "month": "mo", "months": "mo", "mon": "mo",
    "week": "w", "weeks": "w", "wk": "w", "wks": "w",
    "day": "d", "days": "d",
    "hour": "h", "hours": "h", "hr": "h", "hrs": "h",
    "minute": "m", "minutes": "m", "min": "m", "mins": "m",
    "second": "s", "seconds": "s", "sec": "s", "secs": "s",
}


# =============================================================================
# Parsing Functions
# =============================================================================

def _normalize_duration_string(duration_str: str) -> str:
    """
    Normalize duration string by converting full words to short forms.

    Examples:
        "5 days" -> "5d"
        "1 week 2 days" -> "1w2d"
        "1 monday" -> "1monday" (not mangled, will fail validation)
    """
    result = duration_str.lower().strip()

    result = re.sub(r"(\d+)\s+", r"\1", result)

    # Longest first so "minutes" wins over "min"
    for word, short in sorted(TIME_UNIT_ALIASES.items(), key=lambda x: -len(x[0])):
        result = re.sub(rf"(?<=\d){word}\b|(?<!\w){word}\b", short, result)

    return result.replace(" ", "")


def parse_duration(duration_str: str) -> Optional[int]:
    """
    Parse a duration string into seconds.

    Supports:
        - Single units: "30s", "10m", "6h", "5d", "1w", "1mo", "1y"
        - Combined: "1d12h30m", "2w3d"
        - Full words: "5 days", "2 hours", "1day"
        - Plain number: "30" -> 30 seconds

    Args:
        duration_str: Duration string to parse.

    Returns:
        Duration in seconds, or None if the string is empty or invalid.

    Examples:
        >>> parse_duration("5d")
        432000
        >>> parse_duration("1h30m")
        5400
        >>> parse_duration("60")
        60
    """
    if not duration_str:
        return None

    normalized = _normalize_duration_string(duration_str)

    if normalized.isdigit():
        return int(normalized)

    pattern = r"(?:(\d+)y)?(?:(\d+)mo)?(?:(\d+)w)?(?:(\d+)d)?(?:(\d+)h)?(?:(\d+)m)?(?:(\d+)s)?"
    match = re.fullmatch(pattern, normalized)

    if not match or not any(match.groups()):
        return None

    units = ("y", "mo", "w", "d", "h", "m", "s")
    return sum(
        int(value) * TIME_MULTIPLIERS[unit]
        for unit, value in zip(units, match.groups())
        if value
    )


def parse_duration_timedelta(duration_str: str) -> timedelta:
    """
    Parse a duration string into a timedelta.

    Raises:
        ValueError: If the string is empty or not a valid duration.
    """
    if not duration_str:
        raise ValueError("Empty duration string")
    seconds = parse_duration(duration_str)
    if seconds is None:
        raise ValueError(f"Invalid duration format: {duration_str}")
    return timedelta(seconds=seconds)


# =============================================================================
# Formatting Functions
# =============================================================================

def format_duration(seconds: Optional[int], max_units: int = 3) -> str:
    """
    Format seconds into a compact duration string for logs.

    Args:
        seconds: Duration in seconds.
        max_units: Maximum number of time units to show (default 3).

    Returns:
        Formatted string like "1d 12h 30m".

    Examples:
        >>> format_duration(3661)
        "1h 1m 1s"
        >>> format_duration(432000)
        "5d"
    """
    if not seconds or seconds <= 0:
        return "0s"

    parts = []
    for unit, size in (
        ("d", SECONDS_PER_DAY),
        ("h", SECONDS_PER_HOUR),
        ("m", SECONDS_PER_MINUTE),
        ("s", 1),
    ):
        if seconds >= size and len(parts) < max_units:
            value, seconds = divmod(seconds, size)
            parts.append(f"{value}{unit}")

    return " ".join(parts)


def format_gap(gap: timedelta) -> str:
    """
    Format a silence gap for the new-record announcement.

    DESIGN:
        Buckets into the coarsest unit that applies and shows exactly one
        sub-unit. Fractions of a second are truncated.

    Args:
        gap: Elapsed time between two keyword mentions.

    Returns:
        One of "D day(s) and H hour(s)", "H hour(s) and M minute(s)",
        "M minute(s) and S second(s)" or "S seconds".

    Examples:
        >>> format_gap(timedelta(days=2, hours=3))
        "2 day(s) and 3 hour(s)"
        >>> format_gap(timedelta(seconds=42))
        "42 seconds"
    """
    seconds = max(int(gap.total_seconds()), 0)
    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24

    if days > 0:
        return f"{days} day(s) and {hours % 24} hour(s)"
    if hours > 0:
        return f"{hours} hour(s) and {minutes % 60} minute(s)"
    if minutes > 0:
        return f"{minutes} minute(s) and {seconds % 60} second(s)"
    return f"{seconds} seconds"


# =============================================================================
# Module Export
# =============================================================================

__all__ = [
    # Constants
    "SECONDS_PER_YEAR",
    "SECONDS_PER_MONTH",
    "SECONDS_PER_WEEK",
    "SECONDS_PER_DAY",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
    # Parsing
    "parse_duration",
    "parse_duration_timedelta",
    # Formatting
    "format_duration",
    "format_gap",
]
