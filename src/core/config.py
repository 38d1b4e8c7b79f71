"""
Ferris Discord Bot - Configuration Module
=========================================

Centralized configuration management with environment variable validation.

DESIGN:
    A single Config dataclass is loaded from environment variables at
    startup. The mention engine never reads the environment itself; the
    bot hands it the keyword, report interval and leaderboard size from
    this object.

    Key patterns:
    - Singleton via get_config() ensures one Config instance
    - Validation happens once at load time, not on every access
    - Out-of-range numbers are clamped with a warning instead of failing

Author: حَـــــنَّـــــا
"""

import os
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from src.utils.duration import parse_duration


# =============================================================================
# Defaults
# =============================================================================

DEFAULT_KEYWORD = "rust"
DEFAULT_REPORT_INTERVAL = timedelta(days=5)
DEFAULT_LEADERBOARD_SIZE = 10
DEFAULT_REPORT_CHANNEL_NAME = "random"
DEFAULT_EMBED_COLOR = 0xDEA584
DEFAULT_FOOTER_TEXT = "Made with  ❤️  and  🦀  by Near"


# =============================================================================
# Configuration Dataclass
# =============================================================================

@dataclass
class Config:
    """
    Bot configuration loaded from environment variables.

    Attributes:
        discord_token: Discord bot authentication token.
        keyword: Word counted as a mention (matched case-insensitively).
        report_interval: Minimum time between two leaderboard reports.
        leaderboard_size: Number of entries in a leaderboard report.
        report_channel_name: Name of the guild channel receiving reports.
        embed_color: Colour of every announcement embed.
        footer_text: Footer of every announcement embed.
        error_webhook_url: Optional webhook for error alerts.
    """

    # -------------------------------------------------------------------------
    # Required: Discord
    # -------------------------------------------------------------------------

    discord_token: str

    # -------------------------------------------------------------------------
    # Optional: Tracking
    # -------------------------------------------------------------------------

    keyword: str = DEFAULT_KEYWORD
    report_interval: timedelta = DEFAULT_REPORT_INTERVAL
    leaderboard_size: int = DEFAULT_LEADERBOARD_SIZE

    # -------------------------------------------------------------------------
    # Optional: Display
    # -------------------------------------------------------------------------

    report_channel_name: str = DEFAULT_REPORT_CHANNEL_NAME
    embed_color: int = DEFAULT_EMBED_COLOR
    footer_text: str = DEFAULT_FOOTER_TEXT

    # -------------------------------------------------------------------------
    # Optional: Webhooks
    # -------------------------------------------------------------------------

    error_webhook_url: Optional[str] = None


# =============================================================================
# Validation
# =============================================================================

class ConfigValidationError(Exception):
    """Raised when required configuration is missing or invalid."""

    pass


def _parse_int_with_default(
    value: Optional[str],
    default: int,
    name: str,
    min_val: Optional[int] = None,
    max_val: Optional[int] = None,
) -> int:
    """
    Parse optional integer with default and range validation.

    Args:
        value: String value from environment variable.
        default: Default value if not set or invalid.
        name: Variable name for warning messages.
        min_val: Minimum allowed value (inclusive).
        max_val: Maximum allowed value (inclusive).

    Returns:
        Parsed integer within valid range, or default.
    """
    if not value:
        return default
    try:
        parsed = int(value, 0)
    except ValueError:
        from src.core.logger import logger
        logger.warning(f"Config {name}='{value}' invalid, using default {default}")
        return default
    if min_val is not None and parsed < min_val:
        from src.core.logger import logger
        logger.warning(f"Config {name}={parsed} below min {min_val}, using {min_val}")
        return min_val
    if max_val is not None and parsed > max_val:
        from src.core.logger import logger
        logger.warning(f"Config {name}={parsed} above max {max_val}, using {max_val}")
        return max_val
    return parsed


def _parse_interval(value: Optional[str], name: str) -> timedelta:
    """
    Parse a duration string such as "5d" or "12h".

    Raises:
        ConfigValidationError: If the value is set but not a positive duration.
    """
    if not value:
        return DEFAULT_REPORT_INTERVAL
    seconds = parse_duration(value)
    if not seconds:
        raise ConfigValidationError(f"Invalid duration for {name}: {value}")
    return timedelta(seconds=seconds)


def _parse_keyword(value: Optional[str]) -> str:
    if value is None:
        return DEFAULT_KEYWORD
    keyword = value.strip().lower()
    if not keyword or any(ch.isspace() for ch in keyword):
        raise ConfigValidationError(f"TRACKED_KEYWORD must be a single word: {value!r}")
    return keyword


def _validate_url(value: Optional[str], name: str) -> Optional[str]:
    """
    Validate URL format for webhooks.

    Returns:
        URL if valid, None if invalid or empty.
    """
    if not value:
        return None
    if not value.startswith(("https://", "http://")):
        from src.core.logger import logger
        logger.warning(f"Config {name} invalid URL format, ignoring")
        return None
    return value


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config() -> Config:
    """
    Load and validate configuration from environment variables.

    Returns:
        Validated Config object with all settings.

    Raises:
        ConfigValidationError: If any required variable is missing or invalid.
    """
    discord_token = os.getenv("DISCORD_TOKEN")
    if not discord_token:
        raise ConfigValidationError("Missing required environment variables: DISCORD_TOKEN")

    return Config(
        discord_token=discord_token,
        keyword=_parse_keyword(os.getenv("TRACKED_KEYWORD")),
        report_interval=_parse_interval(os.getenv("REPORT_INTERVAL"), "REPORT_INTERVAL"),
        leaderboard_size=_parse_int_with_default(
            os.getenv("LEADERBOARD_SIZE"), DEFAULT_LEADERBOARD_SIZE, "LEADERBOARD_SIZE", min_val=1, max_val=25
        ),
        report_channel_name=os.getenv("REPORT_CHANNEL_NAME", DEFAULT_REPORT_CHANNEL_NAME),
        embed_color=_parse_int_with_default(
            os.getenv("EMBED_COLOR"), DEFAULT_EMBED_COLOR, "EMBED_COLOR", min_val=0, max_val=0xFFFFFF
        ),
        footer_text=os.getenv("FOOTER_TEXT", DEFAULT_FOOTER_TEXT),
        error_webhook_url=_validate_url(os.getenv("ERROR_WEBHOOK_URL"), "ERROR_WEBHOOK_URL"),
    )


# =============================================================================
# Global Config Instance
# =============================================================================

_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global configuration instance, loading if needed.

    Raises:
        ConfigValidationError: On first call if config is invalid.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def validate_and_log_config() -> Config:
    """
    Validate configuration and log a summary at startup.

    Raises:
        ConfigValidationError: If required configuration is missing.
    """
    from src.core.logger import logger
    from src.utils.duration import format_duration

    config = get_config()

    logger.tree("Configuration Validated", [
        ("Keyword", config.keyword),
        ("Report Interval", format_duration(int(config.report_interval.total_seconds()))),
        ("Leaderboard Size", str(config.leaderboard_size)),
        ("Report Channel", f"#{config.report_channel_name}"),
        ("Error Webhook", "Enabled" if config.error_webhook_url else "Disabled"),
    ], emoji="⚙️")

    return config


# =============================================================================
# Module Export
# =============================================================================

__all__ = [
    "Config",
    "ConfigValidationError",
    "get_config",
    "load_config",
    "validate_and_log_config",
]
