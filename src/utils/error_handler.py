"""
Ferris Discord Bot - Error Handler
==================================

Detailed error context for failures that escape normal handling.

Features:
- Error categorization (Discord, network, config, tracking)
- Recovery suggestions in the log line
- Critical error context saved as JSON under logs/errors/

Author: حَـــــنَّـــــا
"""

import json
import sys
import traceback
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

import discord

from src.core.config import ConfigValidationError
from src.core.logger import logger, LOGS_DIR
from src.tracking.errors import TrackerStateError


class ErrorContext:
    """Captures and formats detailed error context."""

    @staticmethod
    def get_full_context(e: Exception, location: str, **kwargs) -> Dict[str, Any]:
        """
        Get comprehensive error context.

        Args:
            e: The exception
            location: Where the error occurred
            **kwargs: Additional context (message, token presence, etc.)

        Returns:
            Dictionary with full error context
        """
        context = {
            'timestamp': datetime.now().isoformat(),
            'location': location,
            'error_type': type(e).__name__,
            'error_message': str(e),
            'traceback': ''.join(traceback.format_exception(type(e), e, e.__traceback__)),
            'python_version': sys.version,
            'additional_context': {k: str(v) for k, v in kwargs.items() if k != 'message'},
        }

        msg = kwargs.get('message')
        if isinstance(msg, discord.Message):
            context['discord_context'] = {
                'guild': msg.guild.name if msg.guild else 'DM',
                'channel': getattr(msg.channel, 'name', str(msg.channel)),
                'author': str(msg.author),
                'author_id': msg.author.id,
            }

        return context


class ErrorHandler:
    """Error handling with categories and recovery hints."""

    ERROR_CATEGORIES = (
        ('config', (ConfigValidationError,)),
        ('tracking', (TrackerStateError,)),
        ('discord', (discord.LoginFailure, discord.Forbidden, discord.NotFound, discord.HTTPException)),
        ('network', (ConnectionError, TimeoutError, OSError)),
    )

    RECOVERY_SUGGESTIONS = {
        discord.LoginFailure: "Check DISCORD_TOKEN in .env",
        discord.Forbidden: "Check bot permissions in server settings",
        discord.NotFound: "Resource not found - check channel names and IDs",
        discord.HTTPException: "Discord API issue - the announcement was dropped",
        ConfigValidationError: "Fix the environment variables listed above",
        TrackerStateError: "Mention engine was not built before events arrived",
        ConnectionError: "Network connection issue - check internet connection",
        TimeoutError: "Request timed out",
    }

    @classmethod
    def categorize_error(cls, e: Exception) -> str:
        """Return the category name for an exception, 'general' if unknown."""
        for category, error_types in cls.ERROR_CATEGORIES:
            if isinstance(e, error_types):
                return category
        return 'general'

    @classmethod
    def get_recovery_suggestion(cls, e: Exception) -> str:
        # Most specific class first (LoginFailure before HTTPException)
        for error_type in type(e).__mro__:
            if error_type in cls.RECOVERY_SUGGESTIONS:
                return cls.RECOVERY_SUGGESTIONS[error_type]
        return "Unexpected error - check logs for details"

    @classmethod
    def handle(cls, e: Exception, location: str, critical: bool = False, **context) -> None:
        """
        Handle an error with full context.

        Args:
            e: The exception
            location: Where the error occurred
            critical: Whether this error stops the bot
            **context: Additional context
        """
        category = cls.categorize_error(e)
        suggestion = cls.get_recovery_suggestion(e)
        full_context = ErrorContext.get_full_context(e, location, **context)

        error_msg = f"[{category.upper()}] in {location}"

        if critical:
            logger.error(f"💥 CRITICAL ERROR {error_msg}", [
                ("Type", full_context['error_type']),
                ("Error", full_context['error_message'][:200]),
                ("Recovery", suggestion),
            ])
            logger.info(f"Traceback:\n{full_context['traceback']}")

            if 'discord_context' in full_context:
                dc = full_context['discord_context']
                logger.info(f"Discord Context: Guild={dc['guild']}, Channel={dc['channel']}, User={dc['author']}")

            cls._store_critical_error(full_context)
        else:
            logger.warning(f"⚠️ ERROR {error_msg}: {full_context['error_type']} - {str(e)[:100]} | Recovery: {suggestion}")

    @staticmethod
    def _store_critical_error(context: Dict[str, Any]) -> None:
        """Store critical error context for later analysis."""
        try:
            error_dir = LOGS_DIR / 'errors'
            error_dir.mkdir(exist_ok=True, parents=True)

            timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
            error_file = Path(error_dir) / f"error_{timestamp}.json"

            with open(error_file, 'w', encoding='utf-8') as f:
                json.dump(context, f, indent=2, default=str)

            logger.info(f"Critical error saved to {error_file}")
        except OSError as save_error:
            logger.warning(f"Failed to save error details: {save_error}")


__all__ = ["ErrorContext", "ErrorHandler"]
