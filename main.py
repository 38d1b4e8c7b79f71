#!/usr/bin/env python3
"""
Ferris - Discord Bot Entry Point
================================

Counts mentions of a keyword (default "rust") on a Discord server,
announces record silences and posts a periodic leaderboard.

Features:
- Whole-word keyword detection
- Per-member mention leaderboard
- Longest-silence record announcements
- Graceful error handling

Author: حَـــــنَّـــــا
"""

import asyncio
import sys

from dotenv import load_dotenv

from src.core.config import ConfigValidationError, validate_and_log_config
from src.core.logger import logger
from src.utils.error_handler import ErrorHandler


async def main() -> None:
    """
    Main entry point for the Ferris Discord bot.

    Handles the complete bot lifecycle:
    1. Loads environment configuration
    2. Validates configuration (fails fast on a missing token)
    3. Initializes the bot and its mention engine
    4. Connects to Discord until interrupted

    Raises:
        SystemExit: If configuration is invalid or the bot fails to start
    """
    load_dotenv()

    try:
        config = validate_and_log_config()
    except ConfigValidationError as e:
        logger.error(f"❌ {e}")
        logger.error("   Please add the missing values to the .env file")
        sys.exit(1)

    from src.bot import FerrisBot

    bot = FerrisBot(config)
    logger.info("🤖 Bot instance created successfully")

    logger.info("Starting a new instance of the client.")
    try:
        async with bot:
            await bot.start(config.discord_token)
    except Exception as e:
        ErrorHandler.handle(
            e,
            location="main.main",
            critical=True,
            token_present=bool(config.discord_token),
        )
        sys.exit(1)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("🛑 Bot stopped by user (Ctrl+C)")
