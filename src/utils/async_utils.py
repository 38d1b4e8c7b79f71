"""
Ferris Discord Bot - Async Utilities
====================================

Helpers for background work whose failures must be logged, not lost.

Usage:
    from src.utils.async_utils import create_safe_task

    # Instead of:
    asyncio.create_task(announcer.send_record(announcement))

    # Use:
    create_safe_task(announcer.send_record(announcement), "Record Announcement")

Author: حَـــــنَّـــــا
"""

import asyncio
from typing import Any, Coroutine

from src.core.logger import logger


# Strong references so running tasks are not garbage collected mid-flight
_background_tasks: "set[asyncio.Task]" = set()


def create_safe_task(
    coro: Coroutine[Any, Any, Any],
    name: str = "Background Task",
) -> asyncio.Task:
    """
    Create a background task with automatic error logging.

    Unlike raw asyncio.create_task(), this catches and logs any exceptions
    instead of letting them silently disappear.

    Args:
        coro: The coroutine to run as a background task.
        name: Name for logging purposes.

    Returns:
        The created asyncio.Task.
    """
    async def wrapped():
        try:
            await coro
        except asyncio.CancelledError:
            # Task was cancelled, this is expected during shutdown
            pass
        except Exception as e:
            logger.error("Background Task Failed", [
                ("Task", name),
                ("Error Type", type(e).__name__),
                ("Error", str(e)[:200]),
            ])

    task = asyncio.create_task(wrapped(), name=name)
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)
    return task


__all__ = ["create_safe_task"]
