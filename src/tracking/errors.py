"""
Ferris Discord Bot - Tracking Errors
====================================

Author: حَـــــنَّـــــا
"""


class TrackerStateError(RuntimeError):
    """
    Raised when the engine is built or used without its shared state.

    DESIGN:
        This is a construction bug, not a runtime condition. Callers should
        let it propagate and stop the bot rather than handle it.
    """

    pass


__all__ = ["TrackerStateError"]
