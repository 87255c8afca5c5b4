"""
frame_loop.py: One-shot frame callbacks driven by the host's display refresh.
"""

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

FrameCallback = Callable[[float], None]


class FrameScheduler:
    """
    Holds at most one pending frame callback. The host calls pump() once per
    display refresh; the callback runs once and must request again to continue.
    """

    def __init__(self):
        self._pending: Optional[FrameCallback] = None

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def request(self, callback: FrameCallback):
        self._pending = callback

    def cancel(self):
        """Drops the pending callback. Safe to call repeatedly."""
        if self._pending is not None:
            logger.debug("Frame loop halted")
        self._pending = None

    def pump(self, timestamp_ms: float) -> bool:
        """Runs the pending callback, if any. Returns whether one ran."""
        callback = self._pending
        if callback is None:
            return False
        self._pending = None
        callback(timestamp_ms)
        return True
