"""
One-shot timers for transient UI state.
"""

import asyncio
from typing import Callable, Optional, Protocol


class TimerHandle(Protocol):
    """A scheduled callback that can still be cancelled."""

    def cancel(self) -> None:
        ...


class TimerFacility(Protocol):
    """Schedules a callback once after a delay."""

    def schedule_once(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        ...


class LoopTimer:
    """Timer facility backed by an asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        """
        Initialize loop timer.

        Args:
            loop: Event loop to schedule on; the running loop when omitted
        """
        self.loop = loop

    def schedule_once(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        """
        Run callback once after delay seconds.

        Must be called from the loop's thread when no loop was given.
        """
        loop = self.loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)
