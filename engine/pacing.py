"""
pacing.py — Timed Suspension
==============================
Every visible step in a sort is followed by one fixed pause so the
learner can see it.  The Pacer is the single place that pause lives;
the driver awaits it from pause() and swap() and nowhere else.

The delay is fixed when the Pacer is built (from settings).  Nothing
changes it per call.

Tests pass delay_ms=0 or swap in a recording `sleep` coroutine.
"""

import asyncio
from typing import Awaitable, Callable, Optional


DEFAULT_DELAY_MS = 500


class Pacer:
    """
    Attributes:
        delay_ms : Milliseconds per pacing interval.
    """

    def __init__(
        self,
        delay_ms: int = DEFAULT_DELAY_MS,
        sleep: Optional[Callable[[float], Awaitable[None]]] = None,
    ):
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {delay_ms}")
        self._delay_ms = delay_ms
        self._sleep    = sleep or asyncio.sleep

    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    @property
    def delay_seconds(self) -> float:
        return self._delay_ms / 1000

    async def pause(self) -> None:
        """Suspend for one interval, yielding to the event loop."""
        await self._sleep(self.delay_seconds)
