"""
driver.py — Sort Visualization Driver
=======================================
The SortDriver is the ONLY object an algorithm touches while it runs.
It owns the WorkingArray, pushes every change to the display, paces
each visible step, and guards against two sorts running at once.

State machine:
    IDLE     →  begin() / start_sorting()  →  RUNNING
    RUNNING  →  finish()                   →  IDLE
    RUNNING  →  begin() / start_sorting()  →  RUNNING   (ignored, returns False)
    RUNNING  →  generate()                 →  RUNNING   (ignored, returns False)

There is no cancellation: once started, a sort runs to completion.

Concurrency:
  Cooperative, single event loop.  begin() claims the running flag
  synchronously, before the first await in start_sorting(), so a second
  start scheduled on the same loop always sees it.  The driver is NOT
  thread-safe; callers on other threads go through engine.runner.LoopRunner.
"""

import logging
import random
from enum import Enum
from typing import Awaitable, Callable, Iterable, Optional

from bars import WorkingArray, HighlightState, EMPTY_HIGHLIGHT, ARRAY_LENGTH
from engine.pacing import Pacer
from engine.recorder import Recorder
from engine.surfaces import DisplaySurface, ControlSurface

logger = logging.getLogger(__name__)


# An algorithm is any coroutine function that takes the driver.
Strategy = Callable[["SortDriver"], Awaitable[None]]


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class SessionState(Enum):
    IDLE    = "idle"
    RUNNING = "running"


# ---------------------------------------------------------------------------
# Driver
# ---------------------------------------------------------------------------
class SortDriver:
    """
    Attributes:
        array     : The WorkingArray currently on display.
        state     : Current SessionState.
        highlight_state : The HighlightState last pushed to the display.
        recorder  : Optional Recorder that sees every primitive call.
    """

    def __init__(
        self,
        display: DisplaySurface,
        controls: ControlSurface,
        strategy: Optional[Strategy] = None,
        pacer: Optional[Pacer] = None,
        rng: Optional[random.Random] = None,
        length: int = ARRAY_LENGTH,
        recorder: Optional[Recorder] = None,
        name: str = "",
    ):
        self.display:   DisplaySurface    = display
        self.controls:  ControlSurface    = controls
        self.strategy:  Optional[Strategy] = strategy
        self.pacer:     Pacer             = pacer or Pacer()
        self.recorder:  Optional[Recorder] = recorder
        self.name:      str               = name or getattr(strategy, "__name__", "driver")

        self._rng:      random.Random     = rng or random.Random()
        self._length:   int               = length

        self.array:           WorkingArray   = WorkingArray()
        self.state:           SessionState   = SessionState.IDLE
        self.highlight_state: HighlightState = EMPTY_HIGHLIGHT

    # ------------------------------------------------------------------
    # Array lifecycle
    # ------------------------------------------------------------------
    def generate(self) -> bool:
        """
        Replace the array with a fresh random one and clear highlights.
        Refused (returns False) while a sort is running.
        """
        if self.is_sorting:
            logger.debug("%s: generate ignored, sort in progress", self.name)
            return False
        self.load(WorkingArray.generate(self._length, rng=self._rng))
        return True

    def load(self, array: WorkingArray) -> bool:
        """Put a caller-supplied array on display.  Same guard as generate()."""
        if self.is_sorting:
            logger.debug("%s: load ignored, sort in progress", self.name)
            return False
        self.array = array
        self.display.render(array.snapshot())
        self._paint(EMPTY_HIGHLIGHT)
        return True

    # ------------------------------------------------------------------
    # Rendering primitives
    # ------------------------------------------------------------------
    def highlight(self, state: HighlightState) -> None:
        """Mark exactly the indices named in `state`; clear the rest."""
        self._paint(state)
        if self.recorder:
            self.recorder.on_highlight(state)

    def refresh(self, indices: Iterable[int]) -> None:
        """Re-draw height + label for the given indices."""
        max_value = self.array.max_value()
        for i in indices:
            self.display.update_bar(i, self.array[i], max_value)

    def assign(self, index: int, value: int) -> None:
        """Write one element without re-drawing; follow with refresh()."""
        self.array[index] = value
        if self.recorder:
            self.recorder.on_assign(index, value)

    async def swap(self, i: int, j: int) -> None:
        """Exchange two elements, re-draw both, then pause once."""
        self.array.swap(i, j)
        self.refresh((i, j))
        if self.recorder:
            self.recorder.on_swap(i, j)
        await self.pacer.pause()

    async def pause(self) -> None:
        """Hold the current picture for one pacing interval."""
        if self.recorder:
            self.recorder.on_pause()
        await self.pacer.pause()

    # ------------------------------------------------------------------
    # Sort lifecycle
    # ------------------------------------------------------------------
    def begin(self) -> bool:
        """
        Claim the session for a sort: IDLE → RUNNING, controls off,
        recorder reset.  Returns False if a sort already holds it.
        Synchronous, so two claims on the same loop can never both win.
        """
        if self.strategy is None:
            raise NotImplementedError(
                f"{self.name}: no sorting strategy bound to this driver"
            )
        if self.is_sorting:
            logger.debug("%s: start ignored, sort already running", self.name)
            return False

        self.state = SessionState.RUNNING
        self.controls.set_controls_enabled(False)
        if self.recorder:
            self.recorder.begin(self.array.snapshot())
        logger.info("%s: sorting %s", self.name, self.array.snapshot())
        return True

    async def run_strategy(self) -> None:
        """Await the bound strategy.  Call only after a successful begin()."""
        try:
            await self.strategy(self)
        except Exception:
            logger.exception("%s: strategy failed mid-sort", self.name)
            # No finish() ran, so the panel stays RUNNING until restart.
            raise

    async def start_sorting(self) -> bool:
        """
        Run the bound strategy to completion.  Returns False (and does
        nothing) if a sort is already running.
        """
        if not self.begin():
            return False
        await self.run_strategy()
        return True

    def finish(self) -> None:
        """Mark everything sorted and go back to IDLE."""
        self._paint(HighlightState(sorted_prefix_count=len(self.array)))
        self.state = SessionState.IDLE
        self.controls.set_controls_enabled(True)
        if self.recorder:
            self.recorder.on_finish(self.array.snapshot())
        logger.info("%s: finished %s", self.name, self.array.snapshot())

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def is_sorting(self) -> bool:
        return self.state == SessionState.RUNNING

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _paint(self, state: HighlightState) -> None:
        self.highlight_state = state
        for i in range(len(self.array)):
            self.display.set_roles(i, state.roles_for(i))
