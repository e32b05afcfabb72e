"""
recorder.py — Run Recorder & Analytics
========================================
Watches one sort from start to finish and keeps a flat trace of every
primitive the algorithm asked the driver for.  The analytics card and
the tests both read from it.

Usage:
    rec    = Recorder()
    driver = SortDriver(canvas, controls, bubble_sort, recorder=rec)
    await driver.start_sorting()
    rec.metrics.highlights       # compare / highlight steps
    rec.swaps()                  # [(i, j), ...] in order

A Recorder only describes the single run on screen.  Starting a new run
on the same driver clears it.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from bars import HighlightState


# ---------------------------------------------------------------------------
# Trace event — one primitive call
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class TraceEvent:
    kind:      str                           # "highlight" | "swap" | "assign" | "pause" | "finish"
    highlight: Optional[HighlightState] = None
    indices:   Tuple[int, ...]          = ()
    value:     Optional[int]            = None


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:      str        = ""
    highlights:    int        = 0       # highlight steps (compare / mark)
    swaps:         int        = 0
    writes:        int        = 0       # single-slot assignments (insertion sort)
    pauses:        int        = 0       # explicit pauses, swaps excluded
    total_events:  int        = 0
    wall_time_ms:  float      = 0.0
    initial:       List[int]  = field(default_factory=list)
    final:         List[int]  = field(default_factory=list)
    finished:      bool       = False

    @property
    def paced_intervals(self) -> int:
        """Every swap paces once, every explicit pause paces once."""
        return self.swaps + self.pauses

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algo_key":        self.algo_key,
            "highlights":      self.highlights,
            "swaps":           self.swaps,
            "writes":          self.writes,
            "pauses":          self.pauses,
            "paced_intervals": self.paced_intervals,
            "total_events":    self.total_events,
            "wall_time_ms":    self.wall_time_ms,
            "initial":         list(self.initial),
            "final":           list(self.final),
            "finished":        self.finished,
        }


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        events  : Full list of TraceEvents from the current run.
        metrics : Running RunMetrics, final once `finished` is True.
    """

    def __init__(self, algo_key: str = ""):
        self.algo_key:    str              = algo_key
        self.events:      List[TraceEvent] = []
        self.metrics:     RunMetrics       = RunMetrics(algo_key=algo_key)
        self._start_time: float            = 0.0

    # ------------------------------------------------------------------
    # Driver hooks
    # ------------------------------------------------------------------
    def begin(self, initial: List[int]) -> None:
        self.events      = []
        self.metrics     = RunMetrics(algo_key=self.algo_key, initial=list(initial))
        self._start_time = time.monotonic()

    def on_highlight(self, state: HighlightState) -> None:
        self._record(TraceEvent("highlight", highlight=state))
        self.metrics.highlights += 1

    def on_swap(self, i: int, j: int) -> None:
        self._record(TraceEvent("swap", indices=(i, j)))
        self.metrics.swaps += 1

    def on_assign(self, index: int, value: int) -> None:
        self._record(TraceEvent("assign", indices=(index,), value=value))
        self.metrics.writes += 1

    def on_pause(self) -> None:
        self._record(TraceEvent("pause"))
        self.metrics.pauses += 1

    def on_finish(self, final: List[int]) -> None:
        self._record(TraceEvent("finish"))
        self.metrics.final        = list(final)
        self.metrics.finished     = True
        self.metrics.wall_time_ms = round((time.monotonic() - self._start_time) * 1000, 2)

    # ------------------------------------------------------------------
    # Trace queries
    # ------------------------------------------------------------------
    def highlights(self) -> List[HighlightState]:
        return [e.highlight for e in self.events if e.kind == "highlight"]

    def swaps(self) -> List[Tuple[int, int]]:
        return [e.indices for e in self.events if e.kind == "swap"]

    def kinds(self) -> List[str]:
        return [e.kind for e in self.events]

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _record(self, event: TraceEvent) -> None:
        self.events.append(event)
        self.metrics.total_events = len(self.events)
