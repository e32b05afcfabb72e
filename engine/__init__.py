"""
engine/
-------
Driving & recording layer.

    from engine import SortDriver, Pacer, Recorder, LoopRunner
"""

from engine.pacing   import Pacer, DEFAULT_DELAY_MS
from engine.recorder import Recorder, RunMetrics, TraceEvent
from engine.surfaces import DisplaySurface, ControlSurface
from engine.driver   import SortDriver, SessionState, Strategy
from engine.runner   import LoopRunner

__all__ = [
    "Pacer",
    "DEFAULT_DELAY_MS",
    "Recorder",
    "RunMetrics",
    "TraceEvent",
    "DisplaySurface",
    "ControlSurface",
    "SortDriver",
    "SessionState",
    "Strategy",
    "LoopRunner",
]
