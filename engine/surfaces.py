"""
surfaces.py — What the Driver Talks To
========================================
The driver never draws anything itself.  It pushes changes to two
collaborators:

    DisplaySurface  – one bar per element; height / label / role markers
    ControlSurface  – the generate + start buttons' enabled state

Anything with these methods works (ui.canvas.BarCanvas and
ui.controls.ControlPanel in the app, plain fakes in tests).
"""

from typing import List, Protocol, Set

from bars import Role


class DisplaySurface(Protocol):
    def render(self, values: List[int]) -> None:
        """Rebuild every bar from a fresh array snapshot."""

    def update_bar(self, index: int, value: int, max_value: int) -> None:
        """Re-size and re-label one bar after its value changed."""

    def set_roles(self, index: int, roles: Set[Role]) -> None:
        """Replace the role markers on one bar."""


class ControlSurface(Protocol):
    def set_controls_enabled(self, enabled: bool) -> None:
        """Enable (idle) or disable (running) generate + start."""
