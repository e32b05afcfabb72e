"""
ui/
---
Presentation layer.

    from ui import BarCanvas, render_canvas
    from ui import ControlPanel, sort_controls, analytics_panel, …
"""

from ui.canvas import BarCanvas, Bar, CanvasConfig, render_canvas, bar_fill

from ui.controls import (
    ControlPanel,
    sort_controls,
    legend_panel,
    analytics_panel,
    pseudocode_viewer,
    algorithm_card,
)

__all__ = [
    "BarCanvas",
    "Bar",
    "CanvasConfig",
    "render_canvas",
    "bar_fill",
    "ControlPanel",
    "sort_controls",
    "legend_panel",
    "analytics_panel",
    "pseudocode_viewer",
    "algorithm_card",
]
