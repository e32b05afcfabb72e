"""
controls.py — UI Control Panels
=================================
ControlPanel is the live control surface the driver toggles (it
implements engine.surfaces.ControlSurface).  Everything else here is a
pure function that takes state and returns HTML.

Panels:
  • sort_controls      – generate / start buttons for one algorithm
  • legend_panel       – what each bar color means
  • analytics_panel    – highlights, swaps, writes, wall time
  • pseudocode_viewer  – the algorithm's pseudocode
  • algorithm_card     – label, complexity, one-line description

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from html import escape
from typing import Any, Dict, List, Optional

from algorithms import AlgoInfo
from bars import Role
from engine import RunMetrics
from ui.canvas import CanvasConfig, CONFIG


# ---------------------------------------------------------------------------
# ControlPanel — the control surface
# ---------------------------------------------------------------------------
class ControlPanel:
    """
    Attributes:
        generate_enabled : Whether "New Array" may be clicked.
        start_enabled    : Whether "Start" may be clicked.
    """

    def __init__(self):
        self.generate_enabled: bool = True
        self.start_enabled:    bool = True

    def set_controls_enabled(self, enabled: bool) -> None:
        self.generate_enabled = enabled
        self.start_enabled    = enabled

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generate_enabled": self.generate_enabled,
            "start_enabled":    self.start_enabled,
        }


# ---------------------------------------------------------------------------
# Sort Controls
# ---------------------------------------------------------------------------
def sort_controls(algo_key: str, panel: ControlPanel) -> str:
    gen_disabled   = '' if panel.generate_enabled else 'disabled'
    start_disabled = '' if panel.start_enabled else 'disabled'

    return f"""
    <div class="button-row sort-controls" data-algo="{algo_key}">
      <button id="{algo_key}-generate" class="btn-secondary btn-generate" data-algo="{algo_key}" {gen_disabled}>⟳ New Array</button>
      <button id="{algo_key}-start" class="btn-primary btn-start" data-algo="{algo_key}" {start_disabled}>▶ Start</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Legend
# ---------------------------------------------------------------------------
def legend_panel(config: CanvasConfig = CONFIG) -> str:
    labels = {
        "default":            "Unsorted",
        Role.SORTED.value:    "Sorted",
        Role.CURRENT.value:   "Current",
        Role.MIN.value:       "Minimum",
        Role.COMPARING.value: "Comparing",
    }
    items = []
    for key, label in labels.items():
        color = config.role_colors[key]
        items.append(
            f'<span class="legend-item"><span class="swatch" style="background: {color};"></span>{label}</span>'
        )
    return f"""
    <div class="panel legend-panel">
      <h3>🎨 Legend</h3>
      <div class="legend">{''.join(items)}</div>
    </div>
    """


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(metrics: Optional[RunMetrics] = None) -> str:
    if not metrics or not metrics.finished:
        return """
        <div class="analytics-panel">
          <p class="placeholder">Start a sort to see metrics.</p>
        </div>
        """

    return f"""
    <div class="analytics-panel">
      <table>
        <tr><td>Highlight Steps:</td><td><strong>{metrics.highlights}</strong></td></tr>
        <tr><td>Swaps:</td><td><strong>{metrics.swaps}</strong></td></tr>
        <tr><td>Writes:</td><td><strong>{metrics.writes}</strong></td></tr>
        <tr><td>Paced Steps:</td><td><strong>{metrics.paced_intervals}</strong></td></tr>
        <tr><td>Wall Time:</td><td><strong>{metrics.wall_time_ms / 1000:.1f} s</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(pseudocode_lines: List[str]) -> str:
    if not pseudocode_lines:
        return ""

    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        lines_html.append(f'<div class="code-line" data-line="{i}">{escape(line)}</div>')

    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Card
# ---------------------------------------------------------------------------
def algorithm_card(info: AlgoInfo) -> str:
    stable = "stable" if info.stable else "not stable"
    tags = "".join(f'<span class="tag">{escape(t)}</span>' for t in info.tags)
    return f"""
    <div class="algo-card">
      <h2>{escape(info.label)}</h2>
      <p class="complexity">Time {info.complexity_time} · Space {info.complexity_space} · {stable}</p>
      <div class="tags">{tags}</div>
      <p class="description">{escape(info.description)}</p>
    </div>
    """
