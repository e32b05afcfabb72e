"""
canvas.py — Bar Chart Surface & SVG Renderer
==============================================
Two halves:

  • BarCanvas      – the live, in-memory bar model the driver draws on.
                     It implements engine.surfaces.DisplaySurface:
                     render / update_bar / set_roles.
  • render_canvas  – pure function: BarCanvas → SVG string.

Bar height is proportional to value / current max, scaled to
CanvasConfig.bar_max_height.  Every bar carries its numeric label and
one CSS class per role it holds, so the page stylesheet and the SVG
fill agree on what a role looks like.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Set

from bars import Role


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 560
    height: int = 300
    bg:     str = "#0d1117"

    # bars
    bar_max_height: int = 250
    bar_gap:        int = 6
    bar_radius:     int = 3

    # role → fill.  First match in ROLE_PRIORITY wins.
    role_colors: Dict[str, str] = {
        "default":   "#0ea5e9",   # cyan
        "sorted":    "#10b981",   # emerald
        "current":   "#f59e0b",   # amber
        "min":       "#a855f7",   # purple
        "comparing": "#f43f5e",   # rose
    }

    label_color:  str = "#e6edf3"
    label_size:   int = 12
    label_weight: str = "600"


CONFIG = CanvasConfig()

ROLE_PRIORITY: List[Role] = [Role.COMPARING, Role.CURRENT, Role.MIN, Role.SORTED]


# ---------------------------------------------------------------------------
# Bar — one rendered element
# ---------------------------------------------------------------------------
@dataclass
class Bar:
    value:  int
    height: float
    roles:  Set[Role] = field(default_factory=set)

    @property
    def css_classes(self) -> List[str]:
        return ["bar"] + sorted(r.value for r in self.roles)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value":  self.value,
            "height": self.height,
            "roles":  sorted(r.value for r in self.roles),
        }


# ---------------------------------------------------------------------------
# BarCanvas — the display surface
# ---------------------------------------------------------------------------
class BarCanvas:
    """
    Attributes:
        bars   : One Bar per array element, in index order.
        config : Visual config used for height scaling.
    """

    def __init__(self, config: CanvasConfig = CONFIG):
        self.config: CanvasConfig = config
        self.bars:   List[Bar]    = []

    def render(self, values: List[int]) -> None:
        max_value = max(values, default=0)
        self.bars = [Bar(value=v, height=self._height(v, max_value)) for v in values]

    def update_bar(self, index: int, value: int, max_value: int) -> None:
        bar = self.bars[index]
        bar.value  = value
        bar.height = self._height(value, max_value)

    def set_roles(self, index: int, roles: Set[Role]) -> None:
        self.bars[index].roles = set(roles)

    def values(self) -> List[int]:
        return [b.value for b in self.bars]

    def to_dict(self) -> Dict[str, Any]:
        return {"bars": [b.to_dict() for b in self.bars]}

    def _height(self, value: int, max_value: int) -> float:
        if max_value <= 0:
            return 0.0
        return round(value / max_value * self.config.bar_max_height, 2)


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_canvas(canvas: BarCanvas, config: CanvasConfig = CONFIG) -> str:
    """
    Returns an SVG string with one <g class="bar …"> per element.

    Args:
        canvas : The bar model to draw.
        config : Visual config.
    """
    svg_parts = [
        f'<svg width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">'
    ]
    svg_parts.append(
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>'
    )

    n = len(canvas.bars)
    if n:
        slot = config.width / n
        for index, bar in enumerate(canvas.bars):
            svg_parts.append(_render_bar(index, bar, slot, config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


# ---------------------------------------------------------------------------
# Bar Rendering
# ---------------------------------------------------------------------------
def _render_bar(index: int, bar: Bar, slot: float, config: CanvasConfig) -> str:
    fill = bar_fill(bar, config)

    w = max(slot - config.bar_gap, 1)
    x = index * slot + config.bar_gap / 2
    y = config.height - bar.height
    cx = x + w / 2
    # short bars get their label on top instead of inside
    label_y = y + 16 if bar.height >= 20 else y - 4

    parts = [
        f'<g class="{" ".join(bar.css_classes)}" data-index="{index}">',
        f'  <rect x="{x:.1f}" y="{y:.1f}" width="{w:.1f}" height="{bar.height}" '
        f'rx="{config.bar_radius}" fill="{fill}"/>',
        f'  <text x="{cx:.1f}" y="{label_y:.1f}" text-anchor="middle" '
        f'font-size="{config.label_size}" font-family="\'DM Sans\', sans-serif" '
        f'fill="{config.label_color}" font-weight="{config.label_weight}">{bar.value}</text>',
        '</g>',
    ]
    return "\n".join(parts)


def bar_fill(bar: Bar, config: CanvasConfig = CONFIG) -> str:
    """Fill color for the highest-priority role the bar holds."""
    for role in ROLE_PRIORITY:
        if role in bar.roles:
            return config.role_colors[role.value]
    return config.role_colors["default"]
