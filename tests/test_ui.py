from bars import Role
from engine import RunMetrics
from algorithms import get_algorithm
from ui import (
    Bar,
    BarCanvas,
    ControlPanel,
    render_canvas,
    bar_fill,
    sort_controls,
    legend_panel,
    analytics_panel,
    pseudocode_viewer,
    algorithm_card,
)
from ui.canvas import CONFIG


def test_bar_heights_are_proportional_to_the_max():
    canvas = BarCanvas()
    canvas.render([50, 100, 25])
    assert [b.height for b in canvas.bars] == [125, 250, 62.5]


def test_update_bar_changes_height_and_label():
    canvas = BarCanvas()
    canvas.render([10, 20])
    canvas.update_bar(0, 20, 20)
    assert canvas.bars[0].value == 20
    assert canvas.bars[0].height == 250


def test_set_roles_replaces_previous_roles():
    canvas = BarCanvas()
    canvas.render([1, 2])
    canvas.set_roles(0, {Role.CURRENT})
    canvas.set_roles(0, {Role.SORTED})
    assert canvas.bars[0].roles == {Role.SORTED}


def test_render_canvas_emits_one_group_per_bar_with_role_classes():
    canvas = BarCanvas()
    canvas.render([3, 7])
    canvas.set_roles(1, {Role.COMPARING, Role.CURRENT})
    svg = render_canvas(canvas)
    assert svg.startswith("<svg")
    assert svg.count('<g class="bar') == 2
    assert '<g class="bar comparing current" data-index="1">' in svg
    assert ">7</text>" in svg


def test_render_empty_canvas():
    svg = render_canvas(BarCanvas())
    assert '<g class="bar' not in svg
    assert svg.endswith("</svg>")


def test_fill_follows_role_priority():
    assert bar_fill(Bar(1, 1)) == CONFIG.role_colors["default"]
    assert bar_fill(Bar(1, 1, {Role.SORTED})) == CONFIG.role_colors["sorted"]
    assert bar_fill(Bar(1, 1, {Role.SORTED, Role.COMPARING})) == CONFIG.role_colors["comparing"]
    assert bar_fill(Bar(1, 1, {Role.MIN, Role.CURRENT})) == CONFIG.role_colors["current"]


def test_control_panel_toggles_both_buttons():
    panel = ControlPanel()
    panel.set_controls_enabled(False)
    assert panel.to_dict() == {"generate_enabled": False, "start_enabled": False}
    html = sort_controls("bubble", panel)
    assert html.count("disabled") == 2

    panel.set_controls_enabled(True)
    assert "disabled" not in sort_controls("bubble", panel)


def test_legend_lists_every_role():
    html = legend_panel()
    for label in ("Unsorted", "Sorted", "Current", "Minimum", "Comparing"):
        assert label in html


def test_analytics_placeholder_until_finished():
    assert "Start a sort" in analytics_panel(None)
    assert "Start a sort" in analytics_panel(RunMetrics())
    html = analytics_panel(RunMetrics(highlights=45, swaps=7, finished=True))
    assert "<strong>45</strong>" in html
    assert "<strong>7</strong>" in html


def test_pseudocode_is_escaped():
    html = pseudocode_viewer(["if a < b:"])
    assert "a &lt; b" in html
    assert pseudocode_viewer([]) == ""


def test_algorithm_card():
    html = algorithm_card(get_algorithm("bubble"))
    assert "Bubble Sort" in html
    assert "stable" in html


def test_algorithm_card_lists_tags():
    html = algorithm_card(get_algorithm("insertion"))
    assert '<span class="tag">adaptive</span>' in html
    assert '<span class="tag">in-place</span>' in html
