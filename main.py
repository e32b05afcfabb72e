"""
main.py — Sorting Visualizer Flask App
========================================
The web server that powers the visualizer.

Routes:
  GET  /                        – main UI (one panel per algorithm)
  GET  /api/algorithms          – registry listing
  POST /api/<algo>/generate     – new random array for that panel
  POST /api/<algo>/start        – start that panel's sort
  GET  /api/<algo>/state        – current bars / controls / metrics (polled)

State management:
  create_app() builds one Visualizer per registered algorithm: a
  SortDriver bound to that algorithm's strategy, plus its BarCanvas,
  ControlPanel and Recorder.  All drivers share one LoopRunner, so every
  sort step runs on a single background asyncio loop.  Request handlers
  never touch a driver directly; they go through runner.call().

Run:
    python main.py
    gunicorn "main:create_app()"
"""

import asyncio
import logging
import random
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from flask import Blueprint, Flask, current_app, jsonify, render_template_string

import settings
from algorithms import AlgoInfo, list_algorithms
from engine import LoopRunner, Pacer, Recorder, SortDriver
from ui import (
    BarCanvas,
    ControlPanel,
    render_canvas,
    sort_controls,
    legend_panel,
    analytics_panel,
    pseudocode_viewer,
    algorithm_card,
)

logger = logging.getLogger(__name__)

bp = Blueprint("sorting", __name__)


def _configure_logging(level_name: str = settings.LOG_LEVEL) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    gunicorn_error = logging.getLogger("gunicorn.error")
    root = logging.getLogger()
    if gunicorn_error.handlers:
        root.handlers = gunicorn_error.handlers
        root.setLevel(level)
    else:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    logging.getLogger("werkzeug").setLevel(logging.WARNING)


# ---------------------------------------------------------------------------
# Visualizer — one driver + strategy pair and its surfaces
# ---------------------------------------------------------------------------
@dataclass
class Visualizer:
    info:     AlgoInfo
    driver:   SortDriver
    canvas:   BarCanvas
    controls: ControlPanel
    recorder: Recorder
    task:     Optional["asyncio.Task"] = field(default=None, repr=False)

    def snapshot(self) -> Dict[str, Any]:
        """Everything the page needs to redraw this panel."""
        return {
            "algo_key":   self.info.key,
            "is_sorting": self.driver.is_sorting,
            "values":     self.driver.array.snapshot(),
            "highlight":  self.driver.highlight_state.to_dict(),
            "controls":   self.controls.to_dict(),
            "svg":        render_canvas(self.canvas),
            "metrics":    self.recorder.metrics.to_dict(),
            "analytics":  analytics_panel(self.recorder.metrics),
        }


def build_visualizers(
    delay_ms: int = settings.SORT_DELAY_MS,
    length: int = settings.ARRAY_LENGTH,
    seed: Optional[int] = settings.RANDOM_SEED,
) -> Dict[str, Visualizer]:
    """One Visualizer per registered algorithm, each with a fresh array."""
    rng = random.Random(seed)
    visualizers: Dict[str, Visualizer] = {}
    for info in list_algorithms():
        canvas   = BarCanvas()
        controls = ControlPanel()
        recorder = Recorder(algo_key=info.key)
        driver   = SortDriver(
            display=canvas,
            controls=controls,
            strategy=info.fn,
            pacer=Pacer(delay_ms),
            rng=random.Random(rng.random()),
            length=length,
            recorder=recorder,
            name=info.key,
        )
        driver.generate()
        visualizers[info.key] = Visualizer(info, driver, canvas, controls, recorder)
    return visualizers


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    config = settings.as_dict()
    config.update(overrides or {})

    app = Flask(__name__)
    app.config.update(config)

    runner = LoopRunner()
    runner.start()
    visualizers = build_visualizers(
        delay_ms=config["SORT_DELAY_MS"],
        length=config["ARRAY_LENGTH"],
        seed=config["RANDOM_SEED"],
    )
    app.extensions["sorting"] = {"runner": runner, "visualizers": visualizers}
    app.register_blueprint(bp)

    logger.info(
        "built %d visualizers (delay=%dms, length=%d)",
        len(visualizers), config["SORT_DELAY_MS"], config["ARRAY_LENGTH"],
    )
    return app


def _runner() -> LoopRunner:
    return current_app.extensions["sorting"]["runner"]


def _visualizer(algo_key: str) -> Optional[Visualizer]:
    return current_app.extensions["sorting"]["visualizers"].get(algo_key)


def _unknown(algo_key: str):
    return jsonify({"error": f"Unknown algorithm: {algo_key}"}), 404


def _launch(vis: Visualizer) -> bool:
    """Runs on the loop thread.  Claims the session, then schedules the sort."""
    if not vis.driver.begin():
        return False
    vis.task = asyncio.get_running_loop().create_task(vis.driver.run_strategy())
    vis.task.add_done_callback(_log_task_failure)
    return True


def _log_task_failure(task: "asyncio.Task") -> None:
    if not task.cancelled() and task.exception() is not None:
        logger.error("sort task failed: %r", task.exception())


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@bp.route("/")
def index():
    runner = _runner()
    panels = []
    for info in list_algorithms():
        vis = _visualizer(info.key)
        state = runner.call(vis.snapshot)
        panels.append({
            "key":        info.key,
            "card":       algorithm_card(info),
            "svg":        state["svg"],
            "controls":   sort_controls(info.key, vis.controls),
            "pseudocode": pseudocode_viewer(info.pseudocode),
            "analytics":  state["analytics"],
        })

    return render_template_string(
        INDEX_TEMPLATE,
        panels=panels,
        legend=legend_panel(),
        delay_ms=current_app.config["SORT_DELAY_MS"],
    )


# ---------------------------------------------------------------------------
# API: Registry
# ---------------------------------------------------------------------------
@bp.route("/api/algorithms")
def api_algorithms():
    return jsonify([
        {
            "key":              a.key,
            "label":            a.label,
            "stable":           a.stable,
            "tags":             a.tags,
            "complexity_time":  a.complexity_time,
            "complexity_space": a.complexity_space,
            "description":      a.description,
            "pseudocode":       a.pseudocode,
        }
        for a in list_algorithms()
    ])


# ---------------------------------------------------------------------------
# API: Per-algorithm actions
# ---------------------------------------------------------------------------
@bp.route("/api/<algo_key>/generate", methods=["POST"])
def api_generate(algo_key: str):
    vis = _visualizer(algo_key)
    if vis is None:
        return _unknown(algo_key)

    runner = _runner()
    if not runner.call(vis.driver.generate):
        return jsonify({"error": "Sort in progress"}), 409
    return jsonify(runner.call(vis.snapshot))


@bp.route("/api/<algo_key>/start", methods=["POST"])
def api_start(algo_key: str):
    vis = _visualizer(algo_key)
    if vis is None:
        return _unknown(algo_key)

    started = _runner().call(_launch, vis)
    return jsonify({"started": started, "algo_key": algo_key})


@bp.route("/api/<algo_key>/state")
def api_state(algo_key: str):
    vis = _visualizer(algo_key)
    if vis is None:
        return _unknown(algo_key)
    return jsonify(_runner().call(vis.snapshot))


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Sorting Visualizer</title>
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
  <link href="https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;500;700&family=DM+Sans:wght@400;500;700&display=swap" rel="stylesheet">
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --bg-panel-hover: #1c2128;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9;
      --accent-teal: #06b6d4;
      --accent-emerald: #10b981;
      --glow-cyan: rgba(14, 165, 233, 0.4);
    }

    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      padding: 24px;
    }

    header { display: flex; align-items: baseline; gap: 16px; margin-bottom: 20px; }
    header h1 { font-size: 22px; }
    header .pace { color: var(--text-secondary); font-size: 13px; }

    #grid {
      display: grid;
      grid-template-columns: repeat(auto-fit, minmax(600px, 1fr));
      gap: 20px;
    }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 18px;
      margin-bottom: 16px;
    }

    .panel h3 {
      font-size: 13px;
      font-weight: 700;
      margin-bottom: 14px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
    }

    .algo-card h2 { font-size: 16px; color: var(--accent-cyan); }
    .algo-card .complexity { font-size: 12px; color: var(--text-secondary); margin: 4px 0; }
    .algo-card .tags { display: flex; gap: 6px; margin: 4px 0; }
    .algo-card .tag { font-size: 11px; padding: 1px 8px; border: 1px solid var(--border); border-radius: 10px; color: var(--text-secondary); }
    .algo-card .description { font-size: 13px; color: var(--text-secondary); margin-bottom: 12px; }

    .canvas { margin: 12px 0; }
    .canvas svg { max-width: 100%; border-radius: 8px; }

    .button-row { display: flex; gap: 8px; margin-bottom: 12px; }

    button {
      background: linear-gradient(135deg, var(--accent-cyan), var(--accent-teal));
      color: #fff;
      border: none;
      padding: 10px 16px;
      border-radius: 8px;
      cursor: pointer;
      font-size: 13px;
      font-weight: 600;
      font-family: 'DM Sans', sans-serif;
      box-shadow: 0 2px 8px rgba(6, 182, 212, 0.3);
    }
    button:disabled { opacity: 0.4; cursor: not-allowed; box-shadow: none; }

    .btn-primary { background: linear-gradient(135deg, var(--accent-emerald), #059669); }
    .btn-secondary { background: var(--bg-panel-hover); border: 1px solid var(--border); box-shadow: none; }

    .details { display: grid; grid-template-columns: 1fr 1fr; gap: 12px; }

    .code-block {
      background: var(--bg-darker);
      border: 1px solid var(--border);
      border-radius: 8px;
      padding: 12px;
      font-family: 'JetBrains Mono', 'Courier New', monospace;
      font-size: 12px;
      line-height: 1.6;
      white-space: pre;
      overflow-x: auto;
    }

    .analytics-panel table { font-size: 13px; width: 100%; }
    .analytics-panel td { padding: 2px 4px; color: var(--text-secondary); }
    .analytics-panel strong { color: var(--text-primary); }
    .placeholder { color: var(--text-secondary); font-size: 13px; }

    .legend { display: flex; flex-wrap: wrap; gap: 14px; font-size: 13px; }
    .legend-item { display: flex; align-items: center; gap: 6px; }
    .swatch { width: 14px; height: 14px; border-radius: 3px; display: inline-block; }
  </style>
</head>
<body>
  <header>
    <h1>Sorting Visualizer</h1>
    <span class="pace">{{ delay_ms }} ms per step</span>
  </header>

  {{ legend|safe }}

  <div id="grid">
    {% for p in panels %}
    <section class="panel" id="panel-{{ p.key }}" data-algo="{{ p.key }}">
      {{ p.card|safe }}
      <div class="canvas" id="{{ p.key }}-canvas">{{ p.svg|safe }}</div>
      {{ p.controls|safe }}
      <div class="details">
        {{ p.pseudocode|safe }}
        <div id="{{ p.key }}-analytics">{{ p.analytics|safe }}</div>
      </div>
    </section>
    {% endfor %}
  </div>

  <script>
    const POLL_MS = 100;
    const polling = {};

    async function post(url) {
      const res = await fetch(url, {method: 'POST'});
      return {status: res.status, data: await res.json()};
    }

    function apply(algo, state) {
      document.getElementById(algo + '-canvas').innerHTML = state.svg;
      document.getElementById(algo + '-analytics').innerHTML = state.analytics;
      document.getElementById(algo + '-generate').disabled = !state.controls.generate_enabled;
      document.getElementById(algo + '-start').disabled = !state.controls.start_enabled;
    }

    function poll(algo) {
      if (polling[algo]) return;
      polling[algo] = setInterval(async () => {
        const res = await fetch('/api/' + algo + '/state');
        const state = await res.json();
        apply(algo, state);
        if (!state.is_sorting) {
          clearInterval(polling[algo]);
          delete polling[algo];
        }
      }, POLL_MS);
    }

    document.querySelectorAll('.btn-generate').forEach(btn => {
      btn.addEventListener('click', async () => {
        const algo = btn.dataset.algo;
        const {status, data} = await post('/api/' + algo + '/generate');
        if (status === 200) apply(algo, data);
      });
    });

    document.querySelectorAll('.btn-start').forEach(btn => {
      btn.addEventListener('click', async () => {
        const algo = btn.dataset.algo;
        const {data} = await post('/api/' + algo + '/start');
        if (data.started) poll(algo);
      });
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
def main() -> None:
    _configure_logging()
    app = create_app()
    logger.info("Sorting Visualizer on http://%s:%d", settings.HOST, settings.PORT)
    # the reloader would fork a second process with its own event loop
    app.run(debug=settings.FLASK_DEBUG, host=settings.HOST, port=settings.PORT, use_reloader=False)


if __name__ == "__main__":
    main()
