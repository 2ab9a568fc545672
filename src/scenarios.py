from __future__ import annotations
"""
Render scenarios. Each one plans its layout first (raising InvalidLayout
before any pixel is touched), draws onto a fresh Canvas and returns it.
`run_scenarios` writes the canvases to PNG files one after another and keeps
going when a single scenario fails.
"""
from pathlib import Path
from typing import Callable, Dict, List, NamedTuple, Optional, Sequence, Tuple

from canvas import Canvas
from config import BACKGROUND, FILL_COLOR, LINE_COLOR, RenderConfig
from encoding.png_codec import ImageWriteError, write_png
from layout import InvalidLayout, Layout, check_radius, plan_layout
from rasterizer import draw_label, draw_radial_fill, draw_ring_outline, draw_spoke_line


class ChartPoint(NamedTuple):
    label: str
    value: float


class Scenario(NamedTuple):
    name: str
    filename: str
    render: Callable[[], Canvas]
    params: Dict


DEFAULT_SPOKE_COUNTS = (3, 4, 5, 6)
DEFAULT_CHART = (
    ChartPoint("ATK", 100.0),
    ChartPoint("DEF", 60.0),
    ChartPoint("MAT", 5.0),
)
DEFAULT_TEXT = "Hello Go"
DEFAULT_TEXT_ANCHOR = (20, 30)


def new_canvas(config: RenderConfig) -> Canvas:
    return Canvas(config.width, config.height, BACKGROUND)


def _draw_spokes(canvas: Canvas, layout: Layout, config: RenderConfig) -> None:
    for spoke in layout.spokes:
        draw_spoke_line(canvas, layout.center, spoke.angle, layout.radius, LINE_COLOR, config.radial_step)
        draw_label(canvas, spoke.anchor, spoke.label, LINE_COLOR)


def render_grid(spokes: int, config: RenderConfig) -> Canvas:
    """Background fill, `spokes` numbered spokes and ring outlines."""
    layout = plan_layout(config, spokes)
    canvas = new_canvas(config)
    draw_radial_fill(canvas, layout.center, layout.radius, FILL_COLOR)
    _draw_spokes(canvas, layout, config)
    draw_ring_outline(canvas, layout.center, layout.rings, LINE_COLOR, config.arc_spacing)
    return canvas


def render_chart(points: Sequence[ChartPoint], config: RenderConfig) -> Canvas:
    """One labelled spoke per data point plus ring outlines; no background fill."""
    labels = [p.label for p in points]
    layout = plan_layout(config, len(labels), labels)
    canvas = new_canvas(config)
    _draw_spokes(canvas, layout, config)
    draw_ring_outline(canvas, layout.center, layout.rings, LINE_COLOR, config.arc_spacing)
    return canvas


def render_text(text: str, anchor: Tuple[int, int], config: RenderConfig) -> Canvas:
    canvas = new_canvas(config)
    draw_label(canvas, anchor, text, LINE_COLOR)
    return canvas


def render_fill_background(config: RenderConfig) -> Canvas:
    radius = check_radius(config)
    canvas = new_canvas(config)
    draw_radial_fill(canvas, config.center, radius, FILL_COLOR)
    return canvas


def grid_scenarios(config: RenderConfig, counts: Sequence[int] = DEFAULT_SPOKE_COUNTS) -> List[Scenario]:
    return [
        Scenario(f"line{n}", f"line{n}.png", lambda n=n: render_grid(n, config), {'spokes': n})
        for n in counts
    ]


def chart_scenario(config: RenderConfig, points: Sequence[ChartPoint] = DEFAULT_CHART) -> Scenario:
    points = list(points)
    n = len(points)
    return Scenario(
        f"chart{n}", f"chart{n}.png",
        lambda: render_chart(points, config),
        {'points': [p._asdict() for p in points]},
    )


def text_scenario(
    config: RenderConfig,
    text: str = DEFAULT_TEXT,
    anchor: Tuple[int, int] = DEFAULT_TEXT_ANCHOR,
) -> Scenario:
    return Scenario("text", "text.png", lambda: render_text(text, anchor, config), {'text': text, 'anchor': list(anchor)})


def fill_scenario(config: RenderConfig) -> Scenario:
    return Scenario("fill_background", "fill_background.png", lambda: render_fill_background(config), {})


def default_scenarios(config: RenderConfig) -> List[Scenario]:
    return grid_scenarios(config) + [chart_scenario(config), text_scenario(config), fill_scenario(config)]


def run_scenarios(scenarios: Sequence[Scenario], output_dir) -> List[Dict]:
    """Render and write each scenario in order. Failures are reported and recorded, not raised."""
    out_dir = Path(output_dir)
    results = []
    for sc in scenarios:
        path = out_dir / sc.filename
        entry = {'name': sc.name, 'file': str(path), 'params': sc.params, 'status': 'ok', 'error': None}
        try:
            canvas = sc.render()
            write_png(canvas, path)
            print(f"Saved {path}")
        except (InvalidLayout, ImageWriteError) as e:
            entry['status'] = 'failed'
            entry['error'] = f"{type(e).__name__}: {e}"
            print(f"{sc.name} failed: {e}")
        results.append(entry)
    return results


def failed(results: Sequence[Dict]) -> List[Dict]:
    return [r for r in results if r.get('status') != 'ok']


def layout_summary(config: RenderConfig, total: Optional[int] = None, labels: Optional[Sequence[str]] = None) -> Dict:
    """Planned geometry for the manifest."""
    layout = plan_layout(config, total, labels)
    return {
        'center': list(layout.center),
        'radius': layout.radius,
        'rings': layout.rings,
        'spokes': [
            {'index': s.index, 'angle': s.angle, 'anchor': list(s.anchor), 'label': s.label}
            for s in layout.spokes
        ],
    }
