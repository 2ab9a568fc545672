#!/usr/bin/env python3
import sys
from pathlib import Path
# Ensure local sibling imports work whether run as a script or with `-m`
sys.path.insert(0, str(Path(__file__).parent))
"""
radialgrid CLI
Renders radial grid diagrams (spokes, rings, background fill) to PNG files.
Usage: python src/main.py <command> [args]
"""

import argparse
import functools

from config import ConfigError, load_config
from layout import InvalidLayout, sector_metrics
from rendering import render_montage
from scenarios import (
    DEFAULT_CHART,
    DEFAULT_SPOKE_COUNTS,
    DEFAULT_TEXT,
    DEFAULT_TEXT_ANCHOR,
    ChartPoint,
    chart_scenario,
    default_scenarios,
    failed,
    fill_scenario,
    grid_scenarios,
    layout_summary,
    run_scenarios,
    text_scenario,
)
from utils.io_paths import get_output_dir
from utils.json_io import dump_json

DEFAULT_SECTOR_PAIRS = [(1.0, 1.0), (2.0, 1.0), (50.0, 1.0), (1.0, 4.0), (2.0, 4.0), (50.0, 4.0)]


def log_output(func):
    """Decorator to log console output to <output_dir>/run.log when --log is given."""
    @functools.wraps(func)
    def wrapper(args):
        if not getattr(args, 'log', False):
            return func(args)
        try:
            run_dir = get_output_dir(getattr(args, 'output_dir', None))
            log_file = run_dir / "run.log"
            f = open(log_file, 'w')
        except OSError as e:
            print(f"{args.command} failed: {e}")
            return 1
        original_stdout = sys.stdout
        with f:
            sys.stdout = f
            try:
                rc = func(args)
            finally:
                sys.stdout = original_stdout
        print(f"Log saved to {log_file}")
        return rc
    return wrapper


def _prepare(args):
    """Resolve (config, run_dir) for a render command."""
    config = load_config(getattr(args, 'config', None))
    run_dir = get_output_dir(getattr(args, 'output_dir', None))
    return config, run_dir


def _finish(results) -> int:
    bad = failed(results)
    if bad:
        print(f"{len(bad)} of {len(results)} scenario(s) failed.")
        return 1
    return 0


def _chart_points(args):
    labels = getattr(args, 'labels', None) or [p.label for p in DEFAULT_CHART]
    values = getattr(args, 'values', None)
    if values is None:
        defaults = {p.label: p.value for p in DEFAULT_CHART}
        values = [defaults.get(lbl, 0.0) for lbl in labels]
    if len(values) != len(labels):
        raise InvalidLayout(f"{len(labels)} labels but {len(values)} values")
    return [ChartPoint(lbl, float(v)) for lbl, v in zip(labels, values)]


@log_output
def render_lines(args):
    """Render line{N}.png grids for each requested spoke count."""
    try:
        config, run_dir = _prepare(args)
        results = run_scenarios(grid_scenarios(config, args.spokes), run_dir)
    except (ConfigError, OSError) as e:
        print(f"line failed: {e}")
        return 1
    return _finish(results)


@log_output
def render_chart(args):
    """Render chart{N}.png with one labelled spoke per data point."""
    try:
        config, run_dir = _prepare(args)
        points = _chart_points(args)
        results = run_scenarios([chart_scenario(config, points)], run_dir)
    except (ConfigError, InvalidLayout, OSError) as e:
        print(f"chart failed: {e}")
        return 1
    return _finish(results)


@log_output
def render_text(args):
    try:
        config, run_dir = _prepare(args)
        results = run_scenarios([text_scenario(config, args.text, (args.x, args.y))], run_dir)
    except (ConfigError, OSError) as e:
        print(f"text failed: {e}")
        return 1
    return _finish(results)


@log_output
def render_fill(args):
    try:
        config, run_dir = _prepare(args)
        results = run_scenarios([fill_scenario(config)], run_dir)
    except (ConfigError, OSError) as e:
        print(f"fill failed: {e}")
        return 1
    return _finish(results)


@log_output
def render_all(args):
    """Render every scenario, write manifest.json and optionally a montage."""
    try:
        config, run_dir = _prepare(args)
    except (ConfigError, OSError) as e:
        print(f"all failed: {e}")
        return 1
    results = run_scenarios(default_scenarios(config), run_dir)

    layouts = {}
    for entry in results:
        if entry['status'] != 'ok':
            continue
        params = entry.get('params') or {}
        try:
            if 'spokes' in params:
                layouts[entry['name']] = layout_summary(config, params['spokes'])
            elif 'points' in params:
                labels = [p['label'] for p in params['points']]
                layouts[entry['name']] = layout_summary(config, len(labels), labels)
        except InvalidLayout as e:
            print(f"[Warning] No layout summary for {entry['name']}: {e}")
    manifest = {
        'config': config.as_dict(),
        'output_dir': str(run_dir),
        'scenarios': results,
        'layouts': layouts,
    }
    manifest_path = run_dir / 'manifest.json'
    try:
        dump_json(manifest_path, manifest)
        print(f"Manifest saved to {manifest_path}")
    except OSError as e:
        print(f"[Warning] Failed to write manifest: {e}")

    if getattr(args, 'montage', False):
        written = [r['file'] for r in results if r['status'] == 'ok']
        if written:
            try:
                out = render_montage(written, run_dir / 'montage.png')
                print(f"Montage saved to {out}")
            except (OSError, ValueError) as e:
                print(f"[Warning] Montage failed: {e}")
    return _finish(results)


def sector_math(args):
    """Print area, arc length and central angle of circle sectors."""
    if args.radius or args.div:
        radii = args.radius or [1.0]
        divs = args.div or [1.0]
        pairs = [(r, d) for d in divs for r in radii]
    else:
        pairs = DEFAULT_SECTOR_PAIRS
    for r, d in pairs:
        try:
            m = sector_metrics(r, d)
        except InvalidLayout as e:
            print(f"sector_math failed: {e}")
            return 1
        print(f"radius:{m.radius:f}, div:{m.divisions:f}, area:{m.area:f}, arc:{m.arc:f}, theta:{m.theta:f}")
    return 0


def _add_common(p):
    p.add_argument("--output-dir", help="Output directory (default: img/)")
    p.add_argument("--config", help="JSON file overriding render geometry (width, height, radius_ratio, divisions, radial_step, arc_spacing)")
    p.add_argument("--log", action="store_true", help="Write console output to <output-dir>/run.log")


def build_parser():
    parser = argparse.ArgumentParser(
        description="radialgrid: render radial grid diagrams to PNG"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    line_parser = subparsers.add_parser("line", help="Render grids with numbered spokes (line{N}.png)")
    line_parser.add_argument("--spokes", type=int, nargs='+', default=list(DEFAULT_SPOKE_COUNTS), help="Spoke counts to render (default: 3 4 5 6)")
    _add_common(line_parser)
    line_parser.set_defaults(func=render_lines)

    chart_parser = subparsers.add_parser("chart", help="Render a labelled spoke chart (chart{N}.png)")
    chart_parser.add_argument("--labels", nargs='+', help="Spoke labels (default: ATK DEF MAT)")
    chart_parser.add_argument("--values", type=float, nargs='+', help="Data values, one per label (recorded, not drawn)")
    _add_common(chart_parser)
    chart_parser.set_defaults(func=render_chart)

    text_parser = subparsers.add_parser("text", help="Render a single label (text.png)")
    text_parser.add_argument("--text", default=DEFAULT_TEXT, help=f"Label text (default: {DEFAULT_TEXT!r})")
    text_parser.add_argument("--x", type=int, default=DEFAULT_TEXT_ANCHOR[0], help="Anchor x (default: 20)")
    text_parser.add_argument("--y", type=int, default=DEFAULT_TEXT_ANCHOR[1], help="Anchor y (default: 30)")
    _add_common(text_parser)
    text_parser.set_defaults(func=render_text)

    fill_parser = subparsers.add_parser("fill", help="Render only the radial background fill (fill_background.png)")
    _add_common(fill_parser)
    fill_parser.set_defaults(func=render_fill)

    all_parser = subparsers.add_parser("all", help="Render every scenario and write manifest.json")
    all_parser.add_argument("--montage", action="store_true", help="Also compose all images into montage.png")
    _add_common(all_parser)
    all_parser.set_defaults(func=render_all)

    sector_parser = subparsers.add_parser("sector_math", help="Print circle sector area/arc/theta")
    sector_parser.add_argument("--radius", type=float, nargs='+', help="Radii (default: the 1/2/50 x 1/4 table)")
    sector_parser.add_argument("--div", type=float, nargs='+', help="Sector counts")
    sector_parser.set_defaults(func=sector_math)
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0
    return args.func(args) if getattr(args, 'func', None) else 0


if __name__ == "__main__":
    sys.exit(main())
