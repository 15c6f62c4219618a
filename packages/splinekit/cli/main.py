"""Command-line interface for SplineKit.

Reads control points from a JSON or YAML file, builds the natural cubic
spline and prints coefficients, point values or sampled curves.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from splinekit.core.config.loader import configure_logging, load_app_config, load_points
from splinekit.core.config.models import AppConfig
from splinekit.core.spline import (
    OutOfDomainError,
    SplineCurve,
    SplineError,
    build,
    evaluate,
    sample_curve,
    sample_uniform,
)

console = Console()
logger = logging.getLogger(__name__)


def _load_curve(points_path: Path) -> SplineCurve:
    points = load_points(points_path)
    curve = build(points)
    logger.info("Built %d segments from %d points in %s", len(curve), len(points), points_path)
    return curve


def _print_samples(samples: list[tuple[float, float]], as_json: bool) -> None:
    if as_json:
        console.print_json(json.dumps([{"x": x, "y": y} for x, y in samples]))
        return

    table = Table(title="Samples")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    for x, y in samples:
        table.add_row(f"{x:.6g}", f"{y:.6g}")
    console.print(table)


def cmd_coeffs(args: argparse.Namespace, config: AppConfig) -> int:
    """Print per-segment coefficients."""
    curve = _load_curve(Path(args.points))

    if args.json:
        console.print_json(json.dumps([seg.model_dump() for seg in curve.segments]))
        return 0

    if curve.is_empty:
        console.print("[yellow]Fewer than two points: nothing to interpolate[/yellow]")
        return 0

    table = Table(title=f"Natural cubic spline ({len(curve)} segments)")
    for column in ("#", "x1", "x2", "a", "b", "c", "d"):
        table.add_column(column, justify="right")
    for i, seg in enumerate(curve.segments):
        table.add_row(
            str(i),
            *(f"{v:.6g}" for v in (seg.x1, seg.x2, seg.a, seg.b, seg.c, seg.d)),
        )
    console.print(table)
    return 0


def cmd_eval(args: argparse.Namespace, config: AppConfig) -> int:
    """Evaluate the curve at each requested abscissa."""
    curve = _load_curve(Path(args.points))

    exit_code = 0
    for x in args.x:
        try:
            y = evaluate(curve, x)
        except OutOfDomainError as e:
            console.print(f"[red]ERROR: {escape(str(e))}[/red]")
            exit_code = 1
            continue
        console.print(f"S({x:g}) = {y:.10g}")
    return exit_code


def cmd_sample(args: argparse.Namespace, config: AppConfig) -> int:
    """Sample the curve uniformly or as a rendering polyline."""
    curve = _load_curve(Path(args.points))

    if args.count is not None:
        samples = sample_uniform(curve, args.count)
    else:
        samples = sample_curve(curve, config.sampling)

    _print_samples(samples, args.json)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="splinekit",
        description="SplineKit - natural cubic spline interpolation",
    )
    p.add_argument(
        "--config",
        default=None,
        help="Path to app config JSON/YAML (defaults apply when omitted)",
    )
    p.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    coeffs = sub.add_parser("coeffs", help="Print segment coefficients")
    coeffs.add_argument("points", help="Path to points file (.json, .yaml, .yml)")
    coeffs.add_argument("--json", action="store_true", help="Emit JSON instead of a table")
    coeffs.set_defaults(handler=cmd_coeffs)

    ev = sub.add_parser("eval", help="Evaluate the spline at given abscissas")
    ev.add_argument("points", help="Path to points file (.json, .yaml, .yml)")
    ev.add_argument("x", type=float, nargs="+", help="Abscissa(s) to evaluate")
    ev.set_defaults(handler=cmd_eval)

    sample = sub.add_parser("sample", help="Sample the spline")
    sample.add_argument("points", help="Path to points file (.json, .yaml, .yml)")
    sample.add_argument(
        "--count",
        type=int,
        default=None,
        help="Evenly spaced samples over the domain (default: rendering polyline)",
    )
    sample.add_argument("--json", action="store_true", help="Emit JSON instead of a table")
    sample.set_defaults(handler=cmd_sample)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    p = build_arg_parser()
    args = p.parse_args(argv)

    try:
        config = load_app_config(args.config)
    except ValueError as e:
        console.print(f"[red]ERROR: Could not load config: {escape(str(e))}[/red]")
        return 1

    if args.log_level:
        config.logging.level = args.log_level
    configure_logging(config)

    try:
        return args.handler(args, config)
    except FileNotFoundError as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1
    except SplineError as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1
    except ValueError as e:
        console.print(f"[red]ERROR: Invalid input: {escape(str(e))}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
