"""Command-line interface for the breakpoint chart."""
from __future__ import annotations

import argparse
import math
import sys
from typing import List, Tuple

from .benefit import DEFAULT_FIRST_BEND, DEFAULT_SECOND_BEND, BendPointFormula, evaluate_benefit
from .chart import BreakpointChart
from .errors import ChartError
from .parsing import parse_bend_points, parse_dollars
from .reporting import export_samples_csv, probe_table
from .sampling import resolve_use_numpy, sample_curve
from .surface import MatplotlibSurface


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="breakpoint-chart")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--cli", action="store_true", help="Run in CLI mode")
    mode.add_argument("--gui", action="store_true", help="Run GUI")
    parser.add_argument("--earnings", default="3000", help="Monthly indexed earnings of the subject (e.g. '$3,000')")
    parser.add_argument(
        "--bend-points",
        default=f"{DEFAULT_FIRST_BEND:g},{DEFAULT_SECOND_BEND:g}",
        help="First and second bend points, 'first,second' (use ';' to keep thousands separators)",
    )
    parser.add_argument("--width", type=int, default=600, help="Chart width in pixels")
    parser.add_argument("--height", type=int, default=300, help="Chart height in pixels")
    parser.add_argument("--dpi", type=float, default=100.0)
    parser.add_argument(
        "--probe",
        action="append",
        default=[],
        help="Extra earnings value to annotate (repeatable)",
    )
    parser.add_argument("--output", default="breakpoint-chart.png", help="PNG file to write (CLI)")
    parser.add_argument("--csv", default="", help="Optional CSV file for a sampled curve table")
    parser.add_argument("--samples", type=int, default=11, help="Number of curve samples for --csv")
    parser.add_argument(
        "--engine",
        choices=["auto", "numpy", "python"],
        default="auto",
        help="Sampling engine: auto prefers NumPy when available",
    )
    return parser


def _probe_row(model: BendPointFormula, earnings: float) -> Tuple[float, float]:
    return math.floor(earnings), math.floor(evaluate_benefit(model, earnings))


def _render(args: argparse.Namespace) -> None:
    first, second = parse_bend_points(args.bend_points)
    model = BendPointFormula(
        monthly_indexed_earnings=parse_dollars(args.earnings),
        first_bend=first,
        second_bend=second,
    )
    probes: List[float] = [parse_dollars(p) for p in args.probe]

    surface = MatplotlibSurface(args.width, args.height, args.dpi)
    chart = BreakpointChart()
    chart.set_surface(surface)
    chart.set_benefit_model(model)
    chart.render()
    for earnings in probes:
        chart.add_probe(earnings)
    surface.save(args.output)
    print(f"Saved chart to {args.output}")

    rows = [_probe_row(model, model.monthly_indexed_earnings)]
    rows.extend(_probe_row(model, e) for e in probes)
    print("\nPROBES")
    for line in probe_table(rows):
        print(line)

    if args.csv:
        try:
            use_numpy = resolve_use_numpy(args.engine)
        except RuntimeError as exc:
            print(f"Warning: {exc} Falling back to pure Python engine.", file=sys.stderr)
            use_numpy = False
        max_x = chart.viewport.max_rendered_x_dollars()
        export_samples_csv(args.csv, sample_curve(model, max_x, args.samples, use_numpy))
        print(f"Wrote {args.samples} samples to {args.csv}")


def run_cli(args: argparse.Namespace) -> None:
    try:
        _render(args)
    except (ChartError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc


__all__ = ["build_parser", "run_cli"]
