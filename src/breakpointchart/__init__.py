"""Breakpoint chart package entry points."""
from __future__ import annotations

import sys

# Avoid leaving ``__pycache__`` folders behind when the chart runs.
sys.dont_write_bytecode = True

from .benefit import BendPointFormula, BenefitModel
from .chart import BreakpointChart
from .cli import build_parser, run_cli
from .errors import ChartError, ComputationError, NotInitializedError
from .interaction import PointerEvent, TrackingState

__all__ = [
    "BendPointFormula",
    "BenefitModel",
    "BreakpointChart",
    "ChartError",
    "ComputationError",
    "NotInitializedError",
    "PointerEvent",
    "TrackingState",
    "build_parser",
    "main",
    "main_cli",
    "run_cli",
    "run_gui",
]


def run_gui() -> None:
    # Tk is only imported when the GUI is actually requested.
    from .gui.app import run

    run()


def main(argv=None) -> None:
    """Console entry point supporting both CLI and GUI modes."""

    parser = build_parser()
    default_args = parser.parse_args([])
    args = parser.parse_args(argv)

    if args.gui:
        run_gui()
        return

    if args.cli:
        run_cli(args)
        return

    cli_fields = ["probe", "output", "csv", "samples", "engine", "dpi"]
    if any(getattr(args, field) != getattr(default_args, field) for field in cli_fields):
        parser.error("CLI options require --cli; add --cli to run command-line mode.")

    run_gui()


def main_cli(argv=None) -> None:
    """Dedicated console entry point for CLI usage."""

    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.cli:
        args.cli = True
    run_cli(args)
