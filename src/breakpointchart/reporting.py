"""Reporting helpers such as CSV export of sampled curves."""
from __future__ import annotations

import csv
from typing import Iterable, List, Sequence

from .renderer import format_dollars
from .sampling import Sample

SAMPLE_HEADER = ("Earnings", "Benefit")


def export_samples_csv(path: str, samples: Iterable[Sample]) -> None:
    """Write ``(earnings, benefit)`` samples as whole-dollar CSV rows."""

    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(SAMPLE_HEADER)
        for earnings, benefit in samples:
            writer.writerow([format(earnings, ".0f"), format(benefit, ".0f")])


def probe_table(samples: Sequence[Sample]) -> List[str]:
    """Render samples as ``Earnings | Benefit`` text lines."""

    lines = [" | ".join(SAMPLE_HEADER)]
    for earnings, benefit in samples:
        lines.append(f"{format_dollars(earnings)} | {format_dollars(benefit)}")
    return lines


__all__ = ["SAMPLE_HEADER", "export_samples_csv", "probe_table"]
