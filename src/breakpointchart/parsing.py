"""Input parsing helpers for dollar amounts and bend points."""
from __future__ import annotations

import math
from typing import Tuple


def parse_dollars(text: str) -> float:
    """Parse a non-negative dollar amount such as ``"$1,234.50"``."""

    cleaned = text.strip().replace(",", "").replace("$", "").strip()
    if not cleaned:
        raise ValueError("Expected a dollar amount, got an empty value")
    try:
        value = float(cleaned)
    except ValueError:
        raise ValueError(f"'{text.strip()}' is not a dollar amount") from None
    if not math.isfinite(value):
        raise ValueError(f"'{text.strip()}' is not a finite dollar amount")
    if value < 0:
        raise ValueError(f"Dollar amount must be non-negative, got {text.strip()}")
    return value


def parse_bend_points(text: str) -> Tuple[float, float]:
    """Parse ``"first,second"`` bend points.

    Use ``;`` as the separator to keep thousands separators in the amounts,
    e.g. ``"$1,174; $7,078"``.
    """

    separator = ";" if ";" in text else ","
    parts = [p for p in (s.strip() for s in text.split(separator)) if p]
    if len(parts) != 2:
        raise ValueError(
            f"Bend points must look like 'first,second' (got '{text.strip()}')"
        )
    first, second = (parse_dollars(p) for p in parts)
    if first > second:
        raise ValueError(f"First bend point {first:g} exceeds second {second:g}")
    return first, second


__all__ = ["parse_bend_points", "parse_dollars"]
