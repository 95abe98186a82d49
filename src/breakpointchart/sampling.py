"""Tabulate a benefit curve, optionally with NumPy."""
from __future__ import annotations

from typing import List, Tuple

from .benefit import BendPointFormula, BenefitModel, evaluate_benefit
from .errors import ComputationError

try:  # Optional NumPy support for vectorised sampling
    import numpy as _np  # type: ignore
except Exception:  # pragma: no cover - NumPy is optional at runtime
    _np = None

HAS_NUMPY = _np is not None

Sample = Tuple[float, float]


def resolve_use_numpy(engine: str) -> bool:
    """Return True if the NumPy engine should be used for sampling."""

    normalized = engine.lower()
    if normalized not in {"auto", "numpy", "python"}:
        raise ValueError(f"Unknown engine '{engine}' (expected auto/numpy/python)")
    if normalized == "numpy":
        if not HAS_NUMPY:
            raise RuntimeError("NumPy requested but not installed.")
        return True
    if normalized == "python":
        return False
    return HAS_NUMPY


def _check_count(count: int) -> None:
    if count < 2:
        raise ValueError(f"Need at least two samples, got {count}")


def sample_curve_py(model: BenefitModel, max_x: float, count: int) -> List[Sample]:
    """Evaluate ``model`` at ``count`` evenly spaced earnings in ``[0, max_x]``."""

    _check_count(count)
    step = max_x / (count - 1)
    out = []
    for idx in range(count):
        x = max_x if idx == count - 1 else idx * step
        out.append((x, evaluate_benefit(model, x)))
    return out


def sample_curve_np(model: BenefitModel, max_x: float, count: int) -> List[Sample]:
    """Vectorised sampling; only ``BendPointFormula`` has a closed form here."""

    if not HAS_NUMPY or not isinstance(model, BendPointFormula):
        return sample_curve_py(model, max_x, count)

    assert _np is not None  # for type checkers
    _check_count(count)
    xs = _np.linspace(0.0, float(max_x), count)
    r1, r2, r3 = model.rates
    first, second = model.first_bend, model.second_bend
    ys = (
        r1 * _np.clip(xs, 0.0, first)
        + r2 * _np.clip(xs - first, 0.0, second - first)
        + r3 * _np.maximum(xs - second, 0.0)
    )
    if not _np.all(_np.isfinite(ys)):
        raise ComputationError("Benefit curve produced non-finite samples")
    return [(float(x), float(y)) for x, y in zip(xs, ys)]


def sample_curve(model: BenefitModel, max_x: float, count: int, use_numpy: bool = True) -> List[Sample]:
    if use_numpy and HAS_NUMPY:
        return sample_curve_np(model, max_x, count)
    return sample_curve_py(model, max_x, count)


__all__ = [
    "HAS_NUMPY",
    "Sample",
    "resolve_use_numpy",
    "sample_curve",
    "sample_curve_np",
    "sample_curve_py",
]
