"""Benefit model contract and the default bend-point formula."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Protocol

from .errors import ComputationError

logger = logging.getLogger(__name__)

# Bend points (monthly dollars) used when none are supplied.
DEFAULT_FIRST_BEND = 1174.0
DEFAULT_SECOND_BEND = 7078.0


class BenefitModel(Protocol):
    """What the chart needs from whatever computes benefits.

    All three methods must be deterministic and side-effect free for the
    duration of one render pass.
    """

    monthly_indexed_earnings: float

    def first_bend_point(self) -> float: ...

    def second_bend_point(self) -> float: ...

    def primary_insurance_amount_for_earnings(self, earnings: float) -> float: ...


@dataclass
class BendPointFormula:
    """Three-tier piecewise-linear benefit formula.

    Earnings up to ``first_bend`` accrue at ``rates[0]``, earnings between the
    bend points at ``rates[1]`` and anything above ``second_bend`` at
    ``rates[2]``.
    """

    monthly_indexed_earnings: float = 0.0
    first_bend: float = DEFAULT_FIRST_BEND
    second_bend: float = DEFAULT_SECOND_BEND
    rates: tuple = (0.90, 0.32, 0.15)

    def __post_init__(self) -> None:
        if not 0 <= self.first_bend <= self.second_bend:
            raise ValueError(
                f"Bend points must satisfy 0 <= first <= second "
                f"(got {self.first_bend}, {self.second_bend})"
            )
        if len(self.rates) != 3:
            raise ValueError(f"Expected three replacement rates, got {self.rates!r}")
        if self.monthly_indexed_earnings < 0:
            raise ValueError("monthly_indexed_earnings must be non-negative")

    def first_bend_point(self) -> float:
        return self.first_bend

    def second_bend_point(self) -> float:
        return self.second_bend

    def primary_insurance_amount_for_earnings(self, earnings: float) -> float:
        r1, r2, r3 = self.rates
        x = max(0.0, float(earnings))
        amount = r1 * min(x, self.first_bend)
        if x > self.first_bend:
            amount += r2 * (min(x, self.second_bend) - self.first_bend)
        if x > self.second_bend:
            amount += r3 * (x - self.second_bend)
        return amount


def evaluate_benefit(model: BenefitModel, earnings: float) -> float:
    """Evaluate ``model`` at ``earnings``, translating failures to ``ComputationError``."""

    try:
        value = model.primary_insurance_amount_for_earnings(earnings)
    except Exception as exc:
        logger.debug("Benefit evaluation raised at earnings=%r", earnings, exc_info=True)
        raise ComputationError(
            f"Benefit model failed for earnings {earnings!r}: {exc}"
        ) from exc
    try:
        finite = math.isfinite(value)
    except TypeError as exc:
        raise ComputationError(
            f"Benefit model returned a non-numeric value {value!r} for earnings {earnings!r}"
        ) from exc
    if not finite:
        raise ComputationError(
            f"Benefit model returned {value!r} for earnings {earnings!r}"
        )
    return float(value)


__all__ = [
    "DEFAULT_FIRST_BEND",
    "DEFAULT_SECOND_BEND",
    "BendPointFormula",
    "BenefitModel",
    "evaluate_benefit",
]
