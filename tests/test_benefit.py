from __future__ import annotations

import math

import pytest

from breakpointchart.benefit import BendPointFormula, evaluate_benefit
from breakpointchart.errors import ComputationError


def test_formula_applies_three_rates():
    formula = BendPointFormula(monthly_indexed_earnings=3000, first_bend=1000, second_bend=6000)
    assert formula.primary_insurance_amount_for_earnings(0) == 0
    assert formula.primary_insurance_amount_for_earnings(1000) == pytest.approx(900)
    assert formula.primary_insurance_amount_for_earnings(6000) == pytest.approx(900 + 0.32 * 5000)
    assert formula.primary_insurance_amount_for_earnings(8000) == pytest.approx(
        900 + 0.32 * 5000 + 0.15 * 2000
    )


def test_formula_rejects_unordered_bend_points():
    with pytest.raises(ValueError):
        BendPointFormula(first_bend=5000, second_bend=1000)


def test_formula_rejects_negative_earnings():
    with pytest.raises(ValueError):
        BendPointFormula(monthly_indexed_earnings=-1)


class _Broken:
    monthly_indexed_earnings = 0.0

    def __init__(self, result=None, exc=None):
        self.result = result
        self.exc = exc

    def primary_insurance_amount_for_earnings(self, earnings):
        if self.exc is not None:
            raise self.exc
        return self.result


def test_evaluate_wraps_model_exception():
    with pytest.raises(ComputationError) as info:
        evaluate_benefit(_Broken(exc=ZeroDivisionError("boom")), 10)
    assert isinstance(info.value.__cause__, ZeroDivisionError)


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, "12"])
def test_evaluate_rejects_non_finite(bad):
    with pytest.raises(ComputationError):
        evaluate_benefit(_Broken(result=bad), 10)


def test_evaluate_returns_float():
    assert evaluate_benefit(_Broken(result=7), 1) == 7.0
