from __future__ import annotations

import math

import pytest

from breakpointchart.errors import ComputationError
from breakpointchart.viewport import (
    WIDEST_LABEL,
    DollarPoint,
    PixelPoint,
    Viewport,
    ViewportState,
    candidate_max_x,
    select_max_x,
)

from conftest import LinearModel


def make_viewport(surface, model, state=None):
    return Viewport(surface, model, state or ViewportState())


def test_select_adopts_candidate_without_previous():
    assert select_max_x(None, 100.0) == 100.0


@pytest.mark.parametrize("previous", [100.0, 80.0, 129.0, 77.0])
def test_select_keeps_previous_inside_band(previous):
    assert select_max_x(previous, 100.0) == previous


@pytest.mark.parametrize("previous", [131.0, 76.0, 1000.0, 1.0])
def test_select_adopts_candidate_outside_band(previous):
    assert select_max_x(previous, 100.0) == 100.0


def test_candidate_uses_larger_of_bend_and_earnings():
    assert candidate_max_x(LinearModel(earnings=3000, second=6000)) == 7500
    assert candidate_max_x(LinearModel(earnings=5000, second=6000)) == 10000


def test_chart_extents_reserve_label_margins(surface, model):
    vp = make_viewport(surface, model)
    assert vp.chart_width() == 600 - (8 * len(WIDEST_LABEL) + 10)
    assert vp.chart_height() == 300 - 26


def test_label_width_measured_once(surface, model):
    vp = make_viewport(surface, model)
    vp.chart_width()
    vp.chart_width()
    vp.dollar_to_pixel_x(100)
    assert surface.measured.count(WIDEST_LABEL) == 1


def test_hysteresis_holds_within_band(surface):
    model = LinearModel(earnings=5000, second=1000)
    vp = make_viewport(surface, model)
    assert vp.max_rendered_x_dollars() == 10000
    for earnings in (5500, 4500, 6000, 4000):
        model.monthly_indexed_earnings = earnings
        assert vp.max_rendered_x_dollars() == 10000


def test_rescale_adopts_new_candidate_exactly(surface):
    model = LinearModel(earnings=5000, second=1000)
    state = ViewportState()
    vp = make_viewport(surface, model, state)
    vp.max_rendered_x_dollars()
    model.monthly_indexed_earnings = 7000
    assert vp.max_rendered_x_dollars() == 14000
    assert state.last_rendered_max_x == 14000
    model.monthly_indexed_earnings = 2000
    assert vp.max_rendered_x_dollars() == 4000


def test_max_y_is_curve_at_max_x(surface, model):
    vp = make_viewport(surface, model)
    assert vp.max_rendered_y_dollars() == 3750


def test_dollar_to_pixel_x_clamps_to_right_edge(surface, model):
    vp = make_viewport(surface, model)
    assert vp.dollar_to_pixel_x(vp.max_rendered_x_dollars() * 10) == vp.chart_width()
    assert vp.dollar_to_pixel_x(0) == 0


def test_dollar_to_pixel_y_inverts_axis(surface, model):
    vp = make_viewport(surface, model)
    assert vp.dollar_to_pixel_y(0) == vp.chart_height()
    assert vp.dollar_to_pixel_y(vp.max_rendered_y_dollars()) == 0
    assert vp.dollar_to_pixel_y(1500) == 274 - math.floor(1500 / 3750 * 274)


def test_dollar_to_pixel_y_only_clamps_bottom(surface, model):
    vp = make_viewport(surface, model)
    assert vp.dollar_to_pixel_y(-500) == vp.chart_height()
    assert vp.dollar_to_pixel_y(vp.max_rendered_y_dollars() * 2) < 0


def test_round_trip_within_one_pixel(surface, model):
    vp = make_viewport(surface, model)
    max_x = vp.max_rendered_x_dollars()
    resolution = max_x / vp.chart_width()
    for x in range(0, int(max_x) + 1, 37):
        back = vp.pixel_to_dollar_x(vp.dollar_to_pixel_x(x))
        assert abs(back - x) <= resolution + 1


def test_pixel_to_dollar_x_bounds(surface, model):
    vp = make_viewport(surface, model)
    assert vp.pixel_to_dollar_x(-40) == 0
    assert vp.pixel_to_dollar_x(10_000) == vp.max_rendered_x_dollars()
    assert vp.pixel_to_dollar_x(vp.chart_width() / 2) == 3750


def test_to_pixel_combines_axes(surface, model):
    vp = make_viewport(surface, model)
    assert vp.to_pixel(DollarPoint(0, 0)) == PixelPoint(0, vp.chart_height())


class _NanModel(LinearModel):
    def primary_insurance_amount_for_earnings(self, earnings):
        return float("nan")


def test_non_finite_benefit_raises(surface):
    vp = make_viewport(surface, _NanModel())
    with pytest.raises(ComputationError):
        vp.max_rendered_y_dollars()


def test_zero_earnings_extent_raises_and_keeps_state(surface):
    state = ViewportState()
    vp = make_viewport(surface, LinearModel(earnings=0, first=0, second=0), state)
    with pytest.raises(ComputationError):
        vp.dollar_to_pixel_x(10)
    assert state.last_rendered_max_x is None


def test_flat_curve_has_no_height(surface):
    vp = make_viewport(surface, LinearModel(slope=0.0))
    with pytest.raises(ComputationError):
        vp.dollar_to_pixel_y(0)
