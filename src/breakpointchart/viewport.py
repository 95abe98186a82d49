"""Mapping between dollar space and the pixel canvas."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from .benefit import BenefitModel, evaluate_benefit
from .commands import ChartStyle, font_for
from .errors import ComputationError

logger = logging.getLogger(__name__)

# The widest label we expect on the right edge: a six-digit monthly benefit.
WIDEST_LABEL = "$999,999"
LABEL_PADDING = 10
# One line of 12pt label text is 16 pixels tall.
LABEL_LINE_HEIGHT = 16

# A stored viewport survives until the candidate drifts outside this band.
STABILITY_BAND = 1.3


@dataclass(frozen=True)
class DollarPoint:
    x: float
    y: float


@dataclass(frozen=True)
class PixelPoint:
    x: float
    y: float


@dataclass
class ViewportState:
    """Hysteresis state owned by one chart; ``None`` means no viewport yet."""

    last_rendered_max_x: Optional[float] = None


def candidate_max_x(model: BenefitModel) -> float:
    """Rightmost earnings value the chart would like to show for ``model``."""

    # Keep every bend point visible, and leave room on both sides of the
    # subject's earnings for exploring the curve with the pointer.
    breakpoint_min = model.second_bend_point() * 1.25
    subject_min = model.monthly_indexed_earnings * 2
    return max(breakpoint_min, subject_min)


def select_max_x(previous: Optional[float], candidate: float) -> float:
    """Return the viewport to keep given the stored one and a fresh candidate."""

    if (
        previous is None
        or previous > candidate * STABILITY_BAND
        or previous < candidate / STABILITY_BAND
    ):
        return candidate
    return previous


class Viewport:
    """Coordinate conversions for one surface, one model and one state.

    The surface must be large enough to leave a positive drawable area once
    the label margins are reserved; smaller surfaces are not handled.
    """

    def __init__(self, surface, model: BenefitModel, state: ViewportState,
                 style: Optional[ChartStyle] = None) -> None:
        self.surface = surface
        self.model = model
        self.state = state
        self.style = style or ChartStyle()
        self._reserved_width: Optional[int] = None

    def chart_width(self) -> int:
        if self._reserved_width is None:
            label_width = self.surface.measure_text(WIDEST_LABEL, font_for(self.style))
            self._reserved_width = math.ceil(label_width) + LABEL_PADDING
        return int(self.surface.width) - self._reserved_width

    def chart_height(self) -> int:
        return int(self.surface.height) - (LABEL_LINE_HEIGHT + LABEL_PADDING)

    def max_rendered_x_dollars(self) -> float:
        previous = self.state.last_rendered_max_x
        candidate = candidate_max_x(self.model)
        if not (candidate > 0 and math.isfinite(candidate)):
            raise ComputationError(f"Viewport needs a positive earnings extent, got {candidate!r}")
        selected = select_max_x(previous, candidate)
        if selected != previous:
            logger.debug("Viewport max x changed from %r to %r", previous, selected)
            self.state.last_rendered_max_x = selected
        return selected

    def max_rendered_y_dollars(self) -> float:
        max_x = self.max_rendered_x_dollars()
        max_y = evaluate_benefit(self.model, max_x)
        if max_y <= 0:
            raise ComputationError(f"Benefit at {max_x!r} is {max_y!r}; the chart needs a positive height")
        return max_y

    def dollar_to_pixel_x(self, earnings_x: float) -> int:
        width = self.chart_width()
        x_value = math.floor(earnings_x / self.max_rendered_x_dollars() * width)
        return min(x_value, width)

    def dollar_to_pixel_y(self, benefit_y: float) -> int:
        height = self.chart_height()
        y_value = height - math.floor(benefit_y / self.max_rendered_y_dollars() * height)
        # Only the bottom edge is clamped: negative benefits sit on the axis,
        # benefits above the top map to negative pixels.
        return min(y_value, height)

    def pixel_to_dollar_x(self, canvas_x: float) -> float:
        max_x = self.max_rendered_x_dollars()
        x_value = math.floor(max(0, canvas_x / self.chart_width()) * max_x)
        return min(x_value, max_x)

    def to_pixel(self, point: DollarPoint) -> PixelPoint:
        return PixelPoint(self.dollar_to_pixel_x(point.x), self.dollar_to_pixel_y(point.y))


__all__ = [
    "STABILITY_BAND",
    "WIDEST_LABEL",
    "DollarPoint",
    "PixelPoint",
    "Viewport",
    "ViewportState",
    "candidate_max_x",
    "select_max_x",
]
