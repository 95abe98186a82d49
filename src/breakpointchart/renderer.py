"""Translate dollar-space chart geometry into draw commands."""
from __future__ import annotations

import math
from typing import List, Optional, Tuple

from .benefit import evaluate_benefit
from .commands import (
    ChartStyle,
    Clear,
    DrawCommand,
    Marker,
    PathOp,
    Polyline,
    RoundedBox,
    Text,
    font_for,
)
from .viewport import Viewport

# Corner numbering for rounded boxes, clockwise from the top-left.
TOP_LEFT, TOP_RIGHT, BOTTOM_RIGHT, BOTTOM_LEFT = 1, 2, 3, 4

# Text baseline and inset inside a chip, in pixels.
CHIP_BASELINE = 15
X_CHIP_TEXT_INSET = 2
Y_CHIP_TEXT_INSET = 3


def format_dollars(value: float) -> str:
    """Format ``value`` as whole dollars, e.g. ``1234567 -> '$1,234,567'``."""

    return f"${int(value):,}"


def rounded_box_path(
    x: float,
    y: float,
    width: float,
    height: float,
    corner_radius: float,
    squared_corner: int,
) -> Tuple[PathOp, ...]:
    """Outline of a box with three rounded corners.

    ``squared_corner`` picks the corner left square: 1 is the top-left, the
    rest follow clockwise. ``(x, y)`` is the top-left corner in pixels.
    """

    r = corner_radius
    ops: List[PathOp] = []
    if squared_corner == TOP_LEFT:
        ops.append(("move", x, y))
    else:
        ops.append(("move", x + r, y))
    if squared_corner == TOP_RIGHT:
        ops.append(("line", x + width, y))
    else:
        ops.append(("line", x + width - r, y))
        ops.append(("arc_to", x + width, y, x + width, y + r, r))
    if squared_corner == BOTTOM_RIGHT:
        ops.append(("line", x + width, y + height))
    else:
        ops.append(("line", x + width, y + height - r))
        ops.append(("arc_to", x + width, y + height, x + width - r, y + height, r))
    if squared_corner == BOTTOM_LEFT:
        ops.append(("line", x, y + height))
    else:
        ops.append(("line", x + r, y + height))
        ops.append(("arc_to", x, y + height, x, y + height - r, r))
    if squared_corner == TOP_LEFT:
        ops.append(("line", x, y))
    else:
        ops.append(("line", x, y + r))
        ops.append(("arc_to", x, y, x + r, y, r))
    return tuple(ops)


class GeometryRenderer:
    """Builds the frame, curve and probe annotations for one viewport.

    Every pixel coordinate is obtained from ``Viewport``; the renderer only
    decides what to draw and in which style.
    """

    def __init__(self, viewport: Viewport, style: Optional[ChartStyle] = None) -> None:
        self.viewport = viewport
        self.style = style or viewport.style

    def _pixel(self, dollar_x: float, dollar_y: float) -> Tuple[int, int]:
        vp = self.viewport
        return vp.dollar_to_pixel_x(dollar_x), vp.dollar_to_pixel_y(dollar_y)

    def _measure(self, text: str) -> float:
        return self.viewport.surface.measure_text(text, font_for(self.style))

    def render_frame(self) -> List[DrawCommand]:
        max_x = self.viewport.max_rendered_x_dollars()
        max_y = self.viewport.max_rendered_y_dollars()
        corners = (
            self._pixel(0, 0),
            self._pixel(0, max_y),
            self._pixel(max_x, max_y),
            self._pixel(max_x, 0),
            self._pixel(0, 0),
        )
        return [Polyline(corners, self.style.axis_color, self.style.frame_width)]

    def render_curve(self) -> List[DrawCommand]:
        model = self.viewport.model
        vertices = [self._pixel(0, 0)]
        for dollar_x in (
            model.first_bend_point(),
            model.second_bend_point(),
            self.viewport.max_rendered_x_dollars(),
        ):
            vertices.append(self._pixel(dollar_x, evaluate_benefit(model, dollar_x)))
        return [
            Polyline(
                tuple(vertices),
                self.style.axis_color,
                self.style.curve_width,
                cap="butt",
            )
        ]

    def render_rounded_box(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        corner_radius: float,
        squared_corner: int,
        color: str,
    ) -> RoundedBox:
        return RoundedBox(
            rounded_box_path(x, y, width, height, corner_radius, squared_corner),
            fill=color,
            stroke=color,
            width=self.style.guide_width,
        )

    def render_probe(self, earnings_x: float, color: Optional[str] = None) -> List[DrawCommand]:
        style = self.style
        color = color or style.primary_color
        vp = self.viewport

        point_x = math.floor(earnings_x)
        point_y = math.floor(evaluate_benefit(vp.model, earnings_x))
        x_text = format_dollars(point_x)
        y_text = format_dollars(point_y)

        probe = self._pixel(point_x, point_y)
        max_x = vp.max_rendered_x_dollars()
        bottom = vp.dollar_to_pixel_y(0)
        right = vp.dollar_to_pixel_x(max_x)

        commands: List[DrawCommand] = [
            # Both guides start at the probe and radiate outwards.
            Polyline((probe, (probe[0], bottom)), color, style.guide_width, style.guide_dash),
            Polyline((probe, (right, probe[1])), color, style.guide_width, style.guide_dash),
            Marker(probe, style.marker_radius, fill=color, stroke=color, width=style.guide_width),
        ]

        x_chip = (probe[0], bottom)
        y_chip = (right + 1, probe[1])
        commands.append(
            self.render_rounded_box(
                x_chip[0], x_chip[1],
                self._measure(x_text) + style.chip_padding, style.chip_height,
                style.chip_radius, TOP_LEFT, color,
            )
        )
        commands.append(
            self.render_rounded_box(
                y_chip[0], y_chip[1],
                self._measure(y_text) + style.chip_padding, style.chip_height,
                style.chip_radius, TOP_LEFT, color,
            )
        )

        font = font_for(style)
        commands.append(
            Text((x_chip[0] + X_CHIP_TEXT_INSET, x_chip[1] + CHIP_BASELINE),
                 x_text, style.label_color, font)
        )
        commands.append(
            Text((right + Y_CHIP_TEXT_INSET, y_chip[1] + CHIP_BASELINE),
                 y_text, style.label_color, font)
        )
        return commands

    def render(self) -> List[DrawCommand]:
        """Full pass: clear, frame, curve and the subject's own probe."""

        surface = self.viewport.surface
        commands: List[DrawCommand] = [Clear(surface.width, surface.height)]
        commands.extend(self.render_frame())
        commands.extend(self.render_curve())
        commands.extend(
            self.render_probe(self.viewport.model.monthly_indexed_earnings, self.style.primary_color)
        )
        return commands


__all__ = [
    "BOTTOM_LEFT",
    "BOTTOM_RIGHT",
    "TOP_LEFT",
    "TOP_RIGHT",
    "GeometryRenderer",
    "format_dollars",
    "rounded_box_path",
]
