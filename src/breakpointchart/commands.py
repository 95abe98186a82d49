"""Declarative draw commands produced by the renderer.

Every visual element of a pass is described by one of these immutable values.
A drawing surface adapter consumes them in order; nothing here touches a
concrete canvas, so geometry can be asserted on directly.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple, Union

Point = Tuple[float, float]

# Path operations understood by ``RoundedBox``:
#   ("move", x, y)
#   ("line", x, y)
#   ("arc_to", corner_x, corner_y, end_x, end_y, radius)
PathOp = Tuple


@dataclass(frozen=True)
class ChartStyle:
    """Colours, widths and sizes used when building commands."""

    axis_color: str = "#666"
    primary_color: str = "#5cb85c"
    secondary_color: str = "#337ab7"
    label_color: str = "white"
    frame_width: float = 1.0
    curve_width: float = 4.0
    guide_width: float = 2.0
    guide_dash: Tuple[float, ...] = (3.0, 5.0)
    marker_radius: float = 5.0
    font_family: str = "DejaVu Sans"
    font_size: float = 14.0
    font_weight: str = "bold"
    chip_height: float = 19.0
    chip_padding: float = 6.0
    chip_radius: float = 5.0


@dataclass(frozen=True)
class Font:
    family: str = "DejaVu Sans"
    size: float = 14.0
    weight: str = "bold"


@dataclass(frozen=True)
class Clear:
    width: float
    height: float


@dataclass(frozen=True)
class Polyline:
    points: Tuple[Point, ...]
    color: str
    width: float
    dash: Tuple[float, ...] = ()
    cap: str = "butt"


@dataclass(frozen=True)
class Marker:
    center: Point
    radius: float
    fill: str
    stroke: str
    width: float


@dataclass(frozen=True)
class RoundedBox:
    path: Tuple[PathOp, ...]
    fill: str
    stroke: str
    width: float
    cap: str = "square"


@dataclass(frozen=True)
class Text:
    position: Point
    text: str
    color: str
    font: Font = field(default_factory=Font)


DrawCommand = Union[Clear, Polyline, Marker, RoundedBox, Text]


def font_for(style: ChartStyle) -> Font:
    return Font(family=style.font_family, size=style.font_size, weight=style.font_weight)


__all__ = [
    "ChartStyle",
    "Clear",
    "DrawCommand",
    "Font",
    "Marker",
    "PathOp",
    "Point",
    "Polyline",
    "RoundedBox",
    "Text",
    "font_for",
]
