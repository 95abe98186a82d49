"""Drawing surfaces that execute chart draw commands."""
from __future__ import annotations

from typing import Callable, List, Optional, Protocol, Sequence, Tuple

from matplotlib import patches
from matplotlib.backend_bases import MouseButton
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.font_manager import FontProperties
from matplotlib.lines import Line2D
from matplotlib.path import Path
from matplotlib.textpath import TextToPath

from .commands import Clear, DrawCommand, Font, Marker, Polyline, RoundedBox, Text
from .interaction import PointerEvent

# Control-point distance for a cubic Bezier approximating a quarter circle.
_KAPPA = 0.5522847498

_TEXT_TO_PATH = TextToPath()


class DrawingSurface(Protocol):
    """Immediate-mode target the chart draws on.

    ``width``/``height`` are the raw pixel dimensions. ``measure_text`` returns
    the rendered width of ``text`` in pixels.
    """

    width: int
    height: int

    def measure_text(self, text: str, font: Font) -> float: ...

    def apply(self, commands: Sequence[DrawCommand]) -> None: ...


# Canvas cap names that matplotlib spells differently.
_CAPSTYLES = {"square": "projecting"}


def _capstyle(cap: str) -> str:
    return _CAPSTYLES.get(cap, cap)


def _font_properties(font: Font, size: float) -> FontProperties:
    return FontProperties(family=font.family, size=size, weight=font.weight)


def rounded_box_to_path(ops) -> Path:
    """Convert ``move``/``line``/``arc_to`` operations into a closed matplotlib path."""

    verts: List[Tuple[float, float]] = []
    codes: List[int] = []
    current: Optional[Tuple[float, float]] = None
    for op in ops:
        kind = op[0]
        if kind == "move":
            current = (op[1], op[2])
            verts.append(current)
            codes.append(Path.MOVETO)
        elif kind == "line":
            current = (op[1], op[2])
            verts.append(current)
            codes.append(Path.LINETO)
        elif kind == "arc_to":
            if current is None:
                raise ValueError("arc_to requires a current point")
            cx, cy, ex, ey = op[1], op[2], op[3], op[4]
            sx, sy = current
            verts.extend(
                [
                    (sx + _KAPPA * (cx - sx), sy + _KAPPA * (cy - sy)),
                    (ex + _KAPPA * (cx - ex), ey + _KAPPA * (cy - ey)),
                    (ex, ey),
                ]
            )
            codes.extend([Path.CURVE4, Path.CURVE4, Path.CURVE4])
            current = (ex, ey)
        else:
            raise ValueError(f"Unknown path operation {kind!r}")
    if verts:
        verts.append(verts[0])
        codes.append(Path.CLOSEPOLY)
    return Path(verts, codes)


class MatplotlibSurface:
    """Draws commands onto a matplotlib ``Figure`` sized ``width`` x ``height`` pixels.

    A single borderless axes covers the figure with ``x`` running ``0..width``
    and ``y`` running ``height..0``, so one data unit is one pixel and the
    origin sits in the top-left corner like any canvas.
    """

    def __init__(self, width: int, height: int, dpi: float = 100.0) -> None:
        self.width = int(width)
        self.height = int(height)
        self.dpi = float(dpi)
        self.figure = Figure(figsize=(self.width / self.dpi, self.height / self.dpi), dpi=self.dpi)
        FigureCanvasAgg(self.figure)
        self.ax = self.figure.add_axes((0.0, 0.0, 1.0, 1.0))
        self.ax.set_axis_off()
        self.ax.set_xlim(0, self.width)
        self.ax.set_ylim(self.height, 0)
        self._zorder = 0
        self._connections: List[int] = []

    def _points(self, pixels: float) -> float:
        return pixels * 72.0 / self.dpi

    def _next_zorder(self) -> int:
        # Later commands must paint over earlier ones regardless of artist type.
        self._zorder += 1
        return self._zorder

    def measure_text(self, text: str, font: Font) -> float:
        width, _height, _descent = _TEXT_TO_PATH.get_text_width_height_descent(
            text, _font_properties(font, font.size), ismath=False
        )
        return float(width)

    def clear(self) -> None:
        for artist in list(self.ax.lines) + list(self.ax.patches) + list(self.ax.texts):
            artist.remove()
        self._zorder = 0

    def apply(self, commands: Sequence[DrawCommand]) -> None:
        for command in commands:
            if isinstance(command, Clear):
                self.clear()
            elif isinstance(command, Polyline):
                self._draw_polyline(command)
            elif isinstance(command, Marker):
                self._draw_marker(command)
            elif isinstance(command, RoundedBox):
                self._draw_rounded_box(command)
            elif isinstance(command, Text):
                self._draw_text(command)
            else:
                raise TypeError(f"Unsupported draw command {command!r}")
        self.figure.canvas.draw_idle()

    def _draw_polyline(self, command: Polyline) -> None:
        xs = [p[0] for p in command.points]
        ys = [p[1] for p in command.points]
        linestyle = "-"
        if command.dash:
            # Dash lengths are scaled by the line width in matplotlib.
            linestyle = (0, tuple(d / command.width for d in command.dash))
        line = Line2D(
            xs,
            ys,
            color=command.color,
            linewidth=self._points(command.width),
            linestyle=linestyle,
            solid_capstyle=_capstyle(command.cap),
            dash_capstyle=_capstyle(command.cap),
            solid_joinstyle="miter",
            zorder=self._next_zorder(),
        )
        self.ax.add_line(line)

    def _draw_marker(self, command: Marker) -> None:
        circle = patches.Circle(
            command.center,
            command.radius,
            facecolor=command.fill,
            edgecolor=command.stroke,
            linewidth=self._points(command.width),
            zorder=self._next_zorder(),
        )
        self.ax.add_patch(circle)

    def _draw_rounded_box(self, command: RoundedBox) -> None:
        patch = patches.PathPatch(
            rounded_box_to_path(command.path),
            facecolor=command.fill,
            edgecolor=command.stroke,
            linewidth=self._points(command.width),
            capstyle=_capstyle(command.cap),
            zorder=self._next_zorder(),
        )
        self.ax.add_patch(patch)

    def _draw_text(self, command: Text) -> None:
        x, y = command.position
        self.ax.text(
            x,
            y,
            command.text,
            color=command.color,
            fontproperties=_font_properties(command.font, self._points(command.font.size)),
            ha="left",
            va="baseline",
            zorder=self._next_zorder(),
        )

    def connect(
        self,
        on_click: Callable[[PointerEvent], None],
        on_move: Callable[[PointerEvent], None],
    ) -> None:
        """Route left-button presses and pointer motion on the figure canvas."""

        self.disconnect()

        def _to_pointer(event) -> PointerEvent:
            # Canvas events are measured from the bottom-left corner.
            return PointerEvent(float(event.x), float(self.height - event.y))

        def _on_press(event) -> None:
            if event.button != MouseButton.LEFT:
                return
            on_click(_to_pointer(event))

        def _on_motion(event) -> None:
            on_move(_to_pointer(event))

        canvas = self.figure.canvas
        self._connections = [
            canvas.mpl_connect("button_press_event", _on_press),
            canvas.mpl_connect("motion_notify_event", _on_motion),
        ]

    def disconnect(self) -> None:
        for cid in self._connections:
            self.figure.canvas.mpl_disconnect(cid)
        self._connections = []

    def save(self, path: str) -> None:
        self.figure.savefig(path, dpi=self.dpi)


__all__ = ["DrawingSurface", "MatplotlibSurface", "rounded_box_to_path"]
