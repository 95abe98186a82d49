"""Pointer tracking state machine for the breakpoint chart."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from .commands import DrawCommand
from .renderer import GeometryRenderer


class TrackingState(enum.Enum):
    TRACKING = "tracking"
    PAUSED = "paused"


@dataclass(frozen=True)
class PointerEvent:
    """Pointer position in pixels, relative to the surface's top-left corner."""

    x: float
    y: float = 0.0


Transition = Tuple[TrackingState, List[DrawCommand]]


def handle_move(state: TrackingState, event: PointerEvent, renderer: GeometryRenderer) -> Transition:
    """Redraw the chart with a second probe under the pointer while tracking."""

    if state is TrackingState.PAUSED:
        return state, []
    commands = renderer.render()
    earnings = renderer.viewport.pixel_to_dollar_x(event.x)
    commands.extend(renderer.render_probe(earnings, renderer.style.secondary_color))
    return state, commands


def handle_click(state: TrackingState, event: PointerEvent, renderer: GeometryRenderer) -> Transition:
    """Toggle tracking; resuming renders at the click position straight away."""

    if state is TrackingState.TRACKING:
        return TrackingState.PAUSED, []
    return handle_move(TrackingState.TRACKING, event, renderer)


class InteractionController:
    """Holds the tracking state and forwards handler output to ``sink``."""

    def __init__(self, sink: Callable[[Sequence[DrawCommand]], None]) -> None:
        self.state = TrackingState.TRACKING
        self._sink = sink

    def _dispatch(self, handler, event: PointerEvent, renderer: GeometryRenderer) -> List[DrawCommand]:
        next_state, commands = handler(self.state, event, renderer)
        self.state = next_state
        if commands:
            self._sink(commands)
        return commands

    def on_click(self, event: PointerEvent, renderer: GeometryRenderer) -> List[DrawCommand]:
        return self._dispatch(handle_click, event, renderer)

    def on_move(self, event: PointerEvent, renderer: GeometryRenderer) -> List[DrawCommand]:
        return self._dispatch(handle_move, event, renderer)


__all__ = [
    "InteractionController",
    "PointerEvent",
    "TrackingState",
    "handle_click",
    "handle_move",
]
