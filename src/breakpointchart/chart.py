"""Breakpoint chart: ties a surface, a benefit model and pointer tracking together."""
from __future__ import annotations

import logging
from typing import List, Optional

from .benefit import BenefitModel
from .commands import ChartStyle, DrawCommand
from .errors import ChartError, NotInitializedError
from .interaction import InteractionController, PointerEvent, TrackingState
from .renderer import GeometryRenderer
from .viewport import Viewport, ViewportState

logger = logging.getLogger(__name__)


class BreakpointChart:
    """Interactive chart of a benefit curve with a probe that follows the pointer.

    Attach a drawing surface with ``set_surface`` and a benefit model with
    ``set_benefit_model`` before calling ``render`` or feeding pointer events.
    The viewport hysteresis lives as long as this object does.
    """

    def __init__(self, style: Optional[ChartStyle] = None) -> None:
        self.style = style or ChartStyle()
        self.viewport_state = ViewportState()
        self._surface = None
        self._model: Optional[BenefitModel] = None
        self._viewport: Optional[Viewport] = None
        self._controller = InteractionController(self._apply)

    def is_initialized(self) -> bool:
        return self._surface is not None and self._model is not None

    def set_surface(self, surface, connect: bool = True) -> None:
        """Attach ``surface``; with ``connect`` its pointer events drive this chart.

        Pass ``connect=False`` when the host routes events itself. A previously
        attached surface is disconnected either way.
        """

        disconnect = getattr(self._surface, "disconnect", None)
        if disconnect is not None:
            disconnect()
        self._surface = surface
        self._viewport = None
        wire = getattr(surface, "connect", None) if connect else None
        if wire is not None:
            wire(self.on_click, self.on_move)

    def set_benefit_model(self, model: Optional[BenefitModel]) -> None:
        self._model = model
        self._viewport = None

    def replace_benefit_model(self, model: BenefitModel) -> List[DrawCommand]:
        """Attach ``model`` and render it, keeping the previous model if the pass fails."""

        previous = self._model
        previous_max_x = self.viewport_state.last_rendered_max_x
        self.set_benefit_model(model)
        try:
            return self.render()
        except ChartError:
            self.viewport_state.last_rendered_max_x = previous_max_x
            self.set_benefit_model(previous)
            raise

    @property
    def tracking_state(self) -> TrackingState:
        return self._controller.state

    @property
    def viewport(self) -> Viewport:
        if not self.is_initialized():
            raise NotInitializedError(
                "BreakpointChart needs both a drawing surface and a benefit model"
            )
        if self._viewport is None:
            self._viewport = Viewport(self._surface, self._model, self.viewport_state, self.style)
        return self._viewport

    def _renderer(self) -> GeometryRenderer:
        return GeometryRenderer(self.viewport, self.style)

    def _apply(self, commands: List[DrawCommand]) -> None:
        self._surface.apply(commands)

    def render(self) -> List[DrawCommand]:
        renderer = self._renderer()
        try:
            commands = renderer.render()
        except ChartError:
            logger.debug("Render pass aborted", exc_info=True)
            raise
        self._apply(commands)
        return commands

    def add_probe(self, earnings: float, color: Optional[str] = None) -> List[DrawCommand]:
        """Draw one more probe on top of the current frame without clearing it."""

        commands = self._renderer().render_probe(earnings, color or self.style.secondary_color)
        self._apply(commands)
        return commands

    def on_click(self, event: PointerEvent) -> List[DrawCommand]:
        return self._controller.on_click(event, self._renderer())

    def on_move(self, event: PointerEvent) -> List[DrawCommand]:
        return self._controller.on_move(event, self._renderer())


__all__ = ["BreakpointChart"]
