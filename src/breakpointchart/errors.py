"""Exception types raised by the breakpoint chart."""
from __future__ import annotations


class ChartError(RuntimeError):
    """Base class for chart failures."""


class NotInitializedError(ChartError):
    """Raised when the chart is used before a surface and model are attached."""


class ComputationError(ChartError):
    """Raised when the benefit model fails or yields a non-finite value."""


__all__ = ["ChartError", "ComputationError", "NotInitializedError"]
