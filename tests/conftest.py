from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import pytest

CHAR_WIDTH = 8


class FakeSurface:
    """Records applied commands; every character is ``CHAR_WIDTH`` pixels wide."""

    def __init__(self, width: int = 600, height: int = 300) -> None:
        self.width = width
        self.height = height
        self.applied = []
        self.measured = []
        self.handlers = None

    def measure_text(self, text, font) -> float:
        self.measured.append(text)
        return float(CHAR_WIDTH * len(text))

    def apply(self, commands) -> None:
        self.applied.append(list(commands))

    def connect(self, on_click, on_move) -> None:
        self.handlers = (on_click, on_move)

    def disconnect(self) -> None:
        self.handlers = None


class LinearModel:
    """Benefit model with fixed bend points and a linear evaluation."""

    def __init__(self, earnings=3000.0, first=1000.0, second=6000.0, slope=0.5) -> None:
        self.monthly_indexed_earnings = earnings
        self._first = first
        self._second = second
        self.slope = slope

    def first_bend_point(self) -> float:
        return self._first

    def second_bend_point(self) -> float:
        return self._second

    def primary_insurance_amount_for_earnings(self, earnings: float) -> float:
        return self.slope * earnings


@pytest.fixture
def surface() -> FakeSurface:
    return FakeSurface()


@pytest.fixture
def model() -> LinearModel:
    return LinearModel()
