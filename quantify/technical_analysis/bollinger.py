"""Bollinger bands around a simple moving average."""
from __future__ import annotations

from dataclasses import dataclass
from statistics import pstdev
from typing import Sequence

from quantify.core.enums import IndicatorId

from .base import PeriodIndicator
from .sma import SimpleMovingAverage


@dataclass(slots=True, frozen=True)
class BollingerBand:
    """Upper/middle/lower band values for the latest bar."""

    upper: float
    middle: float
    lower: float

    @property
    def width(self) -> float:
        return self.upper - self.lower


class BollingerBands(PeriodIndicator):
    """SMA +/- ``num_std`` population standard deviations of the window."""

    id = IndicatorId.BOLLINGER

    def __init__(self, period: int = 20, num_std: float = 2.0) -> None:
        super().__init__(period)
        self.num_std = float(num_std)
        self.sma = SimpleMovingAverage(self.period)

    def set_period(self, period: int) -> None:
        super().set_period(period)
        self.sma.set_period(self.period)

    def compute(self, data: Sequence[float]) -> BollingerBand:
        window = self._window(data)
        middle = self.sma.compute(window)
        sigma = pstdev(window, mu=middle)
        return BollingerBand(
            upper=middle + self.num_std * sigma,
            middle=middle,
            lower=middle - self.num_std * sigma,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(period={self.period}, num_std={self.num_std!r})"


__all__ = ["BollingerBand", "BollingerBands"]
