"""Exponential moving average."""
from __future__ import annotations

from typing import Sequence

from quantify.core.enums import IndicatorId

from .base import PeriodIndicator


class ExponentialMovingAverage(PeriodIndicator):
    """EMA over the last ``period`` values with smoothing ``2 / (period + 1)``.

    The average is seeded with the first value of the window and updated with
    ``ema = (x - ema) * k + ema`` for each later value, so ``ema(3)`` of
    ``[1, 2, 3, 4, 5]`` is ``4.25``.
    """

    id = IndicatorId.EMA

    def __init__(self, period: int = 20) -> None:
        super().__init__(period)

    @property
    def smoothing(self) -> float:
        return 2.0 / (self.period + 1.0)

    def compute(self, data: Sequence[float]) -> float:
        window = self._window(data)
        k = self.smoothing
        ema = window[0]
        for value in window[1:]:
            ema = (value - ema) * k + ema
        return ema


__all__ = ["ExponentialMovingAverage"]
