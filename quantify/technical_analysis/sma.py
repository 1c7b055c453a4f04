"""Simple moving average."""
from __future__ import annotations

from statistics import fmean
from typing import Sequence

from quantify.core.enums import IndicatorId

from .base import PeriodIndicator


class SimpleMovingAverage(PeriodIndicator):
    """Arithmetic mean of the last ``period`` values."""

    id = IndicatorId.SMA

    def __init__(self, period: int = 20) -> None:
        super().__init__(period)

    def compute(self, data: Sequence[float]) -> float:
        return fmean(self._window(data))


__all__ = ["SimpleMovingAverage"]
