"""Relative strength index with Wilder smoothing."""
from __future__ import annotations

from typing import Sequence

from quantify.core.enums import IndicatorId
from quantify.core.validation import ensure_finite

from .base import PeriodIndicator


class RelativeStrengthIndex(PeriodIndicator):
    """RSI in ``[0, 100]`` computed over the whole series.

    The first ``period`` price changes seed the average gain/loss; every later
    change is folded in with Wilder smoothing, the same scheme the ATR
    calculation uses. A series without any gain reads ``0``; a series with
    gains but no loss reads ``100``.

    Plain-sum RSI (total gains over total losses across the series) agrees
    with this only while the series is ``period + 1`` points long; past that
    the smoothed averages weight recent changes more and the values differ.
    """

    id = IndicatorId.RSI

    def __init__(self, period: int = 14) -> None:
        super().__init__(period)

    @property
    def min_length(self) -> int:
        return self.period + 1

    def compute(self, data: Sequence[float]) -> float:
        values = self._require(data, "Insufficient data for RSI calculation")
        ensure_finite(values)
        period = self.period
        gains: list[float] = []
        losses: list[float] = []
        for prev, current in zip(values, values[1:]):
            change = current - prev
            gains.append(change if change > 0 else 0.0)
            losses.append(-change if change < 0 else 0.0)

        avg_gain = sum(gains[:period]) / period
        avg_loss = sum(losses[:period]) / period
        for gain, loss in zip(gains[period:], losses[period:]):
            avg_gain = (avg_gain * (period - 1) + gain) / period
            avg_loss = (avg_loss * (period - 1) + loss) / period

        if avg_gain == 0.0:
            return 0.0
        if avg_loss == 0.0:
            return 100.0
        relative_strength = avg_gain / avg_loss
        return 100.0 - 100.0 / (1.0 + relative_strength)


__all__ = ["RelativeStrengthIndex"]
