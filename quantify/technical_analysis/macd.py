"""Moving average convergence/divergence."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from quantify.core.enums import IndicatorId
from quantify.core.errors import IndicatorConfigurationError, InsufficientDataError

from .base import Indicator
from .ema import ExponentialMovingAverage


@dataclass(slots=True, frozen=True)
class MacdReading:
    """MACD line, signal line and their difference at the latest bar."""

    macd: float
    signal: float
    histogram: float


class MACD(Indicator):
    """Fast EMA minus slow EMA, with an EMA of that line as the signal.

    ``compute`` returns the MACD line value only. ``generate_signal`` turns
    exactly ``signal_period`` MACD values into the signal value and
    ``reading`` does both from a single price series.
    """

    id = IndicatorId.MACD

    def __init__(self, fast_period: int = 12, slow_period: int = 26, signal_period: int = 9) -> None:
        self.fast_ema = ExponentialMovingAverage(fast_period)
        self.slow_ema = ExponentialMovingAverage(slow_period)
        self.signal_ema = ExponentialMovingAverage(signal_period)

    @property
    def min_length(self) -> int:
        return self.slow_ema.period

    def _check_periods(self) -> None:
        if self.fast_ema.period >= self.slow_ema.period:
            raise IndicatorConfigurationError("The fast EMA period must be less than the slow EMA period")

    def compute(self, data: Sequence[float]) -> float:
        self._check_periods()
        values = self._require(data, "Slow EMA period is larger than the data length")
        return self.fast_ema.compute(values) - self.slow_ema.compute(values)

    def generate_signal(self, macd_values: Sequence[float]) -> float:
        """Return the signal line value from exactly ``signal_period`` MACD values."""

        if len(macd_values) != self.signal_ema.period:
            raise InsufficientDataError(
                f"Signal line needs exactly {self.signal_ema.period} MACD values, got {len(macd_values)}"
            )
        return self.signal_ema.compute(macd_values)

    def reading(self, data: Sequence[float]) -> MacdReading:
        """Return MACD, signal and histogram for the latest bar of ``data``."""

        self._check_periods()
        values = list(data)
        needed = self.slow_ema.period + self.signal_ema.period - 1
        if len(values) < needed:
            raise InsufficientDataError(f"MACD reading needs {needed} data points, got {len(values)}")
        # only the last ``needed`` points feed the final signal_period MACD values
        tail = values[-needed:]
        line = [self.compute(tail[:end]) for end in range(self.slow_ema.period, needed + 1)]
        signal = self.generate_signal(line)
        return MacdReading(macd=line[-1], signal=signal, histogram=line[-1] - signal)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(fast_period={self.fast_ema.period}, "
            f"slow_period={self.slow_ema.period}, signal_period={self.signal_ema.period})"
        )


__all__ = ["MACD", "MacdReading"]
