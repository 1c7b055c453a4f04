"""Technical-analysis indicators over price series."""

from .base import Indicator, PeriodIndicator
from .bollinger import BollingerBand, BollingerBands
from .ema import ExponentialMovingAverage
from .macd import MACD, MacdReading
from .rsi import RelativeStrengthIndex
from .sma import SimpleMovingAverage

__all__ = [
    "Indicator",
    "PeriodIndicator",
    "BollingerBand",
    "BollingerBands",
    "ExponentialMovingAverage",
    "MACD",
    "MacdReading",
    "RelativeStrengthIndex",
    "SimpleMovingAverage",
]
