"""Base contracts for technical-analysis indicators.

Indicators read a price series ordered oldest to newest and compute their
value from its trailing end. ``rolling`` replays ``compute`` over every
prefix long enough to satisfy the indicator, yielding the indicator line.
"""
from __future__ import annotations

from typing import Any, List, Sequence

from quantify.core.enums import IndicatorId
from quantify.core.errors import InsufficientDataError
from quantify.core.validation import ensure_finite, normalize_period


class Indicator:
    """Interface shared by every indicator."""

    id: IndicatorId

    @property
    def min_length(self) -> int:
        """Number of data points ``compute`` needs."""

        raise NotImplementedError

    def compute(self, data: Sequence[float]) -> Any:
        raise NotImplementedError

    def rolling(self, data: Sequence[float]) -> List[Any]:
        """Return ``compute`` over each sufficiently long prefix of ``data``."""

        values = list(data)
        return [self.compute(values[:end]) for end in range(self.min_length, len(values) + 1)]

    def __call__(self, data: Sequence[float]) -> Any:
        return self.compute(data)

    @classmethod
    def from_parameters(cls, **parameters: Any) -> "Indicator":
        return cls(**parameters)

    def _require(self, data: Sequence[float], message: str | None = None) -> List[float]:
        values = list(data)
        if len(values) < self.min_length:
            raise InsufficientDataError(
                message
                or f"{type(self).__name__} needs {self.min_length} data points, got {len(values)}"
            )
        return values


class PeriodIndicator(Indicator):
    """Indicator parameterized by a single look-back ``period``.

    Periods below one are coerced to one, both at construction and in
    :meth:`set_period`.
    """

    def __init__(self, period: int) -> None:
        self._period = normalize_period(period)

    @property
    def period(self) -> int:
        return self._period

    def set_period(self, period: int) -> None:
        self._period = normalize_period(period)

    @property
    def min_length(self) -> int:
        return self._period

    def _window(self, data: Sequence[float]) -> List[float]:
        """Return the trailing ``period`` values after validating them."""

        values = self._require(data)
        window = values[-self._period:]
        ensure_finite(window)
        return window

    def __repr__(self) -> str:
        return f"{type(self).__name__}(period={self._period})"


__all__ = ["Indicator", "PeriodIndicator"]
