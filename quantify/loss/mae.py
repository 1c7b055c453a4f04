"""Mean absolute error."""
from __future__ import annotations

from typing import Sequence

from quantify.core.enums import LossId

from .base import LossFunction


class MeanAbsoluteErrorLossFunction(LossFunction):
    id = LossId.MAE

    def _total(self, predictions: Sequence[float], targets: Sequence[float]) -> float:
        return sum(abs(p - t) for p, t in zip(predictions, targets))


__all__ = ["MeanAbsoluteErrorLossFunction"]
