"""Mean squared error."""
from __future__ import annotations

from typing import Sequence

from quantify.core.enums import LossId

from .base import LossFunction


class MeanSquaredErrorLossFunction(LossFunction):
    id = LossId.MSE

    def _total(self, predictions: Sequence[float], targets: Sequence[float]) -> float:
        return sum((p - t) ** 2 for p, t in zip(predictions, targets))


__all__ = ["MeanSquaredErrorLossFunction"]
