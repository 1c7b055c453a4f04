"""Huber loss: quadratic near zero, linear in the tails."""
from __future__ import annotations

from typing import Sequence

from quantify.core.enums import LossId

from .base import LossFunction


class HuberLossFunction(LossFunction):
    """Per element ``0.5 e^2`` when ``|e| <= delta``, else ``delta (|e| - delta/2)``.

    Less sensitive to outliers than MSE while staying differentiable at zero.
    """

    id = LossId.HUBER

    def __init__(self, delta: float = 1.0) -> None:
        self.delta = float(delta)

    def update_delta(self, new_delta: float) -> None:
        self.delta = float(new_delta)

    def _total(self, predictions: Sequence[float], targets: Sequence[float]) -> float:
        total = 0.0
        for p, t in zip(predictions, targets):
            error = abs(p - t)
            if error <= self.delta:
                total += 0.5 * error ** 2
            else:
                total += self.delta * (error - 0.5 * self.delta)
        return total

    def __repr__(self) -> str:
        return f"{type(self).__name__}(delta={self.delta!r})"


__all__ = ["HuberLossFunction"]
