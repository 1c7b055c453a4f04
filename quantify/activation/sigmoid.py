"""Logistic sigmoid activation."""
from __future__ import annotations

import math

from quantify.core.enums import ActivationId

from .base import ScalarActivationFunction


def stable_sigmoid(value: float) -> float:
    """Return ``1 / (1 + e^-x)`` without overflowing for large ``|x|``."""

    if value >= 0.0:
        return 1.0 / (1.0 + math.exp(-value))
    # exp(x) for x < 0 never overflows.
    z = math.exp(value)
    return z / (1.0 + z)


class SigmoidActivationFunction(ScalarActivationFunction):
    """Squash input into ``(0, 1)``; saturates to exactly 0/1 at the extremes."""

    id = ActivationId.SIGMOID

    def activate(self, value: float) -> float:
        return stable_sigmoid(value)

    def derivative(self, value: float) -> float:
        sigmoid = self.activate(value)
        return sigmoid * (1.0 - sigmoid)


__all__ = ["SigmoidActivationFunction", "stable_sigmoid"]
