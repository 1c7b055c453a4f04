"""Exponential linear unit (ELU) activation."""
from __future__ import annotations

import math

from quantify.core.enums import ActivationId

from .base import ScalarActivationFunction


class ELUActivationFunction(ScalarActivationFunction):
    """``x`` for positive input, ``alpha * (e^x - 1)`` otherwise.

    Negative outputs saturate at ``-alpha``, which keeps mean activations
    closer to zero than ReLU does.
    """

    id = ActivationId.ELU

    def __init__(self, alpha: float = 1.0) -> None:
        self.alpha = float(alpha)

    def update_alpha(self, new_alpha: float) -> None:
        self.alpha = float(new_alpha)

    def activate(self, value: float) -> float:
        if value > 0.0:
            return value
        return self.alpha * (math.exp(value) - 1.0)

    def derivative(self, value: float) -> float:
        if value > 0.0:
            return 1.0
        return self.alpha * math.exp(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(alpha={self.alpha!r})"


__all__ = ["ELUActivationFunction"]
