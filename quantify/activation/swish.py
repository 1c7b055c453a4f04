"""Swish activation ``x * sigmoid(beta * x)``."""
from __future__ import annotations

from quantify.core.enums import ActivationId

from .base import ScalarActivationFunction
from .sigmoid import SigmoidActivationFunction


class SwishActivationFunction(ScalarActivationFunction):
    """Self-gated activation; ``beta=1`` gives SiLU."""

    id = ActivationId.SWISH

    def __init__(self, beta: float = 1.0) -> None:
        self.beta = float(beta)
        self.sigmoid = SigmoidActivationFunction()

    def update_beta(self, new_beta: float) -> None:
        self.beta = float(new_beta)

    def activate(self, value: float) -> float:
        return value * self.sigmoid.activate(self.beta * value)

    def derivative(self, value: float) -> float:
        sigmoid = self.sigmoid.activate(self.beta * value)
        return sigmoid + self.beta * value * sigmoid * (1.0 - sigmoid)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(beta={self.beta!r})"


__all__ = ["SwishActivationFunction"]
