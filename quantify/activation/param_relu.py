"""Parametric ReLU (PReLU) activation."""
from __future__ import annotations

from quantify.core.enums import ActivationId

from .base import ScalarActivationFunction


class PReLUActivationFunction(ScalarActivationFunction):
    """Leaky ReLU whose negative slope ``alpha`` is a learnable parameter."""

    id = ActivationId.PRELU

    def __init__(self, alpha: float = 0.01) -> None:
        self.alpha = float(alpha)

    def update_alpha(self, new_alpha: float) -> None:
        """Replace ``alpha``, e.g. after a training step."""

        self.alpha = float(new_alpha)

    def activate(self, value: float) -> float:
        return value if value > 0.0 else self.alpha * value

    def derivative(self, value: float) -> float:
        return 1.0 if value > 0.0 else self.alpha

    def __repr__(self) -> str:
        return f"{type(self).__name__}(alpha={self.alpha!r})"


__all__ = ["PReLUActivationFunction"]
