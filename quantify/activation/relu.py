"""Rectified linear unit activation."""
from __future__ import annotations

from quantify.core.enums import ActivationId

from .base import ScalarActivationFunction


class ReLUActivationFunction(ScalarActivationFunction):
    """``max(x, 0)``; the derivative at zero is taken as ``0``."""

    id = ActivationId.RELU

    def activate(self, value: float) -> float:
        return value if value > 0.0 else 0.0

    def derivative(self, value: float) -> float:
        return 1.0 if value > 0.0 else 0.0


__all__ = ["ReLUActivationFunction"]
