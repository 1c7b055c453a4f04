"""Hyperbolic tangent activation."""
from __future__ import annotations

import math

from quantify.core.enums import ActivationId

from .base import ScalarActivationFunction


class TanhActivationFunction(ScalarActivationFunction):
    id = ActivationId.TANH

    def activate(self, value: float) -> float:
        return math.tanh(value)

    def derivative(self, value: float) -> float:
        return 1.0 - math.tanh(value) ** 2


__all__ = ["TanhActivationFunction"]
