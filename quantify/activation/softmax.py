"""Softmax activation over a vector of logits."""
from __future__ import annotations

import math
from typing import Sequence

from quantify.core.enums import ActivationId
from quantify.core.types import Matrix, Vector

from .base import ActivationFunction


class SoftmaxActivationFunction(ActivationFunction):
    """Normalize logits into a probability distribution.

    Unlike the scalar activations, both :meth:`activate` and
    :meth:`derivative` take the whole vector: the output for one element
    depends on every other element.
    """

    id = ActivationId.SOFTMAX

    def activate(self, values: Sequence[float]) -> Vector:
        if not values:
            return []
        # Shift by the max so exp() cannot overflow.
        peak = max(values)
        exps = [math.exp(value - peak) for value in values]
        total = sum(exps)
        return [exp / total for exp in exps]

    def derivative(self, values: Sequence[float]) -> Matrix:
        """Return the Jacobian ``J[i][j] = s_i * (delta_ij - s_j)``."""

        probs = self.activate(values)
        return [
            [p_i * ((1.0 if i == j else 0.0) - p_j) for j, p_j in enumerate(probs)]
            for i, p_i in enumerate(probs)
        ]

    def apply(self, values: Sequence[float]) -> Vector:
        return self.activate(values)


__all__ = ["SoftmaxActivationFunction"]
