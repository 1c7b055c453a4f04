"""Categorical cross-entropy over flattened class distributions."""
from __future__ import annotations

import math
from typing import Sequence

from quantify.core.enums import LossId
from quantify.core.errors import InvalidProbabilityError

from .base import LossFunction


class CategoricalCrossEntropyLossFunction(LossFunction):
    """``-sum(t ln p)`` averaged over the number of elements.

    Inputs are flat: several samples' class vectors may be concatenated.
    Zero-probability predictions contribute nothing instead of ``-inf``.
    """

    id = LossId.CATEGORICAL_CROSS_ENTROPY

    def _total(self, predictions: Sequence[float], targets: Sequence[float]) -> float:
        total = 0.0
        for p, t in zip(predictions, targets):
            if not 0.0 <= p <= 1.0:
                raise InvalidProbabilityError(
                    f"Predictions must be probabilities (between 0 and 1), got {p!r}"
                )
            if p == 0.0:
                continue
            total -= t * math.log(p)
        return total


__all__ = ["CategoricalCrossEntropyLossFunction"]
