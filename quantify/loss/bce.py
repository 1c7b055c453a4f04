"""Binary cross-entropy over independent probabilities."""
from __future__ import annotations

import math
from typing import Sequence

from quantify.core.enums import LossId
from quantify.core.errors import InvalidProbabilityError, UndefinedLogarithmError

from .base import LossFunction


class BinaryCrossEntropyLossFunction(LossFunction):
    """``-(t ln p + (1 - t) ln(1 - p))`` averaged over elements.

    Predictions must be probabilities. A prediction of exactly 0 or 1 is only
    accepted when the target agrees with it (the term is then 0); otherwise
    the logarithm is undefined and :class:`UndefinedLogarithmError` is raised.
    """

    id = LossId.BINARY_CROSS_ENTROPY

    def _total(self, predictions: Sequence[float], targets: Sequence[float]) -> float:
        total = 0.0
        for p, t in zip(predictions, targets):
            if not 0.0 <= p <= 1.0:
                raise InvalidProbabilityError(
                    f"Predictions must be probabilities (between 0 and 1), got {p!r}"
                )
            if p == 0.0:
                if t != 0.0:
                    raise UndefinedLogarithmError("Undefined logarithm for p = 0 with target != 0")
                continue
            if p == 1.0:
                if t != 1.0:
                    raise UndefinedLogarithmError("Undefined logarithm for p = 1 with target != 1")
                continue
            total -= t * math.log(p) + (1.0 - t) * math.log(1.0 - p)
        return total


__all__ = ["BinaryCrossEntropyLossFunction"]
