"""Base contract for loss functions."""
from __future__ import annotations

from typing import Any, Sequence

from quantify.core.enums import LossId
from quantify.core.validation import ensure_not_empty, ensure_same_length


class LossFunction:
    """Score the discrepancy between ``predictions`` and ``targets``.

    Subclasses implement :meth:`_total`, the sum of per-element terms; the
    base class validates the inputs and averages over the element count.
    """

    id: LossId

    def compute(self, predictions: Sequence[float], targets: Sequence[float]) -> float:
        ensure_same_length(predictions, targets)
        ensure_not_empty(predictions, "predictions")
        return self._total(predictions, targets) / len(predictions)

    def _total(self, predictions: Sequence[float], targets: Sequence[float]) -> float:
        raise NotImplementedError

    def __call__(self, predictions: Sequence[float], targets: Sequence[float]) -> float:
        return self.compute(predictions, targets)

    @classmethod
    def from_parameters(cls, **parameters: Any) -> "LossFunction":
        return cls(**parameters)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = ["LossFunction"]
