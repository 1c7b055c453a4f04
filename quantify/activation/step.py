"""Binary step activation."""
from __future__ import annotations

from quantify.core.enums import ActivationId

from .base import ScalarActivationFunction


class StepActivationFunction(ScalarActivationFunction):
    """Output ``1`` for strictly positive input and ``0`` otherwise.

    The derivative is zero everywhere it is defined, so the step function is
    only useful for perceptron-style models that do not train by gradient.
    """

    id = ActivationId.STEP

    def activate(self, value: float) -> float:
        return 1.0 if value > 0.0 else 0.0

    def derivative(self, value: float) -> float:
        return 0.0


__all__ = ["StepActivationFunction"]
