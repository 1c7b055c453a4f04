"""Leaky ReLU with a fixed negative slope."""
from __future__ import annotations

from quantify.core.enums import ActivationId

from .base import ScalarActivationFunction

LEAKY_SLOPE = 0.01


class LeakyReLUActivationFunction(ScalarActivationFunction):
    """Pass positive input through, scale the rest by ``0.01``.

    Use :class:`~quantify.activation.param_relu.PReLUActivationFunction` when
    the negative slope needs to be tuned.
    """

    id = ActivationId.LEAKY_RELU

    def activate(self, value: float) -> float:
        return value if value > 0.0 else LEAKY_SLOPE * value

    def derivative(self, value: float) -> float:
        return 1.0 if value > 0.0 else LEAKY_SLOPE


__all__ = ["LeakyReLUActivationFunction", "LEAKY_SLOPE"]
