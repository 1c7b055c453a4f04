"""Base contracts for activation functions."""
from __future__ import annotations

from typing import Any, Iterable, Sequence

from quantify.core.enums import ActivationId


class ActivationFunction:
    """Interface shared by every activation function.

    ``activate`` maps an input to its activated output and ``derivative``
    returns the gradient of that mapping at the same input. ``apply`` runs the
    function over a whole sequence and is what the evaluation pipeline calls.
    """

    id: ActivationId

    def activate(self, value: Any) -> Any:
        raise NotImplementedError

    def derivative(self, value: Any) -> Any:
        raise NotImplementedError

    def apply(self, values: Sequence[float]) -> list[float]:
        raise NotImplementedError

    def __call__(self, value: Any) -> Any:
        return self.activate(value)

    @classmethod
    def from_parameters(cls, **parameters: Any) -> "ActivationFunction":
        """Build an instance from config ``parameters`` (keyword arguments)."""

        return cls(**parameters)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ScalarActivationFunction(ActivationFunction):
    """Activation applied independently to each scalar input."""

    def activate(self, value: float) -> float:
        raise NotImplementedError

    def derivative(self, value: float) -> float:
        raise NotImplementedError

    def activate_many(self, values: Iterable[float]) -> list[float]:
        return [self.activate(float(value)) for value in values]

    def derivative_many(self, values: Iterable[float]) -> list[float]:
        return [self.derivative(float(value)) for value in values]

    def apply(self, values: Sequence[float]) -> list[float]:
        return self.activate_many(values)


__all__ = ["ActivationFunction", "ScalarActivationFunction"]
