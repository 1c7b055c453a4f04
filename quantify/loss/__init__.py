"""Loss functions scoring predictions against targets."""

from .base import LossFunction
from .bce import BinaryCrossEntropyLossFunction
from .cce import CategoricalCrossEntropyLossFunction
from .huber import HuberLossFunction
from .mae import MeanAbsoluteErrorLossFunction
from .mse import MeanSquaredErrorLossFunction

__all__ = [
    "LossFunction",
    "BinaryCrossEntropyLossFunction",
    "CategoricalCrossEntropyLossFunction",
    "HuberLossFunction",
    "MeanAbsoluteErrorLossFunction",
    "MeanSquaredErrorLossFunction",
]
