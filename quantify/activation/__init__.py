"""Activation functions applied element-wise (or vector-wise for softmax)."""

from .base import ActivationFunction, ScalarActivationFunction
from .elu import ELUActivationFunction
from .leaky_relu import LeakyReLUActivationFunction
from .param_relu import PReLUActivationFunction
from .relu import ReLUActivationFunction
from .sigmoid import SigmoidActivationFunction
from .softmax import SoftmaxActivationFunction
from .step import StepActivationFunction
from .swish import SwishActivationFunction
from .tanh import TanhActivationFunction

__all__ = [
    "ActivationFunction",
    "ScalarActivationFunction",
    "ELUActivationFunction",
    "LeakyReLUActivationFunction",
    "PReLUActivationFunction",
    "ReLUActivationFunction",
    "SigmoidActivationFunction",
    "SoftmaxActivationFunction",
    "StepActivationFunction",
    "SwishActivationFunction",
    "TanhActivationFunction",
]
