"""Identifiers for every function the registries know about.

Values double as the ``id`` keys accepted in YAML configuration and on the
command line.
"""
from __future__ import annotations

from enum import Enum


class ActivationId(str, Enum):
    """Scalar and vector activation functions."""

    STEP = "step"
    SIGMOID = "sigmoid"
    TANH = "tanh"
    RELU = "relu"
    LEAKY_RELU = "leaky_relu"
    PRELU = "prelu"
    ELU = "elu"
    SWISH = "swish"
    SOFTMAX = "softmax"


class LossId(str, Enum):
    """Loss functions scoring predictions against targets."""

    MSE = "mse"
    MAE = "mae"
    HUBER = "huber"
    BINARY_CROSS_ENTROPY = "binary_cross_entropy"
    CATEGORICAL_CROSS_ENTROPY = "categorical_cross_entropy"


class IndicatorId(str, Enum):
    """Technical-analysis indicators computed over price series."""

    SMA = "sma"
    EMA = "ema"
    RSI = "rsi"
    BOLLINGER = "bollinger"
    MACD = "macd"
