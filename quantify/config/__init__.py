"""Configuration loading and validation package."""

from .loader import load_quantify_config, load_series
from .models import (
    ActivationConfig,
    FunctionConfig,
    IndicatorConfig,
    LossConfig,
    QuantifyConfig,
    TelemetryConfig,
)

__all__ = [
    "ActivationConfig",
    "FunctionConfig",
    "IndicatorConfig",
    "LossConfig",
    "QuantifyConfig",
    "TelemetryConfig",
    "load_quantify_config",
    "load_series",
]
