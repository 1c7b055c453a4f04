"""Numeric utilities for machine learning and quantitative finance.

The package groups stateless numeric functions into three families:
activation functions, loss functions and technical-analysis indicators.
Each family lives in its own subpackage and exposes a registry so the
functions can be built by identifier from YAML configuration.
"""

__version__ = "0.1.0"

__all__: list[str] = ["__version__"]
