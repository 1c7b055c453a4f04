"""Error hierarchy shared by the function families.

Input problems derive from :class:`InvalidInputError`, which is also a
``ValueError`` so callers that only know the builtin still catch them.
Submodules should raise the most specific error available.
"""
from __future__ import annotations


class QuantifyError(Exception):
    """Base class for all custom exceptions in the package."""


class InvalidInputError(QuantifyError, ValueError):
    """Raised when numeric input cannot be processed."""


class LengthMismatchError(InvalidInputError):
    """Raised when predictions and targets differ in length."""


class EmptyInputError(InvalidInputError):
    """Raised when an operation needs at least one element."""


class InvalidProbabilityError(InvalidInputError):
    """Raised when a probability falls outside ``[0, 1]``."""


class UndefinedLogarithmError(InvalidInputError):
    """Raised when a cross-entropy term would need ``log(0)``."""


class InsufficientDataError(InvalidInputError):
    """Raised when a series is shorter than an indicator requires."""


class InvalidDataError(InvalidInputError):
    """Raised when a series holds NaN or infinite values."""


class IndicatorConfigurationError(InvalidInputError):
    """Raised when indicator parameters are inconsistent with each other."""


class ConfigurationError(QuantifyError):
    """Raised when configuration files are missing or invalid."""


class UnknownFunctionError(QuantifyError, KeyError):
    """Raised when a registry has no entry for the requested identifier."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""
