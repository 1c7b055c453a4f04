"""Input guards reused by losses and indicators."""
from __future__ import annotations

import math
from typing import Sequence

from .errors import EmptyInputError, InvalidDataError, LengthMismatchError


def ensure_same_length(predictions: Sequence[float], targets: Sequence[float]) -> None:
    """Raise :class:`LengthMismatchError` unless both sequences align."""

    if len(predictions) != len(targets):
        raise LengthMismatchError(
            f"Predictions and targets must have the same length "
            f"({len(predictions)} != {len(targets)})"
        )


def ensure_not_empty(values: Sequence[float], label: str = "values") -> None:
    if len(values) == 0:
        raise EmptyInputError(f"{label} must not be empty")


def ensure_finite(values: Sequence[float]) -> None:
    """Reject NaN and +/-inf in ``values``."""

    for value in values:
        if math.isnan(value) or math.isinf(value):
            raise InvalidDataError("Invalid data encountered during calculations")


def normalize_period(period: int) -> int:
    """Coerce periods below one to one."""

    period = int(period)
    return period if period >= 1 else 1


__all__ = ["ensure_same_length", "ensure_not_empty", "ensure_finite", "normalize_period"]
