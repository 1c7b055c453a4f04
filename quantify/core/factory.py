"""Helpers shared by the per-family registries."""
from __future__ import annotations

from typing import Any, Mapping, TypeVar

from .errors import ConfigurationError, QuantifyError, UnknownFunctionError

T = TypeVar("T")


def lookup(registry: Mapping[str, type[T]], function_id: str, *, kind: str) -> type[T]:
    """Return the class registered under ``function_id``."""

    key = getattr(function_id, "value", function_id)
    try:
        return registry[key]
    except KeyError as exc:
        known = ", ".join(sorted(registry))
        raise UnknownFunctionError(f"{kind} {key!r} is not registered (known: {known})") from exc


def instantiate(cls: Any, parameters: Mapping[str, Any] | None, *, kind: str) -> Any:
    """Call ``cls.from_parameters`` and turn bad parameters into config errors.

    Unknown keyword names surface as ``TypeError`` and values that cannot be
    coerced (``alpha: "abc"``) as ``ValueError``; both become
    :class:`ConfigurationError`.
    """

    try:
        return cls.from_parameters(**dict(parameters or {}))
    except QuantifyError:
        raise
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid parameters for {kind} {cls.id.value!r}: {exc}") from exc


__all__ = ["lookup", "instantiate"]
