"""Core primitives shared across all function families.

Enums, type aliases, validation helpers and error classes live here so that
the activation, loss and technical-analysis packages can import them without
introducing circular dependencies.
"""

from . import enums, errors, factory, types, validation

__all__ = ["enums", "errors", "factory", "types", "validation"]
