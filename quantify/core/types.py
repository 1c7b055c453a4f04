"""Shared type aliases for readability.

Series are ordered oldest to newest; indicators read their trailing end.
"""
from __future__ import annotations

from typing import Any, List, Mapping, Sequence, TypeAlias

Scalar: TypeAlias = float
Series: TypeAlias = Sequence[float]
Vector: TypeAlias = List[float]
Matrix: TypeAlias = List[List[float]]

JSONLike: TypeAlias = Mapping[str, Any]
