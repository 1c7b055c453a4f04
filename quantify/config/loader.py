"""YAML loaders for the config subsystem.

``load_quantify_config`` consumes one YAML file, validates it via models.py
and returns a typed :class:`QuantifyConfig`. ``load_series`` reads the numeric
inputs the evaluation pipeline runs against.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Mapping, Sequence

import yaml

from quantify.core.errors import ConfigurationError

from .models import QuantifyConfig

_DEFAULT_CONFIG_PATH = Path("config") / "quantify.yml"


def _read_yaml(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as fp:
        return yaml.safe_load(fp)


def _read_mapping(path: Path) -> Mapping:
    """Read a YAML file and return a mapping (empty dict if file is blank)."""

    data = _read_yaml(path) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"YAML root must be a mapping in {path}")
    return data


def load_quantify_config(path: Path | str = _DEFAULT_CONFIG_PATH) -> QuantifyConfig:
    """Load the function set described by ``path``.

    The file has three optional lists (``activations``, ``losses``,
    ``indicators``) and an optional ``telemetry`` section. Every list entry
    needs an ``id``; ``name``, ``enabled`` and ``parameters`` are optional.
    """

    data = _read_mapping(Path(path))
    for family in ("activations", "losses", "indicators"):
        entries = data.get(family, [])
        if entries is not None and (isinstance(entries, (str, bytes)) or not isinstance(entries, Sequence)):
            raise TypeError(f"`{family}` must be a list")
    return QuantifyConfig.model_validate(data)


def _coerce_series(raw: Any, path: Path) -> List[float]:
    if isinstance(raw, Mapping):
        raw = raw.get("values")
    if raw is None or isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
        raise ConfigurationError(f"{path} must hold a list of numbers (or a `values:` list)")
    try:
        return [float(value) for value in raw]
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Non-numeric value in {path}: {exc}") from exc


def load_series(path: Path | str) -> List[float]:
    """Read a numeric series from YAML/JSON or a one-value-per-line text file.

    For text files blank lines and ``#`` comments are skipped; for CSV rows
    the last comma-separated field is taken, so ``date,close`` exports work as
    long as the header line is commented out.
    """

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Series file not found: {path}")
    suffix = path.suffix.lower()
    if suffix in {".yml", ".yaml"}:
        return _coerce_series(_read_yaml(path), path)
    if suffix == ".json":
        with path.open("r", encoding="utf-8") as fp:
            return _coerce_series(json.load(fp), path)

    values: List[float] = []
    with path.open("r", encoding="utf-8") as fp:
        for line_no, line in enumerate(fp, start=1):
            text = line.split("#", 1)[0].strip()
            if not text:
                continue
            field = text.rsplit(",", 1)[-1].strip()
            try:
                values.append(float(field))
            except ValueError as exc:
                raise ConfigurationError(f"{path}:{line_no}: not a number: {field!r}") from exc
    return values
