"""Typed configuration models.

YAML files are validated through pydantic so the registries and the
evaluation pipeline only ever see well-formed entries. Each function entry
carries an ``id`` naming the registered class and a free-form ``parameters``
map passed to its constructor.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from quantify.core.enums import ActivationId, IndicatorId, LossId

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class FunctionConfig(BaseModel):
    """Fields shared by every function entry.

    ``name`` is the key used in evaluation reports; it defaults to the id so a
    function can be listed twice with different parameters under two names.
    """

    enabled: bool = True
    name: Optional[str] = None
    parameters: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @property
    def display_name(self) -> str:
        if self.name:
            return self.name
        return getattr(self, "id").value


class ActivationConfig(FunctionConfig):
    """Activation entry (``id`` plus ``alpha``/``beta`` parameters)."""

    id: ActivationId


class LossConfig(FunctionConfig):
    """Loss entry (``id`` plus ``delta`` for Huber)."""

    id: LossId


class IndicatorConfig(FunctionConfig):
    """Indicator entry; period-like parameters must be positive integers."""

    id: IndicatorId

    @model_validator(mode="after")
    def _check_periods(self) -> "IndicatorConfig":
        for key in ("period", "fast_period", "slow_period", "signal_period"):
            value = self.parameters.get(key)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"`{key}` must be a positive integer, got {value!r}")
        if self.id is IndicatorId.MACD:
            fast = self.parameters.get("fast_period", 12)
            slow = self.parameters.get("slow_period", 26)
            if fast >= slow:
                raise ValueError("MACD `fast_period` must be less than `slow_period`")
        return self


class TelemetryConfig(BaseModel):
    """Logging switches."""

    log_level: str = Field("INFO")
    log_dir: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}")
        return level


class QuantifyConfig(BaseModel):
    """Top-level config: functions to evaluate per family plus telemetry."""

    activations: List[ActivationConfig] = Field(default_factory=list)
    losses: List[LossConfig] = Field(default_factory=list)
    indicators: List[IndicatorConfig] = Field(default_factory=list)
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    @model_validator(mode="after")
    def _unique_names(self) -> "QuantifyConfig":
        for family, entries in (
            ("activations", self.activations),
            ("losses", self.losses),
            ("indicators", self.indicators),
        ):
            seen: set[str] = set()
            for entry in entries:
                if entry.display_name in seen:
                    raise ValueError(f"Duplicate name {entry.display_name!r} in `{family}`")
                seen.add(entry.display_name)
        return self
