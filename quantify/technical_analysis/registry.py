"""Indicator registry: maps :class:`IndicatorId` values to classes."""
from __future__ import annotations

import logging
from typing import Dict, Iterable

from quantify.config.models import IndicatorConfig
from quantify.core.factory import instantiate, lookup

from .base import Indicator
from .bollinger import BollingerBands
from .ema import ExponentialMovingAverage
from .macd import MACD
from .rsi import RelativeStrengthIndex
from .sma import SimpleMovingAverage

logger = logging.getLogger("quantify.technical_analysis")

INDICATOR_REGISTRY: Dict[str, type[Indicator]] = {
    SimpleMovingAverage.id.value: SimpleMovingAverage,
    ExponentialMovingAverage.id.value: ExponentialMovingAverage,
    RelativeStrengthIndex.id.value: RelativeStrengthIndex,
    BollingerBands.id.value: BollingerBands,
    MACD.id.value: MACD,
}


def get_indicator_class(indicator_id: str) -> type[Indicator]:
    """Return indicator class by id, raise if unknown."""

    return lookup(INDICATOR_REGISTRY, indicator_id, kind="Indicator")


def build_indicator(config: IndicatorConfig) -> Indicator:
    cls = get_indicator_class(config.id)
    return instantiate(cls, config.parameters, kind="indicator")


def build_active_indicators(configs: Iterable[IndicatorConfig]) -> Dict[str, Indicator]:
    """Instantiate enabled indicators keyed by their display name."""

    active: Dict[str, Indicator] = {}
    for cfg in configs:
        if not cfg.enabled:
            continue
        active[cfg.display_name] = build_indicator(cfg)
    logger.debug("Built indicators", extra={"indicator_names": list(active)})
    return active


__all__ = ["INDICATOR_REGISTRY", "build_indicator", "build_active_indicators", "get_indicator_class"]
