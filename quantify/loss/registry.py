"""Loss registry: maps :class:`LossId` values to classes."""
from __future__ import annotations

import logging
from typing import Dict, Iterable

from quantify.config.models import LossConfig
from quantify.core.factory import instantiate, lookup

from .base import LossFunction
from .bce import BinaryCrossEntropyLossFunction
from .cce import CategoricalCrossEntropyLossFunction
from .huber import HuberLossFunction
from .mae import MeanAbsoluteErrorLossFunction
from .mse import MeanSquaredErrorLossFunction

logger = logging.getLogger("quantify.loss")

LOSS_REGISTRY: Dict[str, type[LossFunction]] = {
    MeanSquaredErrorLossFunction.id.value: MeanSquaredErrorLossFunction,
    MeanAbsoluteErrorLossFunction.id.value: MeanAbsoluteErrorLossFunction,
    HuberLossFunction.id.value: HuberLossFunction,
    BinaryCrossEntropyLossFunction.id.value: BinaryCrossEntropyLossFunction,
    CategoricalCrossEntropyLossFunction.id.value: CategoricalCrossEntropyLossFunction,
}


def get_loss_class(loss_id: str) -> type[LossFunction]:
    """Return loss class by id, raise if unknown."""

    return lookup(LOSS_REGISTRY, loss_id, kind="Loss")


def build_loss(config: LossConfig) -> LossFunction:
    cls = get_loss_class(config.id)
    return instantiate(cls, config.parameters, kind="loss")


def build_active_losses(configs: Iterable[LossConfig]) -> Dict[str, LossFunction]:
    """Instantiate enabled losses keyed by their display name."""

    active: Dict[str, LossFunction] = {}
    for cfg in configs:
        if not cfg.enabled:
            continue
        active[cfg.display_name] = build_loss(cfg)
    logger.debug("Built losses", extra={"loss_names": list(active)})
    return active


__all__ = ["LOSS_REGISTRY", "build_loss", "build_active_losses", "get_loss_class"]
