"""Activation registry: maps :class:`ActivationId` values to classes."""
from __future__ import annotations

import logging
from typing import Dict, Iterable

from quantify.config.models import ActivationConfig
from quantify.core.factory import instantiate, lookup

from .base import ActivationFunction
from .elu import ELUActivationFunction
from .leaky_relu import LeakyReLUActivationFunction
from .param_relu import PReLUActivationFunction
from .relu import ReLUActivationFunction
from .sigmoid import SigmoidActivationFunction
from .softmax import SoftmaxActivationFunction
from .step import StepActivationFunction
from .swish import SwishActivationFunction
from .tanh import TanhActivationFunction

logger = logging.getLogger("quantify.activation")

ACTIVATION_REGISTRY: Dict[str, type[ActivationFunction]] = {
    StepActivationFunction.id.value: StepActivationFunction,
    SigmoidActivationFunction.id.value: SigmoidActivationFunction,
    TanhActivationFunction.id.value: TanhActivationFunction,
    ReLUActivationFunction.id.value: ReLUActivationFunction,
    LeakyReLUActivationFunction.id.value: LeakyReLUActivationFunction,
    PReLUActivationFunction.id.value: PReLUActivationFunction,
    ELUActivationFunction.id.value: ELUActivationFunction,
    SwishActivationFunction.id.value: SwishActivationFunction,
    SoftmaxActivationFunction.id.value: SoftmaxActivationFunction,
}


def get_activation_class(activation_id: str) -> type[ActivationFunction]:
    """Return activation class by id, raise if unknown."""

    return lookup(ACTIVATION_REGISTRY, activation_id, kind="Activation")


def build_activation(config: ActivationConfig) -> ActivationFunction:
    """Instantiate the activation described by ``config``."""

    cls = get_activation_class(config.id)
    return instantiate(cls, config.parameters, kind="activation")


def build_active_activations(configs: Iterable[ActivationConfig]) -> Dict[str, ActivationFunction]:
    """Instantiate enabled activations keyed by their display name."""

    active: Dict[str, ActivationFunction] = {}
    for cfg in configs:
        if not cfg.enabled:
            continue
        active[cfg.display_name] = build_activation(cfg)
    logger.debug("Built activations", extra={"activation_names": list(active)})
    return active


__all__ = [
    "ACTIVATION_REGISTRY",
    "build_activation",
    "build_active_activations",
    "get_activation_class",
]
