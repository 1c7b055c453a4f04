"""Evaluate a configured set of functions against numeric inputs.

The :class:`Evaluator` is built once from a :class:`QuantifyConfig` and can
then be run against any number of inputs. Each family is optional: a run with
only a price series skips the losses, a run with only predictions/targets
skips the indicators.
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field, is_dataclass
from typing import Any, Dict, Mapping, Sequence

from quantify.activation.base import ActivationFunction
from quantify.activation.registry import build_active_activations
from quantify.config.models import QuantifyConfig
from quantify.core.errors import InsufficientDataError, InvalidDataError
from quantify.loss.base import LossFunction
from quantify.loss.registry import build_active_losses
from quantify.technical_analysis.base import Indicator
from quantify.technical_analysis.registry import build_active_indicators

logger = logging.getLogger("quantify.pipeline")


def to_jsonable(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    return value


@dataclass(slots=True)
class EvaluationReport:
    """Results of one :meth:`Evaluator.evaluate` call, keyed by function name."""

    activations: Dict[str, list[float]] = field(default_factory=dict)
    losses: Dict[str, float] = field(default_factory=dict)
    indicators: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "activations": dict(self.activations),
            "losses": dict(self.losses),
            "indicators": {name: to_jsonable(value) for name, value in self.indicators.items()},
        }


class Evaluator:
    """Run enabled activations, losses and indicators by name."""

    def __init__(
        self,
        *,
        activations: Mapping[str, ActivationFunction] | None = None,
        losses: Mapping[str, LossFunction] | None = None,
        indicators: Mapping[str, Indicator] | None = None,
    ) -> None:
        self.activations: Dict[str, ActivationFunction] = dict(activations or {})
        self.losses: Dict[str, LossFunction] = dict(losses or {})
        self.indicators: Dict[str, Indicator] = dict(indicators or {})

    @classmethod
    def from_config(cls, config: QuantifyConfig) -> "Evaluator":
        evaluator = cls(
            activations=build_active_activations(config.activations),
            losses=build_active_losses(config.losses),
            indicators=build_active_indicators(config.indicators),
        )
        logger.info(
            "Built evaluator",
            extra={
                "n_activations": len(evaluator.activations),
                "n_losses": len(evaluator.losses),
                "n_indicators": len(evaluator.indicators),
            },
        )
        return evaluator

    def apply_activations(self, values: Sequence[float]) -> Dict[str, list[float]]:
        return {name: fn.apply(values) for name, fn in self.activations.items()}

    def score_losses(self, predictions: Sequence[float], targets: Sequence[float]) -> Dict[str, float]:
        return {name: fn.compute(predictions, targets) for name, fn in self.losses.items()}

    def compute_indicators(self, series: Sequence[float]) -> Dict[str, Any]:
        """Compute every indicator; unusable input yields ``None`` for that name.

        Short or non-finite series only invalidate the indicators that cannot
        use them, so e.g. a 10-bar series still gets its SMA(5) while the
        RSI(14) entry is ``None``.
        """

        results: Dict[str, Any] = {}
        for name, indicator in self.indicators.items():
            try:
                results[name] = indicator.compute(series)
            except (InsufficientDataError, InvalidDataError) as exc:
                logger.warning(
                    "Indicator skipped",
                    extra={"indicator": name, "reason": str(exc), "n_points": len(series)},
                )
                results[name] = None
        return results

    def evaluate(
        self,
        series: Sequence[float] | None = None,
        predictions: Sequence[float] | None = None,
        targets: Sequence[float] | None = None,
    ) -> EvaluationReport:
        """Run every family whose inputs were supplied."""

        if (predictions is None) != (targets is None):
            raise ValueError("predictions and targets must be supplied together")
        report = EvaluationReport()
        if series is not None:
            report.activations = self.apply_activations(series)
            report.indicators = self.compute_indicators(series)
        if predictions is not None and targets is not None:
            report.losses = self.score_losses(predictions, targets)
        logger.info(
            "Evaluation finished",
            extra={
                "n_points": len(series) if series is not None else 0,
                "n_pairs": len(predictions) if predictions is not None else 0,
            },
        )
        return report


__all__ = ["EvaluationReport", "Evaluator", "to_jsonable"]
