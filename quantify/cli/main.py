"""Command line interface for quantify.

Every command prints a JSON document on stdout. Library errors are reported
as ``Error: <message>`` and exit with code 1.
"""
from __future__ import annotations

import json
import math
import re
from pathlib import Path
from typing import Any, Dict, List, NoReturn, Optional

import typer
from pydantic import ValidationError

from quantify.activation.base import ScalarActivationFunction
from quantify.activation.registry import get_activation_class
from quantify.config.loader import load_quantify_config, load_series
from quantify.core.errors import QuantifyError
from quantify.core.factory import instantiate
from quantify.loss.registry import get_loss_class
from quantify.pipeline.evaluator import Evaluator, to_jsonable
from quantify.technical_analysis.registry import get_indicator_class
from quantify.telemetry import configure_logging

ERROR_EXIT_CODE = 1
DEFAULT_LOG_LEVEL = "WARNING"

_SEPARATOR = re.compile(r"[,\s]+")


def _parse_values(text: str, param_hint: str) -> List[float]:
    tokens = [token for token in _SEPARATOR.split(text.strip()) if token]
    try:
        return [float(token) for token in tokens]
    except ValueError as exc:
        raise typer.BadParameter(f"expected comma-separated numbers: {exc}", param_hint=param_hint) from exc


def _drop_none(**parameters: Any) -> Dict[str, Any]:
    return {key: value for key, value in parameters.items() if value is not None}


def _null_non_finite(value: Any) -> Any:
    """Replace NaN and infinities with ``None`` so the output stays valid JSON."""

    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _null_non_finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_null_non_finite(item) for item in value]
    return value


def _emit(payload: Any) -> None:
    typer.echo(json.dumps(_null_non_finite(payload), ensure_ascii=False, allow_nan=False))


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=ERROR_EXIT_CODE) from exc


def create_app() -> typer.Typer:
    """Create the Typer application."""

    app = typer.Typer(add_completion=False, help="Activation, loss and indicator utilities")

    @app.callback()
    def main(
        ctx: typer.Context,
        log_level: Optional[str] = typer.Option(
            None,
            "--log-level",
            help="Logging level for the quantify logger; run falls back to telemetry.log_level, others to WARNING.",
        ),
    ) -> None:
        ctx.ensure_object(dict)
        ctx.obj["log_level"] = log_level.upper() if log_level else None
        configure_logging(level=log_level or DEFAULT_LOG_LEVEL)

    @app.command("activate")
    def activate_command(
        name: str = typer.Argument(..., help="Activation id, e.g. relu or softmax."),
        values: str = typer.Option(..., "--values", "-v", help="Comma-separated inputs."),
        alpha: Optional[float] = typer.Option(None, "--alpha", help="PReLU/ELU alpha."),
        beta: Optional[float] = typer.Option(None, "--beta", help="Swish beta."),
        derivative: bool = typer.Option(False, "--derivative", help="Return derivatives instead."),
    ) -> None:
        """Apply an activation function to VALUES."""

        inputs = _parse_values(values, "--values")
        try:
            cls = get_activation_class(name)
            fn = instantiate(cls, _drop_none(alpha=alpha, beta=beta), kind="activation")
            if not derivative:
                result: Any = fn.apply(inputs)
            elif isinstance(fn, ScalarActivationFunction):
                result = fn.derivative_many(inputs)
            else:
                result = fn.derivative(inputs)
        except QuantifyError as exc:
            _fail(exc)
        _emit({"activation": cls.id.value, "derivative": derivative, "result": result})

    @app.command("loss")
    def loss_command(
        name: str = typer.Argument(..., help="Loss id, e.g. mse or huber."),
        predictions: str = typer.Option(..., "--predictions", "-p", help="Comma-separated predictions."),
        targets: str = typer.Option(..., "--targets", "-t", help="Comma-separated targets."),
        delta: Optional[float] = typer.Option(None, "--delta", help="Huber delta."),
    ) -> None:
        """Score PREDICTIONS against TARGETS with a loss function."""

        preds = _parse_values(predictions, "--predictions")
        targs = _parse_values(targets, "--targets")
        try:
            cls = get_loss_class(name)
            fn = instantiate(cls, _drop_none(delta=delta), kind="loss")
            result = fn.compute(preds, targs)
        except QuantifyError as exc:
            _fail(exc)
        _emit({"loss": cls.id.value, "result": result})

    @app.command("indicator")
    def indicator_command(
        name: str = typer.Argument(..., help="Indicator id, e.g. sma or macd."),
        values: str = typer.Option(..., "--values", "-v", help="Comma-separated prices, oldest first."),
        period: Optional[int] = typer.Option(None, "--period", help="Look-back period."),
        fast: Optional[int] = typer.Option(None, "--fast", help="MACD fast period."),
        slow: Optional[int] = typer.Option(None, "--slow", help="MACD slow period."),
        signal: Optional[int] = typer.Option(None, "--signal", help="MACD signal period."),
        num_std: Optional[float] = typer.Option(None, "--num-std", help="Bollinger band width."),
        rolling: bool = typer.Option(False, "--rolling", help="Return the full indicator line."),
    ) -> None:
        """Compute a technical-analysis indicator over VALUES."""

        series = _parse_values(values, "--values")
        parameters = _drop_none(
            period=period,
            fast_period=fast,
            slow_period=slow,
            signal_period=signal,
            num_std=num_std,
        )
        try:
            cls = get_indicator_class(name)
            indicator = instantiate(cls, parameters, kind="indicator")
            if rolling:
                result: Any = [to_jsonable(item) for item in indicator.rolling(series)]
            else:
                result = to_jsonable(indicator.compute(series))
        except QuantifyError as exc:
            _fail(exc)
        _emit({"indicator": cls.id.value, "result": result})

    @app.command("run")
    def run_command(
        ctx: typer.Context,
        config_path: Path = typer.Argument(..., help="YAML file listing the functions to evaluate."),
        series: Optional[Path] = typer.Option(None, "--series", help="Price/input series file."),
        predictions: Optional[Path] = typer.Option(None, "--predictions", help="Predictions file."),
        targets: Optional[Path] = typer.Option(None, "--targets", help="Targets file."),
    ) -> None:
        """Evaluate every enabled function of CONFIG_PATH."""

        if (predictions is None) != (targets is None):
            raise typer.BadParameter("--predictions and --targets must be given together")
        try:
            config = load_quantify_config(config_path)
            # an explicit --log-level wins over the config file
            configure_logging(
                level=ctx.obj.get("log_level") or config.telemetry.log_level,
                log_dir=config.telemetry.log_dir,
            )
            evaluator = Evaluator.from_config(config)
            report = evaluator.evaluate(
                series=load_series(series) if series is not None else None,
                predictions=load_series(predictions) if predictions is not None else None,
                targets=load_series(targets) if targets is not None else None,
            )
        except (QuantifyError, ValidationError, FileNotFoundError, ValueError, TypeError) as exc:
            _fail(exc)
        _emit(report.to_dict())

    return app


app = create_app()


__all__ = ["app", "create_app"]
