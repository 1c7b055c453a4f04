from __future__ import annotations

import json
import logging

import pytest
from typer.testing import CliRunner

from quantify.cli import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _payload(result) -> dict:
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)


def test_activate_command_should_apply_function(runner) -> None:
    payload = _payload(runner.invoke(app, ["activate", "relu", "--values=-1,0,2"]))
    assert payload == {"activation": "relu", "derivative": False, "result": [0.0, 0.0, 2.0]}


def test_activate_command_should_pass_parameters_and_derivative(runner) -> None:
    payload = _payload(
        runner.invoke(app, ["activate", "prelu", "--values=-1,1", "--alpha", "0.5", "--derivative"])
    )
    assert payload["result"] == [0.5, 1.0]


def test_activate_command_should_return_softmax_jacobian(runner) -> None:
    payload = _payload(runner.invoke(app, ["activate", "softmax", "--values", "0,0", "--derivative"]))
    assert payload["result"] == [[0.25, -0.25], [-0.25, 0.25]]


def test_activate_command_should_fail_on_unknown_id(runner) -> None:
    result = runner.invoke(app, ["activate", "gelu", "--values", "1"])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_activate_command_should_reject_non_numeric_values(runner) -> None:
    result = runner.invoke(app, ["activate", "relu", "--values", "a,b"])
    assert result.exit_code == 2


def test_loss_command_should_score_predictions(runner) -> None:
    payload = _payload(runner.invoke(app, ["loss", "mse", "-p", "1,2,3", "-t", "1,2,4"]))
    assert payload["loss"] == "mse"
    assert payload["result"] == pytest.approx(1.0 / 3.0)


def test_loss_command_should_report_length_mismatch(runner) -> None:
    result = runner.invoke(app, ["loss", "mae", "-p", "1,2", "-t", "1,2,3"])
    assert result.exit_code == 1
    assert "same length" in result.output


def test_indicator_command_should_compute_latest_value(runner) -> None:
    payload = _payload(runner.invoke(app, ["indicator", "sma", "--values", "1,2,3,4,5", "--period", "3"]))
    assert payload == {"indicator": "sma", "result": 4.0}


def test_indicator_command_should_serialize_bands_and_rolling(runner) -> None:
    payload = _payload(
        runner.invoke(app, ["indicator", "bollinger", "--values", "1,3", "--period", "2", "--num-std", "1"])
    )
    assert payload["result"] == {"upper": 3.0, "middle": 2.0, "lower": 1.0}

    payload = _payload(
        runner.invoke(app, ["indicator", "ema", "--values", "1,2,3,4", "--period", "2", "--rolling"])
    )
    assert len(payload["result"]) == 3


def test_indicator_command_should_fail_on_short_series(runner) -> None:
    result = runner.invoke(app, ["indicator", "rsi", "--values", "1,2"])
    assert result.exit_code == 1
    assert "Insufficient data" in result.output


def test_indicator_command_should_fail_on_inverted_macd(runner) -> None:
    result = runner.invoke(
        app, ["indicator", "macd", "--values", "1,2,3,4,5", "--fast", "4", "--slow", "2"]
    )
    assert result.exit_code == 1


def test_run_command_should_evaluate_config(runner, write_file) -> None:
    config_path = write_file(
        "quantify.yml",
        """
        activations:
          - id: step
        losses:
          - id: mae
        indicators:
          - id: sma
            parameters:
              period: 2
          - id: macd
            parameters:
              fast_period: 2
              slow_period: 3
              signal_period: 2
        telemetry:
          log_level: WARNING
        """,
    )
    series_path = write_file("series.txt", "1\n2\n3\n4\n")
    preds_path = write_file("preds.yml", "[1, 2]")
    targets_path = write_file("targets.json", "[2, 2]")

    payload = _payload(
        runner.invoke(
            app,
            [
                "run",
                str(config_path),
                "--series",
                str(series_path),
                "--predictions",
                str(preds_path),
                "--targets",
                str(targets_path),
            ],
        )
    )
    assert payload["activations"] == {"step": [1.0, 1.0, 1.0, 1.0]}
    assert payload["losses"] == {"mae": 0.5}
    assert payload["indicators"]["sma"] == 3.5
    assert payload["indicators"]["macd"] == pytest.approx(5.0 / 12.0)


def test_run_command_should_fail_on_missing_config(runner, tmp_path) -> None:
    result = runner.invoke(app, ["run", str(tmp_path / "missing.yml")])
    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_run_command_should_apply_config_log_level(runner, write_file) -> None:
    config_path = write_file(
        "debug.yml",
        """
        activations:
          - id: relu
        telemetry:
          log_level: DEBUG
        """,
    )
    result = runner.invoke(app, ["run", str(config_path)])
    assert result.exit_code == 0, result.output
    assert logging.getLogger("quantify").level == logging.DEBUG
    assert "Built evaluator" in result.output


def test_run_command_should_prefer_explicit_log_level(runner, write_file) -> None:
    config_path = write_file(
        "debug.yml",
        """
        activations:
          - id: relu
        telemetry:
          log_level: DEBUG
        """,
    )
    result = runner.invoke(app, ["--log-level", "ERROR", "run", str(config_path)])
    assert result.exit_code == 0, result.output
    assert logging.getLogger("quantify").level == logging.ERROR
    assert json.loads(result.stdout)["activations"] == {}


def test_loss_command_should_emit_null_for_non_finite_result(runner) -> None:
    payload = _payload(runner.invoke(app, ["loss", "mse", "-p", "inf", "-t", "0"]))
    assert payload["result"] is None
