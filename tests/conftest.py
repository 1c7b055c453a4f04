from __future__ import annotations

import logging
from pathlib import Path
from textwrap import dedent
from typing import Callable

import pytest

from quantify.config.models import (
    ActivationConfig,
    IndicatorConfig,
    LossConfig,
    QuantifyConfig,
)
from quantify.core.enums import ActivationId, IndicatorId, LossId


@pytest.fixture(autouse=True)
def reset_quantify_logger():
    yield
    logger = logging.getLogger("quantify")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(dedent(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture(scope="session")
def price_series() -> list[float]:
    return [100.0, 101.0, 102.0, 103.0, 102.0, 101.0, 100.0, 99.0, 98.0, 97.0]


@pytest.fixture(scope="session")
def trending_series() -> list[float]:
    return [
        10.0, 10.5, 11.0, 10.8, 11.5, 12.0, 12.5, 13.0, 13.5, 14.0,
        14.5, 15.0, 15.5, 16.0, 16.5, 17.0, 17.5, 18.0, 18.5, 19.0,
        19.5, 20.0, 20.5, 21.0, 21.5, 22.0, 22.5, 23.0, 23.5, 24.0,
        24.5, 25.0, 25.5, 26.0,
    ]


@pytest.fixture
def default_config() -> QuantifyConfig:
    return QuantifyConfig(
        activations=[
            ActivationConfig(id=ActivationId.RELU),
            ActivationConfig(id=ActivationId.SOFTMAX),
            ActivationConfig(id=ActivationId.PRELU, name="prelu_half", parameters={"alpha": 0.5}),
            ActivationConfig(id=ActivationId.TANH, enabled=False),
        ],
        losses=[
            LossConfig(id=LossId.MSE),
            LossConfig(id=LossId.HUBER, parameters={"delta": 1.0}),
        ],
        indicators=[
            IndicatorConfig(id=IndicatorId.SMA, name="sma_3", parameters={"period": 3}),
            IndicatorConfig(id=IndicatorId.RSI, parameters={"period": 14}),
            IndicatorConfig(id=IndicatorId.BOLLINGER, parameters={"period": 5}),
        ],
    )
