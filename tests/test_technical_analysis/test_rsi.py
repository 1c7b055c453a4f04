from __future__ import annotations

import math

import pytest

from quantify.core.errors import InsufficientDataError, InvalidDataError
from quantify.technical_analysis.rsi import RelativeStrengthIndex


def test_rsi_should_default_to_period_fourteen() -> None:
    assert RelativeStrengthIndex().period == 14
    assert RelativeStrengthIndex(0).period == 1


def test_rsi_should_be_high_for_mostly_rising_series() -> None:
    data = [1.0, 1.1, 1.2, 1.1, 1.15, 1.2, 1.25, 1.3, 1.35, 1.4, 1.45, 1.5, 1.55, 1.6, 1.65]
    rsi = RelativeStrengthIndex(14).compute(data)
    assert 70.0 < rsi < 100.0
    # gains 0.75, losses 0.1 -> RS 7.5
    assert rsi == pytest.approx(100.0 - 100.0 / 8.5, abs=1e-6)


def test_rsi_should_apply_wilder_smoothing_after_seed() -> None:
    # seed: avg gain 0.5, avg loss 0.5; then +1 -> 0.75 / 0.25
    assert RelativeStrengthIndex(2).compute([1.0, 2.0, 1.0, 2.0]) == pytest.approx(75.0)


def test_rsi_should_handle_one_sided_series() -> None:
    rsi = RelativeStrengthIndex(2)
    assert rsi.compute([1.0, 2.0, 3.0]) == 100.0
    assert rsi.compute([3.0, 2.0, 1.0]) == 0.0
    assert rsi.compute([1.0, 1.0, 1.0]) == 0.0


def test_rsi_should_require_period_plus_one_points() -> None:
    rsi = RelativeStrengthIndex(14)
    assert rsi.min_length == 15
    with pytest.raises(InsufficientDataError):
        rsi.compute([1.0, 2.0])


def test_rsi_should_reject_non_finite_values() -> None:
    with pytest.raises(InvalidDataError):
        RelativeStrengthIndex(2).compute([1.0, math.nan, 3.0, 4.0])


def test_rsi_rolling_should_compute_each_prefix() -> None:
    rsi = RelativeStrengthIndex(2)
    line = rsi.rolling([1.0, 2.0, 1.0, 2.0, 3.0])
    assert len(line) == 3
    assert line[0] == pytest.approx(50.0)
    assert line[1] == pytest.approx(75.0)
    assert line[-1] == pytest.approx(rsi.compute([1.0, 2.0, 1.0, 2.0, 3.0]))


def test_rsi_rolling_should_be_empty_for_short_series() -> None:
    assert RelativeStrengthIndex(14).rolling([1.0, 2.0, 3.0]) == []
