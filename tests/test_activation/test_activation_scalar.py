from __future__ import annotations

import math

import pytest

from quantify.activation.elu import ELUActivationFunction
from quantify.activation.leaky_relu import LeakyReLUActivationFunction
from quantify.activation.param_relu import PReLUActivationFunction
from quantify.activation.relu import ReLUActivationFunction
from quantify.activation.sigmoid import SigmoidActivationFunction
from quantify.activation.step import StepActivationFunction
from quantify.activation.swish import SwishActivationFunction
from quantify.activation.tanh import TanhActivationFunction


def _numeric_derivative(fn, x: float, h: float = 1e-6) -> float:
    return (fn(x + h) - fn(x - h)) / (2 * h)


def test_step_should_fire_only_for_positive_input() -> None:
    step = StepActivationFunction()
    assert [step.activate(v) for v in (5.0, 0.1, 0.0, -1.0)] == [1.0, 1.0, 0.0, 0.0]
    assert step.derivative(3.0) == 0.0


def test_sigmoid_should_saturate_without_overflow() -> None:
    sigmoid = SigmoidActivationFunction()
    assert sigmoid.activate(0.0) == 0.5
    assert sigmoid.activate(1000.0) == 1.0
    assert sigmoid.activate(-1000.0) == 0.0
    assert 0.5 < sigmoid.activate(2.0) < 1.0
    assert 0.0 < sigmoid.activate(-2.0) < 0.5


def test_sigmoid_derivative_should_peak_at_zero() -> None:
    sigmoid = SigmoidActivationFunction()
    assert sigmoid.derivative(0.0) == 0.25
    assert 0.0 < sigmoid.derivative(1.0) < 0.25
    assert 0.0 < sigmoid.derivative(-1.0) < 0.25
    assert sigmoid.derivative(1000.0) == 0.0
    assert sigmoid.derivative(-1000.0) == 0.0


def test_sigmoid_should_propagate_nan() -> None:
    assert math.isnan(SigmoidActivationFunction().activate(float("nan")))


def test_tanh_should_match_math_tanh() -> None:
    tanh = TanhActivationFunction()
    assert tanh.activate(0.0) == 0.0
    assert tanh.activate(1000.0) == 1.0
    assert tanh.activate(-1000.0) == -1.0
    assert tanh.derivative(0.0) == 1.0
    assert tanh.derivative(1.0) == pytest.approx(1.0 - math.tanh(1.0) ** 2)


def test_relu_should_zero_non_positive_input() -> None:
    relu = ReLUActivationFunction()
    assert relu.activate(2.0) == 2.0
    assert relu.activate(-2.0) == 0.0
    assert relu.activate(1000.0) == 1000.0
    assert relu.derivative(1.0) == 1.0
    assert relu.derivative(0.0) == 0.0
    assert relu.derivative(-1000.0) == 0.0


def test_leaky_relu_should_scale_negative_input() -> None:
    leaky = LeakyReLUActivationFunction()
    assert leaky.activate(2.0) == 2.0
    assert leaky.activate(-2.0) == pytest.approx(-0.02)
    assert leaky.activate(-1000.0) == pytest.approx(-10.0)
    assert leaky.activate(0.0) == 0.0
    assert leaky.derivative(0.0) == 0.01
    assert leaky.derivative(1000.0) == 1.0


def test_prelu_should_use_configurable_alpha() -> None:
    prelu = PReLUActivationFunction(0.01)
    assert prelu.activate(-2.0) == pytest.approx(-0.02)
    assert prelu.derivative(0.0) == 0.01
    assert prelu.derivative(-1000.0) == 0.01

    prelu.update_alpha(0.25)
    assert prelu.alpha == 0.25
    assert prelu.activate(-4.0) == -1.0
    assert prelu.derivative(-1.0) == 0.25
    assert prelu.activate(3.0) == 3.0


def test_elu_should_saturate_at_minus_alpha() -> None:
    alpha = 0.01
    elu = ELUActivationFunction(alpha)
    assert elu.activate(2.0) == 2.0
    assert elu.activate(0.0) == 0.0
    assert -alpha < elu.activate(-2.0) < 0.0
    assert elu.activate(-1000.0) == pytest.approx(-alpha)
    assert elu.derivative(1.0) == 1.0
    assert elu.derivative(0.0) == alpha
    assert elu.derivative(-1.0) == pytest.approx(alpha * math.exp(-1.0))
    assert elu.derivative(-1000.0) == 0.0


def test_elu_default_alpha_should_be_one() -> None:
    elu = ELUActivationFunction()
    assert elu.activate(-1.0) == pytest.approx(-0.6321, abs=1e-4)
    assert elu.derivative(-1.0) == pytest.approx(0.3679, abs=1e-4)
    elu.update_alpha(2.0)
    assert elu.activate(-1000.0) == pytest.approx(-2.0)


def test_swish_derivative_should_match_finite_difference() -> None:
    swish = SwishActivationFunction(beta=1.3)
    for x in (-2.0, -0.5, 0.7, 1.5):
        assert swish.derivative(x) == pytest.approx(_numeric_derivative(swish.activate, x), rel=1e-5)


def test_swish_should_behave_at_extremes() -> None:
    swish = SwishActivationFunction()
    assert swish.activate(0.0) == 0.0
    assert swish.derivative(0.0) == 0.5
    assert swish.derivative(1000.0) == pytest.approx(1.0, abs=1e-3)
    assert swish.derivative(-1000.0) == pytest.approx(0.0, abs=1e-3)
    swish.update_beta(2.0)
    assert swish.beta == 2.0


def test_scalar_activation_should_apply_elementwise() -> None:
    relu = ReLUActivationFunction()
    assert relu(2.0) == 2.0
    assert relu.activate_many([-1.0, 0.0, 3.0]) == [0.0, 0.0, 3.0]
    assert relu.derivative_many([-1.0, 0.0, 3.0]) == [0.0, 0.0, 1.0]
    assert relu.apply((1, -2)) == [1.0, 0.0]
