import math

import pytest

from vectorflow.activations import (
    Activation,
    leaky_relu,
    leaky_relu_derivative,
    relu,
    relu_derivative,
    sigmoid,
    sigmoid_derivative,
    softmax,
)


@pytest.mark.parametrize("x", [0.1, 1.0, 3.5, 100.0])
def test_relu_passes_positive_values(x):
    assert relu(x) == x


@pytest.mark.parametrize("x", [-0.1, -2.0, 0.0])
def test_relu_clamps_non_positive(x):
    assert relu(x) == 0.0


def test_relu_derivative():
    assert relu_derivative(2.0) == 1.0
    assert relu_derivative(0.0) == 0.0


@pytest.mark.parametrize("x", [-0.5, -3.0, -100.0])
def test_leaky_relu_negative_slope(x):
    assert leaky_relu(x) / x == pytest.approx(0.01)


def test_leaky_relu_positive_identity():
    assert leaky_relu(4.25) == 4.25


def test_leaky_relu_derivative():
    assert leaky_relu_derivative(1.5) == 1.0
    assert leaky_relu_derivative(-1.5) == pytest.approx(0.01)


def test_sigmoid_midpoint():
    assert sigmoid(0.0) == 0.5


@pytest.mark.parametrize("x", [0.3, 1.0, 5.0, 20.0])
def test_sigmoid_symmetry(x):
    assert sigmoid(x) + sigmoid(-x) == pytest.approx(1.0)


def test_sigmoid_extremes_do_not_overflow():
    low = sigmoid(-1000.0)
    high = sigmoid(1000.0)
    assert 0.0 <= low < 1e-300
    assert high == pytest.approx(1.0)


def test_sigmoid_monotone():
    values = [sigmoid(x) for x in (-3.0, -1.0, 0.0, 1.0, 3.0)]
    assert values == sorted(values)


def test_sigmoid_derivative_properties():
    assert sigmoid_derivative(0.0) == 0.0
    assert sigmoid_derivative(1.0) == 0.0
    assert sigmoid_derivative(0.2) == pytest.approx(sigmoid_derivative(0.8))
    assert sigmoid_derivative(0.5) > sigmoid_derivative(0.3)


def test_softmax_sums_to_one_and_keeps_order():
    probs = softmax([1.0, 3.0, 2.0])
    assert sum(probs) == pytest.approx(1.0)
    assert probs[1] > probs[2] > probs[0]


def test_softmax_shift_invariant():
    base = softmax([0.5, -1.0, 2.0])
    shifted = softmax([x + 50.0 for x in [0.5, -1.0, 2.0]])
    assert shifted == pytest.approx(base)


def test_softmax_equal_logits_uniform():
    probs = softmax([7.0, 7.0, 7.0, 7.0])
    assert all(p == pytest.approx(probs[0]) for p in probs)
    assert sum(probs) == pytest.approx(1.0)


def test_softmax_large_logits_stable():
    probs = softmax([1000.0, 1000.0])
    assert all(math.isfinite(p) for p in probs)
    assert probs[0] == pytest.approx(probs[1])


def test_softmax_empty_raises():
    with pytest.raises(ValueError):
        softmax([])


def test_activation_codes():
    assert Activation(0) is Activation.RELU
    assert Activation(1) is Activation.SIGMOID
    assert Activation(2) is Activation.LEAKY_RELU


def test_unknown_code_falls_back_to_relu():
    assert Activation(9) is Activation.RELU


@pytest.mark.parametrize(
    "activation, forward, backward",
    [
        (Activation.RELU, relu, relu_derivative),
        (Activation.SIGMOID, sigmoid, sigmoid_derivative),
        (Activation.LEAKY_RELU, leaky_relu, leaky_relu_derivative),
    ],
)
@pytest.mark.parametrize("x", [-1.5, 0.25, 2.0])
def test_activation_dispatch(activation, forward, backward, x):
    assert activation.apply(x) == forward(x)
    assert activation.derivative(x) == backward(x)