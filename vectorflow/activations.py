"""Activation functions, their derivatives and softmax."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Callable, Iterable

LEAKY_SLOPE = 0.01


def relu(x: float) -> float:
    """Rectified linear unit."""
    return x if x > 0 else 0.0


def relu_derivative(activated: float) -> float:
    """Derivative of ReLU, given the activated value."""
    return float(activated > 0)


def leaky_relu(x: float) -> float:
    """ReLU with a small slope for negative inputs."""
    return x if x > 0 else LEAKY_SLOPE * x


def leaky_relu_derivative(activated: float) -> float:
    """Derivative of leaky ReLU, given the activated value."""
    return 1.0 if activated > 0 else LEAKY_SLOPE


def sigmoid(x: float) -> float:
    """Logistic sigmoid, safe against overflow for large magnitudes."""
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def sigmoid_derivative(activated: float) -> float:
    """Derivative of the sigmoid, given the activated value."""
    return activated * (1.0 - activated)


def softmax(logits: Iterable[float]) -> list[float]:
    """Return the softmax probabilities of ``logits``."""
    values = list(logits)
    if not values:
        raise ValueError("softmax needs at least one logit")
    peak = max(values)
    exps = [math.exp(v - peak) for v in values]
    total = sum(exps)
    return [e / total for e in exps]


class Activation(IntEnum):
    """Activation choice; unknown integer codes fall back to ReLU."""

    RELU = 0
    SIGMOID = 1
    LEAKY_RELU = 2

    @classmethod
    def _missing_(cls, value: object) -> "Activation | None":
        if isinstance(value, int):
            return cls.RELU
        return None

    def apply(self, x: float) -> float:
        """Apply the activation to a pre-activation value."""
        return _FORWARD[self](x)

    def derivative(self, activated: float) -> float:
        """Derivative of the activation, expressed in its output."""
        return _BACKWARD[self](activated)


_FORWARD: dict[Activation, Callable[[float], float]] = {
    Activation.RELU: relu,
    Activation.SIGMOID: sigmoid,
    Activation.LEAKY_RELU: leaky_relu,
}

_BACKWARD: dict[Activation, Callable[[float], float]] = {
    Activation.RELU: relu_derivative,
    Activation.SIGMOID: sigmoid_derivative,
    Activation.LEAKY_RELU: leaky_relu_derivative,
}