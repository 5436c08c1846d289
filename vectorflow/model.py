"""A small fully connected feed-forward network trained by plain SGD."""

from __future__ import annotations

import math
import random
import sys
from numbers import Real
from typing import Sequence, TextIO

from vectorflow.activations import Activation
from vectorflow.matrix import affine

Target = "float | Sequence[float]"


class NeuralNetwork:
    """Dense network using one activation on every layer.

    ``weights[l][k][j]`` connects neuron ``k`` of layer ``l`` to neuron ``j``
    of layer ``l + 1``; ``biases[l][j]`` is the bias of that neuron ``j``.
    """

    def __init__(
        self,
        layers: Sequence[int],
        activation: Activation | int = Activation.SIGMOID,
        rng: random.Random | None = None,
    ) -> None:
        self.layers: list[int] = [int(size) for size in layers]
        if len(self.layers) < 2:
            raise ValueError(
                "a neural network must have at least 2 layers (input and output)"
            )
        if any(size <= 0 for size in self.layers):
            raise ValueError("every layer must have at least one neuron")
        self.activation = Activation(activation)
        rng = rng if rng is not None else random.Random()

        self.weights: list[list[list[float]]] = []
        self.biases: list[list[float]] = []
        for fan_in, fan_out in zip(self.layers, self.layers[1:]):
            scale = math.sqrt(2.0 / fan_in)
            self.weights.append(
                [[rng.random() * scale for _ in range(fan_out)] for _ in range(fan_in)]
            )
            self.biases.append([rng.random() * scale for _ in range(fan_out)])

    @property
    def input_size(self) -> int:
        return self.layers[0]

    @property
    def output_size(self) -> int:
        return self.layers[-1]

    def describe(self) -> str:
        """Return a readable listing of all weights and biases."""
        lines = ["", "--- Neural Network Weights and Biases ---"]
        for index, (weights, biases) in enumerate(zip(self.weights, self.biases)):
            fan_in, fan_out = self.layers[index], self.layers[index + 1]
            lines.append(
                f"Layer {index} to Layer {index + 1} ({fan_in} -> {fan_out}):"
            )
            lines.append("  Weights:")
            for node, row in enumerate(weights):
                lines.append(f"    Node {node}: [{_join(row)}]")
            lines.append(f"  Biases: [{_join(biases)}]")
            lines.append("")
        return "\n".join(lines) + "\n"

    def train(
        self,
        inputs: Sequence[Sequence[float]],
        targets: Sequence[Target],
        epochs: int,
        learning_rate: float,
        out: TextIO | None = None,
    ) -> list[float]:
        """Train with per-sample gradient descent on squared error.

        Returns the average loss of each epoch. Progress is written to
        ``out`` (standard output by default) every 100 epochs and at the end.
        """
        samples = [list(map(float, x)) for x in inputs]
        expected = [self._target(y) for y in targets]
        if not samples or not expected or len(samples) != len(expected):
            raise ValueError(
                "training data and labels must be non-empty and have the same "
                "number of samples"
            )
        if any(len(x) != self.input_size for x in samples) or any(
            len(y) != self.output_size for y in expected
        ):
            raise ValueError("training data dimensions do not match model shape")

        out = out if out is not None else sys.stdout
        size = len(samples)
        out.write(
            f"Training started for {epochs} epochs with learning rate "
            f"{learning_rate:f}. Data size: {size}. Input: {self.input_size}, "
            f"Output: {self.output_size}\n"
        )

        history: list[float] = []
        for epoch in range(epochs):
            total = 0.0
            for x, y in zip(samples, expected):
                activations = self._forward(x)
                total += sum((a - t) ** 2 for a, t in zip(activations[-1], y))
                self._backward(x, activations, y, learning_rate)
            average = total / size
            history.append(average)
            if (epoch + 1) % 100 == 0 or epoch == epochs - 1:
                out.write(
                    f"Epoch {epoch + 1}/{epochs} completed. "
                    f"Average Loss: {average:f}\n"
                )
        out.write("Training completed.\n")
        return history

    def predict(self, sample: Sequence[float]) -> list[float]:
        """Return the network's output for one input sample."""
        values = [float(v) for v in sample]
        if len(values) != self.input_size:
            raise ValueError("input sample dimensions do not match model input shape")
        return self._forward(values)[-1]

    def _target(self, target: Target) -> list[float]:
        if isinstance(target, Real):
            return [float(target)]
        return [float(v) for v in target]

    def _forward(self, x: list[float]) -> list[list[float]]:
        activations: list[list[float]] = []
        current = x
        for weights, biases in zip(self.weights, self.biases):
            current = [self.activation.apply(z) for z in affine(current, weights, biases)]
            activations.append(current)
        return activations

    def _backward(
        self,
        x: list[float],
        activations: list[list[float]],
        target: list[float],
        learning_rate: float,
    ) -> None:
        derivative = self.activation.derivative
        errors: list[list[float]] = [
            [(a - t) * derivative(a) for a, t in zip(activations[-1], target)]
        ]
        for layer in range(len(self.weights) - 2, -1, -1):
            following = errors[0]
            next_weights = self.weights[layer + 1]
            errors.insert(
                0,
                [
                    sum(e * w for e, w in zip(following, next_weights[j])) * derivative(a)
                    for j, a in enumerate(activations[layer])
                ],
            )

        previous_layers = [x] + activations[:-1]
        for weights, biases, layer_errors, previous in zip(
            self.weights, self.biases, errors, previous_layers
        ):
            for row, value in zip(weights, previous):
                for j, error in enumerate(layer_errors):
                    row[j] -= learning_rate * error * value
            for j, error in enumerate(layer_errors):
                biases[j] -= learning_rate * error


def _join(values: Sequence[float]) -> str:
    return ", ".join(f"{v:f}" for v in values)