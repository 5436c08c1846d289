"""Train and score networks on the sign-agreement task."""

from __future__ import annotations

import argparse
import random
import sys
from numbers import Real
from typing import Sequence, TextIO

from vectorflow.activations import Activation
from vectorflow.model import NeuralNetwork

DEFAULT_TRAIN_EXAMPLES = 10000
DEFAULT_TEST_EXAMPLES = 100
DEFAULT_EPOCHS = 100
DEFAULT_LAYERS = (2, 4, 1)
THRESHOLD = 0.5


def generate_sign_dataset(
    count: int, rng: random.Random | None = None
) -> tuple[list[list[float]], list[float]]:
    """Draw ``count`` points in [-1, 1)^2 labelled 1.0 when both signs agree."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = rng if rng is not None else random.Random()
    inputs: list[list[float]] = []
    targets: list[float] = []
    for _ in range(count):
        x1 = rng.random() * 2.0 - 1.0
        x2 = rng.random() * 2.0 - 1.0
        inputs.append([x1, x2])
        targets.append(1.0 if x1 * x2 > 0 else 0.0)
    return inputs, targets


def _first(target: "float | Sequence[float]") -> float:
    if isinstance(target, Real):
        return float(target)
    return float(target[0])


def _is_correct(prediction: float, expected: float) -> bool:
    return (prediction >= THRESHOLD and expected == 1.0) or (
        prediction < THRESHOLD and expected == 0.0
    )


def accuracy(
    network: NeuralNetwork,
    inputs: Sequence[Sequence[float]],
    targets: Sequence["float | Sequence[float]"],
) -> float:
    """Percentage of samples whose first output falls on the right side of 0.5."""
    if not inputs or len(inputs) != len(targets):
        raise ValueError("inputs and targets must be non-empty and of equal length")
    correct = sum(
        _is_correct(network.predict(x)[0], _first(y)) for x, y in zip(inputs, targets)
    )
    return correct / len(inputs) * 100.0


def evaluate_network(
    network: NeuralNetwork,
    learning_rate: float,
    label: str = "",
    rng: random.Random | None = None,
    train_examples: int = DEFAULT_TRAIN_EXAMPLES,
    test_examples: int = DEFAULT_TEST_EXAMPLES,
    epochs: int = DEFAULT_EPOCHS,
    out: TextIO | None = None,
) -> float:
    """Train ``network`` on fresh sign data, report on it and return its accuracy."""
    out = out if out is not None else sys.stdout
    rng = rng if rng is not None else random.Random()
    label = label or network.activation.name

    train_x, train_y = generate_sign_dataset(train_examples, rng)
    network.train(train_x, train_y, epochs, learning_rate, out=out)

    out.write(
        f"\n--- Final Neural Network State with Learning Rate {learning_rate:.3f} "
        f"and Activation {label} ---\n"
    )
    out.write(network.describe())

    out.write("\n--- Predictions for Test Data ---\n")
    test_x, test_y = generate_sign_dataset(test_examples, rng)
    correct = 0
    for sample, expected in zip(test_x, test_y):
        prediction = network.predict(sample)[0]
        shown = ", ".join(f"{v:.1f}" for v in sample)
        out.write(
            f"Input: [{shown}], Predicted: {prediction:.4f}, Expected: {expected:.1f}\n"
        )
        correct += _is_correct(prediction, expected)

    score = correct / test_examples * 100.0 if test_examples else 0.0
    out.write(f"\nAccuracy: {score:.2f}%\n")
    out.write(
        f"Activation Function: {label}, Learning Rate: {learning_rate:g}, "
        f"Accuracy: {score:g}%\n"
    )
    return score


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Evaluate small networks on the sign-agreement task."
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--learning-rate", type=float, default=0.001)
    parser.add_argument("--train-examples", type=int, default=DEFAULT_TRAIN_EXAMPLES)
    parser.add_argument("--test-examples", type=int, default=DEFAULT_TEST_EXAMPLES)
    parser.add_argument("--epochs", type=int, default=DEFAULT_EPOCHS)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Evaluate ReLU and sigmoid networks on unnormalised data."""
    args = _parser().parse_args(argv)
    rng = random.Random(args.seed)
    out = sys.stdout

    out.write("\n--- Evaluating with Unnormalized Data ---\n")
    for activation in (Activation.RELU, Activation.SIGMOID):
        network = NeuralNetwork(DEFAULT_LAYERS, activation, rng)
        evaluate_network(
            network,
            args.learning_rate,
            activation.name,
            rng,
            args.train_examples,
            args.test_examples,
            args.epochs,
            out,
        )

    out.write("\n--- Evaluating with L1 Normalized Data ---\n")
    out.write("\n--- Evaluating with L2 Normalized Data ---\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())