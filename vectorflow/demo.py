"""Train a ReLU network on the sign-agreement task and print its state and predictions."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Sequence, TextIO

from vectorflow.activations import Activation
from vectorflow.evaluation import (
    DEFAULT_EPOCHS,
    DEFAULT_LAYERS,
    DEFAULT_TEST_EXAMPLES,
    DEFAULT_TRAIN_EXAMPLES,
    THRESHOLD,
    generate_sign_dataset,
)
from vectorflow.model import NeuralNetwork

DEFAULT_LEARNING_RATE = 0.001


def run_demo(
    rng: random.Random | None = None,
    train_examples: int = DEFAULT_TRAIN_EXAMPLES,
    test_examples: int = DEFAULT_TEST_EXAMPLES,
    epochs: int = DEFAULT_EPOCHS,
    out: TextIO | None = None,
) -> float:
    """Train a 2-4-1 ReLU network, report on it and return its test accuracy in percent."""
    if test_examples <= 0:
        raise ValueError("test_examples must be positive")
    rng = rng if rng is not None else random.Random()
    out = out if out is not None else sys.stdout

    network = NeuralNetwork(DEFAULT_LAYERS, Activation.RELU, rng)
    train_x, train_y = generate_sign_dataset(train_examples, rng)
    network.train(train_x, train_y, epochs, DEFAULT_LEARNING_RATE, out=out)

    out.write("\n--- Final Neural Network State ---\n")
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
        if (prediction >= THRESHOLD and expected == 1.0) or (
            prediction < THRESHOLD and expected == 0.0
        ):
            correct += 1

    score = correct / test_examples * 100.0
    out.write(f"\nAccuracy: {score:.2f}%\n")
    return score


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Train a small ReLU network on the sign-agreement task."
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--train-examples", type=int, default=DEFAULT_TRAIN_EXAMPLES)
    parser.add_argument("--test-examples", type=int, default=DEFAULT_TEST_EXAMPLES)
    parser.add_argument("--epochs", type=int, default=DEFAULT_EPOCHS)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration from the command line."""
    args = _parser().parse_args(argv)
    run_demo(
        random.Random(args.seed),
        args.train_examples,
        args.test_examples,
        args.epochs,
        sys.stdout,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())