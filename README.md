# vectorflow

vectorflow is a small, fully connected neural network in plain Python with no
dependencies. It trains one sample at a time on squared-error loss with
backpropagation. It also provides activation functions, matrix helpers on
nested lists and vector normalisation.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra:

```
pip install .[test]
pytest
```

## Using the network

```python
import random
from vectorflow.activations import Activation
from vectorflow.model import NeuralNetwork

rng = random.Random(42)
net = NeuralNetwork([2, 4, 1], Activation.SIGMOID, rng)

inputs = [[0.5, 0.5], [-0.5, 0.5], [-0.5, -0.5], [0.5, -0.5]]
targets = [[1.0], [0.0], [1.0], [0.0]]
history = net.train(inputs, targets, epochs=200, learning_rate=0.1)

print(history[-1])               # average loss of the last epoch
print(net.predict([0.3, 0.7]))   # one value per output neuron
print(net.describe())            # all weights and biases as text
```

- `NeuralNetwork(layers, activation=Activation.SIGMOID, rng=None)` needs at
  least two layers, and each layer needs at least one neuron. It starts its
  weights and biases at random values in `[0, sqrt(2 / fan_in))`. Every layer
  uses the same activation.
- `Activation` has the members `RELU` (0), `SIGMOID` (1) and `LEAKY_RELU`
  (2). Any other integer code is treated as `RELU`.
- `train(inputs, targets, epochs, learning_rate, out=None)` accepts a single
  number as a target for a one-output network. It returns the average loss of
  every epoch. It writes its progress to `out`, which is standard output when
  not given, every 100 epochs and after the last epoch.
- `predict(sample)` raises `ValueError` when the sample has the wrong length.
  `train` raises `ValueError` for empty data, mismatched data or data of the
  wrong shape.

## Helpers

- `vectorflow.activations` provides `relu`, `sigmoid` and `leaky_relu` (slope
  0.01). Their derivatives `relu_derivative`, `sigmoid_derivative` and
  `leaky_relu_derivative` take the *activated* value. `softmax(logits)`
  raises `ValueError` when given no logits.
- `vectorflow.matrix` provides the following functions. Each raises
  `ValueError` when the shapes do not fit.
  - `affine(inputs, weights, biases)` computes `biases + inputs @ weights`.
  - `add_matrices` and `subtract_matrices` work element by element.
  - `multiply_matrices` returns the matrix product.
  - `transpose` returns the transposed matrix.
- `vectorflow.data_utils` provides `l1_normalize` and `l2_normalize`, which
  return new lists. A vector whose norm is zero is returned unchanged.
- `vectorflow.evaluation` works on the sign task. The task is to output 1
  when both inputs in `[-1, 1)` have the same sign and 0 otherwise.
  - `generate_sign_dataset(count, rng=None)` draws a dataset for the task.
  - `accuracy(network, inputs, targets)` returns the percentage of samples
    whose first output falls on the correct side of 0.5.
  - `evaluate_network(network, learning_rate, ...)` trains the network on
    fresh data, prints its weights and test predictions, and returns the
    accuracy.

## Commands

```
vectorflow-evaluate [--seed N] [--learning-rate LR] [--train-examples N] [--test-examples N] [--epochs N]
```

This command trains and scores a 2-4-1 network on the sign task, once with
ReLU and once with sigmoid. The defaults are 10000 training examples, 100
test examples, 100 epochs and a learning rate of 0.001.

```
vectorflow-demo [--seed N] [--train-examples N] [--test-examples N] [--epochs N]
```

This command trains one 2-4-1 ReLU network on the same task with a learning
rate of 0.001. It then prints the learned weights, each test prediction and
the final accuracy.

Pass `--seed` to either command to make the run reproducible.

## What it does not do

- `vectorflow-evaluate` prints headings for L1- and L2-normalised data, but
  it runs no evaluation under them. The normalisation helpers are only
  available to call from your own code.
- Trained networks cannot be saved or loaded.
- Training has no mini-batches, no momentum and no GPU support. It is plain
  per-sample gradient descent in pure Python, so it is slow on large data.