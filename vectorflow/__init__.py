"""A small fully connected neural network with activations, matrix and normalisation helpers."""

__version__ = "0.1.0"
__all__ = ["activations", "matrix", "data_utils", "model", "evaluation", "demo"]