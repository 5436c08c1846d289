"""Dense matrix helpers on nested lists."""

from __future__ import annotations

from typing import Sequence

Matrix = list[list[float]]


def _rows(matrix: Sequence[Sequence[float]], name: str) -> tuple[Matrix, int]:
    rows = [list(row) for row in matrix]
    if not rows:
        return rows, 0
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError(f"{name} has rows of different lengths")
    return rows, width


def affine(
    inputs: Sequence[float],
    weights: Sequence[Sequence[float]],
    biases: Sequence[float],
) -> list[float]:
    """Compute ``biases + inputs @ weights``.

    ``weights`` holds one row per input, each with one entry per output.
    """
    rows, width = _rows(weights, "weights")
    if len(rows) != len(inputs):
        raise ValueError(
            f"expected {len(rows)} inputs for these weights, got {len(inputs)}"
        )
    if rows and width != len(biases):
        raise ValueError(f"weights have {width} outputs but {len(biases)} biases")
    return [
        bias + sum(x * row[j] for x, row in zip(inputs, rows))
        for j, bias in enumerate(biases)
    ]


def _elementwise(a, b, op, name: str) -> Matrix:
    rows_a, width_a = _rows(a, "first matrix")
    rows_b, width_b = _rows(b, "second matrix")
    if len(rows_a) != len(rows_b) or width_a != width_b:
        raise ValueError(f"cannot {name} matrices of different shapes")
    return [[op(x, y) for x, y in zip(ra, rb)] for ra, rb in zip(rows_a, rows_b)]


def add_matrices(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Element-wise sum of two matrices of equal shape."""
    return _elementwise(a, b, lambda x, y: x + y, "add")


def subtract_matrices(
    a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]
) -> Matrix:
    """Element-wise difference ``a - b`` of two matrices of equal shape."""
    return _elementwise(a, b, lambda x, y: x - y, "subtract")


def multiply_matrices(
    a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]
) -> Matrix:
    """Matrix product ``a @ b``."""
    rows_a, width_a = _rows(a, "first matrix")
    rows_b, _ = _rows(b, "second matrix")
    if rows_a and width_a != len(rows_b):
        raise ValueError(
            f"cannot multiply: {width_a} columns against {len(rows_b)} rows"
        )
    columns = list(zip(*rows_b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in rows_a]


def transpose(a: Sequence[Sequence[float]]) -> Matrix:
    """Return the transpose of ``a``."""
    rows, _ = _rows(a, "matrix")
    return [list(col) for col in zip(*rows)]