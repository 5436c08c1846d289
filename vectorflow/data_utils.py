"""Vector normalisation helpers."""

from __future__ import annotations

import math
from typing import Iterable


def l1_normalize(data: Iterable[float]) -> list[float]:
    """Scale ``data`` so its absolute values sum to one.

    A vector whose L1 norm is zero is returned unchanged.
    """
    values = list(data)
    total = sum(abs(v) for v in values)
    if total > 0:
        return [v / total for v in values]
    return values


def l2_normalize(data: Iterable[float]) -> list[float]:
    """Scale ``data`` to unit Euclidean length.

    A vector whose L2 norm is zero is returned unchanged.
    """
    values = list(data)
    norm = math.sqrt(sum(v * v for v in values))
    if norm > 0:
        return [v / norm for v in values]
    return values