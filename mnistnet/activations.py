"""Activation functions for network neurons."""

from __future__ import annotations

import math

ALPHA = 0.01
"""Slope of the leaky ReLU for negative inputs."""


def sigmoid(x: float) -> float:
    """Logistic sigmoid, squashing real values into [0, 1]."""
    try:
        return 1.0 / (1.0 + math.exp(-x))
    except OverflowError:
        return 0.0


def tanh(x: float) -> float:
    """Hyperbolic tangent, computed as ``2 * sigmoid(2x) - 1``."""
    return 2.0 * sigmoid(2.0 * x) - 1.0


def relu(x: float) -> float:
    """Rectified linear unit: ``x`` when positive, otherwise 0."""
    return x if x > 0 else 0.0


def leaky_relu(x: float) -> float:
    """Leaky ReLU: ``x`` for non-negative input, ``ALPHA * x`` otherwise."""
    return x if x >= 0 else ALPHA * x