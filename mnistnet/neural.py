"""A feed-forward multi-layer perceptron."""

from __future__ import annotations

import random
from collections.abc import Callable

from .matrix import Matrix


class NetworkError(ValueError):
    """Raised for an invalid network setup or use."""


class Layer:
    """A fully connected layer: ``outputs = inputs @ weights + biases``.

    Weights have shape ``n_inputs x n_neurons``; biases and outputs are
    ``1 x n_neurons``. Weights and biases start uniformly random in [0, 1).
    """

    def __init__(
        self, n_neurons: int, n_inputs: int, rng: random.Random | None = None
    ) -> None:
        self.n_neurons = n_neurons
        self.n_inputs = n_inputs
        self.weights = Matrix(n_inputs, n_neurons)
        self.biases = Matrix(1, n_neurons)
        self.outputs = Matrix(1, n_neurons)
        self.weights.fill_random(rng)
        self.biases.fill_random(rng)


class Network:
    """A fixed-depth stack of layers.

    ``depth`` counts hidden and output layers, not the input layer. The
    activation is kept with the network; the forward pass is purely affine.
    """

    def __init__(self, depth: int, activation: Callable[[float], float]) -> None:
        if activation is None:
            raise NetworkError("Invalid activation function!")
        if depth <= 0:
            raise NetworkError("Invalid network depth")
        self.depth = depth
        self.activation = activation
        self.layers: list[Layer] = []

    def append(self, layer: Layer) -> None:
        """Add a layer after the existing ones."""
        if layer is None:
            raise NetworkError("Cannot append a missing layer")
        if len(self.layers) == self.depth:
            raise NetworkError("Network already at maximum capacity!")
        self.layers.append(layer)

    def forward(self, inputs: Matrix) -> Matrix:
        """Run ``inputs`` through every layer and return the last outputs."""
        if inputs is None:
            raise NetworkError("Missing input matrix")
        if not self.layers:
            raise NetworkError("Network has no layers")
        current = inputs
        for layer in self.layers:
            layer.outputs = (current @ layer.weights) + layer.biases
            current = layer.outputs
        return current