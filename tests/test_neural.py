import random

import pytest

from mnistnet.activations import sigmoid
from mnistnet.matrix import Matrix, MatrixError
from mnistnet.neural import Layer, Network, NetworkError


def _identity(n):
    return Matrix.from_rows([[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)])


def _passthrough(n):
    layer = Layer(n, n, random.Random(0))
    layer.weights = _identity(n)
    layer.biases = Matrix(1, n)
    return layer


def test_layer_shapes():
    layer = Layer(3, 5, random.Random(1))
    assert layer.weights.shape == (5, 3)
    assert layer.biases.shape == (1, 3)
    assert layer.outputs == Matrix(1, 3)


def test_layer_values_in_unit_interval():
    layer = Layer(4, 6, random.Random(2))
    values = [v for row in layer.weights.tolist() + layer.biases.tolist() for v in row]
    assert all(0.0 <= v < 1.0 for v in values)


def test_layer_seeded_is_deterministic():
    a = Layer(3, 3, random.Random(7))
    b = Layer(3, 3, random.Random(7))
    assert a.weights == b.weights
    assert a.biases == b.biases


@pytest.mark.parametrize("depth", [0, -1])
def test_invalid_depth(depth):
    with pytest.raises(NetworkError):
        Network(depth, sigmoid)


def test_missing_activation():
    with pytest.raises(NetworkError):
        Network(1, None)


def test_append_beyond_depth():
    net = Network(1, sigmoid)
    net.append(Layer(2, 2))
    with pytest.raises(NetworkError, match="maximum capacity"):
        net.append(Layer(2, 2))
    assert len(net.layers) == 1


def test_forward_passthrough_returns_input():
    net = Network(2, sigmoid)
    net.append(_passthrough(3))
    net.append(_passthrough(3))
    inputs = Matrix.from_rows([[1.0, 2.0, 3.0]])
    out = net.forward(inputs)
    assert out == inputs
    assert net.layers[0].outputs == inputs


def test_forward_adds_biases():
    layer = _passthrough(2)
    layer.biases = Matrix.from_rows([[0.5, 0.5]])
    net = Network(1, sigmoid)
    net.append(layer)
    out = net.forward(Matrix(1, 2))
    assert out == layer.biases


def test_forward_output_shape():
    net = Network(3, sigmoid)
    for n_neurons, n_inputs in [(8, 4), (5, 8), (2, 5)]:
        net.append(Layer(n_neurons, n_inputs, random.Random(3)))
    out = net.forward(Matrix.from_rows([[1, 0, 1, 0]]))
    assert out.shape == (1, 2)
    assert out is net.layers[-1].outputs


def test_forward_empty_network():
    with pytest.raises(NetworkError):
        Network(1, sigmoid).forward(Matrix(1, 2))


def test_forward_shape_mismatch():
    net = Network(1, sigmoid)
    net.append(Layer(2, 3))
    with pytest.raises(MatrixError):
        net.forward(Matrix(1, 2))