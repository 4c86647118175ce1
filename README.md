# mnistnet

A small toolkit with no third-party dependencies for experimenting with
handwritten digit classification. It provides:

- `mnistnet.matrix`: a dense `Matrix` of floats
- `mnistnet.activations`: `sigmoid`, `tanh`, `relu`, `leaky_relu`
- `mnistnet.neural`: fully connected `Layer`s stacked in a `Network`
- `mnistnet.idx`: a reader for the IDX files used by the MNIST dataset
- `mnistnet.cli`: the `mnist` command
- `mnistnet.debug`: log verbosity taken from the `DEBUG` environment variable

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

The `mnist` command reads the MNIST files from `./datasets/MNIST/`, relative
to the current directory:

- `train-images.idx3-ubyte`, `train-labels.idx1-ubyte`
- `t10k-images.idx3-ubyte`, `t10k-labels.idx1-ubyte`

```
mnist -h                      # show usage
mnist -t checkpoint.bin       # build a 784-128-64-10 network and run one forward pass
mnist -i 5 -c checkpoint.bin  # draw the first 5 test images with their labels
```

- `-t PATH` selects training mode. It loads the training set, builds a
  network with randomly initialised layers of 128, 64 and 10 neurons, runs the
  first training image through it and prints the 1 x 10 output, one value
  with two decimals per cell.
- `-i N` selects inference mode and draws the first `N` test images, `#` for
  ink and `.` for background, each followed by `Label: <digit>`.
- `-c PATH` names the checkpoint file. A checkpoint path (through `-t` or
  `-c`) must be given in both modes.

Invalid arguments print an `[ERROR] ...` line and exit with status 1; running
with no arguments also prints the usage text. A missing or malformed dataset
file is reported the same way.

Log verbosity comes from `DEBUG`: `-1` silences logs, `0` shows errors
(the default), `1` adds warnings, `2` adds info and `3` adds trace output.
Log lines go to standard output as `[LEVEL] file:line message`.

## Library use

```python
import random

from mnistnet.activations import sigmoid
from mnistnet.idx import read_idx
from mnistnet.matrix import Matrix
from mnistnet.neural import Layer, Network

images = read_idx("datasets/MNIST/train-images.idx3-ubyte")
pixels = images.images[0]            # bytes of length images.rows * images.cols

rng = random.Random(0)
network = Network(3, sigmoid)
network.append(Layer(128, len(pixels), rng))
network.append(Layer(64, 128, rng))
network.append(Layer(10, 64, rng))

sample = Matrix.from_rows([list(pixels)])
print(network.forward(sample).format())
```

### Matrix

`Matrix(rows, cols)` creates a zero matrix; non-positive dimensions raise
`MatrixError`. `Matrix.from_rows(rows)` builds one from equally long rows.
Cells are read and written with `m[i, j]`. `add`, `sub`, `scale`, `matmul`,
`transpose` and `clone` return new matrices; `a + b`, `a - b`, `2.0 * a` and
`a @ b` are shorthands. Mismatched shapes raise `MatrixError`.
`fill_random(rng)` fills the cells with uniform values in [0, 1), `tolist()`
returns the cells as nested lists and `format()` renders the rows as text.

### Network

`Layer(n_neurons, n_inputs, rng=None)` holds `weights` (n_inputs x n_neurons),
`biases` and `outputs` (1 x n_neurons); weights and biases start uniformly
random in [0, 1). `Network(depth, activation)` accepts up to `depth` layers
through `append`; one more raises `NetworkError`. `forward(inputs)` computes
`inputs @ weights + biases` layer by layer, stores each layer's `outputs` and
returns the last one.

### IDX files

`parse_idx(data)` decodes bytes in memory and `read_idx(path)` reads a file.
Both return an `IdxData` with `kind` (`IdxKind.LABELS` or `IdxKind.IMAGES`),
`count`, and either `labels` (one byte per label) or `rows`, `cols` and
`images` (one byte string per image). Unknown magic numbers and truncated data
raise `IdxError`.

## What it does not do

- No training: there is no cost function, backpropagation or weight update.
- No checkpoints: the checkpoint path is required on the command line but no
  file is ever written or read.
- The forward pass is purely affine. The network keeps its activation
  function as `Network.activation` but does not apply it.
- Inference mode does not run the network; it only draws test images and
  their labels.