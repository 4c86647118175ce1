"""Command line for the handwritten digit classifier."""

from __future__ import annotations

import enum
import logging
import re
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from .activations import sigmoid
from .debug import TRACE, configure_logging, debug_level_from_env
from .idx import IdxError, read_idx
from .matrix import Matrix, MatrixError
from .neural import Layer, Network, NetworkError

_log = logging.getLogger(__name__)

DATASET_DIR = Path("datasets") / "MNIST"
TRAIN_IMAGES = DATASET_DIR / "train-images.idx3-ubyte"
TRAIN_LABELS = DATASET_DIR / "train-labels.idx1-ubyte"
TEST_IMAGES = DATASET_DIR / "t10k-images.idx3-ubyte"
TEST_LABELS = DATASET_DIR / "t10k-labels.idx1-ubyte"
LAYER_SIZES = (128, 64, 10)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Mode(enum.Enum):
    TRAINING = "training"
    INFERENCE = "inference"


@dataclass(frozen=True)
class Options:
    mode: Mode = Mode.TRAINING
    n_samples: int = 0
    checkpoint: str | None = None


class UsageError(Exception):
    """Raised for invalid command-line arguments."""


class _HelpRequested(Exception):
    pass


def usage() -> str:
    """Return the help text."""
    return (
        "mnist - Hand written digit classifier\n"
        "Usage: mnist -c [CHECKPOINT] -i | -t\n"
        "-h                       - Display this message\n"
        "-t checkpoint_filepath   - Train neural network and save progress "
        "to checkpoint\n"
        "-i n_samples             - Run in inference mode. -c has to be added\n"
        "-c checkpoint_file       - Checkpoint file to load\n"
    )


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_args(argv: Sequence[str]) -> Options:
    """Parse arguments (without the program name) into :class:`Options`."""
    if not argv:
        raise UsageError("no arguments given")
    mode = Mode.TRAINING
    n_samples = 0
    checkpoint = None
    args = iter(argv)
    for arg in args:
        if arg.startswith("-h"):
            raise _HelpRequested
        if arg.startswith("-i"):
            value = next(args, None)
            if value is None:
                raise UsageError("n_samples not provided!")
            n_samples = _atoi(value)
            if n_samples == 0:
                raise UsageError("Invalid n_samples values provided!")
            mode = Mode.INFERENCE
        elif arg.startswith("-t") or arg.startswith("-c"):
            value = next(args, None)
            if not value:
                raise UsageError("Checkpoint filepath not provided!")
            if arg.startswith("-t"):
                mode = Mode.TRAINING
            checkpoint = value
    if checkpoint is None:
        raise UsageError(
            "Checkpoint filename has to be provided for both inference and "
            "training mode!"
        )
    return Options(mode=mode, n_samples=n_samples, checkpoint=checkpoint)


def render_image(pixels: Iterable[int], width: int = 28) -> str:
    """Draw an image as rows of ``.`` (blank) and ``#`` (ink)."""
    chars = ["." if pixel == 0 else "#" for pixel in pixels]
    rows = ["".join(chars[start : start + width]) for start in range(0, len(chars), width)]
    return "\n".join(rows) + "\n"


def _run_inference(options: Options) -> None:
    _log.info("1. Loading testing dataset")
    images = read_idx(TEST_IMAGES)
    labels = read_idx(TEST_LABELS)
    samples = max(options.n_samples, 0)
    for pixels, label in zip(images.images[:samples], labels.labels):
        _log.log(TRACE, "Input Matrix shape (1 x %d)", len(pixels))
        print(render_image(pixels, images.cols or 28), end="")
        print(f"Label: {label}")


def _run_training() -> None:
    _log.info("1. Loading training dataset")
    images = read_idx(TRAIN_IMAGES)
    read_idx(TRAIN_LABELS)
    if not images.images:
        raise IdxError("training dataset holds no images")

    _log.info("2. Initializing neural network weights")
    inputs = Matrix.from_rows([list(images.images[0])])
    _log.log(TRACE, "Input Matrix shape (%d x %d)", inputs.rows, inputs.cols)

    network = Network(len(LAYER_SIZES), sigmoid)
    n_inputs = inputs.rows * inputs.cols
    for n_neurons in LAYER_SIZES:
        network.append(Layer(n_neurons, n_inputs))
        n_inputs = n_neurons

    _log.info("Start training ...")
    _log.log(TRACE, "Running Forward pass")
    output = network.forward(inputs)
    _log.log(TRACE, "Calculating cost")
    _log.log(TRACE, "Running Backpropagation")
    print(output.format(), end="")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    configure_logging(debug_level_from_env())
    try:
        options = parse_args(args)
    except _HelpRequested:
        print(usage(), end="")
        return 0
    except UsageError as exc:
        if not args:
            print(usage(), end="")
        print(f"[ERROR] {exc}")
        return 1
    try:
        if options.mode is Mode.INFERENCE:
            _run_inference(options)
        else:
            _run_training()
    except (IdxError, OSError, MatrixError, NetworkError) as exc:
        print(f"[ERROR] {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())