import struct

import pytest

from mnistnet.cli import LAYER_SIZES, Mode, Options, UsageError, main, parse_args, render_image, usage


@pytest.fixture(autouse=True)
def _quiet(monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)


def _write_datasets(root, prefix, images, labels, rows=2, cols=2):
    directory = root / "datasets" / "MNIST"
    directory.mkdir(parents=True, exist_ok=True)
    image_bytes = struct.pack(">IIII", 2051, len(images), rows, cols)
    image_bytes += b"".join(bytes(img) for img in images)
    (directory / f"{prefix}-images.idx3-ubyte").write_bytes(image_bytes)
    label_bytes = struct.pack(">II", 2049, len(labels)) + bytes(labels)
    (directory / f"{prefix}-labels.idx1-ubyte").write_bytes(label_bytes)


def test_parse_inference():
    opts = parse_args(["-i", "5", "-c", "model.ckpt"])
    assert opts == Options(mode=Mode.INFERENCE, n_samples=5, checkpoint="model.ckpt")


def test_parse_training():
    opts = parse_args(["-t", "model.ckpt"])
    assert opts.mode is Mode.TRAINING
    assert opts.checkpoint == "model.ckpt"


def test_checkpoint_alone_defaults_to_training():
    assert parse_args(["-c", "model.ckpt"]).mode is Mode.TRAINING


@pytest.mark.parametrize(
    "argv",
    [[], ["-i"], ["-t"], ["-c"], ["-i", "abc", "-c", "x"], ["-i", "0", "-c", "x"], ["-i", "3"]],
)
def test_usage_errors(argv):
    with pytest.raises(UsageError):
        parse_args(argv)


def test_usage_text():
    text = usage()
    assert text.splitlines()[1] == "Usage: mnist -c [CHECKPOINT] -i | -t"


def test_render_image():
    assert render_image(bytes([0, 1, 0, 0]), 2) == ".#\n..\n"


def test_render_image_default_width():
    lines = render_image(bytes(28 * 28)).splitlines()
    assert len(lines) == 28
    assert all(line == "." * 28 for line in lines)


def test_main_help(capsys):
    assert main(["-h"]) == 0
    assert capsys.readouterr().out == usage()


def test_main_no_args(capsys):
    assert main([]) == 1
    assert usage() in capsys.readouterr().out


def test_main_inference(tmp_path, monkeypatch, capsys):
    _write_datasets(tmp_path, "t10k", [[0, 255, 0, 0], [1, 1, 1, 1]], [7, 3])
    monkeypatch.chdir(tmp_path)
    assert main(["-i", "1", "-c", "ck"]) == 0
    out = capsys.readouterr().out
    assert out == ".#\n..\nLabel: 7\n"


def test_main_training(tmp_path, monkeypatch, capsys):
    _write_datasets(tmp_path, "train", [[0, 255, 10, 0]], [5])
    monkeypatch.chdir(tmp_path)
    assert main(["-t", "ck"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    cells = lines[0].strip("[] ").split()
    assert len(cells) == LAYER_SIZES[-1]


def test_main_missing_dataset(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["-t", "ck"]) == 1
    assert capsys.readouterr().out.startswith("[ERROR]")