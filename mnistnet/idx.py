"""Reader for the IDX files that hold the MNIST images and labels."""

from __future__ import annotations

import enum
import logging
import struct
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

_log = logging.getLogger(__name__)
_BE32 = struct.Struct(">I")


class IdxError(ValueError):
    """Raised when IDX data is malformed or truncated."""


class IdxKind(enum.IntEnum):
    """The kinds of IDX file, keyed by their magic number."""

    LABELS = 2049
    IMAGES = 2051


@dataclass(frozen=True)
class IdxData:
    """Decoded content of an IDX file.

    Label files fill ``labels`` with one byte per label. Image files fill
    ``images`` with one ``rows * cols`` byte string per image.
    """

    kind: IdxKind
    count: int
    rows: int = 0
    cols: int = 0
    labels: bytes = b""
    images: tuple[bytes, ...] = field(default_factory=tuple)


def _read_be32(data: bytes, offset: int) -> int:
    if len(data) < offset + _BE32.size:
        raise IdxError(f"truncated IDX header at byte {offset}")
    return _BE32.unpack_from(data, offset)[0]


def parse_idx(data: bytes) -> IdxData:
    """Decode the bytes of an IDX label or image file."""
    data = bytes(data)
    magic = _read_be32(data, 0)
    count = _read_be32(data, 4)
    try:
        kind = IdxKind(magic)
    except ValueError:
        raise IdxError(f"Invalid magic number: {magic}") from None

    if kind is IdxKind.LABELS:
        labels = data[8 : 8 + count]
        if len(labels) != count:
            raise IdxError(
                f"Failed to read labels. Expected: {count} Got: {len(labels)}"
            )
        return IdxData(kind=kind, count=count, labels=labels)

    rows = _read_be32(data, 8)
    cols = _read_be32(data, 12)
    size = rows * cols
    images = []
    for index in range(count):
        start = 16 + index * size
        chunk = data[start : start + size]
        if size == 0 or len(chunk) != size:
            raise IdxError(f"Failed to read image {index}")
        images.append(chunk)
    return IdxData(kind=kind, count=count, rows=rows, cols=cols, images=tuple(images))


def read_idx(path: str | PathLike[str]) -> IdxData:
    """Read and decode the IDX file at ``path``."""
    parsed = parse_idx(Path(path).read_bytes())
    if parsed.kind is IdxKind.LABELS:
        _log.info("%s - Magic: %d, Size: %d", path, parsed.kind.value, parsed.count)
    else:
        _log.info(
            "%s - Magic: %d, Size: %d, Rows: %d, Cols: %d",
            path,
            parsed.kind.value,
            parsed.count,
            parsed.rows,
            parsed.cols,
        )
    return parsed