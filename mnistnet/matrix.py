"""A small dense matrix of floats with the basic arithmetic a network needs."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable

from .debug import TRACE

_log = logging.getLogger(__name__)
_default_rng = random.Random()


class MatrixError(ValueError):
    """Raised for invalid shapes or incompatible operands."""


class Matrix:
    """A ``rows`` x ``cols`` matrix of floats, zero on creation."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0:
            raise MatrixError(f"matrix rows must be positive, got {rows}")
        if cols <= 0:
            raise MatrixError(f"matrix cols must be positive, got {cols}")
        self.rows = rows
        self.cols = cols
        self._data = [[0.0] * cols for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> Matrix:
        """Build a matrix from an iterable of equally long rows."""
        data = [[float(value) for value in row] for row in rows]
        if not data or not data[0]:
            raise MatrixError("cannot build a matrix from empty rows")
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise MatrixError("all rows must have the same length")
        matrix = cls(len(data), width)
        matrix._data = data
        return matrix

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def fill_random(self, rng: random.Random | None = None) -> None:
        """Fill every cell with a uniform random value in [0, 1)."""
        rng = _default_rng if rng is None else rng
        self._data = [[rng.random() for _ in range(self.cols)] for _ in range(self.rows)]

    def clone(self) -> Matrix:
        """Return an independent copy."""
        return Matrix.from_rows(self._data)

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        return self._data[i][j]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        i, j = index
        self._data[i][j] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._data!r})"

    def tolist(self) -> list[list[float]]:
        """Return the cells as a fresh list of row lists."""
        return [list(row) for row in self._data]

    def _check_same_shape(self, other: Matrix, verb: str) -> None:
        if self.shape != other.shape:
            raise MatrixError(
                f"cannot {verb} shape ({self.rows}x{self.cols}) "
                f"with ({other.rows}x{other.cols})"
            )

    def add(self, other: Matrix) -> Matrix:
        """Element-wise sum."""
        self._check_same_shape(other, "add")
        return Matrix.from_rows(
            [a + b for a, b in zip(row_a, row_b)]
            for row_a, row_b in zip(self._data, other._data)
        )

    def sub(self, other: Matrix) -> Matrix:
        """Element-wise difference."""
        self._check_same_shape(other, "subtract")
        return Matrix.from_rows(
            [a - b for a, b in zip(row_a, row_b)]
            for row_a, row_b in zip(self._data, other._data)
        )

    def scale(self, factor: float) -> Matrix:
        """Multiply every cell by ``factor``."""
        return Matrix.from_rows([value * factor for value in row] for row in self._data)

    def matmul(self, other: Matrix) -> Matrix:
        """Matrix product ``self @ other``."""
        if self.cols != other.rows:
            raise MatrixError(
                f"cannot multiply shape ({self.rows}x{self.cols}) "
                f"with ({other.rows}x{other.cols})"
            )
        columns = list(zip(*other._data))
        return Matrix.from_rows(
            [sum(a * b for a, b in zip(row, column)) for column in columns]
            for row in self._data
        )

    def transpose(self) -> Matrix:
        """Return the transposed matrix."""
        return Matrix.from_rows(zip(*self._data))

    def format(self) -> str:
        """Render each row as ``[ 1.00 2.00 ]`` on its own line."""
        _log.log(TRACE, "Shape: %dx%d", self.rows, self.cols)
        return "".join(
            "[ " + "".join(f"{value:.2f} " for value in row) + "]\n" for row in self._data
        )

    def __add__(self, other: Matrix) -> Matrix:
        return self.add(other)

    def __sub__(self, other: Matrix) -> Matrix:
        return self.sub(other)

    def __mul__(self, factor: float) -> Matrix:
        return self.scale(factor)

    __rmul__ = __mul__

    def __matmul__(self, other: Matrix) -> Matrix:
        return self.matmul(other)