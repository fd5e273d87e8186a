"""A dense, row-major, single-precision 2-D matrix."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

import numpy as np

T = TypeVar("T")

_DTYPE = np.float32


class MatrixError(ValueError):
    """Raised when a matrix operation receives incompatible shapes or indices."""


class Matrix:
    """A rows x cols matrix of 32-bit floats, initialised to zero."""

    __slots__ = ("_data",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int = 0, cols: int = 0) -> None:
        rows = operator.index(rows)
        cols = operator.index(cols)
        if rows < 0 or cols < 0:
            raise MatrixError(f"Matrix dimensions must not be negative: ({rows}x{cols})")
        self._data = np.zeros((rows, cols), dtype=_DTYPE)

    # ----------------------------------------------------------------- builders

    @classmethod
    def _from_array(cls, array: np.ndarray) -> Matrix:
        array = np.asarray(array, dtype=_DTYPE)
        if array.ndim != 2:
            raise MatrixError(f"Expected a 2-D array, got {array.ndim} dimensions")
        result = cls.__new__(cls)
        result._data = np.array(array, dtype=_DTYPE, copy=True)
        return result

    @classmethod
    def from_rows(cls, values: Iterable[Sequence[float]] | np.ndarray) -> Matrix:
        """Build a matrix from a non-empty sequence of equally long rows."""
        if isinstance(values, np.ndarray):
            if values.ndim != 2 or values.shape[0] == 0 or values.shape[1] == 0:
                raise MatrixError("Matrix dimensions must be greater than 0")
            return cls._from_array(values)
        rows = [list(row) for row in values]
        if not rows or not rows[0]:
            raise MatrixError("Matrix dimensions must be greater than 0")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise MatrixError("All rows must have the same number of columns")
        return cls._from_array(np.array(rows, dtype=_DTYPE))

    @classmethod
    def identity(cls, size: int) -> Matrix:
        return cls._from_array(np.eye(size, dtype=_DTYPE))

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        return cls(rows, cols)

    @classmethod
    def ones(cls, rows: int, cols: int) -> Matrix:
        result = cls(rows, cols)
        result.fill(1.0)
        return result

    @classmethod
    def random(
        cls, rows: int, cols: int, rng: np.random.Generator | None = None
    ) -> Matrix:
        """A matrix of values drawn uniformly from [0, 1]."""
        generator = rng if rng is not None else np.random.default_rng()
        result = cls(rows, cols)
        result._data[...] = generator.random((result.rows, result.cols))
        return result

    # --------------------------------------------------------------- properties

    @property
    def rows(self) -> int:
        return int(self._data.shape[0])

    @property
    def cols(self) -> int:
        return int(self._data.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    def copy(self) -> Matrix:
        return Matrix._from_array(self._data)

    def to_numpy(self) -> np.ndarray:
        """A copy of the contents as a float32 array."""
        return self._data.copy()

    # ------------------------------------------------------------ element access

    def _check_index(self, index: Any) -> tuple[int, int]:
        try:
            row, col = index
            row, col = operator.index(row), operator.index(col)
        except (TypeError, ValueError):
            raise MatrixError(f"Matrix index must be a (row, col) pair, got {index!r}") from None
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise MatrixError(
                f"Matrix indices out of bounds: ({row}, {col}) "
                f"for matrix of size ({self.rows}x{self.cols})"
            )
        return row, col

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = self._check_index(index)
        return float(self._data[row, col])

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, col = self._check_index(index)
        self._data[row, col] = value

    # --------------------------------------------------------------- arithmetic

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __iadd__(self, other: Matrix) -> Matrix:
        if self.shape == other.shape:
            self._data += other._data
        elif other.rows == 1 and other.cols == self.cols:
            self._data += other._data[0]
        else:
            raise MatrixError(
                f"Dimension mismatch for += operation: ({self.rows}x{self.cols}) "
                f"+= ({other.rows}x{other.cols})"
            )
        return self

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            raise MatrixError(
                f"Dimension mismatch for - operation: ({self.rows}x{self.cols}) "
                f"- ({other.rows}x{other.cols})"
            )
        return Matrix._from_array(self._data - other._data)

    def __mul__(self, scalar: float) -> Matrix:
        if isinstance(scalar, Matrix):
            return NotImplemented
        return Matrix._from_array(self._data * _DTYPE(scalar))

    __rmul__ = __mul__

    # ---------------------------------------------------------------- mutation

    def fill(self, value: float) -> None:
        self._data.fill(value)

    def assign(self, rows: Sequence[Sequence[float]]) -> None:
        """Replace shape and contents with the given rows; no rows makes it 0x0."""
        rows = [list(row) for row in rows]
        if not rows:
            self._data = np.zeros((0, 0), dtype=_DTYPE)
            return
        width = len(rows[0])
        for row in rows:
            if len(row) != width:
                raise MatrixError(
                    f"Cannot assign jagged array with row size {len(row)} "
                    f"to Matrix with column size {width}"
                )
        self._data = np.array(rows, dtype=_DTYPE).reshape(len(rows), width)

    def apply(self, func: Callable[[int, int, float], float]) -> None:
        """Replace each element in place with func(row, col, value)."""
        snapshot = self._data.copy()
        for (row, col), value in np.ndenumerate(snapshot):
            self._data[row, col] = func(row, col, float(value))

    def reduce(self, func: Callable[[T, int, int, float], T], initial: T) -> T:
        """Fold func(acc, row, col, value) over the elements in row-major order."""
        acc = initial
        for (row, col), value in np.ndenumerate(self._data):
            acc = func(acc, row, col, float(value))
        return acc

    def item(self) -> float:
        """The single value of a one-element matrix."""
        if self._data.size != 1:
            raise MatrixError(
                f"item() needs a single-element matrix, got ({self.rows}x{self.cols})"
            )
        return float(self._data[0, 0])

    # --------------------------------------------------------- shape operations

    def slice(self, start_row: int, end_row: int) -> Matrix:
        """Rows start_row (inclusive) to end_row (exclusive) as a new matrix."""
        if start_row < 0 or end_row > self.rows or start_row >= end_row:
            raise IndexError("Matrix.slice indices out of bounds")
        return Matrix._from_array(self._data[start_row:end_row])

    def transpose(self) -> Matrix:
        return Matrix._from_array(self._data.T)

    def add_vector(self, vector: Matrix) -> Matrix:
        """Add a 1 x cols row vector to every row."""
        if vector.rows != 1 or vector.cols != self.cols:
            raise MatrixError("Dimension mismatch for addVector operation.")
        return self + vector

    # ------------------------------------------------------------------ display

    def format(self, decimals: int = 2) -> str:
        values = [f"{float(v):.{decimals}f}" for v in self._data.flat]
        width = max((len(s) for s in values), default=0) + 1
        lines = [f"Matrix ({self.rows}x{self.cols}):", "["]
        for r in range(self.rows):
            cells = ",".join(
                f"{float(v):>{width}.{decimals}f}" for v in self._data[r]
            )
            suffix = "," if r < self.rows - 1 else ""
            lines.append(f"  [{cells}  ]{suffix}")
        lines.append("]")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Matrix({self.rows}x{self.cols}, {self._data.tolist()!r})"