"""Products and reductions over :class:`~talawa.matrix.Matrix` values."""

from __future__ import annotations

import numpy as np

from talawa.matrix import Matrix, MatrixError

__all__ = ["dot", "dot_with_b_transposed", "hadamard", "sum_rows", "sum_cols"]


def _wrap(array: np.ndarray) -> Matrix:
    """Turn a 2-D array into a Matrix, including arrays with a zero dimension."""
    rows, cols = array.shape
    if rows == 0 or cols == 0:
        return Matrix(rows, cols)
    return Matrix.from_rows(np.ascontiguousarray(array, dtype=np.float32))


def dot(a: Matrix, b: Matrix) -> Matrix:
    """The matrix product a . b."""
    if a.cols != b.rows:
        raise MatrixError(
            f"Dimension mismatch for dot product: ({a.rows}x{a.cols}) "
            f". ({b.rows}x{b.cols})"
        )
    return _wrap(a.to_numpy() @ b.to_numpy())


def dot_with_b_transposed(a: Matrix, b_t: Matrix) -> Matrix:
    """The product a . b where b_t already holds the transpose of b."""
    if a.cols != b_t.cols:
        raise MatrixError(
            f"Dimension mismatch for dotWithBTransposed: ({a.rows}x{a.cols}) "
            f". B^T({b_t.rows}x{b_t.cols})"
        )
    return _wrap(a.to_numpy() @ b_t.to_numpy().T)


def hadamard(a: Matrix, b: Matrix) -> Matrix:
    """The element-wise product of two matrices of the same shape."""
    if a.shape != b.shape:
        raise MatrixError("Dimension mismatch for Hadamard product.")
    return _wrap(a.to_numpy() * b.to_numpy())


def sum_rows(m: Matrix) -> Matrix:
    """Collapse rows x cols into a 1 x cols matrix of column totals."""
    return _wrap(m.to_numpy().sum(axis=0, dtype=np.float32).reshape(1, m.cols))


def sum_cols(m: Matrix) -> Matrix:
    """Collapse rows x cols into a rows x 1 matrix of row totals."""
    return _wrap(m.to_numpy().sum(axis=1, dtype=np.float32).reshape(m.rows, 1))