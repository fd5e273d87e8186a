"""Activation functions with their forward pass and gradients."""

from __future__ import annotations

import enum

import numpy as np

from talawa.matrix import Matrix, MatrixError

__all__ = ["Activation"]

_EPSILON = np.float32(1e-7)


def _wrap(array: np.ndarray) -> Matrix:
    rows, cols = array.shape
    if rows == 0 or cols == 0:
        return Matrix(rows, cols)
    return Matrix.from_rows(np.ascontiguousarray(array, dtype=np.float32))


def _sigmoid(x: np.ndarray) -> np.ndarray:
    with np.errstate(over="ignore"):
        return (np.float32(1.0) / (np.float32(1.0) + np.exp(-x))).astype(np.float32)


class Activation(enum.Enum):
    """The activation applied to a layer's pre-activation values."""

    LINEAR = "linear"
    RELU = "relu"
    SIGMOID = "sigmoid"
    TANH = "tanh"
    SOFTMAX = "softmax"
    LOG_SOFTMAX = "log_softmax"

    def apply(self, z: Matrix) -> Matrix:
        """The activated values of z."""
        x = z.to_numpy()
        if self is Activation.LINEAR:
            return _wrap(x)
        if self is Activation.RELU:
            return _wrap(np.maximum(x, np.float32(0.0)))
        if self is Activation.SIGMOID:
            return _wrap(_sigmoid(x))
        if self is Activation.TANH:
            return _wrap(np.tanh(x))
        if self is Activation.SOFTMAX:
            if x.size == 0:
                return _wrap(x)
            shifted = np.exp(x - x.max(axis=1, keepdims=True))
            probs = shifted / shifted.sum(axis=1, keepdims=True)
            return _wrap(np.clip(probs, _EPSILON, np.float32(1.0) - _EPSILON))
        raise ValueError("Log-Softmax activation is not supported.")

    def backprop(self, a: Matrix, output_gradients: Matrix) -> Matrix:
        """dL/dZ from the activated outputs a and the gradient dL/dA."""
        if a.shape != output_gradients.shape:
            raise MatrixError(
                f"Dimension mismatch for backprop: ({a.rows}x{a.cols}) "
                f"vs ({output_gradients.rows}x{output_gradients.cols})"
            )
        y = a.to_numpy()
        g = output_gradients.to_numpy()
        if self is Activation.LINEAR:
            return _wrap(g)
        if self is Activation.RELU:
            return _wrap(np.where(y > 0.0, g, np.float32(0.0)))
        if self is Activation.SIGMOID:
            return _wrap(y * (np.float32(1.0) - y) * g)
        if self is Activation.TANH:
            return _wrap((np.float32(1.0) - y * y) * g)
        if self is Activation.SOFTMAX:
            weighted = (y * g).sum(axis=1, keepdims=True)
            return _wrap(y * (g - weighted))
        raise ValueError("Backprop not defined for this activation type.")

    def derivative(self, z: Matrix) -> Matrix:
        """The element-wise derivative evaluated at the pre-activation z."""
        x = z.to_numpy()
        if self is Activation.LINEAR:
            return _wrap(np.ones_like(x))
        if self is Activation.RELU:
            return _wrap((x > 0.0).astype(np.float32))
        if self is Activation.SIGMOID:
            s = _sigmoid(x)
            return _wrap(s * (np.float32(1.0) - s))
        if self is Activation.TANH:
            t = np.tanh(x)
            return _wrap(np.float32(1.0) - t * t)
        raise ValueError("Derivative not defined for this activation type.")

    def display_name(self) -> str:
        return _NAMES.get(self, "Unknown")


_NAMES = {
    Activation.LINEAR: "Linear",
    Activation.RELU: "ReLU",
    Activation.SIGMOID: "Sigmoid",
    Activation.TANH: "Tanh",
    Activation.SOFTMAX: "Softmax",
}