"""Gradient-descent optimisers that update parameter matrices in place."""

from __future__ import annotations

import abc
from collections.abc import Sequence

import numpy as np

from talawa.matrix import Matrix, MatrixError

__all__ = ["Optimizer", "SGD", "Adam"]

_CLIP = np.float32(1.0)


def _check_pairs(params: Sequence[Matrix], grads: Sequence[Matrix]) -> None:
    if len(params) != len(grads):
        raise ValueError(
            f"Optimizer Mismatch: Parameter count ({len(params)}) does not "
            f"match Gradient count ({len(grads)})."
        )
    for param, grad in zip(params, grads):
        if param.shape != grad.shape:
            raise MatrixError(
                f"Gradient shape ({grad.rows}x{grad.cols}) does not match "
                f"parameter shape ({param.rows}x{param.cols})"
            )


def _store(matrix: Matrix, values: np.ndarray) -> None:
    if values.size:
        matrix.assign(values.astype(np.float32).tolist())


def _clipped(grad: Matrix) -> np.ndarray:
    return np.clip(grad.to_numpy(), -_CLIP, _CLIP)


class Optimizer(abc.ABC):
    """Base for optimisers; gradients are clipped to [-1, 1] before use."""

    name = "Optimizer"

    def __init__(self, learning_rate: float) -> None:
        self.learning_rate = float(learning_rate)

    @abc.abstractmethod
    def update(self, params: Sequence[Matrix], grads: Sequence[Matrix]) -> None:
        """Apply one update step to ``params`` using matching ``grads``."""


class SGD(Optimizer):
    """Plain stochastic gradient descent: W -= lr * clip(dW)."""

    name = "SGD"

    def __init__(self, learning_rate: float = 0.01) -> None:
        super().__init__(learning_rate)

    def update(self, params: Sequence[Matrix], grads: Sequence[Matrix]) -> None:
        _check_pairs(params, grads)
        lr = np.float32(self.learning_rate)
        for param, grad in zip(params, grads):
            _store(param, param.to_numpy() - lr * _clipped(grad))


class Adam(Optimizer):
    """Adam with bias-corrected first and second moment estimates."""

    name = "Adam"

    def __init__(
        self,
        learning_rate: float = 0.001,
        beta1: float = 0.9,
        beta2: float = 0.999,
        epsilon: float = 1e-8,
    ) -> None:
        super().__init__(learning_rate)
        self.beta1 = float(beta1)
        self.beta2 = float(beta2)
        self.epsilon = float(epsilon)
        self.step_count = 0
        self._m: list[np.ndarray] = []
        self._v: list[np.ndarray] = []

    def update(self, params: Sequence[Matrix], grads: Sequence[Matrix]) -> None:
        _check_pairs(params, grads)
        if not self._m:
            self._m = [np.zeros(p.shape, dtype=np.float32) for p in params]
            self._v = [np.zeros(p.shape, dtype=np.float32) for p in params]
        elif len(self._m) != len(params):
            raise ValueError(
                f"Optimizer state holds {len(self._m)} parameters, got {len(params)}."
            )

        self.step_count += 1
        t = self.step_count
        beta1 = np.float32(self.beta1)
        beta2 = np.float32(self.beta2)
        correction_m = np.float32(1.0 / (1.0 - self.beta1**t))
        correction_v = np.float32(1.0 / (1.0 - self.beta2**t))
        lr = np.float32(self.learning_rate)
        eps = np.float32(self.epsilon)

        for param, grad, m, v in zip(params, grads, self._m, self._v):
            g = _clipped(grad)
            m *= beta1
            m += (np.float32(1.0) - beta1) * g
            v *= beta2
            v += (np.float32(1.0) - beta2) * g * g
            m_hat = m * correction_m
            v_hat = v * correction_v
            _store(param, param.to_numpy() - lr * m_hat / (np.sqrt(v_hat) + eps))