"""Weight initialisation strategies."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

import numpy as np

from talawa.matrix import Matrix

__all__ = ["InitializerKind", "Initializer"]


class InitializerKind(enum.Enum):
    """How the values of a weight matrix are chosen."""

    ZEROS = "zeros"
    ONES = "ones"
    RANDOM_UNIFORM = "random_uniform"
    RANDOM_NORMAL = "random_normal"
    GLOROT_UNIFORM = "glorot_uniform"
    HE_NORMAL = "he_normal"


@dataclass(frozen=True)
class Initializer:
    """Fills weight matrices according to ``kind``.

    The number of rows is taken as the fan-in and the number of columns as the
    fan-out. A fixed ``seed`` makes every call produce the same values; with
    ``None`` fresh entropy is used each time.
    """

    kind: InitializerKind = InitializerKind.GLOROT_UNIFORM
    seed: int | None = None

    def apply(self, weights: Matrix) -> None:
        """Overwrite the contents of ``weights`` in place."""
        if self.kind is InitializerKind.ZEROS:
            weights.fill(0.0)
            return
        if self.kind is InitializerKind.ONES:
            weights.fill(1.0)
            return

        rows, cols = weights.shape
        if rows == 0 or cols == 0:
            return

        rng = np.random.default_rng(self.seed)
        size = (rows, cols)
        if self.kind is InitializerKind.RANDOM_UNIFORM:
            values = rng.uniform(-0.05, 0.05, size)
        elif self.kind is InitializerKind.RANDOM_NORMAL:
            values = rng.normal(0.0, 0.05, size)
        elif self.kind is InitializerKind.GLOROT_UNIFORM:
            limit = math.sqrt(6.0 / (rows + cols))
            values = rng.uniform(-limit, limit, size)
        else:
            std_dev = math.sqrt(2.0 / rows)
            values = rng.normal(0.0, std_dev, size)

        weights.assign(values.astype(np.float32).tolist())