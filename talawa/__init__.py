"""Float32 matrices, activations, initializers, optimizers and small reinforcement-learning environments."""

__version__ = "0.1.0"

__all__ = [
    "activation",
    "cartpole",
    "corridor",
    "environment",
    "frozenlake",
    "initializer",
    "matrix",
    "matrix_ops",
    "optimizer",
    "tictactoe",
]