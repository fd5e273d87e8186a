# talawa

Building blocks for small machine-learning experiments, on top of numpy:

- `talawa.matrix` — `Matrix`, a row-major matrix of 32-bit floats with
  `(row, col)` element access, `+`, `+=` (including adding a 1 × cols row to
  every row), `-`, scalar `*`, `fill`, `assign`, `apply`, `reduce`, `item`,
  `slice`, `transpose`, `add_vector` and a pretty-printed `format`/`str`.
  Builders: `Matrix(rows, cols)` (zeros), `from_rows`, `identity`, `zeros`,
  `ones` and `random` (uniform in [0, 1], optionally from a numpy
  `Generator`). Bad shapes and out-of-range indices raise `MatrixError`;
  a bad `slice` raises `IndexError`.
- `talawa.matrix_ops` — `dot`, `dot_with_b_transposed`, the element-wise
  `hadamard` product, and the reductions `sum_rows` (to 1 × cols) and
  `sum_cols` (to rows × 1).
- `talawa.activation` — the `Activation` enum (`LINEAR`, `RELU`, `SIGMOID`,
  `TANH`, `SOFTMAX`) with `apply`, `backprop` (dL/dZ from the activated
  output and dL/dA), `derivative` and `display_name`. Softmax outputs are
  clipped to [1e-7, 1 − 1e-7]. `LOG_SOFTMAX` is listed but raises
  `ValueError` when used.
- `talawa.initializer` — `Initializer(kind, seed)` with an `InitializerKind`
  (`ZEROS`, `ONES`, `RANDOM_UNIFORM`, `RANDOM_NORMAL`, `GLOROT_UNIFORM`,
  `HE_NORMAL`) that overwrites a matrix in place. Rows are the fan-in,
  columns the fan-out; a fixed seed gives the same values every call.
- `talawa.optimizer` — `SGD` and `Adam`, which clip gradients to [-1, 1]
  and update a list of parameter matrices in place from a matching list of
  gradients.
- Environments built on `talawa.environment.Environment`: `CartPole`,
  `Corridor`, `FrozenLake` and the two-player `TicTacToe`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Matrices

```python
from talawa.matrix import Matrix
from talawa.matrix_ops import dot

a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
b = Matrix.from_rows([[7, 8], [9, 1], [2, 3]])
c = dot(a, b)              # [[31, 19], [85, 55]]
print(c)
print(a.transpose().shape) # (3, 2)
print(c[1, 0])             # 85.0
```

## Updating parameters

```python
from talawa.matrix import Matrix
from talawa.initializer import Initializer, InitializerKind
from talawa.optimizer import Adam

weights = Matrix(4, 3)
Initializer(InitializerKind.HE_NORMAL, seed=42).apply(weights)
grads = Matrix.ones(4, 3) * 0.5
Adam(0.01).update([weights], [grads])
```

## Environments

Every environment offers `reset`, `get_active_agent`, `observe`, `step`,
`last`, `is_done`, `get_action_space`, `get_observation_space`,
`cumulative_reward`, `register_agent`, `agent` and `clone`. An action is an
integer index or a 1 × 1 `Matrix` holding it. `last(agent_id)` returns a
`StepReport` with the previous state, action, reward, resulting state and an
`EpisodeStatus`. Spaces are described by `Space` (`discrete(n)` or
`continuous(shape, low, high)`). Stepping after the episode has ended, or
making an illegal move, raises `EnvironmentError`; call `reset` first.

```python
from talawa.frozenlake import FrozenLake

env = FrozenLake()
env.reset()
env.step(1)
report = env.last(0)
print(report.reward, report.episode_status)
```

- `CartPole(seed=None)` — push left (0) or right (1); +1 per step, −1 on the
  step that ends the episode. Observations are the state divided by each
  component's upper bound.
- `Corridor(seed=None)` — walk left (0) or right (1) towards cell 20 from a
  random start in the first half; −0.01 per step, 1 at the goal.
- `FrozenLake()` — move 0–3 cells along 16 cells with holes at 5, 7, 11 and
  12; `snapshot` and `restore` save and set the position.
- `TicTacToe()` — agents `0` and `1` alternate; `get_legal_mask` gives a
  1 × 9 mask of free cells; a win scores 1.0 and −1.0, a draw 0.

## What is not included

There are no network layers, loss functions or training loop, no learning
agents, no tournament runner, no dataset loading or model saving, and no
on-screen rendering of the environments. The pieces above are meant to be
combined by your own code.