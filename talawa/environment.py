"""Shared types and the base class for agent environments."""

from __future__ import annotations

import abc
import copy
import dataclasses
import enum
import math
import operator
from collections.abc import Hashable, Iterable, Sequence
from typing import Any

from talawa.matrix import Matrix

__all__ = [
    "EnvironmentError",
    "EpisodeStatus",
    "Space",
    "StepReport",
    "Environment",
]


class EnvironmentError(RuntimeError):  # noqa: A001
    """Raised when an environment is used in a way its rules do not allow."""


class EpisodeStatus(enum.Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


@dataclasses.dataclass(frozen=True)
class Space:
    """A discrete set of ``n`` choices or a bounded continuous box."""

    shape: tuple[int, ...]
    bounds_low: tuple[float, ...] = ()
    bounds_high: tuple[float, ...] = ()
    is_discrete: bool = False

    @classmethod
    def discrete(cls, n: int) -> Space:
        n = operator.index(n)
        if n <= 0:
            raise ValueError(f"A discrete space needs at least one value, got {n}")
        return cls(shape=(n,), is_discrete=True)

    @classmethod
    def continuous(
        cls, shape: Iterable[int], low: Sequence[float], high: Sequence[float]
    ) -> Space:
        dims = tuple(operator.index(d) for d in shape)
        size = math.prod(dims)
        lows = tuple(float(v) for v in low)
        highs = tuple(float(v) for v in high)
        if len(lows) != size or len(highs) != size:
            raise ValueError(
                f"Bounds must have {size} values each, got {len(lows)} and {len(highs)}"
            )
        if any(lo > hi for lo, hi in zip(lows, highs)):
            raise ValueError("Every lower bound must not exceed its upper bound")
        return cls(shape=dims, bounds_low=lows, bounds_high=highs)

    @property
    def n(self) -> int:
        """The number of choices, or the number of values in a continuous box."""
        return math.prod(self.shape)

    def _bound(self, bounds: tuple[float, ...], index: int) -> float:
        if self.is_discrete:
            raise ValueError("A discrete space has no continuous bounds")
        if not 0 <= index < len(bounds):
            raise IndexError(f"Bound index {index} out of range for {len(bounds)} values")
        return bounds[index]

    def low(self, index: int) -> float:
        return self._bound(self.bounds_low, index)

    def high(self, index: int) -> float:
        return self._bound(self.bounds_high, index)


@dataclasses.dataclass
class StepReport:
    """What an agent saw, did and received on its most recent step."""

    previous_state: Matrix | None = None
    action: Any = None
    reward: float = 0.0
    resulting_state: Matrix | None = None
    episode_status: EpisodeStatus = EpisodeStatus.RUNNING


class Environment(abc.ABC):
    """An environment in which agents take turns acting."""

    def __init__(self, agent_order: Iterable[Hashable]) -> None:
        self._agent_order = tuple(agent_order)
        if not self._agent_order:
            raise EnvironmentError("An environment needs at least one agent")
        self._agents: dict[Hashable, Any] = {}
        self._agent_names: dict[Hashable, str] = {}
        self._reports = {a: StepReport() for a in self._agent_order}
        self._cumulative_rewards = {a: 0.0 for a in self._agent_order}

    @property
    def agent_order(self) -> tuple[Hashable, ...]:
        return self._agent_order

    def _check_agent(self, agent_id: Hashable) -> None:
        if agent_id not in self._reports:
            raise EnvironmentError(f"Unknown agent id: {agent_id!r}")

    def register_agent(self, agent_id: Hashable, agent: Any, name: str = "") -> None:
        """Seat ``agent`` at ``agent_id``, replacing any agent already there."""
        self._check_agent(agent_id)
        self._agents[agent_id] = agent
        self._agent_names[agent_id] = name

    def agent(self, agent_id: Hashable) -> Any:
        self._check_agent(agent_id)
        try:
            return self._agents[agent_id]
        except KeyError:
            raise EnvironmentError(f"No agent registered at {agent_id!r}") from None

    def agent_name(self, agent_id: Hashable) -> str:
        self.agent(agent_id)
        return self._agent_names[agent_id]

    def cumulative_reward(self, agent_id: Hashable) -> float:
        self._check_agent(agent_id)
        return self._cumulative_rewards[agent_id]

    def last(self, agent_id: Hashable) -> StepReport:
        """A copy of the agent's most recent step report."""
        self._check_agent(agent_id)
        return dataclasses.replace(self._reports[agent_id])

    def clone(self) -> Environment:
        """An independent copy of the state; registered agents are shared."""
        memo = {id(agent): agent for agent in self._agents.values()}
        return copy.deepcopy(self, memo)

    def get_legal_mask(self, agent_id: Hashable = None) -> Matrix | None:
        """A 1 x n mask of legal actions, or None when every action is legal."""
        return None

    @abc.abstractmethod
    def reset(self, seed: int | None = None) -> None:
        """Start a new episode."""

    @abc.abstractmethod
    def get_active_agent(self) -> Hashable:
        """The agent whose turn it is."""

    @abc.abstractmethod
    def observe(self, agent_id: Hashable = None) -> Matrix:
        """The current observation for ``agent_id``."""

    @abc.abstractmethod
    def step(self, action: Any) -> None:
        """Apply the active agent's action."""

    @abc.abstractmethod
    def get_action_space(self, agent_id: Hashable = None) -> Space:
        """The actions open to ``agent_id``."""

    @abc.abstractmethod
    def get_observation_space(self, agent_id: Hashable = None) -> Space:
        """The observations ``agent_id`` receives."""

    @abc.abstractmethod
    def is_done(self) -> bool:
        """Whether the current episode has ended."""

    # ----------------------------------------------------- helpers for subclasses

    def _report(self, agent_id: Hashable) -> StepReport:
        self._check_agent(agent_id)
        return self._reports[agent_id]

    def _add_reward(self, agent_id: Hashable, amount: float) -> None:
        self._check_agent(agent_id)
        self._cumulative_rewards[agent_id] += float(amount)

    def _reset_bookkeeping(self) -> None:
        for agent_id in self._agent_order:
            self._cumulative_rewards[agent_id] = 0.0
            self._reports[agent_id] = StepReport()

    @staticmethod
    def _action_index(action: Any) -> int:
        if isinstance(action, Matrix):
            return int(action.item())
        return operator.index(action)