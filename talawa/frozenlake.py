"""A one-row frozen lake with holes between the start and the goal."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

from talawa.environment import (
    Environment,
    EnvironmentError,
    EpisodeStatus,
    Space,
    StepReport,
)
from talawa.matrix import Matrix

__all__ = ["FrozenLake"]


class FrozenLake(Environment):
    """A single agent crosses 16 cells by staying (0), walking (1), hopping (2)
    or jumping (3).

    Landing in a hole costs 1 and ends the episode; reaching the last cell earns
    1 and ends it; any other step costs a small penalty.
    """

    GRID_SIZE = 16
    HOLES = frozenset({5, 7, 11, 12})
    GOAL = 15
    STEP_PENALTY = -0.01

    def __init__(self) -> None:
        super().__init__([0])
        self._position = 0
        self._done = False

    @property
    def position(self) -> int:
        return self._position

    def reset(self, seed: int | None = None) -> None:
        self._position = 0
        self._done = False
        self._reset_bookkeeping()

    def get_active_agent(self) -> Hashable:
        return self.agent_order[0]

    def observe(self, agent_id: Hashable = None) -> Matrix:
        return Matrix.from_rows([[float(self._position)]])

    def step(self, action: Any) -> None:
        if self._done:
            raise EnvironmentError("Episode has terminated. Please reset the env.")
        move = self._action_index(action)
        if not 0 <= move <= 3:
            raise EnvironmentError("Invalid action for FrozenLake.")

        previous = self.observe()
        reward = self.STEP_PENALTY
        self._position = min(self._position + move, self.GRID_SIZE - 1)
        resulting = self.observe()

        if self._position in self.HOLES:
            reward = -1.0
            self._done = True
        if self._position == self.GOAL:
            reward = 1.0
            self._done = True

        agent = self.get_active_agent()
        self._add_reward(agent, reward)
        self._reports[agent] = StepReport(
            previous_state=previous,
            action=action,
            reward=reward,
            resulting_state=resulting,
            episode_status=(
                EpisodeStatus.TERMINATED if self._done else EpisodeStatus.RUNNING
            ),
        )

    def get_action_space(self, agent_id: Hashable = None) -> Space:
        return Space.discrete(4)

    def get_observation_space(self, agent_id: Hashable = None) -> Space:
        return Space.discrete(self.GRID_SIZE)

    def is_done(self) -> bool:
        return self._done

    def snapshot(self) -> int:
        """The agent's position, enough to restore the lake later."""
        return self._position

    def restore(self, state: int) -> None:
        """Put the agent back at ``state`` and clear the step reports."""
        self._position = int(state)
        self._done = self._position == self.GOAL or self._position in self.HOLES
        for agent_id in self.agent_order:
            self._reports[agent_id] = StepReport()