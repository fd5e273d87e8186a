"""A one-dimensional corridor in which the agent walks towards a goal cell."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

import numpy as np

from talawa.environment import Environment, EnvironmentError, EpisodeStatus, Space
from talawa.matrix import Matrix

__all__ = ["Corridor"]


class Corridor(Environment):
    """A single agent moves left (0) or right (1) along cells 0..GOAL.

    Each episode starts somewhere in the first half of the corridor. Every
    step costs a small penalty; reaching the goal earns 1 and ends the episode.
    """

    GOAL = 20
    STEP_PENALTY = -0.01
    GOAL_REWARD = 1.0

    def __init__(self, seed: int | None = None) -> None:
        super().__init__([0])
        self._rng = np.random.default_rng(seed)
        self._position = 0
        self._done = False
        self.reset()

    @property
    def position(self) -> int:
        return self._position

    def reset(self, seed: int | None = None) -> None:
        if seed is not None:
            self._rng = np.random.default_rng(seed)
        self._position = int(self._rng.integers(0, self.GOAL // 2))
        self._done = False
        self._reset_bookkeeping()

    def get_active_agent(self) -> Hashable:
        return self.agent_order[0]

    def observe(self, agent_id: Hashable = None) -> Matrix:
        """The position as a fraction of the distance to the goal."""
        return Matrix.from_rows([[self._position / self.GOAL]])

    def step(self, action: Any) -> None:
        if self._done:
            raise EnvironmentError(
                "Episode has terminated. Please reset the environment."
            )
        agent = self.get_active_agent()
        report = self._report(agent)
        report.previous_state = self.observe(agent)
        report.action = action

        move = self._action_index(action)
        if move == 0:
            self._position = max(0, self._position - 1)
        elif move == 1:
            self._position = min(self.GOAL, self._position + 1)
        else:
            raise EnvironmentError("Invalid action for Corridor environment.")

        if self._position >= self.GOAL:
            self._done = True

        report.resulting_state = self.observe(agent)
        report.reward = self.GOAL_REWARD if self._done else self.STEP_PENALTY
        report.episode_status = (
            EpisodeStatus.TERMINATED if self._done else EpisodeStatus.RUNNING
        )
        self._add_reward(agent, report.reward)

    def get_action_space(self, agent_id: Hashable = None) -> Space:
        return Space.discrete(2)

    def get_observation_space(self, agent_id: Hashable = None) -> Space:
        return Space.discrete(1)

    def is_done(self) -> bool:
        return self._done