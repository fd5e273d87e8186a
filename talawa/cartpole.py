"""The classic pole-balancing task on a moving cart."""

from __future__ import annotations

import math
from collections.abc import Hashable
from typing import Any

import numpy as np

from talawa.environment import Environment, EnvironmentError, EpisodeStatus, Space
from talawa.matrix import Matrix

__all__ = ["CartPole"]

_LOW = (-2.4, -5.0, -0.418, -5.0)
_HIGH = (2.4, 5.0, 0.418, 5.0)


class CartPole(Environment):
    """A single agent pushes a cart left (0) or right (1) to keep a pole upright.

    Each step that leaves the pole up earns 1; the step that drops it or drives
    the cart off the track earns -1 and ends the episode.
    """

    GRAVITY = 9.8
    MASS_CART = 1.0
    MASS_POLE = 0.1
    TOTAL_MASS = MASS_CART + MASS_POLE
    LENGTH = 0.5
    POLE_MASS_LENGTH = MASS_POLE * LENGTH
    FORCE_MAG = 10.0
    TAU = 0.02
    THETA_THRESHOLD_RADIANS = 12 * 2 * math.pi / 360
    X_THRESHOLD = 2.4

    def __init__(self, seed: int | None = None) -> None:
        super().__init__([0])
        self._rng = np.random.default_rng(seed)
        self._state = (0.0, 0.0, 0.0, 0.0)
        self._done = False
        self.reset()

    @property
    def state(self) -> tuple[float, float, float, float]:
        """Cart position, cart velocity, pole angle and pole angular velocity."""
        return self._state

    def reset(self, seed: int | None = None) -> None:
        if seed is not None:
            self._rng = np.random.default_rng(seed)
        x, x_dot, theta, theta_dot = (
            float(v) for v in self._rng.uniform(-0.05, 0.05, 4)
        )
        self._state = (x, x_dot, theta, theta_dot)
        self._done = False
        self._reset_bookkeeping()

    def get_active_agent(self) -> Hashable:
        return self.agent_order[0]

    def observe(self, agent_id: Hashable = None) -> Matrix:
        """The state scaled by each component's upper bound."""
        space = self.get_observation_space(agent_id)
        return Matrix.from_rows(
            [[value / space.high(i) for i, value in enumerate(self._state)]]
        )

    def step(self, action: Any) -> None:
        if self._done:
            raise EnvironmentError(
                "Episode has terminated. Please reset the environment."
            )
        agent = self.get_active_agent()
        report = self._report(agent)
        report.previous_state = self.observe(agent)
        report.action = action

        force = self.FORCE_MAG if self._action_index(action) == 1 else -self.FORCE_MAG
        x, x_dot, theta, theta_dot = self._state
        cos_theta = math.cos(theta)
        sin_theta = math.sin(theta)
        temp = (
            force + self.POLE_MASS_LENGTH * theta_dot * theta_dot * sin_theta
        ) / self.TOTAL_MASS
        theta_acc = (self.GRAVITY * sin_theta - cos_theta * temp) / (
            self.LENGTH
            * (4.0 / 3.0 - self.MASS_POLE * cos_theta * cos_theta / self.TOTAL_MASS)
        )
        x_acc = temp - self.POLE_MASS_LENGTH * theta_acc

        x += self.TAU * x_dot
        x_dot += self.TAU * x_acc
        theta += self.TAU * theta_dot
        theta_dot += self.TAU * theta_acc
        self._state = (x, x_dot, theta, theta_dot)

        self._done = (
            not -self.X_THRESHOLD <= x <= self.X_THRESHOLD
            or not -self.THETA_THRESHOLD_RADIANS <= theta <= self.THETA_THRESHOLD_RADIANS
        )
        reward = -1.0 if self._done else 1.0
        report.reward = reward
        self._add_reward(agent, reward)
        report.resulting_state = self.observe(agent)
        report.episode_status = (
            EpisodeStatus.TERMINATED if self._done else EpisodeStatus.RUNNING
        )

    def get_action_space(self, agent_id: Hashable = None) -> Space:
        return Space.discrete(2)

    def get_observation_space(self, agent_id: Hashable = None) -> Space:
        return Space.continuous([4], _LOW, _HIGH)

    def is_done(self) -> bool:
        return self._done