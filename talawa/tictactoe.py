"""Two-player noughts and crosses on a 3x3 board."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

from talawa.environment import Environment, EnvironmentError, EpisodeStatus, Space
from talawa.matrix import Matrix

__all__ = ["TicTacToe"]

_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class TicTacToe(Environment):
    """Agents 0 and 1 take turns placing marks (1.0 and -1.0) on cells 0..8.

    A win earns 1 for the mover and -1 for the other agent; a full board with
    no winner gives both 0.
    """

    def __init__(self) -> None:
        super().__init__([0, 1])
        self._board = [0.0] * 9
        self._active_index = 0
        self._done = False

    def reset(self, seed: int | None = None) -> None:
        self._board = [0.0] * 9
        self._active_index = 0
        self._done = False
        self._reset_bookkeeping()

    def get_active_agent(self) -> Hashable:
        return self.agent_order[self._active_index]

    def observe(self, agent_id: Hashable = None) -> Matrix:
        """The board flattened row by row into a 1 x 9 matrix."""
        return Matrix.from_rows([list(self._board)])

    def get_legal_mask(self, agent_id: Hashable = None) -> Matrix:
        return Matrix.from_rows([[1.0 if cell == 0.0 else 0.0 for cell in self._board]])

    def step(self, action: Any) -> None:
        if self._done:
            raise EnvironmentError("Game is already over.")
        agent = self.get_active_agent()
        report = self._report(agent)
        report.previous_state = self.observe(agent)
        report.action = action

        index = self._action_index(action)
        if not 0 <= index < 9:
            raise EnvironmentError("Invalid action: position out of bounds.")
        if self._board[index] != 0.0:
            raise EnvironmentError("Invalid action: position already taken.")

        mark = 1.0 if self._active_index == 0 else -1.0
        self._board[index] = mark
        report.resulting_state = self.observe(agent)

        if any(all(self._board[i] == mark for i in line) for line in _LINES):
            self._done = True
            report.reward = 1.0
            report.episode_status = EpisodeStatus.TERMINATED
            self._add_reward(agent, 1.0)
            other = self.agent_order[(self._active_index + 1) % 2]
            other_report = self._report(other)
            other_report.reward = -1.0
            other_report.episode_status = EpisodeStatus.TERMINATED
            self._add_reward(other, -1.0)
            return

        if all(cell != 0.0 for cell in self._board):
            self._done = True
            for agent_id in self.agent_order:
                draw_report = self._report(agent_id)
                draw_report.reward = 0.0
                draw_report.episode_status = EpisodeStatus.TERMINATED
            return

        report.reward = 0.0
        report.episode_status = EpisodeStatus.RUNNING
        self._active_index = (self._active_index + 1) % 2

    def get_action_space(self, agent_id: Hashable = None) -> Space:
        return Space.discrete(9)

    def get_observation_space(self, agent_id: Hashable = None) -> Space:
        return Space.discrete(9)

    def is_done(self) -> bool:
        return self._done