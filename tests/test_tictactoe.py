import pytest

from talawa.environment import EnvironmentError, EpisodeStatus
from talawa.tictactoe import TicTacToe


def _cells(matrix):
    return [matrix[0, i] for i in range(matrix.cols)]


def test_initial_board_empty_and_all_legal():
    env = TicTacToe()
    assert _cells(env.observe()) == [0.0] * 9
    assert _cells(env.get_legal_mask(0)) == [1.0] * 9
    assert env.get_active_agent() == 0


def test_moves_alternate_marks_and_players():
    env = TicTacToe()
    env.step(4)
    assert env.get_active_agent() == 1
    env.step(0)
    assert env.get_active_agent() == 0
    cells = _cells(env.observe())
    assert cells[4] == 1.0
    assert cells[0] == -1.0
    mask = _cells(env.get_legal_mask(0))
    assert mask[4] == 0.0 and mask[0] == 0.0
    assert sum(mask) == 7
    report = env.last(0)
    assert report.episode_status is EpisodeStatus.RUNNING
    assert report.resulting_state[0, 4] == 1.0


def test_occupied_cell_raises():
    env = TicTacToe()
    env.step(2)
    with pytest.raises(EnvironmentError):
        env.step(2)
    assert env.get_active_agent() == 1


@pytest.mark.parametrize("index", [9, -1])
def test_out_of_bounds_raises(index):
    env = TicTacToe()
    with pytest.raises(EnvironmentError):
        env.step(index)


def test_win_rewards_and_termination():
    env = TicTacToe()
    for move in [0, 3, 1, 4, 2]:
        env.step(move)
    assert env.is_done()
    assert env.last(0).reward == 1.0
    assert env.last(1).reward == -1.0
    assert env.last(0).episode_status is EpisodeStatus.TERMINATED
    assert env.last(1).episode_status is EpisodeStatus.TERMINATED
    assert env.cumulative_reward(0) == 1.0
    assert env.cumulative_reward(1) == -1.0
    with pytest.raises(EnvironmentError):
        env.step(8)


def test_second_player_can_win():
    env = TicTacToe()
    for move in [0, 2, 1, 4, 8, 6]:
        env.step(move)
    assert env.is_done()
    assert env.last(1).reward == 1.0
    assert env.last(0).reward == -1.0


def test_draw():
    env = TicTacToe()
    for move in [0, 1, 2, 4, 3, 5, 7, 6, 8]:
        env.step(move)
    assert env.is_done()
    for agent in (0, 1):
        assert env.last(agent).reward == 0.0
        assert env.last(agent).episode_status is EpisodeStatus.TERMINATED
        assert env.cumulative_reward(agent) == 0.0
    assert sum(_cells(env.get_legal_mask(0))) == 0.0


def test_reset_clears_board():
    env = TicTacToe()
    for move in [0, 3, 1, 4, 2]:
        env.step(move)
    env.reset()
    assert not env.is_done()
    assert _cells(env.observe()) == [0.0] * 9
    assert env.get_active_agent() == 0
    assert env.cumulative_reward(0) == 0.0


def test_clone_is_independent():
    env = TicTacToe()
    env.step(0)
    copy = env.clone()
    env.step(1)
    assert copy.observe()[0, 1] == 0.0
    assert copy.get_active_agent() == 1


def test_spaces():
    env = TicTacToe()
    assert env.get_action_space(0).n == 9
    assert env.get_observation_space(1).n == 9