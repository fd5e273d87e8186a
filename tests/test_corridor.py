import pytest

from talawa.corridor import Corridor
from talawa.environment import EnvironmentError, EpisodeStatus
from talawa.matrix import Matrix


def _walk_to_start(env):
    for _ in range(Corridor.GOAL):
        env.step(0)


def test_reset_starts_in_first_half():
    for seed in range(20):
        env = Corridor(seed=seed)
        start = env.observe().item() * Corridor.GOAL
        assert 0 <= round(start) < Corridor.GOAL // 2
        assert env.position == round(start)


def test_same_seed_same_start():
    first = [Corridor(seed=s).position for s in range(10)]
    second = [Corridor(seed=s).position for s in range(10)]
    assert first == second
    assert all(0 <= p < Corridor.GOAL // 2 for p in first)


def test_step_right_advances_one_cell():
    env = Corridor(seed=1)
    before = env.position
    env.step(1)
    assert env.position == before + 1
    assert env.observe().item() == pytest.approx((before + 1) / Corridor.GOAL)
    report = env.last(0)
    assert report.reward == pytest.approx(Corridor.STEP_PENALTY)
    assert report.episode_status is EpisodeStatus.RUNNING
    assert report.action == 1
    assert report.previous_state.item() == pytest.approx(before / Corridor.GOAL)


def test_left_at_wall_stays():
    env = Corridor(seed=2)
    _walk_to_start(env)
    assert env.position == 0
    env.step(0)
    assert env.position == 0
    assert env.observe().item() == 0.0


def test_invalid_action_raises():
    env = Corridor(seed=3)
    with pytest.raises(EnvironmentError):
        env.step(2)


def test_reaching_goal_terminates():
    env = Corridor(seed=4)
    steps = 0
    while not env.is_done():
        env.step(1)
        steps += 1
    report = env.last(0)
    assert report.reward == pytest.approx(Corridor.GOAL_REWARD)
    assert report.episode_status is EpisodeStatus.TERMINATED
    assert env.observe().item() == pytest.approx(1.0)
    expected = (steps - 1) * Corridor.STEP_PENALTY + Corridor.GOAL_REWARD
    assert env.cumulative_reward(0) == pytest.approx(expected)
    with pytest.raises(EnvironmentError):
        env.step(1)


def test_reset_after_goal():
    env = Corridor(seed=5)
    while not env.is_done():
        env.step(1)
    env.reset()
    assert not env.is_done()
    assert env.cumulative_reward(0) == 0.0
    assert env.position < Corridor.GOAL // 2


def test_matrix_action_accepted():
    env = Corridor(seed=6)
    before = env.position
    env.step(Matrix.from_rows([[1.0]]))
    assert env.position == before + 1


def test_spaces():
    env = Corridor(seed=0)
    assert env.get_action_space(0).n == 2
    assert env.get_observation_space(0).n == 1
    assert env.get_active_agent() == 0


def test_clone_is_independent():
    env = Corridor(seed=8)
    copy = env.clone()
    env.step(1)
    assert copy.position == env.position - 1