import numpy as np
import pytest

from lightcycle import LightCycleEnv, RandomPolicy
from lightcycle.core import BoardConfig, Direction
from lightcycle.env import ACTIONS


def test_reset_returns_valid_observation():
    env = LightCycleEnv()
    obs, info = env.reset()

    assert obs["board"].shape == (30, 30)
    assert obs["positions"].tolist() == [[0, 0], [13, 4]]
    assert env.observation_space.contains(obs)
    assert info["legal_action_mask"].tolist() == [0, 1, 0, 1]


def test_step_advances_both_agents():
    env = LightCycleEnv(opponent=RandomPolicy(np.random.default_rng(0)))
    obs, info = env.reset()
    action = ACTIONS.index(Direction.DOWN)

    next_obs, reward, terminated, truncated, next_info = env.step(action)

    assert reward == 0.0
    assert not terminated
    assert not truncated
    assert next_obs["board"][1, 0] == 1
    assert np.count_nonzero(next_obs["board"]) == 4
    assert next_info["legal_action_mask"].shape == (4,)


def test_illegal_action_loses_episode():
    env = LightCycleEnv()
    env.reset()
    _, reward, terminated, _, _ = env.step(ACTIONS.index(Direction.UP))
    assert terminated
    assert reward == -1.0
    with pytest.raises(ValueError):
        env.step(ACTIONS.index(Direction.DOWN))


def test_render_ansi_on_small_board():
    env = LightCycleEnv(
        board_config=BoardConfig(rows=2, cols=3, start_a=(0, 0), start_b=(1, 2)),
        render_mode="ansi",
    )
    env.reset(seed=5)
    assert env.render() == "1..\n..2"
