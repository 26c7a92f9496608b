"""Tests for factory helpers and vectorized, isolated environments."""

import numpy as np
import pytest

from seeker_sim.config import SimulationConfig
from seeker_sim.envs import SeekerEnv, create_seeker_environment, make_env, make_vector_env


def test_create_environment_applies_overrides():
    env = create_seeker_environment(integration_mode="turn", seed=3)
    assert isinstance(env, SeekerEnv)
    assert env.config.integration_mode.value == "turn"


def test_make_env_defaults():
    env = make_env()
    assert env.config == SimulationConfig()


def test_vector_env_shapes():
    vec = make_vector_env(3, seed=0)
    obs, info = vec.reset(seed=0)
    assert obs.shape == (3, 6)
    obs, rewards, terminated, truncated, info = vec.step(np.zeros(3, dtype=np.int64))
    assert rewards.shape == (3,)
    assert terminated.shape == truncated.shape == (3,)
    vec.close()


def test_vector_sub_envs_are_isolated():
    vec = make_vector_env(2, config={"max_steps": 50}, seed=10)
    vec.reset(seed=10)
    first, second = vec.envs
    assert first.unwrapped.world is not second.unwrapped.world
    before = second.unwrapped.world.seeker_pose()
    first.unwrapped.step(0)
    assert second.unwrapped.world.seeker_pose() == before
    assert second.unwrapped.episode_state.step_count == 0
    vec.close()


def test_vector_seeding_matches_single_env():
    vec = make_vector_env(2, seed=5)
    obs, _ = vec.reset(seed=5)
    for index in range(2):
        single_obs, _ = SeekerEnv().reset(seed=5 + index)
        np.testing.assert_array_equal(obs[index], single_obs)
    vec.close()


def test_vector_env_rejects_zero():
    with pytest.raises(ValueError):
        make_vector_env(0)
