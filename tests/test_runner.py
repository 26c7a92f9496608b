"""Tests for the episode runner."""

import numpy as np
import pytest

from seeker_sim.config import SimulationConfig
from seeker_sim.envs import SeekerEnv
from seeker_sim.policies import GreedyPursuitPolicy, RandomPolicy
from seeker_sim.runner import EpisodeResult, StepEvent, run_episode, stream


@pytest.fixture
def greedy_setup():
    config = SimulationConfig()
    return SeekerEnv(config), GreedyPursuitPolicy.for_config(config)


def test_run_episode_is_deterministic(greedy_setup):
    env, policy = greedy_setup
    first = run_episode(env, policy, seed=11)
    second = run_episode(env, policy, seed=11)
    assert first == second
    assert isinstance(first, EpisodeResult)
    assert first.success


def test_stream_yields_events_until_done(greedy_setup):
    env, policy = greedy_setup
    events = list(stream(env, policy, seed=3))
    assert all(isinstance(ev, StepEvent) for ev in events)
    assert [ev.t for ev in events] == list(range(len(events)))
    assert events[-1].terminated
    assert not any(ev.terminated or ev.truncated for ev in events[:-1])


def test_callbacks_invoked(greedy_setup):
    env, policy = greedy_setup
    seen, ended = [], []
    result = run_episode(
        env, policy, seed=3, on_step=seen.append, on_episode_end=ended.append
    )
    assert len(seen) == result.steps
    assert ended == [result]


def test_total_reward_matches_env(greedy_setup):
    env, policy = greedy_setup
    rewards = []
    result = run_episode(env, policy, seed=4, on_step=lambda ev: rewards.append(ev.reward))
    assert result.total_reward == pytest.approx(sum(rewards))
    assert result.total_reward == pytest.approx(env.episode_state.cumulative_reward)


def test_soft_cap_marks_truncated():
    env = SeekerEnv(SimulationConfig(max_steps=100))
    result = run_episode(env, lambda obs: 1, seed=0, max_steps=5)
    assert result.steps == 5
    assert result.truncated
    assert result.termination_reason is None


def test_env_timeout_reported():
    env = SeekerEnv(SimulationConfig(max_steps=4, action_space="continuous_2"))
    result = run_episode(env, lambda obs: np.zeros(2), seed=0)
    assert result.steps == 4
    assert result.truncated and not result.terminated
    assert result.termination_reason == "timeout"
    assert result.metrics["final_distance"] is not None


def test_invalid_actions_counted():
    env = SeekerEnv(SimulationConfig(max_steps=3))
    result = run_episode(env, lambda obs: 9, seed=0)
    assert result.metrics["invalid_actions"] == 3


def test_incompatible_policy_rejected():
    env = SeekerEnv()
    continuous = SeekerEnv(action_space="continuous_2").action_space
    with pytest.raises(ValueError, match="incompatible"):
        run_episode(env, RandomPolicy(continuous), seed=0)


def test_policy_without_interface_rejected():
    with pytest.raises(TypeError):
        run_episode(SeekerEnv(), object(), seed=0)
