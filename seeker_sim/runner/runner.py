from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

import gymnasium as gym
import numpy as np

logger = logging.getLogger(__name__)


@dataclass
class StepEvent:
    """Per-step event emitted by the runner stream.

    Attributes:
        t: Zero-based step index within the episode
        obs: Observation before taking the action (policy input)
        action: Action applied to the environment
        reward: Scalar reward returned by the step
        terminated: True if the target was reached
        truncated: True if the step limit was reached
        info: Info dict returned by env.step
    """

    t: int
    obs: np.ndarray
    action: Any
    reward: float
    terminated: bool
    truncated: bool
    info: dict


@dataclass
class EpisodeResult:
    """Summary result of a completed episode run.

    Attributes:
        seed: Seed used to reset env/policy for this run
        steps: Number of steps executed
        total_reward: Sum of rewards across steps
        terminated: True if the target was reached
        truncated: True if the episode timed out
        termination_reason: 'success', 'collision', 'timeout' or None
        metrics: Extra per-episode numbers (final distance, invalid actions)
    """

    seed: Optional[int]
    steps: int
    total_reward: float
    terminated: bool
    truncated: bool
    termination_reason: Optional[str] = None
    metrics: dict[str, Any] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.terminated


def _policy_reset(policy: Any, *, seed: Optional[int]) -> None:
    reset = getattr(policy, "reset", None)
    if callable(reset):
        reset(seed=seed)


def _select_action(policy: Any, observation: np.ndarray) -> Any:
    if hasattr(policy, "select_action"):
        return policy.select_action(observation, explore=False)
    if callable(policy):
        return policy(observation)
    raise TypeError("Policy must implement select_action() or be callable")


def _spaces_compatible(policy_space: gym.Space, env_space: gym.Space) -> bool:
    if isinstance(policy_space, gym.spaces.Discrete) and isinstance(
        env_space, gym.spaces.Discrete
    ):
        return (
            policy_space.start >= env_space.start
            and policy_space.start + policy_space.n <= env_space.start + env_space.n
        )
    if isinstance(policy_space, gym.spaces.Box) and isinstance(
        env_space, gym.spaces.Box
    ):
        return policy_space.shape == env_space.shape
    return policy_space == env_space


def _ensure_action_space_compat(env: Any, policy: Any) -> None:
    env_space = getattr(env, "action_space", None)
    pol_space = getattr(policy, "action_space", None)
    if env_space is None or pol_space is None:
        return
    if not _spaces_compatible(pol_space, env_space):
        raise ValueError(
            f"Policy action space {pol_space} is incompatible with environment "
            f"action space {env_space}"
        )


def _start(env: Any, policy: Any, seed: Optional[int]) -> np.ndarray:
    obs, _ = env.reset(seed=seed)
    _policy_reset(policy, seed=seed)
    _ensure_action_space_compat(env, policy)
    return obs


def stream(
    env: Any,
    policy: Any,
    *,
    seed: Optional[int] = None,
    max_steps: Optional[int] = None,
) -> Iterator[StepEvent]:
    """Yield one StepEvent per env.step() until the episode ends.

    ``max_steps`` is a soft cap on top of the environment's own step limit.
    """
    obs = _start(env, policy, seed)
    t = 0
    while max_steps is None or t < max_steps:
        action = _select_action(policy, obs)
        next_obs, reward, term, trunc, info = env.step(action)
        yield StepEvent(
            t=t,
            obs=obs,
            action=action,
            reward=float(reward),
            terminated=bool(term),
            truncated=bool(trunc),
            info=dict(info) if isinstance(info, dict) else {},
        )
        t += 1
        obs = next_obs
        if term or trunc:
            return


def run_episode(
    env: Any,
    policy: Any,
    *,
    max_steps: Optional[int] = None,
    seed: Optional[int] = None,
    on_step: Optional[Callable[[StepEvent], None]] = None,
    on_episode_end: Optional[Callable[[EpisodeResult], None]] = None,
) -> EpisodeResult:
    """Run a single episode and return summary result.

    Deterministic when given the same (seed, env, policy) triplet.
    """
    steps = 0
    total_reward = 0.0
    terminated = False
    truncated = False
    invalid_actions = 0
    last_info: dict = {}

    for ev in stream(env, policy, seed=seed, max_steps=max_steps):
        if on_step is not None:
            on_step(ev)
        steps += 1
        total_reward += ev.reward
        terminated = ev.terminated
        truncated = ev.truncated
        invalid_actions += int(bool(ev.info.get("invalid_action", False)))
        last_info = ev.info

    if max_steps is not None and steps >= max_steps and not (terminated or truncated):
        # Soft cap hit before the environment's own limit
        truncated = True

    result = EpisodeResult(
        seed=seed,
        steps=steps,
        total_reward=float(total_reward),
        terminated=terminated,
        truncated=truncated,
        termination_reason=last_info.get("termination_reason"),
        metrics={
            "final_distance": last_info.get("distance"),
            "invalid_actions": invalid_actions,
        },
    )

    logger.info(
        "Episode finished: steps=%d reward=%.4f outcome=%s",
        steps,
        result.total_reward,
        result.termination_reason or ("truncated" if truncated else "running"),
    )

    if on_episode_end is not None:
        on_episode_end(result)

    return result
