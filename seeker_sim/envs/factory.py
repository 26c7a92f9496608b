"""Factory functions for creating pursuit environments.

Example:
    >>> from seeker_sim.envs.factory import create_seeker_environment
    >>>
    >>> env = create_seeker_environment(action_space="continuous_2", integration_mode="turn")
    >>> obs, info = env.reset(seed=0)
    >>> obs, reward, terminated, truncated, info = env.step(env.action_space.sample())
"""

import logging
from typing import Any, Optional

from gymnasium.vector import SyncVectorEnv

from ..config import SimulationConfig
from .seeker_env import ConfigLike, SeekerEnv

__all__ = ["create_seeker_environment", "make_env", "make_vector_env"]

logger = logging.getLogger(__name__)


def create_seeker_environment(
    config: Optional[ConfigLike] = None,
    *,
    seed: Optional[int] = None,
    world: Optional[Any] = None,
    **overrides: Any,
) -> SeekerEnv:
    """
    Create a pursuit environment with built-in components.

    Args:
        config: Base SimulationConfig or mapping (defaults if None)
        seed: Optional seed for the environment RNG
        world: Optional host world (defaults to an in-memory KinematicWorld)
        **overrides: SimulationConfig field overrides

    Returns:
        SeekerEnv ready for reset()

    Raises:
        ConfigError: If the resulting configuration is invalid
    """
    return SeekerEnv(config, world=world, seed=seed, **overrides)


def make_env(**overrides: Any) -> SeekerEnv:
    """Shorthand for ``create_seeker_environment(**overrides)``."""
    return create_seeker_environment(**overrides)


def make_vector_env(
    num_envs: int,
    config: Optional[ConfigLike] = None,
    seed: Optional[int] = None,
) -> SyncVectorEnv:
    """
    Build ``num_envs`` fully isolated environments behind a SyncVectorEnv.

    Every sub-environment owns its own host world, episode state and RNG.
    With ``seed`` given, sub-environment ``i`` is seeded with ``seed + i``.
    """
    if num_envs < 1:
        raise ValueError(f"num_envs must be >= 1, got {num_envs}")
    if config is not None and not isinstance(config, SimulationConfig):
        config = SimulationConfig(**config)

    def _thunk(index: int):
        env_seed = None if seed is None else seed + index
        return lambda: SeekerEnv(config, seed=env_seed)

    logger.debug("Creating vector env with %d sub-environments", num_envs)
    return SyncVectorEnv([_thunk(i) for i in range(num_envs)])
