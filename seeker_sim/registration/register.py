"""
Gymnasium registration for the pursuit environment.

Example:
    >>> import gymnasium as gym
    >>> from seeker_sim.registration import ensure_registered
    >>> env_id = ensure_registered()
    >>> env = gym.make(env_id, action_space="continuous_2")
"""

import logging
from typing import Any, Dict, Optional

import gymnasium

from ..config import SimulationConfig
from ..core.constants import ENVIRONMENT_ID

ENV_ID = ENVIRONMENT_ID
ENTRY_POINT = "seeker_sim.envs.seeker_env:SeekerEnv"

__all__ = [
    "ENV_ID",
    "ENTRY_POINT",
    "register_env",
    "unregister_env",
    "is_registered",
    "ensure_registered",
]

_logger = logging.getLogger(__name__)


def is_registered(env_id: Optional[str] = None) -> bool:
    """Return True if ``env_id`` is present in the Gymnasium registry."""
    return (env_id or ENV_ID) in gymnasium.envs.registration.registry


def register_env(
    env_id: Optional[str] = None,
    entry_point: Optional[str] = None,
    kwargs: Optional[Dict[str, Any]] = None,
    force_reregister: bool = False,
) -> str:
    """
    Register the pursuit environment with Gymnasium.

    The step limit lives in the simulation configuration (``max_steps``), so
    no TimeLimit wrapper is requested. ``kwargs`` are validated as
    SimulationConfig overrides before registering.

    Args:
        env_id: Environment identifier, defaults to ENV_ID
        entry_point: ``module:Class`` path, defaults to ENTRY_POINT
        kwargs: Default SimulationConfig overrides passed to the constructor
        force_reregister: Replace an existing registration

    Returns:
        The registered environment ID

    Raises:
        ValueError: If the ID does not carry a ``-v<N>`` version suffix
        ConfigError: If ``kwargs`` do not form a valid configuration
    """
    effective_env_id = env_id or ENV_ID
    effective_entry_point = entry_point or ENTRY_POINT
    effective_kwargs = dict(kwargs or {})

    name, sep, version = effective_env_id.rpartition("-v")
    if not sep or not name or not version.isdigit():
        raise ValueError(
            f"Environment ID '{effective_env_id}' must end with a '-v<N>' version suffix"
        )

    SimulationConfig(**effective_kwargs)

    if is_registered(effective_env_id):
        if not force_reregister:
            _logger.debug(
                "Environment '%s' already registered; use force_reregister=True to override",
                effective_env_id,
            )
            return effective_env_id
        unregister_env(effective_env_id)

    gymnasium.register(
        id=effective_env_id,
        entry_point=effective_entry_point,
        max_episode_steps=None,
        disable_env_checker=True,
        kwargs=effective_kwargs,
    )
    _logger.info(
        "Registered environment '%s' with entry_point '%s'",
        effective_env_id,
        effective_entry_point,
    )
    return effective_env_id


def unregister_env(env_id: Optional[str] = None) -> bool:
    """Remove ``env_id`` from the registry. Returns True if it was present."""
    effective_env_id = env_id or ENV_ID
    removed = (
        gymnasium.envs.registration.registry.pop(effective_env_id, None) is not None
    )
    if removed:
        _logger.info("Environment '%s' has been unregistered", effective_env_id)
    return removed


def ensure_registered(env_id: Optional[str] = None) -> str:
    """Idempotently register the default environment and return its ID."""
    effective_env_id = env_id or ENV_ID
    if not is_registered(effective_env_id):
        register_env(effective_env_id)
    return effective_env_id
