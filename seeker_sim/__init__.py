"""Episodic seeker/target pursuit simulation exposed as a Gymnasium environment."""

from __future__ import annotations

__version__ = "0.1.0"

from .config import SimulationConfig, get_default_config, load_config
from .core import (
    ENVIRONMENT_ID,
    PACKAGE_NAME,
    ActionSpaceKind,
    EntityState,
    EpisodePhase,
    EpisodeState,
    IntegrationMode,
    MovementIntegrator,
    MovementIntent,
    ObservationLayout,
    Pose,
    TerminationReason,
)
from .envs import SeekerEnv, create_seeker_environment, make_env, make_vector_env
from .host import KinematicWorld
from .registration import ensure_registered, register_env
from .utils.exceptions import (
    ConfigError,
    InvalidAction,
    InvalidState,
    MissingTarget,
    SeekerSimError,
)

__all__ = [
    "__version__",
    "PACKAGE_NAME",
    "ENVIRONMENT_ID",
    "SimulationConfig",
    "get_default_config",
    "load_config",
    "ActionSpaceKind",
    "IntegrationMode",
    "ObservationLayout",
    "EpisodePhase",
    "TerminationReason",
    "Pose",
    "EntityState",
    "EpisodeState",
    "MovementIntent",
    "MovementIntegrator",
    "SeekerEnv",
    "KinematicWorld",
    "create_seeker_environment",
    "make_env",
    "make_vector_env",
    "register_env",
    "ensure_registered",
    "SeekerSimError",
    "ConfigError",
    "InvalidAction",
    "InvalidState",
    "MissingTarget",
]
