"""Core value types, enumerations and kinematics."""

from .constants import (
    DEFAULT_MAX_STEPS,
    DEFAULT_SUCCESS_DISTANCE,
    ENVIRONMENT_ID,
    PACKAGE_NAME,
)
from .enums import (
    ActionSpaceKind,
    DiscreteMove,
    EpisodePhase,
    IntegrationMode,
    ObservationLayout,
    TerminationReason,
)
from .geometry import Pose, planar_distance, signed_angle, wrap_heading
from .kinematics import MovementIntegrator, MovementIntent
from .state import EntityState, EpisodeState

__all__ = [
    "PACKAGE_NAME",
    "ENVIRONMENT_ID",
    "DEFAULT_MAX_STEPS",
    "DEFAULT_SUCCESS_DISTANCE",
    "ActionSpaceKind",
    "DiscreteMove",
    "EpisodePhase",
    "IntegrationMode",
    "ObservationLayout",
    "TerminationReason",
    "Pose",
    "planar_distance",
    "signed_angle",
    "wrap_heading",
    "MovementIntegrator",
    "MovementIntent",
    "EntityState",
    "EpisodeState",
]
