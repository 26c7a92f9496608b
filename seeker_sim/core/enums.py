"""
Core enumerations for the pursuit simulation.
"""

from enum import Enum, IntEnum

from .constants import BASIC_OBSERVATION_SIZE, EXTENDED_OBSERVATION_SIZE


class ActionSpaceKind(str, Enum):
    """Admissible policy output structure."""

    DISCRETE_4 = "discrete_4"
    CONTINUOUS_2 = "continuous_2"

    def is_discrete(self) -> bool:
        return self is ActionSpaceKind.DISCRETE_4


class IntegrationMode(str, Enum):
    """Kinematic model used to advance the seeker."""

    STRAFE = "strafe"  # translate relative to facing, heading fixed
    TURN = "turn"  # rotate heading, then advance along forward


class ObservationLayout(str, Enum):
    """Observation vector layout."""

    BASIC = "basic"  # relative x/z + forward x/z
    EXTENDED = "extended"  # basic + normalized distance + signed bearing

    @property
    def size(self) -> int:
        if self is ObservationLayout.BASIC:
            return BASIC_OBSERVATION_SIZE
        return EXTENDED_OBSERVATION_SIZE


class EpisodePhase(Enum):
    """Episode controller phases."""

    IDLE = "idle"
    ACTIVE = "active"
    TERMINAL = "terminal"


class TerminationReason(str, Enum):
    """Why an episode left the ACTIVE phase."""

    SUCCESS = "success"
    COLLISION = "collision"
    TIMEOUT = "timeout"

    def is_success(self) -> bool:
        """Both proximity and contact count as reaching the target."""
        return self in (TerminationReason.SUCCESS, TerminationReason.COLLISION)


class DiscreteMove(IntEnum):
    """Discrete-4 action indices."""

    FORWARD = 0
    BACKWARD = 1
    LEFT = 2
    RIGHT = 3


__all__ = [
    "ActionSpaceKind",
    "IntegrationMode",
    "ObservationLayout",
    "EpisodePhase",
    "TerminationReason",
    "DiscreteMove",
]
