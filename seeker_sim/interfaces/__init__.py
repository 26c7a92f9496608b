"""
Protocol interfaces for pluggable components and host collaborators.
"""

from .action import ActionDecoder, ActionType
from .host import ContactSignal, HostWorld, MovementSink, PoseProvider
from .observation import ObservationModel, ObservationType
from .policy import Policy
from .reward import RewardFunction

__all__ = [
    "ActionDecoder",
    "ActionType",
    "ObservationModel",
    "ObservationType",
    "RewardFunction",
    "Policy",
    "PoseProvider",
    "MovementSink",
    "ContactSignal",
    "HostWorld",
]
