"""
Host World Protocol Definitions.

The simulation core never assumes a particular physics or rendering engine.
It reads poses through a :class:`PoseProvider`, commits integrated poses
through a :class:`MovementSink`, and polls contact events through a
:class:`ContactSignal`. :class:`~seeker_sim.host.KinematicWorld` implements
all three in memory.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..core.geometry import Pose


@runtime_checkable
class PoseProvider(Protocol):
    """Read access to entity poses."""

    def seeker_pose(self) -> "Pose":
        ...

    def target_pose(self) -> "Pose":
        """Return the bound target pose.

        Raises:
            MissingTarget: If no target is bound.
        """
        ...

    def has_target(self) -> bool:
        ...


@runtime_checkable
class MovementSink(Protocol):
    """Write access used to commit poses back to the host world."""

    def apply_seeker_pose(self, pose: "Pose") -> None:
        ...

    def place_target(self, pose: "Pose") -> None:
        ...


@runtime_checkable
class ContactSignal(Protocol):
    """Host-reported seeker/target contact events."""

    def consume_contact(self) -> bool:
        """Return True once per contact event raised since the last call."""
        ...


@runtime_checkable
class HostWorld(PoseProvider, MovementSink, ContactSignal, Protocol):
    """Convenience protocol for hosts providing all three capabilities."""
