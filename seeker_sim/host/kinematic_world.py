"""
In-memory host world.

Stands in for a physics/rendering engine: stores the seeker and target poses,
accepts committed seeker poses and queues contact events raised by the host
(or a test) until the environment consumes them.
"""

import logging
from typing import Optional

from ..core.geometry import Pose
from ..utils.exceptions import MissingTarget

logger = logging.getLogger(__name__)


class KinematicWorld:
    """Pose store satisfying PoseProvider, MovementSink and ContactSignal.

    Example:
        >>> world = KinematicWorld(target=Pose(z=3.0))
        >>> world.apply_seeker_pose(Pose(z=1.0))
        >>> world.raise_contact()
        >>> world.consume_contact(), world.consume_contact()
        (True, False)
    """

    def __init__(self, seeker: Optional[Pose] = None, target: Optional[Pose] = None):
        self._seeker = seeker if seeker is not None else Pose()
        self._target = target
        self._pending_contact = False
        self.commit_count = 0

    def seeker_pose(self) -> Pose:
        return self._seeker

    def target_pose(self) -> Pose:
        if self._target is None:
            raise MissingTarget()
        return self._target

    def has_target(self) -> bool:
        return self._target is not None

    def apply_seeker_pose(self, pose: Pose) -> None:
        self._seeker = pose
        self.commit_count += 1

    def place_target(self, pose: Pose) -> None:
        self._target = pose

    def unbind_target(self) -> None:
        """Remove the target; subsequent target_pose() calls raise MissingTarget."""
        self._target = None
        self._pending_contact = False
        logger.debug("Target unbound from host world")

    def raise_contact(self) -> None:
        """Record a seeker/target contact event."""
        self._pending_contact = True

    def consume_contact(self) -> bool:
        contact = self._pending_contact
        self._pending_contact = False
        return contact

    def clear_contacts(self) -> None:
        self._pending_contact = False
