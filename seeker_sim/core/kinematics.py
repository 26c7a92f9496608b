"""
Kinematic movement integration for the seeker.

Two models are supported:

* ``strafe``: the intent is translated in the seeker's local frame,
  ``position += (forward * F + right * L) * move_speed * dt``; heading is
  left untouched.
* ``turn``: the lateral component is a turn sign,
  ``heading += L * rotate_speed * dt``, after which the seeker advances along
  the new forward by ``F * move_speed * dt``.

No collision resolution against the arena walls happens here. Out-of-bounds
excursions are tolerated unless ``clamp_half_size`` is given.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Union

from .enums import IntegrationMode
from .geometry import Pose, Vector2, heading_to_forward

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MovementIntent:
    """Desired motion in the seeker's local frame."""

    forward: float = 0.0
    lateral: float = 0.0

    @classmethod
    def zero(cls) -> "MovementIntent":
        return cls(0.0, 0.0)

    @property
    def is_zero(self) -> bool:
        return self.forward == 0.0 and self.lateral == 0.0

    @property
    def magnitude(self) -> float:
        return math.hypot(self.forward, self.lateral)

    def world_vector(self, pose: Pose) -> Vector2:
        """Project onto the world (x, z) plane using ``pose``'s frame."""
        fx, fz = pose.forward
        rx, rz = pose.right
        return (
            fx * self.forward + rx * self.lateral,
            fz * self.forward + rz * self.lateral,
        )


class MovementIntegrator:
    """Advance a seeker pose by one time step."""

    def __init__(
        self,
        mode: Union[IntegrationMode, str] = IntegrationMode.STRAFE,
        move_speed: float = 2.0,
        rotate_speed: float = 120.0,
        clamp_half_size: Optional[float] = None,
    ):
        self.mode = IntegrationMode(mode)
        if move_speed < 0:
            raise ValueError(f"move_speed must be non-negative, got {move_speed}")
        if rotate_speed < 0:
            raise ValueError(f"rotate_speed must be non-negative, got {rotate_speed}")
        if clamp_half_size is not None and clamp_half_size <= 0:
            raise ValueError(
                f"clamp_half_size must be positive when set, got {clamp_half_size}"
            )
        self.move_speed = float(move_speed)
        self.rotate_speed = float(rotate_speed)
        self.clamp_half_size = clamp_half_size

    @classmethod
    def from_config(cls, config) -> "MovementIntegrator":
        return cls(
            mode=config.integration_mode,
            move_speed=config.move_speed,
            rotate_speed=config.rotate_speed,
            clamp_half_size=config.arena_half_size if config.clamp_to_arena else None,
        )

    def integrate(self, pose: Pose, intent: MovementIntent, dt: float) -> Pose:
        if dt <= 0:
            raise ValueError(f"dt must be positive, got {dt}")
        if intent.is_zero:
            return pose

        if self.mode is IntegrationMode.TURN:
            new_pose = self._integrate_turn(pose, intent, dt)
        else:
            new_pose = self._integrate_strafe(pose, intent, dt)

        if self.clamp_half_size is not None:
            new_pose = self._clamp(new_pose)
        return new_pose

    def _integrate_strafe(self, pose: Pose, intent: MovementIntent, dt: float) -> Pose:
        vx, vz = intent.world_vector(pose)
        step = self.move_speed * dt
        return pose.with_planar(pose.x + vx * step, pose.z + vz * step)

    def _integrate_turn(self, pose: Pose, intent: MovementIntent, dt: float) -> Pose:
        heading = pose.heading + intent.lateral * self.rotate_speed * dt
        turned = pose.with_heading(heading)
        fx, fz = heading_to_forward(turned.heading)
        step = intent.forward * self.move_speed * dt
        return turned.with_planar(pose.x + fx * step, pose.z + fz * step)

    def _clamp(self, pose: Pose) -> Pose:
        bound = float(self.clamp_half_size)
        x = min(max(pose.x, -bound), bound)
        z = min(max(pose.z, -bound), bound)
        if x != pose.x or z != pose.z:
            logger.debug(
                "Clamped seeker from (%.3f, %.3f) to arena (%.3f, %.3f)",
                pose.x,
                pose.z,
                x,
                z,
            )
            return pose.with_planar(x, z)
        return pose

    def get_metadata(self) -> dict:
        return {
            "mode": self.mode.value,
            "move_speed": self.move_speed,
            "rotate_speed": self.rotate_speed,
            "clamp_half_size": self.clamp_half_size,
        }


__all__ = ["MovementIntent", "MovementIntegrator"]
