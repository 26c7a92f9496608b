"""
Randomized, non-overlapping episode resets.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..core.geometry import Pose, planar_distance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpawnResult:
    """Outcome of one spawn draw.

    Attributes:
        seeker: New seeker pose
        target: New target pose, or None when no target is bound
        attempts: Number of target draws performed
        used_fallback: True when the retry bound was exhausted and the target
            was placed at the spawn-square corner farthest from the seeker
    """

    seeker: Pose
    target: Optional[Pose]
    attempts: int = 0
    used_fallback: bool = False

    @property
    def separation(self) -> Optional[float]:
        if self.target is None:
            return None
        return planar_distance(self.seeker, self.target)


class SpawnRandomizer:
    """Draw seeker and target poses inside a square of half-size ``half_size``.

    The seeker position is uniform over ``[-s, s]^2`` and its heading uniform
    over ``[0, 360)``. The target position is redrawn from the same square
    until it lies at least ``min_separation`` away from the seeker, at most
    ``max_attempts`` times. Height and target heading are carried over from
    the poses passed in.
    """

    def __init__(
        self,
        half_size: float,
        min_separation: float = 1.0,
        max_attempts: int = 100,
    ):
        if half_size <= 0:
            raise ValueError(f"half_size must be positive, got {half_size}")
        if min_separation < 0:
            raise ValueError(
                f"min_separation must be non-negative, got {min_separation}"
            )
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        self.half_size = float(half_size)
        self.min_separation = float(min_separation)
        self.max_attempts = int(max_attempts)

    @classmethod
    def from_config(cls, config) -> "SpawnRandomizer":
        return cls(
            half_size=config.effective_spawn_half_size,
            min_separation=config.min_spawn_separation,
            max_attempts=config.spawn_max_attempts,
        )

    def sample(
        self,
        rng: np.random.Generator,
        seeker: Pose,
        target: Optional[Pose] = None,
    ) -> SpawnResult:
        s = self.half_size
        seeker_x, seeker_z = rng.uniform(-s, s, size=2)
        heading = float(rng.uniform(0.0, 360.0))
        new_seeker = Pose(
            x=float(seeker_x), y=seeker.y, z=float(seeker_z), heading=heading
        )

        if target is None:
            return SpawnResult(seeker=new_seeker, target=None)

        for attempt in range(1, self.max_attempts + 1):
            target_x, target_z = rng.uniform(-s, s, size=2)
            candidate = target.with_planar(float(target_x), float(target_z))
            if planar_distance(new_seeker, candidate) >= self.min_separation:
                return SpawnResult(
                    seeker=new_seeker, target=candidate, attempts=attempt
                )

        corner = self.farthest_corner(new_seeker)
        logger.warning(
            "Spawn retries exhausted after %d attempts (min separation %.3f); "
            "placing target at corner (%.3f, %.3f)",
            self.max_attempts,
            self.min_separation,
            corner[0],
            corner[1],
        )
        return SpawnResult(
            seeker=new_seeker,
            target=target.with_planar(*corner),
            attempts=self.max_attempts,
            used_fallback=True,
        )

    def farthest_corner(self, seeker: Pose) -> tuple:
        """Corner of the spawn square farthest from ``seeker``."""
        s = self.half_size
        corner_x = -s if seeker.x > 0 else s
        corner_z = -s if seeker.z > 0 else s
        return (corner_x, corner_z)

    def get_metadata(self) -> dict:
        return {
            "half_size": self.half_size,
            "min_separation": self.min_separation,
            "max_attempts": self.max_attempts,
        }


__all__ = ["SpawnRandomizer", "SpawnResult"]
