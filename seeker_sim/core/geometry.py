"""
Planar geometry for the pursuit arena.

Positions live in an (x, y, z) world with y as height. All game logic is
planar over (x, z). Headings are in degrees: 0 faces +z and headings grow
clockwise seen from above, so forward = (sin h, cos h) and
right = (cos h, -sin h).
"""

import math
from dataclasses import dataclass, replace
from typing import Tuple

import numpy as np

Vector2 = Tuple[float, float]


@dataclass(frozen=True)
class Pose:
    """Immutable entity pose."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    heading: float = 0.0

    def __post_init__(self):
        for name in ("x", "y", "z", "heading"):
            value = getattr(self, name)
            if not isinstance(value, (int, float, np.integer, np.floating)):
                raise TypeError(
                    f"Pose.{name} must be numeric, got {type(value).__name__}"
                )
            if not math.isfinite(float(value)):
                raise ValueError(f"Pose.{name} must be finite, got {value}")

    @property
    def planar(self) -> Vector2:
        return (float(self.x), float(self.z))

    @property
    def forward(self) -> Vector2:
        return heading_to_forward(self.heading)

    @property
    def right(self) -> Vector2:
        rad = math.radians(self.heading)
        return (math.cos(rad), -math.sin(rad))

    def with_planar(self, x: float, z: float) -> "Pose":
        """Return a copy moved in the plane; height and heading are kept."""
        return replace(self, x=float(x), z=float(z))

    def with_heading(self, heading: float) -> "Pose":
        return replace(self, heading=wrap_heading(heading))

    def to_dict(self) -> dict:
        return {
            "x": float(self.x),
            "y": float(self.y),
            "z": float(self.z),
            "heading": float(self.heading),
        }


def wrap_heading(heading: float) -> float:
    """Wrap a heading into [0, 360)."""
    wrapped = float(heading) % 360.0
    # -1e-17 % 360.0 rounds to exactly 360.0
    return 0.0 if wrapped >= 360.0 else wrapped


def heading_to_forward(heading: float) -> Vector2:
    rad = math.radians(heading)
    return (math.sin(rad), math.cos(rad))


def planar_offset(origin: Pose, other: Pose) -> Vector2:
    """Vector from origin to other in the (x, z) plane."""
    return (float(other.x) - float(origin.x), float(other.z) - float(origin.z))


def planar_distance(a: Pose, b: Pose) -> float:
    dx, dz = planar_offset(a, b)
    return math.hypot(dx, dz)


def signed_angle(forward: Vector2, direction: Vector2) -> float:
    """Signed angle in radians from ``forward`` to ``direction``.

    Positive when ``direction`` lies to the right (clockwise). A zero-length
    direction is treated as straight ahead and yields 0.
    """
    if direction[0] == 0.0 and direction[1] == 0.0:
        direction = forward
    right = (forward[1], -forward[0])
    along = forward[0] * direction[0] + forward[1] * direction[1]
    across = right[0] * direction[0] + right[1] * direction[1]
    return math.atan2(across, along)


__all__ = [
    "Pose",
    "Vector2",
    "wrap_heading",
    "heading_to_forward",
    "planar_offset",
    "planar_distance",
    "signed_angle",
]
