"""Built-in host world implementations."""

from .kinematic_world import KinematicWorld

__all__ = ["KinematicWorld"]
