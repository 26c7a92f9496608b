"""
Per-episode state containers.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .enums import TerminationReason
from .geometry import Pose, Vector2


@dataclass
class EntityState:
    """Pose plus optional planar velocity.

    The target is kinematically static between resets, so its velocity stays
    ``None``.
    """

    pose: Pose = field(default_factory=Pose)
    velocity: Optional[Vector2] = None

    def __post_init__(self):
        if not isinstance(self.pose, Pose):
            raise TypeError(
                f"EntityState.pose must be Pose, got {type(self.pose).__name__}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pose": self.pose.to_dict(),
            "velocity": None if self.velocity is None else list(self.velocity),
        }


@dataclass
class EpisodeState:
    """Mutable bookkeeping for one episode, replaced on every reset."""

    step_count: int = 0
    last_distance: Optional[float] = None
    terminated: bool = False
    truncated: bool = False
    termination_reason: Optional[TerminationReason] = None
    cumulative_reward: float = 0.0
    target_warning_emitted: bool = False

    def __post_init__(self):
        if self.step_count < 0:
            raise ValueError(f"step_count must be non-negative, got {self.step_count}")

    @property
    def done(self) -> bool:
        return self.terminated or self.truncated

    def increment_step(self) -> None:
        self.step_count += 1

    def add_reward(self, reward: float) -> None:
        self.cumulative_reward += float(reward)

    def finish(self, reason: TerminationReason) -> None:
        """Record the terminal outcome; timeout maps to truncation."""
        self.termination_reason = reason
        if reason is TerminationReason.TIMEOUT:
            self.truncated = True
        else:
            self.terminated = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step_count": self.step_count,
            "last_distance": self.last_distance,
            "terminated": self.terminated,
            "truncated": self.truncated,
            "termination_reason": (
                None
                if self.termination_reason is None
                else self.termination_reason.value
            ),
            "cumulative_reward": self.cumulative_reward,
        }


__all__ = ["EntityState", "EpisodeState"]
