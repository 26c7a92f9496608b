"""
Distance-shaped pursuit reward: time penalty, clamped progress, terminal bonus.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import numpy as np


@dataclass(frozen=True)
class RewardBreakdown:
    """Per-step reward split into its three terms."""

    time: float = 0.0
    shaping: float = 0.0
    terminal: float = 0.0

    @property
    def total(self) -> float:
        return self.time + self.shaping + self.terminal

    def to_dict(self) -> Dict[str, float]:
        return {
            "time": self.time,
            "shaping": self.shaping,
            "terminal": self.terminal,
            "total": self.total,
        }


class DistanceShapingReward:
    """Dense pursuit reward.

    Satisfies RewardFunction protocol via duck typing.

    Reward Structure:
        - -time_penalty every step
        - clamp((prev - next) * scale, shaping_min, shaping_max) when both
          distances are known, 0 otherwise
        - +terminal_bonus on the step the target is reached, on top of that
          step's shaping

    Properties:
        - Deterministic: Same inputs → same reward
        - Bounded shaping: shaping term always in [shaping_min, shaping_max]
        - Finite: Always returns finite value

    Example:
        >>> reward_fn = DistanceShapingReward(time_penalty=0.001, scale=0.25)
        >>> reward_fn.compute_reward(3.0, 2.0).shaping  # clamped
        0.05
    """

    def __init__(
        self,
        time_penalty: float = 0.001,
        scale: float = 0.25,
        shaping_min: float = -0.05,
        shaping_max: float = 0.05,
        terminal_bonus: float = 1.0,
    ):
        """Initialize DistanceShapingReward.

        Raises:
            ValueError: If time_penalty is negative, shaping bounds are
                inverted or any parameter is non-finite
        """
        params = (time_penalty, scale, shaping_min, shaping_max, terminal_bonus)
        if not all(np.isfinite(p) for p in params):
            raise ValueError(f"Reward parameters must be finite, got {params}")
        if time_penalty < 0.0:
            raise ValueError(f"time_penalty must be non-negative, got {time_penalty}")
        if shaping_min > shaping_max:
            raise ValueError(
                f"shaping_min must not exceed shaping_max, got {shaping_min} > {shaping_max}"
            )

        self.time_penalty = float(time_penalty)
        self.scale = float(scale)
        self.shaping_min = float(shaping_min)
        self.shaping_max = float(shaping_max)
        self.terminal_bonus = float(terminal_bonus)

    @classmethod
    def from_config(cls, config) -> "DistanceShapingReward":
        return cls(
            time_penalty=config.time_penalty,
            scale=config.distance_reward_scale,
            shaping_min=config.distance_reward_min,
            shaping_max=config.distance_reward_max,
            terminal_bonus=config.terminal_bonus,
        )

    def compute_reward(
        self,
        prev_distance: Optional[float],
        next_distance: Optional[float],
        *,
        reached: bool = False,
    ) -> RewardBreakdown:
        return RewardBreakdown(
            time=-self.time_penalty,
            shaping=self.shaping(prev_distance, next_distance),
            terminal=self.terminal_bonus if reached else 0.0,
        )

    def shaping(
        self, prev_distance: Optional[float], next_distance: Optional[float]
    ) -> float:
        if prev_distance is None or next_distance is None:
            return 0.0
        delta = float(prev_distance) - float(next_distance)
        return float(np.clip(delta * self.scale, self.shaping_min, self.shaping_max))

    def get_metadata(self) -> Dict[str, Any]:
        return {
            "type": "distance_shaping",
            "parameters": {
                "time_penalty": self.time_penalty,
                "scale": self.scale,
                "shaping_min": self.shaping_min,
                "shaping_max": self.shaping_max,
                "terminal_bonus": self.terminal_bonus,
            },
        }
