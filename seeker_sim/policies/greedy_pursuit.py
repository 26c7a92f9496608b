from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Union

import gymnasium as gym
import numpy as np

from ..actions import create_action_decoder
from ..core.enums import ActionSpaceKind, DiscreteMove, IntegrationMode


@dataclass
class GreedyPursuitPolicy:
    """Scripted controller that steers straight at the target.

    Reads the relative target vector (features 0-1) and the seeker's forward
    vector (features 2-3), so it works with both observation layouts.

    - strafe integration: moves along the local axis best aligned with the
      target (discrete) or directly toward it (continuous)
    - turn integration: turns toward the target until the bearing is within
      ``heading_tolerance_deg``, then advances
    - with no target visible (zero relative vector) it keeps moving forward
    """

    action_kind: Union[ActionSpaceKind, str] = ActionSpaceKind.DISCRETE_4
    integration_mode: Union[IntegrationMode, str] = IntegrationMode.STRAFE
    heading_tolerance_deg: float = 10.0

    def __post_init__(self) -> None:
        self.action_kind = ActionSpaceKind(self.action_kind)
        self.integration_mode = IntegrationMode(self.integration_mode)
        if not 0.0 < self.heading_tolerance_deg <= 180.0:
            raise ValueError(
                f"heading_tolerance_deg must be in (0, 180], got {self.heading_tolerance_deg}"
            )
        self._decoder = create_action_decoder(self.action_kind)

    @classmethod
    def for_config(cls, config, **kwargs: Any) -> "GreedyPursuitPolicy":
        return cls(
            action_kind=config.action_space,
            integration_mode=config.integration_mode,
            **kwargs,
        )

    @property
    def action_space(self) -> gym.Space:
        return self._decoder.action_space

    def reset(self, *, seed: int | None = None) -> None:
        pass

    def select_action(self, observation: Any, *, explore: bool = False):
        obs = np.asarray(observation, dtype=np.float64).reshape(-1)
        if obs.shape[0] < 4:
            raise ValueError(
                f"{self.__class__.__name__} expects at least 4 features, got {obs.shape[0]}"
            )
        dx, dz, fx, fz = obs[:4]
        along = fx * dx + fz * dz
        across = fz * dx - fx * dz
        target_visible = dx != 0.0 or dz != 0.0

        if self.action_kind.is_discrete():
            return self._discrete_action(along, across, target_visible)
        return self._continuous_action(along, across, target_visible)

    def _bearing_deg(self, along: float, across: float) -> float:
        return math.degrees(math.atan2(across, along))

    def _discrete_action(self, along: float, across: float, visible: bool) -> int:
        if not visible:
            return int(DiscreteMove.FORWARD)
        if self.integration_mode is IntegrationMode.TURN:
            bearing = self._bearing_deg(along, across)
            if abs(bearing) <= self.heading_tolerance_deg:
                return int(DiscreteMove.FORWARD)
            return int(DiscreteMove.RIGHT if bearing > 0 else DiscreteMove.LEFT)
        # Best aligned local axis
        scores = {
            DiscreteMove.FORWARD: along,
            DiscreteMove.BACKWARD: -along,
            DiscreteMove.LEFT: -across,
            DiscreteMove.RIGHT: across,
        }
        return int(max(scores, key=scores.get))

    def _continuous_action(
        self, along: float, across: float, visible: bool
    ) -> np.ndarray:
        if not visible:
            return np.array([1.0, 0.0], dtype=np.float32)
        if self.integration_mode is IntegrationMode.TURN:
            bearing = self._bearing_deg(along, across)
            turn = float(np.clip(bearing / self.heading_tolerance_deg, -1.0, 1.0))
            forward = 1.0 if abs(bearing) <= self.heading_tolerance_deg else 0.0
            return np.array([forward, turn], dtype=np.float32)
        norm = math.hypot(along, across)
        return np.array([along / norm, across / norm], dtype=np.float32)
