"""
Continuous2Actions: bounded (forward, lateral) pair.
"""

import math
from typing import Any, Dict

import gymnasium as gym
import numpy as np

from ..core.kinematics import MovementIntent
from ..utils.exceptions import InvalidAction


class Continuous2Actions:
    """Box(-1, 1, (2,)) action decoder.

    Satisfies ActionDecoder protocol via duck typing.

    Decoding:
        1. Both components are clamped to [-1, 1]
        2. The clamped pair is normalized to unit length if nonzero, so
           diagonal and axis-aligned inputs move at the same speed

    Properties:
        - Inputs outside the box are accepted and clamped
        - Wrong shape or non-finite values raise InvalidAction
    """

    def __init__(self):
        self._action_space = gym.spaces.Box(
            low=-1.0, high=1.0, shape=(2,), dtype=np.float32
        )

    @property
    def action_space(self) -> gym.Space:
        return self._action_space

    def decode(self, action: Any) -> MovementIntent:
        values = self._as_pair(action)
        if values is None:
            raise InvalidAction(
                f"Invalid continuous action: {action!r}, expected two finite floats",
                action=action,
            )
        forward, lateral = np.clip(values, -1.0, 1.0)
        norm = math.hypot(forward, lateral)
        if norm == 0.0:
            return MovementIntent.zero()
        return MovementIntent(float(forward / norm), float(lateral / norm))

    def validate_action(self, action: Any) -> bool:
        return self._as_pair(action) is not None

    @staticmethod
    def _as_pair(action: Any):
        try:
            values = np.asarray(action, dtype=np.float64)
        except (TypeError, ValueError):
            return None
        if values.shape != (2,) or not np.all(np.isfinite(values)):
            return None
        return values

    def get_metadata(self) -> Dict[str, Any]:
        return {
            "type": "continuous_2",
            "modality": "egocentric",
            "parameters": {"low": -1.0, "high": 1.0, "normalized": True},
            "movement_model": "clamped (forward, lateral) pair normalized to unit length",
            "orientation_dependent": True,
        }
