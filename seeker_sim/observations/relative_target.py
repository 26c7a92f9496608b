"""
RelativeTargetSensor: egocentric pursuit features.

Feature layout (extended, 6 values):
    0. (target.x - seeker.x) / half_size, clipped to [-1, 1]
    1. (target.z - seeker.z) / half_size, clipped to [-1, 1]
    2. seeker forward x
    3. seeker forward z
    4. planar distance / half_size, clipped to [0, 1]
    5. signed bearing to target / pi, in [-1, 1]

The basic layout keeps features 0-3 only. With no target bound, the
relative, distance and bearing features are zero while the forward vector is
still reported.
"""

import math
from typing import Any, Dict, Optional, Union

import gymnasium as gym
import numpy as np
from numpy.typing import NDArray

from ..core.constants import OBSERVATION_DTYPE
from ..core.enums import ObservationLayout
from ..core.geometry import Pose, planar_offset, signed_angle

FEATURE_NAMES = (
    "target_dx",
    "target_dz",
    "forward_x",
    "forward_z",
    "distance",
    "bearing",
)


class RelativeTargetSensor:
    """Seeker-relative target observation.

    Satisfies ObservationModel protocol via duck typing.

    Observation Space:
        Box(low=-1.0, high=1.0, shape=(4,) or (6,), dtype=float32)

    Required env_state Keys:
        - 'seeker': Pose
        - 'target': Pose or None

    Properties:
        - Deterministic: Same poses → same observation
        - Space Containment: every feature is clipped into its range
    """

    def __init__(
        self,
        half_size: float,
        layout: Union[ObservationLayout, str] = ObservationLayout.EXTENDED,
    ):
        if half_size <= 0:
            raise ValueError(f"half_size must be positive, got {half_size}")
        self.half_size = float(half_size)
        self.layout = ObservationLayout(layout)
        self._observation_space = gym.spaces.Box(
            low=-1.0,
            high=1.0,
            shape=(self.layout.size,),
            dtype=OBSERVATION_DTYPE,
        )

    @classmethod
    def from_config(cls, config) -> "RelativeTargetSensor":
        return cls(half_size=config.arena_half_size, layout=config.observation_layout)

    @property
    def observation_space(self) -> gym.Space:
        return self._observation_space

    def get_observation(self, env_state: Dict[str, Any]) -> NDArray[np.floating]:
        return self.encode(env_state["seeker"], env_state.get("target"))

    def encode(self, seeker: Pose, target: Optional[Pose]) -> NDArray[np.floating]:
        forward = seeker.forward
        obs = np.zeros(self.layout.size, dtype=OBSERVATION_DTYPE)
        obs[2] = forward[0]
        obs[3] = forward[1]
        if target is None:
            return obs

        dx, dz = planar_offset(seeker, target)
        obs[0] = np.clip(dx / self.half_size, -1.0, 1.0)
        obs[1] = np.clip(dz / self.half_size, -1.0, 1.0)

        if self.layout is ObservationLayout.EXTENDED:
            distance = math.hypot(dx, dz)
            obs[4] = np.clip(distance / self.half_size, 0.0, 1.0)
            obs[5] = np.clip(signed_angle(forward, (dx, dz)) / math.pi, -1.0, 1.0)
        return obs

    def get_metadata(self) -> Dict[str, Any]:
        return {
            "type": "relative_target_sensor",
            "modality": "egocentric",
            "parameters": {
                "half_size": self.half_size,
                "layout": self.layout.value,
            },
            "features": list(FEATURE_NAMES[: self.layout.size]),
            "required_state_keys": ["seeker", "target"],
            "observation_shape": (self.layout.size,),
            "observation_dtype": "float32",
        }
