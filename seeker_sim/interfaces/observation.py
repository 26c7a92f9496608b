"""
Observation Model Protocol Definition.

This protocol defines the interface for mapping raw entity poses into the
fixed numeric feature vector consumed by a policy.
"""

from typing import Any, Dict, Protocol, runtime_checkable

import gymnasium as gym
import numpy as np
from numpy.typing import NDArray

ObservationType = NDArray[np.floating]


@runtime_checkable
class ObservationModel(Protocol):
    """Protocol defining the observation model interface.

    Universal Properties:
        1. Space Containment: observation always in observation_space
        2. Determinism: Same env_state → same observation
        3. Purity: No side effects, no mutations
        4. Shape Consistency: Observation shape matches space
    """

    @property
    def observation_space(self) -> gym.Space:
        """Gymnasium observation space definition (same instance every call)."""
        ...

    def get_observation(self, env_state: Dict[str, Any]) -> ObservationType:
        """Compute observation from environment state.

        Args:
            env_state: Environment state dictionary containing:
                Required:
                - 'seeker': Pose
                - 'target': Pose or None (no target bound)
                Optional:
                - 'step_count': int

        Returns:
            Observation contained in observation_space
        """
        ...

    def get_metadata(self) -> Dict[str, Any]:
        """Return observation model metadata ('type', 'parameters', 'features')."""
        ...
