"""
Action Decoder Protocol Definition.

An action decoder turns a policy's raw output into a
:class:`~seeker_sim.core.kinematics.MovementIntent` in the seeker's local
frame. Swapping decoders changes the action space without touching the
environment.
"""

from typing import TYPE_CHECKING, Any, Dict, Protocol, Sequence, Union, runtime_checkable

import gymnasium as gym
import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from ..core.kinematics import MovementIntent

# Type alias for action inputs
ActionType = Union[int, np.integer, Sequence[float], NDArray[np.floating]]


@runtime_checkable
class ActionDecoder(Protocol):
    """Protocol defining the action decoder interface.

    Universal Properties:
        1. Determinism: Same action → same intent
        2. Purity: No side effects
        3. Bounded intent: every component of the intent lies in [-1, 1]

    Type Signature:
        ActionDecoder: ActionType → MovementIntent
    """

    @property
    def action_space(self) -> gym.Space:
        """Gymnasium action space definition.

        Postconditions:
            C1: Returns valid gym.Space instance
            C2: Same instance every call
        """
        ...

    def decode(self, action: ActionType) -> "MovementIntent":
        """Decode a raw action.

        Raises:
            InvalidAction: If the action is malformed or out of range. The
                environment recovers by substituting a zero intent.
        """
        ...

    def validate_action(self, action: Any) -> bool:
        """Return True if ``decode`` would accept ``action``."""
        ...

    def get_metadata(self) -> Dict[str, Any]:
        """Return decoder metadata.

        Returns:
            Dictionary containing:
            - 'type': str - Decoder type
            - 'parameters': dict - Configuration
            - 'movement_model': Description of intent semantics
        """
        ...
