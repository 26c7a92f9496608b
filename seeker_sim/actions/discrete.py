"""
Discrete4Actions: four-way movement relative to the seeker's facing.

The same index set drives both integration modes. Under ``strafe``
integration LEFT/RIGHT translate sideways; under ``turn`` integration the
lateral component acts as a turn sign, so LEFT/RIGHT rotate in place.
"""

from typing import Any, Dict

import gymnasium as gym
import numpy as np

from ..core.enums import DiscreteMove
from ..core.kinematics import MovementIntent
from ..utils.exceptions import InvalidAction


class Discrete4Actions:
    """Discrete(4) action decoder.

    Satisfies ActionDecoder protocol via duck typing.

    Action Space:
        Discrete(4): 0=FORWARD, 1=BACKWARD, 2=LEFT, 3=RIGHT

    Intent:
        Exactly one of (forward, lateral) is ±1, the other 0.

    Example:
        >>> actions = Discrete4Actions()
        >>> actions.decode(2)
        MovementIntent(forward=0.0, lateral=-1.0)
    """

    _INTENTS = {
        DiscreteMove.FORWARD: MovementIntent(1.0, 0.0),
        DiscreteMove.BACKWARD: MovementIntent(-1.0, 0.0),
        DiscreteMove.LEFT: MovementIntent(0.0, -1.0),
        DiscreteMove.RIGHT: MovementIntent(0.0, 1.0),
    }

    def __init__(self):
        self._action_space = gym.spaces.Discrete(len(self._INTENTS))

    @property
    def action_space(self) -> gym.Space:
        return self._action_space

    def decode(self, action: Any) -> MovementIntent:
        index = self._as_index(action)
        if index is None or not 0 <= index < len(self._INTENTS):
            raise InvalidAction(
                f"Invalid discrete action: {action!r}, must be an integer in {{0, 1, 2, 3}}",
                action=action,
            )
        return self._INTENTS[DiscreteMove(index)]

    def validate_action(self, action: Any) -> bool:
        index = self._as_index(action)
        return index is not None and 0 <= index < len(self._INTENTS)

    @staticmethod
    def _as_index(action: Any):
        # bool is an int subclass but never a meaningful index
        if isinstance(action, (bool, np.bool_)):
            return None
        if isinstance(action, (int, np.integer)):
            return int(action)
        if (
            isinstance(action, np.ndarray)
            and action.shape == ()
            and np.issubdtype(action.dtype, np.integer)
        ):
            return int(action)
        return None

    def get_metadata(self) -> Dict[str, Any]:
        return {
            "type": "discrete_4",
            "modality": "egocentric",
            "parameters": {
                "n_actions": 4,
                "action_names": [move.name for move in DiscreteMove],
            },
            "movement_model": "unit intent along forward or lateral axis",
            "orientation_dependent": True,
        }
