"""
Action decoders mapping raw policy output to movement intents.
"""

from typing import Union

from ..core.enums import ActionSpaceKind
from .continuous import Continuous2Actions
from .discrete import Discrete4Actions

__all__ = ["Discrete4Actions", "Continuous2Actions", "create_action_decoder"]


def create_action_decoder(kind: Union[ActionSpaceKind, str]):
    """Return the decoder for ``kind``."""
    kind = ActionSpaceKind(kind)
    if kind is ActionSpaceKind.CONTINUOUS_2:
        return Continuous2Actions()
    return Discrete4Actions()
