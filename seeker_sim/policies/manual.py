"""
Manual control as an action source.

The simulation never polls input devices. A front end collects the set of
currently pressed keys and hands it over, either per call via
``set_pressed`` or through a ``key_source`` callable queried on every
``select_action``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

import gymnasium as gym

from ..core.enums import DiscreteMove

# Later entries win when several keys are held.
KEY_BINDINGS = (
    ("w", DiscreteMove.FORWARD),
    ("s", DiscreteMove.BACKWARD),
    ("a", DiscreteMove.LEFT),
    ("d", DiscreteMove.RIGHT),
)


def keys_to_action(pressed: Iterable[str]) -> int:
    """Map a set of held keys to a discrete action; FORWARD when none match."""
    held = {str(key).lower() for key in pressed}
    action = DiscreteMove.FORWARD
    for key, move in KEY_BINDINGS:
        if key in held:
            action = move
    return int(action)


@dataclass
class KeyboardActionSource:
    """Policy-compatible source of discrete actions driven by held keys."""

    key_source: Optional[Callable[[], Iterable[str]]] = None

    def __post_init__(self) -> None:
        self._action_space = gym.spaces.Discrete(len(DiscreteMove))
        self._pressed: frozenset = frozenset()

    @property
    def action_space(self) -> gym.Space:
        return self._action_space

    def set_pressed(self, keys: Iterable[str]) -> None:
        self._pressed = frozenset(keys)

    def reset(self, *, seed: int | None = None) -> None:
        self._pressed = frozenset()

    def select_action(self, observation: Any, *, explore: bool = False) -> int:
        if self.key_source is not None:
            self._pressed = frozenset(self.key_source())
        return keys_to_action(self._pressed)
