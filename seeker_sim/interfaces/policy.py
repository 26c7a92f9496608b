"""
Action source protocol for driving the seeker.

A trained network, the scripted greedy pursuer, a random baseline and the
keyboard adapter all plug into ``run_episode`` through this one seam.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import gymnasium as gym

from .action import ActionType
from .observation import ObservationType


@runtime_checkable
class Policy(Protocol):
    """Maps a seeker observation to the next action.

    The runner checks ``action_space`` against the environment before the
    first step, calls ``reset(seed=...)`` at the start of every episode and
    ``select_action`` once per step with the observation returned by the
    previous ``reset``/``step``.

    Sources that need no episode state (the greedy pursuer) treat ``reset``
    as a no-op; the random baseline reseeds its space there. ``explore``
    asks a learned source to sample instead of acting greedily; scripted
    sources ignore it.
    """

    @property
    def action_space(self) -> gym.Space:
        """Discrete(4) or Box(-1, 1, (2,)), matching the environment's kind."""

    def reset(self, *, seed: int | None = None) -> None:
        """Prepare for a new episode."""

    def select_action(
        self, observation: ObservationType, *, explore: bool = True
    ) -> ActionType:
        """Return an action for ``observation`` (4 or 6 relative-target features)."""
