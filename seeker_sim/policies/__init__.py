"""Action sources: scripted, random and manual policies."""

from .greedy_pursuit import GreedyPursuitPolicy
from .manual import KeyboardActionSource, keys_to_action
from .random_policy import RandomPolicy

__all__ = [
    "GreedyPursuitPolicy",
    "RandomPolicy",
    "KeyboardActionSource",
    "keys_to_action",
]
