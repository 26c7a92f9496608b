from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import gymnasium as gym


@dataclass
class RandomPolicy:
    """Uniformly samples the action space; a baseline for benchmarks."""

    space: gym.Space
    seed: Optional[int] = field(default=None)

    def __post_init__(self) -> None:
        if self.seed is not None:
            self.space.seed(self.seed)

    @property
    def action_space(self) -> gym.Space:
        return self.space

    def reset(self, *, seed: int | None = None) -> None:
        if seed is not None:
            self.space.seed(seed)

    def select_action(self, observation: Any, *, explore: bool = True) -> Any:
        return self.space.sample()
