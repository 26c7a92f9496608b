"""
Reward Function Protocol Definition.
"""

from typing import TYPE_CHECKING, Any, Dict, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..rewards.distance_shaping import RewardBreakdown


@runtime_checkable
class RewardFunction(Protocol):
    """Protocol defining the reward function interface.

    Universal Properties:
        1. Determinism: Same inputs → same reward
        2. Purity: No side effects
        3. Finiteness: Reward is always finite

    Type Signature:
        RewardFunction: (prev_distance, next_distance, reached) → RewardBreakdown
    """

    def compute_reward(
        self,
        prev_distance: Optional[float],
        next_distance: Optional[float],
        *,
        reached: bool = False,
    ) -> "RewardBreakdown":
        """Compute the reward for one step.

        Args:
            prev_distance: Seeker/target distance before the step, None if
                no target was bound
            next_distance: Distance after the step, None if no target is bound
            reached: True when the reached-target event fired this step

        Returns:
            RewardBreakdown whose ``total`` is the scalar step reward
        """
        ...

    def get_metadata(self) -> Dict[str, Any]:
        """Return reward function metadata ('type', 'parameters')."""
        ...
