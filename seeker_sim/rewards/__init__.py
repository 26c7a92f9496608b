"""Reward functions."""

from .distance_shaping import DistanceShapingReward, RewardBreakdown

__all__ = ["DistanceShapingReward", "RewardBreakdown"]
