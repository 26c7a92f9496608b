"""Observation models."""

from .relative_target import FEATURE_NAMES, RelativeTargetSensor

__all__ = ["RelativeTargetSensor", "FEATURE_NAMES"]
