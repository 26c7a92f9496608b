"""Runner package: UI-agnostic orchestration utilities.

Exposes streaming and episode-level helpers for stepping Gymnasium environments
with optional callbacks. Intended for reuse by the CLI, notebooks and training
scripts.
"""

from .runner import EpisodeResult, StepEvent, run_episode, stream

__all__ = ["EpisodeResult", "StepEvent", "run_episode", "stream"]
