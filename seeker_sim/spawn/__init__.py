from .randomizer import SpawnRandomizer, SpawnResult

__all__ = ["SpawnRandomizer", "SpawnResult"]
