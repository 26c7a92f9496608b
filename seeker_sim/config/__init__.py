"""Configuration package: validated simulation parameters and YAML loading."""

from .simulation_config import SimulationConfig, get_default_config, load_config

__all__ = ["SimulationConfig", "get_default_config", "load_config"]
