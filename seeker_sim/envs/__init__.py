"""
Environment package: the pursuit environment and its factories.

Usage Examples:
    env = make_env(action_space="continuous_2")
    obs, info = env.reset(seed=42)
"""

from .factory import create_seeker_environment, make_env, make_vector_env
from .seeker_env import SeekerEnv

__all__ = [
    "SeekerEnv",
    "create_seeker_environment",
    "make_env",
    "make_vector_env",
]
