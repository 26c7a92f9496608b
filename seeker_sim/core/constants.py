"""Default parameter values for seeker_sim.

Values follow the stock enemy/agent assets of the pursuit scene: a 2 m/s
seeker turning at 120 deg/s that succeeds within 0.8 m of the target.
"""

import numpy as np

PACKAGE_NAME = "seeker_sim"
ENVIRONMENT_ID = "SeekerSim-Pursuit-v0"

# Arena
DEFAULT_ARENA_HALF_SIZE = 5.0
DEFAULT_SPAWN_HALF_SIZE = 4.0
DEFAULT_MIN_SPAWN_SEPARATION = 1.0
DEFAULT_SPAWN_MAX_ATTEMPTS = 100

# Kinematics
DEFAULT_MOVE_SPEED = 2.0
DEFAULT_ROTATE_SPEED = 120.0  # degrees per second
DEFAULT_DT = 0.02

# Episode
DEFAULT_SUCCESS_DISTANCE = 0.8
DEFAULT_MAX_STEPS = 500

# Reward
DEFAULT_TIME_PENALTY = 0.001
DEFAULT_DISTANCE_REWARD_SCALE = 0.25
DEFAULT_DISTANCE_REWARD_MIN = -0.05
DEFAULT_DISTANCE_REWARD_MAX = 0.05
DEFAULT_TERMINAL_BONUS = 1.0

OBSERVATION_DTYPE = np.float32
BASIC_OBSERVATION_SIZE = 4
EXTENDED_OBSERVATION_SIZE = 6

TESTING_SEEDS = (42, 123, 456, 789, 999)

__all__ = [
    "PACKAGE_NAME",
    "ENVIRONMENT_ID",
    "DEFAULT_ARENA_HALF_SIZE",
    "DEFAULT_SPAWN_HALF_SIZE",
    "DEFAULT_MIN_SPAWN_SEPARATION",
    "DEFAULT_SPAWN_MAX_ATTEMPTS",
    "DEFAULT_MOVE_SPEED",
    "DEFAULT_ROTATE_SPEED",
    "DEFAULT_DT",
    "DEFAULT_SUCCESS_DISTANCE",
    "DEFAULT_MAX_STEPS",
    "DEFAULT_TIME_PENALTY",
    "DEFAULT_DISTANCE_REWARD_SCALE",
    "DEFAULT_DISTANCE_REWARD_MIN",
    "DEFAULT_DISTANCE_REWARD_MAX",
    "DEFAULT_TERMINAL_BONUS",
    "OBSERVATION_DTYPE",
    "BASIC_OBSERVATION_SIZE",
    "EXTENDED_OBSERVATION_SIZE",
    "TESTING_SEEDS",
]
