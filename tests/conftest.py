"""
Shared fixtures for the seeker_sim test suite.
"""

import logging

import pytest

from seeker_sim.config import SimulationConfig
from seeker_sim.core.constants import TESTING_SEEDS
from seeker_sim.core.geometry import Pose
from seeker_sim.envs import SeekerEnv
from seeker_sim.host import KinematicWorld

TEST_SEEDS = TESTING_SEEDS


@pytest.fixture
def default_config() -> SimulationConfig:
    return SimulationConfig()


@pytest.fixture
def scenario_config() -> SimulationConfig:
    """Arena with half-size 5, 2 u/s movement and 0.8 success radius."""
    return SimulationConfig(
        arena_half_size=5.0,
        spawn_half_size=None,
        success_distance=0.8,
        move_speed=2.0,
        dt=0.02,
        max_steps=500,
    )


@pytest.fixture
def world() -> KinematicWorld:
    return KinematicWorld(seeker=Pose(), target=Pose(z=3.0))


@pytest.fixture
def env(default_config):
    environment = SeekerEnv(default_config)
    yield environment
    environment.close()


@pytest.fixture
def placed_env(scenario_config, world):
    """Environment on an in-memory world; pass poses via reset options to place them."""
    environment = SeekerEnv(scenario_config, world=world)
    yield environment
    environment.close()


@pytest.fixture
def seeker_log(caplog):
    """Capture seeker_sim records at DEBUG and above."""
    caplog.set_level(logging.DEBUG, logger="seeker_sim")
    return caplog
