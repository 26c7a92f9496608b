"""
Contract: SeekerEnv episode state machine.

    IDLE --reset()--> ACTIVE --step()--> {ACTIVE, TERMINAL}
    TERMINAL --reset()--> ACTIVE
    * --configure()/close()--> IDLE
"""

import numpy as np
import pytest

from seeker_sim.config import SimulationConfig
from seeker_sim.core.enums import ActionSpaceKind, EpisodePhase
from seeker_sim.core.geometry import Pose
from seeker_sim.envs import SeekerEnv
from seeker_sim.host import KinematicWorld
from seeker_sim.observations import RelativeTargetSensor
from seeker_sim.utils.exceptions import ConfigError, InvalidState

FORWARD = 0


@pytest.fixture
def short_env():
    environment = SeekerEnv(SimulationConfig(max_steps=3), seed=0)
    yield environment
    environment.close()


def _far_apart():
    return {"seeker_pose": Pose(x=-3.0, z=-3.0), "target_pose": Pose(x=3.0, z=3.0)}


class TestInitialState:
    def test_starts_idle(self, env):
        assert env.phase is EpisodePhase.IDLE
        assert env.episode_state is None
        assert env.episode_count == 0

    def test_step_before_reset_raises(self, env):
        with pytest.raises(InvalidState, match="reset"):
            env.step(FORWARD)

    def test_invalid_state_carries_phase(self, env):
        with pytest.raises(InvalidState) as excinfo:
            env.step(FORWARD)
        assert excinfo.value.current_phase == "idle"
        assert excinfo.value.context["current_phase"] == "idle"


class TestResetTransitions:
    def test_reset_activates(self, env):
        obs, info = env.reset(seed=1)
        assert env.phase is EpisodePhase.ACTIVE
        assert env.observation_space.contains(obs)
        assert info["step_count"] == 0
        assert info["seed"] == 1

    def test_reset_zeroes_counter(self, env):
        env.reset(seed=1)
        env.step(FORWARD)
        env.step(FORWARD)
        _, info = env.reset(seed=2)
        assert info["step_count"] == 0
        assert env.episode_state.step_count == 0
        assert env.episode_state.cumulative_reward == 0.0

    def test_reset_mid_episode_is_allowed(self, env):
        env.reset(seed=1)
        env.step(FORWARD)
        env.reset()
        assert env.phase is EpisodePhase.ACTIVE
        assert env.episode_count == 2

    def test_reset_initializes_last_distance(self, placed_env):
        _, info = placed_env.reset(options=_far_apart())
        assert info["distance"] == pytest.approx(np.hypot(6.0, 6.0))
        assert placed_env.episode_state.last_distance == info["distance"]

    @pytest.mark.parametrize("seed", [-1, 1.5, "7", True])
    def test_invalid_seed_rejected(self, env, seed):
        with pytest.raises(ValueError):
            env.reset(seed=seed)

    def test_pose_options_accept_mappings(self, placed_env):
        _, info = placed_env.reset(
            options={"seeker_pose": {"x": 1.0, "z": 2.0}, "target_pose": {"x": -1.0}}
        )
        assert info["seeker_pose"]["x"] == 1.0
        assert info["target_pose"]["x"] == -1.0


class TestTerminalTransitions:
    def test_timeout_enters_terminal(self, short_env):
        short_env.reset(seed=0, options=_far_apart())
        for _ in range(2):
            _, _, terminated, truncated, _ = short_env.step(FORWARD)
            assert not (terminated or truncated)
        _, _, terminated, truncated, info = short_env.step(FORWARD)
        assert truncated and not terminated
        assert info["termination_reason"] == "timeout"
        assert short_env.phase is EpisodePhase.TERMINAL

    def test_step_after_terminal_raises(self, short_env):
        short_env.reset(seed=0, options=_far_apart())
        for _ in range(3):
            short_env.step(FORWARD)
        with pytest.raises(InvalidState, match="over"):
            short_env.step(FORWARD)

    def test_reset_after_terminal(self, short_env):
        short_env.reset(seed=0, options=_far_apart())
        for _ in range(3):
            short_env.step(FORWARD)
        short_env.reset(seed=0)
        assert short_env.phase is EpisodePhase.ACTIVE
        short_env.step(FORWARD)


class TestConfigureAndClose:
    def test_configure_returns_to_idle(self, env):
        env.reset(seed=1)
        env.configure(SimulationConfig(action_space="continuous_2"))
        assert env.phase is EpisodePhase.IDLE
        assert env.config.action_space is ActionSpaceKind.CONTINUOUS_2
        assert env.action_space.shape == (2,)
        with pytest.raises(InvalidState):
            env.step(np.zeros(2, dtype=np.float32))

    def test_configure_accepts_mapping(self, env):
        env.configure({"max_steps": 7})
        assert env.config.max_steps == 7

    def test_invalid_configure_keeps_config(self, env):
        before = env.config
        with pytest.raises(ConfigError):
            env.configure({"success_distance": -1.0})
        assert env.config is before

    def test_configure_keeps_injected_components(self, default_config):
        world = KinematicWorld(target=Pose(z=2.0))
        sensor = RelativeTargetSensor(half_size=5.0, layout="basic")
        environment = SeekerEnv(default_config, world=world, observation_model=sensor)
        built_reward = environment._reward_function
        environment.configure(default_config.with_overrides(time_penalty=0.01))
        assert environment.world is world
        assert environment._observation_model is sensor
        assert environment.observation_space.shape == (4,)
        assert environment._reward_function is not built_reward
        assert environment._reward_function.time_penalty == 0.01

    def test_close_clears_pending_contacts(self, placed_env, world):
        placed_env.reset(options=_far_apart())
        world.raise_contact()
        placed_env.close()
        assert world.consume_contact() is False
        placed_env.reset(options=_far_apart())
        _, _, terminated, _, _ = placed_env.step(FORWARD)
        assert not terminated

    def test_close_is_idempotent(self, env):
        env.reset(seed=1)
        env.close()
        env.close()
        assert env.phase is EpisodePhase.IDLE
        with pytest.raises(InvalidState):
            env.step(FORWARD)

    def test_reset_after_close(self, env):
        env.reset(seed=1)
        env.close()
        env.reset(seed=1)
        assert env.phase is EpisodePhase.ACTIVE


class TestConstruction:
    def test_invalid_config_raises_config_error(self):
        with pytest.raises(ConfigError):
            SeekerEnv(arena_half_size=0.0)

    def test_unknown_option_raises_config_error(self):
        with pytest.raises(ConfigError):
            SeekerEnv(warp_speed=9.0)

    def test_world_without_api_rejected(self):
        with pytest.raises(TypeError):
            SeekerEnv(world=object())

    def test_config_type_checked(self):
        with pytest.raises(TypeError):
            SeekerEnv(config=42)

    def test_overrides_applied(self):
        environment = SeekerEnv(SimulationConfig(), max_steps=12)
        assert environment.config.max_steps == 12
