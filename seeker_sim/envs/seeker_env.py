"""
Seeker/target pursuit environment using dependency injection.

The environment owns the per-episode state machine and delegates every
other concern to injected components:

Architecture:
    SeekerEnv → ActionDecoder      (raw action → MovementIntent)
              → MovementIntegrator (intent → next seeker pose)
              → RewardFunction     (distances → RewardBreakdown)
              → ObservationModel   (poses → feature vector)
              → SpawnRandomizer    (reset poses)
              → host world         (pose provider, movement sink, contacts)

State Machine:
    IDLE --reset()--> ACTIVE --step()--> {ACTIVE, TERMINAL}
    TERMINAL --reset()--> ACTIVE
    * --configure()/close()--> IDLE
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Union

import gymnasium as gym
import numpy as np

from ..actions import create_action_decoder
from ..config import SimulationConfig
from ..core.enums import EpisodePhase, TerminationReason
from ..core.geometry import Pose, planar_distance
from ..core.kinematics import MovementIntegrator, MovementIntent
from ..core.state import EntityState, EpisodeState
from ..host import KinematicWorld
from ..interfaces.host import MovementSink, PoseProvider
from ..observations import RelativeTargetSensor
from ..rewards import DistanceShapingReward
from ..spawn import SpawnRandomizer
from ..utils.exceptions import InvalidAction, InvalidState, MissingTarget

if TYPE_CHECKING:
    from ..interfaces import ActionDecoder, ObservationModel, RewardFunction

__all__ = ["SeekerEnv"]

logger = logging.getLogger(__name__)

ConfigLike = Union[SimulationConfig, Mapping[str, Any]]


class SeekerEnv(gym.Env):
    """
    Gymnasium environment for single seeker/target pursuit.

    Components default to the built-ins derived from ``config``; any of them
    may be injected instead. Injected components survive ``configure()``,
    built-in ones are rebuilt from the new configuration.

    Args:
        config: SimulationConfig or mapping of its fields (default config if
            None)
        world: Host world providing poses, a movement sink and optionally a
            contact signal (default: in-memory KinematicWorld with a target)
        action_decoder: Component decoding raw actions
        observation_model: Component producing observations
        reward_function: Component computing rewards
        integrator: Kinematic model advancing the seeker
        spawner: Reset pose sampler
        seed: Optional seed for the environment RNG
        **config_overrides: Field overrides applied on top of ``config``
            (this is how ``gym.make`` kwargs arrive)

    Raises:
        ConfigError: If the configuration is invalid
        TypeError: If the world lacks the pose provider or movement sink API
    """

    metadata = {"render_modes": []}

    def __init__(
        self,
        config: Optional[ConfigLike] = None,
        *,
        world: Optional[Any] = None,
        action_decoder: Optional[ActionDecoder] = None,
        observation_model: Optional[ObservationModel] = None,
        reward_function: Optional[RewardFunction] = None,
        integrator: Optional[MovementIntegrator] = None,
        spawner: Optional[SpawnRandomizer] = None,
        seed: Optional[int] = None,
        **config_overrides: Any,
    ):
        super().__init__()

        self._config = _coerce_config(config, config_overrides)

        if world is None:
            world = KinematicWorld(target=Pose())
        if not isinstance(world, PoseProvider) or not isinstance(world, MovementSink):
            raise TypeError(
                "world must provide seeker_pose/target_pose/has_target and "
                f"apply_seeker_pose/place_target, got {type(world).__name__}"
            )
        self._world = world

        self._injected: Dict[str, Any] = {
            "action_decoder": action_decoder,
            "observation_model": observation_model,
            "reward_function": reward_function,
            "integrator": integrator,
            "spawner": spawner,
        }
        self._build_components()

        self.render_mode = None
        self._episode: Optional[EpisodeState] = None
        self._episode_count = 0
        self._seeker_velocity: Optional[tuple[float, float]] = None
        self._seed: Optional[int] = None
        self._phase = EpisodePhase.IDLE
        self._handle_seed(seed)

        logger.info(
            "SeekerEnv initialized: action_space=%s, integration=%s, "
            "half_size=%s, max_steps=%s",
            self._config.action_space.value,
            self._config.integration_mode.value,
            self._config.arena_half_size,
            self._config.max_steps,
        )

    # ---- Public API ----

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def phase(self) -> EpisodePhase:
        return self._phase

    @property
    def world(self) -> Any:
        return self._world

    @property
    def episode_state(self) -> Optional[EpisodeState]:
        return self._episode

    @property
    def episode_count(self) -> int:
        return self._episode_count

    @property
    def seeker_state(self) -> EntityState:
        """Seeker pose with the planar velocity of the last step."""
        return EntityState(self._world.seeker_pose(), self._seeker_velocity)

    @property
    def target_state(self) -> Optional[EntityState]:
        if not self._world.has_target():
            return None
        return EntityState(self._world.target_pose())

    def configure(self, config: ConfigLike) -> None:
        """Swap in a new configuration and return to IDLE.

        Raises:
            ConfigError: If ``config`` is invalid; the current configuration
                is kept in that case
        """
        new_config = _coerce_config(config, {})
        self._config = new_config
        self._build_components()
        self._episode = None
        self._phase = EpisodePhase.IDLE
        logger.info(
            "SeekerEnv reconfigured: action_space=%s, integration=%s",
            new_config.action_space.value,
            new_config.integration_mode.value,
        )

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[dict] = None
    ) -> tuple[np.ndarray, dict]:
        """
        Begin a new episode. Valid in every phase.

        Args:
            seed: RNG seed for reproducibility
            options: Optional ``seeker_pose`` / ``target_pose`` (Pose or
                mapping of Pose fields) placed instead of the sampled poses

        Returns:
            observation: Initial observation
            info: Episode metadata
        """
        self._handle_seed(seed)
        options = dict(options or {})

        self._episode = EpisodeState()
        self._episode_count += 1

        spawn = self._spawner.sample(
            self._rng, self._world.seeker_pose(), self._current_target()
        )
        seeker, target = spawn.seeker, spawn.target
        if options.get("seeker_pose") is not None:
            seeker = _coerce_pose(options["seeker_pose"])
        if options.get("target_pose") is not None:
            target = _coerce_pose(options["target_pose"])

        self._seeker_velocity = None
        self._world.apply_seeker_pose(seeker)
        if target is not None:
            self._world.place_target(target)
        # Stale contacts from the previous episode must not end this one
        self._consume_contact()

        self._episode.last_distance = (
            None if target is None else planar_distance(seeker, target)
        )
        self._phase = EpisodePhase.ACTIVE

        observation = self._observe(seeker, target)
        info = self._build_info(seeker, target)
        info.update(
            {
                "seed": self._seed,
                "spawn_attempts": spawn.attempts,
                "spawn_fallback": spawn.used_fallback,
            }
        )

        logger.debug(
            "Episode %d reset: seeker=(%.3f, %.3f) target=%s",
            self._episode_count,
            seeker.x,
            seeker.z,
            "unbound" if target is None else f"({target.x:.3f}, {target.z:.3f})",
        )
        return observation, info

    def step(self, action: Any) -> tuple[np.ndarray, float, bool, bool, dict]:
        """
        Execute one action.

        Returns:
            observation: Next observation
            reward: Step reward (time + shaping + terminal)
            terminated: Target reached by proximity or contact
            truncated: Step limit reached without reaching the target
            info: Step metadata

        Raises:
            InvalidState: If called outside the ACTIVE phase
        """
        self._ensure_active()
        episode = self._episode

        intent, invalid_action = self._decode(action)

        previous = self._world.seeker_pose()
        seeker = self._integrator.integrate(previous, intent, self._config.dt)
        self._seeker_velocity = (
            (seeker.x - previous.x) / self._config.dt,
            (seeker.z - previous.z) / self._config.dt,
        )
        self._world.apply_seeker_pose(seeker)
        episode.increment_step()

        target = self._current_target()
        distance = None if target is None else planar_distance(seeker, target)
        reason = self._check_termination(distance)

        breakdown = self._reward_function.compute_reward(
            episode.last_distance,
            distance,
            reached=reason is not None and reason.is_success(),
        )
        reward = float(breakdown.total)
        episode.last_distance = distance
        episode.add_reward(reward)

        if reason is not None:
            self._finish_episode(reason)

        observation = self._observe(seeker, target)
        info = self._build_info(seeker, target)
        info.update(
            {
                "invalid_action": invalid_action,
                "reward_terms": breakdown.to_dict(),
            }
        )
        return observation, reward, episode.terminated, episode.truncated, info

    def close(self) -> None:
        """Drop the current episode and pending contacts, return to IDLE. Idempotent."""
        if self._phase is EpisodePhase.IDLE and self._episode is None:
            return
        clear = getattr(self._world, "clear_contacts", None)
        if callable(clear):
            clear()
        self._episode = None
        self._phase = EpisodePhase.IDLE
        logger.info("SeekerEnv closed after %d episodes", self._episode_count)

    # ---- Component helpers ----

    def _build_components(self) -> None:
        cfg = self._config
        injected = self._injected
        self._action_decoder = injected["action_decoder"] or create_action_decoder(
            cfg.action_space
        )
        self._observation_model = injected[
            "observation_model"
        ] or RelativeTargetSensor.from_config(cfg)
        self._reward_function = injected[
            "reward_function"
        ] or DistanceShapingReward.from_config(cfg)
        self._integrator = injected["integrator"] or MovementIntegrator.from_config(
            cfg
        )
        self._spawner = injected["spawner"] or SpawnRandomizer.from_config(cfg)

        self.action_space = self._action_decoder.action_space
        self.observation_space = self._observation_model.observation_space

    # ---- Episode helpers ----

    def _handle_seed(self, seed: Optional[int]) -> None:
        """Initialize RNG from seed or ensure RNG exists."""
        if seed is None:
            if not hasattr(self, "_rng"):
                self._rng = np.random.default_rng()
            return
        if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)) or seed < 0:
            raise ValueError(f"Seed must be non-negative int, got {seed!r}")
        self._seed = int(seed)
        self._rng = np.random.default_rng(self._seed)
        logger.debug("Environment seeded: %d", self._seed)

    def _ensure_active(self) -> None:
        if self._phase is EpisodePhase.IDLE:
            raise InvalidState(
                "Must call reset() before step()", current_phase=self._phase.value
            )
        if self._phase is EpisodePhase.TERMINAL:
            raise InvalidState(
                "Episode is over; call reset() before step()",
                current_phase=self._phase.value,
            )

    def _decode(self, action: Any) -> tuple[MovementIntent, bool]:
        try:
            return self._action_decoder.decode(action), False
        except InvalidAction as exc:
            exc.add_context("episode", self._episode_count)
            exc.add_context("step", self._episode.step_count)
            exc.log_error(logger)
            return MovementIntent.zero(), True

    def _current_target(self) -> Optional[Pose]:
        try:
            return self._world.target_pose()
        except MissingTarget as exc:
            if not self._episode.target_warning_emitted:
                self._episode.target_warning_emitted = True
                logger.warning(
                    "Episode %d: %s; emitting degraded observations",
                    self._episode_count,
                    exc.message,
                )
            return None

    def _consume_contact(self) -> bool:
        consume = getattr(self._world, "consume_contact", None)
        if not callable(consume):
            return False
        return bool(consume())

    def _check_termination(
        self, distance: Optional[float]
    ) -> Optional[TerminationReason]:
        """Termination in priority order: proximity, contact, step limit."""
        contact = self._consume_contact()
        if distance is not None and distance <= self._config.success_distance:
            return TerminationReason.SUCCESS
        if contact:
            return TerminationReason.COLLISION
        if self._episode.step_count >= self._config.max_steps:
            return TerminationReason.TIMEOUT
        return None

    def _finish_episode(self, reason: TerminationReason) -> None:
        self._episode.finish(reason)
        self._phase = EpisodePhase.TERMINAL
        if reason is TerminationReason.TIMEOUT:
            logger.info(
                "Episode %d truncated: max_steps=%d reached",
                self._episode_count,
                self._config.max_steps,
            )
        else:
            logger.info(
                "Episode %d terminated: target reached (%s) at step %d",
                self._episode_count,
                reason.value,
                self._episode.step_count,
            )

    def _observe(self, seeker: Pose, target: Optional[Pose]) -> np.ndarray:
        return self._observation_model.get_observation(
            self._build_env_state_dict(seeker, target)
        )

    def _build_env_state_dict(
        self, seeker: Pose, target: Optional[Pose]
    ) -> dict[str, Any]:
        return {
            "seeker": seeker,
            "target": target,
            "step_count": self._episode.step_count,
            "max_steps": self._config.max_steps,
        }

    def _build_info(self, seeker: Pose, target: Optional[Pose]) -> dict[str, Any]:
        episode = self._episode
        return {
            "episode": self._episode_count,
            "step_count": episode.step_count,
            "seeker_pose": seeker.to_dict(),
            "target_pose": None if target is None else target.to_dict(),
            "target_bound": target is not None,
            "distance": episode.last_distance,
            "termination_reason": (
                None
                if episode.termination_reason is None
                else episode.termination_reason.value
            ),
            "cumulative_reward": episode.cumulative_reward,
        }


def _coerce_config(
    config: Optional[ConfigLike], overrides: Mapping[str, Any]
) -> SimulationConfig:
    if config is None:
        return SimulationConfig(**overrides)
    if isinstance(config, SimulationConfig):
        return config.with_overrides(**overrides) if overrides else config
    if isinstance(config, Mapping):
        return SimulationConfig(**{**config, **overrides})
    raise TypeError(
        f"config must be SimulationConfig or mapping, got {type(config).__name__}"
    )


def _coerce_pose(value: Any) -> Pose:
    if isinstance(value, Pose):
        return value
    if isinstance(value, Mapping):
        return Pose(**value)
    raise TypeError(f"Pose option must be Pose or mapping, got {type(value).__name__}")
