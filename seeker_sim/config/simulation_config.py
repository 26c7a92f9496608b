"""
Pydantic configuration model for the pursuit simulation.

The configuration is an immutable value holder validated once at
construction. Any violation, whether a field constraint or a cross-field
invariant, surfaces as :class:`~seeker_sim.utils.exceptions.ConfigError`
so that a runnable environment is never built from a bad configuration.

Example:
    >>> from seeker_sim.config import SimulationConfig
    >>> config = SimulationConfig(action_space="continuous_2", max_steps=300)
    >>> config.effective_spawn_half_size
    4.0
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..core import constants
from ..core.enums import ActionSpaceKind, IntegrationMode, ObservationLayout
from ..utils.exceptions import ConfigError

logger = logging.getLogger(__name__)

__all__ = ["SimulationConfig", "load_config", "get_default_config"]


class SimulationConfig(BaseModel):
    """Validated, immutable simulation parameters.

    Attributes:
        arena_half_size: Half-extent of the square arena; also normalizes
            relative observations
        spawn_half_size: Half-extent of the spawn square (None = arena)
        move_speed: Seeker translation speed in units/second
        rotate_speed: Turn rate in degrees/second (turn integration only)
        dt: Simulated seconds per step
        success_distance: Planar distance at which the target counts as reached
        max_steps: Step count at which an episode times out
        time_penalty: Magnitude of the constant per-step penalty
        distance_reward_scale: Multiplier on the per-step distance reduction
        distance_reward_min: Lower clamp of the shaped reward
        distance_reward_max: Upper clamp of the shaped reward
        terminal_bonus: Reward added when the target is reached
        action_space: 'discrete_4' or 'continuous_2'
        integration_mode: 'strafe' or 'turn'
        observation_layout: 'basic' (4 features) or 'extended' (6 features)
        min_spawn_separation: Minimum seeker/target distance at reset
        spawn_max_attempts: Target redraws before the corner fallback
        clamp_to_arena: Clamp integrated seeker positions to the arena square
    """

    # Arena
    arena_half_size: float = Field(
        default=constants.DEFAULT_ARENA_HALF_SIZE,
        gt=0,
        description="Half-extent of the square arena",
    )
    spawn_half_size: Optional[float] = Field(
        default=constants.DEFAULT_SPAWN_HALF_SIZE,
        gt=0,
        description="Half-extent of the spawn square, None = arena half-size",
    )

    # Kinematics
    move_speed: float = Field(default=constants.DEFAULT_MOVE_SPEED, ge=0)
    rotate_speed: float = Field(default=constants.DEFAULT_ROTATE_SPEED, ge=0)
    dt: float = Field(default=constants.DEFAULT_DT, gt=0)
    integration_mode: IntegrationMode = IntegrationMode.STRAFE
    clamp_to_arena: bool = False

    # Episode
    success_distance: float = Field(default=constants.DEFAULT_SUCCESS_DISTANCE, gt=0)
    max_steps: int = Field(default=constants.DEFAULT_MAX_STEPS, ge=1)

    # Reward
    time_penalty: float = Field(default=constants.DEFAULT_TIME_PENALTY, ge=0)
    distance_reward_scale: float = Field(
        default=constants.DEFAULT_DISTANCE_REWARD_SCALE
    )
    distance_reward_min: float = constants.DEFAULT_DISTANCE_REWARD_MIN
    distance_reward_max: float = constants.DEFAULT_DISTANCE_REWARD_MAX
    terminal_bonus: float = Field(default=constants.DEFAULT_TERMINAL_BONUS, ge=0)

    # Interface
    action_space: ActionSpaceKind = ActionSpaceKind.DISCRETE_4
    observation_layout: ObservationLayout = ObservationLayout.EXTENDED

    # Spawning
    min_spawn_separation: float = Field(
        default=constants.DEFAULT_MIN_SPAWN_SEPARATION, ge=0
    )
    spawn_max_attempts: int = Field(default=constants.DEFAULT_SPAWN_MAX_ATTEMPTS, ge=1)

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise _to_config_error(exc) from exc

    @model_validator(mode="after")
    def _check_invariants(self) -> "SimulationConfig":
        if self.distance_reward_min > self.distance_reward_max:
            raise ValueError(
                "distance_reward_min must not exceed distance_reward_max, got "
                f"{self.distance_reward_min} > {self.distance_reward_max}"
            )
        if (
            self.spawn_half_size is not None
            and self.spawn_half_size > self.arena_half_size
        ):
            raise ValueError(
                f"spawn_half_size {self.spawn_half_size} exceeds arena_half_size "
                f"{self.arena_half_size}"
            )
        spawn_diameter = 2.0 * self.effective_spawn_half_size
        if self.min_spawn_separation >= spawn_diameter:
            raise ValueError(
                f"min_spawn_separation {self.min_spawn_separation} must be smaller "
                f"than the spawn square diameter {spawn_diameter}"
            )
        return self

    @property
    def effective_spawn_half_size(self) -> float:
        if self.spawn_half_size is None:
            return float(self.arena_half_size)
        return float(self.spawn_half_size)

    @property
    def observation_size(self) -> int:
        return self.observation_layout.size

    @classmethod
    def create(cls, **overrides: Any) -> "SimulationConfig":
        """Build a config from keyword overrides on top of the defaults."""
        return cls(**overrides)

    def with_overrides(self, **overrides: Any) -> "SimulationConfig":
        """Return a new validated config with ``overrides`` applied."""
        data = self.to_dict()
        data.update(overrides)
        return SimulationConfig(**data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


def _to_config_error(exc: ValidationError) -> ConfigError:
    errors = exc.errors()
    first = errors[0] if errors else {}
    loc = first.get("loc") or ()
    parameter = str(loc[0]) if loc else None
    message = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ())) or 'config'}: {err.get('msg')}"
        for err in errors
    )
    return ConfigError(
        f"Invalid simulation configuration: {message}",
        parameter_name=parameter,
        parameter_value=first.get("input") if parameter else None,
        context={"error_count": len(errors)},
    )


def load_config(path: Union[str, Path]) -> SimulationConfig:
    """Load a :class:`SimulationConfig` from a YAML mapping.

    A top-level ``simulation:`` key is unwrapped if present, so the same file
    can carry other sections.
    """
    config_path = Path(path)
    try:
        with config_path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {config_path}: {exc}",
            context={"path": str(config_path)},
        ) from exc
    except yaml.YAMLError as exc:
        raise ConfigError(
            f"Malformed YAML in {config_path}: {exc}",
            context={"path": str(config_path)},
        ) from exc

    if isinstance(data, dict) and isinstance(data.get("simulation"), dict):
        data = data["simulation"]
    if not isinstance(data, dict):
        raise ConfigError(
            f"Configuration file {config_path} must contain a mapping, "
            f"got {type(data).__name__}",
            context={"path": str(config_path)},
        )

    logger.debug("Loaded configuration from %s", config_path)
    return SimulationConfig(**data)


def get_default_config() -> SimulationConfig:
    """Return the default configuration."""
    return SimulationConfig()
