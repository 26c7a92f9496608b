from __future__ import annotations

import argparse
import logging
from typing import Optional

from ..config import SimulationConfig, get_default_config, load_config
from ..envs import SeekerEnv
from ..logging import setup_logging
from ..policies import GreedyPursuitPolicy, RandomPolicy
from ..runner import EpisodeResult, run_episode
from ..utils.exceptions import ConfigError

logger = logging.getLogger("seeker_sim.cli")


def _parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="seeker-sim",
        description="Run seeker/target pursuit episodes with a scripted policy",
    )
    p.add_argument("--config", type=str, default=None, help="YAML configuration file")
    p.add_argument("--episodes", type=int, default=1, help="Number of episodes to run")
    p.add_argument("--seed", type=int, default=123, help="Base seed for first episode")
    p.add_argument(
        "--policy",
        type=str,
        choices=["greedy", "random"],
        default="greedy",
        help="Action source driving the seeker",
    )
    p.add_argument(
        "--action-space",
        type=str,
        choices=["discrete_4", "continuous_2"],
        default=None,
        help="Override the configured action space",
    )
    p.add_argument(
        "--integration",
        type=str,
        choices=["strafe", "turn"],
        default=None,
        help="Override the configured integration mode",
    )
    p.add_argument(
        "--max-steps", type=int, default=None, help="Max steps per episode (override)"
    )
    p.add_argument("--log-level", type=str, default="INFO", help="Logging level")
    p.add_argument("--log-file", type=str, default=None, help="Optional log file sink")
    return p.parse_args(argv)


def _build_config(args: argparse.Namespace) -> SimulationConfig:
    config = load_config(args.config) if args.config else get_default_config()
    overrides = {}
    if args.action_space is not None:
        overrides["action_space"] = args.action_space
    if args.integration is not None:
        overrides["integration_mode"] = args.integration
    if args.max_steps is not None:
        overrides["max_steps"] = args.max_steps
    return config.with_overrides(**overrides) if overrides else config


def _build_policy(name: str, env: SeekerEnv, seed: int):
    if name == "random":
        return RandomPolicy(env.action_space, seed=seed)
    return GreedyPursuitPolicy.for_config(env.config)


def _summarize(results: list[EpisodeResult]) -> dict:
    n = len(results)
    successes = sum(1 for r in results if r.success)
    return {
        "episodes": n,
        "success_rate": successes / n if n else 0.0,
        "mean_steps": sum(r.steps for r in results) / n if n else 0.0,
        "mean_reward": sum(r.total_reward for r in results) / n if n else 0.0,
    }


def main(argv: Optional[list[str]] = None) -> int:
    """Run episodes and log a per-episode and aggregate summary."""
    args = _parse_args(argv)
    if args.episodes < 1:
        raise SystemExit("--episodes must be >= 1")
    try:
        setup_logging(level=args.log_level, file_path=args.log_file)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    try:
        config = _build_config(args)
    except ConfigError as exc:
        exc.log_error(logger)
        raise SystemExit(f"Invalid configuration: {exc.message}") from exc

    env = SeekerEnv(config)
    policy = _build_policy(args.policy, env, args.seed)
    results = []
    try:
        for i in range(args.episodes):
            result = run_episode(env, policy, seed=args.seed + i)
            results.append(result)
            logger.info(
                "episode=%d seed=%d steps=%d reward=%.4f outcome=%s",
                i,
                args.seed + i,
                result.steps,
                result.total_reward,
                result.termination_reason,
            )
    finally:
        env.close()

    summary = _summarize(results)
    logger.info(
        "summary: episodes=%d success_rate=%.3f mean_steps=%.1f mean_reward=%.4f",
        summary["episodes"],
        summary["success_rate"],
        summary["mean_steps"],
        summary["mean_reward"],
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
