"""Tests for the seeker-sim command line entry point."""

import logging
import sys

import pytest
import yaml
from loguru import logger as loguru_logger

from seeker_sim.cli.main import _build_config, _parse_args, main


@pytest.fixture(autouse=True)
def restore_logging():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers = handlers
    logging.root.setLevel(level)
    loguru_logger.remove()
    loguru_logger.add(sys.stderr)


def test_main_runs_episodes(tmp_path):
    log_file = tmp_path / "run.log"
    code = main(
        ["--episodes", "2", "--seed", "7", "--log-level", "INFO", "--log-file", str(log_file)]
    )
    assert code == 0
    loguru_logger.remove()
    content = log_file.read_text()
    assert "episode=0 seed=7" in content
    assert "episode=1 seed=8" in content
    assert "summary: episodes=2" in content


@pytest.mark.parametrize(
    "extra",
    [
        ["--policy", "random", "--max-steps", "20"],
        ["--action-space", "continuous_2", "--integration", "turn"],
    ],
)
def test_main_variants(extra):
    assert main(["--episodes", "1", "--log-level", "WARNING", *extra]) == 0


def test_config_file_and_overrides(tmp_path):
    path = tmp_path / "sim.yaml"
    path.write_text(yaml.safe_dump({"simulation": {"move_speed": 3.0, "max_steps": 40}}))
    config = _build_config(_parse_args(["--config", str(path), "--max-steps", "15"]))
    assert config.move_speed == 3.0
    assert config.max_steps == 15


def test_invalid_config_exits(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text(yaml.safe_dump({"success_distance": -1.0}))
    with pytest.raises(SystemExit, match="Invalid configuration"):
        main(["--config", str(path), "--log-level", "WARNING"])


def test_missing_config_file_exits(tmp_path):
    with pytest.raises(SystemExit, match="Invalid configuration"):
        main(["--config", str(tmp_path / "absent.yaml"), "--log-level", "WARNING"])


def test_invalid_episode_count_exits():
    with pytest.raises(SystemExit):
        main(["--episodes", "0"])


def test_invalid_log_level_exits():
    with pytest.raises(SystemExit):
        main(["--log-level", "chatty"])
