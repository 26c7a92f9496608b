"""Tests for the loguru bootstrap."""

import logging
import sys

import pytest
from loguru import logger as loguru_logger

from seeker_sim.logging import InterceptHandler, get_logger, setup_logging


@pytest.fixture
def restore_logging():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers = handlers
    logging.root.setLevel(level)
    loguru_logger.remove()
    loguru_logger.add(sys.stderr)


def test_stdlib_records_reach_file_sink(tmp_path, restore_logging):
    log_file = tmp_path / "seeker.log"
    setup_logging(level="DEBUG", console=False, file_path=log_file)
    logging.getLogger("seeker_sim.test").info("pursuit started")
    loguru_logger.remove()
    assert "pursuit started" in log_file.read_text()


def test_level_filters_records(tmp_path, restore_logging):
    log_file = tmp_path / "seeker.log"
    setup_logging(level="WARNING", console=False, file_path=log_file)
    logging.getLogger("seeker_sim.test").info("quiet")
    logging.getLogger("seeker_sim.test").warning("loud")
    loguru_logger.remove()
    content = log_file.read_text()
    assert "loud" in content
    assert "quiet" not in content


def test_root_bridged_to_loguru(restore_logging):
    setup_logging(level="info", console=False)
    assert len(logging.root.handlers) == 1
    assert isinstance(logging.root.handlers[0], InterceptHandler)
    assert logging.root.level == logging.INFO


def test_unknown_level_rejected(restore_logging):
    with pytest.raises(ValueError, match="Unknown log level"):
        setup_logging(level="chatty")


def test_get_logger_is_loguru():
    assert get_logger() is loguru_logger
