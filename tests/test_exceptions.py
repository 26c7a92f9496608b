"""Tests for the exception hierarchy."""

import logging

import pytest

from seeker_sim.utils.exceptions import (
    ConfigError,
    ErrorSeverity,
    InvalidAction,
    InvalidState,
    MissingTarget,
    SeekerSimError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc_type, builtin",
        [
            (ConfigError, ValueError),
            (InvalidAction, ValueError),
            (InvalidState, RuntimeError),
            (MissingTarget, LookupError),
        ],
    )
    def test_subclasses_share_base_and_builtin(self, exc_type, builtin):
        assert issubclass(exc_type, SeekerSimError)
        assert issubclass(exc_type, builtin)

    def test_default_severities(self):
        assert ConfigError("x").severity is ErrorSeverity.CRITICAL
        assert InvalidAction("x").severity is ErrorSeverity.MEDIUM
        assert InvalidState("x").severity is ErrorSeverity.HIGH
        assert MissingTarget().severity is ErrorSeverity.LOW

    def test_severity_by_name(self):
        err = SeekerSimError("boom", severity="high")
        assert err.severity is ErrorSeverity.HIGH

    def test_unknown_severity_name_falls_back_to_default(self):
        err = SeekerSimError("boom", severity="catastrophic")
        assert err.severity is SeekerSimError.default_severity


class TestErrorDetails:
    def test_details_include_context_and_recovery(self):
        err = ConfigError("bad arena", parameter_name="arena_half_size")
        details = err.get_error_details()
        assert details["exception_type"] == "ConfigError"
        assert details["severity"] == "CRITICAL"
        assert details["context"]["parameter_name"] == "arena_half_size"
        assert "arena_half_size" in details["recovery_suggestion"]

    def test_add_context_rejects_empty_key(self):
        err = SeekerSimError("x")
        with pytest.raises(ValueError):
            err.add_context("", 1)

    def test_recovery_suggestion_truncated(self):
        err = SeekerSimError("x")
        err.set_recovery_suggestion("a" * 1000)
        assert len(err.recovery_suggestion) == 500
        assert err.recovery_suggestion.endswith("...")

    def test_invalid_state_records_phase(self):
        err = InvalidState("nope", current_phase="idle")
        assert err.context["current_phase"] == "idle"

    def test_escalation(self):
        assert ErrorSeverity.HIGH.should_escalate()
        assert not ErrorSeverity.LOW.should_escalate()


class TestLogError:
    def test_logs_once_at_severity_level(self, caplog):
        caplog.set_level(logging.DEBUG)
        logger = logging.getLogger("seeker_sim.tests.exceptions")
        err = InvalidAction("bad action", action=7)
        err.log_error(logger)
        err.log_error(logger)

        records = [r for r in caplog.records if "bad action" in r.getMessage()]
        assert len(records) == 1
        assert records[0].levelno == logging.WARNING
        assert err.logged

    def test_critical_for_config_error(self, caplog):
        caplog.set_level(logging.DEBUG)
        logger = logging.getLogger("seeker_sim.tests.exceptions")
        ConfigError("broken").log_error(logger)
        assert caplog.records[-1].levelno == logging.CRITICAL
