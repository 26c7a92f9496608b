"""
Exception hierarchy for seeker_sim.

All package errors derive from :class:`SeekerSimError`, which carries a
severity level, an optional context mapping and a recovery suggestion so that
callers can log structured details without string parsing.

Taxonomy:
    ConfigError      invalid configuration, fatal at construction
    InvalidAction    malformed/out-of-range action, recovered as a no-op step
    InvalidState     step() outside an active episode, fatal to the caller
    MissingTarget    no target bound, recovered with degraded observations
"""

import enum
import logging
import time
import uuid
from typing import Any, Dict, Optional, Union

RECOVERY_SUGGESTION_MAX_LENGTH = 500

__all__ = [
    "ErrorSeverity",
    "SeekerSimError",
    "ConfigError",
    "InvalidAction",
    "InvalidState",
    "MissingTarget",
]


class ErrorSeverity(enum.IntEnum):
    """Severity levels used to pick a log level and escalation policy."""

    LOW = 1  # Recovered silently apart from a log record
    MEDIUM = 2  # Recovered with a fallback value
    HIGH = 3  # Caller usage bug
    CRITICAL = 4  # Cannot build a runnable environment

    def get_description(self) -> str:
        descriptions = {
            ErrorSeverity.LOW: "Minor issue with deterministic fallback",
            ErrorSeverity.MEDIUM: "Recoverable error with fallback available",
            ErrorSeverity.HIGH: "Usage error requiring caller attention",
            ErrorSeverity.CRITICAL: "Configuration failure preventing construction",
        }
        return descriptions.get(self, "Unknown severity level")

    def should_escalate(self) -> bool:
        return self in (ErrorSeverity.HIGH, ErrorSeverity.CRITICAL)


class SeekerSimError(Exception):
    """Base exception for all seeker_sim errors.

    Args:
        message: Primary error description
        context: Optional mapping with debugging details
        severity: ErrorSeverity or its name
    """

    default_severity = ErrorSeverity.MEDIUM

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        severity: Optional[Union[ErrorSeverity, str]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = dict(context) if context else {}
        if severity is None:
            self.severity = self.default_severity
        elif isinstance(severity, str):
            try:
                self.severity = ErrorSeverity[severity.upper()]
            except KeyError:
                self.severity = self.default_severity
        else:
            self.severity = severity
        self.timestamp = time.time()
        self.error_id = str(uuid.uuid4())
        self.recovery_suggestion: Optional[str] = None
        self.logged = False

    def set_recovery_suggestion(self, suggestion: str) -> None:
        if len(suggestion) > RECOVERY_SUGGESTION_MAX_LENGTH:
            suggestion = suggestion[: RECOVERY_SUGGESTION_MAX_LENGTH - 3] + "..."
        self.recovery_suggestion = suggestion

    def add_context(self, key: str, value: Any) -> None:
        if not key or not isinstance(key, str):
            raise ValueError("Context key must be a non-empty string")
        self.context[key] = value

    def get_error_details(self) -> Dict[str, Any]:
        """Return a JSON-friendly dictionary describing the error."""
        details: Dict[str, Any] = {
            "error_id": self.error_id,
            "message": self.message,
            "timestamp": self.timestamp,
            "severity": self.severity.name,
            "severity_description": self.severity.get_description(),
            "exception_type": self.__class__.__name__,
        }
        if self.context:
            details["context"] = dict(self.context)
        if self.recovery_suggestion:
            details["recovery_suggestion"] = self.recovery_suggestion
        return details

    def log_error(self, logger: Optional[logging.Logger] = None) -> None:
        """Log once at a level derived from severity."""
        if self.logged:
            return
        if logger is None:
            logger = logging.getLogger("seeker_sim.exceptions")

        message = f"[{self.error_id}] {self.message}"
        if self.context:
            message += f" | Context: {self.context}"

        if self.severity == ErrorSeverity.LOW:
            logger.info(message)
        elif self.severity == ErrorSeverity.MEDIUM:
            logger.warning(message)
        elif self.severity == ErrorSeverity.HIGH:
            logger.error(message)
        else:
            logger.critical(message)
        self.logged = True


class ConfigError(SeekerSimError, ValueError):
    """Invalid configuration; raised before any environment state exists."""

    default_severity = ErrorSeverity.CRITICAL

    def __init__(
        self,
        message: str,
        parameter_name: Optional[str] = None,
        parameter_value: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, context=context)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value
        if parameter_name is not None:
            self.add_context("parameter_name", parameter_name)
            self.set_recovery_suggestion(
                f"Check the value of '{parameter_name}' against the configuration invariants."
            )
        else:
            self.set_recovery_suggestion(
                "Check configuration values against the documented invariants."
            )


class InvalidAction(SeekerSimError, ValueError):
    """Action outside the configured action space."""

    default_severity = ErrorSeverity.MEDIUM

    def __init__(
        self,
        message: str,
        action: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, context=context)
        self.action = action
        self.set_recovery_suggestion(
            "Sample actions from env.action_space; the step was applied as a no-op."
        )


class InvalidState(SeekerSimError, RuntimeError):
    """Operation not permitted in the current episode phase."""

    default_severity = ErrorSeverity.HIGH

    def __init__(
        self,
        message: str,
        current_phase: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, context=context)
        self.current_phase = current_phase
        if current_phase is not None:
            self.add_context("current_phase", current_phase)
        self.set_recovery_suggestion("Call reset() before step().")


class MissingTarget(SeekerSimError, LookupError):
    """No target entity is bound to the episode."""

    default_severity = ErrorSeverity.LOW

    def __init__(self, message: str = "No target bound to the episode"):
        super().__init__(message)
        self.set_recovery_suggestion(
            "Bind a target pose on the host world; observations are degraded until then."
        )
