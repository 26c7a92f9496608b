"""Shared utilities."""

from .exceptions import (
    ConfigError,
    ErrorSeverity,
    InvalidAction,
    InvalidState,
    MissingTarget,
    SeekerSimError,
)

__all__ = [
    "ErrorSeverity",
    "SeekerSimError",
    "ConfigError",
    "InvalidAction",
    "InvalidState",
    "MissingTarget",
]
