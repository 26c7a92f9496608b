"""Gymnasium registration helpers."""

from .register import (
    ENTRY_POINT,
    ENV_ID,
    ensure_registered,
    is_registered,
    register_env,
    unregister_env,
)

__all__ = [
    "ENV_ID",
    "ENTRY_POINT",
    "register_env",
    "unregister_env",
    "is_registered",
    "ensure_registered",
]
