"""
Logging setup for seeker_sim.

Modules log through ``logging.getLogger(__name__)``; applications call
:func:`setup_logging` once to send those records to loguru sinks.
"""

from .loguru_bootstrap import InterceptHandler, get_logger, setup_logging

__all__ = ["setup_logging", "get_logger", "InterceptHandler"]
