"""
Runtime Configuration Module

Provides configuration loading and logging setup for the commitment engine.
"""

from .runtime import (
    HasherConfig,
    LoggingConfig,
    RuntimeConfig,
    get_default_config,
    set_default_config,
)
from .log_setup import configure_logging, resolve_log_level

__all__ = [
    "HasherConfig",
    "LoggingConfig",
    "RuntimeConfig",
    "get_default_config",
    "set_default_config",
    "configure_logging",
    "resolve_log_level",
]
