"""
Logging Setup

The engine modules only ever call logging.getLogger(__name__); nothing here
runs on import. Applications embedding the engine call configure_logging()
once at startup if they want its records formatted.
"""

import logging
import os
from typing import Optional

from .runtime import RuntimeConfig, get_default_config


def resolve_log_level(config: Optional[RuntimeConfig] = None) -> int:
    """Resolve log level from SHIELDED_LOG_LEVEL or config, defaulting to INFO."""
    raw = os.getenv("SHIELDED_LOG_LEVEL")
    if raw is None and config is not None:
        raw = config.logging.level
    return getattr(logging, (raw or "INFO").upper(), logging.INFO)


def configure_logging(config: Optional[RuntimeConfig] = None) -> int:
    """
    Configure root logging for the engine.

    Returns:
        The numeric level that was applied
    """
    config = config or get_default_config()
    level = resolve_log_level(config)
    logging.basicConfig(level=level, format=config.logging.format)
    logging.getLogger("shielded_core").setLevel(level)
    return level
