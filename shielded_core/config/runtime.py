"""
Runtime Configuration

Central configuration for hasher construction and logging.

Tree height is deliberately absent: it is implied per call by the lengths
of the path and defaults handed to the Merkle functions.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Optional
from pathlib import Path

from dotenv import load_dotenv

from shielded_core.field.element import NUM_BITS

load_dotenv()


_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class HasherConfig:
    """Configuration for HashEngine construction."""
    num_bits: int = NUM_BITS
    strict_bit_length: bool = False
    personalization: str = "Shld_PH_"


@dataclass
class LoggingConfig:
    """Configuration for log output."""
    level: str = "INFO"
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration for the commitment engine.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    hasher: HasherConfig = field(default_factory=HasherConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        This is the SINGLE source of truth for all env var reading.

        Supported variables:
        - SHIELDED_STRICT_BIT_LENGTH: Reject truncating bit expansions (true/false)
        - SHIELDED_HASH_PERSONALIZATION: BLAKE2s person string (<= 8 bytes)
        - SHIELDED_LOG_LEVEL: Logging level name
        """
        overrides: dict[str, Any] = {}

        if os.getenv("SHIELDED_STRICT_BIT_LENGTH"):
            overrides.setdefault("hasher", {})["strict_bit_length"] = (
                os.getenv("SHIELDED_STRICT_BIT_LENGTH", "false").lower() in _TRUE_VALUES
            )
        if os.getenv("SHIELDED_HASH_PERSONALIZATION"):
            overrides.setdefault("hasher", {})["personalization"] = os.getenv(
                "SHIELDED_HASH_PERSONALIZATION"
            )

        if os.getenv("SHIELDED_LOG_LEVEL"):
            overrides.setdefault("logging", {})["level"] = os.getenv("SHIELDED_LOG_LEVEL")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """
        Load configuration purely from environment variables.

        Uses defaults for any values not specified in env vars.
        """
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        hasher_data = data.get("hasher", {})
        logging_data = data.get("logging", {})

        hasher = HasherConfig(**hasher_data) if hasher_data else HasherConfig()
        log_cfg = LoggingConfig(**logging_data) if logging_data else LoggingConfig()

        return cls(
            hasher=hasher,
            logging=log_cfg,
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        import copy
        new_config = copy.deepcopy(self)

        if "hasher" in overrides:
            for key, value in overrides["hasher"].items():
                setattr(new_config.hasher, key, value)

        if "logging" in overrides:
            for key, value in overrides["logging"].items():
                setattr(new_config.logging, key, value)

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "hasher": {
                "num_bits": self.hasher.num_bits,
                "strict_bit_length": self.hasher.strict_bit_length,
                "personalization": self.hasher.personalization,
            },
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
            },
            "extra": self.extra,
        }


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = RuntimeConfig.from_env()
    return _default_config


def set_default_config(config: Optional[RuntimeConfig]) -> None:
    """Set the default runtime configuration (None resets to env on next access)."""
    global _default_config
    _default_config = config
