"""
Runtime Configuration Unit Tests
Tests for shielded_core/config/runtime.py and shielded_core/config/log_setup.py
"""
import logging

import pytest

from shielded_core.config import (
    HasherConfig,
    RuntimeConfig,
    configure_logging,
    get_default_config,
    resolve_log_level,
    set_default_config,
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "SHIELDED_STRICT_BIT_LENGTH",
        "SHIELDED_HASH_PERSONALIZATION",
        "SHIELDED_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestDefaults:
    """Tests for default configuration values."""

    def test_defaults(self):
        config = RuntimeConfig()

        assert config.hasher.num_bits == 255
        assert config.hasher.strict_bit_length is False
        assert config.hasher.personalization == "Shld_PH_"
        assert config.logging.level == "INFO"

    def test_to_dict(self):
        data = RuntimeConfig().to_dict()

        assert data["hasher"]["num_bits"] == 255
        assert data["logging"]["level"] == "INFO"
        assert data["extra"] == {}

    def test_from_dict_round_trip(self):
        config = RuntimeConfig(hasher=HasherConfig(strict_bit_length=True))

        assert RuntimeConfig.from_dict(config.to_dict()) == config


class TestLoading:
    """Tests for dict, YAML and environment loading."""

    def test_from_dict_partial(self):
        config = RuntimeConfig.from_dict({"hasher": {"strict_bit_length": True}})

        assert config.hasher.strict_bit_length is True
        assert config.hasher.personalization == "Shld_PH_"
        assert config.logging.level == "INFO"

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "hasher:\n"
            "  personalization: OtherTag\n"
            "logging:\n"
            "  level: DEBUG\n"
        )

        config = RuntimeConfig.from_yaml(path)

        assert config.hasher.personalization == "OtherTag"
        assert config.logging.level == "DEBUG"

    def test_from_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert RuntimeConfig.from_yaml(path) == RuntimeConfig()

    def test_from_yaml_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RuntimeConfig.from_yaml(tmp_path / "missing.yaml")

    def test_from_env(self, clean_env):
        clean_env.setenv("SHIELDED_STRICT_BIT_LENGTH", "true")
        clean_env.setenv("SHIELDED_HASH_PERSONALIZATION", "EnvTag")
        clean_env.setenv("SHIELDED_LOG_LEVEL", "WARNING")

        config = RuntimeConfig.from_env()

        assert config.hasher.strict_bit_length is True
        assert config.hasher.personalization == "EnvTag"
        assert config.logging.level == "WARNING"

    def test_with_env_overrides(self, clean_env):
        base = RuntimeConfig.from_dict({"hasher": {"personalization": "FileTag"}})
        clean_env.setenv("SHIELDED_STRICT_BIT_LENGTH", "yes")

        overridden = base.with_env_overrides()

        assert overridden.hasher.strict_bit_length is True
        assert overridden.hasher.personalization == "FileTag"
        assert base.hasher.strict_bit_length is False

    def test_with_no_overrides_returns_self(self, clean_env):
        config = RuntimeConfig()

        assert config.with_env_overrides() is config


class TestDefaultConfig:
    """Tests for the process-wide default."""

    def test_set_and_get(self):
        config = RuntimeConfig(extra={"tree": "notes"})
        set_default_config(config)

        assert get_default_config() is config

    def test_lazy_from_env(self, clean_env):
        clean_env.setenv("SHIELDED_HASH_PERSONALIZATION", "LazyTag")

        assert get_default_config().hasher.personalization == "LazyTag"


class TestLogging:
    """Tests for log level resolution and setup."""

    def test_env_takes_precedence(self, clean_env):
        clean_env.setenv("SHIELDED_LOG_LEVEL", "error")
        config = RuntimeConfig.from_dict({"logging": {"level": "DEBUG"}})

        assert resolve_log_level(config) == logging.ERROR

    def test_config_level(self, clean_env):
        config = RuntimeConfig.from_dict({"logging": {"level": "debug"}})

        assert resolve_log_level(config) == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, clean_env):
        config = RuntimeConfig.from_dict({"logging": {"level": "chatty"}})

        assert resolve_log_level(config) == logging.INFO

    def test_configure_logging(self, clean_env):
        config = RuntimeConfig.from_dict({"logging": {"level": "WARNING"}})

        try:
            level = configure_logging(config)

            assert level == logging.WARNING
            assert logging.getLogger("shielded_core").level == logging.WARNING
        finally:
            logging.getLogger("shielded_core").setLevel(logging.NOTSET)
