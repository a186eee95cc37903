"""Unit tests for MediatorConfig."""

import pytest

from signal_mediator import Director, Mediator
from signal_mediator.config import MediatorConfig
from signal_mediator.exceptions import ConfigurationError


class TestMediatorConfig:
    """Test configuration defaults and environment loading."""

    def test_defaults(self):
        """Test default configuration values."""
        config = MediatorConfig()

        assert config.strict_dispatch is False
        assert config.default_key == "default"

    def test_strict_dispatch_from_env(self, monkeypatch):
        """Test that MEDIATOR_STRICT_DISPATCH enables strict mode."""
        monkeypatch.setenv("MEDIATOR_STRICT_DISPATCH", "true")

        assert MediatorConfig.from_env().strict_dispatch is True

    def test_default_key_from_env(self, monkeypatch):
        """Test that MEDIATOR_DEFAULT_KEY sets the default key."""
        monkeypatch.setenv("MEDIATOR_DEFAULT_KEY", "main")

        assert MediatorConfig.from_env().default_key == "main"

    def test_numeric_default_key_from_env_stays_string(self, monkeypatch):
        """Test that a numeric MEDIATOR_DEFAULT_KEY is kept as a string key."""
        monkeypatch.setenv("MEDIATOR_DEFAULT_KEY", "2024")

        assert MediatorConfig.from_env().default_key == "2024"

    def test_mediator_uses_numeric_default_key_from_env(self, monkeypatch):
        """Test that a Mediator built from the environment accepts a numeric key."""
        monkeypatch.setenv("MEDIATOR_DEFAULT_KEY", "2024")

        mediator = Mediator()
        mediator.register(Director())

        assert mediator.list_directors() == ["2024"]

    def test_overrides_take_precedence(self, monkeypatch):
        """Test that keyword arguments win over environment variables."""
        monkeypatch.setenv("MEDIATOR_STRICT_DISPATCH", "true")

        assert MediatorConfig.from_env(strict_dispatch=False).strict_dispatch is False

    def test_unknown_env_vars_ignored(self, monkeypatch):
        """Test that unknown MEDIATOR_* variables are ignored."""
        monkeypatch.setenv("MEDIATOR_SOMETHING_ELSE", "1")

        assert MediatorConfig.from_env() == MediatorConfig()

    def test_log_level_env_var_ignored(self, monkeypatch):
        """Test that MEDIATOR_LOG_LEVEL is not treated as a config field."""
        monkeypatch.setenv("MEDIATOR_LOG_LEVEL", "DEBUG")

        assert MediatorConfig.from_env() == MediatorConfig()

    def test_invalid_value_raises_configuration_error(self, monkeypatch):
        """Test that an invalid value raises ConfigurationError."""
        monkeypatch.setenv("MEDIATOR_STRICT_DISPATCH", "maybe")

        with pytest.raises(ConfigurationError):
            MediatorConfig.from_env()

    def test_empty_default_key_rejected(self):
        """Test that an empty default key is rejected."""
        with pytest.raises(ConfigurationError):
            MediatorConfig.from_env(default_key="")

    def test_config_is_frozen(self):
        """Test that MediatorConfig is immutable."""
        config = MediatorConfig()

        with pytest.raises(Exception):
            config.strict_dispatch = True
