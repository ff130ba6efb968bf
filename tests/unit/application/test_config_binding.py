"""Unit tests for flag/env/default binding of create settings."""

import pytest

from func_cli.application.config_binding import (
    bind_create_settings,
    empty_env_vars,
    env_var_name,
)
from func_cli.domain.exceptions import ValidationError

DEFAULTS = {
    "runtime": "node",
    "template": "http",
    "repositories": "/home/u/.config/func/repositories",
    "confirm": False,
    "verbose": False,
}


class TestBindCreateSettings:
    """Test bind_create_settings precedence and coercion."""

    def test_env_var_names(self):
        """Test settings map to FUNC_ prefixed variables."""
        assert env_var_name("runtime") == "FUNC_RUNTIME"
        assert env_var_name("repositories") == "FUNC_REPOSITORIES"

    def test_defaults_only(self):
        """Test defaults apply when nothing else is set."""
        # Act
        settings = bind_create_settings({}, {}, DEFAULTS)

        # Assert
        assert settings.runtime == "node"
        assert settings.template == "http"
        assert settings.repositories == "/home/u/.config/func/repositories"
        assert settings.confirm is False

    def test_env_overrides_default(self):
        """Test environment values win over defaults."""
        # Arrange
        env = {"FUNC_RUNTIME": "go", "FUNC_CONFIRM": "true", "UNRELATED": "x"}

        # Act
        settings = bind_create_settings({}, env, DEFAULTS)

        # Assert
        assert settings.runtime == "go"
        assert settings.confirm is True

    def test_flag_overrides_env(self):
        """Test explicit flags win over environment values."""
        # Arrange
        env = {"FUNC_RUNTIME": "go", "FUNC_TEMPLATE": "events"}
        flags = {"runtime": "python"}

        # Act
        settings = bind_create_settings(flags, env, DEFAULTS)

        # Assert
        assert settings.runtime == "python"
        assert settings.template == "events"

    def test_unset_flags_are_ignored(self):
        """Test None flag values fall through to env and defaults."""
        # Act
        settings = bind_create_settings(
            {"runtime": None, "verbose": None}, {"FUNC_VERBOSE": "1"}, DEFAULTS
        )

        # Assert
        assert settings.runtime == "node"
        assert settings.verbose is True

    def test_empty_env_value_is_unset(self):
        """Test empty environment variables do not override defaults."""
        # Act
        settings = bind_create_settings({}, {"FUNC_CONFIRM": "", "FUNC_RUNTIME": ""}, DEFAULTS)

        # Assert
        assert settings.confirm is False
        assert settings.runtime == "node"

    def test_invalid_bool_raises_validation_error(self):
        """Test an uncoercible environment value is a validation error."""
        # Act & Assert
        with pytest.raises(ValidationError, match="confirm"):
            bind_create_settings({}, {"FUNC_CONFIRM": "maybe"}, DEFAULTS)

    def test_empty_env_vars_lists_blank_settings(self):
        """Test blank FUNC_* variables for known settings are reported."""
        # Arrange
        env = {"FUNC_RUNTIME": "", "FUNC_TEMPLATE": "events", "FUNC_OTHER": "", "PATH": ""}

        # Act
        names = empty_env_vars(env)

        # Assert
        assert names == ["FUNC_RUNTIME"]

    def test_empty_env_vars_none_when_unset(self):
        """Test nothing is reported when no FUNC_* variable is blank."""
        assert empty_env_vars({"FUNC_CONFIRM": "true"}) == []
