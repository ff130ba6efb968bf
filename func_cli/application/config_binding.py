"""Binding of create settings from flags, environment and defaults."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from func_cli.domain.exceptions import ValidationError
from func_cli.domain.models import CreateSettings

ENV_PREFIX = "FUNC_"


def env_var_name(key: str) -> str:
    """Environment variable bound to setting ``key`` (``runtime`` -> ``FUNC_RUNTIME``)."""
    return f"{ENV_PREFIX}{key.upper()}"


def bind_create_settings(
    flags: Mapping[str, Any],
    env: Mapping[str, str],
    defaults: Mapping[str, Any],
) -> CreateSettings:
    """Merge settings with precedence flag > environment > default.

    Args:
        flags: Values given explicitly on the command line; None means not given
        env: Environment variables (only ``FUNC_*`` entries are read)
        defaults: Fallback values

    Returns:
        Bound CreateSettings

    Raises:
        ValidationError: If a value cannot be coerced, e.g. FUNC_CONFIRM=maybe
    """
    merged: dict[str, Any] = {}
    for key in CreateSettings.model_fields:
        if flags.get(key) is not None:
            merged[key] = flags[key]
        elif env.get(env_var_name(key)):
            merged[key] = env[env_var_name(key)]
        elif key in defaults:
            merged[key] = defaults[key]

    try:
        return CreateSettings.model_validate(merged)
    except PydanticValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err.get("loc"))
        raise ValidationError(
            f"Invalid configuration value for: {fields}",
            details={"errors": e.errors(include_url=False)},
        ) from e


def empty_env_vars(env: Mapping[str, str]) -> list[str]:
    """``FUNC_*`` variables for known settings that are set but empty."""
    names = (env_var_name(key) for key in CreateSettings.model_fields)
    return [name for name in names if name in env and not env[name]]
