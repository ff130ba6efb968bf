"""Application layer for func-cli - Contains use cases and application services."""

from func_cli.application.config_binding import (
    bind_create_settings,
    empty_env_vars,
    env_var_name,
)
from func_cli.application.config_resolver import ConfigResolver
from func_cli.application.confirmation import ConfirmationProtocol, ConfirmationState
from func_cli.application.create_service import CreateFunctionService

__all__ = [
    "ConfigResolver",
    "ConfirmationProtocol",
    "ConfirmationState",
    "CreateFunctionService",
    "bind_create_settings",
    "empty_env_vars",
    "env_var_name",
]
