"""Domain layer for func-cli - models, errors and naming rules."""

from func_cli.domain.exceptions import (
    ConnectionError,
    CreationError,
    FuncError,
    PromptCancelledError,
    PromptIOError,
    ValidationError,
)
from func_cli.domain.models import (
    BUILTIN_RUNTIMES,
    DEFAULT_RUNTIME,
    DEFAULT_TEMPLATE,
    DEFAULT_WAITING_TIMEOUT,
    CreateSettings,
    CreationDescriptor,
    Function,
    ResourceFamily,
)
from func_cli.domain.services import FunctionNameValidator, derive_name_and_path

__all__ = [
    # Models
    "BUILTIN_RUNTIMES",
    "DEFAULT_RUNTIME",
    "DEFAULT_TEMPLATE",
    "DEFAULT_WAITING_TIMEOUT",
    "CreateSettings",
    "CreationDescriptor",
    "Function",
    "ResourceFamily",
    # Errors
    "ConnectionError",
    "CreationError",
    "FuncError",
    "PromptCancelledError",
    "PromptIOError",
    "ValidationError",
    # Services
    "FunctionNameValidator",
    "derive_name_and_path",
]
