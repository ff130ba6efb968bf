"""Infrastructure layer for func-cli."""

from func_cli.infrastructure.console_adapter import ConsoleAdapter
from func_cli.infrastructure.environment_adapter import EnvironmentAdapter
from func_cli.infrastructure.factory import InfrastructureFactory
from func_cli.infrastructure.file_system_adapter import FileSystemAdapter
from func_cli.infrastructure.function_creator_adapter import (
    FunctionCreatorAdapter,
    RuntimeCatalogAdapter,
)
from func_cli.infrastructure.knative_clients import EventingClient, ServingClient
from func_cli.infrastructure.kube_config_adapter import KubeConfigAdapter
from func_cli.infrastructure.platform_client_factory import PlatformClientFactory
from func_cli.infrastructure.prompter_adapter import PrompterAdapter

__all__ = [
    "ConsoleAdapter",
    "EnvironmentAdapter",
    "EventingClient",
    "FileSystemAdapter",
    "FunctionCreatorAdapter",
    "InfrastructureFactory",
    "KubeConfigAdapter",
    "PlatformClientFactory",
    "PrompterAdapter",
    "RuntimeCatalogAdapter",
    "ServingClient",
]
