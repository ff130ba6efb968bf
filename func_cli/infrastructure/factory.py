"""Factory for creating infrastructure adapters."""

from __future__ import annotations

from rich.console import Console

from func_cli.infrastructure.console_adapter import ConsoleAdapter
from func_cli.infrastructure.environment_adapter import EnvironmentAdapter
from func_cli.infrastructure.file_system_adapter import FileSystemAdapter
from func_cli.infrastructure.function_creator_adapter import (
    FunctionCreatorAdapter,
    RuntimeCatalogAdapter,
)
from func_cli.infrastructure.kube_config_adapter import KubeConfigAdapter
from func_cli.infrastructure.platform_client_factory import PlatformClientFactory
from func_cli.infrastructure.prompter_adapter import PrompterAdapter
from func_cli.ports.connection import ConnectionConfigPort
from func_cli.ports.console import ConsolePort
from func_cli.ports.environment import EnvironmentPort
from func_cli.ports.file_system import FileSystemPort
from func_cli.ports.function_creator import FunctionCreatorPort, RuntimeCatalogPort
from func_cli.ports.prompter import PrompterPort


class InfrastructureFactory:
    """Factory for creating infrastructure adapters following hexagonal architecture."""

    @staticmethod
    def create_console(console: Console | None = None) -> ConsolePort:
        """Create a console adapter.

        Args:
            console: Optional Rich console instance

        Returns:
            ConsolePort implementation
        """
        return ConsoleAdapter(console)

    @staticmethod
    def create_prompter(console: Console | None = None) -> PrompterPort:
        """Create a prompter adapter.

        Args:
            console: Optional Rich console instance

        Returns:
            PrompterPort implementation
        """
        return PrompterAdapter(console)

    @staticmethod
    def create_environment() -> EnvironmentPort:
        """Create an environment adapter."""
        return EnvironmentAdapter()

    @staticmethod
    def create_file_system() -> FileSystemPort:
        """Create a file system adapter."""
        return FileSystemAdapter()

    @staticmethod
    def create_runtime_catalog(repositories: str = "") -> RuntimeCatalogPort:
        """Create a runtime catalog over built-in and extended runtimes."""
        return RuntimeCatalogAdapter(repositories)

    @staticmethod
    def create_function_creator(repositories: str, verbose: bool) -> FunctionCreatorPort:
        """Create a function materializer.

        Args:
            repositories: Extended template repositories path
            verbose: Verbose logging

        Returns:
            FunctionCreatorPort implementation
        """
        return FunctionCreatorAdapter(repositories=repositories, verbose=verbose)

    @staticmethod
    def create_connection_config(
        kubeconfig: str | None = None, context: str | None = None
    ) -> ConnectionConfigPort:
        """Create an ambient cluster connection config loader."""
        return KubeConfigAdapter(kubeconfig=kubeconfig, context=context)

    @classmethod
    def create_platform_client_factory(
        cls, kubeconfig: str | None = None, context: str | None = None
    ) -> PlatformClientFactory:
        """Create a serving/eventing client factory over ambient connection config."""
        return PlatformClientFactory(cls.create_connection_config(kubeconfig, context))
