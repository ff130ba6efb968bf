"""Ports (interfaces) for func-cli following hexagonal architecture."""

from func_cli.ports.connection import ConnectionConfigPort
from func_cli.ports.console import ConsolePort
from func_cli.ports.environment import EnvironmentPort
from func_cli.ports.file_system import FileSystemPort
from func_cli.ports.function_creator import FunctionCreatorPort, RuntimeCatalogPort
from func_cli.ports.prompter import PrompterPort

__all__ = [
    "ConnectionConfigPort",
    "ConsolePort",
    "EnvironmentPort",
    "FileSystemPort",
    "FunctionCreatorPort",
    "PrompterPort",
    "RuntimeCatalogPort",
]
