"""Connection config port for ambient cluster configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from kubernetes.client import Configuration


@runtime_checkable
class ConnectionConfigPort(Protocol):
    """Port for loading cluster connection settings from the local environment."""

    def load(self) -> Configuration:
        """Load a fresh transport configuration.

        Returns:
            A Configuration not shared with any other caller

        Raises:
            ConnectionError: If no usable configuration can be loaded
        """
        ...

    def get_namespace(self) -> str:
        """Namespace of the active context, or ``default``."""
        ...
