"""Environment port for terminal and system environment queries."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class EnvironmentPort(Protocol):
    """Port for environment detection."""

    def get_environment(self) -> dict[str, str]:
        """Snapshot of all environment variables."""
        ...

    def is_interactive_terminal(self) -> bool:
        """Check whether stdin and stdout are attached to a terminal."""
        ...

    def get_config_path(self) -> str:
        """User config root for func-cli.

        Returns:
            ``$XDG_CONFIG_HOME/func`` if set, else ``~/.config/func``
        """
        ...

    def get_working_directory(self) -> str:
        """Current working directory."""
        ...
