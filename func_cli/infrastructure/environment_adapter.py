"""Environment adapter implementation."""

from __future__ import annotations

import os
import sys
from pathlib import Path


class EnvironmentAdapter:
    """Adapter for environment detection and configuration."""

    def get_environment(self) -> dict[str, str]:
        """Snapshot of all environment variables."""
        return dict(os.environ)

    def is_interactive_terminal(self) -> bool:
        """Check whether stdin and stdout are attached to a terminal."""
        try:
            return sys.stdin.isatty() and sys.stdout.isatty()
        except (AttributeError, ValueError):
            # Detached or closed streams
            return False

    def get_config_path(self) -> str:
        """User config root for func-cli."""
        xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
        if xdg_config_home:
            return str(Path(xdg_config_home) / "func")
        return str(Path.home() / ".config" / "func")

    def get_working_directory(self) -> str:
        """Current working directory."""
        return os.getcwd()
