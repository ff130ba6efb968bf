"""Console port for user-facing output."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConsolePort(Protocol):
    """Port for console/terminal output."""

    def print(self, message: str, style: str | None = None) -> None:
        """Print a message to the console.

        Args:
            message: Message to print
            style: Optional style/color formatting
        """
        ...

    def print_error(self, message: str) -> None:
        """Print an error message to the console.

        Args:
            message: Error message to print
        """
        ...

    def print_warning(self, message: str) -> None:
        """Print a warning message to the console."""
        ...

    def print_success(self, message: str) -> None:
        """Print a success message to the console."""
        ...
