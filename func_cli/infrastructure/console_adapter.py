"""Console adapter implementation using Rich library."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text


class ConsoleAdapter:
    """Adapter for console operations using Rich library.

    Messages are printed as plain text, never parsed as markup: they carry
    user paths and names that may contain brackets.
    """

    def __init__(self, console: Console | None = None):
        """Initialize console adapter.

        Args:
            console: Optional Rich console instance
        """
        self._console = console or Console(highlight=False)

    def print(self, message: str, style: str | None = None) -> None:
        """Print a message to the console."""
        self._console.print(Text(message, style=style or ""))

    def print_error(self, message: str) -> None:
        """Print an error message to the console."""
        self._console.print(Text.assemble(("Error:", "red bold"), " ", message))

    def print_warning(self, message: str) -> None:
        """Print a warning message to the console."""
        self._console.print(Text.assemble(("Warning:", "yellow"), " ", message))

    def print_success(self, message: str) -> None:
        """Print a success message to the console."""
        self._console.print(Text.assemble(("✓", "green"), " ", message))
