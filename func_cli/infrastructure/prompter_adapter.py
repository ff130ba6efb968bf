"""Prompter adapter implementation using Rich prompts."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rich.console import Console
from rich.prompt import Prompt

from func_cli.domain.exceptions import PromptCancelledError, PromptIOError


class PrompterAdapter:
    """Adapter asking questions on the terminal with ``rich.prompt.Prompt``."""

    def __init__(self, console: Console | None = None):
        self._console = console or Console()

    def ask_text(self, message: str, default: str = "") -> str:
        """Ask for free text."""
        return self._ask(message, default)

    def ask_choice(self, message: str, choices: Sequence[str], default: str = "") -> str:
        """Ask the user to pick one of ``choices``."""
        return self._ask(message, default, choices=list(choices))

    def _ask(self, message: str, default: str, **kwargs: Any) -> str:
        # Rich treats any default other than Ellipsis as an answer for empty input
        if default:
            kwargs["default"] = default
        try:
            return Prompt.ask(message, console=self._console, **kwargs)
        except KeyboardInterrupt as e:
            raise PromptCancelledError() from e
        except (EOFError, OSError) as e:
            raise PromptIOError(f"Unable to read answer from terminal: {e}") from e
