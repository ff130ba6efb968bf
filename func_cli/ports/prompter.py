"""Prompter port for interactive questions."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class PrompterPort(Protocol):
    """Port for asking the user questions on an interactive terminal.

    Implementations raise PromptCancelledError when the user interrupts and
    PromptIOError for any other I/O failure.
    """

    def ask_text(self, message: str, default: str = "") -> str:
        """Ask for free text.

        Args:
            message: Question shown to the user
            default: Value returned on empty input

        Returns:
            The answer
        """
        ...

    def ask_choice(self, message: str, choices: Sequence[str], default: str = "") -> str:
        """Ask the user to pick one of ``choices``.

        Args:
            message: Question shown to the user
            choices: Allowed answers, in display order
            default: Value returned on empty input

        Returns:
            The selected choice
        """
        ...
