"""Pytest configuration and shared fixtures for func-cli tests."""

from __future__ import annotations

import tempfile
from collections.abc import Generator, Sequence
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from func_cli.domain.exceptions import PromptCancelledError
from func_cli.domain.models import CreateSettings


class ScriptedPrompter:
    """Prompter returning pre-recorded answers in order.

    An answer that is an exception instance is raised instead of returned.
    """

    def __init__(self, answers: Sequence[object] = ()):
        self.answers = list(answers)
        self.calls: list[tuple[str, str, tuple[str, ...] | None]] = []

    def ask_text(self, message: str, default: str = "") -> str:
        self.calls.append(("text", message, None))
        return self._next(default)

    def ask_choice(self, message: str, choices: Sequence[str], default: str = "") -> str:
        self.calls.append(("choice", message, tuple(choices)))
        return self._next(default)

    def _next(self, default: str) -> str:
        if not self.answers:
            raise AssertionError("ScriptedPrompter ran out of answers")
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return default if answer is None else answer

    @property
    def messages(self) -> list[str]:
        return [message for _, message, _ in self.calls]


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing.

    Yields:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def cwd() -> str:
    """Working directory reported by the mock environment."""
    return "/home/u/project-x"


@pytest.fixture
def mock_console() -> MagicMock:
    """Create a mock console adapter.

    Returns:
        A mocked console adapter
    """
    mock = MagicMock()
    mock.print = MagicMock()
    mock.print_error = MagicMock()
    mock.print_success = MagicMock()
    mock.print_warning = MagicMock()
    return mock


@pytest.fixture
def mock_environment(cwd: str) -> MagicMock:
    """Create a mock environment adapter attached to an interactive terminal.

    Returns:
        A mocked environment adapter
    """
    mock = MagicMock()
    mock.get_working_directory = MagicMock(return_value=cwd)
    mock.is_interactive_terminal = MagicMock(return_value=True)
    mock.get_config_path = MagicMock(return_value="/home/u/.config/func")
    mock.get_environment = MagicMock(return_value={})
    return mock


@pytest.fixture
def mock_runtimes() -> MagicMock:
    """Create a mock runtime catalog.

    Returns:
        A mocked runtime catalog
    """
    mock = MagicMock()
    mock.list_runtimes = MagicMock(return_value=["go", "node", "python", "quarkus"])
    return mock


@pytest.fixture
def scripted_prompter() -> ScriptedPrompter:
    """Create a prompter with no answers; tests append to ``answers``."""
    return ScriptedPrompter()


@pytest.fixture
def cancelled() -> PromptCancelledError:
    """A user interrupt, for scripting into a prompter."""
    return PromptCancelledError()


@pytest.fixture
def settings() -> CreateSettings:
    """Create default bound settings.

    Returns:
        CreateSettings with defaults and no confirmation
    """
    return CreateSettings(repositories="/home/u/.config/func/repositories")


@pytest.fixture
def confirm_settings() -> CreateSettings:
    """Create bound settings requesting confirmation."""
    return CreateSettings(repositories="/home/u/.config/func/repositories", confirm=True)
