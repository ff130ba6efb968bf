"""Unit tests for PrompterAdapter."""

from unittest.mock import MagicMock, patch

import pytest
from rich.console import Console

from func_cli.domain.exceptions import PromptCancelledError, PromptIOError
from func_cli.infrastructure.prompter_adapter import PrompterAdapter
from func_cli.ports.prompter import PrompterPort

PROMPT = "func_cli.infrastructure.prompter_adapter.Prompt.ask"


class TestPrompterAdapter:
    """Test PrompterAdapter implementation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.console = MagicMock(spec=Console)
        self.adapter = PrompterAdapter(self.console)

    def test_implements_prompter_port(self):
        """Test that PrompterAdapter implements PrompterPort interface."""
        assert isinstance(self.adapter, PrompterPort)

    @patch(PROMPT)
    def test_ask_text_with_default(self, mock_ask):
        """Test free text prompt passes the default."""
        # Arrange
        mock_ask.return_value = "/tmp/myfunc"

        # Act
        answer = self.adapter.ask_text("Project path", default="/tmp/myfunc")

        # Assert
        assert answer == "/tmp/myfunc"
        mock_ask.assert_called_once_with(
            "Project path", console=self.console, default="/tmp/myfunc"
        )

    @patch(PROMPT)
    def test_ask_text_without_default(self, mock_ask):
        """Test an empty default is not passed to rich."""
        # Arrange
        mock_ask.return_value = "x"

        # Act
        self.adapter.ask_text("Template")

        # Assert
        mock_ask.assert_called_once_with("Template", console=self.console)

    @patch(PROMPT)
    def test_ask_choice(self, mock_ask):
        """Test choice prompt passes the choices."""
        # Arrange
        mock_ask.return_value = "go"

        # Act
        answer = self.adapter.ask_choice("Runtime", ("go", "node"), default="node")

        # Assert
        assert answer == "go"
        mock_ask.assert_called_once_with(
            "Runtime", console=self.console, choices=["go", "node"], default="node"
        )

    @patch(PROMPT)
    def test_keyboard_interrupt_cancels(self, mock_ask):
        """Test Ctrl+C becomes PromptCancelledError."""
        # Arrange
        mock_ask.side_effect = KeyboardInterrupt()

        # Act & Assert
        with pytest.raises(PromptCancelledError):
            self.adapter.ask_text("Project path")

    @pytest.mark.parametrize("error", [EOFError(), OSError("tty gone")])
    def test_io_failures(self, error):
        """Test EOF and OS errors become PromptIOError."""
        # Arrange
        with patch(PROMPT, side_effect=error):
            # Act & Assert
            with pytest.raises(PromptIOError):
                self.adapter.ask_choice("Runtime", ["go"])
