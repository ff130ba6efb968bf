"""Unit tests for CreateFunctionService."""

from unittest.mock import MagicMock

import pytest

from func_cli.application.config_resolver import ConfigResolver
from func_cli.application.create_service import CreateFunctionService
from func_cli.domain.exceptions import CreationError, PromptCancelledError, ValidationError
from func_cli.domain.models import Function


class TestCreateFunctionService:
    """Test suite for CreateFunctionService."""

    @pytest.fixture(autouse=True)
    def setup(self, scripted_prompter, mock_console, mock_environment, mock_runtimes):
        """Set up test fixtures."""
        self.prompter = scripted_prompter
        self.console = mock_console
        self.creator = MagicMock()
        self.creator_factory = MagicMock(return_value=self.creator)
        resolver = ConfigResolver(
            prompter=scripted_prompter,
            console=mock_console,
            environment=mock_environment,
            runtimes=mock_runtimes,
        )
        self.service = CreateFunctionService(
            resolver=resolver,
            creator_factory=self.creator_factory,
            console=mock_console,
        )

    def test_create_hands_off_function(self, settings):
        """Test a resolved descriptor is handed to the materializer."""
        # Act
        descriptor = self.service.create(["myfunc"], settings)

        # Assert
        self.creator_factory.assert_called_once_with("/home/u/.config/func/repositories", False)
        self.creator.create.assert_called_once_with(
            Function(
                name="myfunc",
                root="/home/u/project-x/myfunc",
                runtime="node",
                template="http",
            )
        )
        assert descriptor.name == "myfunc"
        self.console.print_success.assert_called_once()

    def test_cancel_skips_materialization(self, confirm_settings):
        """Test cancelling confirmation creates nothing."""
        # Arrange
        self.prompter.answers = [None, PromptCancelledError()]

        # Act
        result = self.service.create(["myfunc"], confirm_settings)

        # Assert
        assert result is None
        self.creator_factory.assert_not_called()
        self.creator.create.assert_not_called()

    def test_validation_error_skips_materialization(self, settings):
        """Test an invalid name creates nothing."""
        # Act & Assert
        with pytest.raises(ValidationError):
            self.service.create(["Bad Name!"], settings)
        self.creator.create.assert_not_called()

    def test_creation_error_propagates_unchanged(self, settings):
        """Test materializer failures reach the caller as-is."""
        # Arrange
        error = CreationError("disk full", root="/home/u/project-x/myfunc")
        self.creator.create.side_effect = error

        # Act & Assert
        with pytest.raises(CreationError) as exc_info:
            self.service.create(["myfunc"], settings)
        assert exc_info.value is error
        self.console.print_success.assert_not_called()
