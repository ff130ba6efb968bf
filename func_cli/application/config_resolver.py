"""Resolution of a validated creation descriptor from user input."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from func_cli.application.confirmation import ConfirmationProtocol
from func_cli.domain.exceptions import PromptCancelledError
from func_cli.domain.models import CreateSettings, CreationDescriptor
from func_cli.domain.services import FunctionNameValidator, derive_name_and_path
from func_cli.ports.console import ConsolePort
from func_cli.ports.environment import EnvironmentPort
from func_cli.ports.function_creator import RuntimeCatalogPort
from func_cli.ports.prompter import PrompterPort

logger = logging.getLogger(__name__)


class ConfigResolver:
    """Application service building a CreationDescriptor for the create command."""

    def __init__(
        self,
        prompter: PrompterPort,
        console: ConsolePort,
        environment: EnvironmentPort,
        runtimes: RuntimeCatalogPort,
        validator: FunctionNameValidator | None = None,
    ):
        """Initialize the resolver.

        Args:
            prompter: Prompter used by the confirmation pass
            console: Console for the summary and prompt errors
            environment: Source of the working directory and terminal state
            runtimes: Runtime choices offered when confirming
            validator: Function naming rule
        """
        self._prompter = prompter
        self._console = console
        self._environment = environment
        self._runtimes = runtimes
        self._validator = validator or FunctionNameValidator()

    def resolve(
        self, args: Sequence[str], settings: CreateSettings
    ) -> CreationDescriptor | None:
        """Resolve the descriptor for ``create [PATH]``.

        The derived name is validated before any prompt is shown.

        Returns:
            The descriptor, or None if the user cancelled confirmation

        Raises:
            ValidationError: The derived function name is invalid
            PromptIOError: Prompting failed
        """
        cwd = self._environment.get_working_directory()
        raw_path = args[0] if args else ""
        name, path = derive_name_and_path(raw_path, cwd)

        self._validator.validate(name)

        descriptor = CreationDescriptor(
            name=name,
            path=path,
            runtime=settings.runtime,
            template=settings.template,
            repositories=settings.repositories,
            verbose=settings.verbose,
            confirm=settings.confirm,
        )

        protocol = ConfirmationProtocol(
            prompter=self._prompter,
            console=self._console,
            runtimes=self._runtimes,
            validator=self._validator,
            cwd=cwd,
        )
        try:
            return protocol.run(descriptor, self._environment.is_interactive_terminal())
        except PromptCancelledError:
            logger.info("Create cancelled at confirmation prompt")
            return None
