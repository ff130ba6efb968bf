"""Create function application service."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from func_cli.application.config_resolver import ConfigResolver
from func_cli.domain.models import CreateSettings, CreationDescriptor, Function
from func_cli.ports.console import ConsolePort
from func_cli.ports.function_creator import FunctionCreatorPort

logger = logging.getLogger(__name__)

CreatorFactory = Callable[[str, bool], FunctionCreatorPort]


class CreateFunctionService:
    """Application service for the create use case: resolve, then materialize."""

    def __init__(
        self,
        resolver: ConfigResolver,
        creator_factory: CreatorFactory,
        console: ConsolePort,
    ):
        """Initialize create service.

        Args:
            resolver: Descriptor resolver
            creator_factory: Builds a materializer from (repositories, verbose)
            console: Console port for user output
        """
        self._resolver = resolver
        self._creator_factory = creator_factory
        self._console = console

    def create(
        self, args: Sequence[str], settings: CreateSettings
    ) -> CreationDescriptor | None:
        """Create a function project.

        Returns:
            The descriptor used, or None if the user cancelled

        Raises:
            ValidationError: The function name is invalid
            PromptIOError: Prompting failed
            CreationError: Materialization failed
        """
        descriptor = self._resolver.resolve(args, settings)
        if descriptor is None:
            logger.debug("Create cancelled, nothing written")
            return None

        creator = self._creator_factory(descriptor.repositories, descriptor.verbose)
        creator.create(Function.from_descriptor(descriptor))

        self._console.print_success(f"Function '{descriptor.name}' created in {descriptor.path}")
        return descriptor
