"""Interactive confirmation of a creation descriptor."""

from __future__ import annotations

import logging
from enum import Enum

from func_cli.domain.exceptions import PromptCancelledError, ValidationError
from func_cli.domain.models import CreationDescriptor
from func_cli.domain.services import FunctionNameValidator, derive_name_and_path
from func_cli.ports.console import ConsolePort
from func_cli.ports.function_creator import RuntimeCatalogPort
from func_cli.ports.prompter import PrompterPort

logger = logging.getLogger(__name__)


class ConfirmationState(str, Enum):
    """States of the confirmation protocol."""

    INIT = "init"
    PROMPTING = "prompting"
    ACCEPTED = "accepted"
    CANCELLED = "cancelled"
    FAILED = "failed"


TERMINAL_STATES = frozenset(
    {ConfirmationState.ACCEPTED, ConfirmationState.CANCELLED, ConfirmationState.FAILED}
)


class ConfirmationProtocol:
    """One-shot confirm/edit pass over a descriptor.

    Prompts for path, runtime and template in that order when the terminal is
    interactive and the descriptor asks for confirmation; otherwise prints a
    summary and accepts the descriptor as is. A path whose derived name fails
    validation is asked for again. Runs at most once per instance.
    """

    def __init__(
        self,
        prompter: PrompterPort,
        console: ConsolePort,
        runtimes: RuntimeCatalogPort,
        validator: FunctionNameValidator | None = None,
        cwd: str | None = None,
    ):
        self._prompter = prompter
        self._console = console
        self._runtimes = runtimes
        self._validator = validator or FunctionNameValidator()
        self._cwd = cwd
        self._state = ConfirmationState.INIT

    @property
    def state(self) -> ConfirmationState:
        return self._state

    def run(self, descriptor: CreationDescriptor, interactive: bool) -> CreationDescriptor:
        """Confirm ``descriptor``, returning it or an edited copy.

        Raises:
            PromptCancelledError: The user interrupted a prompt
            PromptIOError: Prompt I/O failed
            RuntimeError: The protocol already ran
        """
        if self._state is not ConfirmationState.INIT:
            raise RuntimeError(f"Confirmation already finished in state {self._state.value}")

        if not (interactive and descriptor.confirm):
            self._print_summary(descriptor)
            self._state = ConfirmationState.ACCEPTED
            return descriptor

        self._state = ConfirmationState.PROMPTING
        try:
            path = self._ask_path(descriptor.path)
            runtime = self._prompter.ask_choice(
                "Runtime", self._runtimes.list_runtimes(), default=descriptor.runtime
            )
            # TODO: offer template suggestions once the catalog can enumerate templates per runtime
            template = self._prompter.ask_text("Template", default=descriptor.template)
        except PromptCancelledError:
            self._state = ConfirmationState.CANCELLED
            logger.debug("Confirmation cancelled by user")
            raise
        except Exception:
            self._state = ConfirmationState.FAILED
            raise

        name, absolute_path = derive_name_and_path(path, self._cwd)
        self._state = ConfirmationState.ACCEPTED
        return CreationDescriptor(
            name=name,
            path=absolute_path,
            runtime=runtime,
            template=template,
            repositories=descriptor.repositories,
            verbose=descriptor.verbose,
            confirm=descriptor.confirm,
        )

    def _ask_path(self, default: str) -> str:
        while True:
            answer = self._prompter.ask_text("Project path", default=default)
            name, _ = derive_name_and_path(answer, self._cwd)
            try:
                self._validator.validate(name)
            except ValidationError as e:
                self._console.print_error(e.message)
                continue
            return answer

    def _print_summary(self, descriptor: CreationDescriptor) -> None:
        for label, value in descriptor.summary():
            self._console.print(f"{label}: {value}")
