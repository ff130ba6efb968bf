"""Function creator port for project materialization."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from func_cli.domain.models import Function


@runtime_checkable
class FunctionCreatorPort(Protocol):
    """Port for writing a new function project to disk."""

    def create(self, function: Function) -> None:
        """Materialize ``function`` at its root.

        Raises:
            CreationError: If the project cannot be created
        """
        ...


@runtime_checkable
class RuntimeCatalogPort(Protocol):
    """Port enumerating the runtimes a function can be created with."""

    def list_runtimes(self) -> list[str]:
        """Available runtimes, sorted."""
        ...
