"""Function project materializer and runtime catalog."""

from __future__ import annotations

import logging
import os

import yaml

from func_cli.domain.exceptions import CreationError
from func_cli.domain.models import BUILTIN_RUNTIMES, Function
from func_cli.infrastructure.file_system_adapter import FileSystemAdapter
from func_cli.ports.file_system import FileSystemPort
from func_cli.ports.function_creator import RuntimeCatalogPort

logger = logging.getLogger(__name__)

FUNCTION_FILE = "func.yaml"
BUILTIN_TEMPLATES = ("events", "http")


class RuntimeCatalogAdapter:
    """Built-in runtimes plus any runtime directory in the extended repositories."""

    def __init__(self, repositories: str = "", file_system: FileSystemPort | None = None):
        self._repositories = repositories
        self._file_system = file_system or FileSystemAdapter()

    def list_runtimes(self) -> list[str]:
        runtimes = set(BUILTIN_RUNTIMES)
        if not self._repositories:
            return sorted(runtimes)

        try:
            if self._file_system.is_directory(self._repositories):
                for entry in self._file_system.list_directory(self._repositories):
                    if entry.startswith("."):
                        continue
                    if self._file_system.is_directory(os.path.join(self._repositories, entry)):
                        runtimes.add(entry)
        except OSError as e:
            logger.warning("Skipping unreadable repositories %s: %s", self._repositories, e)
        return sorted(runtimes)


class FunctionCreatorAdapter:
    """Writes a new function project: template files plus ``func.yaml``."""

    def __init__(
        self,
        repositories: str = "",
        verbose: bool = False,
        file_system: FileSystemPort | None = None,
        runtimes: RuntimeCatalogPort | None = None,
    ):
        """Initialize the creator.

        Args:
            repositories: Path holding extended templates as ``<runtime>/<template>``
            verbose: Log each step at INFO instead of DEBUG
            file_system: File system port
            runtimes: Runtime catalog; defaults to one over ``repositories``
        """
        self._repositories = repositories
        self._verbose = verbose
        self._file_system = file_system or FileSystemAdapter()
        self._runtimes = runtimes or RuntimeCatalogAdapter(repositories, self._file_system)

    def create(self, function: Function) -> None:
        """Materialize ``function`` at its root."""
        root = function.root
        if not function.name:
            raise CreationError("Function name is required", root=root)

        try:
            template_dir = self._check(function)
            self._write(function, template_dir)
        except OSError as e:
            raise CreationError(f"Unable to create function at {root}: {e}", root=root) from e

        self._log(f"Created function {function.name} in {root}")

    def _check(self, function: Function) -> str | None:
        """Validate runtime, template and root; return the extended template dir."""
        root = function.root
        available = self._runtimes.list_runtimes()
        if function.runtime not in available:
            raise CreationError(
                f"Unsupported runtime '{function.runtime}'. "
                f"Available runtimes: {', '.join(available)}",
                root=root,
            )

        template_dir = self._extended_template_dir(function)
        if template_dir is None and function.template not in BUILTIN_TEMPLATES:
            raise CreationError(
                f"Template '{function.template}' not found for runtime '{function.runtime}'",
                root=root,
            )

        self._check_root(root)
        return template_dir

    def _write(self, function: Function, template_dir: str | None) -> None:
        root = function.root
        self._file_system.create_directory(root)
        if template_dir:
            self._log(f"Copying template {template_dir} into {root}")
            self._file_system.copy_tree(template_dir, root)
        self._file_system.write_file(
            os.path.join(root, FUNCTION_FILE),
            yaml.safe_dump(
                {
                    "name": function.name,
                    "runtime": function.runtime,
                    "template": function.template,
                },
                default_flow_style=False,
                sort_keys=False,
            ),
        )

    def _extended_template_dir(self, function: Function) -> str | None:
        if not self._repositories:
            return None
        candidate = os.path.join(self._repositories, function.runtime, function.template)
        if self._file_system.is_directory(candidate):
            return candidate
        return None

    def _check_root(self, root: str) -> None:
        if self._file_system.path_exists(os.path.join(root, FUNCTION_FILE)):
            raise CreationError(f"Function at '{root}' already initialized", root=root)

        if not self._file_system.path_exists(root):
            return
        if not self._file_system.is_directory(root):
            raise CreationError(f"Path '{root}' exists and is not a directory", root=root)

        # Hidden entries such as .git are allowed
        visible = [e for e in self._file_system.list_directory(root) if not e.startswith(".")]
        if visible:
            raise CreationError(
                f"Directory '{root}' is not empty; contains: {', '.join(visible)}",
                root=root,
            )

    def _log(self, message: str) -> None:
        logger.log(logging.INFO if self._verbose else logging.DEBUG, message)
