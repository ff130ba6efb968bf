"""File system port for file operations."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystemPort(Protocol):
    """Port for file system operations."""

    def write_file(self, path: str, content: str) -> None:
        """Write content to a file.

        Args:
            path: File path
            content: Content to write

        Raises:
            IOError: If unable to write file
        """
        ...

    def create_directory(self, path: str, exist_ok: bool = True) -> None:
        """Create a directory.

        Args:
            path: Directory path
            exist_ok: If True, don't raise error if directory exists

        Raises:
            IOError: If unable to create directory
        """
        ...

    def path_exists(self, path: str) -> bool:
        """Check if a path exists."""
        ...

    def is_directory(self, path: str) -> bool:
        """Check if path is a directory."""
        ...

    def list_directory(self, path: str) -> list[str]:
        """List entry names in a directory.

        Raises:
            FileNotFoundError: If directory doesn't exist
        """
        ...

    def copy_tree(self, source: str, destination: str) -> None:
        """Copy a directory tree into ``destination``, merging with existing content.

        Raises:
            IOError: If unable to copy
        """
        ...
