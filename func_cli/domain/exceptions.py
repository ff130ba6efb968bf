"""Domain-specific exceptions for func-cli."""

from __future__ import annotations


class FuncError(Exception):
    """Base exception for all func-cli errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(FuncError):
    """A function name or setting violates its rules."""

    pass


class PromptCancelledError(FuncError):
    """The user interrupted interactive prompting.

    Not a failure: callers exit cleanly without creating anything.
    """

    def __init__(self, message: str = "prompting cancelled by user"):
        super().__init__(message)


class PromptIOError(FuncError):
    """Prompt I/O failed for a reason other than a user interrupt."""

    pass


class ConnectionError(FuncError):
    """Cluster connection config could not be loaded or a client could not be built."""

    def __init__(self, message: str, family: str | None = None, cause: Exception | None = None):
        super().__init__(message)
        self.family = family
        self.cause = cause
        if family:
            self.details["family"] = family


class CreationError(FuncError):
    """Materializing a function project on disk failed."""

    def __init__(self, message: str, root: str | None = None):
        super().__init__(message)
        self.root = root
        if root:
            self.details["root"] = root
