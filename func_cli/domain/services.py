"""Domain services for func-cli: naming rule and name/path derivation."""

from __future__ import annotations

import os
import re

from func_cli.domain.exceptions import ValidationError

# RFC 1035 label: function names become Kubernetes service names.
_DNS1035_LABEL = re.compile(r"^[a-z]([-a-z0-9]*[a-z0-9])?$")
_DNS1035_MAX_LENGTH = 63


class FunctionNameValidator:
    """Domain service enforcing the function naming rule."""

    def validate(self, name: str) -> None:
        """Raise ValidationError if ``name`` is not a valid function name."""
        if not name:
            raise ValidationError("Function name must not be empty", details={"name": name})

        if len(name) > _DNS1035_MAX_LENGTH:
            raise ValidationError(
                f"Function name '{name}' is too long: must be no more than "
                f"{_DNS1035_MAX_LENGTH} characters",
                details={"name": name, "length": len(name)},
            )

        if not _DNS1035_LABEL.match(name):
            raise ValidationError(
                f"Function name '{name}' is invalid: it must consist of lower case "
                "alphanumeric characters or '-', start with an alphabetic character, "
                "and end with an alphanumeric character (e.g. 'my-name', or 'abc-123')",
                details={"name": name},
            )


def derive_name_and_path(raw_path: str, cwd: str | None = None) -> tuple[str, str]:
    """Derive a function name and absolute path from a user-supplied path.

    An empty path means the working directory. Relative paths resolve against
    ``cwd`` (default: the process working directory). The name is the base name
    of the absolute path. Nothing is created on disk.
    """
    base = cwd if cwd is not None else os.getcwd()
    if not raw_path:
        absolute = os.path.abspath(base)
    else:
        absolute = os.path.abspath(os.path.join(base, raw_path))
    return os.path.basename(absolute), absolute
