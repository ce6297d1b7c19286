"""Service identity and executable path resolution."""

from __future__ import annotations

import os
import shutil
import sys
from dataclasses import dataclass, replace

from svcctl.service.errors import PathResolutionError


@dataclass(frozen=True)
class ServiceIdentity:
    """Who the service is.

    ``exec_path`` may be empty, in which case it is resolved to the running
    executable at install time.
    """

    name: str
    display_name: str
    description: str
    exec_path: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Service name must not be empty")
        if "/" in self.name or any(c.isspace() for c in self.name):
            raise ValueError(
                f"Invalid service name {self.name!r}: "
                "must not contain '/' or whitespace"
            )

    def resolved(self, exec_path: str) -> ServiceIdentity:
        """Return a copy with ``exec_path`` filled in."""
        return replace(self, exec_path=exec_path)


def resolve_executable(argv0: str | None = None) -> str:
    """Get the absolute path of the currently running executable.

    Args:
        argv0: Program name to resolve. Defaults to ``sys.argv[0]``.

    Returns:
        Absolute path to an existing file.

    Raises:
        PathResolutionError: If the path cannot be determined.
    """
    if argv0 is None:
        argv0 = sys.argv[0] if sys.argv else ""

    if not argv0 or argv0 == "-c":
        raise PathResolutionError("Cannot determine the running executable")

    # Bare program names were found through PATH
    if os.sep not in argv0:
        found = shutil.which(argv0)
        if found:
            argv0 = found

    path = os.path.abspath(argv0)
    if not os.path.isfile(path):
        raise PathResolutionError(f"Executable not found: {path}")
    return path
