"""Errors raised by service lifecycle operations.

Every lifecycle failure is raised to the immediate caller. Failures that
happen after some side effects already took place (for example the script
was written but chmod failed) carry the steps that completed, so callers can
decide whether manual cleanup is needed.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum


class Step(Enum):
    """A side-effecting step of install or remove."""

    WRITE_SCRIPT = "write_script"
    SET_PERMISSIONS = "set_permissions"
    REGISTER = "register"
    DEREGISTER = "deregister"
    DELETE_SCRIPT = "delete_script"


class ServiceError(Exception):
    """Base class for service lifecycle errors."""

    def __init__(self, message: str, completed_steps: Sequence[Step] = ()):
        super().__init__(message)
        self.message = message
        self.completed_steps: tuple[Step, ...] = tuple(completed_steps)

    @property
    def partial(self) -> bool:
        """True when the operation left side effects behind."""
        return bool(self.completed_steps)


class AlreadyInstalledError(ServiceError):
    """A control script already exists at the target path."""


class PathResolutionError(ServiceError):
    """The running executable's path could not be determined."""


class WriteError(ServiceError):
    """The control script could not be written."""


class PermissionSetError(ServiceError):
    """The control script was written but its mode could not be set."""


class RegistrationError(ServiceError):
    """The registration command failed after the script was written."""


class DeregistrationError(ServiceError):
    """The deregistration command failed. The script is left untouched."""


class DeleteError(ServiceError):
    """The control script could not be deleted."""


class CommandError(ServiceError):
    """An external command exited non-zero or could not be launched."""

    def __init__(
        self,
        argv: Sequence[str],
        returncode: int | None = None,
        stderr: str = "",
    ):
        self.argv: tuple[str, ...] = tuple(argv)
        self.returncode = returncode
        self.stderr = stderr

        cmd = " ".join(self.argv)
        if returncode is None:
            message = f"Could not run '{cmd}'"
        else:
            message = f"'{cmd}' exited with status {returncode}"
        if stderr.strip():
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)


class StartError(ServiceError):
    """The host start callback failed."""


class StopError(ServiceError):
    """The host stop callback failed."""


class SignalWaitError(ServiceError):
    """Waiting for a termination signal failed."""


class LogSinkUnavailableError(ServiceError):
    """The OS system log could not be opened or written to."""


__all__ = [
    "AlreadyInstalledError",
    "CommandError",
    "DeleteError",
    "DeregistrationError",
    "LogSinkUnavailableError",
    "PathResolutionError",
    "PermissionSetError",
    "RegistrationError",
    "ServiceError",
    "SignalWaitError",
    "StartError",
    "Step",
    "StopError",
    "WriteError",
]
