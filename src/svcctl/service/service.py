"""Service lifecycle: install, remove, start, stop and run."""

from __future__ import annotations

import contextlib
import logging
import os
import stat
import tempfile
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from svcctl.service.commands import CommandRunner, run_command
from svcctl.service.errors import (
    AlreadyInstalledError,
    CommandError,
    DeleteError,
    DeregistrationError,
    PathResolutionError,
    PermissionSetError,
    RegistrationError,
    Step,
    WriteError,
)
from svcctl.service.identity import ServiceIdentity, resolve_executable
from svcctl.service.platform import PlatformFingerprint, probe_platform, select_variant
from svcctl.service.runloop import Callback, RunLoop, Waiter, wait_for_signal
from svcctl.service.syslog import LogSink, ServiceLog, open_syslog
from svcctl.service.templates import render_script
from svcctl.service.variants import Variant, VariantDescriptor, describe_variant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstallResult:
    """Outcome of a successful install."""

    script_path: Path
    exec_path: str
    completed_steps: tuple[Step, ...]


@dataclass(frozen=True)
class ServiceStatus:
    """Installation status of a service."""

    name: str
    variant: Variant
    script_path: Path
    installed: bool
    script_mode: int | None = None


class Service:
    """A program managed by the host's init system.

    The init variant is chosen once, at construction, and the log sink is
    opened at the same time.

    Example:
        service = Service("mydaemon", "My Daemon", "Does things")
        service.install()
        service.start()
    """

    def __init__(
        self,
        name: str,
        display_name: str,
        description: str,
        exec_path: str = "",
        *,
        variant: Variant | None = None,
        fingerprint: PlatformFingerprint | None = None,
        root: Path | str = "/",
        log_sink: LogSink | None = None,
        log_sink_factory: Callable[[str], LogSink] = open_syslog,
        runner: CommandRunner = run_command,
    ):
        """Create a service and bind it to an init variant.

        Args:
            name: Service name, used for the script file and commands.
            display_name: Human readable name.
            description: One-line description.
            exec_path: Program to run. Empty means the running executable,
                resolved at install time.
            variant: Force a variant instead of detecting it.
            fingerprint: Platform facts to select from instead of probing.
            root: Filesystem root for the marker probe and the script.
            log_sink: Log sink to use instead of opening syslog.
            log_sink_factory: Opens the log sink when none is given.
            runner: Executes external commands.

        Raises:
            LogSinkUnavailableError: If the log sink cannot be opened.
        """
        self.identity = ServiceIdentity(name, display_name, description, exec_path)

        if variant is None:
            variant = select_variant(fingerprint or probe_platform(root))
        self.descriptor: VariantDescriptor = describe_variant(variant, name, root)

        self._log = ServiceLog(log_sink or log_sink_factory(name))
        self._runner = runner

    @property
    def name(self) -> str:
        return self.identity.name

    @property
    def variant(self) -> Variant:
        return self.descriptor.variant

    @property
    def script_path(self) -> Path:
        return self.descriptor.script_path

    @property
    def is_installed(self) -> bool:
        return os.path.lexists(self.script_path)

    def status(self) -> ServiceStatus:
        """Get installation status."""
        try:
            mode: int | None = stat.S_IMODE(os.lstat(self.script_path).st_mode)
        except FileNotFoundError:
            mode = None
        return ServiceStatus(
            name=self.name,
            variant=self.variant,
            script_path=self.script_path,
            installed=mode is not None,
            script_mode=mode,
        )

    def render_script(self, exec_path: str | None = None) -> str:
        """Render the control script without installing it.

        Raises:
            PathResolutionError: If the path is relative, or if no path is
                configured and the running executable cannot be resolved.
        """
        path = self._exec_path(exec_path)
        return render_script(
            self.descriptor.script_template, self.identity.resolved(path)
        )

    def _exec_path(self, override: str | None = None) -> str:
        """Pick the program path for the script, resolving it if unset."""
        path = override or self.identity.exec_path
        if not path:
            return resolve_executable()
        if not os.path.isabs(path):
            raise PathResolutionError(f"Executable path must be absolute: {path}")
        return path

    def install(self) -> InstallResult:
        """Write the control script and register it with the init system.

        Never overwrites an existing script.

        Raises:
            AlreadyInstalledError: If a script already exists.
            PathResolutionError: If the configured executable path is
                relative or the running executable cannot be resolved.
            WriteError: If the script cannot be written. Nothing is left behind.
            PermissionSetError: If the script mode cannot be set. The script
                remains on disk.
            RegistrationError: If the registration command fails. The script
                remains on disk.
        """
        path = self.script_path
        if self.is_installed:
            raise AlreadyInstalledError(f"Init script already exists: {path}")

        exec_path = self._exec_path()
        content = render_script(
            self.descriptor.script_template, self.identity.resolved(exec_path)
        )

        self._write_script(content)
        completed = [Step.WRITE_SCRIPT]
        logger.info("script_written: %s", path)

        try:
            os.chmod(path, self.descriptor.script_mode)
        except OSError as e:
            raise PermissionSetError(
                f"Cannot set mode {self.descriptor.script_mode:o} on {path}: {e}",
                completed,
            ) from e
        completed.append(Step.SET_PERMISSIONS)

        if self.descriptor.install_command:
            try:
                self._runner(self.descriptor.install_command)
            except CommandError as e:
                raise RegistrationError(
                    f"Registration failed: {e.message}", completed
                ) from e
            completed.append(Step.REGISTER)
            logger.info("service_registered: %s", self.name)

        return InstallResult(
            script_path=path,
            exec_path=exec_path,
            completed_steps=tuple(completed),
        )

    def _write_script(self, content: str) -> None:
        """Write the script via a temporary file linked into place."""
        path = self.script_path
        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            # link() refuses to replace a file created since the check
            os.link(tmp_name, path)
        except FileExistsError as e:
            raise AlreadyInstalledError(f"Init script already exists: {path}") from e
        except OSError as e:
            raise WriteError(f"Cannot write {path}: {e}") from e
        finally:
            if tmp_name is not None:
                with contextlib.suppress(FileNotFoundError):
                    os.unlink(tmp_name)

    def remove(self) -> tuple[Step, ...]:
        """Deregister the service and delete its control script.

        Returns:
            The completed steps.

        Raises:
            DeregistrationError: If the deregistration command fails. The
                script is left untouched.
            DeleteError: If the script cannot be deleted. When deregistration
                already succeeded the error is partial.
        """
        completed: list[Step] = []

        if self.descriptor.remove_command:
            try:
                self._runner(self.descriptor.remove_command)
            except CommandError as e:
                raise DeregistrationError(
                    f"Deregistration failed: {e.message}"
                ) from e
            completed.append(Step.DEREGISTER)
            logger.info("service_deregistered: %s", self.name)

        try:
            os.unlink(self.script_path)
        except OSError as e:
            raise DeleteError(
                f"Cannot delete {self.script_path}: {e}", completed
            ) from e
        completed.append(Step.DELETE_SCRIPT)
        logger.info("script_deleted: %s", self.script_path)
        return tuple(completed)

    def start(self) -> None:
        """Ask the init system to start the service.

        Raises:
            CommandError: If the start command fails.
        """
        self._runner(self.descriptor.start_command)

    def stop(self) -> None:
        """Ask the init system to stop the service.

        Raises:
            CommandError: If the stop command fails.
        """
        self._runner(self.descriptor.stop_command)

    def run(
        self,
        on_start: Callback,
        on_stop: Callback,
        *,
        waiter: Waiter = wait_for_signal,
    ) -> None:
        """Run the host program under the init system.

        Calls ``on_start``, blocks until SIGINT or SIGTERM, then calls
        ``on_stop``.

        Raises:
            SignalWaitError: If called off the main thread with the default
                waiter, or if waiting failed after a successful start.
            StartError: If ``on_start`` raised. ``on_stop`` is not called.
            StopError: If ``on_stop`` raised.
        """
        RunLoop(on_start, on_stop, waiter=waiter).run()

    def error(self, fmt: str, *args: object) -> None:
        """Send an error message to the system log."""
        self._log.error(fmt, *args)

    def warning(self, fmt: str, *args: object) -> None:
        """Send a warning message to the system log."""
        self._log.warning(fmt, *args)

    def info(self, fmt: str, *args: object) -> None:
        """Send an info message to the system log."""
        self._log.info(fmt, *args)
