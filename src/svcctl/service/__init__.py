"""Init system service management for Linux.

Supports two init conventions:
- upstart job files in /etc/init
- System-V scripts in /etc/init.d registered with chkconfig

Example:
    from svcctl.service import Service

    service = Service("mydaemon", "My Daemon", "Does things")
    service.install()
    service.start()

    # In the daemon itself:
    service.run(on_start, on_stop)
"""

from svcctl.service.errors import (
    AlreadyInstalledError,
    CommandError,
    DeleteError,
    DeregistrationError,
    LogSinkUnavailableError,
    PathResolutionError,
    PermissionSetError,
    RegistrationError,
    ServiceError,
    SignalWaitError,
    StartError,
    Step,
    StopError,
    WriteError,
)
from svcctl.service.identity import ServiceIdentity, resolve_executable
from svcctl.service.platform import (
    PlatformFingerprint,
    detect_variant,
    probe_platform,
    select_variant,
)
from svcctl.service.runloop import RunLoop, RunState, wait_for_signal
from svcctl.service.service import InstallResult, Service, ServiceStatus
from svcctl.service.syslog import (
    LogSink,
    LoggerSink,
    ServiceLog,
    SyslogSink,
    open_syslog,
)
from svcctl.service.templates import render_script
from svcctl.service.variants import (
    Variant,
    VariantDescriptor,
    describe_variant,
    get_variant,
)

__all__ = [
    "AlreadyInstalledError",
    "CommandError",
    "DeleteError",
    "DeregistrationError",
    "InstallResult",
    "LogSink",
    "LogSinkUnavailableError",
    "LoggerSink",
    "PathResolutionError",
    "PermissionSetError",
    "PlatformFingerprint",
    "RegistrationError",
    "RunLoop",
    "RunState",
    "Service",
    "ServiceError",
    "ServiceIdentity",
    "ServiceLog",
    "ServiceStatus",
    "SignalWaitError",
    "StartError",
    "Step",
    "StopError",
    "SyslogSink",
    "Variant",
    "VariantDescriptor",
    "WriteError",
    "describe_variant",
    "detect_variant",
    "get_variant",
    "open_syslog",
    "probe_platform",
    "render_script",
    "resolve_executable",
    "select_variant",
    "wait_for_signal",
]
