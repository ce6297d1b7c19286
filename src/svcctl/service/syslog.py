"""Forwarding of service messages to the OS system log."""

from __future__ import annotations

import logging
import logging.handlers
from typing import Protocol

from svcctl.service.errors import LogSinkUnavailableError

SYSLOG_ADDRESS = "/dev/log"


class LogSink(Protocol):
    """Destination for leveled service messages."""

    def log(self, level: int, message: str) -> None: ...


class _StrictSysLogHandler(logging.handlers.SysLogHandler):
    """SysLogHandler that raises emit failures instead of printing them."""

    def handleError(self, record: logging.LogRecord) -> None:  # noqa: N802
        raise


class SyslogSink:
    """Writes messages to syslog tagged with the service name."""

    def __init__(self, name: str, address: str = SYSLOG_ADDRESS):
        self._name = name
        handler: _StrictSysLogHandler | None = None
        try:
            handler = _StrictSysLogHandler(
                address=address,
                facility=logging.handlers.SysLogHandler.LOG_DAEMON,
            )
            # The handler ignores connection errors on creation
            if handler.socket is None:
                raise ConnectionError("not connected")
            handler.socket.getpeername()
        except OSError as e:
            if handler is not None:
                handler.close()
            raise LogSinkUnavailableError(
                f"Cannot open system log at {address}: {e}"
            ) from e
        handler.ident = f"{name}: "
        self._handler = handler

    def log(self, level: int, message: str) -> None:
        record = logging.LogRecord(
            name=self._name,
            level=level,
            pathname="",
            lineno=0,
            msg=message,
            args=None,
            exc_info=None,
        )
        try:
            self._handler.handle(record)
        except OSError as e:
            raise LogSinkUnavailableError(f"Cannot write to system log: {e}") from e


def open_syslog(name: str) -> LogSink:
    """Default log sink factory."""
    return SyslogSink(name)


class ServiceLog:
    """Leveled messages from a service, forwarded to a log sink.

    Messages use ``%``-style formatting. Sink failures propagate.
    """

    def __init__(self, sink: LogSink):
        self._sink = sink

    def _emit(self, level: int, fmt: str, args: tuple[object, ...]) -> None:
        message = fmt % args if args else fmt
        self._sink.log(level, message)

    def error(self, fmt: str, *args: object) -> None:
        self._emit(logging.ERROR, fmt, args)

    def warning(self, fmt: str, *args: object) -> None:
        self._emit(logging.WARNING, fmt, args)

    def info(self, fmt: str, *args: object) -> None:
        self._emit(logging.INFO, fmt, args)


class LoggerSink:
    """Forwards messages to a Python logger instead of syslog.

    Used where no system log socket is available.
    """

    def __init__(self, name: str):
        self._logger = logging.getLogger(f"svcctl.service.{name}")

    def log(self, level: int, message: str) -> None:
        self._logger.log(level, message)
