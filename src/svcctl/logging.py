"""Logging configuration for svcctl.

Call configure_logging() once from entry points. Library modules only
create module loggers and never configure handlers themselves.

Logging Levels:
- DEBUG: Probes, command lines, callback failures before they are raised
- INFO: Lifecycle events (script written, service registered)
- WARNING: Partial failures reported by the CLI
- ERROR: Failures that abort a command

Messages sent with Service.error()/warning()/info() go to the OS system log
instead and are not affected by this configuration.
"""

import logging
import os

ENV_VAR = "SVCCTL_LOG_LEVEL"
DEFAULT_LEVEL = "WARNING"

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ComponentFormatter(logging.Formatter):
    """Formatter that extracts component name from logger path.

    - svcctl.service.platform -> service
    - svcctl.cli.app -> cli
    """

    def format(self, record: logging.LogRecord) -> str:
        parts = record.name.split(".")
        if len(parts) >= 2 and parts[0] == "svcctl":
            record.component = parts[1]
        else:
            record.component = parts[0]
        return super().format(record)


def resolve_level(level: str | None = None) -> int:
    """Resolve a level name, falling back to the environment then WARNING."""
    if level is None:
        level = os.environ.get(ENV_VAR, DEFAULT_LEVEL)
    level = level.upper()
    if level not in LEVELS:
        level = DEFAULT_LEVEL
    return getattr(logging, level)


def configure_logging(level: str | None = None, use_rich: bool = False) -> None:
    """Configure logging for svcctl.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
            If None, uses SVCCTL_LOG_LEVEL env var or WARNING.
        use_rich: Use Rich handler for colorful output.
    """
    log_level = resolve_level(level)

    if use_rich:
        from rich.logging import RichHandler

        handler: logging.Handler = RichHandler(
            rich_tracebacks=False,
            show_path=False,
            show_time=True,
            markup=False,
        )
        handler.setFormatter(ComponentFormatter("%(component)s | %(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%H:%M:%S",
            )
        )

    logging.basicConfig(
        level=log_level,
        handlers=[handler],
        force=True,
    )
