"""External command execution."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from typing import Protocol

from svcctl.service.errors import CommandError

logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    """Runs an argv to completion, raising CommandError on failure."""

    def __call__(self, argv: Sequence[str]) -> None: ...


def run_command(argv: Sequence[str]) -> None:
    """Run a command and wait for it to exit.

    Args:
        argv: Program and arguments.

    Raises:
        CommandError: If the command cannot be launched or exits non-zero.
    """
    if not argv:
        raise ValueError("Empty command")

    logger.debug("command_running: %s", " ".join(argv))
    try:
        result = subprocess.run(
            list(argv),
            capture_output=True,
            text=True,
        )
    except OSError as e:
        logger.debug("command_launch_failed: %s", e)
        raise CommandError(argv, stderr=str(e)) from e

    if result.returncode != 0:
        logger.debug("command_failed: %s -> %d", argv[0], result.returncode)
        raise CommandError(argv, result.returncode, result.stderr or "")
