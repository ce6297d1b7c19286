"""CLI command modules."""

from svcctl.cli.commands import service

__all__ = ["service"]
