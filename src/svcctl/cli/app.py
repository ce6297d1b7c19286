"""Main CLI application."""

from typing import Annotated

import typer

from svcctl.cli.commands import service

app = typer.Typer(
    name="svcctl",
    help="svcctl - install and control upstart/chkconfig services",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug logging",
        ),
    ] = False,
) -> None:
    """Install and control init system services."""
    from svcctl.logging import configure_logging

    configure_logging("DEBUG" if verbose else None, use_rich=verbose)


service.register(app)
