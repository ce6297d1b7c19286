"""Service management commands."""

from collections.abc import Callable
from pathlib import Path
from typing import Annotated, TypeVar

import typer

from svcctl.cli.console import console, dim, error, success, warning
from svcctl.config import ConfigError, load_config
from svcctl.service import (
    LoggerSink,
    Service,
    ServiceError,
    get_variant,
    open_syslog,
)
from svcctl.service.commands import run_command

T = TypeVar("T")

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to configuration file"),
]
NameOption = Annotated[
    str | None,
    typer.Option("--name", "-n", help="Service name"),
]
DisplayNameOption = Annotated[
    str | None,
    typer.Option("--display-name", help="Human readable service name"),
]
DescriptionOption = Annotated[
    str | None,
    typer.Option("--description", help="One-line service description"),
]
ExecPathOption = Annotated[
    str | None,
    typer.Option("--exec-path", help="Program to run (default: this executable)"),
]
RootOption = Annotated[
    Path | None,
    typer.Option("--root", help="Filesystem root for init scripts"),
]
VariantOption = Annotated[
    str | None,
    typer.Option("--variant", help="Init variant: upstart or chkconfig"),
]


def _build_service(
    config_path: Path | None,
    name: str | None,
    display_name: str | None,
    description: str | None,
    exec_path: str | None,
    root: Path | None,
    variant: str | None,
) -> Service:
    """Build a Service from config file values and command line flags.

    Flags take precedence over the [service] section of the config.
    """
    config = load_config(config_path)
    base = config.service
    if base is not None and name is not None and name != base.name:
        # A different service; config identity does not apply
        base = None

    name = name or (base.name if base else None)
    if not name:
        raise ConfigError(
            "No service name given. Use --name or set [service] name in config."
        )

    if description is None:
        description = base.description if base else ""

    variant_name = variant or config.variant
    return Service(
        name,
        display_name or (base.display_name if base else "") or name,
        description,
        exec_path or (base.exec_path if base else ""),
        variant=get_variant(variant_name) if variant_name else None,
        root=root or config.root,
        log_sink=None if config.syslog else LoggerSink(name),
        log_sink_factory=open_syslog,
        runner=run_command,
    )


def _run_service_action(action: Callable[[], T]) -> T:
    """Run a lifecycle action and map failures to exit codes.

    Partial failures exit with status 2, other failures with status 1.
    """
    try:
        return action()
    except ServiceError as e:
        if e.partial:
            warning(e.message)
            steps = ", ".join(step.value for step in e.completed_steps)
            dim(f"Completed before failure: {steps}")
            raise typer.Exit(2) from e
        error(e.message)
        raise typer.Exit(1) from e
    except ValueError as e:
        error(str(e))
        raise typer.Exit(1) from e


def _load_service(
    config_path: Path | None,
    name: str | None,
    display_name: str | None,
    description: str | None,
    exec_path: str | None,
    root: Path | None,
    variant: str | None,
) -> Service:
    """Build the service, reporting setup errors."""
    try:
        return _build_service(
            config_path, name, display_name, description, exec_path, root, variant
        )
    except (ConfigError, ServiceError, FileNotFoundError, ValueError) as e:
        error(str(e))
        raise typer.Exit(1) from e
    except OSError as e:
        error(f"Cannot inspect host: {e}")
        raise typer.Exit(1) from e


def register(app: typer.Typer) -> None:
    """Register service commands."""

    @app.command("install")
    def service_install(
        config: ConfigOption = None,
        name: NameOption = None,
        display_name: DisplayNameOption = None,
        description: DescriptionOption = None,
        exec_path: ExecPathOption = None,
        root: RootOption = None,
        variant: VariantOption = None,
    ) -> None:
        """Install the service's init script."""
        service = _load_service(
            config, name, display_name, description, exec_path, root, variant
        )
        result = _run_service_action(service.install)
        success(f"Installed {service.name} ({service.variant.value})")
        dim(f"{result.script_path} -> {result.exec_path}")

    @app.command("remove")
    def service_remove(
        config: ConfigOption = None,
        name: NameOption = None,
        root: RootOption = None,
        variant: VariantOption = None,
    ) -> None:
        """Deregister the service and delete its init script."""
        service = _load_service(config, name, None, None, None, root, variant)
        _run_service_action(service.remove)
        success(f"Removed {service.name}")

    @app.command("start")
    def service_start(
        config: ConfigOption = None,
        name: NameOption = None,
        root: RootOption = None,
        variant: VariantOption = None,
    ) -> None:
        """Start the service through the init system."""
        service = _load_service(config, name, None, None, None, root, variant)
        _run_service_action(service.start)
        success(f"Started {service.name}")

    @app.command("stop")
    def service_stop(
        config: ConfigOption = None,
        name: NameOption = None,
        root: RootOption = None,
        variant: VariantOption = None,
    ) -> None:
        """Stop the service through the init system."""
        service = _load_service(config, name, None, None, None, root, variant)
        _run_service_action(service.stop)
        success(f"Stopped {service.name}")

    @app.command("status")
    def service_status(
        config: ConfigOption = None,
        name: NameOption = None,
        root: RootOption = None,
        variant: VariantOption = None,
    ) -> None:
        """Show where the service's init script lives and whether it exists."""
        from svcctl.cli.console import create_table

        service = _load_service(config, name, None, None, None, root, variant)
        status = service.status()

        table = create_table(
            "Service Status",
            [
                ("Property", "cyan"),
                ("Value", ""),
            ],
        )
        table.add_row("Name", status.name)
        table.add_row("Variant", status.variant.value)
        table.add_row("Script", str(status.script_path))
        if status.installed:
            table.add_row("Installed", "[green]yes[/green]")
        else:
            table.add_row("Installed", "[yellow]no[/yellow]")
        if status.script_mode is not None:
            expected = service.descriptor.script_mode
            mode = f"{status.script_mode:o}"
            if status.script_mode != expected:
                mode += f" [red](expected {expected:o})[/red]"
            table.add_row("Mode", mode)

        console.print(table)

    @app.command("render")
    def service_render(
        config: ConfigOption = None,
        name: NameOption = None,
        display_name: DisplayNameOption = None,
        description: DescriptionOption = None,
        exec_path: ExecPathOption = None,
        root: RootOption = None,
        variant: VariantOption = None,
    ) -> None:
        """Print the init script that install would write."""
        service = _load_service(
            config, name, display_name, description, exec_path, root, variant
        )
        script = _run_service_action(service.render_script)
        typer.echo(script, nl=False)
