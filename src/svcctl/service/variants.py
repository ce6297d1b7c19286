"""Init system variants and their descriptors.

Two conventions are supported:
- upstart: job file in /etc/init, started with ``start``/``stop``
- chkconfig: System-V script in /etc/init.d, registered with ``chkconfig``
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from svcctl.service.templates import INIT_SCRIPT_TEMPLATE, UPSTART_TEMPLATE


class Variant(Enum):
    """Supported init system conventions."""

    UPSTART = "upstart"
    CHKCONFIG = "chkconfig"


@dataclass(frozen=True)
class VariantDescriptor:
    """How one init convention installs and controls a service."""

    variant: Variant
    script_path: Path
    script_template: str
    script_mode: int
    start_command: tuple[str, ...]
    stop_command: tuple[str, ...]
    install_command: tuple[str, ...] = ()
    remove_command: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.start_command or not self.stop_command:
            raise ValueError("start and stop commands are required")

    @property
    def requires_registration(self) -> bool:
        return bool(self.install_command)


def _upstart(name: str, root: Path) -> VariantDescriptor:
    return VariantDescriptor(
        variant=Variant.UPSTART,
        script_path=root / "etc" / "init" / f"{name}.conf",
        script_template=UPSTART_TEMPLATE,
        script_mode=0o644,
        start_command=("start", name),
        stop_command=("stop", name),
    )


def _chkconfig(name: str, root: Path) -> VariantDescriptor:
    return VariantDescriptor(
        variant=Variant.CHKCONFIG,
        script_path=root / "etc" / "init.d" / name,
        script_template=INIT_SCRIPT_TEMPLATE,
        script_mode=0o755,
        install_command=("chkconfig", "--add", name),
        remove_command=("chkconfig", "--del", name),
        start_command=("service", name, "start"),
        stop_command=("service", name, "stop"),
    )


_BUILDERS = {
    Variant.UPSTART: _upstart,
    Variant.CHKCONFIG: _chkconfig,
}


def describe_variant(
    variant: Variant, name: str, root: Path | str = "/"
) -> VariantDescriptor:
    """Build the descriptor for a service under the given variant.

    Args:
        variant: Init convention to describe.
        name: Service name, used for the script path and commands.
        root: Filesystem root the script path is placed under.

    Returns:
        The VariantDescriptor for this service.
    """
    return _BUILDERS[variant](name, Path(root))


def get_variant(name: str) -> Variant:
    """Look up a variant by name.

    Raises:
        ValueError: If the name is not a known variant.
    """
    try:
        return Variant(name)
    except ValueError:
        available = [v.value for v in Variant]
        raise ValueError(
            f"Unknown variant: {name}. Available: {available}"
        ) from None


__all__ = ["Variant", "VariantDescriptor", "describe_variant", "get_variant"]
