"""Shared test fixtures and fakes."""

import logging
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

import pytest

from svcctl.config.paths import get_svcctl_home
from svcctl.service import CommandError, Service, Variant

# =============================================================================
# Fakes
# =============================================================================


class FakeRunner:
    """Records commands and simulates chkconfig registration state."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []
        self.registered: set[str] = set()
        self.failures: dict[tuple[str, ...], int | None] = {}

    def fail(self, argv: Sequence[str], returncode: int | None = 1) -> None:
        """Make a command fail. A None returncode means it cannot launch."""
        self.failures[tuple(argv)] = returncode

    def __call__(self, argv: Sequence[str]) -> None:
        argv = tuple(argv)
        self.calls.append(argv)
        if argv in self.failures:
            raise CommandError(argv, self.failures[argv], "simulated failure")
        if argv[:2] == ("chkconfig", "--add"):
            self.registered.add(argv[2])
        elif argv[:2] == ("chkconfig", "--del"):
            self.registered.discard(argv[2])


class CapturingSink:
    """Log sink that keeps messages in memory."""

    def __init__(self) -> None:
        self.records: list[tuple[int, str]] = []

    def log(self, level: int, message: str) -> None:
        self.records.append((level, message))


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> Iterator[Path]:
    """Point SVCCTL_HOME at a temp dir and clear root overrides."""
    home = tmp_path / "svcctl-home"
    monkeypatch.setenv("SVCCTL_HOME", str(home))
    monkeypatch.delenv("SVCCTL_ROOT", raising=False)
    get_svcctl_home.cache_clear()
    yield home
    get_svcctl_home.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo configure_logging() calls made by tests and CLI commands."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def root(tmp_path: Path) -> Path:
    """Fake filesystem root with both init directories."""
    root = tmp_path / "root"
    (root / "etc" / "init").mkdir(parents=True)
    (root / "etc" / "init.d").mkdir(parents=True)
    return root


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def sink() -> CapturingSink:
    return CapturingSink()


@pytest.fixture
def make_service(
    root: Path, runner: FakeRunner, sink: CapturingSink
) -> Callable[..., Service]:
    """Factory for services wired to the fake root, runner and sink."""

    def factory(
        variant: Variant = Variant.UPSTART,
        name: str = "svc1",
        exec_path: str = "/usr/bin/svc1",
    ) -> Service:
        return Service(
            name,
            "Svc One",
            "d",
            exec_path,
            variant=variant,
            root=root,
            log_sink=sink,
            runner=runner,
        )

    return factory
