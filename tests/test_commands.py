"""Tests for external command execution."""

import sys

import pytest

from svcctl.service.commands import run_command
from svcctl.service.errors import CommandError


class TestRunCommand:
    """Tests for run_command()."""

    def test_success(self):
        run_command([sys.executable, "-c", "pass"])

    def test_nonzero_exit(self):
        script = "import sys; sys.stderr.write('nope'); sys.exit(3)"
        argv = [sys.executable, "-c", script]

        with pytest.raises(CommandError) as exc_info:
            run_command(argv)

        error = exc_info.value
        assert error.returncode == 3
        assert error.argv == tuple(argv)
        assert error.stderr == "nope"
        assert "exited with status 3" in str(error)

    def test_launch_failure(self):
        with pytest.raises(CommandError) as exc_info:
            run_command(["/nonexistent/svcctl-test-binary"])

        assert exc_info.value.returncode is None
        assert "Could not run" in str(exc_info.value)

    def test_empty_command(self):
        with pytest.raises(ValueError):
            run_command([])
