"""Tests for init variant detection."""

import os
from pathlib import Path

import pytest

from svcctl.service.platform import (
    PlatformFingerprint,
    detect_variant,
    probe_platform,
    select_variant,
)
from svcctl.service.variants import Variant


class TestSelectVariant:
    """Tests for the pure selection function."""

    def test_marker_present_selects_chkconfig(self):
        fingerprint = PlatformFingerprint(has_redhat_release=True)
        assert select_variant(fingerprint) is Variant.CHKCONFIG

    def test_marker_absent_selects_upstart(self):
        fingerprint = PlatformFingerprint(has_redhat_release=False)
        assert select_variant(fingerprint) is Variant.UPSTART

    def test_deterministic(self):
        fingerprint = PlatformFingerprint(has_redhat_release=True)
        assert {select_variant(fingerprint) for _ in range(10)} == {
            Variant.CHKCONFIG
        }


class TestProbePlatform:
    """Tests for filesystem probing."""

    def test_marker_present(self, tmp_path: Path):
        (tmp_path / "etc").mkdir()
        (tmp_path / "etc" / "redhat-release").write_text("CentOS release 6.10\n")

        assert probe_platform(tmp_path) == PlatformFingerprint(True)
        assert detect_variant(tmp_path) is Variant.CHKCONFIG

    def test_marker_absent(self, tmp_path: Path):
        (tmp_path / "etc").mkdir()

        assert probe_platform(tmp_path) == PlatformFingerprint(False)
        assert detect_variant(tmp_path) is Variant.UPSTART

    def test_etc_is_not_a_directory(self, tmp_path: Path):
        (tmp_path / "etc").write_text("")
        assert probe_platform(tmp_path).has_redhat_release is False

    def test_other_errors_propagate(self, tmp_path: Path, monkeypatch):
        """Errors other than not-found are not treated as absence."""

        def denied(path, *args, **kwargs):
            raise PermissionError(13, "Permission denied", str(path))

        with monkeypatch.context() as m:
            m.setattr(os, "stat", denied)
            with pytest.raises(PermissionError):
                probe_platform(tmp_path)
