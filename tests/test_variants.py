"""Tests for variant descriptors."""

from pathlib import Path

import pytest

from svcctl.service.templates import INIT_SCRIPT_TEMPLATE, UPSTART_TEMPLATE
from svcctl.service.variants import (
    Variant,
    VariantDescriptor,
    describe_variant,
    get_variant,
)


class TestDescribeVariant:
    """Tests for describe_variant()."""

    def test_upstart(self):
        descriptor = describe_variant(Variant.UPSTART, "svc1")

        assert descriptor.variant is Variant.UPSTART
        assert descriptor.script_path == Path("/etc/init/svc1.conf")
        assert descriptor.script_template == UPSTART_TEMPLATE
        assert descriptor.script_mode == 0o644
        assert descriptor.install_command == ()
        assert descriptor.remove_command == ()
        assert descriptor.start_command == ("start", "svc1")
        assert descriptor.stop_command == ("stop", "svc1")
        assert descriptor.requires_registration is False

    def test_chkconfig(self):
        descriptor = describe_variant(Variant.CHKCONFIG, "svc1")

        assert descriptor.variant is Variant.CHKCONFIG
        assert descriptor.script_path == Path("/etc/init.d/svc1")
        assert descriptor.script_template == INIT_SCRIPT_TEMPLATE
        assert descriptor.script_mode == 0o755
        assert descriptor.install_command == ("chkconfig", "--add", "svc1")
        assert descriptor.remove_command == ("chkconfig", "--del", "svc1")
        assert descriptor.start_command == ("service", "svc1", "start")
        assert descriptor.stop_command == ("service", "svc1", "stop")
        assert descriptor.requires_registration is True

    def test_script_path_follows_name(self):
        a = describe_variant(Variant.CHKCONFIG, "alpha")
        b = describe_variant(Variant.CHKCONFIG, "beta")
        assert a.script_path != b.script_path
        assert a.script_path.name == "alpha"

    def test_custom_root(self, tmp_path: Path):
        descriptor = describe_variant(Variant.UPSTART, "svc1", root=tmp_path)
        assert descriptor.script_path == tmp_path / "etc" / "init" / "svc1.conf"

    def test_descriptor_is_immutable(self):
        descriptor = describe_variant(Variant.UPSTART, "svc1")
        with pytest.raises(AttributeError):
            descriptor.script_mode = 0o777  # type: ignore[misc]

    def test_start_and_stop_required(self):
        with pytest.raises(ValueError, match="required"):
            VariantDescriptor(
                variant=Variant.UPSTART,
                script_path=Path("/etc/init/x.conf"),
                script_template="",
                script_mode=0o644,
                start_command=(),
                stop_command=("stop", "x"),
            )


class TestGetVariant:
    """Tests for get_variant()."""

    def test_known_names(self):
        assert get_variant("upstart") is Variant.UPSTART
        assert get_variant("chkconfig") is Variant.CHKCONFIG

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown variant"):
            get_variant("systemd")
