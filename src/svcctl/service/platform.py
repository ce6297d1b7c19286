"""Init variant detection.

Detection is a binary check: Red Hat family distributions ship
``/etc/redhat-release`` and use chkconfig, everything else is assumed to run
upstart. Probing the filesystem is kept apart from the decision so the
decision can be tested without touching the host.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from svcctl.service.variants import Variant

logger = logging.getLogger(__name__)

REDHAT_MARKER = Path("etc") / "redhat-release"


@dataclass(frozen=True)
class PlatformFingerprint:
    """Facts about the host that decide the init variant."""

    has_redhat_release: bool


def _marker_exists(path: Path) -> bool:
    try:
        os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return False
    return True


def probe_platform(root: Path | str = "/") -> PlatformFingerprint:
    """Inspect the filesystem under ``root``.

    Raises:
        OSError: For errors other than the marker being absent, e.g.
            permission denied.
    """
    marker = Path(root) / REDHAT_MARKER
    fingerprint = PlatformFingerprint(has_redhat_release=_marker_exists(marker))
    logger.debug("platform_probed: %s", fingerprint)
    return fingerprint


def select_variant(fingerprint: PlatformFingerprint) -> Variant:
    """Choose the init variant for a platform fingerprint."""
    if fingerprint.has_redhat_release:
        return Variant.CHKCONFIG
    return Variant.UPSTART


def detect_variant(root: Path | str = "/") -> Variant:
    """Probe the host and choose its init variant."""
    return select_variant(probe_platform(root))


__all__ = [
    "PlatformFingerprint",
    "REDHAT_MARKER",
    "detect_variant",
    "probe_platform",
    "select_variant",
]
