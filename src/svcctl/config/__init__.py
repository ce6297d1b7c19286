"""Configuration module."""

from svcctl.config.loader import load_config
from svcctl.config.models import ConfigError, ServiceConfig, SvcctlConfig
from svcctl.config.paths import get_config_path, get_svcctl_home

__all__ = [
    "ConfigError",
    "ServiceConfig",
    "SvcctlConfig",
    "get_config_path",
    "get_svcctl_home",
    "load_config",
]
