"""Path management for svcctl.

User configuration lives under a single base directory, ~/.svcctl by
default. The base directory can be overridden with the SVCCTL_HOME
environment variable.
"""

import os
from functools import lru_cache
from pathlib import Path

ENV_VAR = "SVCCTL_HOME"

SYSTEM_CONFIG_PATH = Path("/etc/svcctl/config.toml")
LOCAL_CONFIG_NAME = "svcctl.toml"


@lru_cache(maxsize=1)
def get_svcctl_home() -> Path:
    """Get the base directory for svcctl user data.

    Resolution order:
    1. SVCCTL_HOME environment variable (if set)
    2. ~/.svcctl
    """
    if env_home := os.environ.get(ENV_VAR):
        return Path(env_home).expanduser().resolve()
    return Path.home() / ".svcctl"


def get_config_path() -> Path:
    """Get the user config file path."""
    return get_svcctl_home() / "config.toml"

