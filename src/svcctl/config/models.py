"""Configuration models using Pydantic."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, field_validator, model_validator


class ConfigError(Exception):
    """Configuration error."""

    pass


class ServiceConfig(BaseModel):
    """Identity of the service to manage."""

    name: str
    display_name: str = ""
    description: str = ""
    # Empty = the running executable, resolved at install time
    exec_path: str = ""

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        if not value or "/" in value or any(c.isspace() for c in value):
            raise ValueError("name must be non-empty without '/' or whitespace")
        return value

    @model_validator(mode="after")
    def _default_display_name(self) -> "ServiceConfig":
        if not self.display_name:
            self.display_name = self.name
        return self


class SvcctlConfig(BaseModel):
    """Root configuration model."""

    service: ServiceConfig | None = None
    # Filesystem root for the variant probe and control scripts
    root: Path = Path("/")
    # Skip detection and use this variant
    variant: Literal["upstart", "chkconfig"] | None = None
    # Open the system log for the service; disable where /dev/log is missing
    syslog: bool = True
