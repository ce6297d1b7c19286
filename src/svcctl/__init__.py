"""svcctl - run a program as an upstart or chkconfig service."""

from svcctl.service import Service, ServiceError, Variant

__version__ = "0.1.0"

__all__ = ["Service", "ServiceError", "Variant", "__version__"]
