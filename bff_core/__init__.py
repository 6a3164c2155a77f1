"""
Shared core for the Authors and Books BFF services.

Configuration, logging and metrics, the error taxonomy, Redis create
notifications and the downstream HTTP client live here; each service
package adds its own domain model and routes.
"""

from .errors import (
    ErrorKind,
    BffError,
    NotFoundError,
    ValidationFailedError,
    InternalError,
    DownstreamError
)
from .schema import CamelModel, HealthStatus
from .config import AppConfig, load_config

__version__ = "1.0.0"
__all__ = [
    "ErrorKind",
    "BffError",
    "NotFoundError",
    "ValidationFailedError",
    "InternalError",
    "DownstreamError",
    "CamelModel",
    "HealthStatus",
    "AppConfig",
    "load_config"
]
