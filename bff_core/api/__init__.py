"""
API layer shared by the BFF services.

Contains middleware, error translation and system endpoints that every
service installs on its FastAPI application.
"""

from .common import (
    service_errors,
    counted_route,
    install_request_logging,
    install_error_handlers,
    install_system_routes,
    CORRELATION_HEADER
)

__all__ = [
    "service_errors",
    "counted_route",
    "install_request_logging",
    "install_error_handlers",
    "install_system_routes",
    "CORRELATION_HEADER"
]
