"""
Error taxonomy shared by the BFF services.
Every failure that reaches the HTTP layer is one of these variants.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of failure visible to API clients."""
    NOT_FOUND = "not_found"
    VALIDATION_FAILED = "validation_failed"
    INTERNAL = "internal"


class BffError(Exception):
    """Base class for errors mapped to an HTTP response."""
    kind: ErrorKind = ErrorKind.INTERNAL
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(BffError):
    """Raised when a requested resource does not exist."""
    kind = ErrorKind.NOT_FOUND
    status_code = 404


class ValidationFailedError(BffError):
    """Raised when request input cannot be turned into a command."""
    kind = ErrorKind.VALIDATION_FAILED
    status_code = 422


class InternalError(BffError):
    """Raised for any other failure while handling a request."""
    kind = ErrorKind.INTERNAL
    status_code = 500


class DownstreamError(InternalError):
    """Raised when the downstream resource service call fails."""
    pass
