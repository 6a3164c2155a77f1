"""Tests for bff_core/errors.py and the service_errors translation."""

import pytest
from fastapi import HTTPException

from bff_core.api.common import service_errors
from bff_core.errors import (
    BffError,
    DownstreamError,
    ErrorKind,
    InternalError,
    NotFoundError,
    ValidationFailedError
)


@pytest.mark.parametrize(
    "error_class, kind, status_code",
    [
        (NotFoundError, ErrorKind.NOT_FOUND, 404),
        (ValidationFailedError, ErrorKind.VALIDATION_FAILED, 422),
        (InternalError, ErrorKind.INTERNAL, 500),
        (DownstreamError, ErrorKind.INTERNAL, 500),
    ]
)
def test_each_variant_has_its_own_status(error_class, kind, status_code) -> None:
    error = error_class("message")

    assert isinstance(error, BffError)
    assert error.kind is kind
    assert error.status_code == status_code
    assert error.message == "message"


def test_service_errors_passes_bff_errors_through() -> None:
    with pytest.raises(NotFoundError):
        with service_errors():
            raise NotFoundError("Author isn't found")


def test_service_errors_wraps_other_exceptions() -> None:
    with pytest.raises(InternalError) as exc_info:
        with service_errors():
            raise KeyError("missing")

    assert exc_info.value.message == "'missing'"
    assert isinstance(exc_info.value.__cause__, KeyError)


def test_service_errors_uses_type_name_for_empty_message() -> None:
    with pytest.raises(InternalError) as exc_info:
        with service_errors():
            raise RuntimeError()

    assert exc_info.value.message == "RuntimeError"


def test_service_errors_leaves_http_errors_to_fastapi() -> None:
    with pytest.raises(HTTPException):
        with service_errors():
            raise HTTPException(status_code=404)
