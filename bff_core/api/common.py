"""
HTTP plumbing shared by the BFF services: request logging, error
translation, and the health/metrics routes.
"""

import logging
import time
from contextlib import contextmanager
from typing import Awaitable, Callable, Dict, Iterator, Optional, Type

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse, Response
from fastapi.routing import APIRoute
from prometheus_client import CONTENT_TYPE_LATEST
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..errors import BffError, InternalError, ValidationFailedError
from ..schema import HealthStatus
from ..telemetry.logger import correlation_id_var, new_correlation_id
from ..telemetry.metrics import MetricsSink, PrometheusMetricsSink


logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"

HealthCheck = Callable[[], Awaitable[bool]]


@contextmanager
def service_errors() -> Iterator[None]:
    """
    Wrap anything raised in the block as InternalError.

    BffError and the HTTP/validation errors FastAPI answers itself pass through.
    """
    try:
        yield
    except (BffError, StarletteHTTPException, RequestValidationError):
        raise
    except Exception as e:
        raise InternalError(str(e) or type(e).__name__) from e


def counted_route(metrics: MetricsSink) -> Type[APIRoute]:
    """
    Route class for resource endpoints.

    The request counter is incremented before the body is read, so malformed
    bodies are counted too, and failures of the endpoint are turned into
    InternalError.
    """

    class CountedRoute(APIRoute):
        def get_route_handler(self) -> Callable[[Request], Awaitable[Response]]:
            handler = super().get_route_handler()

            async def count_request(request: Request) -> Response:
                metrics.increment_request()
                with service_errors():
                    return await handler(request)

            return count_request

    return CountedRoute


def describe_validation_errors(exc: RequestValidationError) -> str:
    """Flatten FastAPI validation errors into one readable line."""
    parts = []
    for error in exc.errors():
        if error.get("type") == "json_invalid":
            parts.append("Malformed JSON body")
            continue
        location = ".".join(
            str(part) for part in error.get("loc", ()) if part != "body"
        )
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


def install_request_logging(app: FastAPI, metrics: MetricsSink) -> None:
    """Log every request with a correlation ID and record its duration."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        correlation_id = request.headers.get(CORRELATION_HEADER) or new_correlation_id()
        token = correlation_id_var.set(correlation_id)
        start_time = time.perf_counter()

        try:
            logger.info(
                f"Request started: {request.method} {request.url.path}",
                extra={
                    "component": "http_server",
                    "method": request.method,
                    "path": request.url.path,
                    "client_ip": request.client.host if request.client else "unknown"
                }
            )

            response = await call_next(request)

            elapsed = time.perf_counter() - start_time
            route = request.scope.get("route")
            uri = getattr(route, "path", None) or "UNKNOWN"
            metrics.observe_request_duration(
                request.method, uri, response.status_code, elapsed
            )

            logger.info(
                f"Request completed: {response.status_code}",
                extra={
                    "component": "http_server",
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "elapsed_ms": round(elapsed * 1000, 2)
                }
            )

            response.headers[CORRELATION_HEADER] = correlation_id
            return response
        finally:
            correlation_id_var.reset(token)


def install_error_handlers(
    app: FastAPI,
    metrics: MetricsSink,
    legacy_error_status: bool = False
) -> None:
    """
    Answer every failure with "Error: <message>" as plain text.

    Args:
        app: Application to install the handlers on
        metrics: Sink whose error counter is incremented once per failure
        legacy_error_status: Answer every error with 500
    """

    async def bff_error_handler(request: Request, exc: BffError) -> PlainTextResponse:
        metrics.increment_error()
        status_code = 500 if legacy_error_status else exc.status_code

        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            f"Request failed: {exc.message}",
            exc_info=exc.__cause__ is not None,
            extra={
                "component": "http_server",
                "method": request.method,
                "path": request.url.path,
                "error_kind": exc.kind.value,
                "status_code": status_code
            }
        )

        return PlainTextResponse(f"Error: {exc.message}", status_code=status_code)

    async def validation_error_handler(
        request: Request,
        exc: RequestValidationError
    ) -> PlainTextResponse:
        return await bff_error_handler(
            request, ValidationFailedError(describe_validation_errors(exc))
        )

    async def unhandled_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
        error = InternalError(str(exc) or type(exc).__name__)
        error.__cause__ = exc
        return await bff_error_handler(request, error)

    app.add_exception_handler(BffError, bff_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


def install_system_routes(
    app: FastAPI,
    service_name: str,
    metrics: PrometheusMetricsSink,
    health_checks: Optional[Dict[str, HealthCheck]] = None
) -> None:
    """
    Add /healthz, /readyz and /metrics.

    Args:
        app: Application to add the routes to
        service_name: Name reported by the health endpoints
        metrics: Sink whose registry is exposed on /metrics
        health_checks: Named readiness checks, each returning True when healthy
    """
    checks_to_run = dict(health_checks or {})

    @app.get(
        "/healthz",
        response_model=dict,
        summary="Health Check",
        description="Basic health check endpoint"
    )
    async def health_check() -> dict:
        """Basic health check - always returns OK if service is running."""
        return {
            "status": "ok",
            "service": service_name,
            "timestamp": time.time()
        }

    @app.get(
        "/readyz",
        response_model=HealthStatus,
        summary="Readiness Check",
        description="Readiness check including dependencies"
    )
    async def readiness_check() -> HealthStatus:
        """Run every readiness check; 503 if any of them fails."""
        checks = {}
        for name, check in checks_to_run.items():
            try:
                checks[name] = "ok" if await check() else "failed"
            except Exception as e:
                logger.warning(f"Readiness check {name} raised: {e}")
                checks[name] = f"error_{e}"

        status = "healthy" if all(v == "ok" for v in checks.values()) else "unhealthy"
        if status != "healthy":
            logger.warning(
                f"Service not ready: {status}",
                extra={"component": "http_server", "checks": checks}
            )
            raise HTTPException(
                status_code=503,
                detail=f"Service not ready: {checks}"
            )

        return HealthStatus(status=status, service=service_name, checks=checks)

    @app.get(
        "/metrics",
        summary="Metrics",
        description="Prometheus metrics"
    )
    async def metrics_endpoint() -> Response:
        return Response(content=metrics.render(), media_type=CONTENT_TYPE_LATEST)
