"""
HTTP server for the authors service using FastAPI.
Exposes the author endpoints under /api/v1/authors.
"""

import logging
from typing import Dict, List, Optional
from uuid import UUID

from fastapi import APIRouter, FastAPI

from bff_core.api.common import (
    HealthCheck,
    counted_route,
    install_error_handlers,
    install_request_logging,
    install_system_routes
)
from bff_core.errors import NotFoundError
from bff_core.infra.notifier import Notifier
from bff_core.telemetry.metrics import PrometheusMetricsSink

from ..domain.ports import AuthorService
from ..domain.schema import AuthorResponse, CreateAuthorCommand, to_author_response


logger = logging.getLogger(__name__)


class AuthorsAPI:
    """
    FastAPI application for the authors service.
    Lists, finds and creates authors and notifies about created ones.
    """

    def __init__(
        self,
        author_service: AuthorService,
        notifier: Notifier,
        metrics: PrometheusMetricsSink,
        legacy_error_status: bool = False,
        health_checks: Optional[Dict[str, HealthCheck]] = None,
        title: str = "Authors BFF",
        version: str = "1.0.0"
    ):
        """
        Initialize FastAPI application.

        Args:
            author_service: Service owning author data
            notifier: Publisher for create notifications
            metrics: Request and error counters
            legacy_error_status: Answer every error with 500
            health_checks: Extra readiness checks besides the author service
            title: API title
            version: API version
        """
        self.author_service = author_service
        self.notifier = notifier
        self.metrics = metrics

        self.app = FastAPI(
            title=title,
            version=version,
            description="Backend-for-frontend API for authors",
            docs_url="/docs",
            redoc_url="/redoc"
        )

        install_request_logging(self.app, metrics)
        self._setup_routes()
        install_error_handlers(self.app, metrics, legacy_error_status)

        checks = {"author_service": author_service.check_health}
        checks.update(health_checks or {})
        install_system_routes(self.app, "authors", metrics, checks)

    def _setup_routes(self) -> None:
        """Setup author routes."""
        router = APIRouter(
            prefix="/api/v1/authors",
            tags=["authors"],
            route_class=counted_route(self.metrics)
        )

        @router.get(
            "",
            response_model=List[AuthorResponse],
            summary="List Authors"
        )
        async def get_authors() -> List[AuthorResponse]:
            logger.info("Get authors")
            authors = await self.author_service.get_authors()
            return [to_author_response(author) for author in authors]

        @router.get(
            "/{author_id}",
            response_model=AuthorResponse,
            summary="Get Author"
        )
        async def get_by_id(author_id: UUID) -> AuthorResponse:
            logger.info(f"Find authors by {author_id}")
            author = await self.author_service.find_by_id(author_id)
            if author is None:
                raise NotFoundError("Author isn't found")
            return to_author_response(author)

        @router.post(
            "",
            response_model=AuthorResponse,
            summary="Create Author"
        )
        async def create_authors(command: CreateAuthorCommand) -> AuthorResponse:
            logger.info("Create authors")
            response = to_author_response(await self.author_service.create(command))

            # Never raises; failures are logged and counted by the notifier
            await self.notifier.notify(response)
            return response

        self.app.include_router(router)
