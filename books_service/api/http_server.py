"""
HTTP server for the books service using FastAPI.
Exposes the book endpoints under /api/v1/books.
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

from ..domain.ports import BookService
from ..domain.schema import BookResponse, CreateBookCommand, to_book_response


logger = logging.getLogger(__name__)


class BooksAPI:
    """
    FastAPI application for the books service.
    Lists, finds and creates books and notifies about created ones.
    """

    def __init__(
        self,
        book_service: BookService,
        notifier: Notifier,
        metrics: PrometheusMetricsSink,
        legacy_error_status: bool = False,
        health_checks: Optional[Dict[str, HealthCheck]] = None,
        title: str = "Books BFF",
        version: str = "1.0.0"
    ):
        """
        Initialize FastAPI application.

        Args:
            book_service: Service owning book data
            notifier: Publisher for create notifications
            metrics: Request and error counters
            legacy_error_status: Answer every error with 500
            health_checks: Extra readiness checks besides the book service
            title: API title
            version: API version
        """
        self.book_service = book_service
        self.notifier = notifier
        self.metrics = metrics

        self.app = FastAPI(
            title=title,
            version=version,
            description="Backend-for-frontend API for books",
            docs_url="/docs",
            redoc_url="/redoc"
        )

        install_request_logging(self.app, metrics)
        self._setup_routes()
        install_error_handlers(self.app, metrics, legacy_error_status)

        checks = {"book_service": book_service.check_health}
        checks.update(health_checks or {})
        install_system_routes(self.app, "books", metrics, checks)

    def _setup_routes(self) -> None:
        """Setup book routes."""
        router = APIRouter(
            prefix="/api/v1/books",
            tags=["books"],
            route_class=counted_route(self.metrics)
        )

        @router.get(
            "",
            response_model=List[BookResponse],
            summary="List Books"
        )
        async def get_books() -> List[BookResponse]:
            logger.info("Get book list")
            books = await self.book_service.get_books()
            return [to_book_response(book) for book in books]

        @router.get(
            "/{book_id}",
            response_model=BookResponse,
            summary="Get Book"
        )
        async def get_by_id(book_id: UUID) -> BookResponse:
            logger.info(f"Find book by id {book_id}")
            book = await self.book_service.find_by_id(book_id)
            if book is None:
                raise NotFoundError("Book isn't found")
            return to_book_response(book)

        @router.post(
            "",
            response_model=BookResponse,
            summary="Create Book"
        )
        async def create_books(command: CreateBookCommand) -> BookResponse:
            logger.info("Create books")
            response = to_book_response(await self.book_service.create(command))

            await self.notifier.notify(response)
            return response

        self.app.include_router(router)
