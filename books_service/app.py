"""
Main application module for the books BFF service.
"""

import asyncio

from fastapi import FastAPI

from bff_core.service import BffService, serve

from .api.http_server import BooksAPI
from .domain.ports import BookService
from .infra.http_store import HttpBookService
from .infra.memory_store import InMemoryBookService


class BooksBffService(BffService):
    """Books BFF composed from the shared service components."""

    service_name = "books"
    controller_name = "BookController"
    resource_service_name = "BookService"

    def build_resource_service(self) -> BookService:
        if self.downstream is None:
            return InMemoryBookService()
        return HttpBookService(self.downstream)

    def build_app(self) -> FastAPI:
        api = BooksAPI(
            book_service=self.resource_service,
            notifier=self.notifier,
            metrics=self.metrics,
            legacy_error_status=self.config.api.legacy_error_status,
            health_checks={"redis": self.redis_client.ping}
        )
        return api.app


def main() -> None:
    """Console entry point."""
    asyncio.run(serve(BooksBffService))


if __name__ == "__main__":
    main()
