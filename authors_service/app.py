"""
Main application module for the authors BFF service.
"""

import asyncio

from fastapi import FastAPI

from bff_core.service import BffService, serve

from .api.http_server import AuthorsAPI
from .domain.ports import AuthorService
from .infra.http_store import HttpAuthorService
from .infra.memory_store import InMemoryAuthorService


class AuthorsBffService(BffService):
    """Authors BFF composed from the shared service components."""

    service_name = "authors"
    controller_name = "AuthorController"
    resource_service_name = "AuthorService"

    def build_resource_service(self) -> AuthorService:
        if self.downstream is None:
            return InMemoryAuthorService()
        return HttpAuthorService(self.downstream)

    def build_app(self) -> FastAPI:
        api = AuthorsAPI(
            author_service=self.resource_service,
            notifier=self.notifier,
            metrics=self.metrics,
            legacy_error_status=self.config.api.legacy_error_status,
            health_checks={"redis": self.redis_client.ping}
        )
        return api.app


def main() -> None:
    """Console entry point."""
    asyncio.run(serve(AuthorsBffService))


if __name__ == "__main__":
    main()
