"""Shared fixtures for the BFF service tests.

The Redis client is replaced by a stub whose ``publish`` and ``ping`` are
AsyncMocks, so notifications can be asserted without a broker. Each test
gets its own metrics registry.
"""

from typing import Dict

import pytest
from fastapi.testclient import TestClient

from authors_service.api.http_server import AuthorsAPI
from authors_service.infra.memory_store import InMemoryAuthorService
from books_service.api.http_server import BooksAPI
from books_service.infra.memory_store import InMemoryBookService
from bff_core.infra.notifier import RedisNotifier
from bff_core.telemetry.metrics import PrometheusMetricsSink

from .utils import StubRedisClient


@pytest.fixture
def stub_redis() -> StubRedisClient:
    return StubRedisClient()


@pytest.fixture
def author_metrics() -> PrometheusMetricsSink:
    return PrometheusMetricsSink("AuthorController", "AuthorService")


@pytest.fixture
def book_metrics() -> PrometheusMetricsSink:
    return PrometheusMetricsSink("BookController", "BookService")


@pytest.fixture
def author_service() -> InMemoryAuthorService:
    return InMemoryAuthorService()


@pytest.fixture
def book_service() -> InMemoryBookService:
    return InMemoryBookService()


@pytest.fixture
def authors_api(author_service, stub_redis, author_metrics) -> AuthorsAPI:
    notifier = RedisNotifier(stub_redis, "authors", metrics=author_metrics)
    return AuthorsAPI(
        author_service=author_service,
        notifier=notifier,
        metrics=author_metrics,
        health_checks={"redis": stub_redis.ping}
    )


@pytest.fixture
def authors_client(authors_api) -> TestClient:
    return TestClient(authors_api.app)


@pytest.fixture
def books_api(book_service, stub_redis, book_metrics) -> BooksAPI:
    notifier = RedisNotifier(stub_redis, "books", metrics=book_metrics)
    return BooksAPI(
        book_service=book_service,
        notifier=notifier,
        metrics=book_metrics,
        health_checks={"redis": stub_redis.ping}
    )


@pytest.fixture
def books_client(books_api) -> TestClient:
    return TestClient(books_api.app)


@pytest.fixture
def author_payload() -> Dict[str, str]:
    return {
        "firstName": "A",
        "lastName": "B",
        "address": "X",
        "language": "en"
    }
