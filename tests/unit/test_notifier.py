"""Tests for bff_core/infra/notifier.py.

The notifier must publish exactly once per call and never raise.
"""

import json
import logging
import uuid
from unittest.mock import MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from authors_service.domain.schema import AuthorResponse
from books_service.domain.schema import BookResponse
from bff_core.infra.notifier import RedisNotifier, serialize_payload
from bff_core.infra.redis_client import RedisClient
from bff_core.telemetry.metrics import PrometheusMetricsSink

from ..utils import StubRedisClient, sample


@pytest.fixture
def author_response() -> AuthorResponse:
    return AuthorResponse(
        id=uuid.UUID("3f1c6a8e-2b7d-4c55-9a61-0d2f7c1e9b40"),
        first_name="Jorge",
        last_name="Amado",
        address="Salvador",
        language="pt"
    )


class TestSerializePayload:
    """Tests for the notification text format."""

    def test_uses_wire_names_and_two_space_indent(self, author_response) -> None:
        text = serialize_payload(author_response)

        assert text == (
            "{\n"
            '  "id": "3f1c6a8e-2b7d-4c55-9a61-0d2f7c1e9b40",\n'
            '  "firstName": "Jorge",\n'
            '  "lastName": "Amado",\n'
            '  "address": "Salvador",\n'
            '  "language": "pt"\n'
            "}"
        )

    def test_keeps_non_ascii_text(self) -> None:
        response = AuthorResponse(
            id=uuid.uuid4(),
            first_name="José",
            last_name="Saramago",
            address="Lanzarote",
            language="pt"
        )

        assert '"firstName": "José"' in serialize_payload(response)

    def test_book_numbers_stay_numbers(self) -> None:
        author_id = uuid.uuid4()
        response = BookResponse(id=uuid.uuid4(), author_id=author_id, pages=42, title="T")

        data = json.loads(serialize_payload(response))

        assert data["pages"] == 42
        assert data["authorId"] == str(author_id)


class TestRedisNotifier:
    """Tests for RedisNotifier.notify."""

    @pytest.mark.asyncio
    async def test_publishes_once_on_topic(self, author_response) -> None:
        redis_client = StubRedisClient()
        notifier = RedisNotifier(redis_client, "authors")

        assert await notifier.notify(author_response) is True

        redis_client.publish.assert_awaited_once_with(
            "authors", serialize_payload(author_response)
        )

    @pytest.mark.asyncio
    async def test_publish_failure_is_absorbed_logged_and_counted(
        self, author_response, caplog
    ) -> None:
        redis_client = StubRedisClient()
        redis_client.publish.side_effect = RedisConnectionError("connection refused")
        metrics = PrometheusMetricsSink("AuthorController", "AuthorService")
        notifier = RedisNotifier(redis_client, "authors", metrics=metrics)

        with caplog.at_level(logging.ERROR, logger="bff_core.infra.notifier"):
            assert await notifier.notify(author_response) is False

        assert redis_client.publish.await_count == 1
        assert sample(metrics, "notification_error_count_total") == 1
        record = next(r for r in caplog.records if r.getMessage() == "Push notification error")
        assert record.topic == "authors"
        assert "connection refused" in record.error

    @pytest.mark.asyncio
    async def test_serialization_failure_is_absorbed(self) -> None:
        redis_client = StubRedisClient()
        payload = MagicMock()
        payload.model_dump.side_effect = ValueError("not serializable")
        notifier = RedisNotifier(redis_client, "authors")

        assert await notifier.notify(payload) is False
        redis_client.publish.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unconnected_client_is_absorbed(self, author_response) -> None:
        notifier = RedisNotifier(RedisClient("redis://localhost:6379/0"), "authors")

        assert await notifier.notify(author_response) is False
