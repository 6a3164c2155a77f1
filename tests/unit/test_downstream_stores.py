"""Tests for the downstream HTTP client and the HTTP-backed resource services.

The downstream service is simulated with httpx.MockTransport.
"""

import json
import uuid

import httpx
import pytest

from authors_service.domain.schema import CreateAuthorCommand
from authors_service.infra.http_store import HttpAuthorService
from books_service.domain.schema import CreateBookCommand
from books_service.infra.http_store import HttpBookService
from bff_core.errors import DownstreamError
from bff_core.infra.downstream import DownstreamClient


AUTHOR_ID = uuid.UUID("8d2b3a0e-51f4-4c1b-9a7e-6f0c2d9e1a11")
AUTHOR = {
    "id": str(AUTHOR_ID),
    "firstName": "Ursula",
    "lastName": "Le Guin",
    "address": "Portland",
    "language": "en",
    "createdAt": "2024-01-01T00:00:00Z"
}


def make_client(handler) -> DownstreamClient:
    return DownstreamClient(
        base_url="http://store:8080/api/v1/",
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler))
    )


class TestDownstreamClient:
    """Tests for DownstreamClient status and transport handling."""

    @pytest.mark.asyncio
    async def test_get_json_joins_base_url_and_path(self) -> None:
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, json=[])

        client = make_client(handler)

        assert await client.get_json("/authors") == []
        assert seen == ["http://store:8080/api/v1/authors"]
        await client.close()

    @pytest.mark.asyncio
    async def test_find_json_returns_none_on_404(self) -> None:
        client = make_client(lambda request: httpx.Response(404))

        assert await client.find_json("/authors/x") is None
        await client.close()

    @pytest.mark.asyncio
    async def test_server_error_raises_downstream_error(self) -> None:
        client = make_client(lambda request: httpx.Response(503, text="busy"))

        with pytest.raises(DownstreamError):
            await client.get_json("/authors")
        await client.close()

    @pytest.mark.asyncio
    async def test_get_json_treats_404_as_error(self) -> None:
        client = make_client(lambda request: httpx.Response(404))

        with pytest.raises(DownstreamError):
            await client.get_json("/authors")
        await client.close()

    @pytest.mark.asyncio
    async def test_transport_error_raises_downstream_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        client = make_client(handler)

        with pytest.raises(DownstreamError):
            await client.post_json("/authors", {})
        assert await client.check_health() is False
        await client.close()

    @pytest.mark.asyncio
    async def test_invalid_json_raises_downstream_error(self) -> None:
        client = make_client(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(DownstreamError):
            await client.get_json("/authors")
        await client.close()


class TestHttpAuthorService:
    """Tests for HttpAuthorService."""

    @pytest.mark.asyncio
    async def test_get_authors_parses_camel_case_and_ignores_unknown_fields(self) -> None:
        service = HttpAuthorService(make_client(lambda request: httpx.Response(200, json=[AUTHOR])))

        authors = await service.get_authors()

        assert len(authors) == 1
        assert authors[0].id == AUTHOR_ID
        assert authors[0].last_name == "Le Guin"

    @pytest.mark.asyncio
    async def test_find_by_id_requests_item_path(self) -> None:
        paths = []

        def handler(request: httpx.Request) -> httpx.Response:
            paths.append(request.url.path)
            return httpx.Response(200, json=AUTHOR)

        service = HttpAuthorService(make_client(handler))

        author = await service.find_by_id(AUTHOR_ID)

        assert author.first_name == "Ursula"
        assert paths == [f"/api/v1/authors/{AUTHOR_ID}"]

    @pytest.mark.asyncio
    async def test_find_by_id_missing(self) -> None:
        service = HttpAuthorService(make_client(lambda request: httpx.Response(404)))

        assert await service.find_by_id(AUTHOR_ID) is None

    @pytest.mark.asyncio
    async def test_create_posts_camel_case_command(self) -> None:
        bodies = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(201, json=AUTHOR)

        service = HttpAuthorService(make_client(handler))
        command = CreateAuthorCommand(
            first_name="Ursula", last_name="Le Guin", address="Portland", language="en"
        )

        author = await service.create(command)

        assert author.id == AUTHOR_ID
        assert bodies == [{
            "firstName": "Ursula",
            "lastName": "Le Guin",
            "address": "Portland",
            "language": "en"
        }]

    @pytest.mark.asyncio
    async def test_malformed_author_raises_downstream_error(self) -> None:
        service = HttpAuthorService(
            make_client(lambda request: httpx.Response(200, json=[{"id": "nope"}]))
        )

        with pytest.raises(DownstreamError):
            await service.get_authors()

    @pytest.mark.asyncio
    async def test_non_list_collection_raises_downstream_error(self) -> None:
        service = HttpAuthorService(make_client(lambda request: httpx.Response(200, json=AUTHOR)))

        with pytest.raises(DownstreamError):
            await service.get_authors()


class TestHttpBookService:
    """Tests for HttpBookService."""

    @pytest.mark.asyncio
    async def test_create_and_parse_book(self) -> None:
        book_id = uuid.uuid4()
        bodies = []

        def handler(request: httpx.Request) -> httpx.Response:
            body = json.loads(request.content)
            bodies.append(body)
            return httpx.Response(200, json=dict(body, id=str(book_id)))

        service = HttpBookService(make_client(handler))
        command = CreateBookCommand(author_id=AUTHOR_ID, pages=250, title="The Dispossessed")

        book = await service.create(command)

        assert book.id == book_id
        assert book.author_id == AUTHOR_ID
        assert book.pages == 250
        assert bodies[0] == {
            "authorId": str(AUTHOR_ID),
            "pages": 250,
            "title": "The Dispossessed"
        }

    @pytest.mark.asyncio
    async def test_get_books_preserves_downstream_order(self) -> None:
        books = [
            {"id": str(uuid.uuid4()), "authorId": str(AUTHOR_ID), "pages": n, "title": f"B{n}"}
            for n in (3, 1, 2)
        ]
        service = HttpBookService(make_client(lambda request: httpx.Response(200, json=books)))

        result = await service.get_books()

        assert [book.pages for book in result] == [3, 1, 2]
