"""
BookService implementation delegating to a downstream HTTP service.
"""

from typing import List, Optional
from uuid import UUID

from pydantic import ValidationError

from bff_core.errors import DownstreamError
from bff_core.infra.downstream import DownstreamClient

from ..domain.ports import BookService
from ..domain.schema import Book, CreateBookCommand


class HttpBookService(BookService):
    """
    Reads and creates books through the downstream service's REST API.
    """

    def __init__(self, downstream: DownstreamClient, resource_path: str = "/books"):
        self.downstream = downstream
        self.resource_path = resource_path

    async def get_books(self) -> List[Book]:
        data = await self.downstream.get_json(self.resource_path)
        if not isinstance(data, list):
            raise DownstreamError("Resource service returned a non-list book collection")
        return [self._parse(item) for item in data]

    async def find_by_id(self, book_id: UUID) -> Optional[Book]:
        data = await self.downstream.find_json(f"{self.resource_path}/{book_id}")
        if data is None:
            return None
        return self._parse(data)

    async def create(self, command: CreateBookCommand) -> Book:
        data = await self.downstream.post_json(
            self.resource_path,
            command.model_dump(mode="json", by_alias=True)
        )
        return self._parse(data)

    async def check_health(self) -> bool:
        return await self.downstream.check_health()

    @staticmethod
    def _parse(data) -> Book:
        try:
            return Book.model_validate(data)
        except ValidationError as e:
            raise DownstreamError(f"Resource service returned an invalid book: {e}") from e
