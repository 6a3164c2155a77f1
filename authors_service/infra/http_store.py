"""
AuthorService implementation delegating to a downstream HTTP service.
"""

from typing import List, Optional
from uuid import UUID

from pydantic import ValidationError

from bff_core.errors import DownstreamError
from bff_core.infra.downstream import DownstreamClient

from ..domain.ports import AuthorService
from ..domain.schema import Author, CreateAuthorCommand


class HttpAuthorService(AuthorService):
    """
    Reads and creates authors through the downstream service's REST API.
    """

    def __init__(self, downstream: DownstreamClient, resource_path: str = "/authors"):
        """
        Args:
            downstream: Client bound to the resource service base URL
            resource_path: Collection path below the base URL
        """
        self.downstream = downstream
        self.resource_path = resource_path

    async def get_authors(self) -> List[Author]:
        data = await self.downstream.get_json(self.resource_path)
        if not isinstance(data, list):
            raise DownstreamError("Resource service returned a non-list author collection")
        return [self._parse(item) for item in data]

    async def find_by_id(self, author_id: UUID) -> Optional[Author]:
        data = await self.downstream.find_json(f"{self.resource_path}/{author_id}")
        if data is None:
            return None
        return self._parse(data)

    async def create(self, command: CreateAuthorCommand) -> Author:
        data = await self.downstream.post_json(
            self.resource_path,
            command.model_dump(mode="json", by_alias=True)
        )
        return self._parse(data)

    async def check_health(self) -> bool:
        return await self.downstream.check_health()

    @staticmethod
    def _parse(data) -> Author:
        try:
            return Author.model_validate(data)
        except ValidationError as e:
            raise DownstreamError(f"Resource service returned an invalid author: {e}") from e
