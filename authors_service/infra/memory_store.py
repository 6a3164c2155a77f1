"""
In-memory implementation of AuthorService.
Used when no downstream resource service is configured.
"""

import logging
import uuid
from typing import Dict, List, Optional
from uuid import UUID

from ..domain.ports import AuthorService
from ..domain.schema import Author, CreateAuthorCommand


logger = logging.getLogger(__name__)


class InMemoryAuthorService(AuthorService):
    """Keeps authors in insertion order for the lifetime of the process."""

    def __init__(self):
        self._authors: Dict[UUID, Author] = {}

    async def get_authors(self) -> List[Author]:
        return list(self._authors.values())

    async def find_by_id(self, author_id: UUID) -> Optional[Author]:
        return self._authors.get(author_id)

    async def create(self, command: CreateAuthorCommand) -> Author:
        author = Author(id=uuid.uuid4(), **command.model_dump())
        self._authors[author.id] = author

        logger.debug(
            f"Author stored: {author.id}",
            extra={"component": "memory_store", "author_id": str(author.id)}
        )
        return author

    async def check_health(self) -> bool:
        return True
