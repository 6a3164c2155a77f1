"""
Ports (interfaces) for the authors service.
Following Dependency Inversion Principle - high-level modules depend on abstractions.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from .schema import Author, CreateAuthorCommand


class AuthorService(ABC):
    """
    Interface to the service that owns author data.
    Can be implemented in memory or by calling a downstream service.
    """

    @abstractmethod
    async def get_authors(self) -> List[Author]:
        """
        Get every author.

        Returns:
            Authors in the order the owning service returns them
        """
        pass

    @abstractmethod
    async def find_by_id(self, author_id: UUID) -> Optional[Author]:
        """
        Look up an author.

        Args:
            author_id: Author identifier

        Returns:
            The author, or None if there is none with this identifier
        """
        pass

    @abstractmethod
    async def create(self, command: CreateAuthorCommand) -> Author:
        """
        Create an author with a newly assigned identifier.

        Args:
            command: Author fields

        Returns:
            The created author
        """
        pass

    @abstractmethod
    async def check_health(self) -> bool:
        """
        Check whether the owning service is reachable.

        Returns:
            True if healthy, False otherwise
        """
        pass
