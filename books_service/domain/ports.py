"""
Ports (interfaces) for the books service.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from .schema import Book, CreateBookCommand


class BookService(ABC):
    """
    Interface to the service that owns book data.
    """

    @abstractmethod
    async def get_books(self) -> List[Book]:
        """Get every book, in the order the owning service returns them."""
        pass

    @abstractmethod
    async def find_by_id(self, book_id: UUID) -> Optional[Book]:
        """Look up a book; None if there is none with this identifier."""
        pass

    @abstractmethod
    async def create(self, command: CreateBookCommand) -> Book:
        """Create a book with a newly assigned identifier."""
        pass

    @abstractmethod
    async def check_health(self) -> bool:
        pass
