"""
In-memory implementation of BookService.
"""

import uuid
from typing import Dict, List, Optional
from uuid import UUID

from ..domain.ports import BookService
from ..domain.schema import Book, CreateBookCommand


class InMemoryBookService(BookService):
    """Keeps books in insertion order for the lifetime of the process."""

    def __init__(self):
        self._books: Dict[UUID, Book] = {}

    async def get_books(self) -> List[Book]:
        return list(self._books.values())

    async def find_by_id(self, book_id: UUID) -> Optional[Book]:
        return self._books.get(book_id)

    async def create(self, command: CreateBookCommand) -> Book:
        book = Book(id=uuid.uuid4(), **command.model_dump())
        self._books[book.id] = book
        return book

    async def check_health(self) -> bool:
        return True
