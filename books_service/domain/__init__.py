"""
Domain layer for the books service.
"""

from .schema import Book, CreateBookCommand, BookResponse, to_book_response
from .ports import BookService

__all__ = [
    "Book",
    "CreateBookCommand",
    "BookResponse",
    "to_book_response",
    "BookService"
]
