"""
API layer for the books service.
"""

from .http_server import BooksAPI

__all__ = [
    "BooksAPI"
]
